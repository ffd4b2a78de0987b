"""HTTP gateway resolving YouTube channel identifiers into channel records."""

__version__ = "0.1.0"
