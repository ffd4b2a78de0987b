"""HTTP API layer."""

from ytlookup.api.errors import register_error_handlers
from ytlookup.api.routes import router

__all__ = ["register_error_handlers", "router"]
