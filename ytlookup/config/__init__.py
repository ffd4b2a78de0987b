"""Typed configuration models."""

from ytlookup.config.youtube import InnertubeClientConfig, YouTubeAPIConfig

__all__ = ["InnertubeClientConfig", "YouTubeAPIConfig"]
