"""Command-line interface for name-maker."""

from .app import app

__all__ = ["app"]
