"""Web interface for fitness-coach."""

from .app import create_app

__all__ = ["create_app"]
