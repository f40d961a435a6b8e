"""Command line interface for layersmith."""

from .app import app

__all__ = ["app"]
