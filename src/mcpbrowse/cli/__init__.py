"""Command-line interface for mcpbrowse."""

from .main import app

__all__ = ["app"]
