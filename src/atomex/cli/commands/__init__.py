"""Command implementations for atomex CLI."""

from .export import handle_export

__all__ = ["handle_export"]
