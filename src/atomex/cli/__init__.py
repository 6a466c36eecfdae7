"""Command line interface for atomex."""

from .main import create_parser, main

__all__ = ["create_parser", "main"]
