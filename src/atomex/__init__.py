"""atomex - export Atomic Data ontologies to portable JSON."""

__version__ = "0.1.0"
