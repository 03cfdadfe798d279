"""Flat-table XML reading keyed by slash-separated tag paths, with a small hash table and a command."""

__version__ = "0.1.0"
__all__ = ["cli", "parser", "table"]