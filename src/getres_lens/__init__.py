"""Resolve ``getRes(<id>)`` references in source text to resource paths."""

__version__ = "0.1.0"
