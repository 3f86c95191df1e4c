"""Sigil — turns a typed name into a deterministic, animated constellation."""

__version__ = "0.1.0"
