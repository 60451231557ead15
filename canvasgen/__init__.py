"""Promote canvas elements into standalone, reusable component definitions."""

__version__ = "0.1.0"
