"""Miscellaneous types."""

from pathlib import Path


class InvariantError(RuntimeError):
    """An internal invariant was violated. This is a defect, not bad input."""
