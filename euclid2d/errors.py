"""Exceptions raised by euclid2d."""

from __future__ import annotations


class DegenerateVectorError(ValueError):
    """Raised when an operation needs a non-zero vector but got a zero-length one."""
