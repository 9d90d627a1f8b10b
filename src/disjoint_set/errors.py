"""Exceptions raised by the disjoint-set structures."""

from __future__ import annotations


class DisjointSetError(Exception):
    """Base class for contract violations on a :class:DisjointSet."""


class InvalidArgumentError(DisjointSetError, ValueError):
    """Raised for non-integer arguments or a non-positive universe size."""


class OutOfRangeError(DisjointSetError, IndexError):
    """Raised when an element id falls outside ``[1, n]``."""
