"""Disjoint-set library initialization."""

from .errors import DisjointSetError, InvalidArgumentError, OutOfRangeError
from .pipeline import GroupingConfig, GroupingResult, GroupingStats, PairGrouper
from .runner import group_file
from .structures import DisjointSet

__all__ = [
    "DisjointSet",
    "DisjointSetError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "GroupingConfig",
    "GroupingResult",
    "GroupingStats",
    "PairGrouper",
    "group_file",
]
