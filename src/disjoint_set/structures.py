"""Basic data structures."""

from __future__ import annotations

import numbers
from collections import defaultdict
from typing import Dict, List

import numpy as np

from .errors import InvalidArgumentError, OutOfRangeError


def _as_int(value: object, name: str, caller: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{caller}: {name} must be an integer, got {type(value).__name__}")
    return int(value)


class DisjointSet:
    """Union-find over elements ``1..n`` with path compression and union by size."""

    def __init__(self, n: int) -> None:
        self._n = _as_int(n, "n", "DisjointSet")
        if self._n <= 0:
            raise InvalidArgumentError(f"DisjointSet: n must be greater than 0, got {self._n}")
        # A leader stores -size, any other element stores its parent; slot 0 is unused.
        self._parent_or_size = [-1] * (self._n + 1)
        self._group_count = self._n

    def __repr__(self) -> str:
        return f"DisjointSet(n={self._n})"

    def __len__(self) -> int:
        return self._n

    @property
    def n(self) -> int:
        return self._n

    @property
    def group_count(self) -> int:
        return self._group_count

    @property
    def parent_or_size(self) -> List[int]:
        """Stored values for elements ``1..n``: ``-size`` for leaders, the parent id otherwise."""

        return self._parent_or_size[1:]

    def leader(self, a: int) -> int:
        """Return the representative of the set containing `a`."""

        a = self._check(a, "a", "leader")
        return self._find(a)

    def merge(self, a: int, b: int) -> int:
        """Unite the sets of `a` and `b` and return the leader of the union."""

        a = self._check(a, "a", "merge")
        b = self._check(b, "b", "merge")
        leader_a = self._find(a)
        leader_b = self._find(b)
        if leader_a == leader_b:
            return leader_a

        size_a = -self._parent_or_size[leader_a]
        size_b = -self._parent_or_size[leader_b]
        if size_a < size_b:
            leader_a, leader_b = leader_b, leader_a
        self._parent_or_size[leader_a] = -(size_a + size_b)
        self._parent_or_size[leader_b] = leader_a
        self._group_count -= 1
        return leader_a

    def same(self, a: int, b: int) -> bool:
        a = self._check(a, "a", "same")
        b = self._check(b, "b", "same")
        return self._find(a) == self._find(b)

    def size(self, a: int) -> int:
        a = self._check(a, "a", "size")
        return -self._parent_or_size[self._find(a)]

    def groups(self) -> Dict[int, List[int]]:
        """Map every leader to its members, both in order of first appearance."""

        groups: Dict[int, List[int]] = defaultdict(list)
        for index in range(1, self.n + 1):
            groups[self._find(index)].append(index)
        return dict(groups)

    def labels(self) -> np.ndarray:
        """Return the leader of each element; position ``i - 1`` holds ``leader(i)``."""

        return np.fromiter((self._find(index) for index in range(1, self.n + 1)), dtype=np.int64, count=self.n)

    def _check(self, value: object, name: str, caller: str) -> int:
        index = _as_int(value, name, caller)
        if not 1 <= index <= self.n:
            raise OutOfRangeError(f"{caller}: {name} must be in range [1, {self.n}], got {index}")
        return index

    def _find(self, index: int) -> int:
        root = index
        while self._parent_or_size[root] > 0:
            root = self._parent_or_size[root]
        while index != root:
            parent = self._parent_or_size[index]
            self._parent_or_size[index] = root
            index = parent
        return root
