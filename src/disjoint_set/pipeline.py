"""Batch pipeline folding a table of element pairs into disjoint groups."""

from __future__ import annotations

import time
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import numpy as np
import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .errors import InvalidArgumentError
from .structures import DisjointSet


@dataclass
class GroupingStats:
    """Summary metrics for a grouping run."""

    total_elements: int
    pair_count: int
    merges_by_outcome: Dict[str, int]
    group_count: int
    largest_group: int
    runtime_seconds: float


@dataclass
class GroupingResult:
    """Result bundle returned by :class:PairGrouper."""

    dataframe: pd.DataFrame
    group_map: Dict[int, List[int]]
    stats: GroupingStats


@dataclass
class GroupingConfig:
    """Configuration parameters for :class:PairGrouper."""

    left_column: str = "left"
    right_column: str = "right"
    size: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True
    sample_groups: int = 10


class PairGrouper:
    """Merge element pairs and report the resulting partition."""

    def __init__(self, config: GroupingConfig | None = None) -> None:
        self.config = config or GroupingConfig()

    def group(
        self,
        dataframe: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> GroupingResult:
        """Merge every pair of `dataframe`, optionally save the assignments, and return them."""

        columns = (self.config.left_column, self.config.right_column)
        for column in columns:
            if column not in dataframe.columns:
                raise KeyError(f"Column '{column}' not found in dataframe")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Pair Grouping Started ---")
            print("\n1. Loading and validating pairs...")

        t0 = time.time()
        for column in columns:
            if not pd.api.types.is_integer_dtype(dataframe[column]):
                raise InvalidArgumentError(
                    f"Column '{column}' must hold integer element ids, got dtype {dataframe[column].dtype}"
                )
            if dataframe[column].isna().any():
                raise InvalidArgumentError(f"Column '{column}' has missing element ids")
        pairs = list(zip(dataframe[columns[0]].tolist(), dataframe[columns[1]].tolist()))
        size = self._universe_size(pairs)
        if verbose:
            print(f"   Loaded {len(pairs)} pairs over {size} elements. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Merging pairs...")
        dsu = DisjointSet(size)
        stats_counter: defaultdict[str, int] = defaultdict(int)

        iterator: Iterable[Tuple[int, int]] = pairs
        if pairs and self._use_tqdm:
            iterator = tqdm(pairs, desc="   Merging Pairs", unit="pair")

        for left, right in iterator:
            before = dsu.group_count
            dsu.merge(left, right)
            if dsu.group_count == before:
                stats_counter["skipped_same_set"] += 1
            else:
                stats_counter["merged"] += 1

        if verbose:
            print(f"   Merge Stats: {dict(stats_counter)}")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Building groups...")
        group_map = dsu.groups()
        df = self._build_assignments(dsu)
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        largest_group = max(len(members) for members in group_map.values())
        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Total elements: {size}")
            print(f"   - Disjoint groups found: {len(group_map)}")
            groups_by_size = sorted(group_map.items(), key=lambda item: len(item[1]), reverse=True)
            print("\n   --- Sample of Largest Groups Found ---")
            for idx, (root, members) in enumerate(groups_by_size[: self.config.sample_groups]):
                if len(members) <= 1:
                    break
                print(f"   Group {idx + 1} (Size: {len(members)}): leader {root}")
                preview = ", ".join(str(member) for member in members[:5])
                if len(members) > 5:
                    preview += ", ..."
                print(f"     - {preview}")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        summary = GroupingStats(
            total_elements=size,
            pair_count=len(pairs),
            merges_by_outcome=dict(stats_counter),
            group_count=dsu.group_count,
            largest_group=largest_group,
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- Pair Grouping Finished in {elapsed:.2f} seconds ---")

        return GroupingResult(dataframe=df, group_map=group_map, stats=summary)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _universe_size(self, pairs: List[Tuple[int, int]]) -> int:
        if self.config.size is not None:
            return self.config.size
        if not pairs:
            raise InvalidArgumentError("Cannot infer the number of elements from an empty pair list")
        return max(max(left, right) for left, right in pairs)

    @staticmethod
    def _build_assignments(dsu: DisjointSet) -> pd.DataFrame:
        df = pd.DataFrame(
            {
                "element": np.arange(1, len(dsu) + 1, dtype=np.int64),
                "leader": dsu.labels(),
            }
        )
        df["group_size"] = df.groupby("leader")["element"].transform("size")
        return df

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix in {".xls", ".xlsx"}:
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "GroupingConfig",
    "GroupingResult",
    "GroupingStats",
    "PairGrouper",
]
