# ==============================================
# Histogram
# ==============================================
#
# PURPOSE:
#   A multiset counter: how many times each key has been bumped,
#   plus a running total of all bumps.
#
# WHY THIS CLASS EXISTS:
#   The frequency store needs the same counting shape twice: once
#   for labels overall, and once per feature for the labels seen
#   alongside that feature. One small class serves both.
#
# CLASS: Histogram
# ----------------
#   Attributes:
#   -----------
#   - total: int                 → Sum of all counts
#
#   Methods:
#   --------
#   - bump(key) -> None          → count(key) += 1, total += 1
#   - count(key) -> int          → 0 for keys never bumped
#   - keys() -> list             → Keys in natural sort order
#   - items() -> list[tuple]     → (key, count) in natural sort order
#   - to_dict() -> dict          → Plain-dict snapshot
#
# INVARIANTS:
#   - sum(counts) == total
#   - counts never decrease
#
# ==============================================

from typing import Any, Dict, Hashable, Iterator, List, Tuple


class Histogram:
    """
    Counts occurrences of hashable keys.

    Iteration is always in the keys' natural order, so keys must be
    mutually comparable when more than one has been bumped.
    """

    def __init__(self):
        self._counts: Dict[Hashable, int] = {}
        self.total: int = 0

    def bump(self, key: Hashable) -> None:
        """Record one more occurrence of ``key``."""
        self._counts[key] = self._counts.get(key, 0) + 1
        self.total += 1

    def count(self, key: Hashable) -> int:
        """Return the number of occurrences of ``key`` (0 if never seen)."""
        return self._counts.get(key, 0)

    def keys(self) -> List[Hashable]:
        return sorted(self._counts)

    def items(self) -> List[Tuple[Hashable, int]]:
        return [(key, self._counts[key]) for key in self.keys()]

    def to_dict(self) -> Dict[Hashable, Any]:
        return dict(self.items())

    def __iter__(self) -> Iterator[Tuple[Hashable, int]]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._counts

    def __repr__(self) -> str:
        return f"Histogram(total={self.total}, counts={self._counts!r})"
