from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

from .types import ScoredItem

T = TypeVar("T")
S = TypeVar("S", bound=ScoredItem)


def sort_scored(scored: Iterable[S]) -> List[S]:
    """
    Descending by score. Python's sort is stable (also with reverse=True),
    so equal scores keep their input order, i.e. storage/recency order.
    """
    return sorted(scored, key=lambda x: x.score, reverse=True)


def rank(scored: Iterable[ScoredItem[T]]) -> List[T]:
    return [s.item for s in sort_scored(scored)]


def top_n(ranked: Sequence[T], n: int) -> List[T]:
    """Prefix of length min(n, len). Negative n is treated as 0."""
    return list(ranked[: max(int(n), 0)])
