from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ScoredItem(Generic[T]):
    item: T
    score: float


@dataclass(frozen=True)
class MatchBreakdown:
    total_score: float
    requirement_score: float
    keyword_score: float
    # Which candidate skills earned points (stable, input order)
    requirement_hits: List[str]
    keyword_hits: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_score": self.total_score,
            "requirement_score": self.requirement_score,
            "keyword_score": self.keyword_score,
            "requirement_hits": list(self.requirement_hits),
            "keyword_hits": list(self.keyword_hits),
        }


@dataclass(frozen=True)
class ScoredJob(ScoredItem[Any]):
    breakdown: MatchBreakdown

    @property
    def job(self) -> Any:  # JobPosting in practice
        return self.item
