from .engine import approved_jobs, match_job, rank_jobs, recommend_jobs, score_job
from .ranking import rank, sort_scored, top_n
from .types import MatchBreakdown, ScoredItem, ScoredJob

__all__ = [
    "approved_jobs",
    "match_job",
    "rank_jobs",
    "recommend_jobs",
    "score_job",
    "rank",
    "sort_scored",
    "top_n",
    "MatchBreakdown",
    "ScoredItem",
    "ScoredJob",
]
