from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from smartjob import config
from smartjob.log import get_logger
from smartjob.models import JobPosting, as_job

from .ranking import sort_scored, top_n
from .scoring import candidate_keys, keyword_bonus_score, requirement_overlap_score
from .types import MatchBreakdown, ScoredJob

logger = get_logger(__name__)


def _required_skills(job: Any) -> List[str]:
    return list(getattr(job, "required_skills", None) or [])


def match_job(candidate_skills: Sequence[str], job: Union[JobPosting, Mapping[str, Any]]) -> ScoredJob:
    """
    Score one job for a candidate and explain it. A plain storage record
    (dict) is read through JobPosting.from_dict first.

    total = requirement overlap (1 per overlapping skill)
          + keyword bonus (0.5 per skill found in title/description)
    """
    job = as_job(job)
    job_title = getattr(job, "title", "") or ""
    job_desc = getattr(job, "description", "") or ""

    r_score, r_details = requirement_overlap_score(candidate_skills, _required_skills(job))
    k_score, k_details = keyword_bonus_score(candidate_skills, job_title, job_desc)

    total = r_score + k_score

    breakdown = MatchBreakdown(
        total_score=total,
        requirement_score=r_score,
        keyword_score=k_score,
        requirement_hits=r_details["hits"],
        keyword_hits=k_details["hits"],
    )
    return ScoredJob(item=job, score=total, breakdown=breakdown)


def score_job(candidate_skills: Sequence[str], job: Union[JobPosting, Mapping[str, Any]]) -> float:
    return match_job(candidate_skills, job).score


def approved_jobs(jobs: Iterable[JobPosting]) -> List[JobPosting]:
    """Students only ever see approved postings."""
    return [j for j in (as_job(r) for r in jobs) if getattr(j, "is_approved", False)]


def rank_jobs(
        candidate_skills: Sequence[str],
        jobs: Sequence[Any],
        top_n_jobs: Optional[int] = None,
) -> List[ScoredJob]:
    """
    Scored + explained recommendations, best first.
    Jobs scoring 0 are not recommendations and are dropped before ranking.
    """
    n = config.RECOMMEND_TOP_N if top_n_jobs is None else top_n_jobs
    if not candidate_keys(candidate_skills):
        return []

    scored = [match_job(candidate_skills, j) for j in jobs]
    positive = [s for s in scored if s.score > 0]
    logger.debug("scored %d jobs, %d with a positive score", len(scored), len(positive))
    return top_n(sort_scored(positive), n)


def recommend_jobs(
        candidate_skills: Sequence[str],
        jobs: Sequence[Any],
        n: Optional[int] = None,
) -> List[Any]:
    return [s.job for s in rank_jobs(candidate_skills, jobs, n)]
