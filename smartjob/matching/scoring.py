from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from smartjob import config
from smartjob.core.text_processing import skill_key


def candidate_keys(skills: Sequence[str]) -> List[str]:
    """Lower-cased candidate skills, empties dropped. Duplicates are kept on purpose: each one scores."""
    return [k for k in (skill_key(str(s)) for s in (skills or [])) if k]


def skill_overlaps(candidate: str, required: str) -> bool:
    """
    Bidirectional substring containment, both sides already lower-cased.
    "react" ~ "react native", "node.js" ~ "node". Short tokens over-match
    ("c" ~ "c++"); that is the established behavior.
    """
    return candidate in required or required in candidate


def requirement_overlap_score(
        candidate_skills: Sequence[str],
        required_skills: Sequence[str],
) -> Tuple[float, Dict[str, Any]]:
    """
    +REQUIREMENT_MATCH_POINTS per candidate skill that overlaps any required skill.
    Returns (score, details).
    """
    required = [skill_key(str(s)) for s in (required_skills or []) if skill_key(str(s))]
    hits: List[str] = []
    for cand in candidate_keys(candidate_skills):
        if any(skill_overlaps(cand, req) for req in required):
            hits.append(cand)
    score = config.REQUIREMENT_MATCH_POINTS * len(hits)
    return score, {"hits": hits, "required": required}


def keyword_bonus_score(
        candidate_skills: Sequence[str],
        job_title: str,
        job_description: str,
) -> Tuple[float, Dict[str, Any]]:
    """
    +KEYWORD_BONUS_POINTS per candidate skill (len >= KEYWORD_BONUS_MIN_LENGTH)
    appearing as a substring of "title description".
    """
    text = f"{job_title or ''} {job_description or ''}".lower()
    hits = [
        cand
        for cand in candidate_keys(candidate_skills)
        if len(cand) >= config.KEYWORD_BONUS_MIN_LENGTH and cand in text
    ]
    score = config.KEYWORD_BONUS_POINTS * len(hits)
    return score, {"hits": hits}
