from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from smartjob.core.text_processing import coerce_skills, matches_keyword, parse_skills, skill_key
from smartjob.log import get_logger
from smartjob.models import Applicant, Application, JobPosting, User, UserRole, as_job

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FilterCriteria:
    """
    Keyword + skill list used to narrow a job or applicant list.
    Skill matching here is exact (case-insensitive), unlike the recommender's
    substring tolerance.
    """
    keyword: Optional[str] = None
    skills: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        object.__setattr__(self, "skills", coerce_skills(self.skills))

    @classmethod
    def from_input(cls, keyword: Optional[str], skills_text: Optional[str]) -> "FilterCriteria":
        """Build criteria straight from the two search boxes."""
        return cls(keyword=keyword, skills=parse_skills(skills_text))

    @property
    def is_empty(self) -> bool:
        return not (self.keyword or "").strip() and not self.skills


def _skills_ok(item_skills: Iterable[Any], wanted: set) -> bool:
    if not wanted:
        return True
    return any(skill_key(str(s)) in wanted for s in (item_skills or []))


def filter_items(
        items: Iterable[T],
        criteria: FilterCriteria,
        *,
        fields: Callable[[T], Sequence[Optional[str]]],
        skills: Callable[[T], Iterable[Any]],
) -> List[T]:
    """
    Keep items whose fields contain the keyword AND (no skill filter OR any
    item skill is one of the wanted skills). Input order is preserved.
    """
    wanted = {skill_key(s) for s in criteria.skills}
    out: List[T] = []
    for it in items:
        if matches_keyword(fields(it), criteria.keyword) and _skills_ok(skills(it), wanted):
            out.append(it)
    return out


def filter_jobs(jobs: Sequence[JobPosting], criteria: FilterCriteria) -> List[JobPosting]:
    """Plain storage records (dicts) are read through JobPosting.from_dict first."""
    out = filter_items(
        [as_job(j) for j in jobs],
        criteria,
        fields=lambda j: j.searchable_fields(),
        skills=lambda j: j.required_skills,
    )
    logger.debug("job filter kept %d of %d", len(out), len(jobs))
    return out


def filter_applicants(applicants: Sequence[Applicant], criteria: FilterCriteria) -> List[Applicant]:
    out = filter_items(
        applicants,
        criteria,
        fields=lambda a: a.searchable_fields(),
        skills=lambda a: a.skills,
    )
    logger.debug("applicant filter kept %d of %d", len(out), len(applicants))
    return out


def build_applicants(
        job_id: str,
        applications: Iterable[Application],
        users: Iterable[User],
) -> List[Applicant]:
    """
    Applications for one job joined with their student. Applications whose
    user is gone, or is not a student, are left out.
    """
    by_id: dict = {}
    for u in users:
        by_id.setdefault(u.user_id, u)
    out: List[Applicant] = []
    for app in applications:
        if app.job_id != job_id:
            continue
        user = by_id.get(app.user_id)
        if user is None or user.role is not UserRole.STUDENT:
            continue
        out.append(Applicant(application=app, user=user))
    return out
