from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional

from smartjob import config
from smartjob.models import Application, JobPosting, User, UserRole


@dataclass(frozen=True)
class AnalyticsSummary:
    """Admin dashboard counters."""
    students: int
    recruiters: int
    jobs_approved: int
    jobs_pending: int  # everything not approved, rejected included
    applications: int
    shortlisted: int

    @property
    def total_users(self) -> int:
        return self.students + self.recruiters

    @property
    def total_jobs(self) -> int:
        return self.jobs_approved + self.jobs_pending

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["total_users"] = self.total_users
        d["total_jobs"] = self.total_jobs
        return d


@dataclass(frozen=True)
class JobApplicationCount:
    job_id: str
    label: str
    count: int


def summarize(
        users: Iterable[User],
        jobs: Iterable[JobPosting],
        applications: Iterable[Application],
) -> AnalyticsSummary:
    users = list(users)
    jobs = list(jobs)
    applications = list(applications)
    approved = sum(1 for j in jobs if j.is_approved)
    return AnalyticsSummary(
        students=sum(1 for u in users if u.role is UserRole.STUDENT),
        recruiters=sum(1 for u in users if u.role is UserRole.RECRUITER),
        jobs_approved=approved,
        jobs_pending=len(jobs) - approved,
        applications=len(applications),
        shortlisted=sum(1 for a in applications if a.shortlisted),
    )


def applications_per_job(
        applications: Iterable[Application],
        jobs: Iterable[JobPosting],
        limit: Optional[int] = None,
) -> List[JobApplicationCount]:
    """
    Busiest jobs first. Ties keep first-application order. Jobs that no
    longer exist are still counted and labelled "Job".
    """
    limit = config.ANALYTICS_TOP_JOBS if limit is None else limit

    counts: Dict[str, int] = {}
    for a in applications:
        counts[a.job_id] = counts.get(a.job_id, 0) + 1

    titles: Dict[str, str] = {}
    for j in jobs:
        titles[j.job_id] = j.title

    rows = [
        JobApplicationCount(job_id=job_id, label=titles.get(job_id) or "Job", count=count)
        for job_id, count in counts.items()
    ]
    rows.sort(key=lambda r: r.count, reverse=True)
    return rows[: max(int(limit), 0)]
