from __future__ import annotations

from typing import List

from smartjob.models import JobPosting, JobStatus


def sample_jobs() -> List[JobPosting]:
    """The three postings a fresh board is seeded with (ids derived from title + company)."""
    return [
        JobPosting(
            title="Frontend Intern",
            company="PixelWorks",
            job_type="Internship",
            location="Remote",
            required_skills=["JavaScript", "HTML", "CSS", "React"],
            description="Work with the UI team to build components.",
            status=JobStatus.APPROVED,
        ),
        JobPosting(
            title="Backend Developer",
            company="DataForge",
            job_type="Full-time",
            location="Hybrid - Lagos",
            required_skills=["Node.js", "Express", "MongoDB", "REST"],
            description="Build APIs and services at scale.",
            status=JobStatus.APPROVED,
        ),
        JobPosting(
            title="ML Intern",
            company="InsightAI",
            job_type="Internship",
            location="Remote",
            required_skills=["Python", "Pandas", "Machine Learning"],
            description="Assist with data pipelines and model training.",
            status=JobStatus.APPROVED,
        ),
    ]
