import json
from pathlib import Path
from typing import Callable, List

import pytest

from smartjob.models import JobPosting
from smartjob.sample_data import sample_jobs as _sample_jobs


@pytest.fixture
def sample_jobs() -> List[JobPosting]:
    """
    The three seeded postings: Frontend Intern (React), Backend Developer
    (Node.js), ML Intern (Python), in storage order.
    """
    return _sample_jobs()


@pytest.fixture
def store_export() -> dict:
    """
    A localStorage export as the browser app writes it: every collection is
    a JSON-encoded string.
    """
    users = [
        {"id": "u_admin", "role": "admin", "name": "Administrator", "email": "admin@smartjob.local", "password": "admin123", "active": True},
        {"id": "u_ada", "role": "student", "name": "Ada Obi", "email": "ada@example.com", "skills": ["React", "CSS"],
         "resumeUrl": "https://cv.example.com/ada", "portfolioUrl": "https://ada.dev"},
        {"id": "u_ben", "role": "student", "name": "Ben Musa", "email": "ben@example.com", "skills": ["Python", "Pandas"]},
        {"id": "u_rec", "role": "recruiter", "name": "Rita Recruiter", "email": "rita@pixelworks.io"},
    ]
    jobs = [
        {"id": "j_fe", "ownerId": "u_rec", "title": "Frontend Intern", "company": "PixelWorks", "type": "Internship",
         "location": "Remote", "requiredSkills": ["JavaScript", "HTML", "CSS", "React"],
         "description": "Work with the UI team to build components.", "status": "approved"},
        {"id": "j_be", "ownerId": "u_rec", "title": "Backend Developer", "company": "DataForge", "type": "Full-time",
         "location": "Hybrid - Lagos", "requiredSkills": ["Node.js", "Express"],
         "description": "Build APIs and services at scale.", "status": "pending"},
        {"id": "j_ml", "title": "ML Intern", "company": "InsightAI", "requiredSkills": ["Python"],
         "description": "Model training.", "status": "rejected"},
    ]
    applications = [
        {"id": "a1", "userId": "u_ada", "jobId": "j_fe", "appliedAt": "2025-01-02T10:00:00Z", "shortlisted": True},
        {"id": "a2", "userId": "u_ben", "jobId": "j_fe", "appliedAt": "2025-01-03T10:00:00Z", "shortlisted": False},
        {"id": "a3", "userId": "u_rec", "jobId": "j_fe", "shortlisted": False},
        {"id": "a4", "userId": "u_ben", "jobId": "j_ml", "shortlisted": False},
    ]
    return {
        "sj_users": json.dumps(users),
        "sj_jobs": json.dumps(jobs),
        "sj_applications": json.dumps(applications),
    }


@pytest.fixture
def write_store(tmp_path: Path) -> Callable[[object], Path]:
    """Fixture that returns a function: write_store(data) -> path of a JSON file."""
    def _write(data: object) -> Path:
        p = tmp_path / "store.json"
        p.write_text(json.dumps(data), encoding="utf-8")
        return p
    return _write
