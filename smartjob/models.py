from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional
import hashlib

from smartjob.core.text_processing import coerce_skills, normalize_whitespace


class JobStatus(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"
    PENDING = "pending"

    @classmethod
    def coerce(cls, value: Any) -> "JobStatus":
        """Unknown or missing status reads as pending (admin table default)."""
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.PENDING


class UserRole(str, Enum):
    STUDENT = "student"
    RECRUITER = "recruiter"
    ADMIN = "admin"


def _text(record: Mapping[str, Any], key: str) -> str:
    """Field as typed. Search and scoring look at the raw text, so no collapsing here."""
    value = record.get(key)
    if value is None:
        return ""
    return str(value)


def _ident(record: Mapping[str, Any], key: str) -> str:
    return _text(record, key).strip()


def _optional_text(record: Mapping[str, Any], key: str) -> Optional[str]:
    return _text(record, key) or None


def stable_job_id(title: str, company: str) -> str:
    """
    Deterministic id for records that arrive without one (e.g. sample data).
    Based on title + company, case-insensitive.
    """
    base = "|".join([normalize_whitespace(title).lower(), normalize_whitespace(company).lower()])
    return "job_" + hashlib.sha256(base.encode("utf-8")).hexdigest()[:10]


@dataclass(frozen=True)
class JobPosting:
    """
    A job record as the storage layer hands it to matching/filtering.
    Never mutated during a scoring or filtering pass.
    """
    title: str
    company: str
    description: str
    required_skills: List[str] = field(default_factory=list)
    status: JobStatus = JobStatus.PENDING

    # Optional fields (recruiter form extras)
    job_type: Optional[str] = None
    location: Optional[str] = None
    owner_id: Optional[str] = None

    job_id: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", self.title or "")
        object.__setattr__(self, "company", self.company or "")
        object.__setattr__(self, "description", self.description or "")
        object.__setattr__(self, "required_skills", coerce_skills(self.required_skills))
        object.__setattr__(self, "status", JobStatus.coerce(self.status))
        object.__setattr__(self, "job_type", self.job_type or None)
        object.__setattr__(self, "location", self.location or None)
        if not self.job_id:
            object.__setattr__(self, "job_id", stable_job_id(self.title, self.company))

    @property
    def is_approved(self) -> bool:
        return self.status is JobStatus.APPROVED

    @property
    def skills(self) -> List[str]:
        return self.required_skills

    def searchable_fields(self) -> List[str]:
        return [self.title, self.company, self.job_type or "", self.location or "", self.description]

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "JobPosting":
        return cls(
            job_id=_ident(record, "id"),
            title=_text(record, "title"),
            company=_text(record, "company"),
            description=_text(record, "description"),
            required_skills=record.get("requiredSkills") or [],
            status=record.get("status"),
            job_type=_optional_text(record, "type"),
            location=_optional_text(record, "location"),
            owner_id=_ident(record, "ownerId") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["status"] = self.status.value
        return d


@dataclass(frozen=True)
class CandidateProfile:
    """Skills a student is matched on. Supplied per call, never retained."""
    skills: List[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "skills", coerce_skills(self.skills))


@dataclass(frozen=True)
class User:
    user_id: str
    role: UserRole
    name: str
    email: str
    skills: List[str] = field(default_factory=list)
    resume_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    active: bool = True

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "User":
        # Raises ValueError for an unknown role; the loader skips such records.
        return cls(
            user_id=_ident(record, "id"),
            role=UserRole(_ident(record, "role").lower()),
            name=_text(record, "name"),
            email=_text(record, "email"),
            skills=coerce_skills(record.get("skills")),
            resume_url=_optional_text(record, "resumeUrl"),
            portfolio_url=_optional_text(record, "portfolioUrl"),
            active=record.get("active", True) is not False,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["role"] = self.role.value
        return d


@dataclass(frozen=True)
class Application:
    application_id: str
    user_id: str
    job_id: str
    applied_at: Optional[str] = None
    shortlisted: bool = False

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Application":
        return cls(
            application_id=_ident(record, "id"),
            user_id=_ident(record, "userId"),
            job_id=_ident(record, "jobId"),
            applied_at=_optional_text(record, "appliedAt"),
            shortlisted=bool(record.get("shortlisted")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Applicant:
    """An application joined with the student who made it."""
    application: Application
    user: User

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def skills(self) -> List[str]:
        return self.user.skills

    def searchable_fields(self) -> List[str]:
        return [self.user.name, self.user.email, self.user.resume_url or "", self.user.portfolio_url or ""]

    def to_dict(self) -> Dict[str, Any]:
        return {"application": self.application.to_dict(), "student": self.user.to_dict()}


def as_job(record: Any) -> Any:
    """Storage records arrive as plain dicts; read those as JobPosting. Anything else passes through."""
    if isinstance(record, Mapping):
        return JobPosting.from_dict(record)
    return record
