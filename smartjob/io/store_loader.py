from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, TypeVar, Union

from smartjob.log import get_logger
from smartjob.models import Application, JobPosting, User

logger = get_logger(__name__)

T = TypeVar("T")

# Keys the browser app writes to localStorage.
USERS_KEY = "sj_users"
JOBS_KEY = "sj_jobs"
APPLICATIONS_KEY = "sj_applications"


class SnapshotError(ValueError):
    """Raised when a storage export does not have the expected shape."""


@dataclass(frozen=True)
class StoreSnapshot:
    """Read-only copy of the board's collections, handed fresh to each call."""
    users: List[User] = field(default_factory=list)
    jobs: List[JobPosting] = field(default_factory=list)
    applications: List[Application] = field(default_factory=list)
    source: str = "none"  # "file" | "sample" | "none"
    path: Optional[str] = None


def _collection(data: Mapping[str, Any], key: str) -> List[Any]:
    """
    localStorage only holds strings, so an export may carry each collection
    JSON-encoded. Accept both that and an already-decoded list.
    """
    raw = data.get(key)
    if raw is None:
        return []
    if isinstance(raw, str):
        if not raw.strip():
            return []
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"{key}: not valid JSON ({e.msg})") from e
    if not isinstance(raw, list):
        raise SnapshotError(f"{key}: expected a list, got {type(raw).__name__}")
    return raw


def _parse_records(key: str, records: List[Any], parse: Callable[[Mapping[str, Any]], T]) -> List[T]:
    out: List[T] = []
    for idx, rec in enumerate(records):
        if not isinstance(rec, Mapping):
            logger.warning("%s[%d]: skipped non-object record", key, idx)
            continue
        try:
            out.append(parse(rec))
        except (TypeError, ValueError) as e:
            logger.warning("%s[%d]: skipped malformed record: %s", key, idx, e)
    return out


def parse_snapshot(data: Any) -> StoreSnapshot:
    if not isinstance(data, Mapping):
        raise SnapshotError("storage export must be a JSON object")
    return StoreSnapshot(
        users=_parse_records(USERS_KEY, _collection(data, USERS_KEY), User.from_dict),
        jobs=_parse_records(JOBS_KEY, _collection(data, JOBS_KEY), JobPosting.from_dict),
        applications=_parse_records(APPLICATIONS_KEY, _collection(data, APPLICATIONS_KEY), Application.from_dict),
        source="file",
    )


def load_snapshot(path: Union[str, Path]) -> StoreSnapshot:
    """
    Load a localStorage export ({"sj_users": ..., "sj_jobs": ..., "sj_applications": ...}).
    FileNotFoundError propagates; bad JSON or shape raises SnapshotError.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if text.strip() else {}
    except json.JSONDecodeError as e:
        raise SnapshotError(f"{p}: not valid JSON ({e.msg})") from e

    snap = parse_snapshot(data)
    logger.debug(
        "loaded %s: %d users, %d jobs, %d applications",
        p, len(snap.users), len(snap.jobs), len(snap.applications),
    )
    return replace(snap, path=str(p))
