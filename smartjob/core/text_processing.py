from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional

from smartjob import config

# NOTE: This module is the one place skill/keyword strings are normalized.
# Matching, filtering and the storage loader all depend on it rather than
# re-implementing splitting or case folding.

# Explicit list delimiters. When any of these appear, whitespace inside a
# piece is kept so multi-word skills ("Machine Learning") survive.
_DELIMITER_RE = re.compile(r"[,;\n]")
_DELIMITER_RUN_RE = re.compile(r"[,;\n]+")
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def normalize_whitespace(text: Optional[str]) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    return " ".join((text or "").split()).strip()


def skill_key(skill: Optional[str]) -> str:
    """Comparison key for a skill token (case-insensitive)."""
    return (skill or "").lower()


def parse_skills(text: Optional[str]) -> List[str]:
    """
    Free-form skill input -> ordered, distinct skill tokens.

    - comma / semicolon / newline separated when any of those are present,
      otherwise whitespace separated
    - pieces trimmed, internal whitespace collapsed, empties dropped
    - case-insensitive de-dupe, first-seen casing and order win
    - capped at config.MAX_SKILL_TOKENS
    """
    raw = str(text or "")
    if _DELIMITER_RE.search(raw):
        pieces = _DELIMITER_RUN_RE.split(raw)
    else:
        pieces = _WHITESPACE_RUN_RE.split(raw)

    # key -> first-seen spelling; dicts keep insertion order
    seen: Dict[str, str] = {}
    for piece in pieces:
        token = _WHITESPACE_RUN_RE.sub(" ", piece.strip())
        if not token:
            continue
        key = skill_key(token)
        if key in seen:
            continue
        seen[key] = token
        if len(seen) >= config.MAX_SKILL_TOKENS:
            break
    return list(seen.values())


def clean_skill_list(items: Iterable[Optional[str]]) -> List[str]:
    """
    Normalize an already-split skill list (e.g. a stored record).
    Same rules as parse_skills, minus the splitting step.
    """
    seen: Dict[str, str] = {}
    for it in items or []:
        token = normalize_whitespace(str(it) if it is not None else "")
        if not token:
            continue
        key = skill_key(token)
        if key not in seen:
            seen[key] = token
        if len(seen) >= config.MAX_SKILL_TOKENS:
            break
    return list(seen.values())


def coerce_skills(value: Any) -> List[str]:
    """
    Skills as either typed text ("React, CSS") or an already-split collection.
    A string is tokenized, never iterated character by character.
    """
    if isinstance(value, str):
        return parse_skills(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return clean_skill_list(value)
    return []


def join_fields(fields: Iterable[Optional[str]]) -> str:
    """Lower-cased haystack from the non-empty fields, single-space joined."""
    return " ".join(str(f) for f in fields if f).lower()


def matches_keyword(fields: Iterable[Optional[str]], keyword: Optional[str]) -> bool:
    """
    Raw, case-insensitive substring search over the joined fields.
    An empty or absent keyword matches everything.
    """
    kw = (keyword or "").strip().lower()
    if not kw:
        return True
    return kw in join_fields(fields)
