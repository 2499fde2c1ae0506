# smartjob/config.py
from __future__ import annotations

import os

# --- Tokenizer (fixed) ---

# Hard cap on tokens produced from a single skill input.
MAX_SKILL_TOKENS = 30

# --- Recommendation scoring (fixed) ---

# Points for a candidate skill that overlaps a required skill (substring either way).
REQUIREMENT_MATCH_POINTS = 1.0
# Points for a candidate skill found in the job title/description.
KEYWORD_BONUS_POINTS = 0.5
# Shorter skills never earn the keyword bonus (too noisy inside other words).
KEYWORD_BONUS_MIN_LENGTH = 3


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Result sizes ---

# Student dashboard "Recommended for You" shows six cards.
RECOMMEND_TOP_N = _env_int("SMARTJOB_RECOMMEND_TOP_N", 6)

# Admin "Applications per Job" chart shows the six busiest jobs.
ANALYTICS_TOP_JOBS = _env_int("SMARTJOB_ANALYTICS_TOP_JOBS", 6)

# --- Storage snapshot ---

# Default browser-storage export used by the CLI when --store is not given.
SMARTJOB_STORE_PATH: str | None = os.environ.get("SMARTJOB_STORE_PATH") or None

# --- Logging ---

SMARTJOB_LOG_LEVEL: str = (os.environ.get("SMARTJOB_LOG_LEVEL", "WARNING").strip().upper() or "WARNING")
