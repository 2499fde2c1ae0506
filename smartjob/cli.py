from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from smartjob import config
from smartjob.analytics import applications_per_job, summarize
from smartjob.core.text_processing import parse_skills
from smartjob.filtering import FilterCriteria, build_applicants, filter_applicants, filter_jobs
from smartjob.io.store_loader import SnapshotError, StoreSnapshot, load_snapshot
from smartjob.log import get_logger, set_level
from smartjob.matching.engine import approved_jobs, rank_jobs
from smartjob.models import JobPosting
from smartjob.sample_data import sample_jobs

logger = get_logger(__name__)


def _load_store(raw_path: Optional[str]) -> StoreSnapshot:
    path = raw_path or config.SMARTJOB_STORE_PATH
    if not path:
        return StoreSnapshot(jobs=sample_jobs(), source="sample")
    try:
        return load_snapshot(Path(path))
    except FileNotFoundError:
        print(f"\n[SmartJob] Store file not found: {path}", file=sys.stderr)
        print("Tip: export localStorage (sj_users, sj_jobs, sj_applications) to a JSON file.\n", file=sys.stderr)
        raise SystemExit(2)
    except SnapshotError as e:
        print(f"\n[SmartJob] Could not read store file: {e}\n", file=sys.stderr)
        raise SystemExit(2)


def _job_line(job: JobPosting) -> str:
    where = " | ".join(p for p in (job.job_type, job.location) if p)
    where = f" ({where})" if where else ""
    return f"{job.title} @ {job.company}{where}"


def cmd_recommend(args: argparse.Namespace, store: StoreSnapshot) -> Dict[str, Any]:
    skills = parse_skills(args.skills)
    jobs = approved_jobs(store.jobs)
    ranked = rank_jobs(skills, jobs, args.top_k)

    if not args.json:
        print("\n=== Recommended for You ===")
        print(f"Skills: {', '.join(skills) if skills else '-'}")
        if not ranked:
            print("Add skills to get recommendations." if not skills else "No matching jobs.")
        for idx, m in enumerate(ranked, start=1):
            print(f"\n{idx}) {_job_line(m.job)}")
            print(f"   score: {m.score}")
            if m.breakdown.requirement_hits:
                print(f"   matches: {', '.join(m.breakdown.requirement_hits)}")

    return {
        "skills": skills,
        "recommendations": [
            {"job": m.job.to_dict(), "score": m.score, "explanation": m.breakdown.to_dict()}
            for m in ranked
        ],
    }


def cmd_jobs(args: argparse.Namespace, store: StoreSnapshot) -> Dict[str, Any]:
    criteria = FilterCriteria.from_input(args.keyword, args.skills)
    jobs = filter_jobs(approved_jobs(store.jobs), criteria)

    if not args.json:
        print(f"\n=== Jobs ({len(jobs)}) ===")
        for j in jobs:
            print(f"- {_job_line(j)}  [{', '.join(j.required_skills)}]")

    return {
        "criteria": {"keyword": criteria.keyword or "", "skills": criteria.skills},
        "jobs": [j.to_dict() for j in jobs],
    }


def cmd_applicants(args: argparse.Namespace, store: StoreSnapshot) -> Dict[str, Any]:
    criteria = FilterCriteria.from_input(args.keyword, args.skills)
    applicants = build_applicants(args.job_id, store.applications, store.users)
    shown = filter_applicants(applicants, criteria)

    if not args.json:
        print(f"\n=== Applicants for {args.job_id} ({len(shown)} of {len(applicants)}) ===")
        for a in shown:
            flag = " [shortlisted]" if a.application.shortlisted else ""
            print(f"- {a.name} <{a.email}>{flag}  skills: {', '.join(a.skills) or '-'}")

    return {
        "job_id": args.job_id,
        "criteria": {"keyword": criteria.keyword or "", "skills": criteria.skills},
        "applicants": [a.to_dict() for a in shown],
    }


def cmd_analytics(args: argparse.Namespace, store: StoreSnapshot) -> Dict[str, Any]:
    summary = summarize(store.users, store.jobs, store.applications)
    per_job = applications_per_job(store.applications, store.jobs, args.limit)

    if not args.json:
        print("\n=== Analytics ===")
        print(f"Users: {summary.total_users} (students {summary.students} / recruiters {summary.recruiters})")
        print(f"Jobs: {summary.total_jobs} (approved {summary.jobs_approved} / pending {summary.jobs_pending})")
        print(f"Applications: {summary.applications} (shortlisted {summary.shortlisted})")
        if per_job:
            print("\nApplications per Job:")
            for row in per_job:
                print(f"  {row.label}: {row.count}")

    return {
        "summary": summary.to_dict(),
        "applications_per_job": [
            {"job_id": r.job_id, "label": r.label, "count": r.count} for r in per_job
        ],
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smartjob", description="SmartJob board: recommendations, filters and analytics")
    parser.add_argument("--store", type=str, default="", help="Path to a localStorage JSON export (default: sample jobs)")
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging on stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("recommend", help="Rank approved jobs for a skill list")
    p.add_argument("--skills", type=str, default="", help='Skills, e.g. "JavaScript, React, CSS"')
    p.add_argument("--top-k", type=int, default=config.RECOMMEND_TOP_N, help="How many jobs to return")
    p.set_defaults(handler=cmd_recommend)

    p = sub.add_parser("jobs", help="Filter approved jobs by keyword and/or skills")
    p.add_argument("--keyword", type=str, default="", help="Search jobs by keyword")
    p.add_argument("--skills", type=str, default="", help="Filter skills (comma)")
    p.set_defaults(handler=cmd_jobs)

    p = sub.add_parser("applicants", help="Filter a job's applicants")
    p.add_argument("--job-id", type=str, required=True, help="Job identifier")
    p.add_argument("--keyword", type=str, default="", help="Search keyword")
    p.add_argument("--skills", type=str, default="", help="Filter skills (comma)")
    p.set_defaults(handler=cmd_applicants)

    p = sub.add_parser("analytics", help="Admin counters and applications per job")
    p.add_argument("--limit", type=int, default=config.ANALYTICS_TOP_JOBS, help="Jobs shown in the per-job breakdown")
    p.set_defaults(handler=cmd_analytics)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level("DEBUG")

    store = _load_store(args.store)
    logger.debug("store source=%s path=%s", store.source, store.path)

    payload = args.handler(args, store)
    if args.json:
        print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
