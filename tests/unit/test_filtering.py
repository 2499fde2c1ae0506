from __future__ import annotations

from smartjob.filtering import FilterCriteria, build_applicants, filter_applicants, filter_jobs
from smartjob.models import Applicant, Application, JobPosting, User, UserRole


def _student(uid: str, name: str, email: str, skills, **kw) -> User:
    return User(user_id=uid, role=UserRole.STUDENT, name=name, email=email, skills=skills, **kw)


def test_identity_filter_returns_all_jobs_in_order(sample_jobs) -> None:
    out = filter_jobs(sample_jobs, FilterCriteria(keyword="", skills=[]))
    assert out == sample_jobs


def test_skill_filter_is_exact_membership() -> None:
    node = JobPosting(title="API Dev", company="A", description="", required_skills=["Node.js"])
    react = JobPosting(title="UI Dev", company="B", description="", required_skills=["React", "CSS"])
    native = JobPosting(title="Mobile Dev", company="C", description="", required_skills=["React Native"])

    out = filter_jobs([node, react, native], FilterCriteria(skills=["react"]))
    assert out == [react]


def test_keyword_searches_title_company_type_location_description(sample_jobs) -> None:
    def titles(kw: str):
        return [j.title for j in filter_jobs(sample_jobs, FilterCriteria(keyword=kw))]

    assert titles("dataforge") == ["Backend Developer"]
    assert titles("internship") == ["Frontend Intern", "ML Intern"]
    assert titles("LAGOS") == ["Backend Developer"]
    assert titles("model training") == ["ML Intern"]
    assert titles("kotlin") == []


def test_keyword_and_skills_must_both_hold(sample_jobs) -> None:
    criteria = FilterCriteria.from_input("remote", "python, react")
    assert [j.title for j in filter_jobs(sample_jobs, criteria)] == ["Frontend Intern", "ML Intern"]

    criteria = FilterCriteria.from_input("remote", "Node.js")
    assert filter_jobs(sample_jobs, criteria) == []


def test_criteria_from_input_tokenizes_skills() -> None:
    c = FilterCriteria.from_input("  ui ", "React; react\nCSS")
    assert c.keyword == "  ui "
    assert c.skills == ["React", "CSS"]
    assert not c.is_empty
    assert FilterCriteria.from_input(" ", "").is_empty


def test_filter_applicants_by_keyword_and_skills() -> None:
    app = Application(application_id="a1", user_id="u1", job_id="j1")
    ada = Applicant(application=app, user=_student("u1", "Ada Obi", "ada@example.com", ["React", "CSS"],
                                                   portfolio_url="https://ada.dev"))
    ben = Applicant(application=app, user=_student("u2", "Ben Musa", "ben@example.com", ["Python"]))

    assert filter_applicants([ada, ben], FilterCriteria()) == [ada, ben]
    assert filter_applicants([ada, ben], FilterCriteria(keyword="ADA.DEV")) == [ada]
    assert filter_applicants([ada, ben], FilterCriteria(skills=["python"])) == [ben]
    assert filter_applicants([ada, ben], FilterCriteria(keyword="example.com", skills=["css", "python"])) == [ada, ben]
    assert filter_applicants([ada, ben], FilterCriteria(keyword="ben", skills=["css"])) == []


def test_filter_applicants_tolerates_missing_optional_fields() -> None:
    app = Application(application_id="a1", user_id="u1", job_id="j1")
    bare = Applicant(application=app, user=User(user_id="u1", role=UserRole.STUDENT, name="", email=""))
    assert filter_applicants([bare], FilterCriteria()) == [bare]
    assert filter_applicants([bare], FilterCriteria(keyword="x", skills=["go"])) == []


def test_build_applicants_joins_students_only() -> None:
    users = [
        _student("u1", "Ada", "ada@example.com", ["React"]),
        User(user_id="r1", role=UserRole.RECRUITER, name="Rita", email="rita@example.com"),
    ]
    apps = [
        Application(application_id="a1", user_id="u1", job_id="j1"),
        Application(application_id="a2", user_id="r1", job_id="j1"),
        Application(application_id="a3", user_id="ghost", job_id="j1"),
        Application(application_id="a4", user_id="u1", job_id="j2"),
    ]
    out = build_applicants("j1", apps, users)
    assert [a.application.application_id for a in out] == ["a1"]
    assert out[0].name == "Ada"


def test_keyword_matches_description_as_typed() -> None:
    job = JobPosting.from_dict({"id": "j1", "title": "UI Dev", "description": "Build  UI components"})
    assert filter_jobs([job], FilterCriteria(keyword="build  ui")) == [job]
    assert filter_jobs([job], FilterCriteria(keyword="build ui")) == []


def test_criteria_skills_given_as_text_are_tokenized() -> None:
    c = FilterCriteria(skills="React")
    assert c.skills == ["React"]

    letter = JobPosting(title="Systems", company="A", description="", required_skills=["C"])
    react = JobPosting(title="UI", company="B", description="", required_skills=["React"])
    assert filter_jobs([letter, react], c) == [react]


def test_filter_jobs_reads_plain_storage_records() -> None:
    records = [
        {"id": "j1", "title": "API Dev", "requiredSkills": ["Node.js"]},
        {"id": "j2", "title": "UI Dev", "requiredSkills": ["React"]},
    ]
    out = filter_jobs(records, FilterCriteria(skills=["react"]))
    assert [j.job_id for j in out] == ["j2"]
