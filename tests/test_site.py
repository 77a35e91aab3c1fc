"""Tests for the build pass: split, index and sort."""

from pipelines.site import build_site
from schemas import Company


def test_clean_jobs_sorted_case_insensitively(raw_job):
    raw = [
        raw_job(company_name="acme", job_title="Zeta Analyst", job_key="k1"),
        raw_job(company_name="Beta", job_title="Analyst", job_key="k2"),
        raw_job(company_name="Acme", job_title="Backend Engineer", job_key="k3"),
        raw_job(company_name="Acme", job_title="analyst", job_key="k4"),
    ]
    build = build_site([], raw, now="2024-05-01T12:00:00.000Z")

    assert [(j.company_name, j.job_title) for j in build.clean] == [
        ("Acme", "analyst"),
        ("Acme", "Backend Engineer"),
        ("acme", "Zeta Analyst"),
        ("Beta", "Analyst"),
    ]


def test_sort_is_stable_for_ties(raw_job):
    raw = [
        raw_job(job_title="Backend Engineer", job_key="first"),
        raw_job(job_title="backend engineer", job_key="second"),
    ]
    build = build_site([], raw)
    assert [j.job_key for j in build.clean] == ["first", "second"]


def test_every_roster_company_gets_a_summary(raw_job):
    companies = [
        Company(company_name="Acme", careers_url="https://boards.greenhouse.io/acme"),
        Company(company_name="acme", careers_url="https://acme.example.com/careers"),
        Company(company_name="Quiet Co", careers_url="https://quiet.example.com/careers"),
    ]
    raw = [
        raw_job(company_name="Acme", job_title="Backend Engineer", job_key="1"),
        raw_job(company_name="Acme", job_title="Data Analyst", job_key="2"),
        raw_job(company_name="Acme", job_title="%TEMPLATE_TITLE%", job_key="3"),
        raw_job(company_name="acme", job_title="Designer Lead", job_key="4"),
    ]
    build = build_site(companies, raw, portfolio="Test Portfolio")

    summaries = [(c.company_name, c.open_roles) for c in build.companies]
    assert summaries == [("Acme", 2), ("acme", 1), ("Quiet Co", 0)]
    assert build.companies[2].company_careers_url == "https://quiet.example.com/careers"
    assert all(c.portfolio == "Test Portfolio" for c in build.companies)


def test_rejected_records_are_kept_verbatim(raw_job):
    junk = raw_job(job_title="%TEMPLATE_TITLE%", job_location="  weird   spacing ", scraped_by="bot")
    build = build_site([], [junk])

    assert build.clean == []
    assert build.rejected == [junk]
    assert build.rejected[0].model_dump()["scraped_by"] == "bot"
    assert build.rejected[0].job_location == "  weird   spacing "


def test_metadata(raw_job):
    raw = [raw_job(job_key="1"), raw_job(job_title="Careers", job_key="2")]
    build = build_site([], raw, now="2024-05-01T12:00:00.000Z")

    assert build.metadata.last_updated_utc == "2024-05-01T12:00:00.000Z"
    assert build.metadata.raw_count == 2
    assert build.metadata.clean_count == 1
    assert len(build.clean) + len(build.rejected) == len(raw)


def test_empty_input():
    build = build_site([], [])
    assert build.clean == []
    assert build.rejected == []
    assert build.metadata.raw_count == 0
