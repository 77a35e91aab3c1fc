"""End-to-end tests for both passes and their command-line entry points."""

from __future__ import annotations

import json

import pytest

from collectors.adapters.base import BaseAdapter
from core.context import RunStatus
from orchestration.runner import run_build, run_scrape
from pipelines import build as build_cli
from pipelines import scrape as scrape_cli
from schemas import SourceType

ROSTER = (
    "company_name,careers_url\n"
    "Acme,https://boards.greenhouse.io/acme\n"
    "Quiet Co,https://quiet.example.com/careers\n"
)


class CannedAdapter(BaseAdapter):
    def __init__(self, source_type, titles_by_company):
        super().__init__("Test Portfolio")
        self.source_type = source_type
        self.titles_by_company = titles_by_company

    async def extract(self, company_name, careers_url):
        return [
            self.make_record(company_name, careers_url, title=title, job_url=f"{careers_url}/jobs/{i}")
            for i, title in enumerate(self.titles_by_company.get(company_name, []))
        ]


@pytest.fixture
def adapters():
    return {
        SourceType.GREENHOUSE: CannedAdapter(
            SourceType.GREENHOUSE,
            {"Acme": ["Senior Backend Engineer Engineering", "%TEMPLATE_TITLE%", "Account Exec - Remote"]},
        ),
        SourceType.CUSTOM_HTML: CannedAdapter(SourceType.CUSTOM_HTML, {}),
    }


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_scrape_then_build(settings, write_roster, adapters):
    write_roster(ROSTER)

    ctx = run_scrape(settings, adapters=adapters, run_id="test-run")

    assert ctx.run_id == "test-run"
    assert ctx.status == RunStatus.COMPLETED
    raw = read_json(settings.raw_jobs_path)
    coverage = read_json(settings.coverage_path)
    assert len(raw) == 3
    assert [(c["company_name"], c["status"]) for c in coverage] == [
        ("Acme", "ok"),
        ("Quiet Co", "empty"),
    ]

    build = run_build(settings)

    assert len(build.clean) == 2
    clean = read_json(settings.clean_jobs_path)
    assert [(j["job_title"], j["job_location"]) for j in clean] == [
        ("Account Exec", "Remote"),
        ("Senior Backend Engineer", "Not listed"),
    ]
    rejected = read_json(settings.rejected_jobs_path)
    assert [j["job_title"] for j in rejected] == ["%TEMPLATE_TITLE%"]
    companies = read_json(settings.companies_path)
    assert [(c["company_name"], c["open_roles"]) for c in companies] == [
        ("Acme", 2),
        ("Quiet Co", 0),
    ]
    meta = read_json(settings.last_updated_path)
    assert meta["raw_count"] == 3
    assert meta["clean_count"] == 2


def test_scrape_with_unreadable_roster_raises(settings, adapters):
    with pytest.raises(Exception, match="roster"):
        run_scrape(settings, adapters=adapters)
    assert not settings.raw_jobs_path.exists()


def test_build_without_raw_jobs_raises(settings, write_roster):
    write_roster(ROSTER)
    with pytest.raises(OSError):
        run_build(settings)


class TestCli:
    def write_config(self, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text(
            f"roster_path: {tmp_path / 'companies.csv'}\n"
            f"data_dir: {tmp_path / 'data'}\n"
            f"site_dir: {tmp_path / 'site'}\n",
            encoding="utf-8",
        )
        return config

    def test_scrape_missing_roster_exits_1(self, tmp_path, capsys):
        code = scrape_cli.main(
            ["--config", str(tmp_path / "absent.yaml"), "--roster", str(tmp_path / "missing.csv")]
        )
        assert code == 1
        assert "error:" in capsys.readouterr().err

    def test_invalid_config_exits_1(self, tmp_path, capsys):
        config = tmp_path / "settings.yaml"
        config.write_text("request_timeout: soon\n", encoding="utf-8")
        code = build_cli.main(["--config", str(config)])
        assert code == 1
        assert "request_timeout" in capsys.readouterr().err

    def test_scrape_verbose_prints_run_summary(self, tmp_path, capsys):
        config = self.write_config(tmp_path)
        (tmp_path / "companies.csv").write_text("company_name,careers_url\n", encoding="utf-8")

        code = scrape_cli.main(["--config", str(config), "-v"])

        assert code == 0
        out = capsys.readouterr().out
        headline, _, rest = out.partition("\n")
        assert headline == "Wrote 0 raw jobs for 0 companies."
        summary = json.loads(rest)
        assert summary["status"] == "completed"
        assert summary["metrics"]["num_companies"] == 0
        assert [s["stage"] for s in summary["stages"]] == ["load_roster", "collect", "dedupe", "persist"]
        assert read_json(tmp_path / "site" / "coverage.json") == []

    def test_build_succeeds(self, tmp_path, capsys):
        config = self.write_config(tmp_path)
        (tmp_path / "companies.csv").write_text(ROSTER, encoding="utf-8")
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "raw_jobs.json").write_text("[]\n", encoding="utf-8")

        code = build_cli.main(["--config", str(config)])

        assert code == 0
        assert "0 jobs" in capsys.readouterr().out
        companies = read_json(tmp_path / "site" / "companies.json")
        assert [c["open_roles"] for c in companies] == [0, 0]
