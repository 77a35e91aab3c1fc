"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from core.config import Settings
from schemas import RawJobRecord


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing every input and output at a temp directory."""
    return Settings(
        roster_path=tmp_path / "companies.csv",
        data_dir=tmp_path / "data",
        site_dir=tmp_path / "site",
        portfolio="Test Portfolio",
    )


@pytest.fixture
def raw_job() -> Callable[..., RawJobRecord]:
    """Factory for raw job records with sensible defaults."""

    def _make(**overrides: Any) -> RawJobRecord:
        data: dict[str, Any] = {
            "portfolio": "Test Portfolio",
            "company_name": "Acme",
            "company_careers_url": "https://boards.greenhouse.io/acme",
            "job_title": "Backend Engineer",
            "job_location": "Not listed",
            "job_url": "https://boards.greenhouse.io/acme/jobs/1",
            "source_type": "greenhouse",
            "source_job_id": "1",
            "job_key": "greenhouse:1",
            "status": "open",
            "last_seen_utc": "2024-05-01T12:00:00.000Z",
        }
        data.update(overrides)
        return RawJobRecord(**data)

    return _make


@pytest.fixture
def write_roster(settings: Settings) -> Callable[[str], Path]:
    """Write CSV text to the configured roster path."""

    def _write(text: str) -> Path:
        settings.roster_path.write_text(text, encoding="utf-8")
        return settings.roster_path

    return _write
