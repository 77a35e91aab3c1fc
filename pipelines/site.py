"""Build pass: raw jobs + roster -> published datasets.

No I/O; the clock is read only when no timestamp is passed in.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from core.ids import utc_timestamp
from parsing.normalizers import normalize_job
from schemas import (
    CleanJobRecord,
    Company,
    CompanySummary,
    RawJobRecord,
    RunMetadata,
)


@dataclass
class SiteBuild:
    """Everything the build pass publishes."""

    clean: list[CleanJobRecord] = field(default_factory=list)
    rejected: list[RawJobRecord] = field(default_factory=list)
    companies: list[CompanySummary] = field(default_factory=list)
    metadata: RunMetadata | None = None


def _sort_key(job: CleanJobRecord) -> tuple[str, str]:
    return job.company_name.casefold(), job.job_title.casefold()


def build_site(
    companies: Sequence[Company],
    raw_jobs: Sequence[RawJobRecord],
    portfolio: str = "",
    now: str | None = None,
) -> SiteBuild:
    """Normalize every raw job and index the survivors by company.

    Args:
        companies: Full roster; every entry gets a summary, even at zero
        raw_jobs: Records from the scrape pass
        portfolio: Label written on each company summary
        now: Timestamp for the run metadata (defaults to the current time)

    Returns:
        SiteBuild with clean jobs sorted by company then title (both
        case-insensitive, ties kept in input order)
    """
    build = SiteBuild()

    for raw in raw_jobs:
        clean = normalize_job(raw)
        if clean is None:
            build.rejected.append(raw)
        else:
            build.clean.append(clean)

    open_roles = Counter(job.company_name for job in build.clean)
    build.companies = [
        CompanySummary(
            portfolio=portfolio,
            company_name=company.company_name,
            company_careers_url=company.careers_url,
            open_roles=open_roles.get(company.company_name, 0),
        )
        for company in companies
    ]

    build.clean.sort(key=_sort_key)

    build.metadata = RunMetadata(
        last_updated_utc=now or utc_timestamp(),
        raw_count=len(raw_jobs),
        clean_count=len(build.clean),
    )
    return build
