"""Collection stage: scrape every roster company and dedup the results."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from collectors.adapters import AdapterTable, get_adapter
from collectors.classifier import classify
from collectors.errors import ScrapeError
from core.context import RunContext
from core.ids import resolve_job_key, utc_timestamp
from schemas import Company, CoverageRecord, CoverageStatus, RawJobRecord

logger = structlog.get_logger(__name__)


async def _scrape_company(
    company: Company,
    adapters: AdapterTable,
    portfolio: str,
) -> tuple[CoverageRecord, list[RawJobRecord]]:
    """Scrape one company inside a failure boundary.

    Returns:
        Tuple of (coverage record, raw jobs)
    """
    source = classify(company.careers_url)
    adapter = get_adapter(adapters, source)

    jobs: list[RawJobRecord] = []
    status = CoverageStatus.OK
    error = ""

    if adapter is None:
        status = CoverageStatus.UNSUPPORTED
    else:
        try:
            jobs = await adapter.extract(company.company_name, company.careers_url)
        except ScrapeError as e:
            status = CoverageStatus.FAILED
            error = str(e)
        except Exception as e:
            logger.exception("adapter_crashed", company=company.company_name, source=source.value)
            status = CoverageStatus.FAILED
            error = f"{type(e).__name__}: {e}"

    if status == CoverageStatus.OK and not jobs:
        status = CoverageStatus.EMPTY

    record = CoverageRecord(
        portfolio=portfolio,
        company_name=company.company_name,
        company_careers_url=company.careers_url,
        source_type=source.value,
        status=status,
        open_roles_raw=len(jobs),
        error=error,
        last_checked_utc=utc_timestamp(),
    )

    log = logger.warning if status == CoverageStatus.FAILED else logger.info
    log(
        "company_scraped",
        company=company.company_name,
        source=source.value,
        status=status.value,
        jobs=len(jobs),
        error=error or None,
    )
    return record, jobs


def dedupe_jobs(jobs: Iterable[RawJobRecord]) -> list[RawJobRecord]:
    """Drop records whose job key was already seen; first occurrence wins."""
    seen: set[str] = set()
    unique: list[RawJobRecord] = []
    for job in jobs:
        key = resolve_job_key(job.model_dump())
        if key in seen:
            continue
        seen.add(key)
        unique.append(job)
    return unique


async def collect(
    companies: list[Company],
    ctx: RunContext,
    adapters: AdapterTable,
) -> list[RawJobRecord]:
    """Scrape companies one at a time and globally dedup their jobs.

    Every company yields exactly one coverage record on ``ctx.coverage``,
    whatever happened to it. Adapter failures never propagate.

    Args:
        companies: Roster, in file order
        ctx: Run context owning the accumulators
        adapters: Handler per source type

    Returns:
        Raw jobs, unique by job key
    """
    ctx.start_stage("collect", items_in=len(companies))

    for company in companies:
        record, jobs = await _scrape_company(company, adapters, ctx.settings.portfolio)
        ctx.record_outcome(record, jobs)

    failures = [
        f"{record.company_name}: {record.error}"
        for record in ctx.coverage
        if record.status == CoverageStatus.FAILED
    ]
    ctx.complete_stage("collect", items_out=len(ctx.raw_jobs), errors=failures)

    ctx.start_stage("dedupe", items_in=len(ctx.raw_jobs))
    deduped = dedupe_jobs(ctx.raw_jobs)
    ctx.metrics.num_duplicates_dropped = len(ctx.raw_jobs) - len(deduped)
    ctx.complete_stage("dedupe", items_out=len(deduped))

    logger.info(
        "collect_done",
        companies=ctx.metrics.num_companies,
        ok=ctx.metrics.num_ok,
        empty=ctx.metrics.num_empty,
        failed=ctx.metrics.num_failed,
        unsupported=ctx.metrics.num_unsupported,
        raw_jobs=len(ctx.raw_jobs),
        duplicates_dropped=ctx.metrics.num_duplicates_dropped,
    )
    return deduped
