"""Pipeline runner for the scrape and build passes."""

from __future__ import annotations

import asyncio
import time

import structlog

from collectors.adapters import AdapterTable, SessionFactory, build_adapters
from collectors.collector import collect
from collectors.http_client import HttpClient
from core.config import Settings
from core.context import RunContext, RunStatus
from pipelines.site import SiteBuild, build_site
from storage.roster import read_roster
from storage.store import DatasetStore, FileDatasetStore

logger = structlog.get_logger(__name__)


async def run_scrape_async(
    settings: Settings,
    store: DatasetStore | None = None,
    adapters: AdapterTable | None = None,
    session_factory: SessionFactory | None = None,
    run_id: str | None = None,
) -> RunContext:
    """Run the scrape pass: Roster -> Classify -> Extract -> Dedup -> Persist.

    Per-company failures end up in the coverage report. Only an unreadable
    roster or an unwritable output file raises.

    Args:
        settings: Loaded settings
        store: Dataset store (defaults to files under the configured dirs)
        adapters: Pre-built adapter table (defaults to one per source type)
        session_factory: Browser session factory for rendered boards
        run_id: Optional explicit run ID

    Returns:
        RunContext with coverage, metrics and stage logs
    """
    run_start = time.monotonic()
    store = store or FileDatasetStore.from_settings(settings)

    ctx = RunContext.boot(settings, run_id)
    logger.info("scrape_started", run_id=ctx.run_id, roster=str(settings.roster_path))

    try:
        ctx.start_stage("load_roster")
        companies = read_roster(settings.roster_path)
        ctx.complete_stage("load_roster", items_out=len(companies))

        async with HttpClient(
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
        ) as client:
            table = adapters or build_adapters(client, settings, session_factory)
            raw_jobs = await collect(companies, ctx, table)

        ctx.start_stage("persist", items_in=len(raw_jobs))
        store.save("raw_jobs", raw_jobs)
        store.save("coverage", ctx.coverage)
        ctx.complete_stage("persist", items_out=len(raw_jobs))

        ctx.complete_run(RunStatus.COMPLETED)

    except Exception as e:
        ctx.complete_run(RunStatus.FAILED)
        if ctx.stage_logs:
            ctx.stage_logs[-1].errors.append(str(e))
        raise

    logger.info(
        "scrape_done",
        run_id=ctx.run_id,
        raw_jobs=len(raw_jobs),
        companies=len(companies),
        duration_s=round(time.monotonic() - run_start, 2),
    )
    return ctx


def run_scrape(
    settings: Settings,
    store: DatasetStore | None = None,
    adapters: AdapterTable | None = None,
    session_factory: SessionFactory | None = None,
    run_id: str | None = None,
) -> RunContext:
    """Synchronous wrapper for run_scrape_async."""
    return asyncio.run(run_scrape_async(settings, store, adapters, session_factory, run_id))


def run_build(
    settings: Settings,
    store: DatasetStore | None = None,
) -> SiteBuild:
    """Run the build pass: Roster + raw jobs -> Normalize -> Index -> Persist.

    Returns:
        The published SiteBuild
    """
    run_start = time.monotonic()
    store = store or FileDatasetStore.from_settings(settings)

    companies = read_roster(settings.roster_path)
    raw_jobs = store.load_raw_jobs()
    logger.info("build_started", companies=len(companies), raw_jobs=len(raw_jobs))

    build = build_site(companies, raw_jobs, portfolio=settings.portfolio)

    store.save("companies", build.companies)
    store.save("clean_jobs", build.clean)
    store.save("rejected_jobs", build.rejected)
    if build.metadata is not None:
        store.save("last_updated", build.metadata)

    logger.info(
        "build_done",
        clean_jobs=len(build.clean),
        rejected_jobs=len(build.rejected),
        raw_jobs=len(raw_jobs),
        duration_s=round(time.monotonic() - run_start, 2),
    )
    return build
