"""Greenhouse boards: structured JSON from the public job board API."""

from __future__ import annotations

import re
from typing import Any

import structlog

from collectors.adapters.base import BaseAdapter, unique_by_url
from collectors.errors import ParseError
from collectors.http_client import HttpClient
from parsing.normalizers import collapse_whitespace
from schemas import NOT_LISTED, RawJobRecord, SourceType

logger = structlog.get_logger(__name__)

GREENHOUSE_API = "https://boards-api.greenhouse.io/v1/boards/{board}/jobs?content=false"

_BOARD_SLUG = re.compile(r"greenhouse\.io/(?:job-boards\.)?([^/?#]+)", re.I)


def board_slug(careers_url: str) -> str | None:
    """Board identifier from a Greenhouse careers URL, e.g. ``acme`` from
    ``https://boards.greenhouse.io/acme``."""
    match = _BOARD_SLUG.search(careers_url)
    return match.group(1) if match else None


class GreenhouseAdapter(BaseAdapter):
    """Lowest-noise source: title and location come pre-structured."""

    source_type = SourceType.GREENHOUSE

    def __init__(self, client: HttpClient, portfolio: str = ""):
        super().__init__(portfolio)
        self.client = client

    async def extract(self, company_name: str, careers_url: str) -> list[RawJobRecord]:
        board = board_slug(careers_url)
        if not board:
            raise ParseError("Could not detect Greenhouse board slug", url=careers_url)

        api_url = GREENHOUSE_API.format(board=board)
        data = await self.client.fetch_json(api_url)
        if not isinstance(data, dict):
            raise ParseError("Greenhouse API returned an unexpected payload", url=api_url)

        jobs = data.get("jobs") or []
        if not isinstance(jobs, list):
            raise ParseError("Greenhouse API 'jobs' is not a list", url=api_url)

        records = [
            record
            for record in (self._to_record(company_name, careers_url, job) for job in jobs)
            if record is not None
        ]
        logger.debug("greenhouse_board", board=board, listed=len(jobs), kept=len(records))
        return unique_by_url(records)

    def _to_record(
        self,
        company_name: str,
        careers_url: str,
        job: Any,
    ) -> RawJobRecord | None:
        if not isinstance(job, dict):
            return None
        job_url = collapse_whitespace(job.get("absolute_url"))
        if not job_url:
            return None

        location = job.get("location") or {}
        location_name = location.get("name") if isinstance(location, dict) else None
        job_id = job.get("id")

        return self.make_record(
            company_name,
            careers_url,
            title=collapse_whitespace(job.get("title")),
            job_url=job_url,
            location=collapse_whitespace(location_name) or NOT_LISTED,
            source_job_id=str(job_id) if job_id not in (None, "") else None,
        )
