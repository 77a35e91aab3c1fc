"""Base adapter interface shared by every provider strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from core.ids import fingerprint, make_job_key, utc_timestamp
from schemas import NOT_LISTED, RawJobRecord, SourceType


class BaseAdapter(ABC):
    """Turns one company's careers URL into raw job records.

    Implementations raise :class:`~collectors.errors.ScrapeError` subclasses on
    failure; the collector records them and continues with the next company.
    """

    source_type: SourceType

    def __init__(self, portfolio: str = ""):
        self.portfolio = portfolio

    @abstractmethod
    async def extract(self, company_name: str, careers_url: str) -> list[RawJobRecord]:
        """
        Extract open jobs for one company.

        Args:
            company_name: Company name from the roster
            careers_url: The company's careers page

        Returns:
            Raw job records, unique by job URL
        """

    def make_record(
        self,
        company_name: str,
        careers_url: str,
        title: str,
        job_url: str,
        location: str = NOT_LISTED,
        source_job_id: str | None = None,
    ) -> RawJobRecord:
        """Build a record; the job id defaults to the fingerprint of the URL."""
        job_id = source_job_id or fingerprint(job_url)
        return RawJobRecord(
            portfolio=self.portfolio,
            company_name=company_name,
            company_careers_url=careers_url,
            job_title=title,
            job_location=location or NOT_LISTED,
            job_url=job_url,
            source_type=self.source_type.value,
            source_job_id=job_id,
            job_key=make_job_key(self.source_type.value, job_id),
            status="open",
            last_seen_utc=utc_timestamp(),
        )


def unique_by_url(records: Iterable[RawJobRecord]) -> list[RawJobRecord]:
    """Keep the first record for each job URL."""
    seen: set[str] = set()
    out: list[RawJobRecord] = []
    for record in records:
        if record.job_url in seen:
            continue
        seen.add(record.job_url)
        out.append(record)
    return out
