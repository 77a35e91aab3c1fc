"""Per-company scrape health schemas."""

from enum import StrEnum

from pydantic import Field

from .base import BaseSchema


class CoverageStatus(StrEnum):
    """Outcome of scraping one company."""

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"
    UNSUPPORTED = "unsupported"


class CoverageRecord(BaseSchema):
    """One record per company per run."""

    portfolio: str
    company_name: str
    company_careers_url: str
    source_type: str
    status: CoverageStatus
    open_roles_raw: int = Field(default=0, ge=0)
    error: str = ""
    last_checked_utc: str


class RunMetadata(BaseSchema):
    """Summary written alongside the published dataset."""

    last_updated_utc: str
    raw_count: int = Field(..., ge=0)
    clean_count: int = Field(..., ge=0)
