"""Job posting schemas."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from .base import NOT_LISTED, BaseSchema


class RawJobRecord(BaseSchema):
    """A job posting as produced by one provider adapter for one company.

    Unknown keys are kept so a record loaded from disk can be written back
    verbatim.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    portfolio: str = ""
    company_name: str
    company_careers_url: str = ""
    job_title: str = ""
    job_location: str = NOT_LISTED
    job_url: str
    source_type: str
    source_job_id: str = ""
    job_key: str = ""
    status: str = "open"
    last_seen_utc: str = ""


class CleanJobRecord(RawJobRecord):
    """A raw job whose title and location passed the text normalizer."""

    job_title: str = Field(..., min_length=1)
