"""
Pydantic schemas for the job aggregator.

Contract-first design: these schemas define the records passed between the
scrape pass, the build pass and the published files.
"""

from .base import NOT_LISTED, BaseSchema, SourceType
from .company import Company, CompanySummary
from .coverage import CoverageRecord, CoverageStatus, RunMetadata
from .job import CleanJobRecord, RawJobRecord

__all__ = [
    "NOT_LISTED",
    "BaseSchema",
    "SourceType",
    # Roster
    "Company",
    "CompanySummary",
    # Jobs
    "RawJobRecord",
    "CleanJobRecord",
    # Health
    "CoverageRecord",
    "CoverageStatus",
    "RunMetadata",
]
