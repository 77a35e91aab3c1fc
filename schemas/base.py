"""Base schema utilities and common types."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

NOT_LISTED = "Not listed"


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Records are frozen: once built they are never updated in place.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )


class SourceType(StrEnum):
    """Platform family behind a careers URL."""

    GREENHOUSE = "greenhouse"  # API-backed board
    RIPPLING = "rippling"  # static HTML board
    BREEZY = "breezy"  # static HTML board
    BUILT_IN = "built_in"  # static HTML board
    ASHBY = "ashby"  # client-rendered board
    WORKDAY = "workday"  # client-rendered board
    SCALIS = "scalis"  # client-rendered board
    CUSTOM_HTML = "custom_html"  # generic fallback
