"""Company roster and per-company summary schemas."""

from pydantic import ConfigDict, Field

from .base import BaseSchema


class Company(BaseSchema):
    """One roster entry."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    company_name: str = Field(..., min_length=1, description="Company name as listed in the roster")
    careers_url: str = Field(..., min_length=1, description="Public careers page URL")


class CompanySummary(BaseSchema):
    """Open-role count for one roster company."""

    portfolio: str
    company_name: str
    company_careers_url: str
    open_roles: int = Field(default=0, ge=0)
