"""Adapter failure taxonomy.

Every error raised here is recoverable: the collector downgrades it to a
``failed`` coverage record for the company and moves on.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for per-company extraction failures."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class FetchError(ScrapeError):
    """HTTP non-success or network failure."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, url)
        self.status_code = status_code


class ParseError(ScrapeError):
    """Expected structure absent (e.g. board slug undetectable)."""


class RenderTimeout(ScrapeError):
    """Rendered page never reached its wait condition in time."""
