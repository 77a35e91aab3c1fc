"""
Collectors for the job aggregator.

Each roster company is classified by its careers URL and handed to the
adapter for that platform, which returns uniform RawJobRecord objects.
"""

from collectors.classifier import classify
from collectors.collector import collect, dedupe_jobs
from collectors.errors import FetchError, ParseError, RenderTimeout, ScrapeError

__all__ = [
    "FetchError",
    "ParseError",
    "RenderTimeout",
    "ScrapeError",
    "classify",
    "collect",
    "dedupe_jobs",
]
