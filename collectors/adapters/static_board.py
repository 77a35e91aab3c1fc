"""Static HTML boards: one fetch, then a same-origin anchor scan."""

from __future__ import annotations

import re
from abc import abstractmethod

import structlog

from collectors.adapters.base import BaseAdapter, unique_by_url
from collectors.http_client import HttpClient
from parsing.anchors import Anchor, scan_anchors
from schemas import RawJobRecord, SourceType

logger = structlog.get_logger(__name__)


class StaticBoardAdapter(BaseAdapter):
    """Fetch the careers page once and keep anchors that look like postings.

    Subclasses only decide which anchors qualify and what their title is;
    :func:`~parsing.anchors.scan_anchors` has already dropped cross-origin
    links.
    """

    def __init__(self, client: HttpClient, portfolio: str = ""):
        super().__init__(portfolio)
        self.client = client

    async def extract(self, company_name: str, careers_url: str) -> list[RawJobRecord]:
        result = await self.client.fetch(careers_url)
        anchors = scan_anchors(result.text, careers_url)

        records: list[RawJobRecord] = []
        for anchor in anchors:
            if not self.accepts(anchor, careers_url):
                continue
            title = self.title_for(anchor)
            if not title:
                continue
            records.append(
                self.make_record(company_name, careers_url, title=title, job_url=anchor.url)
            )

        logger.debug(
            "anchor_scan",
            source=self.source_type.value,
            anchors=len(anchors),
            kept=len(records),
        )
        return unique_by_url(records)

    @abstractmethod
    def accepts(self, anchor: Anchor, careers_url: str) -> bool:
        """Whether a same-origin anchor points at a job posting."""

    def title_for(self, anchor: Anchor) -> str | None:
        return anchor.title or None


class RipplingAdapter(StaticBoardAdapter):
    source_type = SourceType.RIPPLING

    def accepts(self, anchor: Anchor, careers_url: str) -> bool:
        return "/jobs/" in anchor.href


class BreezyAdapter(StaticBoardAdapter):
    source_type = SourceType.BREEZY

    def accepts(self, anchor: Anchor, careers_url: str) -> bool:
        return "/p/" in anchor.href

    def title_for(self, anchor: Anchor) -> str | None:
        if anchor.title.lower() == "apply":
            return None
        return anchor.title or None


_BUILT_IN_JOB_PATH = re.compile(r"/(job|jobs)/", re.I)


class BuiltInAdapter(StaticBoardAdapter):
    source_type = SourceType.BUILT_IN

    def accepts(self, anchor: Anchor, careers_url: str) -> bool:
        return bool(_BUILT_IN_JOB_PATH.search(anchor.url))

    def title_for(self, anchor: Anchor) -> str | None:
        if len(anchor.title) < 3:
            return None
        return anchor.title
