"""Client-rendered boards: scan anchors inside a headless browser."""

from __future__ import annotations

import re
from abc import abstractmethod
from collections.abc import Callable

import structlog

from collectors.adapters.base import BaseAdapter, unique_by_url
from collectors.browser import BrowserSession
from parsing.anchors import Anchor, anchors_from_rendered
from schemas import NOT_LISTED, RawJobRecord, SourceType

logger = structlog.get_logger(__name__)

SessionFactory = Callable[[], BrowserSession]


class RenderedBoardAdapter(BaseAdapter):
    """Render the careers page, then filter its same-origin anchors.

    Each call opens its own session through ``session_factory`` and releases
    it before returning, on success and on error alike.
    """

    wait_until: str = "networkidle"
    min_title_length: int = 1

    def __init__(
        self,
        session_factory: SessionFactory,
        settle_ms: int = 1_500,
        portfolio: str = "",
    ):
        super().__init__(portfolio)
        self.session_factory = session_factory
        self.settle_ms = settle_ms

    async def extract(self, company_name: str, careers_url: str) -> list[RawJobRecord]:
        async with self.session_factory() as session:
            entries = await session.scan_anchors(
                careers_url,
                wait_until=self.wait_until,
                settle_ms=self.settle_ms,
            )

        records: list[RawJobRecord] = []
        for anchor in anchors_from_rendered(entries):
            if len(anchor.title) < self.min_title_length or not self.accepts(anchor):
                continue
            records.append(
                self.make_record(
                    company_name,
                    careers_url,
                    title=anchor.title,
                    job_url=anchor.url,
                    location=self.location_for(anchor),
                )
            )

        logger.debug(
            "rendered_scan",
            source=self.source_type.value,
            anchors=len(entries),
            kept=len(records),
        )
        return unique_by_url(records)

    @abstractmethod
    def accepts(self, anchor: Anchor) -> bool:
        """Whether a rendered anchor points at a job posting."""

    def location_for(self, anchor: Anchor) -> str:
        return NOT_LISTED


_UUID = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.I)


class AshbyAdapter(RenderedBoardAdapter):
    """Ashby job links carry a UUID; the surrounding card hints at work mode."""

    source_type = SourceType.ASHBY
    wait_until = "domcontentloaded"

    def accepts(self, anchor: Anchor) -> bool:
        return bool(_UUID.search(anchor.url))

    def location_for(self, anchor: Anchor) -> str:
        card = anchor.card_text.lower()
        if " remote " in card or card.startswith("remote"):
            return "Remote"
        if " hybrid " in card or card.startswith("hybrid"):
            return "Hybrid"
        return NOT_LISTED


class WorkdayAdapter(RenderedBoardAdapter):
    source_type = SourceType.WORKDAY
    min_title_length = 3

    def accepts(self, anchor: Anchor) -> bool:
        return "/job/" in anchor.href


_SCALIS_JOB_PATH = re.compile(r"/job/[0-9a-f-]{20,}", re.I)


class ScalisAdapter(RenderedBoardAdapter):
    source_type = SourceType.SCALIS
    min_title_length = 3

    def accepts(self, anchor: Anchor) -> bool:
        return "/job/" in anchor.href and bool(_SCALIS_JOB_PATH.search(anchor.url))
