"""Fallback for careers pages on no recognised platform."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from collectors.adapters.static_board import StaticBoardAdapter
from core.ids import path_without_trailing_slash
from parsing.anchors import Anchor
from parsing.normalizers import clean_anchor_title
from schemas import SourceType

_ALLOW_PATH = re.compile(r"(/job/|/jobs/|/positions/|/openings/|/careers/|/careers$)", re.I)
_BLOCK_URL = re.compile(
    r"(privacy|security|disclosure|login|signup|terms|cookie|press|blog|about|product|pricing)",
    re.I,
)


class CustomHtmlAdapter(StaticBoardAdapter):
    """Heuristic anchor scan for arbitrary careers pages.

    A link qualifies when its path looks like a job listing, nothing in its
    URL looks like site chrome, and it is not the careers page linking to
    itself. Titles go through :func:`~parsing.normalizers.clean_anchor_title`.
    """

    source_type = SourceType.CUSTOM_HTML

    def accepts(self, anchor: Anchor, careers_url: str) -> bool:
        if _BLOCK_URL.search(anchor.url):
            return False
        if not _ALLOW_PATH.search(urlsplit(anchor.url).path):
            return False
        return path_without_trailing_slash(anchor.url) != path_without_trailing_slash(careers_url)

    def title_for(self, anchor: Anchor) -> str | None:
        return clean_anchor_title(anchor.title)
