"""Provider adapters, one per source type.

- API boards (Greenhouse)
- Static HTML boards (Rippling, Breezy, Built In)
- Client-rendered boards (Ashby, Workday, Scalis)
- Generic careers pages (fallback)

The set is closed: ``build_adapters`` maps every :class:`SourceType` to its
handler and a new vendor is added here and in the classifier together.
"""

from __future__ import annotations

from functools import partial

from collectors.adapters.base import BaseAdapter, unique_by_url
from collectors.adapters.custom_html import CustomHtmlAdapter
from collectors.adapters.greenhouse import GreenhouseAdapter
from collectors.adapters.rendered_board import (
    AshbyAdapter,
    RenderedBoardAdapter,
    ScalisAdapter,
    SessionFactory,
    WorkdayAdapter,
)
from collectors.adapters.static_board import (
    BreezyAdapter,
    BuiltInAdapter,
    RipplingAdapter,
    StaticBoardAdapter,
)
from collectors.browser import BrowserSession
from collectors.http_client import HttpClient
from core.config import Settings
from schemas import SourceType

AdapterTable = dict[SourceType, BaseAdapter]


def build_adapters(
    client: HttpClient,
    settings: Settings,
    session_factory: SessionFactory | None = None,
) -> AdapterTable:
    """Instantiate the handler for every source type."""
    session_factory = session_factory or partial(
        BrowserSession,
        user_agent=settings.user_agent,
        headless=settings.headless,
        timeout_ms=settings.render_timeout_ms,
    )
    portfolio = settings.portfolio
    settle_ms = settings.render_settle_ms

    return {
        SourceType.GREENHOUSE: GreenhouseAdapter(client, portfolio),
        SourceType.RIPPLING: RipplingAdapter(client, portfolio),
        SourceType.BREEZY: BreezyAdapter(client, portfolio),
        SourceType.BUILT_IN: BuiltInAdapter(client, portfolio),
        SourceType.ASHBY: AshbyAdapter(session_factory, settle_ms, portfolio),
        SourceType.WORKDAY: WorkdayAdapter(session_factory, settle_ms, portfolio),
        SourceType.SCALIS: ScalisAdapter(session_factory, settle_ms, portfolio),
        SourceType.CUSTOM_HTML: CustomHtmlAdapter(client, portfolio),
    }


def get_adapter(adapters: AdapterTable, source_type: SourceType) -> BaseAdapter | None:
    """Handler for ``source_type``, or None when it has none."""
    return adapters.get(source_type)


__all__ = [
    "AdapterTable",
    "AshbyAdapter",
    "BaseAdapter",
    "BreezyAdapter",
    "BuiltInAdapter",
    "CustomHtmlAdapter",
    "GreenhouseAdapter",
    "RenderedBoardAdapter",
    "RipplingAdapter",
    "ScalisAdapter",
    "SessionFactory",
    "StaticBoardAdapter",
    "WorkdayAdapter",
    "build_adapters",
    "get_adapter",
    "unique_by_url",
]
