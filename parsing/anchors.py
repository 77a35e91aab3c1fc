"""Anchor scanning over fetched HTML."""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from core.ids import absolute_url, same_origin
from parsing.normalizers import collapse_whitespace


@dataclass(frozen=True)
class Anchor:
    """A same-origin link found on a careers page."""

    href: str  # attribute value as written in the page
    url: str  # resolved against the careers URL
    title: str  # whitespace-collapsed visible text
    card_text: str = ""


def scan_anchors(html: str | bytes, base_url: str) -> list[Anchor]:
    """Return every ``a[href]`` that resolves to the same origin as ``base_url``.

    Cross-origin and unresolvable links are always discarded, whatever their
    text says.
    """
    soup = BeautifulSoup(html, "lxml")
    anchors: list[Anchor] = []

    for a_tag in soup.find_all("a", href=True):
        if not isinstance(a_tag, Tag):
            continue
        href = str(a_tag.get("href", "")).strip()
        if not href or href.startswith("#"):
            continue
        url = absolute_url(base_url, href)
        if url is None or not same_origin(base_url, url):
            continue
        anchors.append(
            Anchor(
                href=href,
                url=url,
                title=collapse_whitespace(a_tag.get_text()),
            )
        )

    return anchors


def anchors_from_rendered(entries: list[dict[str, str]]) -> list[Anchor]:
    """Convert entries returned by the in-browser scan into :class:`Anchor`.

    The page script already applied the origin check against the rendered
    document's own location.
    """
    anchors: list[Anchor] = []
    for entry in entries:
        url = str(entry.get("url") or "")
        if not url:
            continue
        anchors.append(
            Anchor(
                href=str(entry.get("href") or ""),
                url=url,
                title=collapse_whitespace(entry.get("title")),
                card_text=collapse_whitespace(entry.get("card_text")),
            )
        )
    return anchors
