"""Pure text clean-up for scraped job titles and locations.

Provider output is noisy: anchors capture body copy, departments and pay
ranges get glued onto titles, and work mode or geography often lives in the
title rather than a location field. :func:`normalize_job` repairs a raw
record with a fixed, order-sensitive chain of heuristics, or refuses it.
Changing the order changes the output on edge-case titles.
"""

from __future__ import annotations

import re
from typing import Any

from schemas import NOT_LISTED, CleanJobRecord, RawJobRecord

_WHITESPACE = re.compile(r"\s+")

# Anchor texts that are never job postings
_NON_JOB_TITLES = frozenset(
    {
        "careers",
        "get in touch",
        "get started",
        "log in",
        "login",
        "privacy policy",
        "security",
        "vulnerability disclosure",
        "powered by ashby",
    }
)
_NON_JOB_URL = re.compile(r"(privacy|security|disclosure|login|signup|ashbyhq\.com/?$)", re.I)

# Unrendered embedded-board placeholders, e.g. %JOB_TITLE%
_PLACEHOLDER = re.compile(r"%[A-Z0-9_]+%")

_SECTION_HEADERS = ("Responsibilities", "Description", "About the role")
_LONG_TITLE = 90
_SEPARATORS = (" — ", " - ", " | ")

DEPARTMENTS = (
    "Engineering",
    "Marketing",
    "Sales",
    "Product",
    "Operations",
    "Finance",
    "People",
    "Legal",
    "Design",
    "Support",
)
_DEPT = "|".join(DEPARTMENTS)
_TRAILING_DEPT = re.compile(rf"\s+\b({_DEPT})\b\s*$", re.I)
_DASH_DEPT = re.compile(rf"\s*-\s*\b({_DEPT})\b\s*$", re.I)
_BARE_DEPT = re.compile(rf"\b({_DEPT})\b$", re.I)

_FORWARD_DEPLOYED = re.compile(r"\bforward deployed\b", re.I)

_REMOTE = re.compile(r"\bremote\b")
_HYBRID = re.compile(r"\bhybrid\b")
_ONSITE = re.compile(r"\bon[-\s]?site\b|\bonsite\b")
_WORK_MODE_WORDS = re.compile(r"\b(remote|hybrid|on[-\s]?site|onsite)\b", re.I)

_BULLET = "•"

_COMP_NOISE = (
    re.compile(r"\$?\d{2,3}\s?[kK]\s?[–-]\s?\$?\d{2,3}\s?[kK].*$"),
    re.compile(r"£\s?\d.*$"),
    re.compile(r"\bOffers Equity\b.*$", re.I),
    re.compile(r"\bFull[-\s]?time\b.*$", re.I),
)

_GEO_DASH_SUFFIX = re.compile(r"\s-\s*([A-Za-z .]{3,40})$")
_GEO_PAREN_SUFFIX = re.compile(r"\(([^)]+)\)\s*$")
_WORK_MODE_TAIL = re.compile(r"\s-\s*(remote|hybrid|on[-\s]?site|onsite)\s*$", re.I)

# Dash suffixes that name a team, not a place
_NON_PLACE_HINTS = frozenset(
    {d.lower() for d in DEPARTMENTS}
    | {"platform", "infrastructure", "data", "growth", "security", "mobile", "backend", "frontend"}
)

# Generic-page anchor clean-up
_GLUED_AS = re.compile(r"([a-z])As\b")
_BODY_COPY_START = re.compile(r"\bAs (?:an|a|our)\b", re.I)
_SENTENCE_END = re.compile(r"[.!?]")
_ANCHOR_TITLE_MAX = 80
_ANCHOR_TITLE_WORDS = 10
_ANCHOR_TITLE_MIN = 6


def collapse_whitespace(value: Any) -> str:
    """Collapse runs of whitespace to one space and trim; None becomes ''."""
    if value is None:
        return ""
    return _WHITESPACE.sub(" ", str(value)).strip()


def first_line(value: Any) -> str:
    """First non-blank line of ``value``."""
    for line in str(value or "").splitlines():
        if line.strip():
            return line
    return ""


def is_missing_location(location: str) -> bool:
    return not location or location.lower() == NOT_LISTED.lower()


def _strip_department(title: str) -> str:
    # Dash form first: stripping " Sales" from "Manager - Sales" would leave "Manager -"
    title = _DASH_DEPT.sub("", title).strip()
    return _TRAILING_DEPT.sub("", title).strip()


def _strip_comp_noise(title: str) -> str:
    for pattern in _COMP_NOISE:
        title = pattern.sub("", title)
    return title.strip()


def _geo_hint(title: str) -> tuple[str, int] | None:
    """Trailing geography fragment and the index where its suffix starts."""
    for pattern in (_GEO_DASH_SUFFIX, _GEO_PAREN_SUFFIX):
        match = pattern.search(title)
        if not match or not match.group(1).strip():
            continue
        if pattern is _GEO_DASH_SUFFIX and match.group(1).strip().lower() in _NON_PLACE_HINTS:
            continue
        return match.group(1).strip(), match.start()
    return None


def _drop_work_mode(hint: str) -> str:
    """Remove work-mode words from a geo hint; whatever remains is geography."""
    return _WORK_MODE_WORDS.sub("", hint).strip(" -–—,/()")


def _synthesize_location(remote: bool, hybrid: bool, onsite: bool, geo: str) -> str:
    if remote:
        return f"Remote — {geo}" if geo else "Remote"
    if hybrid:
        return f"Hybrid — {geo}" if geo else "Hybrid"
    if onsite:
        return geo or "On-site"
    return geo


def normalize_job(raw: RawJobRecord) -> CleanJobRecord | None:
    """Clean ``raw.job_title`` and ``raw.job_location``.

    Returns None when the record is not a job posting. Never raises: every
    input is either accepted or rejected, and a rejected record is left
    untouched for the caller to route.
    """
    title = collapse_whitespace(first_line(raw.job_title))
    location = collapse_whitespace(raw.job_location)

    # 1. Junk anchors and junk URLs
    if len(title) < 3:
        return None
    if title.lower() in _NON_JOB_TITLES:
        return None
    if raw.job_url and _NON_JOB_URL.search(raw.job_url):
        return None

    # 2. Broken embedded-board templates
    if _PLACEHOLDER.search(title):
        return None

    # 3. Body copy captured with the heading
    for header in _SECTION_HEADERS:
        title = title.split(header, 1)[0].strip()

    # 4. Still paragraph-length: keep the first segment
    if len(title) > _LONG_TITLE:
        for separator in _SEPARATORS:
            title = title.split(separator, 1)[0]
        title = title.strip()

    # 5. Department labels appended by the board
    title = _strip_department(title)

    # 6. Qualifiers that are not places
    if _FORWARD_DEPLOYED.search(location):
        location = NOT_LISTED

    # 7. Work mode mentioned in the title
    lowered = title.lower()
    is_remote = bool(_REMOTE.search(lowered))
    is_hybrid = bool(_HYBRID.search(lowered))
    is_onsite = bool(_ONSITE.search(lowered))

    # 8. Bulleted metadata after the title
    if _BULLET in title:
        title = title.split(_BULLET, 1)[0].strip()

    # 9. Pay, equity and employment-type noise
    title = _strip_comp_noise(title)

    # 10. Geography at the tail of the title
    missing_location = is_missing_location(location)
    geo = ""
    hint = _geo_hint(title)
    if hint is not None:
        geo = _drop_work_mode(hint[0])
        if missing_location:
            title = title[: hint[1]].strip()
            title = _WORK_MODE_TAIL.sub("", title).strip()

    # 11. Second department pass
    title = _BARE_DEPT.sub("", title).strip()

    # 12. Location from work mode and geography
    if missing_location:
        location = _synthesize_location(is_remote, is_hybrid, is_onsite, geo)
    elif is_remote and "remote" not in location.lower():
        location = f"Remote — {location}"

    if not title:
        return None

    data = raw.model_dump()
    data["job_title"] = title
    data["job_location"] = location or NOT_LISTED
    return CleanJobRecord.model_validate(data)


def clean_anchor_title(text: str) -> str | None:
    """Recover a job title from the text of a link on a generic careers page.

    Returns None when what is left is too short to be a title.
    """
    title = collapse_whitespace(text)

    # "AI EngineerAs an engineer you will..." -> split heading from body copy
    title = _GLUED_AS.sub(r"\1 As", title)
    title = _BODY_COPY_START.split(title, 1)[0]
    for separator in (_BULLET, "|", "—"):
        title = title.split(separator, 1)[0]
    title = title.strip()

    if len(title) > _ANCHOR_TITLE_MAX:
        title = _SENTENCE_END.split(title, 1)[0].strip()
    if len(title) > _ANCHOR_TITLE_MAX:
        title = " ".join(title.split()[:_ANCHOR_TITLE_WORDS])

    if len(title) < _ANCHOR_TITLE_MIN or len(title.split()) < 2:
        return None
    return title
