"""Map a careers URL to the platform family that serves it."""

from __future__ import annotations

from schemas import SourceType

# Ordered: vendor signatures first, first match wins. New vendors go above
# the fallback in ``classify``.
_SIGNATURES: tuple[tuple[tuple[str, ...], SourceType], ...] = (
    (("greenhouse.io",), SourceType.GREENHOUSE),
    (("ashbyhq.com",), SourceType.ASHBY),
    (("myworkday", "workday"), SourceType.WORKDAY),
    (("ats.rippling.com",), SourceType.RIPPLING),
    (("breezy.hr",), SourceType.BREEZY),
    (("builtinaustin.com",), SourceType.BUILT_IN),
    (("scalis.ai",), SourceType.SCALIS),
)


def classify(url: str) -> SourceType:
    """Return the source type for ``url``. Never fails; unknown URLs fall
    back to the generic HTML strategy."""
    lowered = (url or "").lower()
    for needles, source_type in _SIGNATURES:
        if any(needle in lowered for needle in needles):
            return source_type
    return SourceType.CUSTOM_HTML
