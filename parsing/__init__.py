"""Parsing: anchor scanning and job title/location normalization."""

from parsing.anchors import Anchor, anchors_from_rendered, scan_anchors
from parsing.normalizers import (
    clean_anchor_title,
    collapse_whitespace,
    normalize_job,
)

__all__ = [
    "Anchor",
    "anchors_from_rendered",
    "clean_anchor_title",
    "collapse_whitespace",
    "normalize_job",
    "scan_anchors",
]
