"""ID generation, hashing and URL utilities."""

from __future__ import annotations

import hashlib
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urljoin, urlsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}


def generate_run_id() -> str:
    """Generate a unique run ID.

    Format: YYYYMMDD_HHMMSS_<short_uuid>
    """
    now = datetime.now(UTC)
    short_uuid = uuid.uuid4().hex[:8]
    return f"{now.strftime('%Y%m%d_%H%M%S')}_{short_uuid}"


def utc_timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    moment = moment or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def fingerprint(text: str | bytes) -> str:
    """Stable SHA-1 hex digest used as a content-derived job id."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return hashlib.sha1(text).hexdigest()


def make_job_key(source_type: str, source_job_id: str) -> str:
    return f"{source_type}:{source_job_id}"


def resolve_job_key(record: Mapping[str, Any]) -> str:
    """Dedup identity for a raw job record.

    Falls back to ``source_type:source_job_id`` and then to the digest of the
    job URL when ``job_key`` is absent.
    """
    key = str(record.get("job_key") or "")
    if key:
        return key
    source_job_id = str(record.get("source_job_id") or "")
    if source_job_id:
        return make_job_key(str(record.get("source_type") or ""), source_job_id)
    return fingerprint(str(record.get("job_url") or ""))


def absolute_url(base: str, href: str) -> str | None:
    """Resolve ``href`` against ``base``; None when it cannot be resolved."""
    try:
        resolved = urljoin(base, href.strip())
        parts = urlsplit(resolved)
    except ValueError:
        return None
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return None
    return resolved


def _origin(url: str) -> tuple[str, str, int | None]:
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    port = parts.port or _DEFAULT_PORTS.get(scheme)
    return scheme, (parts.hostname or "").lower(), port


def same_origin(base_url: str, url: str) -> bool:
    """True when scheme, host and port of both URLs are identical."""
    try:
        base = _origin(base_url)
        other = _origin(url)
    except ValueError:
        return False
    if not base[1] or not other[1]:
        return False
    return base == other


def path_without_trailing_slash(url: str) -> str:
    return urlsplit(url).path.rstrip("/")
