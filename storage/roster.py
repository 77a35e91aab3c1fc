"""Company roster loading."""

from __future__ import annotations

import csv
from pathlib import Path

import structlog

from parsing.normalizers import collapse_whitespace
from schemas import Company

logger = structlog.get_logger(__name__)

REQUIRED_COLUMNS = ("company_name", "careers_url")


class RosterError(Exception):
    """Raised when the roster file is missing or malformed. Fatal to a run."""


def read_roster(path: Path) -> list[Company]:
    """Read companies from a CSV with ``company_name`` and ``careers_url`` columns.

    Rows missing either value are skipped. A repeated company name keeps its
    first row, so every company appears once downstream.

    Raises:
        RosterError: If the file cannot be read or lacks the required columns
    """
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            columns = [c.strip() for c in (reader.fieldnames or [])]
            missing = [c for c in REQUIRED_COLUMNS if c not in columns]
            if missing:
                raise RosterError(f"Roster {path} is missing columns: {', '.join(missing)}")
            rows = [{(k or "").strip(): v for k, v in row.items()} for row in reader]
    except OSError as e:
        raise RosterError(f"Could not read roster {path}: {e}") from e
    except csv.Error as e:
        raise RosterError(f"Malformed roster {path}: {e}") from e

    companies: list[Company] = []
    seen: set[str] = set()
    for row in rows:
        name = collapse_whitespace(row.get("company_name"))
        url = collapse_whitespace(row.get("careers_url"))
        if not name or not url:
            continue
        if name in seen:
            logger.warning("duplicate_company", company=name, careers_url=url)
            continue
        seen.add(name)
        companies.append(Company(company_name=name, careers_url=url))

    logger.debug("roster_loaded", path=str(path), companies=len(companies))
    return companies
