"""File-based storage for raw and published datasets."""

from __future__ import annotations

import json
import os
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel

from core.config import Settings
from schemas import RawJobRecord

logger = structlog.get_logger(__name__)


def write_json_atomic(path: Path, data: Any) -> None:
    """Pretty-print ``data`` to ``path`` as a complete overwrite.

    The file is written beside its destination and moved into place, so a
    reader never sees a partial file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _dump(records: Sequence[BaseModel]) -> list[dict[str, Any]]:
    return [r.model_dump(mode="json") for r in records]


class DatasetStore(ABC):
    """Abstract base for dataset storage."""

    @abstractmethod
    def save(self, name: str, records: Sequence[BaseModel] | BaseModel) -> Path:
        """Write one dataset, replacing any previous version."""

    @abstractmethod
    def load_raw_jobs(self) -> list[RawJobRecord]:
        """Load the raw-job dataset written by the scrape pass."""


class FileDatasetStore(DatasetStore):
    """JSON files on disk.

    Structure:
        data_dir/
            raw_jobs.json       (list of RawJobRecord)
        site_dir/
            coverage.json       (list of CoverageRecord)
            jobs.json           (list of CleanJobRecord)
            rejected_jobs.json  (list of RawJobRecord)
            companies.json      (list of CompanySummary)
            last_updated.json   (RunMetadata)
    """

    def __init__(self, paths: dict[str, Path]) -> None:
        self.paths = paths

    @classmethod
    def from_settings(cls, settings: Settings) -> FileDatasetStore:
        return cls(
            {
                "raw_jobs": settings.raw_jobs_path,
                "coverage": settings.coverage_path,
                "clean_jobs": settings.clean_jobs_path,
                "rejected_jobs": settings.rejected_jobs_path,
                "companies": settings.companies_path,
                "last_updated": settings.last_updated_path,
            }
        )

    def path_for(self, name: str) -> Path:
        try:
            return self.paths[name]
        except KeyError:
            raise ValueError(f"Unknown dataset: {name}") from None

    def save(self, name: str, records: Sequence[BaseModel] | BaseModel) -> Path:
        path = self.path_for(name)
        if isinstance(records, BaseModel):
            write_json_atomic(path, records.model_dump(mode="json"))
            count = 1
        else:
            write_json_atomic(path, _dump(records))
            count = len(records)
        logger.debug("dataset_saved", dataset=name, records=count, path=str(path))
        return path

    def load_raw_jobs(self) -> list[RawJobRecord]:
        """Load raw jobs.

        Raises:
            OSError: If the file cannot be read
            ValueError: If it is not a JSON array of job records
        """
        path = self.path_for("raw_jobs")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a JSON array")
        return [RawJobRecord.model_validate(item) for item in data]
