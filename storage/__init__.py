"""Storage layer: roster input and JSON dataset output."""

from storage.roster import RosterError, read_roster
from storage.store import DatasetStore, FileDatasetStore, write_json_atomic

__all__ = [
    "DatasetStore",
    "FileDatasetStore",
    "RosterError",
    "read_roster",
    "write_json_atomic",
]
