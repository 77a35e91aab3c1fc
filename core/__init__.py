"""Core infrastructure: config, run context, logging, and identity utilities."""

from core.config import ConfigError, Settings, load_config
from core.context import RunContext, RunStatus
from core.ids import (
    fingerprint,
    generate_run_id,
    make_job_key,
    resolve_job_key,
    same_origin,
    utc_timestamp,
)
from core.log import configure_logging

__all__ = [
    "ConfigError",
    "Settings",
    "load_config",
    "RunContext",
    "RunStatus",
    "configure_logging",
    "fingerprint",
    "generate_run_id",
    "make_job_key",
    "resolve_job_key",
    "same_origin",
    "utc_timestamp",
]
