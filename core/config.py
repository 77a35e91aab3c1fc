"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when the optional config file cannot be loaded or validated."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class Settings(BaseSettings):
    """Application settings from environment, .env and an optional YAML file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Inputs / outputs
    roster_path: Path = Path("data/companies.csv")
    data_dir: Path = Path("data")
    site_dir: Path = Path("site")

    # Labelling
    portfolio: str = "Active Capital"

    # HTTP client
    user_agent: str = "Mozilla/5.0 (active-portfolio-jobs-bot)"
    request_timeout: float = 30.0

    # Browser rendering
    render_timeout_ms: int = 60_000
    render_settle_ms: int = 1_500
    headless: bool = True

    # Runtime
    verbose: int = 0
    log_level: str = "INFO"

    @field_validator("verbose", mode="before")
    @classmethod
    def _coerce_verbose(cls, v: Any) -> int:
        if isinstance(v, bool):
            return 2 if v else 0
        if isinstance(v, str):
            low = v.strip().lower()
            # Try numeric first so "1", "2", "3" stay as-is
            try:
                return int(low)
            except ValueError:
                pass
            if low in ("true", "yes"):
                return 2
            return 0
        return int(v)

    @property
    def raw_jobs_path(self) -> Path:
        return self.data_dir / "raw_jobs.json"

    @property
    def coverage_path(self) -> Path:
        return self.site_dir / "coverage.json"

    @property
    def clean_jobs_path(self) -> Path:
        return self.site_dir / "jobs.json"

    @property
    def rejected_jobs_path(self) -> Path:
        return self.site_dir / "rejected_jobs.json"

    @property
    def companies_path(self) -> Path:
        return self.site_dir / "companies.json"

    @property
    def last_updated_path(self) -> Path:
        return self.site_dir / "last_updated.json"


def load_config(config_path: Path | None = None, **overrides: Any) -> Settings:
    """Load settings.

    Values from the YAML file at ``config_path`` override the environment;
    keyword ``overrides`` (e.g. from CLI flags) override both. A missing file
    is not an error.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation
    """
    data: dict[str, Any] = {}
    if config_path is not None and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
        data.update(loaded)

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError("Invalid configuration", errors=e.errors()) from e
