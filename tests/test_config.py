"""Tests for settings loading."""

from pathlib import Path

import pytest

from core.config import ConfigError, Settings, load_config


def test_defaults():
    settings = Settings()
    assert settings.raw_jobs_path == Path("data/raw_jobs.json")
    assert settings.clean_jobs_path == Path("site/jobs.json")
    assert settings.coverage_path == Path("site/coverage.json")
    assert settings.render_timeout_ms == 60_000


def test_missing_file_is_not_an_error(tmp_path):
    settings = load_config(tmp_path / "absent.yaml")
    assert settings.portfolio == "Active Capital"


def test_yaml_then_overrides(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("portfolio: Seed Fund\nrequest_timeout: 5\nheadless: false\n", encoding="utf-8")

    settings = load_config(config, roster_path=tmp_path / "r.csv", verbose=None)

    assert settings.portfolio == "Seed Fund"
    assert settings.request_timeout == 5.0
    assert settings.headless is False
    assert settings.roster_path == tmp_path / "r.csv"


@pytest.mark.parametrize("value,expected", [(True, 2), (False, 0), ("true", 2), ("3", 3), ("no", 0), (1, 1)])
def test_verbose_coercion(value, expected):
    assert Settings(verbose=value).verbose == expected


def test_invalid_yaml(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("portfolio: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(config)


def test_non_mapping(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(config)


def test_validation_errors_are_collected(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("render_timeout_ms: forever\n", encoding="utf-8")
    with pytest.raises(ConfigError) as exc_info:
        load_config(config)
    assert exc_info.value.errors
    assert exc_info.value.errors[0]["loc"] == ("render_timeout_ms",)
