"""Shared command-line plumbing for the pipeline entry points."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from core.config import Settings, load_config
from core.log import configure_logging


def base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(os.getenv("JOBS_CONFIG", "config/settings.yaml")),
        help="Optional YAML settings file (default: %(default)s)",
    )
    parser.add_argument(
        "--roster",
        type=Path,
        default=None,
        help="CSV with company_name,careers_url columns",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=None,
        help="Increase log verbosity (repeatable)",
    )
    return parser


def boot(args: argparse.Namespace) -> Settings:
    """Load settings from the parsed arguments and configure logging."""
    settings = load_config(
        args.config,
        roster_path=args.roster,
        verbose=args.verbose,
    )
    configure_logging(settings.log_level, settings.verbose)
    return settings
