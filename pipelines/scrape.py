"""Scrape pass entry point: roster -> raw jobs + coverage report."""

from __future__ import annotations

import json
import sys

from core.config import ConfigError
from orchestration.runner import run_scrape
from pipelines.cli import base_parser, boot


def main(argv: list[str] | None = None) -> int:
    """Entry point for the scrape pass.

    Returns 0 once the run completes, whatever happened to individual
    companies; 1 on a fatal error such as an unreadable roster.
    """
    args = base_parser("Scrape every careers page in the roster.").parse_args(argv)

    try:
        settings = boot(args)
        ctx = run_scrape(settings)
    except ConfigError as e:
        details = "".join(f"\n  {err.get('loc')}: {err.get('msg')}" for err in e.errors)
        print(f"error: {e}{details}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(
        f"Wrote {ctx.metrics.num_raw_jobs - ctx.metrics.num_duplicates_dropped} raw jobs "
        f"for {ctx.metrics.num_companies} companies."
    )
    if settings.verbose:
        print(json.dumps(ctx.summary(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
