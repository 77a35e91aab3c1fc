"""Build pass entry point: raw jobs -> clean, rejected and company datasets."""

from __future__ import annotations

import sys

from core.config import ConfigError
from orchestration.runner import run_build
from pipelines.cli import base_parser, boot


def main(argv: list[str] | None = None) -> int:
    """Entry point for the build pass. Returns the process exit code."""
    args = base_parser("Normalize scraped jobs and publish the site datasets.").parse_args(argv)

    try:
        settings = boot(args)
        build = run_build(settings)
    except ConfigError as e:
        details = "".join(f"\n  {err.get('loc')}: {err.get('msg')}" for err in e.errors)
        print(f"error: {e}{details}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    raw_count = build.metadata.raw_count if build.metadata else 0
    print(f"Built site outputs: {len(build.clean)} jobs (from {raw_count} raw).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
