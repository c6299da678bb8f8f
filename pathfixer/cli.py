#!/usr/bin/env python3
"""
Fix hard-coded paths in an HTML file for GitHub Pages deployment.

The mirrored site assumes it is served from the domain root. This rewrites
CSS/asset references, form actions, internal links and the JS redirect so
they resolve under the project subdirectory (PATHFIX_BASE_PATH).

Usage:
    python -m pathfixer --dry-run                          # preview only
    python -m pathfixer --file=www.fecredit.com.vn/index.html
    fix-paths --dry-run --file=path/to/page.html

Options:
    --dry-run    Preview changes without modifying files
    --file       Single file to process (default: PATHFIX_DEFAULT_FILE)
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pathfixer.adapters.console_report import render_header, render_report
from pathfixer.adapters.filesystem_store import LocalTextFileStore
from pathfixer.core.domain.exceptions import TargetFileNotFoundError
from pathfixer.core.domain.rules import build_rules
from pathfixer.core.use_cases.rewrite_paths import RewritePaths
from pathfixer.shared.config import Settings, settings
from pathfixer.shared.logging_config import configure_logging


def build_parser(default_file: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fix-paths",
        allow_abbrev=False,
        description="Rewrite root-absolute paths in an HTML file for a GitHub Pages subdirectory.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview changes without modifying files.",
    )
    parser.add_argument(
        "--file",
        type=str,
        default=default_file,
        help=f"File to process (default: {default_file}).",
    )
    return parser


def emit(lines: List[str]) -> None:
    print("\n".join(lines))


def main(argv: Optional[List[str]] = None, config: Optional[Settings] = None) -> int:
    config = config or settings
    args = build_parser(config.DEFAULT_FILE).parse_args(argv)
    configure_logging(config.LOG_LEVEL, config.LOG_FORMAT)

    emit(render_header(args.file, args.dry_run))

    use_case = RewritePaths(
        store=LocalTextFileStore(),
        rules=build_rules(config.rewrite_config()),
        preview_limit=config.PREVIEW_LIMIT,
    )

    try:
        report = use_case.execute(args.file, dry_run=args.dry_run)
    except TargetFileNotFoundError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    emit(render_report(report, preview_limit=config.PREVIEW_LIMIT))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
