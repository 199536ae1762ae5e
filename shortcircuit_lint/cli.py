#!/usr/bin/env python3
"""Command line entry point for the short-circuit linter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from . import ANALYSIS_NAME, ANALYSIS_VERSION
from .issues import Finding
from .linter import is_javascript_file, lint_document, lint_file
from .reporting import findings_to_json, format_text
from .utils import decode_source

log = logging.getLogger(__name__)

STDIN_LABEL = "<stdin>"

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def find_javascript_files(directory: Path) -> list[Path]:
    """All JavaScript files below directory, sorted for stable output."""
    return sorted(p for p in directory.rglob("*") if p.is_file() and is_javascript_file(p))


def iter_targets(paths: List[str]) -> Iterator[Path]:
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files = find_javascript_files(path)
            if not files:
                log.info("No JavaScript files found in %s", path)
            yield from files
        else:
            yield path


def collect_findings(paths: List[str]) -> Tuple[list[Tuple[str, Finding]], bool]:
    """
    Lint every target.

    Returns:
        (path, finding) pairs in target order, and whether any target
        could not be read
    """
    results: list[Tuple[str, Finding]] = []
    had_errors = False

    if not paths or paths == ["-"]:
        for finding in lint_document(decode_source(sys.stdin.buffer.read())):
            results.append((STDIN_LABEL, finding))
        return results, had_errors

    for path in iter_targets(paths):
        try:
            findings = lint_file(path)
        except OSError as e:
            log.error("Cannot read %s: %s", path, e)
            had_errors = True
            continue
        results.extend((str(path), f) for f in findings)

    return results, had_errors


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=ANALYSIS_NAME,
        description="Flag && / || expressions whose right operand is a call or binary expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file
  shortcircuit-lint src/app.js

  # All .js/.mjs/.cjs files below a directory, as JSON
  shortcircuit-lint --format json src/

  # Source from stdin
  cat app.js | shortcircuit-lint -
        """,
    )
    parser.add_argument("paths", nargs="*", help="Files or directories to lint ('-' for stdin)")
    parser.add_argument("--format", choices=("text", "json"), default="text",
                        help="Output format (default: text)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {ANALYSIS_VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    else:
        log_level = logging.WARNING
    logging.basicConfig(level=log_level, format="[%(levelname)s] %(message)s")

    results, had_errors = collect_findings(args.paths)

    if args.format == "json":
        print(findings_to_json(results))
    else:
        for path, finding in results:
            print(format_text(path, finding))

    if had_errors:
        return EXIT_ERROR
    return EXIT_FINDINGS if results else EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
