"""Render findings for a terminal or as JSON."""

from __future__ import annotations

import json
from typing import Iterable, Tuple

from .issues import Finding


def format_text(path: str, finding: Finding) -> str:
    """`path:line:col: warning: message`, with 1-based line and column."""
    return f"{path}:{finding.line}:{finding.col}: {finding.severity.value}: {finding.message}"


def finding_to_dict(path: str, finding: Finding) -> dict:
    span = finding.span
    return {
        "path": path,
        "kind": finding.kind,
        "severity": finding.severity.value,
        "message": finding.message,
        "line": span.start_line + 1,
        "column": span.start_column + 1,
        "end_line": span.end_line + 1,
        "end_column": span.end_column + 1,
        "start_offset": span.start_offset,
        "end_offset": span.end_offset,
    }


def findings_to_json(results: Iterable[Tuple[str, Finding]]) -> str:
    return json.dumps([finding_to_dict(path, f) for path, f in results], indent=2)
