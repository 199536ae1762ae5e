"""Coordinator that parses a document and runs all checks."""

from __future__ import annotations

import logging
from pathlib import Path

from .checks import CHECKS
from .context import AnalysisContext
from .errors import ParseFailure
from .issues import Finding
from .nodes import SyntaxNode
from .source_parser import SourceParser
from .utils import decode_source

log = logging.getLogger(__name__)

JAVASCRIPT_SUFFIXES = (".js", ".mjs", ".cjs")


class Linter:
    """Wraps the analysis context and executes the registered checks."""

    def __init__(self, root: SyntaxNode, source_text: str):
        self.context = AnalysisContext(root, source_text)
        self.findings: list[Finding] = []
        self._run_checks()

    def _run_checks(self):
        for check in CHECKS:
            new_findings = check(self.context)
            for finding in new_findings:
                log.debug("finding: %s", finding)
            self.findings.extend(new_findings)


def lint_document(text: str) -> list[Finding]:
    """
    Parse text and return the findings of every check.

    A syntax error yields no findings; it is logged, not raised.
    """
    try:
        root = SourceParser().parse(text)
    except ParseFailure as e:
        log.warning("Error parsing JavaScript code: %s", e)
        return []
    return Linter(root, text).findings


def lint_file(path: str | Path) -> list[Finding]:
    """Read a file as UTF-8 and lint it."""
    path = Path(path)
    log.debug("lint sourcefile %s", path)
    return lint_document(decode_source(path.read_bytes()))


def is_javascript_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() in JAVASCRIPT_SUFFIXES
