"""
shortcircuit_lint

Static check for JavaScript expressions like `a && rhs` / `a || rhs` whose
right operand is a call or binary expression, i.e. work that short-circuit
evaluation may silently skip.

Pipeline:
- Source parsing with tree-sitter (JavaScript grammar) into a small
  ESTree-shaped node model
- Preorder tree walk
- Registered checks producing Findings with exact source spans
"""

ANALYSIS_NAME = "shortcircuit-lint"
ANALYSIS_VERSION = "1.0"

from shortcircuit_lint.errors import LintError, ParseFailure  # noqa: E402
from shortcircuit_lint.issues import Finding, Severity, make_finding  # noqa: E402
from shortcircuit_lint.nodes import (  # noqa: E402
    BinaryExpression,
    CallExpression,
    GenericNode,
    LogicalExpression,
    SourceSpan,
    SyntaxNode,
)
from shortcircuit_lint.source_parser import SourceParser, parse_javascript_source  # noqa: E402
from shortcircuit_lint.walker import iter_nodes, walk  # noqa: E402
from shortcircuit_lint.checks.short_circuit import detect, is_complex_expression  # noqa: E402
from shortcircuit_lint.linter import Linter, lint_document, lint_file  # noqa: E402


__all__ = [
    "ANALYSIS_NAME",
    "ANALYSIS_VERSION",

    # Errors
    "LintError",
    "ParseFailure",

    # Syntax tree
    "SourceSpan",
    "SyntaxNode",
    "LogicalExpression",
    "BinaryExpression",
    "CallExpression",
    "GenericNode",
    "SourceParser",
    "parse_javascript_source",
    "iter_nodes",
    "walk",

    # Findings
    "Finding",
    "Severity",
    "make_finding",

    # Analysis
    "detect",
    "is_complex_expression",
    "Linter",
    "lint_document",
    "lint_file",
]
