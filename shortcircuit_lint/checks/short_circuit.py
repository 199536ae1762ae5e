"""Detect right operands of && / || that short-circuiting may skip."""

from __future__ import annotations

import logging

from ..context import AnalysisContext
from ..issues import Finding, make_finding
from ..nodes import LogicalExpression, SyntaxNode
from ..walker import walk

log = logging.getLogger(__name__)

KIND = "short_circuit"
SHORT_CIRCUIT_OPERATORS = frozenset({"&&", "||"})
COMPLEX_EXPRESSION_TYPES = frozenset({"CallExpression", "BinaryExpression"})


def is_complex_expression(node: SyntaxNode | None) -> bool:
    """Calls and binary expressions; identifiers, literals and the rest are not."""
    return node is not None and node.type in COMPLEX_EXPRESSION_TYPES


def detect(source_text: str, root: SyntaxNode) -> list[Finding]:
    """
    Flag every call or binary expression that is the direct right operand
    of a && or || expression.

    Findings are returned in preorder. Nodes without a span that indexes
    into source_text are skipped.
    """
    ctx = AnalysisContext(root, source_text)
    findings: list[Finding] = []

    def visit(node: SyntaxNode) -> None:
        if not isinstance(node, LogicalExpression):
            return
        if node.operator not in SHORT_CIRCUIT_OPERATORS:
            return

        right = node.right
        if not is_complex_expression(right):
            return

        span = right.span
        if span is None or not span.is_valid_for(source_text):
            log.debug("skipping %s operand without a usable span", right.type)
            return

        findings.append(
            make_finding(
                KIND,
                span,
                f"Warning: Short-circuit may skip evaluation of '{ctx.text(right)}'",
            )
        )

    walk(root, visit)
    return findings


def run(ctx: AnalysisContext) -> list[Finding]:
    return detect(ctx.source_text, ctx.root)
