"""
tests/test_short_circuit.py

Test suite for the short-circuit check.

Covers the detection rule end to end (source text -> findings):
- simple right operands are never flagged
- call / binary right operands are flagged with exact spans
- left operands, ?? and non-call shapes are ignored
- chained and nested expressions, finding order
- syntax errors and hand-built malformed nodes
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shortcircuit_lint import (
    CallExpression,
    GenericNode,
    LogicalExpression,
    Severity,
    SourceSpan,
    detect,
    is_complex_expression,
    lint_document,
)


def flagged(source: str) -> list[str]:
    """Text of every flagged operand, in report order."""
    return [f.span.slice(source) for f in lint_document(source)]


# ============================================================================
# Simple operands
# ============================================================================

class TestSimpleOperands:
    """Identifiers and literals on the right are never flagged."""

    @pytest.mark.parametrize("source", [
        "a && b",
        "a || b",
        "a && 1",
        "a || 'fallback'",
        "a && null",
        "a || undefined",
        "a && true",
    ])
    def test_no_findings(self, source):
        assert lint_document(source) == []

    def test_member_access_not_flagged(self):
        assert lint_document("a && obj.prop") == []

    def test_new_expression_not_flagged(self):
        assert lint_document("a && new Foo()") == []

    def test_tagged_template_not_flagged(self):
        assert lint_document("a && tag`text`") == []

    def test_assignment_not_flagged(self):
        assert lint_document("a && (b = 1)") == []


# ============================================================================
# Complex right operands
# ============================================================================

class TestComplexOperands:
    """Calls and binary expressions on the right are flagged."""

    def test_call_expression_flagged(self):
        source = "a && foo()"
        findings = lint_document(source)

        assert len(findings) == 1
        assert findings[0].span.slice(source) == "foo()"
        assert findings[0].span.start_offset == 5
        assert findings[0].span.end_offset == 10

    def test_binary_expression_flagged_without_parentheses(self):
        source = "x || (y + 1)"
        findings = lint_document(source)

        assert len(findings) == 1
        assert findings[0].span.slice(source) == "y + 1"

    def test_comparison_flagged(self):
        assert flagged("a && b === c") == ["b === c"]

    def test_method_call_flagged(self):
        assert flagged("user || store.load(id)") == ["store.load(id)"]

    def test_message_and_severity(self):
        finding = lint_document("a && foo()")[0]

        assert finding.message == "Warning: Short-circuit may skip evaluation of 'foo()'"
        assert finding.severity is Severity.WARNING
        assert finding.kind == "short_circuit"

    def test_inside_if_condition(self):
        assert flagged("if (ready && check(x)) { go(); }") == ["check(x)"]

    def test_multiline_span(self):
        source = "a &&\n  foo(1,\n    2)"
        span = lint_document(source)[0].span

        assert (span.start_line, span.start_column) == (1, 2)
        assert (span.end_line, span.end_column) == (2, 6)
        assert span.slice(source) == "foo(1,\n    2)"

    def test_non_ascii_text_uses_character_positions(self):
        source = 'x = "é" || go("ü")'
        finding = lint_document(source)[0]

        assert finding.span.slice(source) == 'go("ü")'
        assert finding.span.start_column == source.index("go")
        assert finding.message == "Warning: Short-circuit may skip evaluation of 'go(\"ü\")'"

    def test_display_position_is_one_based(self):
        finding = lint_document("a && foo()")[0]
        assert (finding.line, finding.col) == (1, 6)


# ============================================================================
# Operators and operand sides
# ============================================================================

class TestOperandSelection:
    """Only the direct right operand of && / || is inspected."""

    def test_left_operand_never_flagged(self):
        assert lint_document("foo() && b") == []

    def test_left_binary_never_flagged(self):
        assert lint_document("a + 1 || b") == []

    def test_nullish_coalescing_not_flagged(self):
        assert lint_document("a ?? foo()") == []

    def test_plain_binary_operator_not_a_trigger(self):
        assert lint_document("a + foo()") == []

    def test_chain_flags_only_final_call(self):
        assert flagged("a && b && bar()") == ["bar()"]

    def test_chain_flags_each_link(self):
        assert flagged("a && f() && g()") == ["f()", "g()"]

    def test_logical_right_operand_not_flagged_itself(self):
        assert flagged("a && (b || c())") == ["c()"]

    def test_nested_inside_call_arguments(self):
        # preorder: the outer operand is reported before the inner one
        assert flagged("a && f(b || g())") == ["f(b || g())", "g()"]

    @pytest.mark.parametrize("source", [
        "import x from 'y'; a && f()",
        "export const v = a && f();",
        "a && f(<div/>)",
        "#!/usr/bin/env node\na && f()",
    ])
    def test_module_jsx_and_hashbang_sources_are_linted(self, source):
        findings = lint_document(source)
        assert [f.span.slice(source).startswith("f(") for f in findings] == [True]

    def test_ternary_right_operand_not_flagged(self):
        assert lint_document("a && (b ? c() : d)") == []


# ============================================================================
# Failures and malformed input
# ============================================================================

class TestFailures:

    @pytest.mark.parametrize("source", [
        "a && (",
        "a && foo(",
        "function (",
        "}}}",
    ])
    def test_syntax_error_yields_no_findings(self, source):
        assert lint_document(source) == []

    def test_empty_source(self):
        assert lint_document("") == []

    def test_right_operand_without_span_skipped(self):
        root = LogicalExpression("&&", GenericNode("Identifier"), CallExpression())
        assert detect("a && foo()", root) == []

    def test_right_operand_with_out_of_range_span_skipped(self):
        span = SourceSpan(5, 50, 0, 5, 0, 50)
        root = LogicalExpression("||", GenericNode("Identifier"), CallExpression(span=span))
        assert detect("a || foo()", root) == []

    def test_missing_right_operand_skipped(self):
        root = LogicalExpression("&&", GenericNode("Identifier"), None)
        assert detect("a &&", root) == []

    def test_lone_surrogate_does_not_raise(self):
        source = "// \udcff\na && foo()"
        findings = lint_document(source)

        assert [f.span.slice(source) for f in findings] == ["foo()"]
        assert (findings[0].line, findings[0].col) == (2, 6)
        assert findings[0].span.start_offset == source.index("foo")

    def test_lone_surrogate_in_operand(self):
        source = "a && foo('\udcff')"
        assert isinstance(lint_document(source), list)

    def test_hand_built_tree_flagged(self):
        text = "a || foo()"
        call = CallExpression(GenericNode("Identifier"), (), SourceSpan(5, 10, 0, 5, 0, 10))
        root = GenericNode("Program", (LogicalExpression("||", GenericNode("Identifier"), call),))

        findings = detect(text, root)

        assert [f.span.slice(text) for f in findings] == ["foo()"]


# ============================================================================
# Determinism
# ============================================================================

class TestDeterminism:

    def test_repeated_runs_are_equal(self):
        source = "a && f(b || g())\nx || y * 2"
        assert lint_document(source) == lint_document(source)

    def test_long_chain_does_not_overflow(self):
        source = "f()" + " && f()" * 1999
        assert len(lint_document(source)) == 1999


class TestIsComplexExpression:

    def test_call(self):
        assert is_complex_expression(CallExpression())

    def test_generic(self):
        assert not is_complex_expression(GenericNode("Identifier"))

    def test_none(self):
        assert not is_complex_expression(None)
