"""
Tree-sitter based JavaScript source parser.

Parses source text with tree-sitter and converts the concrete tree into the
closed SyntaxNode model from shortcircuit_lint.nodes, using ESTree names for
the node kinds. Positions are converted from tree-sitter's byte offsets to
character offsets here and nowhere else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import tree_sitter

from .errors import ParseFailure
from .nodes import (
    BinaryExpression,
    CallExpression,
    GenericNode,
    LogicalExpression,
    SourceSpan,
    SyntaxNode,
)
from .utils import OffsetMap, create_javascript_parser, iter_ts_nodes

log = logging.getLogger(__name__)

LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})

# tree-sitter kind -> ESTree type, for the generic node kinds
ESTREE_TYPES = {
    "program": "Program",
    "expression_statement": "ExpressionStatement",
    "statement_block": "BlockStatement",
    "if_statement": "IfStatement",
    "return_statement": "ReturnStatement",
    "while_statement": "WhileStatement",
    "for_statement": "ForStatement",
    "lexical_declaration": "VariableDeclaration",
    "variable_declaration": "VariableDeclaration",
    "variable_declarator": "VariableDeclarator",
    "function_declaration": "FunctionDeclaration",
    "function_expression": "FunctionExpression",
    "arrow_function": "ArrowFunctionExpression",
    "identifier": "Identifier",
    "property_identifier": "Identifier",
    "shorthand_property_identifier": "Identifier",
    "undefined": "Identifier",
    "number": "Literal",
    "string": "Literal",
    "regex": "Literal",
    "true": "Literal",
    "false": "Literal",
    "null": "Literal",
    "template_string": "TemplateLiteral",
    "this": "ThisExpression",
    "member_expression": "MemberExpression",
    "subscript_expression": "MemberExpression",
    "assignment_expression": "AssignmentExpression",
    "augmented_assignment_expression": "AssignmentExpression",
    "ternary_expression": "ConditionalExpression",
    "unary_expression": "UnaryExpression",
    "update_expression": "UpdateExpression",
    "new_expression": "NewExpression",
    "await_expression": "AwaitExpression",
    "sequence_expression": "SequenceExpression",
    "object": "ObjectExpression",
    "array": "ArrayExpression",
}


@dataclass
class _Frame:
    ts_node: tree_sitter.Node
    pending: list[tree_sitter.Node]
    done: list[SyntaxNode] = field(default_factory=list)


class SourceParser:
    """
    JavaScript source parser using tree-sitter.

    Example:
        parser = SourceParser()
        root = parser.parse("ready && start()")
        print(root.type)   # "Program"

    tree-sitter recovers from syntax errors instead of failing, so a tree
    containing ERROR or MISSING nodes is reported as ParseFailure.
    """

    def __init__(self):
        self.parser = create_javascript_parser()

    def parse(self, text: str) -> SyntaxNode:
        """
        Parse JavaScript source text.

        Args:
            text: Source code

        Returns:
            Root node (a GenericNode of type "Program")

        Raises:
            ParseFailure: if the source contains a syntax error
        """
        offsets = OffsetMap(text)
        tree = self.parser.parse(offsets.source_bytes)
        root = tree.root_node
        if root.has_error:
            failure = _parse_failure(root, offsets)
            log.debug("parse failed: %s", failure)
            raise failure
        return _TreeConverter(offsets).convert(root)


def _parse_failure(root: tree_sitter.Node, offsets: OffsetMap) -> ParseFailure:
    for node in iter_ts_nodes(root):
        if node == root:
            continue
        if node.type == "ERROR" or node.is_missing:
            line, col = node.start_point
            column = offsets.char_column(node.start_byte, col)
            if node.is_missing:
                message = f"Missing '{node.type}'"
            else:
                message = "Unexpected token"
            return ParseFailure(message, line=line + 1, column=column + 1)
    return ParseFailure("Syntax error")


class _TreeConverter:
    """Builds SyntaxNodes bottom-up with an explicit stack."""

    def __init__(self, offsets: OffsetMap):
        self.offsets = offsets

    def convert(self, root: tree_sitter.Node) -> SyntaxNode:
        frames = [self._frame(root)]
        while True:
            frame = frames[-1]
            if frame.pending:
                frames.append(self._frame(frame.pending.pop()))
                continue

            frames.pop()
            node = self._build(frame.ts_node, frame.done)
            if not frames:
                return node
            frames[-1].done.append(node)

    def _frame(self, ts_node: tree_sitter.Node) -> _Frame:
        return _Frame(ts_node, list(reversed(self._slots(ts_node))))

    def _slots(self, ts_node: tree_sitter.Node) -> list[tree_sitter.Node]:
        """Child nodes to convert, in source order."""
        if ts_node.type == "binary_expression":
            left = ts_node.child_by_field_name("left")
            right = ts_node.child_by_field_name("right")
            if left is not None and right is not None:
                return [left, right]
        elif ts_node.type == "call_expression":
            function = ts_node.child_by_field_name("function")
            arguments = ts_node.child_by_field_name("arguments")
            if function is not None and arguments is not None:
                if arguments.type == "arguments":
                    return [function] + _named_children(arguments)
                return [function, arguments]
        return _named_children(ts_node)

    def _build(self, ts_node: tree_sitter.Node, children: list[SyntaxNode]) -> SyntaxNode:
        kind = ts_node.type
        span = self._span(ts_node)

        if kind == "parenthesized_expression" and len(children) == 1:
            return children[0]

        if kind == "binary_expression":
            operator = _operator(ts_node)
            if operator is not None and len(children) == 2:
                left, right = children
                if operator in LOGICAL_OPERATORS:
                    return LogicalExpression(operator, left, right, span)
                return BinaryExpression(operator, left, right, span)

        if kind == "call_expression" and children:
            arguments = ts_node.child_by_field_name("arguments")
            if arguments is not None and arguments.type == "template_string":
                return GenericNode("TaggedTemplateExpression", tuple(children), span)
            return CallExpression(children[0], tuple(children[1:]), span)

        return GenericNode(ESTREE_TYPES.get(kind, kind), tuple(children), span)

    def _span(self, ts_node: tree_sitter.Node) -> SourceSpan:
        start_line, start_col = ts_node.start_point
        end_line, end_col = ts_node.end_point
        return SourceSpan(
            start_offset=self.offsets.char_offset(ts_node.start_byte),
            end_offset=self.offsets.char_offset(ts_node.end_byte),
            start_line=start_line,
            start_column=self.offsets.char_column(ts_node.start_byte, start_col),
            end_line=end_line,
            end_column=self.offsets.char_column(ts_node.end_byte, end_col),
        )


def _named_children(ts_node: tree_sitter.Node) -> list[tree_sitter.Node]:
    return [c for c in ts_node.named_children if not c.is_extra]


def _operator(ts_node: tree_sitter.Node) -> Optional[str]:
    operator = ts_node.child_by_field_name("operator")
    return operator.type if operator is not None else None


def parse_javascript_source(text: str) -> SyntaxNode:
    """Convenience function to parse JavaScript source text."""
    return SourceParser().parse(text)
