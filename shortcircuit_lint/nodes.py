"""
Syntax tree model consumed by the checks.

A closed set of node variants: the three expression kinds the short-circuit
check inspects, plus GenericNode for everything else. Each variant declares
its child slots, so traversal never needs to introspect attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class SourceSpan:
    """
    Location of a node in the source text.

    Offsets are character offsets into the decoded text (half-open).
    Lines and columns are 0-based, columns counted in characters.
    """
    start_offset: int
    end_offset: int
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def is_valid_for(self, text: str) -> bool:
        return 0 <= self.start_offset <= self.end_offset <= len(text)

    def slice(self, text: str) -> str:
        return text[self.start_offset:self.end_offset]


@dataclass(frozen=True)
class LogicalExpression:
    """`left && right`, `left || right` or `left ?? right`."""
    operator: str
    left: Optional["SyntaxNode"] = None
    right: Optional["SyntaxNode"] = None
    span: Optional[SourceSpan] = None

    type: ClassVar[str] = "LogicalExpression"

    def children(self) -> Iterator["SyntaxNode"]:
        for child in (self.left, self.right):
            if child is not None:
                yield child


@dataclass(frozen=True)
class BinaryExpression:
    """Any non-logical binary operator: arithmetic, comparison, bitwise, in, instanceof."""
    operator: str
    left: Optional["SyntaxNode"] = None
    right: Optional["SyntaxNode"] = None
    span: Optional[SourceSpan] = None

    type: ClassVar[str] = "BinaryExpression"

    def children(self) -> Iterator["SyntaxNode"]:
        for child in (self.left, self.right):
            if child is not None:
                yield child


@dataclass(frozen=True)
class CallExpression:
    callee: Optional["SyntaxNode"] = None
    arguments: Tuple["SyntaxNode", ...] = ()
    span: Optional[SourceSpan] = None

    type: ClassVar[str] = "CallExpression"

    def children(self) -> Iterator["SyntaxNode"]:
        if self.callee is not None:
            yield self.callee
        yield from self.arguments


@dataclass(frozen=True)
class GenericNode:
    """Every other node kind; its children are walked in source order."""
    type: str
    nodes: Tuple["SyntaxNode", ...] = ()
    span: Optional[SourceSpan] = None

    def children(self) -> Iterator["SyntaxNode"]:
        yield from self.nodes


SyntaxNode = Union[LogicalExpression, BinaryExpression, CallExpression, GenericNode]
