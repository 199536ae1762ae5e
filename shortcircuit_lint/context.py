"""Analysis context shared across checks."""

from __future__ import annotations

from dataclasses import dataclass

from .nodes import SyntaxNode


@dataclass(frozen=True)
class AnalysisContext:
    root: SyntaxNode
    source_text: str

    def text(self, node: SyntaxNode | None) -> str:
        """Source text covered by node; empty when it has no usable span."""
        if node is None or node.span is None:
            return ""
        if not node.span.is_valid_for(self.source_text):
            return ""
        return node.span.slice(self.source_text)
