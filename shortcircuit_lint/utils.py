"""Shared utilities for Tree-sitter parsing and offset helpers."""

from __future__ import annotations

from typing import Iterator

import tree_sitter
import tree_sitter_javascript


def create_javascript_parser() -> tree_sitter.Parser:
    """Create a Tree-sitter parser configured for JavaScript."""

    language = tree_sitter.Language(tree_sitter_javascript.language())
    return tree_sitter.Parser(language)


def iter_ts_nodes(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Iterative preorder traversal of a raw tree-sitter tree."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _utf8(text: str) -> bytes:
    # lone surrogates (e.g. from surrogateescape decoding) keep their 3-byte form
    return text.encode("utf-8", errors="surrogatepass")


def decode_source(data: bytes) -> str:
    """Decode source bytes as UTF-8, dropping a BOM and replacing invalid bytes."""
    return data.decode("utf-8-sig", errors="replace")


class OffsetMap:
    """
    Converts tree-sitter byte offsets into character offsets of the
    decoded source text.

    For pure ASCII input the two coincide and no table is built.
    """

    def __init__(self, text: str):
        self.source_bytes = _utf8(text)
        self._table: list[int] | None = None
        if len(self.source_bytes) != len(text):
            table: list[int] = []
            for index, char in enumerate(text):
                table.extend([index] * len(_utf8(char)))
            table.append(len(text))
            self._table = table

    def char_offset(self, byte_offset: int) -> int:
        if self._table is None:
            return byte_offset
        return self._table[byte_offset]

    def char_column(self, byte_offset: int, byte_column: int) -> int:
        """Column in characters for a point given as (byte offset, byte column)."""
        if self._table is None:
            return byte_column
        return self.char_offset(byte_offset) - self.char_offset(byte_offset - byte_column)
