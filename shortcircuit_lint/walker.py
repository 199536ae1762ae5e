"""Pre-order traversal of SyntaxNode trees."""

from __future__ import annotations

from typing import Callable, Iterator

from .nodes import SyntaxNode

Visitor = Callable[[SyntaxNode], None]


def iter_nodes(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """
    Iterative preorder traversal: parent before children, children in
    the order the node declares them.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(node.children())))


def walk(root: SyntaxNode, visit: Visitor) -> None:
    """Call visit on every node reachable from root, in preorder."""
    for node in iter_nodes(root):
        visit(node)
