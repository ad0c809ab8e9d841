from typing import Iterator, Optional

from tree_sitter import Node


def extract_content(node: Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def iter_nodes_of_type(root: Node, node_type: str) -> Iterator[Node]:
    """Yield every descendant of ``root`` with the given type, in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == node_type:
            yield node
        stack.extend(reversed(node.children))


def find_child_by_type(node: Node, child_type: str) -> Optional[Node]:
    """Find first child node with specified type."""
    for child in node.children:
        if child.type == child_type:
            return child
    return None


def next_non_comment_sibling(node: Node, comment_type: str = "comment") -> Optional[Node]:
    sibling = node.next_sibling
    while sibling is not None and sibling.type == comment_type:
        sibling = sibling.next_sibling
    return sibling


def prev_non_comment_sibling(node: Node, comment_type: str = "comment") -> Optional[Node]:
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == comment_type:
        sibling = sibling.prev_sibling
    return sibling
