"""Linked node structures: deep copying graphs and flattening search trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A node with a key and two links, which may form cycles."""

    key: int
    left: Node | None = None
    right: Node | None = None


@dataclass(eq=False)
class BiNode:
    """A node usable as a tree node (left/right) or list node (previous/next)."""

    key: int
    left: BiNode | None = None
    right: BiNode | None = None


def copy_graph(node: Node | None) -> Node | None:
    """Return a deep copy of the structure reachable from ``node``.

    Shared nodes and cycles are preserved in the copy.
    """
    copies: dict[int, Node] = {}

    def clone(original: Node | None) -> Node | None:
        if original is None:
            return None
        existing = copies.get(id(original))
        if existing is not None:
            return existing
        duplicate = Node(original.key)
        copies[id(original)] = duplicate
        duplicate.left = clone(original.left)
        duplicate.right = clone(original.right)
        return duplicate

    return clone(node)


def _in_order(root: BiNode | None) -> Iterator[BiNode]:
    stack: list[BiNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def bst_to_linked_list(root: BiNode | None) -> BiNode | None:
    """Relink a binary search tree in place into a sorted doubly linked list.

    ``left`` becomes the previous link and ``right`` the next link.
    Returns the head of the list.
    """
    nodes = list(_in_order(root))
    if not nodes:
        return None
    for previous, following in zip(nodes, nodes[1:]):
        previous.right = following
        following.left = previous
    nodes[0].left = None
    nodes[-1].right = None
    return nodes[0]


def iterate_linked_list(head: BiNode | None) -> Iterator[int]:
    """Yield the keys of a list of BiNodes by following ``right`` links."""
    node = head
    while node is not None:
        yield node.key
        node = node.right