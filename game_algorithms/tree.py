"""Binary tree traversals and an unbalanced binary search tree."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "Node",
    "pre_order",
    "in_order",
    "post_order",
    "BinarySearchTree",
    "main",
]


@dataclass
class Node:
    """A tree node holding a value and optional left and right children."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _iter_pre_order(root: Node | None) -> Iterator[Any]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _iter_in_order(root: Node | None) -> Iterator[Any]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def _iter_post_order(root: Node | None) -> Iterator[Any]:
    # Node-right-left order, reversed, is left-right-node.
    reversed_order: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_order.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed(reversed_order)


def pre_order(root: Node | None) -> list[Any]:
    """Return the values in node, left, right order."""
    return list(_iter_pre_order(root))


def in_order(root: Node | None) -> list[Any]:
    """Return the values in left, node, right order."""
    return list(_iter_in_order(root))


def post_order(root: Node | None) -> list[Any]:
    """Return the values in left, right, node order."""
    return list(_iter_post_order(root))


def _delete(node: Node | None, target: Any) -> Node | None:
    if node is None:
        return None
    if target < node.value:
        node.left = _delete(node.left, target)
    elif target > node.value:
        node.right = _delete(node.right, target)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return node


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already present."""
        if self.root is None:
            self.root = Node(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    return
                node = node.right
            else:
                return

    def delete(self, value: Any) -> None:
        """Remove ``value`` if present, replacing a two-child node by its in-order successor."""
        self.root = _delete(self.root, value)

    def in_order(self) -> list[Any]:
        """Return the stored values in ascending order."""
        return in_order(self.root)

    def __iter__(self) -> Iterator[Any]:
        return _iter_in_order(self.root)


def _sample_tree() -> Node:
    return Node(
        4,
        Node(2, Node(9), Node(7)),
        Node(6, Node(1)),
    )


def _format(values: Iterable[Any]) -> str:
    return " ".join(str(v) for v in values)


def main(argv: list[str] | None = None) -> int:
    """Show the three traversals, then build a search tree and delete from it."""
    parser = argparse.ArgumentParser(description="Tree traversal and binary search tree demo.")
    parser.add_argument("values", nargs="*", type=int, help="values to insert into the search tree")
    parser.add_argument("--delete", type=int, default=None, help="value to delete afterwards")
    args = parser.parse_args(argv)

    root = _sample_tree()
    print(f"Pre-order traversal: {_format(pre_order(root))}")
    print(f"In-order traversal: {_format(in_order(root))}")
    print(f"Post-order traversal: {_format(post_order(root))}")

    values = args.values or [4, 2, 6, 9, 7, 1]
    target = args.delete if args.delete is not None else (6 if not args.values else None)
    bst = BinarySearchTree(values)
    print("Binary search tree after inserting data:")
    print(_format(bst))
    if target is not None:
        bst.delete(target)
        print(f"After deleting {target}:")
        print(_format(bst))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())