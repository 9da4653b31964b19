"""An unbalanced binary search tree with traversals, and a menu over it."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "BinarySearchTree", "main"]


@dataclass
class Node:
    """One node of a binary search tree."""

    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


class BinarySearchTree:
    """A binary search tree that holds each value at most once."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def insert(self, value: Any) -> bool:
        """Add value; return False if it was already present, True otherwise."""
        if self.root is None:
            self.root = Node(value)
            return True
        current = self.root
        while True:
            if current.value == value:
                return False
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    return True
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(value)
                    return True
                current = current.right

    def __contains__(self, value: Any) -> bool:
        current = self.root
        while current is not None:
            if current.value == value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def preorder(self) -> Iterator[Any]:
        """Yield values node first, then left subtree, then right subtree."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[Node] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.value
            current = node.right

    def postorder(self) -> Iterator[Any]:
        """Yield values left subtree first, then right subtree, then node."""
        reversed_order: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)


_MENU = (
    "\n===================================MENU"
    "=========================================\n\n"
    "1. Search/Add Key Value in the binary tree\n"
    "2. Display pre-order traversal of the binary tree\n"
    "3. Display in-order traversal of the binary tree\n"
    "4. Display post-order traversal of the binary tree\n"
    "5. Exit program"
)


def _read_int(prompt: str) -> Optional[int]:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive tree menu on standard input and output."""
    argparse.ArgumentParser(description="Interactive binary search tree.").parse_args(argv)
    tree = BinarySearchTree()
    traversals = {
        2: ("pre-order", tree.preorder),
        3: ("in-order", tree.inorder),
        4: ("post-order", tree.postorder),
    }

    try:
        while True:
            print(_MENU)
            choice = _read_int("\nEnter your Choice:\t")
            if choice == 1:
                value = _read_int("\nEnter the node value:\t")
                if value is None:
                    print("Not a number")
                elif not tree.insert(value):
                    print("Key found in the binary tree")
            elif choice in traversals:
                name, walk = traversals[choice]
                print(f"Printing the {name} traversal of the binary tree...")
                print(" ".join(str(value) for value in walk()))
            elif choice == 5:
                print("\nGoodbye...")
                return 0
            else:
                print(
                    "\nInvalid choice. Please enter a different choice next time..."
                )
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())