"""Tree node holding a value and its children."""

from __future__ import annotations

from typing import Any


class Node:
    """A node with a value and an ordered list of child nodes."""

    __slots__ = ("value", "children")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.children: list[Node] = []

    def add_child(self, child: Node) -> Node:
        """Append a copy of ``child`` and return the copy.

        The copy carries the child's value and its own list of the child's
        current children; the grandchildren themselves are shared.
        """
        copy = Node(child.value)
        copy.children = list(child.children)
        self.children.append(copy)
        return copy

    def __repr__(self) -> str:
        return f"Node({self.value!r})"