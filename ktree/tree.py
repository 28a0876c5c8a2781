"""A k-ary tree with several traversal orders and a drawing layout."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from operator import attrgetter
from typing import Any

from ktree.complexnum import Complex
from ktree.node import Node

NODE_SIZE = 35.0


class TreeError(RuntimeError):
    """Raised when a tree operation breaks the tree's rules."""


def format_value(value: Any) -> str:
    """Render a node value as drawn on a tree diagram.

    Strings are shown as they are; numbers with one digit after the point;
    complex numbers as ``real+imaginaryi`` with one digit after each point.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Complex):
        return f"{value.real:.1f}+{value.imaginary:.1f}i"
    try:
        return format(value, ".1f")
    except (TypeError, ValueError):
        return str(value)


class Tree:
    """A tree whose nodes hold at most ``k`` children each.

    Nodes are located by value: the first node in pre-order whose value
    equals the one asked for.
    """

    def __init__(self, k: int = 2) -> None:
        self.root: Node | None = None
        self.k = k

    def add_root(self, node: Node) -> None:
        """Set the root to a new node with ``node``'s value."""
        if self.root is not None:
            raise TreeError("The tree already has a root")
        self.root = Node(node.value)

    def add_sub_node(self, parent: Node, child: Node) -> None:
        """Attach a copy of ``child`` under the node whose value matches ``parent``."""
        parent_node = self.find_node(self.root, parent.value)
        if parent_node is None:
            raise TreeError("The tree doesn't contain this parent node")
        if len(parent_node.children) >= self.k:
            raise TreeError("This node already has the max number of children")
        parent_node.add_child(child)

    def find_node(self, node: Node | None, value: Any) -> Node | None:
        """Return the first node in pre-order under ``node`` holding ``value``."""
        if node is None:
            return None
        stack = [node]
        while stack:
            current = stack.pop()
            if current.value == value:
                return current
            stack.extend(reversed(current.children))
        return None

    # Traversals

    def pre_order(self) -> Iterator[Node]:
        """Yield each node before its children, children left to right."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def in_order(self) -> Iterator[Node]:
        """Yield nodes in binary in-order: first child, node, second child.

        Children past the second are not visited.
        """
        stack: list[Node] = []

        def push_left(node: Node) -> None:
            while True:
                stack.append(node)
                if not node.children:
                    break
                node = node.children[0]

        if self.root is not None:
            push_left(self.root)
        while stack:
            node = stack.pop()
            yield node
            if len(node.children) > 1:
                push_left(node.children[1])

    def post_order(self) -> Iterator[Node]:
        """Yield each node after its children, children left to right."""
        if self.root is None:
            return
        output: list[Node] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            output.append(node)
            stack.extend(node.children)
        yield from reversed(output)

    def bfs_scan(self) -> Iterator[Node]:
        """Yield nodes level by level, left to right."""
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    def dfs_scan(self) -> Iterator[Node]:
        """Yield nodes depth first, visiting children left to right."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in reversed(node.children) if child is not None)

    def heap(self) -> Iterator[Node]:
        """Yield all nodes ordered by value, smallest first."""
        yield from sorted(self.pre_order(), key=attrgetter("value"))

    # Drawing

    def layout(self, width: float) -> dict[Node, tuple[float, float]]:
        """Compute the centre of every node on a drawing ``width`` units wide."""
        positions: dict[Node, tuple[float, float]] = {}
        if self.root is None:
            return positions
        vertical_spacing = NODE_SIZE * 6
        stack = [(self.root, width / 2, NODE_SIZE * 6, width / 4)]
        while stack:
            node, x, y, spacing = stack.pop()
            positions[node] = (x, y)
            child_spacing = spacing / 1.5
            child_y = y + vertical_spacing
            child_x = x - child_spacing * (len(node.children) - 1) / 2.0
            for child in node.children:
                stack.append((child, child_x, child_y, child_spacing))
                child_x += child_spacing
        return positions