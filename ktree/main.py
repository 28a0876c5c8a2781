"""Command that builds three sample trees and prints their traversals."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

from ktree.complexnum import Complex
from ktree.node import Node
from ktree.tree import Tree, TreeError, format_value

DEFAULT_WIDTH = 1500.0


def _text(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _print_column(title: str, nodes: Iterable[Node]) -> None:
    print(f"{title}:")
    for node in nodes:
        print(_text(node.value))


def _print_row(title: str, nodes: Iterable[Node]) -> None:
    print(f"{title}:")
    print(" ".join(_text(node.value) for node in nodes))


def _print_traversals(tree: Tree, *, one_per_line: bool) -> None:
    show = _print_column if one_per_line else _print_row
    show("Pre-order traversal", tree.pre_order())
    show("In-order traversal", tree.in_order())
    show("Post-order traversal", tree.post_order())
    show("BFS traversal", tree.bfs_scan())
    show("DFS traversal", tree.dfs_scan())
    _print_column("Heap traversal", tree.heap())


def _print_layout(tree: Tree, width: float) -> None:
    if tree.root is None:
        print("Empty tree, nothing to draw")
        return
    print("Tree layout:")
    positions = tree.layout(width)
    for node in tree.pre_order():
        x, y = positions[node]
        print(f"{format_value(node.value)} at ({x:.1f}, {y:.1f})")


def _number_tree(width: float) -> None:
    print("[numbers]")
    root = Node(0.0)
    tree = Tree(2)
    tree.add_root(root)

    n1, n2, n3, n4, n5 = (Node(v) for v in (0.1, 0.2, 1.0, 1.1, 2.0))

    try:
        tree.add_root(root)
    except TreeError as exc:
        print(exc)

    tree.add_sub_node(root, n1)
    tree.add_sub_node(root, n2)
    try:
        tree.add_sub_node(root, n3)
    except TreeError as exc:
        print(exc)
    tree.add_sub_node(n1, n3)
    tree.add_sub_node(n1, n4)
    tree.add_sub_node(n2, n5)

    _print_layout(tree, width)
    _print_traversals(tree, one_per_line=True)


def _complex_tree(width: float) -> None:
    print("[complex]")
    tree = Tree(5)
    root = Node(Complex(1, 2))
    tree.add_root(root)

    c1, c2, c3, c4, c5, c6 = (
        Node(Complex(re, re + 1)) for re in (3, 5, 7, 9, 11, 13)
    )
    for child in (c1, c2, c3, c4, c5):
        tree.add_sub_node(root, child)
    tree.add_sub_node(c1, c6)

    _print_traversals(tree, one_per_line=False)
    _print_layout(tree, width)


def _string_tree(width: float) -> None:
    print("[strings]")
    avraham = Node("Avraham")
    tree = Tree(12)
    tree.add_root(avraham)

    yitshak, ishmael = Node("Yitshak"), Node("Ishmael")
    tree.add_sub_node(avraham, yitshak)
    tree.add_sub_node(avraham, ishmael)

    yaakov, essav = Node("Yaakov"), Node("Essav")
    tree.add_sub_node(yitshak, yaakov)
    tree.add_sub_node(yitshak, essav)

    sons = (
        "Reuven", "Shimon", "Levi", "Yehuda", "Dan", "Naftali",
        "Gad", "Asher", "Yissachar", "Zevulun", "Yosef", "Binyamin",
    )
    for name in sons:
        tree.add_sub_node(yaakov, Node(name))

    _print_traversals(tree, one_per_line=False)
    _print_layout(tree, width)


def _positive(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("width must be positive")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Build the sample trees and print their traversals and layouts."""
    parser = argparse.ArgumentParser(
        prog="ktree",
        description="Build sample k-ary trees and print their traversals.",
    )
    parser.add_argument(
        "--width",
        type=_positive,
        default=DEFAULT_WIDTH,
        help="width of the drawing used for node positions",
    )
    args = parser.parse_args(argv)

    _number_tree(args.width)
    _complex_tree(args.width)
    _string_tree(args.width)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())