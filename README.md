# ktree

This library provides k-ary trees. A node can hold any value, and the trees
can be walked in several orders. It also has a `Complex` number type that
can be stored in a tree.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Trees

```python
from ktree.node import Node
from ktree.tree import Tree, TreeError

tree = Tree(2)                  # at most two children per node
root = Node(1.1)
tree.add_root(root)
tree.add_sub_node(root, Node(1.2))
tree.add_sub_node(root, Node(1.3))
tree.add_sub_node(Node(1.2), Node(1.4))   # the parent is looked up by value

print([n.value for n in tree.pre_order()])   # [1.1, 1.2, 1.4, 1.3]
print([n.value for n in tree.bfs_scan()])    # [1.1, 1.2, 1.3, 1.4]
```

`Tree(k)` takes `k` as the most children any one node may have. The default
is 2. The nodes are reached through `tree.root`.

`add_sub_node(parent, child)` looks up the parent by its value. It takes the
first node in pre-order whose value equals `parent.value`. A copy of `child`
is then attached under that node. The copy is made by `Node.add_child`, which
also returns it.

`add_root` also stores a fresh node that holds the given node's value.

A `TreeError` (a subclass of `RuntimeError`) is raised in three cases:

- you add a second root;
- you name a parent that is not in the tree;
- you give a node more than `k` children.

`find_node(node, value)` searches the subtree under `node` in pre-order. It
returns the first node that matches, or `None` if there is none.

### Traversals

Each traversal is a generator of `Node` objects. An empty tree yields nothing.

- `pre_order()` and `dfs_scan()` give a node first, then its children from left to right.
- `in_order()` gives the binary in-order: the first child's subtree, then the node, then the second child's subtree. Children after the second are not visited.
- `post_order()` gives the children from left to right, then the node.
- `bfs_scan()` goes level by level, from left to right.
- `heap()` gives every node sorted by value, smallest first. `Complex` values are sorted by magnitude.

### Layout

`layout(width)` maps every node to the `(x, y)` centre it would have on a
drawing `width` units wide:

- The root sits in the middle, at `y = 210`.
- Each level is 210 units lower than the one above.
- Children are spread around their parent. The spacing shrinks by a factor of 1.5 at each level.

`format_value(value)` gives the label text for a node:

| Value | Label |
| --- | --- |
| string | shown as it is |
| number | one digit after the point |
| `Complex` | `real+imaginaryi`, with one digit after each point |

The package computes positions and labels only. It does not open a window or
draw the tree on screen.

## Complex numbers

```python
from ktree.complexnum import Complex

a = Complex(1, 2)
b = Complex(3, 4)
print(a + b)          # 4+6i
print(a * b)          # -5+10i
print(a < b)          # True: ordered by magnitude
Complex.parse("3.0 4.0") == Complex(3, 4)   # True
```

`Complex` supports these operations:

- the arithmetic operators `+`, `-`, `*` and `/`, and unary `-`;
- the in-place forms `+=`, `-=`, `*=` and `/=`, which change the number itself;
- `magnitude()`, which returns the distance from the origin.

Equality compares both parts exactly. The `<`, `<=`, `>` and `>=` operators
compare magnitudes. Dividing by zero raises `ZeroDivisionError`.
`Complex.parse` raises `ValueError` when its text is not two numbers.
`Complex` objects are mutable, so they are not hashable.

## Demo

```
ktree-demo
ktree-demo --width 1000
```

The demo builds three trees:

- a binary tree of floats;
- a tree of complex numbers, with up to 5 children per node;
- a tree of names, with up to 12 children per node.

For each tree it prints every traversal and the computed layout position of
every node. For the first tree it also prints the errors raised when it tries
to add a second root and to add a third child. `--width` sets the drawing
width used for the positions. The default is 1500, and the value must be
positive.