"""canopy: immutable multi-way trees with persistent CRUD operations,
pre-order and level-order traversal, and a compact box-drawing visualizer.

    >>> import canopy
    >>> tree = canopy.create_tree(1)
    >>> tree = canopy.insert(tree, 2)
    >>> canopy.find(tree, 2)
    2
    >>> print(canopy.render(tree))
    └── 1
        └── 2
"""

from canopy.errors import CanopyError, InvalidGlyphsError, InvalidTreeError
from canopy.ops import delete, find, insert
from canopy.traversal import bfs, dfs, level_order, preorder
from canopy.tree import (
    Leaf,
    Node,
    Tree,
    create_tree,
    height,
    is_leaf,
    is_node,
    leaf,
    node,
    size,
)
from canopy.vis import TreeGlyphs, render, render_lines

__all__ = [
    # Tree type
    "Tree",
    "Leaf",
    "Node",
    "leaf",
    "node",
    "create_tree",
    "is_leaf",
    "is_node",
    "size",
    "height",
    # Operations
    "find",
    "insert",
    "delete",
    # Traversal
    "dfs",
    "bfs",
    "preorder",
    "level_order",
    # Visualization
    "render",
    "render_lines",
    "TreeGlyphs",
    # Errors
    "CanopyError",
    "InvalidTreeError",
    "InvalidGlyphsError",
]
