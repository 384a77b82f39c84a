"""Immutable multi-way tree type and its constructors.

A tree is either a :class:`Leaf` (no value, no children) or a :class:`Node`
holding one value and an ordered tuple of child trees. Both variants are
frozen dataclasses, so a tree value never changes after construction;
operations in :mod:`canopy.ops` build new trees that share unchanged
subtrees with the old ones.
"""

import dataclasses
from typing import Any, Generic, Iterable, List, Tuple, Union

from canopy.errors import InvalidTreeError
from canopy.types import T


@dataclasses.dataclass(frozen=True)
class Leaf:
    """Terminal variant carrying neither a value nor children."""


@dataclasses.dataclass(frozen=True)
class Node(Generic[T]):
    """Variant holding one value and an ordered sequence of child trees."""

    value: T
    children: Tuple["Tree[T]", ...] = ()

    def __post_init__(self):
        # Freeze whatever sequence the caller handed in.
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        for child in self.children:
            if not isinstance(child, (Leaf, Node)):
                raise InvalidTreeError(
                    f"Node children must be Leaf or Node, got {type(child).__name__}"
                )


Tree = Union[Leaf, Node[T]]

_LEAF = Leaf()


def check_tree(tree: Any) -> None:
    """Raise InvalidTreeError unless ``tree`` is a Leaf or a Node."""
    if not isinstance(tree, (Leaf, Node)):
        raise InvalidTreeError(
            f"Expected a Leaf or Node, got {type(tree).__name__}"
        )


def leaf() -> Leaf:
    """Return the Leaf variant."""
    return _LEAF


def node(value: T, children: Iterable[Tree[T]] = ()) -> Node[T]:
    """
    Build a Node from a value and its children.

    Args:
        value: Value stored at the node
        children: Ordered child trees. Copied into a tuple, so mutating the
                  caller's list afterwards does not affect the returned node.

    Returns:
        A new Node

    Raises:
        InvalidTreeError: If any child is not a Leaf or Node
    """
    return Node(value, tuple(children))


def create_tree(value: T) -> Node[T]:
    """Create a single childless node holding ``value``."""
    return Node(value, ())


def is_leaf(tree: Tree[T]) -> bool:
    return isinstance(tree, Leaf)


def is_node(tree: Tree[T]) -> bool:
    return isinstance(tree, Node)


def size(tree: Tree[T]) -> int:
    """Count node instances in the tree, Leaf and Node variants combined."""
    check_tree(tree)
    count = 0
    stack: List[Tree[T]] = [tree]
    while stack:
        current = stack.pop()
        count += 1
        if isinstance(current, Node):
            stack.extend(current.children)
    return count


def height(tree: Tree[T]) -> int:
    """
    Return the number of levels in the tree.

    A Leaf and a childless Node both have height 1; every level of children
    below the root adds one.
    """
    check_tree(tree)
    deepest = 0
    stack: List[Tuple[Tree[T], int]] = [(tree, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(current, Node):
            stack.extend((child, depth + 1) for child in current.children)
    return deepest
