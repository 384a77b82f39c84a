"""Persistent find / insert / delete over immutable trees.

None of these functions modify their input; ``insert`` and ``delete`` return
new trees that share every untouched subtree with the original.
"""

import operator
from typing import List, Optional, Tuple

from canopy.traversal import preorder
from canopy.tree import Leaf, Node, Tree, check_tree, leaf
from canopy.types import EqualityFnType, T


def find(
    tree: Tree[T], value: T, eq: Optional[EqualityFnType] = None
) -> Optional[T]:
    """
    Search the tree in pre-order for a value.

    Args:
        tree: Tree to search
        value: Value to look for
        eq: Optional comparator called as ``eq(node_value, value)``.
            Defaults to ``==``.

    Returns:
        The first matching value stored in the tree (node before its
        children, children left to right), or None if nothing matches.
        Note that a tree storing None as a value cannot distinguish a hit on
        that value from a miss.
    """
    matches = eq or operator.eq
    for candidate in preorder(tree):
        if matches(candidate, value):
            return candidate
    return None


def insert(tree: Tree[T], value: T) -> Node[T]:
    """
    Append a childless node holding ``value`` under the root.

    The new node always goes at the end of the root's children, regardless
    of where equal values already live. Inserting into a Leaf returns a
    single-node tree.
    """
    check_tree(tree)
    if isinstance(tree, Leaf):
        return Node(value, ())
    return Node(tree.value, tree.children + (Node(value, ()),))


def delete(
    tree: Tree[T], value: T, eq: Optional[EqualityFnType] = None
) -> Tree[T]:
    """
    Remove every node matching ``value`` that is reachable through
    non-matching ancestors.

    A matching node is replaced by its first child, kept as-is, or by a Leaf
    when it has no children; its remaining children are dropped. A
    non-matching node keeps its value and has each child rewritten the same
    way, so several matches at different depths can disappear in one call.
    Subtrees with no match are shared with the input.

    Args:
        tree: Tree to rewrite
        value: Value to delete
        eq: Optional comparator called as ``eq(node_value, value)``.
            Defaults to ``==``.

    Returns:
        The rewritten tree
    """
    check_tree(tree)
    matches = eq or operator.eq

    # Post-order rebuild over an explicit stack; ``results`` collects the
    # rewritten subtrees in left-to-right order.
    results: List[Tree[T]] = []
    work: List[Tuple[Tree[T], bool]] = [(tree, False)]
    while work:
        current, expanded = work.pop()
        if isinstance(current, Leaf):
            results.append(current)
            continue
        if not expanded:
            if matches(current.value, value):
                results.append(current.children[0] if current.children else leaf())
                continue
            work.append((current, True))
            work.extend((child, False) for child in reversed(current.children))
            continue

        count = len(current.children)
        rewritten = tuple(results[len(results) - count :])
        del results[len(results) - count :]
        if all(new is old for new, old in zip(rewritten, current.children)):
            results.append(current)
        else:
            results.append(Node(current.value, rewritten))

    return results[0]
