"""Random tree generation for demos and tests."""

import logging
import random
from typing import List, Optional, Tuple

from canopy.tree import Leaf, Node, Tree, leaf
from canopy.types import T, ValueFactoryType

logger = logging.getLogger(__name__)


def random_tree(
    max_depth: int,
    max_children: int,
    value_factory: ValueFactoryType,
    *,
    rng: Optional[random.Random] = None,
) -> Tree[T]:
    """
    Generate a random tree.

    A depth budget of 0 produces a Leaf. Otherwise a Node is created with
    ``value_factory()`` and between 0 and ``max_children`` children
    (inclusive), each generated with one less depth budget. Every branch
    that exhausts its budget therefore ends in a Leaf.

    Args:
        max_depth: Depth budget for the root
        max_children: Upper bound on children per node
        value_factory: Zero-argument callable producing node values
        rng: Random source. A fresh random.Random() is used if omitted.

    Returns:
        The generated tree

    Raises:
        ValueError: If max_depth or max_children is negative
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")
    if max_children < 0:
        raise ValueError(f"max_children must be non-negative, got {max_children}")

    rng = rng or random.Random()
    if max_depth == 0:
        return leaf()

    # Build top-down, values drawn in pre-order, then assemble bottom-up.
    # Entries: (value, remaining depth of children, number of children wanted,
    # children collected so far).
    root_value = value_factory()
    spine: List[Tuple[T, int, int, List[Tree[T]]]] = [
        (root_value, max_depth - 1, rng.randint(0, max_children), [])
    ]
    while True:
        value, child_depth, wanted, children = spine[-1]
        if len(children) < wanted:
            if child_depth == 0:
                children.append(leaf())
            else:
                spine.append(
                    (value_factory(), child_depth - 1, rng.randint(0, max_children), [])
                )
            continue

        spine.pop()
        built = Node(value, tuple(children))
        if not spine:
            logger.debug(
                "Generated random tree (max_depth=%d, max_children=%d)",
                max_depth,
                max_children,
            )
            return built
        spine[-1][3].append(built)


def count_nodes(tree: Tree[T]) -> Tuple[int, int]:
    """Return ``(nodes, leaves)``: how many Node and Leaf variants the tree holds."""
    nodes = leaves = 0
    stack: List[Tree[T]] = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, Leaf):
            leaves += 1
        else:
            nodes += 1
            stack.extend(current.children)
    return nodes, leaves
