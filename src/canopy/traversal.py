"""Pre-order and level-order traversals.

Both orders are available as lazy generators (:func:`preorder`,
:func:`level_order`) and as callback-driven walks (:func:`dfs`, :func:`bfs`).
Leaf variants carry no value and are skipped.
"""

from collections import deque
from typing import Deque, Iterator, List

from canopy.tree import Node, Tree, check_tree
from canopy.types import T, VisitFnType


def preorder(tree: Tree[T]) -> Iterator[T]:
    """Yield node values depth-first: node before children, children left to right."""
    check_tree(tree)
    stack: List[Tree[T]] = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, Node):
            yield current.value
            stack.extend(reversed(current.children))


def level_order(tree: Tree[T]) -> Iterator[T]:
    """Yield node values breadth-first using a FIFO queue seeded with the root."""
    check_tree(tree)
    queue: Deque[Tree[T]] = deque([tree])
    while queue:
        current = queue.popleft()
        if isinstance(current, Node):
            yield current.value
            queue.extend(current.children)


def dfs(tree: Tree[T], visit: VisitFnType) -> None:
    """Call ``visit(value)`` for every node in pre-order."""
    for value in preorder(tree):
        visit(value)


def bfs(tree: Tree[T], visit: VisitFnType) -> None:
    """Call ``visit(value)`` for every node in level order."""
    for value in level_order(tree):
        visit(value)
