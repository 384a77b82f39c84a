"""Tests for pre-order and level-order traversal."""

import random

import pytest

from canopy import InvalidTreeError, bfs, dfs, leaf, level_order, node, preorder
from canopy.generate import random_tree


def reference_preorder(tree, out):
    """Plain recursive pre-order used as an oracle."""
    if hasattr(tree, "value"):
        out.append(tree.value)
        for child in tree.children:
            reference_preorder(child, out)
    return out


def depths(tree):
    """Map each value to its depth; values must be unique."""
    result = {}
    stack = [(tree, 0)]
    while stack:
        current, depth = stack.pop()
        if hasattr(current, "value"):
            result[current.value] = depth
            stack.extend((child, depth + 1) for child in current.children)
    return result


def unique_random_tree(seed):
    counter = iter(range(10_000))
    return random_tree(5, 3, lambda: next(counter), rng=random.Random(seed))


class TestDFS:
    """Test dfs() and preorder()."""

    def test_leaf_visits_nothing(self):
        visited = []
        dfs(leaf(), visited.append)
        assert visited == []

    def test_preorder_order(self):
        tree = node(1, [node(2, [node(4), leaf()]), node(3, [node(5)])])
        visited = []
        dfs(tree, visited.append)
        assert visited == [1, 2, 4, 3, 5]
        assert list(preorder(tree)) == visited

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_recursive_reference(self, seed):
        tree = unique_random_tree(seed)
        visited = []
        dfs(tree, visited.append)
        assert visited == reference_preorder(tree, [])

    def test_deep_tree(self):
        tree = leaf()
        for i in range(5000):
            tree = node(i, [tree])
        visited = []
        dfs(tree, visited.append)
        assert visited == list(range(4999, -1, -1))

    def test_rejects_non_tree(self):
        with pytest.raises(InvalidTreeError):
            dfs(None, print)  # type: ignore[arg-type]


class TestBFS:
    """Test bfs() and level_order()."""

    def test_leaf_visits_nothing(self):
        visited = []
        bfs(leaf(), visited.append)
        assert visited == []

    def test_level_order(self):
        tree = node(1, [node(2, [node(4), leaf()]), leaf(), node(3, [node(5)])])
        visited = []
        bfs(tree, visited.append)
        assert visited == [1, 2, 3, 4, 5]
        assert list(level_order(tree)) == visited

    @pytest.mark.parametrize("seed", range(10))
    def test_depths_never_decrease(self, seed):
        tree = unique_random_tree(seed)
        depth_of = depths(tree)
        visited = []
        bfs(tree, visited.append)
        emitted = [depth_of[value] for value in visited]
        assert emitted == sorted(emitted)
        assert sorted(visited) == sorted(depth_of)
