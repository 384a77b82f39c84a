"""Tests for random tree generation."""

import random

import pytest

from canopy import Leaf, Node, height, leaf, size
from canopy.generate import count_nodes, random_tree


def max_fanout(tree):
    widest = 0
    stack = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, Node):
            widest = max(widest, len(current.children))
            stack.extend(current.children)
    return widest


def test_depth_zero_is_leaf():
    assert random_tree(0, 3, lambda: 1) == leaf()


@pytest.mark.parametrize("seed", range(10))
def test_respects_bounds(seed):
    tree = random_tree(4, 3, lambda: 1, rng=random.Random(seed))
    assert isinstance(tree, Node)
    # Depth budget 4 gives at most four Node levels plus one Leaf level.
    assert height(tree) <= 5
    assert max_fanout(tree) <= 3


def test_full_depth_branches_end_in_leaves():
    """With depth 2 every grandchild slot is a Leaf."""
    tree = random_tree(2, 2, lambda: 0, rng=random.Random(3))
    for child in tree.children:
        assert isinstance(child, Node)
        assert all(isinstance(grandchild, Leaf) for grandchild in child.children)


def test_zero_children():
    assert random_tree(3, 0, lambda: "v") == Node("v", ())


def test_seeded_rng_is_reproducible():
    first = random_tree(5, 3, lambda: 0, rng=random.Random(11))
    second = random_tree(5, 3, lambda: 0, rng=random.Random(11))
    assert first == second


def test_value_factory_called_once_per_node():
    calls = []

    def factory():
        calls.append(len(calls))
        return len(calls)

    tree = random_tree(4, 3, factory, rng=random.Random(5))
    nodes, _ = count_nodes(tree)
    assert len(calls) == nodes


def test_count_nodes():
    tree = Node(1, (leaf(), Node(2, (leaf(),))))
    assert count_nodes(tree) == (2, 2)
    assert sum(count_nodes(tree)) == size(tree)


@pytest.mark.parametrize("depth, children", [(-1, 3), (3, -1)])
def test_negative_arguments_rejected(depth, children):
    with pytest.raises(ValueError):
        random_tree(depth, children, lambda: 0)
