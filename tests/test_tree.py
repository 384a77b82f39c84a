"""Tests for the tree type and its constructors."""

import dataclasses

import pytest

from canopy import (
    InvalidTreeError,
    Leaf,
    Node,
    create_tree,
    height,
    is_leaf,
    is_node,
    leaf,
    node,
    size,
)


class TestConstructors:
    """Test leaf(), node() and create_tree()."""

    def test_leaf_is_leaf_variant(self):
        assert isinstance(leaf(), Leaf)
        assert leaf() == Leaf()

    def test_node_keeps_value_and_children_in_order(self):
        children = [create_tree("a"), leaf(), create_tree("b")]
        tree = node("root", children)
        assert tree.value == "root"
        assert tree.children == (Node("a"), Leaf(), Node("b"))

    def test_node_copies_caller_sequence(self):
        """Mutating the input list afterwards must not affect the tree."""
        children = [create_tree(1)]
        tree = node(0, children)
        children.append(create_tree(2))
        children[0] = leaf()
        assert tree.children == (Node(1),)

    def test_node_default_children_empty(self):
        assert node(7).children == ()

    def test_create_tree(self):
        assert create_tree(5) == node(5, [])

    def test_node_is_frozen(self):
        tree = create_tree(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tree.value = 2  # type: ignore[misc]

    def test_direct_node_construction_freezes_list(self):
        tree = Node(1, [Node(2)])  # type: ignore[arg-type]
        assert isinstance(tree.children, tuple)

    def test_invalid_child_rejected(self):
        with pytest.raises(InvalidTreeError):
            node(1, [create_tree(2), "not a tree"])  # type: ignore[list-item]

    def test_invalid_tree_error_is_type_error(self):
        with pytest.raises(TypeError):
            node(1, [42])  # type: ignore[list-item]


class TestPredicates:
    """Test is_leaf() and is_node()."""

    def test_predicates(self):
        assert is_leaf(leaf())
        assert not is_node(leaf())
        assert is_node(create_tree(1))
        assert not is_leaf(create_tree(1))


class TestSizeAndHeight:
    """Test size() and height()."""

    def test_size_counts_leaves_and_nodes(self):
        tree = node(1, [leaf(), node(2, [leaf(), leaf()]), node(3)])
        assert size(tree) == 6

    def test_size_of_leaf(self):
        assert size(leaf()) == 1

    def test_height(self):
        assert height(leaf()) == 1
        assert height(create_tree(1)) == 1
        assert height(node(1, [node(2, [node(3)]), leaf()])) == 3

    def test_size_rejects_non_tree(self):
        with pytest.raises(InvalidTreeError):
            size([1, 2, 3])  # type: ignore[arg-type]

    def test_deep_tree_does_not_recurse(self):
        tree = leaf()
        for i in range(5000):
            tree = node(i, [tree])
        assert size(tree) == 5001
        assert height(tree) == 5001
