"""Tests for the ordered tree."""
import random

import pytest
from homework.tree import OrderedTree, RemovalCase


def make_tree(values) -> OrderedTree:
    """Create a tree filled with values in the given order."""
    tree = OrderedTree()
    for value in values:
        tree.insert(value)
    return tree


class Key:
    """Value type that only supports less-than."""
    
    def __init__(self, n: int):
        self.n = n
    
    def __lt__(self, other: "Key") -> bool:
        return self.n < other.n


class TestInsert:
    """Test insertion and lookup."""
    
    def test_empty_tree(self):
        """Test a new tree is empty."""
        tree = OrderedTree()
        assert tree.empty()
        assert tree.size() == 0
        assert tree.root is None
        assert not tree.contains(1)
    
    def test_insert_values(self):
        """Test inserting distinct values."""
        tree = OrderedTree()
        assert tree.insert(5)
        assert tree.insert(3)
        assert tree.insert(8)
        
        assert tree.size() == 3
        assert len(tree) == 3
        assert not tree.empty()
        assert tree.root.value == 5
        assert tree.root.left.value == 3
        assert tree.root.right.value == 8
    
    def test_insert_duplicate(self):
        """Test inserting a stored value is rejected."""
        tree = make_tree([5, 3, 8])
        
        assert not tree.insert(3)
        assert tree.size() == 3
        assert tree.contains(3)
    
    def test_contains(self):
        """Test membership lookups."""
        tree = make_tree([5, 3, 8, 1, 4])
        
        for value in (1, 3, 4, 5, 8):
            assert tree.contains(value)
            assert value in tree
        for value in (0, 2, 6, 9):
            assert not tree.contains(value)
    
    def test_parent_links(self):
        """Test children point back to their parent."""
        tree = make_tree([5, 3, 8, 7])
        
        assert tree.root.parent is None
        assert tree.root.left.parent is tree.root
        assert tree.root.right.left.parent is tree.root.right
    
    def test_less_than_only_values(self):
        """Test values without an equality operator."""
        tree = OrderedTree()
        assert tree.insert(Key(2))
        assert tree.insert(Key(1))
        assert not tree.insert(Key(2))
        
        assert tree.contains(Key(1))
        assert not tree.contains(Key(3))
        assert [k.n for k in tree] == [1, 2]
    
    def test_sorted_input_deep_chain(self):
        """Test sorted input builds a chain without recursion limits."""
        tree = make_tree(range(2000))
        
        assert tree.size() == 2000
        assert list(tree) == list(range(2000))
        assert tree.check_invariants()


class TestErase:
    """Test the three removal cases."""
    
    def test_erase_missing(self):
        """Test erasing an absent value is a no-op."""
        tree = make_tree([5, 3])
        
        assert not tree.erase(4)
        assert tree.size() == 2
        
        empty = OrderedTree()
        assert not empty.erase(1)
        assert empty.empty()
    
    def test_erase_leaf(self):
        """Test removing a leaf."""
        tree = make_tree([5, 3, 8])
        assert tree.root.left.removal_case == RemovalCase.LEAF
        
        assert tree.erase(3)
        assert tree.root.left is None
        assert tree.size() == 2
        assert tree.check_invariants()
    
    def test_erase_only_node(self):
        """Test removing the root leaf empties the tree."""
        tree = make_tree([5])
        
        assert tree.erase(5)
        assert tree.empty()
        assert tree.root is None
    
    def test_erase_single_child(self):
        """Test the sole child takes the removed node's place."""
        tree = make_tree([5, 3, 1])
        assert tree.root.left.removal_case == RemovalCase.SINGLE_CHILD
        
        tree.erase(3)
        
        assert tree.root.left.value == 1
        assert tree.root.left.parent is tree.root
        assert tree.check_invariants()
    
    def test_erase_root_single_child(self):
        """Test the child of a removed root becomes the root."""
        tree = make_tree([5, 8, 7, 9])
        
        tree.erase(5)
        
        assert tree.root.value == 8
        assert tree.root.parent is None
        assert list(tree) == [7, 8, 9]
        assert tree.check_invariants()
    
    def test_erase_two_children_uses_right_minimum(self):
        """Test the successor is the minimum of the right subtree."""
        tree = make_tree([50, 30, 80, 70, 90, 60, 65])
        assert tree.root.removal_case == RemovalCase.TWO_CHILDREN
        
        tree.erase(50)
        
        assert tree.root.value == 60
        assert tree.root.parent is None
        assert tree.root.left.value == 30
        assert tree.root.right.value == 80
        # 65 moved up into the successor's old slot
        assert tree.root.right.left.left.value == 65
        assert tree.size() == 6
        assert list(tree) == [30, 60, 65, 70, 80, 90]
        assert tree.check_invariants()
    
    def test_erase_two_children_successor_is_right_child(self):
        """Test the successor directly below the removed node."""
        tree = make_tree([5, 3, 8, 9])
        
        tree.erase(5)
        
        assert tree.root.value == 8
        assert tree.root.left.value == 3
        assert tree.root.right.value == 9
        assert tree.check_invariants()
    
    def test_erase_inner_two_children(self):
        """Test removing a non-root node with two children."""
        tree = make_tree([50, 30, 20, 40, 35, 45])
        
        tree.erase(30)
        
        assert tree.root.left.value == 35
        assert tree.root.left.parent is tree.root
        assert list(tree) == [20, 35, 40, 45, 50]
        assert tree.check_invariants()


class TestRandomized:
    """Test fill and drain with random orderings."""
    
    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_fill_and_empty(self, seed):
        """Test size after fill and emptiness after erasing everything."""
        rng = random.Random(seed)
        values = list(range(500))
        rng.shuffle(values)
        
        tree = make_tree(values)
        assert tree.size() == 500
        assert list(tree) == sorted(values)
        
        rng.shuffle(values)
        for i, value in enumerate(values):
            assert tree.erase(value)
            assert tree.size() == 500 - i - 1
            if i % 50 == 0:
                assert tree.check_invariants()
        
        assert tree.empty()
    
    def test_minimum(self):
        """Test minimum tracks erasures."""
        tree = make_tree([5, 3, 8, 1])
        assert tree.minimum() == 1
        
        tree.erase(1)
        assert tree.minimum() == 3
    
    def test_minimum_empty(self):
        """Test minimum of an empty tree."""
        with pytest.raises(ValueError):
            OrderedTree().minimum()
    
    def test_clear(self):
        """Test teardown releases every node."""
        tree = make_tree([5, 3, 8, 1, 4])
        root = tree.root
        
        tree.clear()
        
        assert tree.empty()
        assert tree.root is None
        assert root.left is None and root.right is None
        assert tree.check_invariants()
