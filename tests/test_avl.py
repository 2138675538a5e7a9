import math
import random

import pytest

from dsakit.avl import AVLNode, AVLTree, is_avl
from dsakit.binary_tree import TreeNode


def _assert_avl_bound(tree):
    n = len(tree)
    assert tree.height <= 1.45 * math.log2(n + 2)


def test_sorted_inserts_stay_balanced():
    tree = AVLTree(range(1, 101))
    assert list(tree) == list(range(1, 101))
    assert tree.is_balanced()
    _assert_avl_bound(tree)


def test_three_ascending_inserts_rotate_to_middle_root():
    tree = AVLTree([1, 2, 3])
    assert tree.root.key == 2
    assert tree.root.left.key == 1
    assert tree.root.right.key == 3


def test_three_descending_and_zigzag_inserts():
    assert AVLTree([3, 2, 1]).root.key == 2
    assert AVLTree([3, 1, 2]).root.key == 2
    assert AVLTree([1, 3, 2]).root.key == 2


def test_duplicates_ignored():
    tree = AVLTree()
    assert tree.insert(5)
    assert not tree.insert(5)
    assert list(tree) == [5]


def test_remove():
    tree = AVLTree(range(20))
    assert tree.remove(10)
    assert not tree.remove(10)
    assert 10 not in tree
    assert list(tree) == [k for k in range(20) if k != 10]
    assert tree.is_balanced()


def test_remove_to_empty():
    tree = AVLTree([4, 2, 6])
    for key in (2, 4, 6):
        assert tree.remove(key)
    assert tree.root is None
    assert tree.height == 0
    assert tree.is_balanced()


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_operations_keep_invariants(seed):
    rng = random.Random(seed)
    tree = AVLTree()
    present = set()
    for _ in range(400):
        key = rng.randrange(150)
        if rng.random() < 0.6:
            assert tree.insert(key) == (key not in present)
            present.add(key)
        else:
            assert tree.remove(key) == (key in present)
            present.discard(key)
        assert list(tree) == sorted(present)
        assert tree.is_balanced()
    _assert_avl_bound(tree)


def test_is_avl_detects_chain():
    chain = AVLNode(1, None, AVLNode(2, None, AVLNode(3)))
    assert not is_avl(chain)
    assert is_avl(None)


def test_is_avl_accepts_plain_tree_nodes():
    assert is_avl(TreeNode(2, TreeNode(1), TreeNode(3)))
    assert not is_avl(TreeNode(3, TreeNode(2, TreeNode(1))))