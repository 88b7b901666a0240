import io
import sys

import pytest

from dsalab.bst import BinarySearchTree, main


def test_inorder_is_sorted_with_duplicates():
    values = [50, 30, 70, 30, 20, 80, 70, 60]
    assert BinarySearchTree(values).inorder() == sorted(values)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert tree.longest_path() == 0
    assert 1 not in tree


def test_find_min_on_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().find_min()


def test_find_min():
    values = [40, 25, 60, 10, 35, 5]
    assert BinarySearchTree(values).find_min() == min(values)


def test_longest_path_of_chain_is_length():
    values = [1, 2, 3, 4, 5]
    assert BinarySearchTree(values).longest_path() == len(values)


def test_longest_path_balanced():
    assert BinarySearchTree([2, 1, 3]).longest_path() == 2


def test_contains():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    tree = BinarySearchTree(values)
    assert all(v in tree for v in values)
    assert 9 not in tree
    assert 0 not in tree


def test_mirror_reverses_inorder():
    values = [8, 3, 10, 1, 6, 14]
    tree = BinarySearchTree(values)
    tree.mirror()
    assert tree.inorder() == sorted(values, reverse=True)


def test_mirror_twice_restores():
    values = [8, 3, 10, 1, 6, 14]
    tree = BinarySearchTree(values)
    tree.mirror()
    tree.mirror()
    assert tree.inorder() == sorted(values)
    assert all(v in tree for v in values)


def test_mirror_keeps_height():
    values = [5, 2, 1, 7, 9, 8]
    tree = BinarySearchTree(values)
    before = tree.longest_path()
    tree.mirror()
    assert tree.longest_path() == before


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n5 3 8\n4\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Inorder Traversal of BST: 3 5 8" in out
    assert "BST after insertion: 3 4 5 8" in out
    assert "Minimum data value in the BST: 3" in out
    assert "BST after mirroring (Inorder Traversal): 8 5 4 3" in out
    assert "Search result: Found" in out