import io
import re
import sys

import pytest

from dsalab.optimal_bst import MAX_KEYS, main, optimal_bst


def test_no_keys():
    tree = optimal_bst([])
    assert tree.cost == 0.0
    assert tree.structure() == []


def test_single_key():
    tree = optimal_bst([0.4])
    assert tree.cost == pytest.approx(0.4)
    assert tree.structure() == ["Root: k1"]


def test_equal_probabilities_choose_middle_root():
    assert optimal_bst([1 / 3, 1 / 3, 1 / 3]).structure() == [
        "Root: k2",
        "k1 is left child of k2",
        "k3 is right child of k2",
    ]


@pytest.mark.parametrize(
    "probabilities",
    [[0.1, 0.2, 0.3, 0.4], [0.5, 0.25, 0.125, 0.125], [0.2] * 5, [0.9, 0.05, 0.05]],
)
def test_structure_lists_each_key_once(probabilities):
    lines = optimal_bst(probabilities).structure()
    subjects = sorted(int(re.match(r"(?:Root: )?k(\d+)", line).group(1)) for line in lines)
    assert subjects == list(range(1, len(probabilities) + 1))
    assert sum(line.startswith("Root:") for line in lines) == 1


@pytest.mark.parametrize("probabilities", [[0.1, 0.2, 0.3, 0.4], [0.2] * 5])
def test_cost_bounds(probabilities):
    cost = optimal_bst(probabilities).cost
    total = sum(probabilities)
    assert total - 1e-9 <= cost <= total * len(probabilities) + 1e-9


def test_children_respect_key_order():
    for line in optimal_bst([0.05, 0.3, 0.1, 0.25, 0.3]).structure():
        match = re.match(r"k(\d+) is (left|right) child of k(\d+)", line)
        if match:
            child, relation, parent = int(match[1]), match[2], int(match[3])
            assert (child < parent) == (relation == "left")


def test_too_many_keys_rejected():
    with pytest.raises(ValueError):
        optimal_bst([0.01] * (MAX_KEYS + 1))


def test_main_output(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n0.5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Minimum cost of Optimal BST: 0.500" in out
    assert "Root: k1" in out