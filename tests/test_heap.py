import io
import sys

import pytest

from dsalab.heap import build_max_heap, main


@pytest.mark.parametrize(
    "values",
    [
        [],
        [7],
        [1, 2],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
        [9, 8, 7, 6, 5],
        [4, 4, 4, 1, 4],
        [35, 12, 88, 41, 7, 63, 99, 2, 50, 50],
    ],
)
def test_result_satisfies_heap_property(values):
    heap = build_max_heap(values)
    assert len(heap) == len(values)
    assert all(heap[(child - 1) // 2] >= heap[child] for child in range(1, len(heap)))


@pytest.mark.parametrize("values", [[3, 1, 2], [5, 9, 2, 9, 0, 11], list(range(20))])
def test_result_is_permutation(values):
    assert sorted(build_max_heap(values)) == sorted(values)


def test_root_is_maximum():
    values = [13, 67, 2, 45, 90, 31]
    assert build_max_heap(values)[0] == max(values)


def test_input_not_modified():
    values = [3, 9, 4]
    build_max_heap(values)
    assert values == [3, 9, 4]


def test_small_worked_example():
    assert build_max_heap([10, 20, 15]) == [20, 10, 15]


def test_empty_gives_empty():
    assert build_max_heap([]) == []


def test_main_prints_marks_and_heap(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n10\n20\n15\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Marks of students: 10 20 15" in out
    assert "Max heap: 20 10 15" in out


def test_main_rejects_too_many_students(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("40\n"))
    assert main([]) == 1


def test_main_truncated_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n5\n"))
    with pytest.raises(EOFError):
        main([])