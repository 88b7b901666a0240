import io
import sys

import pytest

from dsalab.book_tree import Book, build_book, main


def test_index_lines_worked_example():
    book = build_book([[2], [0, 1]])
    assert book.index_lines() == [
        "Chapter 1",
        "  Section 1.1",
        "    Subsection 1.1.1",
        "    Subsection 1.1.2",
        "Chapter 2",
        "  Section 2.1",
        "  Section 2.2",
        "    Subsection 2.2.1",
    ]


def test_line_counts_match_structure():
    structure = [[3, 1], [0], [2, 2, 2]]
    lines = build_book(structure).index_lines()
    assert sum(line.startswith("Chapter") for line in lines) == len(structure)
    assert sum(line.strip().startswith("Section") for line in lines) == sum(
        len(sections) for sections in structure
    )
    assert sum(line.strip().startswith("Subsection") for line in lines) == sum(
        sum(sections) for sections in structure
    )


def test_empty_book_has_no_lines():
    assert build_book([]).index_lines() == []


def test_negative_counts_mean_no_children():
    assert build_book([[-3]]) == build_book([[0]])


def test_too_many_chapters_rejected():
    with pytest.raises(ValueError):
        build_book([[]] * 11)


def test_too_many_sections_rejected():
    with pytest.raises(ValueError):
        build_book([[0] * 11])


def test_too_many_subsections_rejected():
    with pytest.raises(ValueError):
        Book(((11,),))


def test_main_prints_index(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n1\n2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Book Index:" in out
    assert "    Subsection 1.1.2" in out
    assert "Subsection 1.1.3" not in out