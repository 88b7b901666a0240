import io

import pytest

from dsalab.direct_access import DirectAccessFile, main
from dsalab.student_file import RECORD_SIZE, StudentRecord


def rec(rollno, name="Asha"):
    return StudentRecord(rollno, name, "FE", "A", "Pune")


@pytest.fixture
def store(tmp_path):
    return DirectAccessFile(tmp_path / "direct.dat")


def test_init_truncates_existing_file(tmp_path):
    path = tmp_path / "d.dat"
    path.write_bytes(b"old data")
    DirectAccessFile(path)
    assert path.read_bytes() == b""


def test_insert_and_search(store):
    store.insert(rec(21, "Ravi"))
    store.insert(rec(33, "Sita"))
    assert store.search(21) == rec(21, "Ravi")
    assert store.search(33) == rec(33, "Sita")
    assert store.search(45) is None


def test_file_holds_records_in_insertion_order(store):
    store.insert(rec(21))
    store.insert(rec(33))
    assert store.path.read_bytes() == rec(21).pack() + rec(33).pack()


def test_collision_takes_over_slot(store):
    store.insert(rec(11, "First"))
    store.insert(rec(21, "Second"))
    assert store.search(11) == rec(21, "Second")
    assert store.path.stat().st_size == 2 * RECORD_SIZE


def test_records_sorted_by_slot(store):
    for rollno in (19, 3, 15):
        store.insert(rec(rollno))
    slots = [slot for slot, _ in store.records()]
    assert slots == sorted(slots)
    assert [r.rollno % 10 for _, r in store.records()] == slots


def test_modify_overwrites_slot_record(store):
    store.insert(rec(4))
    store.insert(rec(7))
    store.modify(7, rec(7, "Changed"))
    assert store.search(7) == rec(7, "Changed")
    assert store.search(4) == rec(4)


def test_modify_empty_slot_raises(store):
    store.insert(rec(4))
    with pytest.raises(KeyError):
        store.modify(5, rec(5))


def test_main_insert_and_search(tmp_path, monkeypatch, capsys):
    path = tmp_path / "m.dat"
    monkeypatch.setattr(
        "sys.stdin", io.StringIO("1\n12 Ravi SE B Mumbai\n3\n12\n5\n")
    )
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "record found" in out
    assert "12 Ravi SE B Mumbai" in out