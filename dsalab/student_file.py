"""Student records kept in a sequential file of fixed-size binary records."""

from __future__ import annotations

import argparse
import struct
import sys
from dataclasses import dataclass, fields
from pathlib import Path

DEFAULT_PATH = "StudInfo.txt"

# int roll number, then NUL-terminated text fields, padded to four bytes.
_LAYOUT = struct.Struct("<i20s10s10s50s2x")
RECORD_SIZE = _LAYOUT.size
_SIZES = (20, 10, 10, 50)


@dataclass(frozen=True)
class StudentRecord:
    """One student: roll number, name, class, division and address."""

    rollno: int
    name: str
    cls: str
    div: str
    address: str

    def __post_init__(self) -> None:
        self.pack()

    def pack(self) -> bytes:
        """Return the record in its fixed-size binary layout."""
        encoded = []
        for field, size in zip(fields(self)[1:], _SIZES):
            data = getattr(self, field.name).encode("utf-8")
            if len(data) >= size or b"\0" in data:
                raise ValueError(f"{field.name} must be under {size} bytes, without NUL")
            encoded.append(data)
        try:
            return _LAYOUT.pack(self.rollno, *encoded)
        except struct.error:
            raise ValueError("roll number does not fit in 32 bits") from None

    @classmethod
    def unpack(cls, data: bytes) -> StudentRecord:
        """Read a record from exactly ``RECORD_SIZE`` bytes."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        rollno, *texts = _LAYOUT.unpack(data)
        return cls(rollno, *(t.split(b"\0", 1)[0].decode("utf-8", "replace") for t in texts))

    def __str__(self) -> str:
        return f"{self.rollno} {self.name} {self.cls} {self.div} {self.address}"


class SequentialFile:
    """A file of student records accessed one after another."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def insert(self, record: StudentRecord) -> None:
        """Append a record to the end of the file."""
        with self.path.open("ab") as handle:
            handle.write(record.pack())

    def delete(self, rec_no: int) -> bool:
        """Remove the record at 1-based position ``rec_no``; False if there is none."""
        records = self.records()
        if not 1 <= rec_no <= len(records):
            return False
        del records[rec_no - 1]
        self.path.write_bytes(b"".join(record.pack() for record in records))
        return True

    def modify(self, rec_no: int, record: StudentRecord) -> None:
        """Overwrite the record at 1-based position ``rec_no`` in place."""
        if not 1 <= rec_no <= len(self.records()):
            raise IndexError(f"no record number {rec_no}")
        with self.path.open("r+b") as handle:
            handle.seek((rec_no - 1) * RECORD_SIZE)
            handle.write(record.pack())

    def search(self, rollno: int) -> StudentRecord | None:
        """Return the first record with the roll number, or None."""
        return next((r for r in self.records() if r.rollno == rollno), None)

    def records(self) -> list[StudentRecord]:
        """Return every complete record in file order."""
        data = self.path.read_bytes() if self.path.exists() else b""
        return [
            StudentRecord.unpack(data[offset : offset + RECORD_SIZE])
            for offset in range(0, len(data) - RECORD_SIZE + 1, RECORD_SIZE)
        ]


def _read_tokens():
    for line in sys.stdin:
        yield from line.split()
    raise EOFError("unexpected end of input")


def _read_record(tokens) -> StudentRecord:
    print("\n Enter the record : \n")
    print(" Roll No. : Name : Class : Division : Address")
    rollno = int(next(tokens))
    return StudentRecord(rollno, *(next(tokens) for _ in range(4)))


def _print_found(found: StudentRecord | None) -> None:
    if found is None:
        print("\n Record does not exist ")
    else:
        print(f"\n record found \n {found}")
    print()


def main(argv: list[str] | None = None) -> int:
    """Run the menu-driven sequential file session."""
    parser = argparse.ArgumentParser(prog="dsalab-students")
    parser.add_argument("--file", default=DEFAULT_PATH, help="record file path")
    store = SequentialFile(parser.parse_args(argv).file)
    tokens = _read_tokens()
    while True:
        print("\n 1. Insert a record\n 2. Delete a record\n 3. Modify a record"
              "\n 4. Search a record\n 5. Print a record\n 6. Quit"
              "\n\n Enter your choice : ", end="")
        try:
            choice = next(tokens)
            if choice == "1":
                store.insert(_read_record(tokens))
            elif choice == "2":
                print("\n Enter the record no to be deleted : ", end="")
                store.delete(int(next(tokens)))
                print()
            elif choice == "3":
                print("\n Enter the record no to be modified : ", end="")
                rec_no = int(next(tokens))
                store.modify(rec_no, _read_record(tokens))
                print()
            elif choice == "4":
                print("\n Enter the roll no to be searched : ", end="")
                _print_found(store.search(int(next(tokens))))
            elif choice == "5":
                for record in store.records():
                    print(record)
                print()
            elif choice == "6":
                return 0
        except EOFError:
            return 0
        except (ValueError, IndexError) as error:
            print(error, file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())