"""Student records in a file addressed through a ten-slot hash table."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dsalab.student_file import (
    DEFAULT_PATH,
    RECORD_SIZE,
    StudentRecord,
    _print_found,
    _read_record,
    _read_tokens,
)

TABLE_SIZE = 10


class DirectAccessFile:
    """Appended records; each roll number's slot holds the latest record number for it."""

    def __init__(self, path) -> None:
        self.path = Path(path)
        self.path.write_bytes(b"")
        self._table: list[int | None] = [None] * TABLE_SIZE
        self._count = 0

    def _offset(self, rollno: int) -> int | None:
        rec_no = self._table[rollno % TABLE_SIZE]
        return None if rec_no is None else (rec_no - 1) * RECORD_SIZE

    def insert(self, record: StudentRecord) -> None:
        """Append the record and point its hash slot at it."""
        with self.path.open("ab") as handle:
            handle.write(record.pack())
        self._count += 1
        self._table[record.rollno % TABLE_SIZE] = self._count

    def modify(self, rollno: int, record: StudentRecord) -> None:
        """Overwrite the record stored in the roll number's slot."""
        offset = self._offset(rollno)
        if offset is None:
            raise KeyError(rollno)
        with self.path.open("r+b") as handle:
            handle.seek(offset)
            handle.write(record.pack())

    def search(self, rollno: int) -> StudentRecord | None:
        """Return the record held in the roll number's slot, or None if it is empty."""
        offset = self._offset(rollno)
        if offset is None:
            return None
        return StudentRecord.unpack(self.path.read_bytes()[offset : offset + RECORD_SIZE])

    def records(self) -> list[tuple[int, StudentRecord]]:
        """Return (slot, record) pairs for occupied slots in slot order."""
        return [
            (slot, self.search(slot))
            for slot, rec_no in enumerate(self._table)
            if rec_no is not None
        ]


def main(argv: list[str] | None = None) -> int:
    """Run the menu-driven direct access file session."""
    parser = argparse.ArgumentParser(prog="dsalab-direct")
    parser.add_argument("--file", default=DEFAULT_PATH, help="record file path")
    store = DirectAccessFile(parser.parse_args(argv).file)
    tokens = _read_tokens()
    while True:
        print("\n 1. Insert a record\n 2. Modify a record\n 3. Search a record"
              "\n 4. Print a record\n 5. Quit\n\n Enter your choice : ", end="")
        try:
            choice = next(tokens)
            if choice == "1":
                store.insert(_read_record(tokens))
            elif choice == "2":
                print("\n Enter the roll no to be modified : ", end="")
                rollno = int(next(tokens))
                record = _read_record(tokens)
                try:
                    store.modify(rollno, record)
                except KeyError:
                    print("\n Record does not exist ")
                print()
            elif choice == "3":
                print("\n Enter the roll no to be searched : ", end="")
                _print_found(store.search(int(next(tokens))))
            elif choice == "4":
                print("\n Hash Index : Roll No. : Name : Class : Division : Address")
                for slot, record in store.records():
                    print(f"{slot} {record}")
            elif choice == "5":
                return 0
        except EOFError:
            return 0
        except ValueError as error:
            print(error, file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())