"""A line-per-record address book kept in a plain text file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO, Union

MENU = "\n".join(
    [
        "-----------------------------------------------------",
        "---------------Address Book--------------------------",
        "-----------------------------------------------------",
        "1) create an address book",
        "2) view an address book",
        "3) insert a record",
        "4) delete a record",
        "5) modify a record",
        "6) exit",
    ]
)


class RecordNotFound(LookupError):
    """No record starts with the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No record found for {name!r}")
        self.name = name


class AddressBook:
    """Records stored one per line as ``name | phone | email``."""

    def __init__(self, path: Union[str, Path] = "add.txt") -> None:
        self.path = Path(path)

    def create(self) -> None:
        """Make sure the book's file exists, leaving any records in place."""
        self.path.touch(exist_ok=True)

    def records(self) -> list[str]:
        """Return every record line; an absent or empty book has none."""
        if not self.path.exists():
            return []
        return self.path.read_text().splitlines()

    def insert(self, name: str, phone: str, email: str) -> str:
        """Append a record and return the line that was written."""
        line = f"{name} | {phone} | {email}"
        with self.path.open("a") as handle:
            handle.write(line + "\n")
        return line

    def delete(self, name: str) -> list[str]:
        """Remove every record that starts with ``name`` and return the removed lines."""
        lines = self.records()
        removed = [line for line in lines if line.startswith(name)]
        if not removed:
            raise RecordNotFound(name)
        kept = [line for line in lines if not line.startswith(name)]
        self.path.write_text("".join(line + "\n" for line in kept))
        return removed

    def modify(self, name: str, new_name: str, new_phone: str, new_email: str) -> str:
        """Replace the records starting with ``name`` by a single new record."""
        self.delete(name)
        return self.insert(new_name, new_phone, new_email)


def _prompt(text: str, stream: TextIO) -> str:
    print(text)
    line = stream.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def _run_menu(book: AddressBook, stream: TextIO) -> None:
    ask: Callable[[str], str] = lambda text: _prompt(text, stream)
    while True:
        print(MENU)
        print("Enter your choice", end="")
        choice = stream.readline()
        if not choice:
            return
        choice = choice.strip()
        if choice == "1":
            print(" creating an address book")
            book.create()
            print("Address book created")
        elif choice == "2":
            records = book.records()
            if records:
                print("------------Address book ----------")
                print("\n".join(records))
            else:
                print("Address book is empty")
        elif choice == "3":
            print("Insert a record")
            name = ask("Enter a name")
            phone = ask("Enter phone number")
            email = ask("Enter email address")
            book.insert(name, phone, email)
            print("record inserted successfully")
        elif choice == "4":
            name = ask("Enter the name to delete")
            try:
                book.delete(name)
            except RecordNotFound:
                print("No record found")
            else:
                print("record deleted")
        elif choice == "5":
            name = ask("Enter the name to modify")
            if not any(line.startswith(name) for line in book.records()):
                print("No record found")
                continue
            new_name = ask("Enter a name")
            new_phone = ask("Enter phone number")
            new_email = ask("Enter email address")
            book.modify(name, new_name, new_phone, new_email)
        elif choice == "6":
            print(" Exiting goodbye")
            return
        else:
            print("Invalid input")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-addressbook", description="Manage an address book interactively."
    )
    parser.add_argument("-f", "--file", default="add.txt", help="address book file")
    args = parser.parse_args(argv)
    try:
        _run_menu(AddressBook(args.file), sys.stdin)
    except EOFError:
        pass
    return 0