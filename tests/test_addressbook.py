import io

import pytest

from oslab.addressbook import AddressBook, RecordNotFound, main


@pytest.fixture
def book(tmp_path):
    return AddressBook(tmp_path / "add.txt")


def test_missing_book_has_no_records(book):
    assert book.records() == []


def test_create_makes_empty_file(book):
    book.create()
    assert book.path.exists()
    assert book.records() == []


def test_create_keeps_existing_records(book):
    book.insert("Alice", "555", "alice@example.com")
    book.create()
    assert len(book.records()) == 1


def test_insert_writes_record_line(book):
    line = book.insert("Alice", "555", "alice@example.com")
    assert line == "Alice | 555 | alice@example.com"
    assert book.records() == [line]


def test_insert_appends_in_order(book):
    first = book.insert("Alice", "555", "alice@example.com")
    second = book.insert("Bob", "777", "bob@example.com")
    assert book.records() == [first, second]


def test_delete_removes_matching_record(book):
    book.insert("Alice", "555", "alice@example.com")
    kept = book.insert("Bob", "777", "bob@example.com")
    removed = book.delete("Alice")
    assert len(removed) == 1
    assert book.records() == [kept]


def test_delete_matches_by_prefix(book):
    book.insert("Alice", "555", "alice@example.com")
    book.insert("Alan", "777", "alan@example.com")
    kept = book.insert("Bob", "888", "bob@example.com")
    removed = book.delete("Al")
    assert len(removed) == 2
    assert book.records() == [kept]


def test_delete_missing_raises(book):
    book.insert("Alice", "555", "alice@example.com")
    with pytest.raises(RecordNotFound):
        book.delete("Zed")
    assert len(book.records()) == 1


def test_delete_from_absent_book_raises(book):
    with pytest.raises(RecordNotFound):
        book.delete("Alice")


def test_modify_replaces_record(book):
    book.insert("Alice", "555", "alice@example.com")
    line = book.modify("Alice", "Alicia", "556", "alicia@example.com")
    assert book.records() == [line]
    assert line.startswith("Alicia | ")


def test_modify_missing_raises(book):
    with pytest.raises(RecordNotFound):
        book.modify("Nobody", "A", "1", "a@example.com")


def test_main_insert_then_view(tmp_path, monkeypatch, capsys):
    path = tmp_path / "book.txt"
    script = "1\n3\nBob\n777\nbob@example.com\n2\n6\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "record inserted successfully" in out
    assert "Bob | 777 | bob@example.com" in out
    assert AddressBook(path).records() == ["Bob | 777 | bob@example.com"]


def test_main_reports_empty_and_missing(tmp_path, monkeypatch, capsys):
    path = tmp_path / "book.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n4\nBob\n9\n6\n"))
    main(["--file", str(path)])
    out = capsys.readouterr().out
    assert "Address book is empty" in out
    assert "No record found" in out
    assert "Invalid input" in out