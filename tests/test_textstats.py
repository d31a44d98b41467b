import io

import pytest

from oslab.textstats import TextCounts, analyse_in_child, count_text, format_counts, main


def test_simple_sentence():
    counts = count_text("hello world\n")
    assert counts == TextCounts(characters=12, words=2, lines=1)


def test_empty_text_has_no_counts():
    assert count_text("") == TextCounts(0, 0, 0)


@pytest.mark.parametrize(
    "text",
    ["one", "  leading and trailing  ", "tabs\tand\nnew\nlines\n", "\n\n\n", "a b\tc\n d"],
)
def test_counts_match_length_and_separators(text):
    counts = count_text(text)
    assert counts.characters == len(text)
    assert counts.lines == text.count("\n")
    assert counts.words == len(text.split())


def test_repeated_separators_do_not_add_words():
    assert count_text("alpha    beta").words == count_text("alpha beta").words


def test_format_counts_layout():
    assert format_counts(TextCounts(7, 3, 2)) == "character:7\n words:3\n lines :2\n"


def test_analyse_in_child_round_trip(tmp_path):
    text = "the quick brown fox\njumps\n"
    path = tmp_path / "result.txt"
    result = analyse_in_child(text, path)
    assert result == format_counts(count_text(text))
    assert path.read_text() == result


def test_main_prints_child_result(tmp_path, monkeypatch, capsys):
    sentence = "some words here\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(sentence))
    output = tmp_path / "out.txt"
    assert main(["--output", str(output)]) == 0
    printed = capsys.readouterr().out
    assert format_counts(count_text(sentence)) in printed
    assert "result from process2:" in printed
    assert output.read_text() == format_counts(count_text(sentence))