import subprocess

import pytest

from oslab.processes import (
    bubble_sort,
    child_main,
    child_report,
    fork_demo,
    parent_main,
    run_child,
    selection_sort,
)

SAMPLES = [[], [1], [3, 1, 2], [5, -2, 5, 0, 9, -7], list(range(10, 0, -1))]


@pytest.mark.parametrize("values", SAMPLES)
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_selection_sort_matches_sorted(values):
    assert selection_sort(values) == sorted(values)


def test_sorts_leave_input_untouched():
    values = [3, 1, 2]
    bubble_sort(values)
    selection_sort(values)
    assert values == [3, 1, 2]


def test_child_report_layout():
    report = child_report(["3", "1", "2"])
    assert report.startswith("Child recieved the array as :\n312")
    assert report.endswith("Child sorted array in reverse order is:\n213\n")


def test_child_report_without_data_raises():
    with pytest.raises(ValueError, match="No data recieved from parent."):
        child_report([])


def test_child_main_without_data(capsys):
    assert child_main([]) == 1
    assert "No data recieved from parent." in capsys.readouterr().out


def test_child_main_prints_report(capsys):
    assert child_main(["4", "5"]) == 0
    assert capsys.readouterr().out == child_report(["4", "5"])


def test_run_child_returns_child_output():
    assert run_child([1, 2, 3]) == child_report(["1", "2", "3"])


def test_run_child_without_values_fails():
    with pytest.raises(subprocess.CalledProcessError):
        run_child([])


def test_parent_main_sorts_and_runs_child(capsys):
    assert parent_main(["3", "1", "2"]) == 0
    out = capsys.readouterr().out
    assert "1 2 3" in out
    assert child_report(["1", "2", "3"]) in out
    assert out.rstrip().endswith("Process complete!")


def test_fork_demo_returns_sorted(capsys):
    assert fork_demo([4, 2, 9, 1], 0, 0) == [1, 2, 4, 9]
    out = capsys.readouterr().out
    assert "[Parent] Sorted array: 1 2 4 9 " in out
    assert "[Parent] Child process reaped. Exiting." in out