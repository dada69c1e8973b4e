from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cloakroom.main import app

runner = CliRunner()


def _run(script: list[str], *args: str):
    return runner.invoke(
        app,
        ["--lockers", "2", "--capacity", "8", "--slot-store", "memory", *args],
        input="\n".join(script) + "\n",
    )


def test_deposit_list_collect_quit() -> None:
    result = _run([
        "1",        # deposit
        "1", "2",   # coats = 2
        "4", "3",   # other items = 3
        "5", "",    # close locker
        "4", "",    # print closed lockers
        "2", "1", "",  # collect from locker 1
        "4", "",    # print closed lockers again
        "5",        # quit
    ])

    assert result.exit_code == 0, result.output
    out = result.output
    assert " *** Found free locker number 1 ***" in out
    assert "Total number of items currently in locker: 5, max items: 8" in out
    assert "Locker number 1 has been closed and key has been obtained. Contents are as follows:" in out
    assert "locker number 1: [num coats: 2, num backpacks: 0, num umbrellas: 0, num other items: 3]" in out
    assert "Collected following items from locker number 1:" in out
    assert "There are no closed lockers." in out


def test_empty_locker_close_message() -> None:
    result = _run(["1", "5", "", "5"])

    assert result.exit_code == 0, result.output
    assert "Locker number 1, which is empty, has been closed and key has been obtained." in result.output


def test_capacity_error_is_reported_and_contents_kept() -> None:
    result = _run([
        "1",
        "2", "6",   # backpacks = 6
        "3", "3",   # umbrellas = 3 -> 9 items, rejected
        "",         # acknowledge error
        "5", "",
        "4", "",
        "5",
    ])

    assert result.exit_code == 0, result.output
    assert " *** Error: not enough space in locker." in result.output
    assert "locker number 1: [num coats: 0, num backpacks: 6, num umbrellas: 0, num other items: 0]" in result.output


def test_invalid_inputs_are_asked_again() -> None:
    result = _run([
        "x",          # not a number
        "9",          # out of range
        "1",
        "1", "abc",   # coats: not a number
        "300",        # coats: too many for one entry
        "1",
        "5", "",
        "5",
    ])

    assert result.exit_code == 0, result.output
    assert " *** Error: number must be between 1 and 5." in result.output
    assert " *** Error: data entered is invalid/outside of range." in result.output
    assert "num coats: 1, num backpacks: 0, num umbrellas: 0, num other items: 0" in result.output


def test_collect_without_keys() -> None:
    result = _run(["2", "", "5"])

    assert result.exit_code == 0, result.output
    assert " *** Error: there are no closed lockers from which to collect items." in result.output


def test_unknown_key_number() -> None:
    result = _run(["1", "5", "", "3", "2", "", "5"])

    assert result.exit_code == 0, result.output
    assert " *** Error: key for locker number 2 not found." in result.output


def test_change_contents_then_collect() -> None:
    result = _run([
        "1", "1", "3", "5", "",      # deposit 3 coats
        "3", "1", "1", "1", "5", "",  # change coats to 1
        "2", "1", "",                # collect
        "5",
    ])

    assert result.exit_code == 0, result.output
    collected = result.output.split("Collected following items from locker number 1:")[1]
    assert "num coats: 1, num backpacks: 0, num umbrellas: 0, num other items: 0" in collected


def test_no_free_lockers() -> None:
    result = _run(["1", "5", "", "1", "5", "", "1", "", "5"])

    assert result.exit_code == 0, result.output
    assert " *** Found free locker number 2 ***" in result.output
    assert "There are no free lockers." in result.output


def test_parameters_are_prompted_when_not_given() -> None:
    result = runner.invoke(
        app,
        ["--slot-store", "sqlite"],
        input="0\n3\n20\n6\n4\n\n5\n",
    )

    assert result.exit_code == 0, result.output
    assert "Enter number of lockers (number between 1 and 1000)" in result.output
    assert " *** Error: number must be between 1 and 1000." in result.output
    assert " *** Error: number must be between 5 and 15." in result.output
    assert "There are no closed lockers." in result.output


@pytest.mark.parametrize("args", [["--lockers", "0", "--capacity", "8"], ["--lockers", "3", "--capacity", "20"]])
def test_out_of_range_options_exit_with_error(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "--slot-store", "memory"])

    assert result.exit_code == 1
    assert "invalid cloakroom parameters" in result.output


def test_unknown_slot_store_exits_with_error() -> None:
    result = runner.invoke(app, ["--lockers", "2", "--capacity", "8", "--slot-store", "redis"])

    assert result.exit_code == 1
    assert "unknown slot store" in result.output
