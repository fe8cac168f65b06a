import io

import pytest

from modrecur.cli import main, run
from modrecur.counting import beautiful_numbers, parking_lot
from modrecur.recurrences import (
    decoding_genome,
    just_two_functions,
    number_sequence,
    tetrahedron,
)


def test_run_number_sequence_cases():
    text = "3\n0 1 11 3\n0 1 42 4\n0 1 22 4\n"
    expected = "".join(
        f"Case {i}: {number_sequence(0, 1, n, m)}\n"
        for i, (n, m) in enumerate([(11, 3), (42, 4), (22, 4)], start=1)
    )
    assert run("number-sequence", text) == expected


def test_run_just_two_functions_layout():
    text = "1\n1 2 3\n4 5 6\n1 2 3\n4 5 6\n100\n3\n1 2 7\n"
    answers = just_two_functions((1, 2, 3), (4, 5, 6), (1, 2, 3), (4, 5, 6), 100, [1, 2, 7])
    lines = run("just-two-functions", text).splitlines()
    assert lines[0] == "Case: 1"
    assert lines[1:] == [f"{f} {g}" for f, g in answers]


def test_run_decoding_genome():
    assert run("decoding-genome", "3 3 2\nab\nba\n") == f"{decoding_genome(3, 3, ['ab', 'ba'])}\n"
    assert run("decoding-genome", "3 3 0\n") == "27\n"


def test_run_single_value_problems():
    assert run("tetrahedron", "4") == f"{tetrahedron(4)}\n"
    assert run("parking-lot", "3") == f"{parking_lot(3)}\n"
    assert run("beautiful-numbers", "1 3 3") == f"{beautiful_numbers(1, 3, 3)}\n"


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("no-such-problem", "1")


def test_run_truncated_input():
    with pytest.raises(ValueError):
        run("number-sequence", "2\n0 1 11 3\n")


def test_run_non_integer_token():
    with pytest.raises(ValueError):
        run("tetrahedron", "four")


def test_main_writes_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main(["tetrahedron"]) == 0
    assert capsys.readouterr().out == f"{tetrahedron(2)}\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2"))
    assert main(["beautiful-numbers"]) == 1
    assert "input ended early" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2