import io
import math

import pytest

from numlab.creppl import Param
from numlab.hanoi import hanoi_iterative
from numlab.naturally import main, power_table, square_evaluator


@pytest.mark.parametrize("value", [0, 1, 12, 2**100])
def test_square_evaluator_is_perfect_square(value):
    result = int(square_evaluator([Param("n:", value=value)]))
    assert math.isqrt(result) == value
    assert math.isqrt(result) ** 2 == result


def test_square_evaluator_ignores_extra_params():
    one = square_evaluator([Param("n:", value=9)])
    two = square_evaluator([Param("n:", value=9), Param("m:", value=4)])
    assert one == two


def test_power_table_small():
    assert power_table(2) == [(1, 1, 2)]


def test_power_table_matches_hanoi():
    rows = power_table(23)
    assert [row[0] for row in rows] == list(range(1, 23))
    for i, minus_one, plus_one in rows:
        assert minus_one == hanoi_iterative(i)
        assert plus_one == (minus_one + 1) // 2 + 1


def test_power_table_empty_below_two():
    assert power_table(1) == []


def test_main_prints_table(capsys):
    assert main(["--limit", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    expected = []
    for i, minus_one, plus_one in power_table(5):
        expected += [f"{i}: {minus_one}", f"{i}: {plus_one}"]
    assert lines == expected


def test_main_repl_squares_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("15\nq\n"))
    assert main(["--repl"]) == 0
    tokens = capsys.readouterr().out.split()
    numbers = [int(t) for t in tokens if t.isdigit()]
    assert len(numbers) == 1
    assert math.isqrt(numbers[0]) ** 2 == numbers[0]
    assert math.isqrt(numbers[0]) == 15