import math

import pytest

from dsakit.recursion import (
    DECREASING,
    INCREASING,
    NOT_DECREASING,
    NOT_INCREASING,
    binary_strings,
    count_queens,
    describe_order,
    factorial,
    fibonacci,
    hanoi_moves,
    is_decreasing,
    is_increasing,
)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


@pytest.mark.parametrize("n", range(0, 20))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-3)


def test_binary_strings_empty_length():
    assert list(binary_strings(0)) == [""]


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_binary_strings_properties(n):
    strings = list(binary_strings(n))
    assert len(strings) == 2**n
    assert len(set(strings)) == len(strings)
    assert strings == sorted(strings)
    assert all(len(s) == n and set(s) <= {"0", "1"} for s in strings)
    assert strings[0] == "0" * n
    assert strings[-1] == "1" * n


def test_hanoi_single_disk():
    assert list(hanoi_moves(1, "A", "C", "B")) == [(1, "A", "C")]


def test_hanoi_zero_disks():
    assert list(hanoi_moves(0)) == []


def test_hanoi_negative():
    with pytest.raises(ValueError):
        hanoi_moves(-1)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_hanoi_moves_are_legal_and_complete(n):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    moves = list(hanoi_moves(n, "A", "C", "B"))
    assert len(moves) == 2**n - 1
    for disk, src, dst in moves:
        assert pegs[src][-1] == disk
        pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_order_checks():
    assert is_increasing([1, 2, 2, 3])
    assert not is_increasing([1, 3, 2])
    assert is_decreasing([5, 5, 4, 1])
    assert not is_decreasing([5, 6, 4])
    assert is_increasing([7]) and is_decreasing([7])


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 4], INCREASING),
        ([1, 3, 2, 4], NOT_INCREASING),
        ([4, 3, 2, 1], DECREASING),
        ([4, 1, 3, 0], NOT_DECREASING),
        ([5], INCREASING),
        ([2, 2, 2], INCREASING),
    ],
)
def test_describe_order(values, expected):
    assert describe_order(values) == expected


def test_describe_order_empty():
    with pytest.raises(ValueError):
        describe_order([])


def test_count_queens_classic_board():
    assert count_queens() == 92
    assert count_queens(8) == 92


def test_count_queens_small_boards():
    assert count_queens(4) == 2
    assert count_queens(2) == count_queens(3)
    assert count_queens(1) == count_queens(0)