import random

import pytest

from dsakit.sorting import (
    ALGORITHMS,
    benchmark,
    bubble_sort,
    counting_sort,
    flash_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shaker_sort,
    shell_sort,
    sort_by_name,
)

NAMES = [
    "selection-sort",
    "bubble-sort",
    "merge-sort",
    "shell-sort",
    "counting-sort",
    "flash-sort",
    "insertion-sort",
    "shaker-sort",
    "heap-sort",
    "quick-sort",
    "radix-sort",
]

SIGNED_NAMES = [name for name in NAMES if name not in ("counting-sort", "radix-sort")]


def _datasets():
    rng = random.Random(1234)
    return [
        [],
        [5],
        [3, 1, 2],
        [2, 2, 2, 2],
        [1, 0],
        list(range(50, 0, -1)),
        list(range(40)),
        [rng.randrange(1000) for _ in range(300)],
        [rng.randrange(5) for _ in range(100)],
    ]


def test_every_name_is_registered():
    assert sorted(ALGORITHMS) == sorted(NAMES)
    for name in NAMES:
        assert sort_by_name(name, [3, 1, 2]) == [1, 2, 3]


@pytest.mark.parametrize("name", NAMES)
@pytest.mark.parametrize("data", _datasets())
def test_sort_by_name_sorts(name, data):
    assert sort_by_name(name, data) == sorted(data)


@pytest.mark.parametrize("data", _datasets())
def test_functions_sort(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert shaker_sort(data) == expected
    assert shell_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert counting_sort(data) == expected
    assert radix_sort(data) == expected
    assert flash_sort(data) == expected


@pytest.mark.parametrize("name", SIGNED_NAMES)
def test_negative_values(name):
    rng = random.Random(99)
    data = [rng.randint(-500, 500) for _ in range(200)]
    assert sort_by_name(name, data) == sorted(data)


def test_input_is_not_mutated():
    data = [9, 4, 7, 1, 3]
    snapshot = list(data)
    expected = [1, 3, 4, 7, 9]
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert shaker_sort(data) == expected
    assert shell_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert counting_sort(data) == expected
    assert radix_sort(data) == expected
    assert flash_sort(data) == expected
    assert data == snapshot


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        sort_by_name("bogo-sort", [2, 1])
    with pytest.raises(ValueError):
        benchmark("bogo-sort", [2, 1])


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


@pytest.mark.parametrize("name", NAMES)
def test_benchmark_matches_sort(name):
    rng = random.Random(7)
    data = [rng.randrange(100) for _ in range(120)]
    result = benchmark(name, data)
    assert result.values == sort_by_name(name, data)
    assert result.comparisons >= 0
    assert result.elapsed_ms >= 0.0


def test_counting_sort_counts_one_per_element():
    data = [4, 0, 4, 2, 9, 1]
    assert benchmark("counting-sort", data).comparisons == len(data)


def test_comparisons_are_deterministic():
    data = [5, 3, 8, 1, 9, 2, 7]
    for name in NAMES:
        first = benchmark(name, list(data))
        second = benchmark(name, list(data))
        assert first.values == sorted(data)
        assert second.values == sorted(data)
        assert first.comparisons == second.comparisons
    assert benchmark("selection-sort", data).comparisons == 21


def test_insertion_sort_on_sorted_input():
    assert benchmark("insertion-sort", list(range(10))).comparisons == 9


def test_selection_sort_comparisons_are_fixed():
    assert benchmark("selection-sort", [5, 4, 3, 2, 1]).comparisons == 10


def test_bubble_sort_stops_early_on_sorted_input():
    sorted_run = benchmark("bubble-sort", list(range(10)))
    reversed_run = benchmark("bubble-sort", list(range(10, 0, -1)))
    assert sorted_run.comparisons == benchmark("insertion-sort", list(range(10))).comparisons
    assert reversed_run.comparisons > sorted_run.comparisons