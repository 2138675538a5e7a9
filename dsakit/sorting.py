"""Classic comparison and distribution sorts, with comparison counting and timing."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

# Each implementation sorts the list in place and returns the number of
# comparisons it made.
_Sorter = Callable[[list[int]], int]


def _bubble(a: list[int]) -> int:
    comparisons = 0
    n = len(a)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            comparisons += 1
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]
                swapped = True
        if not swapped:
            break
    return comparisons


def _selection(a: list[int]) -> int:
    comparisons = 0
    n = len(a)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            comparisons += 1
            if a[j] < a[smallest]:
                smallest = j
        if smallest != i:
            a[i], a[smallest] = a[smallest], a[i]
    return comparisons


def _insertion(a: list[int]) -> int:
    comparisons = 0
    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        while j >= 0:
            comparisons += 1
            if a[j] > key:
                a[j + 1] = a[j]
                j -= 1
            else:
                break
        a[j + 1] = key
    return comparisons


def _shaker(a: list[int]) -> int:
    comparisons = 0
    left, right = 0, len(a) - 1
    while left < right:
        for i in range(left, right):
            comparisons += 1
            if a[i] > a[i + 1]:
                a[i], a[i + 1] = a[i + 1], a[i]
        right -= 1
        for i in range(right, left, -1):
            comparisons += 1
            if a[i] < a[i - 1]:
                a[i], a[i - 1] = a[i - 1], a[i]
        left += 1
    return comparisons


def _shell(a: list[int]) -> int:
    comparisons = 0
    n = len(a)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = a[i]
            j = i
            while j >= gap:
                comparisons += 1
                if a[j - gap] > temp:
                    a[j] = a[j - gap]
                    j -= gap
                else:
                    break
            a[j] = temp
        gap //= 2
    return comparisons


def _sift_down(a: list[int], size: int, root: int) -> int:
    comparisons = 0
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size:
            comparisons += 1
            if a[left] > a[largest]:
                largest = left
        if right < size:
            comparisons += 1
            if a[right] > a[largest]:
                largest = right
        if largest == root:
            return comparisons
        a[root], a[largest] = a[largest], a[root]
        root = largest


def _heap(a: list[int]) -> int:
    comparisons = 0
    n = len(a)
    for i in range(n // 2 - 1, -1, -1):
        comparisons += _sift_down(a, n, i)
    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        comparisons += _sift_down(a, end, 0)
    return comparisons


def _merge(a: list[int], left: int, mid: int, right: int) -> int:
    comparisons = 0
    lower, upper = a[left : mid + 1], a[mid + 1 : right + 1]
    i = j = 0
    k = left
    while i < len(lower) and j < len(upper):
        comparisons += 1
        if lower[i] <= upper[j]:
            a[k] = lower[i]
            i += 1
        else:
            a[k] = upper[j]
            j += 1
        k += 1
    a[k : right + 1] = lower[i:] + upper[j:]
    return comparisons


def _merge_range(a: list[int], left: int, right: int) -> int:
    if left >= right:
        return 0
    mid = left + (right - left) // 2
    return (
        _merge_range(a, left, mid)
        + _merge_range(a, mid + 1, right)
        + _merge(a, left, mid, right)
    )


def _merge_sort(a: list[int]) -> int:
    return _merge_range(a, 0, len(a) - 1)


def _quick(a: list[int]) -> int:
    comparisons = 0
    pending = [(0, len(a) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = a[high]
        i = low - 1
        for j in range(low, high):
            comparisons += 1
            if a[j] < pivot:
                i += 1
                a[i], a[j] = a[j], a[i]
        a[i + 1], a[high] = a[high], a[i + 1]
        split = i + 1
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return comparisons


def _require_non_negative(a: list[int], algorithm: str) -> None:
    if any(value < 0 for value in a):
        raise ValueError(f"{algorithm} requires non-negative values")


def _counting(a: list[int]) -> int:
    if not a:
        return 0
    _require_non_negative(a, "counting sort")
    counts = [0] * (max(a) + 1)
    for value in a:
        counts[value] += 1
    a[:] = [value for value, count in enumerate(counts) for _ in range(count)]
    return len(a)


def _radix(a: list[int]) -> int:
    n = len(a)
    if n <= 1:
        return 0
    _require_non_negative(a, "radix sort")
    comparisons = 0
    largest = max(a)
    exp = 1
    while largest // exp > 0:
        counts = [0] * 10
        for value in a:
            comparisons += 1
            counts[(value // exp) % 10] += 1
        for digit in range(1, 10):
            comparisons += 1
            counts[digit] += counts[digit - 1]
        output = [0] * n
        for value in reversed(a):
            digit = (value // exp) % 10
            counts[digit] -= 1
            output[counts[digit]] = value
        a[:] = output
        exp *= 10
    return comparisons


def _flash(a: list[int]) -> int:
    n = len(a)
    if n <= 1:
        return 0
    low, high = min(a), max(a)
    if low == high:
        return 0
    classes = max(int(0.45 * n), 1)
    scale = (classes - 1) / (high - low)

    def class_of(value: int) -> int:
        return int(scale * (value - low))

    bounds = [0] * classes
    for value in a:
        bounds[class_of(value)] += 1
    for k in range(1, classes):
        bounds[k] += bounds[k - 1]

    i = moved = 0
    while moved < n:
        k = class_of(a[i])
        while i >= bounds[k]:
            i += 1
            k = class_of(a[i])
        held = a[i]
        while i != bounds[k]:
            k = class_of(held)
            bounds[k] -= 1
            held, a[bounds[k]] = a[bounds[k]], held
            moved += 1

    return _insertion(a)


ALGORITHMS: dict[str, _Sorter] = {
    "selection-sort": _selection,
    "bubble-sort": _bubble,
    "merge-sort": _merge_sort,
    "shell-sort": _shell,
    "counting-sort": _counting,
    "flash-sort": _flash,
    "insertion-sort": _insertion,
    "shaker-sort": _shaker,
    "heap-sort": _heap,
    "quick-sort": _quick,
    "radix-sort": _radix,
}


@dataclass(frozen=True)
class BenchmarkResult:
    """The sorted values, the comparisons made and the elapsed time in milliseconds."""

    values: list[int]
    comparisons: int
    elapsed_ms: float


def _run(sorter: _Sorter, values: Iterable[int]) -> list[int]:
    data = list(values)
    sorter(data)
    return data


def _lookup(name: str) -> _Sorter:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown sorting algorithm: {name!r}") from None


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by bubble sort with early exit."""
    return _run(_bubble, values)


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by selection sort."""
    return _run(_selection, values)


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by insertion sort."""
    return _run(_insertion, values)


def shaker_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by cocktail shaker sort."""
    return _run(_shaker, values)


def shell_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by Shell sort with halving gaps."""
    return _run(_shell, values)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by heap sort."""
    return _run(_heap, values)


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by top-down merge sort."""
    return _run(_merge_sort, values)


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by quicksort with a last-element pivot."""
    return _run(_quick, values)


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative values sorted by counting sort."""
    return _run(_counting, values)


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative values sorted by least-significant-digit radix sort."""
    return _run(_radix, values)


def flash_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by flash sort finished with insertion sort."""
    return _run(_flash, values)


def sort_by_name(name: str, values: Iterable[int]) -> list[int]:
    """Return the values sorted by the algorithm named like ``quick-sort``."""
    return _run(_lookup(name), values)


def benchmark(name: str, values: Iterable[int]) -> BenchmarkResult:
    """Sort with the named algorithm, counting comparisons and timing the run."""
    sorter = _lookup(name)
    data = list(values)
    start = time.perf_counter()
    comparisons = sorter(data)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return BenchmarkResult(values=data, comparisons=comparisons, elapsed_ms=elapsed_ms)