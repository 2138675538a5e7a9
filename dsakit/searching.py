"""Searching and two-pointer problems over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def linear_search(values: Sequence[int], key: int) -> int | None:
    """Return the index of the last occurrence of key, scanning from the end, or None."""
    for index in range(len(values) - 1, -1, -1):
        if values[index] == key:
            return index
    return None


def sentinel_search(values: Sequence[int], key: int) -> int | None:
    """Return the index of the first occurrence of key using a sentinel scan, or None."""
    if not values:
        return None
    probe = list(values)
    last = probe[-1]
    probe[-1] = key
    index = 0
    while probe[index] != key:
        index += 1
    if index < len(probe) - 1 or last == key:
        return index
    return None


def rotated_minimum(values: Sequence[int]) -> int:
    """Return the smallest element of a rotated ascending sequence by binary search."""
    if not values:
        raise ValueError("rotated_minimum() of an empty sequence")
    low, high = 0, len(values) - 1
    while low < high:
        mid = low + (high - low) // 2
        if values[mid] < values[high]:
            high = mid
        else:
            low = mid + 1
    return values[low]


def can_ship(weights: Sequence[int], days: int, capacity: int) -> bool:
    """Return True if the packages fit in the given days, loading them greedily in order."""
    day_count = 1
    load = 0
    for weight in weights:
        if load + weight > capacity:
            day_count += 1
            load = weight
            if day_count > days:
                return False
        else:
            load += weight
    return True


def min_ship_capacity(weights: Sequence[int], days: int) -> int:
    """Return the smallest daily capacity that ships every package within the given days."""
    low = max(weights, default=0)
    total = sum(weights)
    if not can_ship(weights, days, total):
        return total
    high = total
    while low < high:
        mid = (low + high) // 2
        if can_ship(weights, days, mid):
            high = mid
        else:
            low = mid + 1
    return low


def min_subarray_length(target: int, values: Sequence[int]) -> int:
    """Return the length of the shortest contiguous run with sum >= target, or 0."""
    best = len(values) + 1
    window = 0
    start = 0
    for end, value in enumerate(values):
        window += value
        while window >= target:
            best = min(best, end - start + 1)
            window -= values[start]
            start += 1
    return 0 if best == len(values) + 1 else best


def has_pair_sum(values: Sequence[int], target: int) -> bool:
    """Return True if two elements of an ascending sequence add up to target."""
    left, right = 0, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == target:
            return True
        if total > target:
            right -= 1
        else:
            left += 1
    return False


def zero_sum_triples(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return the triples with sum zero found by a sorted two-pointer sweep, in order found."""
    ordered = sorted(values)
    triples: list[tuple[int, int, int]] = []
    for i, first in enumerate(ordered[:-2]):
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total == 0:
                triples.append((first, ordered[left], ordered[right]))
                left += 1
                right -= 1
            elif total > 0:
                right -= 1
            else:
                left += 1
    return triples