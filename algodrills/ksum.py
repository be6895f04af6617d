"""Sums of three or more numbers that hit a target."""

from __future__ import annotations

from typing import Iterable


def _truncating_div(a: int, b: int) -> int:
    """Divide rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of ``nums`` that sums to zero."""
    values = sorted(nums)
    size = len(values)
    found: list[list[int]] = []

    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, size - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                found.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return found


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Return the sum of three numbers of ``nums`` that lies closest to ``target``.

    Needs at least three numbers. Among equally close sums the first found is kept.
    """
    values = sorted(nums)
    if len(values) < 3:
        raise ValueError("at least three numbers are needed")

    best = values[0] + values[1] + values[2]
    for i, first in enumerate(values):
        left, right = i + 1, len(values) - 1
        while right > left:
            total = first + values[left] + values[right]
            difference = abs(target - total)
            if abs(target - best) > difference:
                best = total
            if difference == 0:
                return best
            if target - total > 0:
                left += 1
            else:
                right -= 1
    return best


def _two_sum(values: list[int], target: int, start: int) -> list[list[int]]:
    found: list[list[int]] = []
    low, high = start, len(values) - 1
    while high > low:
        total = values[low] + values[high]
        if total < target or (low > start and values[low] == values[low - 1]):
            low += 1
        elif total > target or (high < len(values) - 1 and values[high] == values[high + 1]):
            high -= 1
        else:
            found.append([values[low], values[high]])
            low += 1
            high -= 1
    return found


def _k_sum(values: list[int], target: int, start: int, k: int) -> list[list[int]]:
    if start == len(values):
        return []

    average = _truncating_div(target, k)
    if values[start] > average or values[-1] < average:
        return []

    if k == 2:
        return _two_sum(values, target, start)

    found: list[list[int]] = []
    for i in range(start, len(values)):
        if i == start or values[i] != values[i - 1]:
            found.extend(
                [values[i], *subset]
                for subset in _k_sum(values, target - values[i], i + 1, k - 1)
            )
    return found


def k_sum(nums: Iterable[int], target: int, k: int) -> list[list[int]]:
    """Return every distinct ascending ``k``-tuple of ``nums`` that sums to ``target``."""
    if k < 2:
        raise ValueError("k must be at least 2")
    return _k_sum(sorted(nums), target, 0, k)


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruplet of ``nums`` that sums to ``target``."""
    return k_sum(nums, target, 4)