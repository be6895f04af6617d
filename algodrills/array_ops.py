"""In-place array edits and permutations."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of sorted ``nums`` to its front and return their count.

    Elements after the returned count are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[:len(unique)] = unique
    return len(unique)


def remove_element(nums: list[int], val: int) -> int:
    """Move the elements other than ``val`` to the front, in order, and return their count."""
    kept = [value for value in nums if value != val]
    nums[:len(kept)] = kept
    return len(kept)


def remove_element_two_ends(nums: list[int], val: int) -> int:
    """Like :func:`remove_element`, filling gaps from the back, so order is not kept."""
    if not nums:
        return 0
    front, back = 0, len(nums) - 1
    while front <= back:
        while nums[back] == val:
            back -= 1
            if back == -1:
                break
        if front > back:
            break
        if nums[front] == val:
            nums[front] = nums[back]
            back -= 1
        front += 1
    return front


def _reverse(nums: list[int], start: int) -> None:
    nums[start:] = nums[start:][::-1]


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` into the next permutation in lexicographic order.

    The largest permutation wraps round to the smallest.
    """
    pivot = next(
        (i - 1 for i in range(len(nums) - 1, 0, -1) if nums[i] > nums[i - 1]),
        -1,
    )
    if pivot == -1:
        _reverse(nums, 0)
        return
    successor = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    _reverse(nums, pivot + 1)


def permutations(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, built by swapping each element into place."""
    work = list(nums)
    found: list[list[int]] = []

    def arrange(index: int) -> None:
        if index >= len(work):
            found.append(work.copy())
            return
        for i in range(index, len(work)):
            work[index], work[i] = work[i], work[index]
            arrange(index + 1)
            work[index], work[i] = work[i], work[index]

    arrange(0)
    return found