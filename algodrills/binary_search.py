"""Binary searches over sorted and rotated sorted sequences."""

from __future__ import annotations

from typing import Sequence


def _edge(nums: Sequence[int], target: int, leftmost: bool) -> int:
    left, right = 0, len(nums) - 1
    found = -1
    while left <= right:
        middle = left + (right - left) // 2
        value = nums[middle]
        if value == target:
            found = middle
            if leftmost:
                right = middle - 1
            else:
                left = middle + 1
        elif value < target:
            left = middle + 1
        else:
            right = middle - 1
    return found


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    return _edge(nums, target, True), _edge(nums, target, False)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    if not nums:
        raise ValueError("nums must not be empty")
    left, right = 0, len(nums) - 1
    middle = 0
    while left <= right:
        middle = left + (right - left) // 2
        if nums[middle] == target:
            return middle
        if nums[middle] < target:
            left = middle + 1
        else:
            right = middle - 1
    return middle if nums[middle] > target else middle + 1


def _bisect(nums: Sequence[int], start: int, end: int, target: int) -> int:
    while start <= end:
        middle = start + (end - start) // 2
        if nums[middle] == target:
            return middle
        if nums[middle] > target:
            end = middle - 1
        else:
            start = middle + 1
    return -1


def find_pivot(nums: Sequence[int]) -> int:
    """Return the index of the largest element of a rotated sorted sequence.

    Gives -1 when the sequence is not rotated.
    """
    start, end = 0, len(nums) - 1
    while start < end:
        middle = start + (end - start) // 2
        if middle < end and nums[middle] > nums[middle + 1]:
            return middle
        if middle > start and nums[middle] < nums[middle - 1]:
            return middle - 1
        if nums[start] >= nums[middle]:
            end = middle - 1
        else:
            start = middle + 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    if not nums:
        return -1
    pivot = find_pivot(nums)
    if pivot == -1:
        return _bisect(nums, 0, len(nums) - 1, target)
    if nums[pivot] == target:
        return pivot
    if nums[0] <= target <= nums[pivot]:
        return _bisect(nums, 0, pivot, target)
    return _bisect(nums, pivot + 1, len(nums) - 1, target)