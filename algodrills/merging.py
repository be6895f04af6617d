"""Merging of sorted linked lists."""

from __future__ import annotations

import heapq
from typing import Optional, Sequence

from .linked_list import ListNode


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``first`` comes before the one from ``second``.
    """
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val <= second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists by merging halves pairwise."""
    if not lists:
        return None

    def merge_range(low: int, high: int) -> Optional[ListNode]:
        if low == high:
            return lists[low]
        middle = (low + high) // 2
        return merge_two_lists(merge_range(low, middle), merge_range(middle + 1, high))

    return merge_range(0, len(lists) - 1)


def merge_k_lists_heap(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists using a min-heap of the current heads.

    Equal values are taken in the order of the lists they come from.
    """
    heap = [(head.val, index, head) for index, head in enumerate(lists) if head is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, index, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, index, node.next))
    tail.next = None
    return dummy.next