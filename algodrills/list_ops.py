"""Structural edits on singly linked lists."""

from __future__ import annotations

from typing import Optional

from .linked_list import ListNode


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head.

    ``n`` must lie between 1 and the length of the list.
    """
    if head is None:
        raise ValueError("list must not be empty")
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    fast: Optional[ListNode] = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError("n is larger than the list")
        fast = fast.next
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full run of ``k`` nodes; a shorter tail keeps its order."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(0, head)
    before = dummy
    while True:
        last = before
        for _ in range(k):
            last = last.next
            if last is None:
                return dummy.next
        after = last.next
        first = before.next
        previous, node = after, first
        while node is not after:
            node.next, previous, node = previous, node, node.next
        before.next = last
        before = first


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    before = dummy
    while before.next is not None and before.next.next is not None:
        first = before.next
        second = first.next
        first.next = second.next
        second.next = first
        before.next = second
        before = first
    return dummy.next