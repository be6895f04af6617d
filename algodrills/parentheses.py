"""Bracket balancing and generation of balanced parentheses."""

from __future__ import annotations

_OPENERS = {")": "(", "}": "{", "]": "["}


def is_valid(text: str) -> bool:
    """Return True when every bracket in ``text`` is closed in the right order.

    An empty string is not valid; characters other than brackets make it invalid.
    """
    if not text or len(text) % 2:
        return False
    stack: list[str] = []
    for char in text:
        if char in "([{":
            stack.append(char)
        elif not stack or stack.pop() != _OPENERS.get(char):
            return False
    return not stack


def generate(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs, opening brackets tried first."""
    results: list[str] = []

    def build(prefix: str, left: int, right: int) -> None:
        if right < left or left < 0:
            return
        if left == 0 and right == 0:
            results.append(prefix)
            return
        build(prefix + "(", left - 1, right)
        build(prefix + ")", left, right - 1)

    build("", n, n)
    return results