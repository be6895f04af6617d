"""Substring search: first occurrence and concatenations of a word list."""

from __future__ import annotations

from collections import Counter, deque


def find_index(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` in ``haystack``, or -1.

    An empty needle is rejected unless the haystack is empty too.
    """
    if len(needle) > len(haystack):
        return -1
    if not needle:
        if haystack:
            raise ValueError("needle must not be empty")
        return -1
    return haystack.find(needle)


def _word_width(words: list[str]) -> int:
    if not words:
        raise ValueError("words must not be empty")
    return len(words[0])


def find_concatenations(s: str, words: list[str]) -> list[int]:
    """Return start indices where ``s`` holds every word of ``words`` back to back.

    Uses a sliding window per offset; indices come grouped by offset
    ``0 .. len(word) - 1`` and ascend within each group.
    """
    width = _word_width(words)
    count = len(words)
    span = width * count
    wanted = Counter(words)
    found: list[int] = []

    for offset in range(width):
        window: deque[str] = deque()
        seen: Counter[str] = Counter()
        for j in range(offset, len(s) - width + 1, width):
            word = s[j:j + width]
            if word not in wanted:
                window.clear()
                seen.clear()
                continue
            while seen[word] >= wanted[word]:
                seen[window.popleft()] -= 1
            window.append(word)
            seen[word] += 1
            if len(window) == count:
                found.append(j + width - span)
    return found


def find_concatenations_brute(s: str, words: list[str]) -> list[int]:
    """Return the same indices as :func:`find_concatenations` by checking every window."""
    width = _word_width(words)
    span = width * len(words)
    wanted = Counter(words)
    found: list[int] = []

    for offset in range(width):
        for j in range(offset, len(s) - span + 1, width):
            chunk = s[j:j + span]
            pieces = Counter(chunk[k:k + width] for k in range(0, span, width))
            if pieces == wanted:
                found.append(j)
    return found