"""Longest common prefix of a list of strings, by several methods."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_LENGTH = 200
"""Longest string the binary-search method considers; longer strings are cut."""


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


class PrefixTrie:
    """A character trie that reports the prefix shared by every inserted word."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.terminal = True

    def common_prefix(self) -> str:
        """Return the path followed while each node has exactly one child."""
        chars = []
        node = self._root
        while len(node.children) == 1 and not node.terminal:
            (char, node), = node.children.items()
            chars.append(char)
        return "".join(chars)


def longest_common_prefix(strs: list[str]) -> str:
    """Return the longest common prefix by binary search on its length."""
    if not strs:
        return ""
    first = strs[0]
    shortest = min(MAX_LENGTH, *(len(s) for s in strs))

    def shared(length: int) -> bool:
        prefix = first[:length]
        return all(s[:length] == prefix for s in strs[1:])

    low, high = 1, shortest
    while low <= high:
        middle = (low + high) // 2
        if shared(middle):
            low = middle + 1
        else:
            high = middle - 1
    return first[:(low + high) // 2]


def prefix_by_horizontal_scan(strs: list[str]) -> str:
    """Return the longest common prefix by shortening a candidate string by string."""
    if not strs:
        return ""
    prefix = strs[0]
    for s in strs[1:]:
        while not s.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def prefix_by_vertical_scan(strs: list[str]) -> str:
    """Return the longest common prefix by comparing column after column."""
    if not strs:
        return ""
    first = strs[0]
    for i, char in enumerate(first):
        if any(i >= len(s) or s[i] != char for s in strs[1:]):
            return first[:i]
    return first


def _pair_prefix(left: str, right: str) -> str:
    for i, (a, b) in enumerate(zip(left, right)):
        if a != b:
            return left[:i]
    return left[:min(len(left), len(right))]


def prefix_by_divide_and_conquer(strs: list[str]) -> str:
    """Return the longest common prefix by splitting the list in halves."""
    if not strs:
        return ""

    def solve(low: int, high: int) -> str:
        if low == high:
            return strs[low]
        middle = (low + high) // 2
        return _pair_prefix(solve(low, middle), solve(middle + 1, high))

    return solve(0, len(strs) - 1)


def prefix_by_trie(strs: list[str]) -> str:
    """Return the longest common prefix by building a trie of all strings."""
    trie = PrefixTrie()
    for s in strs:
        if not s:
            return ""
        trie.insert(s)
    return trie.common_prefix()