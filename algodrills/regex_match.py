"""Matching of patterns with '.' and '*' against a whole string."""

from functools import lru_cache


def is_match(s: str, p: str) -> bool:
    """Return True when pattern ``p`` matches all of ``s``, filling a table bottom-up.

    ``.`` matches any character; ``x*`` matches zero or more of ``x``.
    """
    if p.startswith("*") and s:
        raise ValueError("pattern must not start with '*'")

    rows, cols = len(s), len(p)
    table = [[False] * (cols + 1) for _ in range(rows + 1)]
    table[0][0] = True

    # Patterns such as a*, a*b* can match the empty string.
    for j in range(2, cols + 1):
        if p[j - 1] == "*":
            table[0][j] = table[0][j - 2]

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            token = p[j - 1]
            if token == "." or token == s[i - 1]:
                table[i][j] = table[i - 1][j - 1]
            elif token == "*":
                table[i][j] = table[i][j - 2]
                previous = p[j - 2]
                if previous == "." or previous == s[i - 1]:
                    table[i][j] = table[i][j] or table[i - 1][j]

    return table[rows][cols]


def is_match_recursive(s: str, p: str) -> bool:
    """Return True when pattern ``p`` matches all of ``s``, by recursion."""

    @lru_cache(maxsize=None)
    def matches(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first = i < len(s) and p[j] in (s[i], ".")
        if j + 1 < len(p) and p[j + 1] == "*":
            return matches(i, j + 2) or (first and matches(i + 1, j))
        return first and matches(i + 1, j + 1)

    return matches(0, 0)