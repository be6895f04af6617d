"""Longest palindromic substring, three ways."""


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring using a dynamic-programming table.

    When several palindromes share the greatest length, the last one wins.
    """
    n = len(s)
    if n == 0:
        return ""

    # table[i][j] is True when s[i:j + 1] is a palindrome.
    table = [[i == j for j in range(n)] for i in range(n)]
    start, best = 0, 1

    for i, (left, right) in enumerate(zip(s, s[1:])):
        if left == right:
            table[i][i + 1] = True
            start, best = i, 2

    for length in range(3, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if s[i] == s[j] and table[i + 1][j - 1]:
                table[i][j] = True
                if length >= best:
                    start, best = i, length

    return s[start:start + best]


def _widest_span(s: str, centers) -> tuple[int, int]:
    """Expand from each (left, right) pair and keep the first strictly widest match."""
    best_left = best_right = 0
    for left, right in centers:
        while left >= 0 and right < len(s) and s[left] == s[right]:
            if right - left > best_right - best_left:
                best_left, best_right = left, right
            left -= 1
            right += 1
    return best_left, best_right


def longest_palindrome_expand(s: str) -> str:
    """Return the longest palindrome by expanding odd and even centres separately.

    On a tie between the best odd and the best even palindrome the even one wins.
    """
    if not s:
        return s
    odd_left, odd_right = _widest_span(s, ((i - 1, i + 1) for i in range(len(s))))
    even_left, even_right = _widest_span(s, ((i, i + 1) for i in range(len(s))))
    if odd_right - odd_left > even_right - even_left:
        return s[odd_left:odd_right + 1]
    return s[even_left:even_right + 1]


def _span_length(s: str, left: int, right: int) -> int:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome_centers(s: str) -> str:
    """Return the longest palindrome by measuring both centres at every index."""
    if len(s) < 2:
        return s
    start = end = 0
    for i in range(len(s)):
        length = max(_span_length(s, i, i), _span_length(s, i, i + 1))
        if length > end - start:
            start = i - (length - 1) // 2
            end = i + length // 2
    return s[start:end + 1]