"""Count-and-say sequence and phone keypad letter combinations."""

from __future__ import annotations

from itertools import groupby, product

_KEYPAD = dict(
    zip("23456789", ("abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz"))
)


def run_length_encode(text: str) -> str:
    """Return ``text`` as run counts each followed by the repeated character."""
    if not text:
        raise ValueError("text must not be empty")
    return "".join(f"{len(list(run))}{char}" for char, run in groupby(text))


def count_and_say(n: int) -> str:
    """Return the ``n``-th term of the count-and-say sequence, starting from "1"."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = run_length_encode(term)
    return term


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the keypad ``digits`` can spell, in keypad order.

    A digit without letters yields no combinations at all.
    """
    if not digits:
        return []
    letter_groups = (_KEYPAD.get(digit, "") for digit in digits)
    return ["".join(letters) for letters in product(*letter_groups)]