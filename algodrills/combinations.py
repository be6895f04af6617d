"""Combinations of candidate numbers that add up to a target."""

from __future__ import annotations

from typing import Iterable


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every combination of ``candidates`` summing to ``target``.

    Each candidate may be used any number of times. Combinations keep the
    order of the candidates and are found depth first. Candidates must be
    positive, otherwise the search would never end.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")

    found: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(chosen.copy())
            return
        if remaining < 0:
            return
        for i, value in enumerate(values[start:], start):
            chosen.append(value)
            explore(i, remaining - value)
            chosen.pop()

    explore(0, target)
    return found


def combination_sum_unique(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct combinations of ``candidates`` summing to ``target``.

    Each candidate is used at most once. Combinations are ascending and come
    in lexicographic order; repeated candidates never give repeated results.
    """
    values = sorted(candidates)
    found: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(chosen.copy())
            return
        if remaining < 0:
            return
        for i, value in enumerate(values[start:], start):
            # A value equal to its predecessor was already tried at this depth.
            if i > start and value == values[i - 1]:
                continue
            chosen.append(value)
            explore(i + 1, remaining - value)
            chosen.pop()

    explore(0, target)
    return found