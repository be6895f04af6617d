"""Coloured pass/fail lines comparing an answer with what was expected."""

from __future__ import annotations

from typing import Any

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"

WRONG = "[WRONG!]"
GOOD = "[PASSED!]"


def _show(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_show(item) for item in value) + "]"
    return str(value)


def assert_answer(answer: Any, expect: Any) -> bool:
    """Print a pass or fail line for ``answer == expect`` and return the outcome."""
    passed = answer == expect
    colour, mark = (GREEN, GOOD) if passed else (RED, WRONG)
    print(f"* {colour}{mark} ans: {_show(answer)} expect: {_show(expect)}{RESET}")
    return passed


def assert_answer_any(answer: Any, *args: Any) -> bool:
    """Print a pass line when ``answer`` equals any of ``args``, else a fail line."""
    passed = any(answer == expect for expect in args)
    expects = _show(list(args))
    if passed:
        print(f"* {GREEN}{GOOD} ans: {_show(answer)} expect in: {expects}{RESET}")
    else:
        print(f"* {RED}{WRONG} ans: {_show(answer)} expect: {expects}{RESET}")
    return passed