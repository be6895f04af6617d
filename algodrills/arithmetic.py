"""Stair climbing counts and division without the division operator."""

from __future__ import annotations

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def climb_stairs(n: int) -> int:
    """Return how many ways there are to climb ``n`` stairs taking 1 or 2 at a time."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def divide(dividend: int, divisor: int) -> int:
    """Return ``dividend / divisor`` truncated toward zero, using shifts and subtraction.

    The one 32-bit overflow case, minimum divided by -1, gives the 32-bit maximum.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == INT32_MIN and divisor == -1:
        return INT32_MAX

    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0

    while remaining >= step:
        chunk, multiple = step, 1
        while remaining >= chunk << 1:
            chunk <<= 1
            multiple <<= 1
        remaining -= chunk
        quotient += multiple

    return -quotient if negative else quotient