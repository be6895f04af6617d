"""Conversion between integers and Roman numerals."""

_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_SYMBOL_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def int_to_roman(num: int) -> str:
    """Return the Roman numeral for ``num``; zero and negatives give an empty string."""
    parts = []
    for value, symbol in _NUMERALS:
        count, num = divmod(num, value) if num > 0 else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral, reading right to left in pairs.

    Unknown characters count as zero.
    """
    values = [_SYMBOL_VALUES.get(char, 0) for char in s]
    total = 0
    i = len(values) - 1
    while i >= 0:
        current = values[i]
        if i > 0 and current > values[i - 1]:
            total += current - values[i - 1]
            i -= 2
        else:
            total += current
            i -= 1
    return total


def roman_to_int_lookahead(s: str) -> int:
    """Return the value of a Roman numeral, subtracting a symbol smaller than the next.

    Unknown characters count as zero; an empty numeral is an error.
    """
    if not s:
        raise ValueError("empty Roman numeral")
    values = [_SYMBOL_VALUES.get(char, 0) for char in s]
    total = sum(
        -value if value < following else value
        for value, following in zip(values, values[1:])
    )
    return total + values[-1]