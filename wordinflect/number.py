"""Spell integers and floats as English words and format them with separators."""

from __future__ import annotations

import math
from decimal import Decimal

__all__ = [
    "number_to_words",
    "number_to_words_with_and",
    "number_to_words_float",
    "number_to_words_threshold",
    "number_to_words_grouped",
    "format_number",
]

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

_DIGITS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

_SCALES = (
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1_000, "thousand"),
)

_ZERO = "zero"


def _cardinal(n: int, british: bool = False) -> str:
    """Spell a non-negative integer; with ``british`` insert "and" where British usage has it."""
    if n == 0:
        return _ZERO
    if n < 20:
        return _ONES[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return _TENS[tens] if ones == 0 else f"{_TENS[tens]}-{_ONES[ones]}"
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        head = f"{_ONES[hundreds]} hundred"
        if rest == 0:
            return head
        joiner = " and " if british else " "
        return head + joiner + _cardinal(rest, british)
    for value, name in _SCALES:
        if n >= value:
            head_count, rest = divmod(n, value)
            head = f"{_cardinal(head_count, british)} {name}"
            if rest == 0:
                return head
            joiner = " and " if british and rest < 100 else " "
            return head + joiner + _cardinal(rest, british)
    raise AssertionError("unreachable")  # pragma: no cover


def number_to_words(n: int) -> str:
    """Return the English words for an integer, e.g. 42 -> "forty-two"."""
    if n < 0:
        return "negative " + _cardinal(-n)
    return _cardinal(n)


def number_to_words_with_and(n: int) -> str:
    """Return the English words for an integer in British style, e.g. 101 -> "one hundred and one"."""
    if n < 0:
        return "negative " + _cardinal(-n, british=True)
    return _cardinal(n, british=True)


def _plain_decimal(f: float) -> str:
    """Shortest round-tripping decimal text for ``f`` without an exponent."""
    text = format(Decimal(repr(f)).normalize(), "f")
    return text


def number_to_words_float(f: float, decimal: str = "point") -> str:
    """Spell a float: the integer part in words, then ``decimal``, then each fractional digit.

    Raises ValueError for infinities and NaN.
    """
    if math.isinf(f) or math.isnan(f):
        raise ValueError(f"cannot spell non-finite number {f!r}")
    prefix = ""
    if f < 0:
        prefix = "negative "
        f = abs(f)
    whole = int(f)
    text = _plain_decimal(f)
    _, dot, fraction = text.partition(".")
    if not dot:
        return prefix + _cardinal(whole)
    words = [prefix + _cardinal(whole), decimal]
    words.extend(_DIGITS[int(ch)] for ch in fraction)
    return " ".join(words)


def number_to_words_threshold(n: int, threshold: int) -> str:
    """Spell ``n`` in words if it is below ``threshold``, otherwise return its digits."""
    if n < threshold:
        return number_to_words(n)
    return str(n)


def number_to_words_grouped(n: int, group_size: int) -> str:
    """Split the digits of ``n`` into groups from the right and spell each group separately.

    A ``group_size`` of zero or less spells the number as a whole.
    """
    if group_size <= 0:
        return number_to_words(n)
    prefix = ""
    if n < 0:
        prefix = "negative "
        n = -n
    if n == 0:
        return _ZERO
    digits = str(n)
    first = len(digits) % group_size or group_size
    groups = [digits[:first]]
    groups.extend(digits[i:i + group_size] for i in range(first, len(digits), group_size))
    return prefix + " ".join(_cardinal(int(group)) for group in groups)


def format_number(n: int) -> str:
    """Format an integer with commas between groups of three digits, e.g. 1234 -> "1,234"."""
    if n < 0:
        return "-" + format_number(-n)
    return f"{n:,}"