"""Ordinal numbers: numeric suffixes, ordinal words and conversion between forms."""

from __future__ import annotations

import re
from enum import Enum

from wordinflect.number import number_to_words

__all__ = [
    "ordinal",
    "ordinal_suffix",
    "ordinal_word",
    "word_to_ordinal",
    "is_ordinal",
    "ordinal_to_cardinal",
]

_ONES_CARDINAL = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

_ONES_ORDINAL = (
    "", "first", "second", "third", "fourth", "fifth", "sixth", "seventh",
    "eighth", "ninth", "tenth", "eleventh", "twelfth", "thirteenth",
    "fourteenth", "fifteenth", "sixteenth", "seventeenth", "eighteenth",
    "nineteenth",
)

_TENS_CARDINAL = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

_TENS_ORDINAL = (
    "", "", "twentieth", "thirtieth", "fortieth", "fiftieth", "sixtieth",
    "seventieth", "eightieth", "ninetieth",
)

_SCALES = (
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1_000, "thousand"),
)

_CARDINAL_TO_ORDINAL = {
    "zero": "zeroth",
    **{card: ordn for card, ordn in zip(_ONES_CARDINAL[1:], _ONES_ORDINAL[1:])},
    **{card: ordn for card, ordn in zip(_TENS_CARDINAL[2:], _TENS_ORDINAL[2:])},
}

_ORDINAL_TO_CARDINAL = {ordn: card for card, ordn in _CARDINAL_TO_ORDINAL.items()}

_NUMERIC_SUFFIXES = ("st", "nd", "rd", "th")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int(s: str) -> int | None:
    """Parse a plain signed decimal integer that fits in 64 bits, or return None."""
    if not _INT_RE.fullmatch(s):
        return None
    value = int(s)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


class _Case(Enum):
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    MIXED = "mixed"


def _detect_case(s: str) -> _Case:
    if not s:
        return _Case.LOWER
    letters = [ch for ch in s if ch.isalpha()]
    if all(ch.isupper() for ch in letters):
        return _Case.UPPER
    if all(ch.islower() for ch in letters):
        return _Case.LOWER
    if s[0].isupper():
        return _Case.TITLE
    return _Case.MIXED


def _title_case(s: str) -> str:
    """Upper-case the first character and every character following a hyphen."""
    if not s:
        return s
    chars = [s[0].upper()]
    for previous, ch in zip(s, s[1:]):
        chars.append(ch.upper() if previous == "-" else ch)
    return "".join(chars)


def _apply_case(s: str, pattern: _Case) -> str:
    if pattern is _Case.UPPER:
        return s.upper()
    if pattern is _Case.TITLE:
        return _title_case(s)
    return s


def _split_numeric_ordinal(s: str) -> str | None:
    """Return the digits of a numeric ordinal such as "21st", or None."""
    if len(s) < 3:
        return None
    head, tail = s[:-2], s[-2:].lower()
    if tail in _NUMERIC_SUFFIXES and head and _parse_int(head) is not None:
        return head
    return None


def ordinal_suffix(n: int) -> str:
    """Return "st", "nd", "rd" or "th" for ``n``; the sign is ignored."""
    n = abs(n)
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def ordinal(n: int) -> str:
    """Return ``n`` with its ordinal suffix, e.g. 21 -> "21st"."""
    return f"{n}{ordinal_suffix(n)}"


def _ordinal_word(n: int) -> str:
    if n < 20:
        return _ONES_ORDINAL[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        if ones == 0:
            return _TENS_ORDINAL[tens]
        return f"{_TENS_CARDINAL[tens]}-{_ONES_ORDINAL[ones]}"
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        if rest == 0:
            return f"{_ONES_CARDINAL[hundreds]} hundredth"
        return f"{_ONES_CARDINAL[hundreds]} hundred {_ordinal_word(rest)}"
    for value, name in _SCALES:
        if n >= value:
            head, rest = divmod(n, value)
            if rest == 0:
                return f"{number_to_words(head)} {name}th"
            return f"{number_to_words(head)} {name} {_ordinal_word(rest)}"
    raise AssertionError("unreachable")  # pragma: no cover


def ordinal_word(n: int) -> str:
    """Return the ordinal in words, e.g. 21 -> "twenty-first", -1 -> "negative first"."""
    if n == 0:
        return "zeroth"
    if n < 0:
        return "negative " + ordinal_word(-n)
    return _ordinal_word(n)


def word_to_ordinal(s: str) -> str:
    """Turn a number word or numeral into its ordinal, keeping the case pattern.

    Numerals give numeric ordinals ("42" -> "42nd"); words give word ordinals
    ("Twenty-One" -> "Twenty-First"). Anything unrecognised comes back unchanged.
    """
    value = _parse_int(s)
    if value is not None:
        return ordinal(value)

    pattern = _detect_case(s)
    lower = s.lower()

    head, dash, tail = lower.rpartition("-")
    if dash:
        if tail.endswith(_NUMERIC_SUFFIXES):
            return s
        if tail in _CARDINAL_TO_ORDINAL:
            return _apply_case(f"{head}-{_CARDINAL_TO_ORDINAL[tail]}", pattern)

    if lower in _CARDINAL_TO_ORDINAL:
        return _apply_case(_CARDINAL_TO_ORDINAL[lower], pattern)
    return s


def is_ordinal(s: str) -> bool:
    """Tell whether ``s`` is an ordinal, numeric ("1st") or in words ("first")."""
    if not s:
        return False
    if _split_numeric_ordinal(s) is not None:
        return True
    lower = s.lower()
    _, dash, tail = lower.rpartition("-")
    if dash:
        return tail in _ORDINAL_TO_CARDINAL
    return lower in _ORDINAL_TO_CARDINAL


def ordinal_to_cardinal(s: str) -> str:
    """Turn an ordinal into its cardinal, keeping the case pattern.

    "1st" -> "1", "Twenty-First" -> "Twenty-One"; non-ordinals come back unchanged.
    """
    if not s:
        return s
    digits = _split_numeric_ordinal(s)
    if digits is not None:
        return digits

    pattern = _detect_case(s)
    lower = s.lower()

    head, dash, tail = lower.rpartition("-")
    if dash and tail in _ORDINAL_TO_CARDINAL:
        return _apply_case(f"{head}-{_ORDINAL_TO_CARDINAL[tail]}", pattern)

    if lower in _ORDINAL_TO_CARDINAL:
        return _apply_case(_ORDINAL_TO_CARDINAL[lower], pattern)
    return s