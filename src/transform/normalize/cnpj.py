"""Validate and normalize CNPJ tax identifiers."""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"\D")

_FIRST_DIGIT_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_SECOND_DIGIT_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def normalize_cnpj(value: str) -> str:
    return _NON_DIGITS.sub("", value or "")


def _check_digit(digits: str, weights: tuple[int, ...]) -> str:
    remainder = sum(int(digit) * weight for digit, weight in zip(digits, weights)) % 11
    return "0" if remainder < 2 else str(11 - remainder)


def is_valid_cnpj(value: str) -> bool:
    """Return True when ``value`` holds 14 digits whose last two are valid check digits.

    Any punctuation (``00.017.024/0001-53``) is ignored.
    """
    digits = normalize_cnpj(value)
    if len(digits) != 14:
        return False

    expected = digits[:12]
    expected += _check_digit(expected, _FIRST_DIGIT_WEIGHTS)
    expected += _check_digit(expected, _SECOND_DIGIT_WEIGHTS)
    return digits == expected


def format_cnpj(value: str) -> str:
    digits = normalize_cnpj(value)
    if len(digits) != 14:
        return value
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
