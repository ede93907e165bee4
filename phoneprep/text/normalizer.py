"""Digit normalization.

All three entry points rewrite a string one character at a time through a
mapping table.  Each character is upper-cased before lookup so that both
``a`` and ``A`` map to ``2``.

normalize_digits_only              digits of any script only
convert_alpha_characters_in_number letters to keypad digits, rest kept
normalize                          letters translated when there are at least
                                   three of them, everything else dropped
"""
from __future__ import annotations

from collections.abc import Mapping

from phoneprep.text.mappings import ALL_NORMALIZATION_MAPPINGS, DIGIT_MAPPINGS, lookup
from phoneprep.text.patterns import VALID_ALPHA_PHONE_PATTERN


def _normalize_helper(
    number: str,
    normalization_replacements: Mapping[str, str],
    remove_non_matches: bool,
) -> str:
    normalized: list[str] = []
    for char in number:
        digit = lookup(char.upper(), normalization_replacements)
        if digit is not None:
            normalized.append(digit)
        elif not remove_non_matches:
            normalized.append(char)
    return "".join(normalized)


def normalize(number: str) -> str:
    """Normalize *number* to canonical digits.

    When the string looks like a vanity number (three or more letters) the
    letters are translated to keypad digits; otherwise letters are dropped
    along with punctuation.
    """
    if VALID_ALPHA_PHONE_PATTERN.fullmatch(number):
        return _normalize_helper(number, ALL_NORMALIZATION_MAPPINGS, True)
    return normalize_digits_only(number)


def normalize_digits_only(number: str) -> str:
    """Keep only digits (any supported script), as ASCII."""
    return _normalize_helper(number, DIGIT_MAPPINGS, True)


def convert_alpha_characters_in_number(number: str) -> str:
    """Translate letters and script digits, keeping every other character."""
    return _normalize_helper(number, ALL_NORMALIZATION_MAPPINGS, False)
