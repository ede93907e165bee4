"""Compiled pattern library: what a phone number "looks like".

Every pattern is assembled from string fragments and compiled exactly once,
when this module is imported, into a frozen :class:`PatternLibrary`.  The
instance ``PATTERNS`` and the module-level aliases below are shared by
reference; no pattern is built or altered per call.

Grammar summary
---------------
valid_start_char     plus sign or any digit-table character
unwanted_end_chars   trailing run of non-letter, non-number characters,
                     except ``#`` (it may close an extension)
second_number_start  ``/`` or ``\\`` then optional spaces then ``x``
valid_alpha_phone    three or more ASCII letters anywhere
valid_phone_number   plus*, three or more (punctuation* digit) groups, then
                     punctuation / alpha / digits, optional extension
extn                 known extension suffix anchored at the end

Only the extension grammar and the full viable-number grammar are compiled
case-insensitively.  End anchors are ``\\Z`` so a trailing newline is never
mistaken for the end of the string.

Formatting-layer contract
-------------------------
``capturing_digit``, ``unique_international_prefix``, ``non_digits``,
``first_group``, ``np``, ``fg`` and ``cc`` are not used by the text core.
They are compiled here so that the country-metadata formatting layer shares
the same digit alphabet and placeholder syntax.  :func:`classify` and
``EXTN_MARKER_CHARS`` are offered to the same consumers for per-character
inspection.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from phoneprep.text.mappings import DIGIT_MAPPINGS, PLUS_CHARS, VALID_ALPHA, VALID_DIGITS

# ---------------------------------------------------------------------------
# Character-class fragments
# ---------------------------------------------------------------------------

# Punctuation accepted inside a number: dashes, white space, full stops,
# slashes, brackets, parentheses and tildes.  The letter "x" is included
# because some numbers use it as a carrier-code placeholder.  Must stay at
# the front of any class it is combined into since it starts with "-".
VALID_PUNCTUATION = (
    "-x\u2010-\u2015\u2212\uff0d-\uff0f "
    "\u00a0\u200b\u2060\u3000()\uff08\uff09\uff3b\uff3d.\\[\\]/~\u2053\u223c\uff5e"
)

# Characters that introduce an extension without being punctuation.
EXTN_MARKER_CHARS = ",#\uff03\uff58"

_DIGIT_CLASS = "[" + VALID_DIGITS + "]"

VALID_START_CHAR = "[" + PLUS_CHARS + VALID_DIGITS + "]"

SECOND_NUMBER_START = r"[\\/] *x"

# Underscore is a word character but not a letter or number.
UNWANTED_END_CHARS = r"(?:[^\w#]|_)+\Z"

VALID_ALPHA_PHONE = r"(?:.*?[A-Za-z]){3}.*"

# plus*([punctuation]*[digits]){3,}([punctuation]|[alpha]|[digits])*
# written with exactly three leading groups: the trailing class already
# covers any further (punctuation* digit) groups, and leaving the count open
# makes failed matches backtrack quadratically.
VALID_PHONE_NUMBER = (
    "[" + PLUS_CHARS + "]*"
    "(?:[" + VALID_PUNCTUATION + "]*" + _DIGIT_CLASS + "){3}"
    "[" + VALID_PUNCTUATION + VALID_ALPHA + VALID_DIGITS + "]*"
)

# All the ways an extension is written.  The first alternative takes an
# optional separator, a marker, an optional full stop or colon and 1-7
# digits.  The second covers the American "- 503#" form.  The only
# capturing groups are the extension digits.  The accented "o" of
# "extensión" is accepted precomposed or with a combining acute accent.
KNOWN_EXTN_PATTERNS = (
    "[ \u00a0\\t,]*"
    "(?:ext(?:ensi(?:o\u0301?|\u00f3))?n?|\uff45\uff58\uff54\uff4e?|"
    "[,x\uff58#\uff03~\uff5e]|int|anexo|\uff49\uff4e\uff54)"
    "[:\\.\uff0e]?[ \u00a0\\t,-]*"
    "(" + _DIGIT_CLASS + "{1,7})#?"
    "|[- ]+(" + _DIGIT_CLASS + "{1,5})#"
)

UNIQUE_INTERNATIONAL_PREFIX = "[\\d]+(?:[~\u2053\u223c\uff5e][\\d]+)?"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PatternLibrary:
    """Every compiled pattern the text core uses.

    Attributes
    ----------
    valid_start_char:            where a genuine number may begin (search).
    unwanted_end_chars:          trailing noise to cut off (search).
    second_number_start:         start of a concatenated second number (search).
    valid_alpha_phone:           alpha-number heuristic (fullmatch).
    valid_phone_number:          viable number with optional extension (fullmatch).
    extn:                        extension suffix at the end (search).
    capturing_digit:             a single digit-table character, captured.
    unique_international_prefix: a single international prefix such as
                                 ``011`` or ``8~10`` (fullmatch).
    non_digits / first_group / np / fg / cc:
                                 formatting-rule helpers; ``np``, ``fg`` and
                                 ``cc`` find the ``$NP``, ``$FG`` and ``$CC``
                                 placeholders.
    """
    valid_start_char: re.Pattern[str]
    unwanted_end_chars: re.Pattern[str]
    second_number_start: re.Pattern[str]
    valid_alpha_phone: re.Pattern[str]
    valid_phone_number: re.Pattern[str]
    extn: re.Pattern[str]
    capturing_digit: re.Pattern[str]
    unique_international_prefix: re.Pattern[str]
    non_digits: re.Pattern[str]
    first_group: re.Pattern[str]
    np: re.Pattern[str]
    fg: re.Pattern[str]
    cc: re.Pattern[str]


def _build_library() -> PatternLibrary:
    return PatternLibrary(
        valid_start_char=re.compile(VALID_START_CHAR),
        unwanted_end_chars=re.compile(UNWANTED_END_CHARS),
        second_number_start=re.compile(SECOND_NUMBER_START),
        valid_alpha_phone=re.compile(VALID_ALPHA_PHONE, re.DOTALL),
        valid_phone_number=re.compile(
            VALID_PHONE_NUMBER + "(?:" + KNOWN_EXTN_PATTERNS + ")?", re.IGNORECASE
        ),
        extn=re.compile("(?:" + KNOWN_EXTN_PATTERNS + r")\Z", re.IGNORECASE),
        capturing_digit=re.compile("(" + _DIGIT_CLASS + ")"),
        unique_international_prefix=re.compile(UNIQUE_INTERNATIONAL_PREFIX),
        non_digits=re.compile(r"(\D+)"),
        first_group=re.compile(r"(\$1)"),
        np=re.compile(r"\$NP"),
        fg=re.compile(r"\$FG"),
        cc=re.compile(r"\$CC"),
    )


PATTERNS = _build_library()

VALID_START_CHAR_PATTERN = PATTERNS.valid_start_char
UNWANTED_END_CHAR_PATTERN = PATTERNS.unwanted_end_chars
SECOND_NUMBER_START_PATTERN = PATTERNS.second_number_start
VALID_ALPHA_PHONE_PATTERN = PATTERNS.valid_alpha_phone
VALID_PHONE_NUMBER_PATTERN = PATTERNS.valid_phone_number
EXTN_PATTERN = PATTERNS.extn

_PUNCTUATION_CHAR = re.compile("[" + VALID_PUNCTUATION + "]")


# ---------------------------------------------------------------------------
# Character categories
# ---------------------------------------------------------------------------

class CharCategory(StrEnum):
    PLUS = "plus"
    DIGIT = "digit"
    ALPHA = "alpha"
    PUNCTUATION = "punctuation"
    EXTENSION_MARKER = "extension_marker"
    OTHER = "other"


def classify(char: str) -> CharCategory:
    """Return the category of a single character.

    Membership is checked in order plus, digit, alpha, punctuation,
    extension marker, so ``x`` counts as ALPHA and ``~`` as PUNCTUATION.
    Anything that is not exactly one character is OTHER.
    """
    if len(char) != 1:
        return CharCategory.OTHER
    if char in PLUS_CHARS:
        return CharCategory.PLUS
    if char in DIGIT_MAPPINGS:
        return CharCategory.DIGIT
    if char in VALID_ALPHA:
        return CharCategory.ALPHA
    if _PUNCTUATION_CHAR.fullmatch(char):
        return CharCategory.PUNCTUATION
    if char in EXTN_MARKER_CHARS:
        return CharCategory.EXTENSION_MARKER
    return CharCategory.OTHER


def extension_digits(match: re.Match[str]) -> str:
    """Return the digits captured by whichever extension alternative matched."""
    for group in match.groups():
        if group:
            return group
    return ""
