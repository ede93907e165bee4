"""Character-to-digit mapping tables.

Three read-only tables map a single character to a canonical ASCII digit
``'0'``–``'9'``:

DIGIT_MAPPINGS              ASCII, fullwidth and Arabic-Indic digits
ALPHA_MAPPINGS              upper-case A–Z to telephone keypad digits
ALL_NORMALIZATION_MAPPINGS  union of the two

Only upper-case letters are stored; callers upper-case a character before
looking it up.  The tables are validated once at import time and exposed as
``MappingProxyType`` so nothing can mutate them afterwards.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

_CANONICAL_DIGITS = frozenset("0123456789")


class MappingTableError(ValueError):
    """A mapping table is malformed.  Raised at import, never per call."""


# ---------------------------------------------------------------------------
# Table construction
# ---------------------------------------------------------------------------

def _digit_script(zero: str) -> dict[str, str]:
    """Map the ten consecutive code points starting at *zero* to 0–9."""
    base = ord(zero)
    return {chr(base + value): str(value) for value in range(10)}


def _keypad(groups: dict[str, str]) -> dict[str, str]:
    return {letter: digit for letters, digit in groups.items() for letter in letters}


def _validate(name: str, table: Mapping[str, str]) -> None:
    for key, value in table.items():
        if len(key) != 1:
            raise MappingTableError(f"{name}: key {key!r} is not a single character")
        if value not in _CANONICAL_DIGITS:
            raise MappingTableError(f"{name}: {key!r} maps to non-digit {value!r}")


def _union(*tables: Mapping[str, str]) -> dict[str, str]:
    combined: dict[str, str] = {}
    for table in tables:
        overlap = combined.keys() & table.keys()
        if overlap:
            raise MappingTableError(f"overlapping mapping keys: {sorted(overlap)!r}")
        combined.update(table)
    return combined


_DIGITS: dict[str, str] = {
    **_digit_script("0"),       # ASCII
    **_digit_script("\uff10"),  # fullwidth digits
    **_digit_script("\u0660"),  # Arabic-Indic digits
}

_ALPHA: dict[str, str] = _keypad({
    "ABC": "2",
    "DEF": "3",
    "GHI": "4",
    "JKL": "5",
    "MNO": "6",
    "PQRS": "7",
    "TUV": "8",
    "WXYZ": "9",
})

_validate("DIGIT_MAPPINGS", _DIGITS)
_validate("ALPHA_MAPPINGS", _ALPHA)

DIGIT_MAPPINGS: Mapping[str, str] = MappingProxyType(_DIGITS)
ALPHA_MAPPINGS: Mapping[str, str] = MappingProxyType(_ALPHA)
ALL_NORMALIZATION_MAPPINGS: Mapping[str, str] = MappingProxyType(_union(_DIGITS, _ALPHA))

# Character strings for building regex character classes.  Alpha characters
# are accepted in either case; only ASCII letters are recognised.
VALID_DIGITS = "".join(DIGIT_MAPPINGS)
VALID_ALPHA = "".join(ALPHA_MAPPINGS) + "".join(ALPHA_MAPPINGS).lower()
PLUS_CHARS = "+\uff0b"


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def lookup(char: str, table: Mapping[str, str]) -> str | None:
    """Return the canonical digit for *char* in *table*, or ``None``."""
    return table.get(char)
