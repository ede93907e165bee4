"""Viability check: does a string have the shape of a phone number?

Shape only.  A viable string may still be unassigned or undialable; that
is for the metadata-driven parsing layer to decide.
"""
from __future__ import annotations

from phoneprep.core.constants import MIN_LENGTH_FOR_NSN
from phoneprep.text.patterns import VALID_PHONE_NUMBER_PATTERN


def is_viable_phone_number(number: str) -> bool:
    """Return True if *number* could plausibly be a phone number.

    Strings shorter than :data:`MIN_LENGTH_FOR_NSN` are rejected outright.
    Otherwise the whole string must match the viable-number grammar, with an
    optional extension suffix.  Never raises.
    """
    if len(number) < MIN_LENGTH_FOR_NSN:
        return False
    return VALID_PHONE_NUMBER_PATTERN.fullmatch(number) is not None
