"""Candidate extraction: carve the number-like core out of noisy text.

Steps applied by :func:`extract_possible_number`
------------------------------------------------
1. Return ``""`` when no plus sign or digit is present.
2. Drop everything before the first plus sign or digit.
3. Drop trailing characters that are neither letters nor numbers
   (a trailing ``#`` is kept because it may close an extension).
4. Cut the text before a second-number marker such as ``/x`` so that
   ``(530) 583-6985 x302/x2303`` yields only the first number.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

from phoneprep.text.patterns import (
    EXTN_PATTERN,
    SECOND_NUMBER_START_PATTERN,
    UNWANTED_END_CHAR_PATTERN,
    VALID_START_CHAR_PATTERN,
    extension_digits,
)
from phoneprep.text.viability import is_viable_phone_number

logger = logging.getLogger(__name__)


def extract_possible_number(number: str) -> str:
    """Return the substring of *number* that may hold a phone number.

    Returns ``""`` when nothing number-like is present.  Never raises.
    """
    start = VALID_START_CHAR_PATTERN.search(number)
    if start is None:
        return ""
    number = number[start.start():]

    trailing = UNWANTED_END_CHAR_PATTERN.search(number)
    if trailing is not None:
        number = number[:trailing.start()]

    second = SECOND_NUMBER_START_PATTERN.search(number)
    if second is not None:
        logger.debug("extract_possible_number: dropped second number at offset %d", second.start())
        number = number[:second.start()]

    return number


def strip_extension(number: str) -> tuple[str, str]:
    """Split a trailing extension off *number*.

    Returns ``(number_without_extension, extension_digits)``.  The split only
    happens when the part before the extension is itself viable, so
    ``"ext. 123"`` on its own is left alone.  When there is no extension the
    second element is ``""``.
    """
    match = EXTN_PATTERN.search(number)
    if match is None:
        return number, ""

    head = number[:match.start()]
    if not is_viable_phone_number(head):
        return number, ""

    return head, extension_digits(match)
