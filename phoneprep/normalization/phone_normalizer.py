"""Phone number normalizer.

Runs raw text through the pre-processing core (extract, viability gate,
extension split, digit normalization) and hands the surviving candidate to
``phonenumbers`` for country-aware parsing.  Country-code inference uses
*default_region* when no international prefix is present in the raw string.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import phonenumbers

from phoneprep.core.constants import MAX_INPUT_STRING_LENGTH, PhoneNumberFormat
from phoneprep.core.settings import get_settings
from phoneprep.text.extractor import extract_possible_number, strip_extension
from phoneprep.text.normalizer import normalize
from phoneprep.text.viability import is_viable_phone_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PhoneCandidate:
    """A viable number carved out of free text.

    Fields
    ------
    text:      extracted substring, extension included.
    number:    *text* without the extension suffix.
    extension: extension digits as written, or ``""``.
    digits:    *number* normalized to ASCII digits (vanity letters
               translated when there are at least three).
    """
    text: str
    number: str
    extension: str
    digits: str


def prepare_candidate(raw: str) -> PhoneCandidate | None:
    """Return the viable candidate in *raw*, or ``None``.

    ``None`` covers empty and whitespace-only input as well as text whose
    extracted core does not have the shape of a phone number.  Never raises.
    """
    if not raw or not raw.strip():
        return None
    if len(raw) > MAX_INPUT_STRING_LENGTH:
        logger.debug("prepare_candidate: input too long (length=%d)", len(raw))
        return None

    text = extract_possible_number(raw)
    if not is_viable_phone_number(text):
        # SAFETY: do not log raw value
        logger.debug("prepare_candidate: no viable number (length=%d)", len(raw))
        return None

    number, extension = strip_extension(text)
    return PhoneCandidate(text=text, number=number, extension=extension, digits=normalize(number))


def normalize_phone(
    raw: str,
    *,
    default_region: str | None = None,
    fmt: PhoneNumberFormat = PhoneNumberFormat.E164,
) -> str | None:
    """Return *raw* rendered in *fmt*, or ``None`` if it cannot be parsed.

    Parameters
    ----------
    raw:
        Raw phone string, possibly surrounded by other text.
    default_region:
        ISO-3166-1 alpha-2 country code assumed when *raw* carries no
        international dialling prefix.  Defaults to the configured
        ``PHONEPREP_DEFAULT_REGION`` (``"US"`` unless overridden).
    fmt:
        Output layout.  Defaults to E.164.

    Returns
    -------
    str | None
        Formatted number (e.g. ``"+12125551234"``) on success, or ``None``
        when the input is empty, not viable, not parseable or not a valid
        number for its region.  Never raises.
    """
    candidate = prepare_candidate(raw)
    if candidate is None:
        return None

    region = default_region or get_settings().default_region
    try:
        parsed = phonenumbers.parse(candidate.text, region)
    except phonenumbers.NumberParseException:
        # SAFETY: do not log raw value
        logger.debug("phone_normalizer: could not parse input (length=%d)", len(raw))
        return None

    if not phonenumbers.is_valid_number(parsed):
        logger.debug("phone_normalizer: parsed but invalid number")
        return None

    return phonenumbers.format_number(parsed, getattr(phonenumbers.PhoneNumberFormat, fmt.value))
