"""Shared phone-number constants.

These values are the contract between the text pre-processing core in
``phoneprep.text`` and whatever parsing / formatting layer consumes its
output.  The enumerations are not used by the core itself but must be
identical wherever the core is embedded.

Length limits
-------------
MIN_LENGTH_FOR_NSN        shortest national significant number (3)
MAX_LENGTH_FOR_NSN        longest national significant number (15)
MAX_LENGTH_COUNTRY_CODE   longest country calling code (3)
"""
from __future__ import annotations

from enum import StrEnum

# ---------------------------------------------------------------------------
# Length limits
# ---------------------------------------------------------------------------

MIN_LENGTH_FOR_NSN = 3
MAX_LENGTH_FOR_NSN = 15
MAX_LENGTH_COUNTRY_CODE = 3

# Longer free text is refused before any pattern runs on it.
MAX_INPUT_STRING_LENGTH = 250

# ---------------------------------------------------------------------------
# Region / prefix constants
# ---------------------------------------------------------------------------

UNKNOWN_REGION = "ZZ"
NANPA_COUNTRY_CODE = 1
PLUS_SIGN = "+"

# Put in front of the extension when a number is rendered, e.g.
# "+1 650-253-0000 ext. 123".
DEFAULT_EXTN_PREFIX = " ext. "

# Country codes whose national significant numbers may start with a zero.
LEADING_ZERO_COUNTRIES: frozenset[int] = frozenset({
    39,   # Italy
    47,   # Norway
    225,  # Cote d'Ivoire
    227,  # Niger
    228,  # Togo
    241,  # Gabon
    242,  # Congo (Rep. of the)
    268,  # Swaziland
    378,  # San Marino
    379,  # Vatican City
    501,  # Belize
})


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PhoneNumberFormat(StrEnum):
    """Output layouts, per ITU-T E.123.

    INTERNATIONAL: ``+41 44 668 1800``
    NATIONAL:      ``044 668 1800``
    E164:          ``+41446681800``
    """

    E164 = "E164"
    INTERNATIONAL = "INTERNATIONAL"
    NATIONAL = "NATIONAL"


class PhoneNumberType(StrEnum):
    FIXED_LINE = "FIXED_LINE"
    MOBILE = "MOBILE"
    # Fixed-line and mobile cannot be told apart from the number alone
    # in some countries (e.g. the USA).
    FIXED_LINE_OR_MOBILE = "FIXED_LINE_OR_MOBILE"
    TOLL_FREE = "TOLL_FREE"
    PREMIUM_RATE = "PREMIUM_RATE"
    SHARED_COST = "SHARED_COST"
    VOIP = "VOIP"
    PERSONAL_NUMBER = "PERSONAL_NUMBER"
    PAGER = "PAGER"
    # Universal Access Numbers / company numbers
    UAN = "UAN"
    UNKNOWN = "UNKNOWN"


class MatchType(StrEnum):
    NOT_A_NUMBER = "NOT_A_NUMBER"
    NO_MATCH = "NO_MATCH"
    SHORT_NSN_MATCH = "SHORT_NSN_MATCH"
    NSN_MATCH = "NSN_MATCH"
    EXACT_MATCH = "EXACT_MATCH"


class ValidationResult(StrEnum):
    IS_POSSIBLE = "IS_POSSIBLE"
    INVALID_COUNTRY_CODE = "INVALID_COUNTRY_CODE"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
