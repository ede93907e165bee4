"""Tests for the phoneprep/normalization package."""
from __future__ import annotations

import pytest

from phoneprep.core.constants import MAX_INPUT_STRING_LENGTH, PhoneNumberFormat
from phoneprep.normalization.phone_normalizer import (
    PhoneCandidate,
    normalize_phone,
    prepare_candidate,
)


# ---------------------------------------------------------------------------
# Candidate preparation
# ---------------------------------------------------------------------------


class TestPrepareCandidate:
    def test_number_with_extension_in_text(self) -> None:
        candidate = prepare_candidate("Call (650) 253-0000 ext. 123.")
        assert candidate == PhoneCandidate(
            text="650) 253-0000 ext. 123",
            number="650) 253-0000",
            extension="123",
            digits="6502530000",
        )

    def test_vanity_number(self) -> None:
        candidate = prepare_candidate("1-800-FLOWERS")
        assert candidate is not None
        assert candidate.digits == "18003569377"
        assert candidate.extension == ""

    def test_second_number_dropped(self) -> None:
        candidate = prepare_candidate("(530) 583-6985 x302/x2303")
        assert candidate is not None
        assert candidate.number == "530) 583-6985"
        assert candidate.extension == "302"

    def test_script_digits(self) -> None:
        candidate = prepare_candidate("رقم: ٠١٢٣٤٥٦٧٨٩")
        assert candidate is not None
        assert candidate.digits == "0123456789"

    @pytest.mark.parametrize("raw", ["", "   ", "no digits here", "12", "call 7!"])
    def test_not_viable_returns_none(self, raw: str) -> None:
        assert prepare_candidate(raw) is None

    def test_input_over_length_limit_refused(self) -> None:
        raw = "+1 650 253 0000" + " " * MAX_INPUT_STRING_LENGTH
        assert prepare_candidate(raw) is None
        assert prepare_candidate(raw.strip()) is not None

    def test_long_noise_returns_none(self) -> None:
        assert normalize_phone("1 " * 5000 + "@") is None

    def test_candidate_is_immutable(self) -> None:
        candidate = prepare_candidate("+1 650 253 0000")
        assert candidate is not None
        with pytest.raises(AttributeError):
            candidate.digits = "0"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Phone normalizer
# ---------------------------------------------------------------------------


class TestPhoneNormalizerUSFormats:
    """Five common US formats should all produce the same E.164 string."""

    _E164 = "+12125551234"

    def test_parenthesized_area_code(self) -> None:
        assert normalize_phone("(212) 555-1234") == self._E164

    def test_dashes(self) -> None:
        assert normalize_phone("212-555-1234") == self._E164

    def test_dots(self) -> None:
        assert normalize_phone("212.555.1234") == self._E164

    def test_no_separator(self) -> None:
        assert normalize_phone("2125551234") == self._E164

    def test_international_prefix(self) -> None:
        assert normalize_phone("+1 212 555 1234") == self._E164


class TestPhoneNormalizerInternational:
    def test_india_plus91(self) -> None:
        assert normalize_phone("+91 98765 43210") == "+919876543210"

    def test_uk_plus44(self) -> None:
        assert normalize_phone("+44 7911 123456") == "+447911123456"

    def test_fullwidth_digits(self) -> None:
        assert normalize_phone("＋４４ ７９１１ １２３４５６") == "+447911123456"


class TestPhoneNormalizerNoisyText:
    def test_surrounding_text(self) -> None:
        assert normalize_phone("Call (650) 253-0000 ext. 123.") == "+16502530000"

    def test_vanity_number(self) -> None:
        assert normalize_phone("1-800-FLOWERS") == "+18003569377"


class TestPhoneNormalizerFormats:
    def test_national(self) -> None:
        assert normalize_phone("+1 212 555 1234", fmt=PhoneNumberFormat.NATIONAL) == "(212) 555-1234"

    def test_international(self) -> None:
        result = normalize_phone("+1 212 555 1234", fmt=PhoneNumberFormat.INTERNATIONAL)
        assert result == "+1 212-555-1234"


class TestPhoneNormalizerEdgeCases:
    def test_unparseable_string_returns_none(self) -> None:
        assert normalize_phone("not-a-phone") is None

    def test_empty_string_returns_none(self) -> None:
        assert normalize_phone("") is None

    def test_whitespace_only_returns_none(self) -> None:
        assert normalize_phone("   ") is None

    def test_letters_only_returns_none(self) -> None:
        assert normalize_phone("abcdefghij") is None

    def test_too_short_returns_none(self) -> None:
        # 5 digits is not a valid NANP number
        assert normalize_phone("12345") is None

    def test_default_region_us(self) -> None:
        # Without a country prefix, US is assumed
        assert normalize_phone("8005551234") == "+18005551234"

    def test_explicit_region_gb(self) -> None:
        # UK local format resolved with explicit region
        assert normalize_phone("07911 123456", default_region="GB") == "+447911123456"

    def test_configured_region(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PHONEPREP_DEFAULT_REGION", "GB")
        assert normalize_phone("07911 123456") == "+447911123456"

    def test_returns_none_never_raises(self) -> None:
        # Garbage input must never raise
        assert normalize_phone("!!!###$$$") is None
