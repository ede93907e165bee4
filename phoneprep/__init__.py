"""phoneprep: telephone-number text extraction, viability and normalization."""

from phoneprep.text import (
    convert_alpha_characters_in_number,
    extract_possible_number,
    is_viable_phone_number,
    normalize,
    normalize_digits_only,
    strip_extension,
)

__all__ = [
    "extract_possible_number",
    "strip_extension",
    "is_viable_phone_number",
    "normalize",
    "normalize_digits_only",
    "convert_alpha_characters_in_number",
]
