"""Phone-number text pre-processing core.

Carves a candidate number out of free text, checks that it has the shape
of a phone number and normalizes its characters to ASCII digits.  Pure
functions over tables and patterns compiled once at import; safe to call
from any number of threads.
"""
from .extractor import extract_possible_number, strip_extension
from .normalizer import convert_alpha_characters_in_number, normalize, normalize_digits_only
from .viability import is_viable_phone_number

__all__ = [
    "extract_possible_number",
    "strip_extension",
    "is_viable_phone_number",
    "normalize",
    "normalize_digits_only",
    "convert_alpha_characters_in_number",
]
