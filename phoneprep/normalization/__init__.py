"""Normalization package.

Hands text prepared by ``phoneprep.text`` to the ``phonenumbers`` library
for country-aware parsing and layout.  Every normalizer takes a raw string
and returns a canonical form, or ``None`` when the input is not a usable
phone number.  None of them raise.
"""
