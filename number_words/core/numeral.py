# Copyright (c) 2025 Ming Yu
# Licensed under the Apache License, Version 2.0

import re
from typing import NamedTuple

from .exceptions import NumberRangeError, NumeralParseError

# Largest value representable by an unsigned 64-bit integer
MAX_MAGNITUDE = 2**64 - 1

GROUPING_CHARS = ",_"

_NUMERAL_PATTERN = re.compile(r"([+-]?)([0-9]+)")


class ParsedNumeral(NamedTuple):
    text: str
    magnitude: int
    is_negative: bool


def clean_numeral(text: str) -> str:
    """Strip surrounding whitespace and digit grouping characters"""
    cleaned = text.strip()
    for char in GROUPING_CHARS:
        cleaned = cleaned.replace(char, "")
    return cleaned


def parse_numeral(text: str) -> ParsedNumeral:
    """
    Parse a numeral string into sign and magnitude

    Args:
        text (str): Numeral text (e.g., "42", "-1,000", "543_953_459_343")

    Returns:
        ParsedNumeral: original text, magnitude and sign

    Raises:
        NumeralParseError: text is not an optionally signed run of digits
        NumberRangeError: magnitude is above MAX_MAGNITUDE
    """
    if text is None:
        raise NumeralParseError("Invalid input: None")

    match = _NUMERAL_PATTERN.fullmatch(clean_numeral(text))
    if match is None:
        raise NumeralParseError(f"Invalid input: {text}")

    sign, digits = match.groups()
    magnitude = int(digits)
    if magnitude > MAX_MAGNITUDE:
        raise NumberRangeError(f"Too big: {text}")

    # "-0" is plain zero
    return ParsedNumeral(text, magnitude, sign == "-" and magnitude != 0)
