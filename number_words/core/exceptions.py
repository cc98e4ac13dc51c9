# Copyright (c) 2025 Ming Yu
# Licensed under the Apache License, Version 2.0


class NumberWordsError(Exception):
    """Base class for errors raised by number_words"""


class NumberRangeError(NumberWordsError, ValueError):
    """Magnitude is larger than the largest supported scale"""


class NumeralParseError(NumberWordsError, ValueError):
    """Numeral string could not be parsed into a sign and magnitude"""
