# Copyright (c) 2025 Ming Yu (yuming@oppo.com), Liangliang Han (hanliangliang@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
number_words - English cardinal words for integers

Converts integers up to 2**64 - 1 into English words, with configurable
placement of the conjunction "and".

Functions:
    convert: (magnitude, is_negative, mode) -> words
    to_words: signed int -> words
    parse_numeral: numeral string -> ParsedNumeral

Usage:
    from number_words import ConjunctionMode, to_words

    to_words(1000355, ConjunctionMode.LAST_GROUP_ONLY)
    # 'one million, three-hundred and fifty-five'
"""

from .core import (
    MAX_MAGNITUDE,
    NumberRangeError,
    NumberWordsError,
    NumeralParseError,
    ParsedNumeral,
    parse_numeral,
)
from .english import ConjunctionMode, convert, to_words

__version__ = "1.0.0"
__author__ = "Ming Yu (yuming@oppo.com)"

__all__ = [
    "ConjunctionMode",
    "convert",
    "to_words",
    "parse_numeral",
    "ParsedNumeral",
    "MAX_MAGNITUDE",
    "NumberWordsError",
    "NumberRangeError",
    "NumeralParseError",
]
