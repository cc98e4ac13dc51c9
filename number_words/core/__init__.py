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
Core support module

Shared pieces used by the English renderer and its front ends: numeral
parsing, the exception hierarchy and the logging setup.

Main components:
- parse_numeral: numeral string -> (magnitude, sign)
- NumberWordsError and subclasses
- get_logger / setup_logging / auto_setup
"""

from .exceptions import NumberWordsError, NumberRangeError, NumeralParseError
from .numeral import MAX_MAGNITUDE, ParsedNumeral, clean_numeral, parse_numeral
from .logger import get_logger, setup_logging, auto_setup

__all__ = [
    "NumberWordsError",
    "NumberRangeError",
    "NumeralParseError",
    "MAX_MAGNITUDE",
    "ParsedNumeral",
    "clean_numeral",
    "parse_numeral",
    "get_logger",
    "setup_logging",
    "auto_setup",
]
