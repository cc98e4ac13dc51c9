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
English cardinal word tables

Read-only lookup tables shared by the decomposer and the verbalizer. All
tables are tuples indexed by the integer they name.
"""

ZERO_WORD = "zero"
HUNDRED_WORD = "hundred"
AND_WORD = "and"
NEGATIVE_WORD = "negative"

# 0-19, index 0 is never spoken inside a group
UNIT_WORDS = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

# Indexed by the tens digit
TENS_WORDS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# Indexed by the base-1000 position, 0 = units
SCALE_WORDS = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
)

GROUP_BASE = 1000
MAX_SCALE_INDEX = len(SCALE_WORDS) - 1


def scale_word(scale_index: int) -> str:
    """Scale label for a base-1000 position, empty for the units group"""
    if not 0 <= scale_index <= MAX_SCALE_INDEX:
        raise IndexError(f"Scale index {scale_index} out of range 0..{MAX_SCALE_INDEX}")
    return SCALE_WORDS[scale_index]
