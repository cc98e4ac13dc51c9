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
English number verbalizer

Renders an integer as English cardinal words:

    decompose -> phrase_group (per group) -> join_groups

Usage:
    >>> convert(92582349)
    'ninety-two million, five-hundred and eighty-two thousand, three-hundred and forty-nine'
    >>> to_words(-234, ConjunctionMode.NONE)
    'negative two-hundred thirty-four'
"""

from typing import Iterable, Union

from .conjunction import ConjunctionMode, should_insert_and
from .decomposer import decompose
from .symbol_table import (
    AND_WORD,
    GROUP_BASE,
    HUNDRED_WORD,
    NEGATIVE_WORD,
    TENS_WORDS,
    UNIT_WORDS,
    ZERO_WORD,
    scale_word,
)
from ..core.exceptions import NumberRangeError
from ..core.logger import get_logger
from ..core.numeral import MAX_MAGNITUDE

GROUP_SEPARATOR = ", "

logger = get_logger(__name__)


def under_hundred(value: int) -> str:
    """Words for 1-99, e.g. "twelve", "forty", "seventy-two" """
    if not 0 < value < 100:
        raise ValueError(f"Value {value} out of range 1..99")
    if value < 20:
        return UNIT_WORDS[value]
    tens, units = divmod(value, 10)
    if units:
        return f"{TENS_WORDS[tens]}-{UNIT_WORDS[units]}"
    return TENS_WORDS[tens]


def phrase_group(
    value: int,
    scale_index: int = 0,
    mode: ConjunctionMode = ConjunctionMode.ALWAYS,
    below_thousand: bool = True,
) -> str:
    """
    Render one 0-999 group, followed by its scale label

    Args:
        value (int): group value in [0, 999]
        scale_index (int): base-1000 position, 0 for the units group
        mode (ConjunctionMode): where "and" may be inserted
        below_thousand (bool): whether the whole number is less than 1000

    Returns:
        str: phrase such as "five-hundred and seventy-two thousand"
    """
    if not 0 <= value < GROUP_BASE:
        raise ValueError(f"Group value {value} out of range 0..{GROUP_BASE - 1}")
    if value == 0:
        # zero groups above the units are dropped by decompose
        if scale_index != 0:
            raise ValueError(f"Zero group is only valid at scale 0, got scale {scale_index}")
        return ZERO_WORD

    hundreds, remainder = divmod(value, 100)
    words = []
    if hundreds:
        words.append(f"{UNIT_WORDS[hundreds]}-{HUNDRED_WORD}")
    if should_insert_and(
        mode,
        hundreds_nonzero=hundreds > 0,
        remainder_nonzero=remainder > 0,
        is_last_group=scale_index == 0,
        below_thousand=below_thousand,
    ):
        words.append(AND_WORD)
    if remainder:
        words.append(under_hundred(remainder))

    scale = scale_word(scale_index)
    if scale:
        words.append(scale)
    return " ".join(words)


def join_groups(phrases: Iterable[str], is_negative: bool = False) -> str:
    """Join group phrases with ", " and prefix the sign word for negatives"""
    text = GROUP_SEPARATOR.join(phrases)
    if not text:
        text = ZERO_WORD
    if is_negative and text != ZERO_WORD:
        return f"{NEGATIVE_WORD} {text}"
    return text


def convert(
    magnitude: int,
    is_negative: bool = False,
    mode: Union[ConjunctionMode, str] = ConjunctionMode.ALWAYS,
) -> str:
    """
    Convert a sign and magnitude to English words

    Args:
        magnitude (int): absolute value, 0 <= magnitude <= MAX_MAGNITUDE
        is_negative (bool): whether the number is negative
        mode (ConjunctionMode | str): conjunction mode or its flag spelling

    Returns:
        str: English words

    Raises:
        ValueError: negative magnitude
        NumberRangeError: magnitude above MAX_MAGNITUDE
    """
    mode = ConjunctionMode.from_flag(mode)
    if magnitude < 0:
        raise ValueError(f"Magnitude must be non-negative, got {magnitude}")
    if magnitude > MAX_MAGNITUDE:
        raise NumberRangeError(f"{magnitude} is larger than the maximum {MAX_MAGNITUDE}")

    below_thousand = magnitude < GROUP_BASE
    phrases = [
        phrase_group(group.value, group.scale_index, mode, below_thousand)
        for group in decompose(magnitude)
    ]
    result = join_groups(phrases, is_negative)
    logger.debug(f"convert({magnitude}, negative={is_negative}, mode={mode}) -> {result}")
    return result


def to_words(number: int, mode: Union[ConjunctionMode, str] = ConjunctionMode.ALWAYS) -> str:
    """Convert a signed integer to English words"""
    return convert(abs(number), number < 0, mode)
