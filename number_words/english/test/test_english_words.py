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

# !/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for English number verbalization
"""

import sys
import os

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../../..")))

from number_words import MAX_MAGNITUDE, NumberRangeError  # noqa: E402
from number_words.english import (  # noqa: E402
    ConjunctionMode,
    Group,
    convert,
    decompose,
    join_groups,
    phrase_group,
    should_insert_and,
    to_words,
    under_hundred,
)

NONE = ConjunctionMode.NONE
LAST = ConjunctionMode.LAST_GROUP_ONLY
BELOW1K = ConjunctionMode.BELOW_ONE_THOUSAND_ONLY
ALL = ConjunctionMode.ALWAYS

ALL_MODES = list(ConjunctionMode)


class TestDecompose:
    def test_zero_is_single_units_group(self):
        assert decompose(0) == [Group(0, 0)]

    @pytest.mark.parametrize("magnitude", [1, 7, 19, 100, 512, 999])
    def test_below_thousand_is_one_group(self, magnitude):
        assert decompose(magnitude) == [Group(magnitude, 0)]

    def test_every_value_below_thousand(self):
        for magnitude in range(1, 1000):
            assert decompose(magnitude) == [(magnitude, 0)]

    @pytest.mark.parametrize("magnitude", [1000, 1001, 2105, 200105, 999999, 123000, 500500])
    def test_below_million_has_thousands_and_units(self, magnitude):
        expected = [Group(magnitude // 1000, 1)]
        if magnitude % 1000:
            expected.append(Group(magnitude % 1000, 0))
        assert decompose(magnitude) == expected

    def test_zero_groups_are_dropped(self):
        assert decompose(14_000_001_019) == [Group(14, 3), Group(1, 1), Group(19, 0)]
        assert decompose(532_428_000) == [Group(532, 2), Group(428, 1)]

    def test_most_significant_first(self):
        groups = decompose(543_953_459_343)
        assert [g.scale_index for g in groups] == [3, 2, 1, 0]
        assert [g.scale for g in groups] == ["billion", "million", "thousand", ""]

    def test_max_magnitude_uses_quintillion(self):
        groups = decompose(MAX_MAGNITUDE)
        assert groups[0] == Group(18, 6)
        assert groups[0].scale == "quintillion"

    def test_beyond_scale_table_raises(self):
        with pytest.raises(NumberRangeError):
            decompose(10**21)

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            decompose(-1)


class TestShouldInsertAnd:
    @pytest.mark.parametrize("mode", ALL_MODES)
    @pytest.mark.parametrize("hundreds,remainder", [(False, False), (True, False), (False, True)])
    def test_requires_hundreds_and_remainder(self, mode, hundreds, remainder):
        for is_last in (True, False):
            for below in (True, False):
                assert not should_insert_and(mode, hundreds, remainder, is_last, below)

    @pytest.mark.parametrize(
        "mode,is_last,below,expected",
        [
            (NONE, True, True, False),
            (NONE, False, False, False),
            (ALL, True, True, True),
            (ALL, False, False, True),
            (LAST, True, False, True),
            (LAST, True, True, True),
            (LAST, False, False, False),
            (BELOW1K, True, True, True),
            (BELOW1K, True, False, False),
            (BELOW1K, False, False, False),
        ],
    )
    def test_decision_table(self, mode, is_last, below, expected):
        assert should_insert_and(mode, True, True, is_last, below) is expected


class TestPhraseGroup:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (3, "three"),
            (12, "twelve"),
            (19, "nineteen"),
            (20, "twenty"),
            (47, "forty-seven"),
            (80, "eighty"),
        ],
    )
    def test_under_hundred(self, value, expected):
        assert under_hundred(value) == expected

    @pytest.mark.parametrize("value", [0, 100, -5])
    def test_under_hundred_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            under_hundred(value)

    @pytest.mark.parametrize(
        "value,mode,expected",
        [
            (120, ALL, "one-hundred and twenty"),
            (403, ALL, "four-hundred and three"),
            (612, ALL, "six-hundred and twelve"),
            (919, NONE, "nine-hundred nineteen"),
            (700, ALL, "seven-hundred"),
            (47, ALL, "forty-seven"),
        ],
    )
    def test_units_group(self, value, mode, expected):
        assert phrase_group(value, 0, mode) == expected

    def test_scale_label_appended(self):
        assert phrase_group(572, 1, ALL, below_thousand=False) == (
            "five-hundred and seventy-two thousand"
        )
        assert phrase_group(5, 2, ALL, below_thousand=False) == "five million"

    def test_last_group_only_skips_higher_groups(self):
        assert phrase_group(120, 1, LAST, below_thousand=False) == "one-hundred twenty thousand"
        assert phrase_group(612, 0, LAST, below_thousand=False) == "six-hundred and twelve"

    def test_below_thousand_only(self):
        assert phrase_group(612, 0, BELOW1K, below_thousand=True) == "six-hundred and twelve"
        assert phrase_group(612, 0, BELOW1K, below_thousand=False) == "six-hundred twelve"

    def test_zero(self):
        assert phrase_group(0) == "zero"

    @pytest.mark.parametrize("scale_index", [1, 2, 6])
    def test_zero_above_units_raises(self, scale_index):
        with pytest.raises(ValueError):
            phrase_group(0, scale_index)

    @pytest.mark.parametrize("value", [1000, 2105, -1])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            phrase_group(value)


class TestJoinGroups:
    def test_comma_separated(self):
        assert join_groups(["one million", "five"]) == "one million, five"

    def test_negative_prefix(self):
        assert join_groups(["five"], is_negative=True) == "negative five"

    def test_zero_never_negative(self):
        assert join_groups(["zero"], is_negative=True) == "zero"
        assert join_groups([], is_negative=True) == "zero"


class TestConvert:
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_zero(self, mode):
        assert convert(0, False, mode) == "zero"
        assert convert(0, True, mode) == "zero"

    def test_conjunction_on_and_off(self):
        assert convert(234, False, ALL) == "two-hundred and thirty-four"
        assert convert(234, False, NONE) == "two-hundred thirty-four"

    @pytest.mark.parametrize(
        "magnitude,mode,expected",
        [
            (
                92_582_349,
                ALL,
                "ninety-two million, five-hundred and eighty-two thousand, "
                "three-hundred and forty-nine",
            ),
            (
                543_953_459_343,
                ALL,
                "five-hundred and forty-three billion, nine-hundred and fifty-three million, "
                "four-hundred and fifty-nine thousand, three-hundred and forty-three",
            ),
            (
                532_428_000,
                LAST,
                "five-hundred thirty-two million, four-hundred twenty-eight thousand",
            ),
            (1_000_355, LAST, "one million, three-hundred and fifty-five"),
            (678, BELOW1K, "six-hundred and seventy-eight"),
            (400_000_000_123, BELOW1K, "four-hundred billion, one-hundred twenty-three"),
        ],
    )
    def test_scenarios(self, magnitude, mode, expected):
        assert convert(magnitude, False, mode) == expected

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (NONE, "three-hundred fifty million, four-hundred thirty"),
            (LAST, "three-hundred fifty million, four-hundred and thirty"),
            (BELOW1K, "three-hundred fifty million, four-hundred thirty"),
            (ALL, "three-hundred and fifty million, four-hundred and thirty"),
        ],
    )
    def test_each_mode(self, mode, expected):
        assert convert(350_000_430, False, mode) == expected

    def test_small_groups(self):
        assert convert(2105, False, NONE) == "two thousand, one-hundred five"
        assert convert(14_000_001_019, False, ALL) == "fourteen billion, one thousand, nineteen"
        assert convert(4_000_175_999, False, LAST) == (
            "four billion, one-hundred seventy-five thousand, nine-hundred and ninety-nine"
        )

    def test_max_magnitude(self):
        assert convert(MAX_MAGNITUDE, False, NONE) == (
            "eighteen quintillion, four-hundred forty-six quadrillion, "
            "seven-hundred forty-four trillion, seventy-three billion, "
            "seven-hundred nine million, five-hundred fifty-one thousand, "
            "six-hundred fifteen"
        )
        assert convert(MAX_MAGNITUDE, False, LAST).endswith("six-hundred and fifteen")

    def test_above_max_magnitude_raises(self):
        with pytest.raises(NumberRangeError):
            convert(MAX_MAGNITUDE + 1)

    def test_negative_magnitude_raises(self):
        with pytest.raises(ValueError):
            convert(-5)

    def test_mode_flag_spelling(self):
        assert convert(234, False, "none") == "two-hundred thirty-four"
        with pytest.raises(ValueError):
            convert(234, False, "sometimes")

    @pytest.mark.parametrize("mode", [None, 1, 2.5, ["all"]])
    def test_mode_of_wrong_type_raises_value_error(self, mode):
        with pytest.raises(ValueError, match="Invalid \"and\" option"):
            ConjunctionMode.from_flag(mode)
        with pytest.raises(ValueError):
            convert(234, False, mode)

    @pytest.mark.parametrize("mode", ALL_MODES)
    @pytest.mark.parametrize("magnitude", [1, 15, 101, 1000, 1_000_355, 92_582_349, MAX_MAGNITUDE])
    def test_sign_prefix(self, mode, magnitude):
        assert convert(magnitude, True, mode) == "negative " + convert(magnitude, False, mode)

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_output_is_clean(self, mode):
        for magnitude in [0, 5, 100, 1000, 1_000_000, 10_203_004, 999_999_999_999, MAX_MAGNITUDE]:
            for negative in (False, True):
                words = convert(magnitude, negative, mode)
                assert words == words.strip()
                assert "  " not in words
                assert ", ," not in words
                assert not words.endswith(",")
                assert words.count("negative") == (1 if negative and magnitude else 0)


def test_to_words_signed():
    assert to_words(-234, NONE) == "negative two-hundred thirty-four"
    assert to_words(8) == "eight"
    assert to_words(0) == "zero"
