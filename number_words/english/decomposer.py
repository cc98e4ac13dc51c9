# Copyright (c) 2025 Ming Yu
# Licensed under the Apache License, Version 2.0

from typing import List, NamedTuple

from .symbol_table import GROUP_BASE, MAX_SCALE_INDEX, SCALE_WORDS
from ..core.exceptions import NumberRangeError
from ..core.logger import get_logger

logger = get_logger(__name__)


class Group(NamedTuple):
    """A base-1000 segment of a number and its place-value position"""

    value: int
    scale_index: int

    @property
    def scale(self) -> str:
        return SCALE_WORDS[self.scale_index]

    @property
    def is_units(self) -> bool:
        return self.scale_index == 0


def decompose(magnitude: int) -> List[Group]:
    """
    Split a magnitude into base-1000 groups, most significant first

    Zero-valued groups are dropped; zero itself yields a single (0, 0) group.

    Args:
        magnitude (int): non-negative integer

    Returns:
        List[Group]: groups ordered from the highest scale down

    Raises:
        ValueError: magnitude is negative
        NumberRangeError: magnitude needs a scale beyond the scale table
    """
    if magnitude < 0:
        raise ValueError(f"Magnitude must be non-negative, got {magnitude}")
    if magnitude == 0:
        return [Group(0, 0)]

    groups = []
    scale_index = 0
    remaining = magnitude
    while remaining > 0:
        if scale_index > MAX_SCALE_INDEX:
            raise NumberRangeError(
                f"{magnitude} exceeds the largest supported scale ({SCALE_WORDS[-1]})"
            )
        remaining, value = divmod(remaining, GROUP_BASE)
        if value:
            groups.append(Group(value, scale_index))
        scale_index += 1

    groups.reverse()
    logger.debug(f"Decomposed {magnitude} into {groups}")
    return groups
