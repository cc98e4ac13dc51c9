# Copyright (c) 2025 Ming Yu
# Licensed under the Apache License, Version 2.0

from enum import Enum


class ConjunctionMode(Enum):
    """Where the word "and" goes between a group's hundreds and its remainder"""

    NONE = "none"
    LAST_GROUP_ONLY = "last"
    BELOW_ONE_THOUSAND_ONLY = "below1k"
    ALWAYS = "all"

    @classmethod
    def from_flag(cls, value: str) -> "ConjunctionMode":
        """
        Look up a mode by its command-line spelling

        Args:
            value (str): one of "none", "last", "below1k", "all" (any case)

        Returns:
            ConjunctionMode: the matching mode

        Raises:
            ValueError: unknown spelling
        """
        if isinstance(value, cls):
            return value
        choices = ", ".join(mode.value for mode in cls)
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f'Invalid "and" option: {value!r} (choose from {choices})')

    def __str__(self):
        return self.value


FLAG_CHOICES = tuple(mode.value for mode in ConjunctionMode)


def should_insert_and(
    mode: ConjunctionMode,
    hundreds_nonzero: bool,
    remainder_nonzero: bool,
    is_last_group: bool,
    below_thousand: bool,
) -> bool:
    """
    Decide whether "and" joins a group's hundreds part and its remainder

    Args:
        mode: conjunction mode for the whole conversion
        hundreds_nonzero: the group has a hundreds digit
        remainder_nonzero: the group has a non-zero tens/units part
        is_last_group: the group is the units group of the number
        below_thousand: the whole number is less than 1000

    Returns:
        bool: True when "and" is inserted
    """
    if not (hundreds_nonzero and remainder_nonzero):
        return False
    if mode is ConjunctionMode.NONE:
        return False
    if mode is ConjunctionMode.ALWAYS:
        return True
    if mode is ConjunctionMode.LAST_GROUP_ONLY:
        return is_last_group
    if mode is ConjunctionMode.BELOW_ONE_THOUSAND_ONLY:
        return below_thousand
    raise ValueError(f"Unsupported conjunction mode: {mode!r}")
