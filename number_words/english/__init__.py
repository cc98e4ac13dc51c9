# Copyright (c) 2025 Ming Yu
# Licensed under the Apache License, Version 2.0

from .conjunction import ConjunctionMode, FLAG_CHOICES, should_insert_and
from .decomposer import Group, decompose
from .verbalizer import convert, join_groups, phrase_group, to_words, under_hundred

__all__ = [
    "ConjunctionMode",
    "FLAG_CHOICES",
    "should_insert_and",
    "Group",
    "decompose",
    "convert",
    "join_groups",
    "phrase_group",
    "to_words",
    "under_hundred",
]
