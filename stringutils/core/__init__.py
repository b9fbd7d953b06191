"""Core string and sequence helpers."""

from .config import WordLengthRange
from .membership import contains, contains_any_substring, has_prefix_in, has_suffix_in
from .sets import dedup, dedup_big, difference, has_common_element, intersection, union
from .stringify import ValueKind, stringify, stringify_all, value_kind
from .text import (
    is_blank,
    normalize_whitespace,
    remove_prefix,
    remove_suffix,
    truncate,
    truncate_words,
)
from .transforms import filter_values, index_of, last_index_of, map_values, reverse
from .words import RandomSource, SecureRandomSource, random_word

__all__ = [
    "RandomSource",
    "SecureRandomSource",
    "ValueKind",
    "WordLengthRange",
    "contains",
    "contains_any_substring",
    "dedup",
    "dedup_big",
    "difference",
    "filter_values",
    "has_common_element",
    "has_prefix_in",
    "has_suffix_in",
    "index_of",
    "intersection",
    "is_blank",
    "last_index_of",
    "map_values",
    "normalize_whitespace",
    "random_word",
    "remove_prefix",
    "remove_suffix",
    "reverse",
    "stringify",
    "stringify_all",
    "truncate",
    "truncate_words",
    "union",
    "value_kind",
]
