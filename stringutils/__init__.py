"""stringutils - Stateless helpers for strings and sequences of strings.

Membership tests, order-preserving set algebra, truncation, whitespace
normalization, value stringification and pronounceable random words.
"""

from .core import (
    RandomSource,
    SecureRandomSource,
    WordLengthRange,
    contains,
    contains_any_substring,
    dedup,
    dedup_big,
    difference,
    filter_values,
    has_common_element,
    has_prefix_in,
    has_suffix_in,
    index_of,
    intersection,
    is_blank,
    last_index_of,
    map_values,
    normalize_whitespace,
    random_word,
    remove_prefix,
    remove_suffix,
    reverse,
    stringify,
    stringify_all,
    truncate,
    truncate_words,
    union,
)

__version__ = "0.1.0"
__all__ = [
    "RandomSource",
    "SecureRandomSource",
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
]
