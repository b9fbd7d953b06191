"""Membership and search checks over sequences of strings."""

from collections.abc import Sequence


def contains(value: str, values: Sequence[str] | None) -> bool:
    """Check whether values holds an element exactly equal to value.

    Comparison is case-sensitive; an empty value only matches an empty element.

    Args:
        value: The string to look for
        values: Sequence to search (None is treated as empty)

    Returns:
        True if an equal element exists
    """
    if not values:
        return False
    return any(item == value for item in values)


def contains_any_substring(text: str, patterns: Sequence[str] | None) -> bool:
    """Check whether text contains at least one of the patterns.

    Empty patterns are skipped and never produce a match, not even against
    an empty text.

    Args:
        text: The string to search in
        patterns: Candidate substrings

    Returns:
        True if any non-empty pattern occurs in text
    """
    if not patterns:
        return False
    for pattern in patterns:
        if not pattern:
            continue
        if pattern in text:
            return True
    return False


def has_prefix_in(prefix: str, values: Sequence[str] | None) -> bool:
    """Check whether any element starts with prefix.

    An empty prefix matches any non-empty sequence.
    """
    if not values:
        return False
    return any(item.startswith(prefix) for item in values)


def has_suffix_in(suffix: str, values: Sequence[str] | None) -> bool:
    """Check whether any element ends with suffix.

    An empty suffix matches any non-empty sequence.
    """
    if not values:
        return False
    return any(item.endswith(suffix) for item in values)
