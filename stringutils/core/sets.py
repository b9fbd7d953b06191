"""Order-preserving set algebra on sequences of strings.

None of these functions modify their arguments. Every result is a new list,
and an empty list stands in for "no result".
"""

from collections.abc import Iterable, Sequence

from stringutils.utils.constants import Constants


def _dedup_small(values: Sequence[str]) -> list[str]:
    """Deduplicate by scanning the result built so far (quadratic, no hashing)."""
    result: list[str] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


def _dedup_hashed(values: Iterable[str]) -> list[str]:
    """Deduplicate with a seen-set in a single pass."""
    result: list[str] = []
    seen: set[str] = set()
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def dedup(values: Sequence[str] | None) -> list[str]:
    """Remove duplicates, keeping the first occurrence of each value.

    Short inputs take a scan-based path that avoids building a hash set;
    longer inputs use a seen-set. Both produce the same output.

    Args:
        values: Input sequence (not modified)

    Returns:
        New list of distinct values in first-occurrence order
    """
    if not values:
        return []
    if len(values) <= Constants.DEDUP_SMALL_INPUT_THRESHOLD:
        return _dedup_small(values)
    return _dedup_hashed(values)


def dedup_big(values: Sequence[str] | None) -> list[str]:
    """Remove duplicates from a large sequence.

    Kept for existing callers; behaves exactly like dedup().
    """
    return dedup(values)


def has_common_element(a: Sequence[str] | None, b: Sequence[str] | None) -> bool:
    """Check whether two sequences share at least one value.

    Args:
        a: First sequence
        b: Second sequence

    Returns:
        True if any value appears in both, False if either is empty
    """
    if not a or not b:
        return False
    # Index the smaller side, scan the larger
    if len(a) > len(b):
        a, b = b, a
    lookup = set(a)
    return any(value in lookup for value in b)


def union(*sequences: Sequence[str] | None) -> list[str]:
    """Merge sequences, keeping each value once in first-occurrence order.

    Args:
        *sequences: Sequences merged in argument order (None entries are skipped)

    Returns:
        New list of distinct values
    """
    return _dedup_hashed(value for sequence in sequences if sequence for value in sequence)


def intersection(a: Sequence[str] | None, b: Sequence[str] | None) -> list[str]:
    """Values present in both sequences, in the order they appear in a.

    Duplicates are collapsed.
    """
    if not a or not b:
        return []
    in_b = set(b)
    return _dedup_hashed(value for value in a if value in in_b)


def difference(a: Sequence[str] | None, b: Sequence[str] | None) -> list[str]:
    """Values of a that are not in b.

    Unlike union() and intersection(), duplicates in a are kept.

    Args:
        a: Sequence to take values from
        b: Values to exclude

    Returns:
        New list preserving the order and multiplicity of a
    """
    if not a:
        return []
    excluded = set(b) if b else set()
    return [value for value in a if value not in excluded]
