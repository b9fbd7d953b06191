"""Element-wise transforms and index lookups over sequences of strings."""

from collections.abc import Callable, Sequence

from stringutils.utils.constants import Constants


def filter_values(
    values: Sequence[str] | None, predicate: Callable[[str], bool] | None
) -> list[str]:
    """Keep the elements for which predicate returns True.

    A missing predicate keeps nothing.

    Args:
        values: Input sequence (not modified)
        predicate: Test applied to each element

    Returns:
        New list of matching elements in original order
    """
    if not values or predicate is None:
        return []
    return [value for value in values if predicate(value)]


def map_values(
    values: Sequence[str] | None, transform: Callable[[str], str] | None
) -> list[str]:
    """Apply transform to every element.

    A missing transform yields an empty list.

    Args:
        values: Input sequence (not modified)
        transform: Function applied to each element

    Returns:
        New list of the same length and order
    """
    if not values or transform is None:
        return []
    return [transform(value) for value in values]


def reverse(values: Sequence[str] | None) -> list[str]:
    """Return a reversed copy of values."""
    if not values:
        return []
    return list(reversed(values))


def index_of(values: Sequence[str] | None, value: str) -> int:
    """Index of the first element equal to value, or Constants.NOT_FOUND."""
    if not values:
        return Constants.NOT_FOUND
    for index, item in enumerate(values):
        if item == value:
            return index
    return Constants.NOT_FOUND


def last_index_of(values: Sequence[str] | None, value: str) -> int:
    """Index of the last element equal to value, or Constants.NOT_FOUND."""
    if not values:
        return Constants.NOT_FOUND
    for index in range(len(values) - 1, -1, -1):
        if values[index] == value:
            return index
    return Constants.NOT_FOUND
