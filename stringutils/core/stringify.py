"""Text conversion for heterogeneous values.

Values are classified into a closed set of kinds and each kind has one
formatting rule. Strings and bytes are emitted as-is, everything else in a
compact unquoted notation:

    None         -> <nil>
    True / False -> true / false
    1.0e6        -> 1e+06
    [1, "a"]     -> [1 a]
    {"a": 1}     -> map[a:1]
    Point(1, 2)  -> {1 2}       (dataclass or pydantic model)
"""

import dataclasses
import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel

from stringutils.utils.constants import Constants

# Scientific notation is used outside this decimal exponent range
_MIN_FIXED_EXPONENT = -4
_MAX_FIXED_EXPONENT = 6


class ValueKind(Enum):
    """Kinds of values the stringify conversion distinguishes."""

    ABSENT = "absent"
    BYTES = "bytes"
    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    SEQUENCE = "sequence"  # list, tuple, set
    MAPPING = "mapping"
    RECORD = "record"  # dataclass or pydantic model instance
    OTHER = "other"  # anything else, rendered with str()


def value_kind(value: Any) -> ValueKind:
    """Classify a value for formatting.

    Args:
        value: Any Python value

    Returns:
        The ValueKind whose formatting rule applies
    """
    # bool before int: bool is an int subclass
    if value is None:
        kind = ValueKind.ABSENT
    elif isinstance(value, (bytes, bytearray, memoryview)):
        kind = ValueKind.BYTES
    elif isinstance(value, str):
        kind = ValueKind.TEXT
    elif isinstance(value, bool):
        kind = ValueKind.BOOLEAN
    elif isinstance(value, int):
        kind = ValueKind.INTEGER
    elif isinstance(value, float):
        kind = ValueKind.FLOAT
    elif isinstance(value, Mapping):
        kind = ValueKind.MAPPING
    elif isinstance(value, (Sequence, set, frozenset)):
        kind = ValueKind.SEQUENCE
    elif isinstance(value, BaseModel) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    ):
        kind = ValueKind.RECORD
    else:
        kind = ValueKind.OTHER
    return kind


def _format_float(value: float) -> str:
    """Format a float with the shortest digits that round-trip."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    # repr() yields the shortest round-trip digits
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    decimal_exponent = len(digits) + exponent - 1
    prefix = "-" if sign else ""

    if decimal_exponent < _MIN_FIXED_EXPONENT or decimal_exponent >= _MAX_FIXED_EXPONENT:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if decimal_exponent < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(decimal_exponent):02d}"

    if exponent >= 0:
        return prefix + digits + "0" * exponent
    point = len(digits) + exponent
    if point > 0:
        return f"{prefix}{digits[:point]}.{digits[point:]}"
    return f"{prefix}0.{'0' * -point}{digits}"


def _format_bytes(value: bytes | bytearray | memoryview, nested: bool) -> str:
    """Decode bytes as text at top level, list byte values when nested."""
    raw = bytes(value)
    if nested:
        return "[" + " ".join(str(b) for b in raw) + "]"
    return raw.decode("utf-8", errors="replace")


def _format_items(items: Iterable[Any]) -> str:
    return " ".join(_format(item, nested=True) for item in items)


def _format_sequence(value: Sequence[Any] | set[Any] | frozenset[Any]) -> str:
    if isinstance(value, (set, frozenset)):
        # Sets have no order; sort the rendered members for stable output
        return "[" + " ".join(sorted(_format(item, nested=True) for item in value)) + "]"
    return "[" + _format_items(value) + "]"


def _format_mapping(value: Mapping[Any, Any]) -> str:
    """Render a mapping with keys in sorted order."""
    try:
        keys = sorted(value)
    except TypeError:
        # Mixed key types: fall back to ordering by rendered key
        keys = sorted(value, key=lambda key: _format(key, nested=True))
    pairs = (f"{_format(key, nested=True)}:{_format(value[key], nested=True)}" for key in keys)
    return "map[" + " ".join(pairs) + "]"


def _format_record(value: Any) -> str:
    """Render the field values of a dataclass or pydantic model in declaration order."""
    if isinstance(value, BaseModel):
        names = list(type(value).model_fields)
    else:
        names = [field.name for field in dataclasses.fields(value)]
    return "{" + _format_items(getattr(value, name) for name in names) + "}"


_FORMATTERS: dict[ValueKind, Callable[[Any], str]] = {
    ValueKind.ABSENT: lambda _value: Constants.NIL_PLACEHOLDER,
    ValueKind.TEXT: lambda value: value,
    ValueKind.BOOLEAN: lambda value: "true" if value else "false",
    ValueKind.INTEGER: str,
    ValueKind.FLOAT: _format_float,
    ValueKind.SEQUENCE: _format_sequence,
    ValueKind.MAPPING: _format_mapping,
    ValueKind.RECORD: _format_record,
    ValueKind.OTHER: str,
}


def _format(value: Any, nested: bool) -> str:
    kind = value_kind(value)
    if kind is ValueKind.BYTES:
        return _format_bytes(value, nested)
    return _FORMATTERS[kind](value)


def stringify(value: Any) -> str:
    """Convert one value to its canonical text form.

    Bytes are taken as raw UTF-8 text rather than formatted.

    Args:
        value: Any Python value

    Returns:
        Text representation of value
    """
    return _format(value, nested=False)


def stringify_all(values: Sequence[Any] | None) -> list[str]:
    """Convert each value to its canonical text form.

    Args:
        values: Heterogeneous input sequence

    Returns:
        New list of strings, one per input value (empty for empty input)
    """
    if not values:
        return []
    return [stringify(value) for value in values]
