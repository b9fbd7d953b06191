"""Unit tests for value stringification."""

from dataclasses import dataclass

from pydantic import BaseModel

from stringutils.core.stringify import ValueKind, stringify, stringify_all, value_kind


@dataclass
class Person:
    name: str
    age: int


class Point(BaseModel):
    x: int
    y: float


class TestStringifyAll:
    """Test stringify_all behavior."""

    def test_none_input(self) -> None:
        """None input gives an empty list."""
        assert stringify_all(None) == []

    def test_empty_input(self) -> None:
        """Empty input gives an empty list."""
        assert stringify_all([]) == []

    def test_numbers(self) -> None:
        """Integers render as decimal."""
        assert stringify_all([1, 2, 3]) == ["1", "2", "3"]

    def test_mixed_values(self) -> None:
        """Each value uses its own rule."""
        assert stringify_all([1, "aaa", True, 0.55]) == ["1", "aaa", "true", "0.55"]

    def test_byte_strings_are_raw_text(self) -> None:
        """Bytes become text without quoting."""
        assert stringify_all([b"hi", b"there"]) == ["hi", "there"]

    def test_none_values(self) -> None:
        """None renders as the nil placeholder."""
        assert stringify_all([None, "test", None]) == ["<nil>", "test", "<nil>"]

    def test_control_bytes(self) -> None:
        """Control bytes survive the conversion."""
        assert stringify_all([b"\x00\x01\x02"]) == ["\x00\x01\x02"]

    def test_unicode_bytes(self) -> None:
        """UTF-8 bytes decode to text."""
        assert stringify_all(["привет мир".encode()]) == ["привет мир"]

    def test_negative_numbers(self) -> None:
        """Negative numbers keep their sign."""
        assert stringify_all([-1, -999, -0.5]) == ["-1", "-999", "-0.5"]

    def test_large_integer(self) -> None:
        """64-bit integers render in full."""
        assert stringify_all([9223372036854775807]) == ["9223372036854775807"]


class TestStringifyAggregates:
    """Test stringify on aggregate values."""

    def test_dataclass(self) -> None:
        """Dataclass fields render inside braces."""
        assert stringify(Person(name="John", age=30)) == "{John 30}"

    def test_pydantic_model(self) -> None:
        """Pydantic model fields render inside braces."""
        assert stringify(Point(x=1, y=2.5)) == "{1 2.5}"

    def test_mapping(self) -> None:
        """Mappings render with map prefix."""
        assert stringify({"a": 1}) == "map[a:1]"

    def test_mapping_sorted_by_key(self) -> None:
        """Mapping keys are sorted."""
        assert stringify({10: "x", 2: "y"}) == "map[2:y 10:x]"

    def test_list(self) -> None:
        """Lists render space-separated in brackets."""
        assert stringify([4, 5, 6]) == "[4 5 6]"

    def test_tuple(self) -> None:
        """Tuples render like lists."""
        assert stringify((1, 2, 3)) == "[1 2 3]"

    def test_nested_strings_unquoted(self) -> None:
        """Strings inside aggregates are not quoted."""
        assert stringify(["a", None, True]) == "[a <nil> true]"

    def test_nested_bytes_render_as_values(self) -> None:
        """Bytes inside aggregates render as byte values."""
        assert stringify([b"hi"]) == "[[104 105]]"

    def test_set_is_sorted(self) -> None:
        """Set members are ordered for stable output."""
        assert stringify({"b", "a"}) == "[a b]"


class TestStringifyFloat:
    """Test float formatting."""

    def test_shortest_digits(self) -> None:
        """Floats use the shortest round-trip digits."""
        assert stringify(0.1) == "0.1"

    def test_whole_float(self) -> None:
        """Whole floats have no decimal point."""
        assert stringify(100.0) == "100"

    def test_large_float_uses_exponent(self) -> None:
        """Decimal exponent of 6 or more switches to e-notation."""
        assert stringify(1000000.0) == "1e+06"

    def test_large_float_below_threshold(self) -> None:
        """Decimal exponent below 6 stays fixed."""
        assert stringify(123456.7) == "123456.7"

    def test_mantissa_digits_kept(self) -> None:
        """Exponent form keeps all significant digits."""
        assert stringify(1234567.0) == "1.234567e+06"

    def test_small_float_uses_exponent(self) -> None:
        """Decimal exponent below -4 switches to e-notation."""
        assert stringify(0.00001) == "1e-05"

    def test_small_float_fixed(self) -> None:
        """Decimal exponent of -4 stays fixed."""
        assert stringify(0.0001) == "0.0001"

    def test_zero(self) -> None:
        """Zero renders without a decimal point."""
        assert stringify(0.0) == "0"

    def test_nan(self) -> None:
        """NaN has its own spelling."""
        assert stringify(float("nan")) == "NaN"

    def test_negative_infinity(self) -> None:
        """Infinities carry an explicit sign."""
        assert stringify(float("-inf")) == "-Inf"


class TestValueKind:
    """Test value_kind classification."""

    def test_bool_is_not_integer(self) -> None:
        """Booleans are classified before integers."""
        assert value_kind(True) is ValueKind.BOOLEAN

    def test_bytearray_is_bytes(self) -> None:
        """bytearray is a byte sequence."""
        assert value_kind(bytearray(b"x")) is ValueKind.BYTES

    def test_dataclass_type_is_not_record(self) -> None:
        """A dataclass type itself is not a record instance."""
        assert value_kind(Person) is ValueKind.OTHER
