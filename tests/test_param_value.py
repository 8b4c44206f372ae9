"""Tests for core/param_value.py - tagged integer/decimal/text values.

Covers:
    - Factories and host-value coercion (ParamValue.of)
    - Cross-representation equality and hashing
    - Strict numeric parsing (integer first, then decimal)
    - Numeric view and locale formatting
"""

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from icumsgfmt.core.param_value import ParamValue, format_float
from icumsgfmt.enums import ParamKind
from icumsgfmt.runtime.locale_context import LocaleContext

# ============================================================================
# Construction
# ============================================================================


class TestFactories:
    """Test from_integer / from_decimal / from_text."""

    def test_from_integer(self) -> None:
        """from_integer produces an INTEGER value."""
        value = ParamValue.from_integer(42)
        assert value.kind is ParamKind.INTEGER
        assert value.value == 42

    def test_from_decimal_converts_decimal_to_float(self) -> None:
        """from_decimal stores Decimal inputs as float."""
        value = ParamValue.from_decimal(Decimal("1.5"))
        assert value.kind is ParamKind.DECIMAL
        assert value.value == 1.5
        assert isinstance(value.value, float)

    def test_from_text(self) -> None:
        """from_text produces a TEXT value."""
        value = ParamValue.from_text("female")
        assert value.kind is ParamKind.TEXT
        assert value.value == "female"

    def test_integer_rejects_bool(self) -> None:
        """bool is not accepted as an INTEGER."""
        with pytest.raises(TypeError):
            ParamValue.from_integer(True)

    def test_integer_outside_64_bit_range_rejected(self) -> None:
        """Integers beyond the signed 64-bit range raise ValueError."""
        with pytest.raises(ValueError, match="64-bit"):
            ParamValue.from_integer(2**63)
        with pytest.raises(ValueError, match="64-bit"):
            ParamValue.from_integer(-(2**63) - 1)

    def test_integer_range_bounds_accepted(self) -> None:
        """The exact 64-bit bounds are valid."""
        assert ParamValue.from_integer(2**63 - 1).value == 2**63 - 1
        assert ParamValue.from_integer(-(2**63)).value == -(2**63)

    def test_kind_value_mismatch_rejected(self) -> None:
        """Direct construction validates value against kind."""
        with pytest.raises(TypeError):
            ParamValue(ParamKind.TEXT, 5)
        with pytest.raises(TypeError):
            ParamValue(ParamKind.DECIMAL, "1.5")

    def test_immutable(self) -> None:
        """ParamValue is frozen."""
        value = ParamValue.from_integer(1)
        with pytest.raises(AttributeError):
            value.value = 2  # type: ignore[misc]


class TestCoercion:
    """Test ParamValue.of for host values."""

    @pytest.mark.parametrize(
        ("host", "kind"),
        [
            (5, ParamKind.INTEGER),
            (2.5, ParamKind.DECIMAL),
            (Decimal("3.25"), ParamKind.DECIMAL),
            ("the Summer", ParamKind.TEXT),
        ],
    )
    def test_supported_types(self, host: object, kind: ParamKind) -> None:
        """int, float, Decimal and str map to their natural kinds."""
        assert ParamValue.of(host).kind is kind

    def test_param_value_passes_through(self) -> None:
        """An existing ParamValue is returned unchanged."""
        value = ParamValue.from_text("x")
        assert ParamValue.of(value) is value

    @pytest.mark.parametrize("host", [True, False, None, [1], {"a": 1}, b"bytes"])
    def test_unsupported_types_raise(self, host: object) -> None:
        """bool and all other types raise TypeError."""
        with pytest.raises(TypeError):
            ParamValue.of(host)


# ============================================================================
# Equality and hashing
# ============================================================================


class TestEquality:
    """Test cross-representation equality and hashing."""

    def test_integer_equals_integral_decimal(self) -> None:
        """3 and 3.0 are equal and hash equally."""
        integer = ParamValue.from_integer(3)
        decimal = ParamValue.from_decimal(3.0)
        assert integer == decimal
        assert hash(integer) == hash(decimal)

    def test_integer_differs_from_fractional_decimal(self) -> None:
        """3 and 3.5 are not equal."""
        assert ParamValue.from_integer(3) != ParamValue.from_decimal(3.5)

    def test_text_never_equals_number(self) -> None:
        """Text "3" does not equal the number 3."""
        assert ParamValue.from_text("3") != ParamValue.from_integer(3)
        assert ParamValue.from_text("3.0") != ParamValue.from_decimal(3.0)

    def test_nan_equals_nan(self) -> None:
        """Two NaN decimals are equal and hash equally."""
        first = ParamValue.from_decimal(float("nan"))
        second = ParamValue.from_decimal(float("nan"))
        assert first == second
        assert hash(first) == hash(second)

    def test_usable_as_mapping_key(self) -> None:
        """An integral decimal finds an integer key."""
        options = {ParamValue.from_integer(1): "one item"}
        assert options[ParamValue.from_decimal(1.0)] == "one item"

    def test_comparison_with_other_types(self) -> None:
        """Comparing with a non-ParamValue is never equal."""
        assert ParamValue.from_integer(1) != 1
        assert ParamValue.from_text("a") != "a"


# ============================================================================
# Numeric parsing
# ============================================================================


class TestParseNumeric:
    """Test ParamValue.parse_numeric."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("42", 42), ("-7", -7), ("+3", 3), ("0", 0), ("007", 7)],
    )
    def test_integers(self, text: str, expected: int) -> None:
        """Plain digit strings parse as INTEGER."""
        value = ParamValue.parse_numeric(text)
        assert value is not None
        assert value.kind is ParamKind.INTEGER
        assert value.value == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("1.5", 1.5), ("-0.25", -0.25), ("1e3", 1000.0), (".5", 0.5), ("2.", 2.0)],
    )
    def test_decimals(self, text: str, expected: float) -> None:
        """Decimal syntax parses as DECIMAL."""
        value = ParamValue.parse_numeric(text)
        assert value is not None
        assert value.kind is ParamKind.DECIMAL
        assert value.value == expected

    def test_out_of_range_integer_parses_as_decimal(self) -> None:
        """An integer beyond 64 bits falls through to the decimal parse."""
        value = ParamValue.parse_numeric("9223372036854775808")
        assert value is not None
        assert value.kind is ParamKind.DECIMAL

    def test_special_values(self) -> None:
        """nan and inf spellings parse as DECIMAL."""
        nan = ParamValue.parse_numeric("NaN")
        inf = ParamValue.parse_numeric("-Infinity")
        assert nan is not None and math.isnan(nan.value)  # type: ignore[arg-type]
        assert inf is not None and inf.value == float("-inf")

    @pytest.mark.parametrize("text", ["", "one", "=1", " 1", "1 ", "1_000", "0x10", "1,5"])
    def test_non_numeric(self, text: str) -> None:
        """Decorated or non-numeric text is rejected."""
        assert ParamValue.parse_numeric(text) is None


# ============================================================================
# Numeric view and formatting
# ============================================================================


class TestAsNumeric:
    """Test as_numeric."""

    def test_integer_exact(self) -> None:
        """INTEGER returns the exact int."""
        assert ParamValue.from_integer(2**62).as_numeric() == 2**62

    def test_decimal_value(self) -> None:
        """DECIMAL returns its float."""
        assert ParamValue.from_decimal(2.5).as_numeric() == 2.5

    def test_numeric_text_parses(self) -> None:
        """TEXT holding a number parses as float."""
        assert ParamValue.from_text("12").as_numeric() == 12.0

    def test_non_numeric_text(self) -> None:
        """TEXT that is not a number yields None."""
        assert ParamValue.from_text("many").as_numeric() is None

    def test_is_numeric(self) -> None:
        """is_numeric reflects the kind, not the content."""
        assert ParamValue.from_integer(1).is_numeric
        assert not ParamValue.from_text("1").is_numeric


class TestFormatting:
    """Test format_with_locale, __str__ and format_float."""

    def test_integer_grouping(self, en_us: LocaleContext) -> None:
        """Integers use locale grouping."""
        assert ParamValue.from_integer(1234).format_with_locale(en_us) == "1,234"

    def test_decimal_keeps_digits(self, en_us: LocaleContext) -> None:
        """Decimals keep every significant fraction digit."""
        assert ParamValue.from_decimal(1234.125).format_with_locale(en_us) == "1,234.125"

    def test_german_separators(self) -> None:
        """German swaps grouping and decimal separators."""
        ctx = LocaleContext.create("de_DE")
        assert ParamValue.from_decimal(1234.5).format_with_locale(ctx) == "1.234,5"

    def test_text_verbatim(self, en_us: LocaleContext) -> None:
        """Text is returned untouched, braces included."""
        assert ParamValue.from_text("} {#").format_with_locale(en_us) == "} {#"

    def test_non_finite_decimal_uses_default_text(self, en_us: LocaleContext) -> None:
        """NaN and infinities fall back to their plain text form."""
        assert ParamValue.from_decimal(float("nan")).format_with_locale(en_us) == "NaN"
        assert ParamValue.from_decimal(float("inf")).format_with_locale(en_us) == "inf"

    def test_str(self) -> None:
        """__str__ is locale-independent."""
        assert str(ParamValue.from_integer(1234)) == "1234"
        assert str(ParamValue.from_decimal(20.0)) == "20"
        assert str(ParamValue.from_text("x")) == "x"

    def test_repr(self) -> None:
        """__repr__ shows kind and value."""
        assert repr(ParamValue.from_integer(5)) == "ParamValue(INTEGER, 5)"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(20.0, "20"), (-0.5, "-0.5"), (1e-7, "0.0000001"), (float("-inf"), "-inf")],
    )
    def test_format_float(self, value: float, expected: str) -> None:
        """format_float prints positional notation without a trailing .0."""
        assert format_float(value) == expected
