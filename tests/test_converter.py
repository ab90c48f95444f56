"""Tests for thruststate.converter."""

from __future__ import annotations

import pytest

from thruststate.constants import MPS2_TO_KPH2, S_TO_H
from thruststate.converter import (
    DEFAULT_FACTORS,
    UnitConverter,
    build_conversion_table,
    default_converter,
)
from thruststate.errors import (
    ConversionError,
    ThrustStateError,
    UnitMismatchError,
    UnknownUnitError,
)
from thruststate.quantity import Quantity, UnitTag

# ---------------------------------------------------------------------------
# Conversion table
# ---------------------------------------------------------------------------


class TestConversionTable:
    def test_required_entries_present(self) -> None:
        table = build_conversion_table()
        assert table[("m/s^2", "km/h^2")] == pytest.approx(12960.0)
        assert table[("s", "h")] == pytest.approx(1 / 3600)

    def test_constants(self) -> None:
        assert MPS2_TO_KPH2 == pytest.approx(3.6 * 3600)
        assert S_TO_H == pytest.approx(1 / 3600)

    def test_table_is_read_only(self) -> None:
        table = build_conversion_table()
        with pytest.raises(TypeError):
            table[("kg", "kg/s")] = 1.0  # type: ignore[index]

    def test_table_is_copied(self) -> None:
        factors = {("s", "h"): 1 / 3600}
        table = build_conversion_table(factors)
        factors[("s", "h")] = 99.0
        assert table[("s", "h")] == pytest.approx(1 / 3600)

    def test_default_factors_untouched_by_converter(self) -> None:
        conv = UnitConverter()
        assert conv.table is not DEFAULT_FACTORS
        assert dict(conv.table) == {(str(a), str(b)): f for (a, b), f in DEFAULT_FACTORS.items()}

    def test_unknown_unit_rejected_at_build(self) -> None:
        with pytest.raises(UnknownUnitError, match="furlong"):
            build_conversion_table({("km", "furlong"): 4.97})

    def test_no_implicit_inverse(self) -> None:
        conv = UnitConverter({("s", "h"): 1 / 3600})
        assert conv.supports("s", "h")
        assert not conv.supports("h", "s")


# ---------------------------------------------------------------------------
# convert()
# ---------------------------------------------------------------------------


class TestConvert:
    def test_seconds_to_hours(self, converter: UnitConverter) -> None:
        result = converter.convert(Quantity(1.0, "s"), "s", "h")
        assert result.value == pytest.approx(1 / 3600)
        assert result.unit == "h"

    def test_acceleration_to_kmh2(self, converter: UnitConverter) -> None:
        result = converter.convert(Quantity(1.0, "m/s^2"), "m/s^2", "km/h^2")
        assert result.value == pytest.approx(12960.0)
        assert result.unit == "km/h^2"

    def test_seed_time(self, converter: UnitConverter) -> None:
        result = converter.convert(Quantity(3600.0, UnitTag.SECOND), UnitTag.SECOND, UnitTag.HOUR)
        assert result.value == pytest.approx(1.0)

    def test_seed_acceleration(self, converter: UnitConverter) -> None:
        result = converter.convert(Quantity(3.0, "m/s^2"), "m/s^2", "km/h^2")
        assert result.value == pytest.approx(38880.0)

    @pytest.mark.parametrize(
        ("value", "from_unit", "to_unit", "expected"),
        [
            (2.0, "h", "s", 7200.0),
            (10.0, "m/s", "km/h", 36.0),
            (36.0, "km/h", "m/s", 10.0),
            (1500.0, "m", "km", 1.5),
            (1.5, "km", "m", 1500.0),
        ],
    )
    def test_supplementary_entries(
        self,
        converter: UnitConverter,
        value: float,
        from_unit: str,
        to_unit: str,
        expected: float,
    ) -> None:
        result = converter.convert(Quantity(value, from_unit), from_unit, to_unit)
        assert result.value == pytest.approx(expected)
        assert result.unit == to_unit

    def test_identity_conversion(self, converter: UnitConverter) -> None:
        q = Quantity(42.0, "kg")
        assert converter.convert(q, "kg", "kg") == q

    def test_idempotent(self, converter: UnitConverter) -> None:
        q = Quantity(3.0, "m/s^2")
        first = converter.convert(q, "m/s^2", "km/h^2")
        second = converter.convert(q, "m/s^2", "km/h^2")
        assert first == second
        assert q == Quantity(3.0, "m/s^2")

    def test_result_is_new_quantity(self, converter: UnitConverter) -> None:
        q = Quantity(3600.0, "s")
        result = converter.convert(q, "s", "h")
        assert result is not q
        assert q.unit == "s"


class TestConvertFailures:
    def test_missing_pair_raises(self, converter: UnitConverter) -> None:
        with pytest.raises(ConversionError, match="km to lightyear") as info:
            converter.convert(Quantity(1.0, "km"), "km", "lightyear")
        assert info.value.from_unit == "km"
        assert info.value.to_unit == "lightyear"

    def test_missing_known_pair_raises(self, converter: UnitConverter) -> None:
        with pytest.raises(ConversionError, match="kg to km"):
            converter.convert(Quantity(1.0, "kg"), "kg", "km")

    def test_inverse_not_assumed(self, converter: UnitConverter) -> None:
        with pytest.raises(ConversionError):
            converter.convert(Quantity(1.0, "km/h^2"), "km/h^2", "m/s^2")

    def test_declared_unit_mismatch(self, converter: UnitConverter) -> None:
        with pytest.raises(UnitMismatchError, match="expressed in s, got h"):
            converter.convert(Quantity(1.0, "h"), "s", "h")

    def test_unknown_quantity_unit(self, converter: UnitConverter) -> None:
        with pytest.raises(UnknownUnitError):
            converter.convert(Quantity(1.0, "parsec"), "parsec", "km")

    def test_errors_share_base(self) -> None:
        assert issubclass(ConversionError, ThrustStateError)
        assert issubclass(ThrustStateError, ValueError)

    def test_factor_lookup(self) -> None:
        conv = default_converter()
        assert conv.factor("s", "h") == pytest.approx(1 / 3600)
        assert conv.factor("kg", "kg") == 1.0
        with pytest.raises(ConversionError):
            conv.factor("kg", "kg/s")

    def test_empty_table_fails_everything(self) -> None:
        conv = UnitConverter({})
        with pytest.raises(ConversionError, match="s to h"):
            conv.convert(Quantity(3600.0, "s"), "s", "h")
