from __future__ import annotations

import itertools

import pytest

from smart_fridge.core.errors import IncompatibleUnitsError, NotFoundError, ValidationError
from smart_fridge.domain.units import (
    DECILITRE,
    GRAM,
    KILOGRAM,
    LITRE,
    MILLIGRAM,
    MILLILITRE,
    PIECE,
    UNITS,
    Dimension,
    Unit,
    base_unit,
    by_symbol,
    convert,
    resolve_unit,
    units_of,
)


def test_units_of_groups_by_dimension() -> None:
    assert units_of(Dimension.VOLUME) == [LITRE, DECILITRE, MILLILITRE]
    assert units_of(Dimension.MASS) == [KILOGRAM, GRAM, MILLIGRAM]
    assert units_of(Dimension.COUNT) == [PIECE]


def test_base_units() -> None:
    assert base_unit(Dimension.VOLUME) is LITRE
    assert base_unit(Dimension.MASS) is KILOGRAM
    assert base_unit(Dimension.COUNT) is PIECE


@pytest.mark.parametrize("symbol,expected", [("L", LITRE), ("l", LITRE), ("ML", MILLILITRE), ("dL", DECILITRE), (" kg ", KILOGRAM), ("piece", PIECE)])
def test_by_symbol_is_case_insensitive(symbol: str, expected: Unit) -> None:
    assert by_symbol(symbol) is expected


@pytest.mark.parametrize("symbol", ["", "   ", "cup", "litre"])
def test_by_symbol_unknown(symbol: str) -> None:
    with pytest.raises(NotFoundError):
        by_symbol(symbol)


@pytest.mark.parametrize("text,expected", [("litre", LITRE), ("Grams", GRAM), ("pcs", PIECE), ("mL", MILLILITRE)])
def test_resolve_unit_accepts_aliases(text: str, expected: Unit) -> None:
    assert resolve_unit(text) is expected


def test_convert_through_base() -> None:
    assert convert(1, LITRE, MILLILITRE) == pytest.approx(1000)
    assert convert(250, GRAM, KILOGRAM) == pytest.approx(0.25)
    assert convert(10, DECILITRE, LITRE) == pytest.approx(1.0)
    assert convert(3, PIECE, PIECE) == 3


def test_convert_across_dimensions_fails() -> None:
    with pytest.raises(IncompatibleUnitsError):
        convert(5, LITRE, KILOGRAM)
    with pytest.raises(IncompatibleUnitsError):
        convert(1, PIECE, GRAM)


def test_incompatible_units_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        convert(5, LITRE, KILOGRAM)


@pytest.mark.parametrize("value", [0.001, 0.5, 1.0, 7.25, 1234.5])
def test_round_trip_between_compatible_units(value: float) -> None:
    for a, b in itertools.permutations(UNITS, 2):
        if a.dimension != b.dimension:
            continue
        assert convert(convert(value, a, b), b, a) == pytest.approx(value, rel=1e-12)


@pytest.mark.parametrize("factor", [0, -1.0])
def test_unit_factor_must_be_positive(factor: float) -> None:
    with pytest.raises(ValidationError):
        Unit("bad", Dimension.MASS, factor)
