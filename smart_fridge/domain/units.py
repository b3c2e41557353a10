# smart_fridge/smart_fridge/domain/units.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from smart_fridge.core.errors import IncompatibleUnitsError, NotFoundError, ValidationError


class Dimension(Enum):
    VOLUME = "volume"
    MASS = "mass"
    COUNT = "count"


@dataclass(frozen=True)
class Unit:
    symbol: str
    dimension: Dimension
    factor: float  # multiplier to the dimension's base unit

    def __post_init__(self) -> None:
        if not (self.symbol or "").strip():
            raise ValidationError("Unit symbol must not be blank")
        if not self.factor > 0:
            raise ValidationError(f"Unit factor must be positive, got {self.factor}")

    def is_compatible_with(self, other: "Unit") -> bool:
        return other is not None and self.dimension == other.dimension

    def __str__(self) -> str:
        return self.symbol


# ----------------------------
# Catalogue (base: L, kg, piece)
# ----------------------------
LITRE = Unit("L", Dimension.VOLUME, 1.0)
DECILITRE = Unit("dL", Dimension.VOLUME, 0.1)
MILLILITRE = Unit("mL", Dimension.VOLUME, 0.001)

KILOGRAM = Unit("kg", Dimension.MASS, 1.0)
GRAM = Unit("g", Dimension.MASS, 0.001)
MILLIGRAM = Unit("mg", Dimension.MASS, 0.000001)

PIECE = Unit("piece", Dimension.COUNT, 1.0)

UNITS: List[Unit] = [LITRE, DECILITRE, MILLILITRE, KILOGRAM, GRAM, MILLIGRAM, PIECE]

_BY_SYMBOL: Dict[str, Unit] = {u.symbol.lower(): u for u in UNITS}

_ALIASES: Dict[str, str] = {
    "l": "L",
    "lit": "L",
    "liter": "L",
    "litre": "L",
    "liters": "L",
    "litres": "L",
    "dl": "dL",
    "decilitre": "dL",
    "deciliter": "dL",
    "ml": "mL",
    "millilitre": "mL",
    "milliliter": "mL",
    "kilo": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "gram": "g",
    "grams": "g",
    "milligram": "mg",
    "milligrams": "mg",
    "pc": "piece",
    "pcs": "piece",
    "pieces": "piece",
    "stk": "piece",
}


def base_unit(dimension: Dimension) -> Unit:
    for u in UNITS:
        if u.dimension == dimension and u.factor == 1.0:
            return u
    raise NotFoundError(f"No base unit registered for {dimension.value}", key=dimension.value)


def units_of(dimension: Dimension) -> List[Unit]:
    return [u for u in UNITS if u.dimension == dimension]


def by_symbol(symbol: str) -> Unit:
    key = (symbol or "").strip().lower()
    if not key:
        raise NotFoundError("Unit symbol must not be blank")
    unit = _BY_SYMBOL.get(key)
    if unit is None:
        raise NotFoundError(f"No unit found with the provided symbol: {symbol}", key=symbol)
    return unit


def resolve_unit(text: str) -> Unit:
    """Symbol lookup that also accepts spelled-out names ("litre", "grams", "pcs")."""
    key = " ".join((text or "").split()).lower()
    alias = _ALIASES.get(key)
    return by_symbol(alias if alias else key)


def compatible(a: Unit, b: Unit) -> bool:
    return a.dimension == b.dimension


# ----------------------------
# Conversion through the base unit
# ----------------------------
def to_base(value: float, unit: Unit) -> float:
    return float(value) * unit.factor


def from_base(value: float, unit: Unit) -> float:
    return float(value) / unit.factor


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    if from_unit is None or to_unit is None:
        raise ValidationError("Both units are required for conversion")
    if not compatible(from_unit, to_unit):
        raise IncompatibleUnitsError(from_unit.symbol, to_unit.symbol)
    if from_unit == to_unit:
        return float(value)
    return from_base(to_base(value, from_unit), to_unit)
