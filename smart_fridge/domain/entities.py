# smart_fridge/smart_fridge/domain/entities.py
from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional, Tuple

from smart_fridge.core.config import QUANTITY_REL_TOL
from smart_fridge.core.errors import (
    IncompatibleUnitsError,
    InsufficientQuantityError,
    ValidationError,
)
from smart_fridge.domain.units import Dimension, Unit, from_base, to_base

BinKey = Tuple[str, date, Dimension]


def normalize_name(name: str) -> str:
    """Identity key for ingredient and recipe names: trimmed, case-insensitive."""
    return (name or "").strip().lower()


def _require_name(name: Optional[str], field_name: str = "Name") -> str:
    if name is None or not str(name).strip():
        raise ValidationError(f"{field_name} must not be blank")
    return str(name).strip()


def _require_unit(unit: Optional[Unit]) -> Unit:
    if unit is None:
        raise ValidationError("Unit is required")
    if not isinstance(unit, Unit):
        raise ValidationError(f"Not a unit: {unit!r}")
    return unit


def _require_number(value, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number, got {value}")
    return value


@dataclass
class IngredientBatch:
    name: str
    quantity: float
    unit: Unit
    price_per_unit: float
    expiry_date: date

    def __post_init__(self) -> None:
        self.name = _require_name(self.name, "Ingredient name")
        self.quantity = _require_number(self.quantity, "Quantity")
        if self.quantity < 0:
            raise ValidationError(f"Quantity must not be negative, got {self.quantity:g}")
        self.price_per_unit = _require_number(self.price_per_unit, "Price per unit")
        if self.price_per_unit <= 0:
            raise ValidationError(f"Price per unit must be positive, got {self.price_per_unit:g}")
        self.unit = _require_unit(self.unit)
        if self.expiry_date is None:
            raise ValidationError("Expiry date is required")
        if not isinstance(self.expiry_date, date):
            raise ValidationError(f"Expiry date must be a date, got {self.expiry_date!r}")

    @classmethod
    def create(
        cls,
        name: str,
        quantity: float,
        price_per_unit: float,
        unit: Unit,
        expiry_date: date,
    ) -> "IngredientBatch":
        return cls(
            name=name,
            quantity=quantity,
            unit=unit,
            price_per_unit=price_per_unit,
            expiry_date=expiry_date,
        )

    # ----------------------------
    # Derived values
    # ----------------------------
    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def bin_key(self) -> BinKey:
        return (self.key, self.expiry_date, self.unit.dimension)

    @property
    def price(self) -> float:
        return self.quantity * self.price_per_unit

    @property
    def base_quantity(self) -> float:
        return to_base(self.quantity, self.unit)

    def is_expired(self, as_of: date) -> bool:
        return self.expiry_date < as_of

    def is_same_kind(self, other: "IngredientBatch") -> bool:
        return (
            self.key == other.key
            and self.price_per_unit == other.price_per_unit
            and self.expiry_date == other.expiry_date
            and self.unit.is_compatible_with(other.unit)
        )

    def copy(self) -> "IngredientBatch":
        return replace(self)

    # ----------------------------
    # Quantity arithmetic
    # ----------------------------
    def _checked_delta(self, delta: float, unit: Unit) -> float:
        delta = _require_number(delta, "Quantity")
        if delta < 0:
            raise ValidationError(f"Quantity must not be negative, got {delta:g}")
        unit = _require_unit(unit)
        if not self.unit.is_compatible_with(unit):
            raise IncompatibleUnitsError(unit.symbol, self.unit.symbol)
        return delta

    def increase_quantity(self, delta: float, unit: Unit) -> None:
        delta = self._checked_delta(delta, unit)
        updated = self.base_quantity + to_base(delta, unit)
        self.quantity = from_base(updated, self.unit)

    def decrease_quantity(self, delta: float, unit: Unit) -> None:
        delta = self._checked_delta(delta, unit)
        available = self.base_quantity
        requested = to_base(delta, unit)
        if math.isclose(available, requested, rel_tol=QUANTITY_REL_TOL):
            updated = 0.0
        else:
            updated = available - requested
        if updated < 0:
            raise InsufficientQuantityError(
                self.name,
                available=self.quantity,
                requested=from_base(requested, self.unit),
                symbol=self.unit.symbol,
            )
        self.quantity = from_base(updated, self.unit)

    def __str__(self) -> str:
        return (
            f"{self.name:<15} {self.quantity:<10.2f} {self.unit.symbol:<10} "
            f"{self.expiry_date.isoformat():<12} {self.price_per_unit:.2f}/{self.unit.symbol}"
        )


@dataclass(frozen=True)
class RecipeIngredient:
    name: str
    quantity: float
    unit: Unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _require_name(self.name, "Ingredient name"))
        quantity = _require_number(self.quantity, "Quantity")
        if quantity <= 0:
            raise ValidationError(f"Required quantity must be positive, got {quantity:g}")
        object.__setattr__(self, "quantity", quantity)
        _require_unit(self.unit)

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def base_quantity(self) -> float:
        return to_base(self.quantity, self.unit)

    def merged_with(self, other: "RecipeIngredient") -> "RecipeIngredient":
        if not self.unit.is_compatible_with(other.unit):
            raise IncompatibleUnitsError(other.unit.symbol, self.unit.symbol)
        total = from_base(self.base_quantity + other.base_quantity, self.unit)
        return replace(self, quantity=total)


@dataclass
class Recipe:
    name: str
    description: str
    instruction: str
    ingredients: List[RecipeIngredient] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _require_name(self.name, "Recipe name")
        self.description = _require_name(self.description, "Description")
        self.instruction = _require_name(self.instruction, "Instruction")
        lines = list(self.ingredients)
        self.ingredients = []
        for line in lines:
            self._merge_line(line)

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    def add_ingredient(self, name: str, quantity: float, unit: Unit) -> RecipeIngredient:
        """Add a required ingredient, summing into an existing line of the same
        name and unit dimension."""
        return self._merge_line(RecipeIngredient(name=name, quantity=quantity, unit=unit))

    def _merge_line(self, line: RecipeIngredient) -> RecipeIngredient:
        for i, existing in enumerate(self.ingredients):
            if existing.key == line.key and existing.unit.is_compatible_with(line.unit):
                merged = existing.merged_with(line)
                self.ingredients[i] = merged
                return merged
        self.ingredients.append(line)
        return line

    def copy(self) -> "Recipe":
        # lines are frozen; a new list is enough
        return replace(self, ingredients=list(self.ingredients))

    def __str__(self) -> str:
        lines = "\n".join(f"{i.name} - {i.quantity:.2f} {i.unit.symbol}" for i in self.ingredients)
        return (
            f"Name: {self.name}\nDescription: {self.description}\n"
            f"Instruction: {self.instruction}\nIngredients:\n{lines}"
        )
