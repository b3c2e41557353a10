# smart_fridge/smart_fridge/api/schemas.py
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smart_fridge.core.config import DATE_FORMAT
from smart_fridge.core.errors import NotFoundError
from smart_fridge.domain.units import Unit, resolve_unit


def parse_number(value: Any) -> float:
    """Accepts numbers and strings with either '.' or ',' as decimal separator."""
    if isinstance(value, bool):
        raise ValueError("not a number")
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value or "").strip().replace(",", ".")
        if not text:
            raise ValueError("a number is required")
        number = float(text)
    if not math.isfinite(number):
        raise ValueError("a finite number is required")
    return number


def parse_date(value: Any, fmt: str = DATE_FORMAT) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value or "").strip()
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError as e:
        raise ValueError(f"expected a date like {date(2025, 1, 31).strftime(fmt)}") from e


def parse_unit(value: Any) -> Unit:
    if isinstance(value, Unit):
        return value
    try:
        return resolve_unit(str(value or ""))
    except NotFoundError as e:
        # pydantic only turns ValueError into a field error
        raise ValueError(str(e)) from e


class _In(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, str_strip_whitespace=True, allow_inf_nan=False)


class RecipeLineIn(_In):
    name: str = Field(..., min_length=1)
    quantity: float = Field(..., gt=0)
    unit: Unit

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v: Any) -> float:
        return parse_number(v)

    @field_validator("unit", mode="before")
    @classmethod
    def coerce_unit(cls, v: Any) -> Unit:
        return parse_unit(v)


class IngredientIn(RecipeLineIn):
    price_per_unit: float = Field(..., gt=0)
    expiry_date: date

    @field_validator("price_per_unit", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> float:
        return parse_number(v)

    @field_validator("expiry_date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> date:
        return parse_date(v)


class RemoveIngredientIn(RecipeLineIn):
    expiry_date: date

    @field_validator("expiry_date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> date:
        return parse_date(v)


class RecipeIn(_In):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    instruction: str = Field(..., min_length=1)
    ingredients: List[RecipeLineIn] = Field(default_factory=list)
