# smart_fridge/smart_fridge/application/meal_planner.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from smart_fridge.core.config import QUANTITY_REL_TOL
from smart_fridge.core.errors import ValidationError
from smart_fridge.domain.entities import Recipe, RecipeIngredient
from smart_fridge.domain.repositories import InventoryReadRepo, RecipeReadRepo
from smart_fridge.domain.units import from_base

log = logging.getLogger("app.meal_planner")


def covers(available: float, required: float) -> bool:
    """Base-unit stock meets a requirement; nothing in stock never does."""
    if available <= 0:
        return False
    return available >= required or math.isclose(available, required, rel_tol=QUANTITY_REL_TOL)


@dataclass(frozen=True)
class Shortfall:
    name: str
    required: float
    available: float
    symbol: str

    @property
    def missing(self) -> float:
        return max(0.0, self.required - self.available)


class MealPlanner:
    """Checks recipes from the cookbook against what is in the fridge.

    Reads both collections only through their query methods; owns neither.
    """

    def __init__(
        self,
        inventory: InventoryReadRepo,
        cookbook: RecipeReadRepo,
        today: Callable[[], date] = date.today,
    ) -> None:
        if inventory is None:
            raise ValidationError("Inventory is required")
        if cookbook is None:
            raise ValidationError("Cookbook is required")
        self.inventory = inventory
        self.cookbook = cookbook
        self.today = today

    def _as_of(self, as_of: Optional[date]) -> date:
        return self.today() if as_of is None else as_of

    def available_base(self, line: RecipeIngredient, as_of: date) -> float:
        """Usable stock for one recipe line, in the line's base unit."""
        return sum(
            b.base_quantity
            for b in self.inventory.find_by_name(line.name)
            if not b.is_expired(as_of) and b.unit.is_compatible_with(line.unit)
        )

    def _line_ok(self, line: RecipeIngredient, as_of: date) -> bool:
        return covers(self.available_base(line, as_of), line.base_quantity)

    def can_make_recipe(self, recipe_name: str, as_of: Optional[date] = None) -> bool:
        recipe = self.cookbook.find_by_name(recipe_name)
        return self._can_make(recipe, self._as_of(as_of))

    def _can_make(self, recipe: Recipe, as_of: date) -> bool:
        ok = all(self._line_ok(line, as_of) for line in recipe.ingredients)
        log.debug("Recipe %s makeable=%s as of %s", recipe.name, ok, as_of)
        return ok

    def suggested_recipes(self, as_of: Optional[date] = None) -> List[Recipe]:
        when = self._as_of(as_of)
        return [r for r in self.cookbook.all() if self._can_make(r, when)]

    def shortfall(self, recipe_name: str, as_of: Optional[date] = None) -> List[Shortfall]:
        """Lines of the recipe the fridge cannot cover, in each line's own unit."""
        recipe = self.cookbook.find_by_name(recipe_name)
        when = self._as_of(as_of)
        out: List[Shortfall] = []
        for line in recipe.ingredients:
            have = self.available_base(line, when)
            if covers(have, line.base_quantity):
                continue
            out.append(
                Shortfall(
                    name=line.name,
                    required=line.quantity,
                    available=from_base(have, line.unit),
                    symbol=line.unit.symbol,
                )
            )
        return out
