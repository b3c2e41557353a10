# smart_fridge/smart_fridge/application/usecases.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple

from smart_fridge.application.meal_planner import MealPlanner, Shortfall
from smart_fridge.core.errors import NotFoundError
from smart_fridge.domain.entities import IngredientBatch, Recipe, normalize_name
from smart_fridge.domain.units import Unit
from smart_fridge.infrastructure.cookbook_store import Cookbook
from smart_fridge.infrastructure.inventory_store import Fridge

# (name, quantity, unit)
RecipeLine = Tuple[str, float, Unit]


@dataclass(frozen=True)
class AddIngredient:
    fridge: Fridge

    def __call__(
        self, name: str, quantity: float, unit: Unit, price_per_unit: float, expiry_date: date
    ) -> IngredientBatch:
        batch = IngredientBatch.create(
            name=name,
            quantity=quantity,
            price_per_unit=price_per_unit,
            unit=unit,
            expiry_date=expiry_date,
        )
        return self.fridge.add_ingredient(batch)


@dataclass(frozen=True)
class RemoveIngredient:
    fridge: Fridge

    def __call__(self, name: str, quantity: float, unit: Unit, expiry_date: date) -> Optional[IngredientBatch]:
        return self.fridge.remove_quantity(name, quantity, unit, expiry_date)


@dataclass(frozen=True)
class FindIngredient:
    fridge: Fridge

    def __call__(self, name: str) -> List[IngredientBatch]:
        found = self.fridge.find_by_name(name)
        if not found:
            raise NotFoundError(f"The ingredient '{name.strip()}' is not in the fridge", key=normalize_name(name))
        return found


@dataclass(frozen=True)
class ExpiringReport:
    fridge: Fridge

    def __call__(self, before: date) -> Tuple[List[IngredientBatch], float]:
        return self.fridge.find_expiring_before(before), self.fridge.value_expiring_before(before)


@dataclass(frozen=True)
class CreateRecipe:
    cookbook: Cookbook

    def __call__(self, name: str, description: str, instruction: str, lines: Iterable[RecipeLine] = ()) -> Recipe:
        recipe = Recipe(name=name, description=description, instruction=instruction)
        for line_name, quantity, unit in lines:
            recipe.add_ingredient(line_name, quantity, unit)
        return self.cookbook.add_recipe(recipe)


@dataclass(frozen=True)
class CheckRecipe:
    planner: MealPlanner

    def __call__(self, recipe_name: str) -> Tuple[bool, List[Shortfall]]:
        if self.planner.can_make_recipe(recipe_name):
            return True, []
        return False, self.planner.shortfall(recipe_name)
