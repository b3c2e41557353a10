# smart_fridge/smart_fridge/infrastructure/cookbook_store.py
from __future__ import annotations

import logging
from typing import Dict, List

from smart_fridge.core.errors import DuplicateNameError, NotFoundError, ValidationError
from smart_fridge.domain.entities import Recipe, RecipeIngredient, normalize_name
from smart_fridge.domain.units import Unit

log = logging.getLogger("infra.cookbook")


class Cookbook:
    """Recipes keyed by normalized name, kept in insertion order."""

    def __init__(self) -> None:
        self._recipes: Dict[str, Recipe] = {}

    def add_recipe(self, recipe: Recipe) -> Recipe:
        if recipe is None:
            raise ValidationError("Recipe is required")
        if recipe.key in self._recipes:
            raise DuplicateNameError(f"Recipe is already in the cookbook: {recipe.name}")
        self._recipes[recipe.key] = recipe.copy()
        log.info("Recipe %s added (%d ingredients)", recipe.name, len(recipe.ingredients))
        return recipe.copy()

    def add_ingredient_to_recipe(self, recipe_name: str, name: str, quantity: float, unit: Unit) -> RecipeIngredient:
        recipe = self._get(recipe_name)
        line = recipe.add_ingredient(name, quantity, unit)
        log.debug("Recipe %s: %s now %g %s", recipe.name, line.name, line.quantity, line.unit)
        return line

    def find_by_name(self, name: str) -> Recipe:
        return self._get(name).copy()

    def _get(self, name: str) -> Recipe:
        key = normalize_name(name)
        if not key:
            raise ValidationError("Recipe name must not be blank")
        recipe = self._recipes.get(key)
        if recipe is None:
            raise NotFoundError(f"Recipe not found: {name.strip()}", key=key)
        return recipe

    def all(self) -> List[Recipe]:
        return [r.copy() for r in self._recipes.values()]

    def names(self) -> List[str]:
        return [r.name for r in self._recipes.values()]

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._recipes
