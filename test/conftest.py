from __future__ import annotations

from datetime import date, timedelta

import pytest

from smart_fridge.application.meal_planner import MealPlanner
from smart_fridge.domain.entities import IngredientBatch, Recipe
from smart_fridge.domain.units import LITRE, PIECE
from smart_fridge.infrastructure.cookbook_store import Cookbook
from smart_fridge.infrastructure.inventory_store import Fridge

TODAY = date(2025, 3, 10)


def days(n: int) -> date:
    return TODAY + timedelta(days=n)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def fridge() -> Fridge:
    return Fridge()


@pytest.fixture
def cookbook() -> Cookbook:
    return Cookbook()


@pytest.fixture
def planner(fridge: Fridge, cookbook: Cookbook) -> MealPlanner:
    return MealPlanner(fridge, cookbook, today=lambda: TODAY)


@pytest.fixture
def omelette_kitchen(fridge: Fridge, cookbook: Cookbook, planner: MealPlanner) -> MealPlanner:
    fridge.add_ingredient(IngredientBatch.create("Milk", 1, 30, LITRE, days(5)))
    fridge.add_ingredient(IngredientBatch.create("Egg", 6, 3, PIECE, days(10)))
    omelette = Recipe("Omelette", "Simple omelette", "Whisk eggs and fry")
    omelette.add_ingredient("Egg", 2, PIECE)
    omelette.add_ingredient("Milk", 0.5, LITRE)
    cookbook.add_recipe(omelette)
    return planner
