# smart_fridge/smart_fridge/infrastructure/sample_data.py
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from smart_fridge.domain.entities import IngredientBatch, Recipe
from smart_fridge.domain.units import KILOGRAM, LITRE, PIECE
from smart_fridge.infrastructure.cookbook_store import Cookbook
from smart_fridge.infrastructure.inventory_store import Fridge

log = logging.getLogger("infra.sample_data")


def populate(fridge: Fridge, cookbook: Cookbook, today: Optional[date] = None) -> None:
    """Stock a fresh fridge and cookbook so the menus have something to show."""
    today = today or date.today()

    for batch in (
        IngredientBatch.create("Milk", 1, 30, LITRE, today + timedelta(days=5)),
        IngredientBatch.create("Egg", 6, 3, PIECE, today + timedelta(days=10)),
        IngredientBatch.create("Flour", 2, 15.5, KILOGRAM, today - timedelta(days=30)),
        IngredientBatch.create("Sugar", 1, 50, KILOGRAM, today + timedelta(days=60)),
    ):
        fridge.add_ingredient(batch)

    pancakes = Recipe("Pancakes", "Delicious pancakes", "Mix ingredients and fry")
    pancakes.add_ingredient("Milk", 0.5, LITRE)
    pancakes.add_ingredient("Egg", 2, PIECE)
    pancakes.add_ingredient("Flour", 0.5, KILOGRAM)

    omelette = Recipe("Omelette", "Simple omelette", "Whisk eggs and fry")
    omelette.add_ingredient("Egg", 2, PIECE)
    omelette.add_ingredient("Milk", 0.5, LITRE)

    for recipe in (pancakes, omelette):
        cookbook.add_recipe(recipe)

    log.info("Sample data loaded: %d batches, %d recipes", len(fridge), len(cookbook))
