from __future__ import annotations

import pytest

from conftest import TODAY, days
from smart_fridge.application.meal_planner import MealPlanner
from smart_fridge.core.errors import NotFoundError, ValidationError
from smart_fridge.domain.entities import IngredientBatch, Recipe
from smart_fridge.domain.units import DECILITRE, GRAM, KILOGRAM, LITRE, MILLIGRAM, PIECE
from smart_fridge.infrastructure.cookbook_store import Cookbook
from smart_fridge.infrastructure.inventory_store import Fridge


def recipe(name: str, *lines) -> Recipe:
    r = Recipe(name, f"{name} description", f"Make {name}")
    for n, q, u in lines:
        r.add_ingredient(n, q, u)
    return r


def test_requires_both_collections(fridge: Fridge, cookbook: Cookbook) -> None:
    with pytest.raises(ValidationError):
        MealPlanner(None, cookbook)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        MealPlanner(fridge, None)  # type: ignore[arg-type]


def test_omelette_until_eggs_run_out(omelette_kitchen: MealPlanner, fridge: Fridge) -> None:
    assert omelette_kitchen.can_make_recipe("Omelette")
    fridge.remove_quantity("Egg", 5, PIECE, days(10))
    assert not omelette_kitchen.can_make_recipe("omelette")

    short = omelette_kitchen.shortfall("Omelette")
    assert len(short) == 1
    assert short[0].name == "Egg"
    assert short[0].required == 2
    assert short[0].available == pytest.approx(1)
    assert short[0].missing == pytest.approx(1)
    assert short[0].symbol == "piece"


def test_unknown_recipe_raises(planner: MealPlanner) -> None:
    with pytest.raises(NotFoundError):
        planner.can_make_recipe("Lasagne")


def test_missing_ingredient_means_not_makeable(planner: MealPlanner, cookbook: Cookbook) -> None:
    cookbook.add_recipe(recipe("Toast", ("Bread", 2, PIECE)))
    assert planner.can_make_recipe("Toast") is False


def test_recipe_without_ingredients_is_makeable(planner: MealPlanner, cookbook: Cookbook) -> None:
    cookbook.add_recipe(recipe("Water"))
    assert planner.can_make_recipe("Water")


def test_expired_stock_does_not_count(planner: MealPlanner, fridge: Fridge, cookbook: Cookbook) -> None:
    fridge.add_ingredient(IngredientBatch.create("Flour", 2, 15.5, KILOGRAM, days(-30)))
    cookbook.add_recipe(recipe("Bread", ("Flour", 500, GRAM)))
    assert not planner.can_make_recipe("Bread")
    assert planner.can_make_recipe("Bread", as_of=days(-31))


def test_expiring_today_still_counts(planner: MealPlanner, fridge: Fridge, cookbook: Cookbook) -> None:
    fridge.add_ingredient(IngredientBatch.create("Milk", 1, 30, LITRE, TODAY))
    cookbook.add_recipe(recipe("Latte", ("Milk", 2, DECILITRE)))
    assert planner.can_make_recipe("Latte")


def test_batches_are_summed_across_expiry_dates(planner: MealPlanner, fridge: Fridge, cookbook: Cookbook) -> None:
    fridge.add_ingredient(IngredientBatch.create("Milk", 0.3, 30, LITRE, days(2)))
    fridge.add_ingredient(IngredientBatch.create("Milk", 3, 30, DECILITRE, days(4)))
    cookbook.add_recipe(recipe("Custard", ("Milk", 0.6, LITRE)))
    assert planner.can_make_recipe("Custard")
    assert planner.shortfall("Custard") == []


def test_incompatible_stock_is_ignored(planner: MealPlanner, fridge: Fridge, cookbook: Cookbook) -> None:
    fridge.add_ingredient(IngredientBatch.create("Butter", 1, 25, PIECE, days(5)))
    cookbook.add_recipe(recipe("Cake", ("Butter", 200, GRAM)))
    assert not planner.can_make_recipe("Cake")
    assert planner.shortfall("Cake")[0].available == 0


def test_adding_stock_never_makes_recipe_unmakeable(planner: MealPlanner, fridge: Fridge, cookbook: Cookbook) -> None:
    cookbook.add_recipe(recipe("Omelette", ("Egg", 2, PIECE), ("Milk", 0.5, LITRE)))
    fridge.add_ingredient(IngredientBatch.create("Egg", 6, 3, PIECE, days(10)))
    fridge.add_ingredient(IngredientBatch.create("Milk", 1, 30, LITRE, days(5)))
    assert planner.can_make_recipe("Omelette")
    for extra in [IngredientBatch.create("Cheese", 1, 80, KILOGRAM, days(20)),
                  IngredientBatch.create("Egg", 12, 2.5, PIECE, days(14))]:
        fridge.add_ingredient(extra)
        assert planner.can_make_recipe("Omelette")


def test_suggested_recipes_in_cookbook_order(omelette_kitchen: MealPlanner, fridge: Fridge, cookbook: Cookbook) -> None:
    fridge.add_ingredient(IngredientBatch.create("Flour", 2, 15.5, KILOGRAM, days(-30)))
    cookbook.add_recipe(recipe("Pancakes", ("Milk", 0.5, LITRE), ("Egg", 2, PIECE), ("Flour", 200, GRAM)))
    cookbook.add_recipe(recipe("Boiled egg", ("Egg", 1, PIECE)))

    assert [r.name for r in omelette_kitchen.suggested_recipes()] == ["Omelette", "Boiled egg"]
    assert [s.name for s in omelette_kitchen.shortfall("Pancakes")] == ["Flour"]


def test_planner_does_not_change_the_fridge(omelette_kitchen: MealPlanner, fridge: Fridge) -> None:
    before = fridge.total_value()
    omelette_kitchen.can_make_recipe("Omelette")
    omelette_kitchen.suggested_recipes()
    assert fridge.total_value() == before
    assert len(fridge) == 2


def test_tiny_requirement_for_absent_ingredient_is_not_met(planner: MealPlanner, cookbook: Cookbook) -> None:
    cookbook.add_recipe(recipe("Spice", ("Saffron", 0.001, MILLIGRAM)))
    assert not planner.can_make_recipe("Spice")
    [short] = planner.shortfall("Spice")
    assert short.name == "Saffron"
    assert short.available == 0


def test_milligram_gap_is_not_rounded_away(planner: MealPlanner, fridge: Fridge, cookbook: Cookbook) -> None:
    fridge.add_ingredient(IngredientBatch.create("Saffron", 1, 40, MILLIGRAM, days(90)))
    cookbook.add_recipe(recipe("Paella", ("Saffron", 1.0005, MILLIGRAM)))
    cookbook.add_recipe(recipe("Risotto", ("Saffron", 1, MILLIGRAM)))
    assert not planner.can_make_recipe("Paella")
    assert planner.can_make_recipe("Risotto")
