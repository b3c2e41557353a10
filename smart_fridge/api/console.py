# smart_fridge/smart_fridge/api/console.py
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

import pydantic

from smart_fridge.api.input_reader import InputReader
from smart_fridge.api.schemas import IngredientIn, RecipeIn, RecipeLineIn, RemoveIngredientIn
from smart_fridge.application.meal_planner import MealPlanner
from smart_fridge.application.name_matcher import NameMatcher
from smart_fridge.application.response_composer import ResponseComposer
from smart_fridge.application.usecases import (
    AddIngredient,
    CheckRecipe,
    CreateRecipe,
    ExpiringReport,
    FindIngredient,
    RemoveIngredient,
)
from smart_fridge.core.config import Settings
from smart_fridge.core.errors import FridgeError, NotFoundError
from smart_fridge.infrastructure.cookbook_store import Cookbook
from smart_fridge.infrastructure.inventory_store import Fridge

log = logging.getLogger("api.console")

Action = Callable[[], None]


class ConsoleApp:
    """Text menus over one fridge, one cookbook and their planner."""

    def __init__(
        self,
        fridge: Fridge,
        cookbook: Cookbook,
        planner: MealPlanner,
        reader: Optional[InputReader] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.fridge = fridge
        self.cookbook = cookbook
        self.planner = planner
        self.reader = reader or InputReader(date_format=self.settings.date_format)
        self.composer = ResponseComposer(self.settings)

        self.add_uc = AddIngredient(fridge)
        self.remove_uc = RemoveIngredient(fridge)
        self.find_uc = FindIngredient(fridge)
        self.expiring_uc = ExpiringReport(fridge)
        self.create_recipe_uc = CreateRecipe(cookbook)
        self.check_uc = CheckRecipe(planner)

    # ----------------------------
    # Loop
    # ----------------------------
    def run(self) -> None:
        try:
            self._menu(
                "MAIN MENU",
                [
                    ("Manage ingredients - Add, search or remove ingredients.", self.manage_ingredients),
                    ("View ingredients - Check expiry dates, value and a sorted list.", self.view_ingredients),
                    ("Recipes - Create, check availability and get suggestions.", self.recipes),
                ],
                exit_label="Exit - Close the application.",
            )
        except (EOFError, KeyboardInterrupt):
            log.debug("Input closed")
        self.reader.say("\nClosing the application...")

    def _menu(self, title: str, entries: List[Tuple[str, Action]], exit_label: str) -> None:
        actions: Dict[int, Action] = {i: fn for i, (_, fn) in enumerate(entries, start=1)}
        exit_choice = len(entries) + 1
        while True:
            self.reader.say(f"\n---------- {title} ----------")
            for i, (label, _) in enumerate(entries, start=1):
                self.reader.say(f"[{i}] {label}")
            self.reader.say(f"[{exit_choice}] {exit_label}")

            choice = self.reader.read_int("\nPlease choose an option: ")
            if choice == exit_choice:
                return
            action = actions.get(choice)
            if action is None:
                self.reader.say("Invalid input. Try again.")
                continue
            self._guarded(action)

    def _guarded(self, action: Action) -> None:
        try:
            action()
        except NotFoundError as e:
            log.debug("Not found: %s", e)
            self.reader.say(self.composer.not_found(str(e), self._suggest(e.key)))
        except FridgeError as e:
            log.debug("Rejected: %s", e)
            self.reader.say(self.composer.error(str(e)))
        except pydantic.ValidationError as e:
            log.debug("Invalid input: %s", e)
            msgs = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
            self.reader.say(self.composer.error(msgs))

    def _suggest(self, key: Optional[str]) -> List[str]:
        if not key:
            return []
        names = self.fridge.names() + self.cookbook.names()
        matcher = NameMatcher(names, min_score=self.settings.suggest_min_score)
        return [n for n in matcher.suggest(key, top_k=self.settings.suggestions + 1) if n.lower() != key.lower()][
            : self.settings.suggestions
        ]

    # ----------------------------
    # Ingredients
    # ----------------------------
    def manage_ingredients(self) -> None:
        self._menu(
            "MANAGE INGREDIENTS",
            [
                ("Add a new ingredient to the fridge.", self.add_ingredient),
                ("Search for an ingredient.", self.search_ingredient),
                ("Remove a quantity of an ingredient from the fridge.", self.remove_quantity),
                ("Discard a whole batch.", self.discard_batch),
            ],
            exit_label="Return to main menu.",
        )

    def view_ingredients(self) -> None:
        self._menu(
            "VIEW INGREDIENTS",
            [
                ("Check ingredients near expiry.", self.expiring),
                ("View already expired ingredients.", self.expired),
                ("View alphabetically sorted ingredients.", self.sorted_ingredients),
                ("Total value of the fridge.", self.fridge_value),
            ],
            exit_label="Return to main menu.",
        )

    def add_ingredient(self) -> None:
        r = self.reader
        data = IngredientIn(
            name=r.read_text("Name of the ingredient: "),
            quantity=r.read_float("Quantity: "),
            unit=r.read_unit("Unit of measurement:"),
            price_per_unit=r.read_float("Price per unit: "),
            expiry_date=r.read_date(f"Expiry date ({self._date_hint()}): "),
        )
        r.say(
            self.composer.added(
                self.add_uc(data.name, data.quantity, data.unit, data.price_per_unit, data.expiry_date)
            )
        )

    def search_ingredient(self) -> None:
        batches = self.find_uc(self.reader.read_text("Name of the ingredient: "))
        self.reader.say(self.composer.batch_table("Found in the fridge:", batches))

    def remove_quantity(self) -> None:
        r = self.reader
        data = RemoveIngredientIn(
            name=r.read_text("Name of the ingredient: "),
            quantity=r.read_float("Quantity to remove: "),
            unit=r.read_unit("Unit of the quantity:"),
            expiry_date=r.read_date(f"Expiry date of the batch ({self._date_hint()}): "),
        )
        left = self.remove_uc(data.name, data.quantity, data.unit, data.expiry_date)
        r.say(self.composer.removed(data.name, data.quantity, data.unit.symbol, left))

    def discard_batch(self) -> None:
        r = self.reader
        name = r.read_text("Name of the ingredient: ")
        unit = r.read_unit("Unit the batch is measured in:")
        expiry = r.read_date(f"Expiry date of the batch ({self._date_hint()}): ")
        if not r.read_yes(f"Discard all of '{name}' expiring {expiry.strftime(self.settings.date_format)}?"):
            return
        gone = self.fridge.remove_batch(name, expiry, unit)
        r.say(f"Discarded {gone.quantity:g} {gone.unit.symbol} of '{gone.name}' ({self.composer.money(gone.price)}).")

    def expiring(self) -> None:
        before = self.reader.read_date(f"Show ingredients expiring before ({self._date_hint()}): ")
        batches, value = self.expiring_uc(before)
        self.reader.say(self.composer.expiring(before, batches, value))

    def expired(self) -> None:
        batches = self.fridge.find_expired(self.planner.today())
        self.reader.say(self.composer.batch_table("Expired ingredients:", batches))

    def sorted_ingredients(self) -> None:
        batches = self.fridge.find_all_sorted_by_name()
        if not batches:
            self.reader.say("There are no ingredients in the fridge.")
            return
        self.reader.say(self.composer.batch_table("All ingredients in the fridge, sorted alphabetically:", batches))

    def fridge_value(self) -> None:
        self.reader.say(self.composer.fridge_value(self.fridge.total_value()))

    # ----------------------------
    # Recipes
    # ----------------------------
    def recipes(self) -> None:
        self._menu(
            "MANAGE RECIPES",
            [
                ("Create a recipe.", self.create_recipe),
                ("Check ingredient availability for a recipe.", self.check_recipe),
                ("Get suggestions for dishes that can be made.", self.suggestions),
                ("List all recipes.", self.list_recipes),
            ],
            exit_label="Return to main menu.",
        )

    def create_recipe(self) -> None:
        r = self.reader
        name = r.read_text("Name of the recipe: ")
        description = r.read_text("Short description: ")
        instruction = r.read_text("Instruction: ")
        lines: List[RecipeLineIn] = []
        while True:
            lines.append(
                RecipeLineIn(
                    name=r.read_text("Ingredient name: "),
                    quantity=r.read_float("Quantity: "),
                    unit=r.read_unit("Unit of measurement:"),
                )
            )
            if not r.read_yes("Add another ingredient?"):
                break
        data = RecipeIn(name=name, description=description, instruction=instruction, ingredients=lines)
        recipe = self.create_recipe_uc(
            data.name,
            data.description,
            data.instruction,
            [(line.name, line.quantity, line.unit) for line in data.ingredients],
        )
        r.say(f"Recipe '{recipe.name}' was added to the cookbook!")

    def check_recipe(self) -> None:
        name = self.reader.read_text("Name of the recipe: ")
        ok, missing = self.check_uc(name)
        self.reader.say(self.composer.availability(name, ok, missing))

    def suggestions(self) -> None:
        self.reader.say(
            self.composer.recipe_list(
                "These recipes can be prepared with ingredients in the fridge:",
                self.planner.suggested_recipes(),
                empty="No recipes can be prepared with the ingredients in the fridge.",
            )
        )

    def list_recipes(self) -> None:
        self.reader.say(
            self.composer.recipe_list(
                "All recipes in the cookbook:", self.cookbook.all(), empty="There are no recipes in the cookbook."
            )
        )

    def _date_hint(self) -> str:
        return self.settings.date_format.replace("%d", "dd").replace("%m", "MM").replace("%Y", "yyyy")
