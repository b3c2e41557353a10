# smart_fridge/smart_fridge/application/response_composer.py
from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from smart_fridge.application.meal_planner import Shortfall
from smart_fridge.core.config import Settings
from smart_fridge.domain.entities import IngredientBatch, Recipe

_BATCH_HEADER = f"{'Name':<15} {'Quantity':<10} {'Unit':<8} {'Expiry':<12} {'Price/unit':<16} {'Value':<12}"


class ResponseComposer:
    """Turns core results into console text. Holds no state besides settings."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()

    def money(self, value: float) -> str:
        return f"{value:.2f} {self.settings.currency}"

    def day(self, d: date) -> str:
        return d.strftime(self.settings.date_format)

    def batch_row(self, b: IngredientBatch) -> str:
        per_unit = f"{b.price_per_unit:.2f}/{b.unit.symbol}"
        return (
            f"{b.name:<15} {b.quantity:<10.2f} {b.unit.symbol:<8} {self.day(b.expiry_date):<12} "
            f"{per_unit:<16} {self.money(b.price):<12}"
        ).rstrip()

    def batch_table(self, title: str, batches: Sequence[IngredientBatch]) -> str:
        if not batches:
            return f"{title}\n(none)"
        rows = "\n".join(self.batch_row(b) for b in batches)
        return f"{title}\n{_BATCH_HEADER}\n{rows}"

    def recipe_block(self, r: Recipe) -> str:
        lines = "\n".join(f"  - {i.name}: {i.quantity:g} {i.unit.symbol}" for i in r.ingredients) or "  (no ingredients)"
        return f"{r.name}\n  {r.description}\n  Instruction: {r.instruction}\n{lines}"

    def recipe_list(self, title: str, recipes: List[Recipe], empty: str) -> str:
        if not recipes:
            return empty
        return title + "\n" + "\n\n".join(self.recipe_block(r) for r in recipes)

    # ----------------------------
    # Outcome messages
    # ----------------------------
    def added(self, b: IngredientBatch) -> str:
        return f"'{b.name}' is now stocked at {b.quantity:g} {b.unit.symbol} (expires {self.day(b.expiry_date)})."

    def removed(self, name: str, quantity: float, symbol: str, left: Optional[IngredientBatch]) -> str:
        head = f"{quantity:g} {symbol} of '{name}' was removed from the fridge."
        if left is None:
            return f"{head} The batch is now empty and was discarded."
        return f"{head} {left.quantity:g} {left.unit.symbol} left."

    def fridge_value(self, value: float) -> str:
        if value == 0:
            return f"The fridge is empty; its value is {self.money(0.0)}."
        return f"The ingredients in the fridge are worth {self.money(value)}."

    def expiring(self, before: date, batches: Sequence[IngredientBatch], value: float) -> str:
        if not batches:
            return f"There are no ingredients that expire before {self.day(before)}."
        table = self.batch_table(f"Ingredients that expire before {self.day(before)}:", batches)
        return f"{table}\nValue at risk: {self.money(value)}"

    def availability(self, recipe_name: str, ok: bool, missing: Sequence[Shortfall]) -> str:
        if ok:
            return f"You have all the ingredients to make {recipe_name}!"
        lines = "\n".join(
            f"  - {s.name}: need {s.required:g} {s.symbol}, have {s.available:g} {s.symbol}" for s in missing
        )
        return f"You are missing ingredients to make {recipe_name}:\n{lines}"

    def not_found(self, message: str, suggestions: Sequence[str]) -> str:
        if not suggestions:
            return message
        return f"{message}. Did you mean: {', '.join(suggestions)}?"

    def error(self, message: str) -> str:
        return f"Operation failed: {message}"
