# smart_fridge/smart_fridge/domain/repositories.py
from __future__ import annotations

from datetime import date
from typing import List, Protocol

from smart_fridge.domain.entities import IngredientBatch, Recipe


class InventoryReadRepo(Protocol):
    def find_by_name(self, name: str) -> List[IngredientBatch]: ...

    def find_expiring_before(self, when: date) -> List[IngredientBatch]: ...

    def find_all_sorted_by_name(self) -> List[IngredientBatch]: ...

    def names(self) -> List[str]: ...


class RecipeReadRepo(Protocol):
    def find_by_name(self, name: str) -> Recipe: ...

    def all(self) -> List[Recipe]: ...

    def names(self) -> List[str]: ...
