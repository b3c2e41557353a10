# smart_fridge/smart_fridge/infrastructure/inventory_store.py
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional

from smart_fridge.core.errors import DuplicateNameError, NotFoundError, ValidationError
from smart_fridge.domain.entities import BinKey, IngredientBatch, normalize_name
from smart_fridge.domain.units import Unit

log = logging.getLogger("infra.inventory")


class Fridge:
    """
    In-memory ingredient inventory.

    Batches live in bins keyed by (normalized name, expiry date, unit dimension),
    so a bin holds at most one batch and adding a same-kind batch merges into it.
    Queries hand out copies; the only way to change a stored batch is through
    add_ingredient / remove_quantity / remove_batch.
    """

    def __init__(self) -> None:
        self._bins: Dict[BinKey, IngredientBatch] = {}

    # ----------------------------
    # Mutations
    # ----------------------------
    def add_ingredient(self, batch: IngredientBatch) -> IngredientBatch:
        if batch is None:
            raise ValidationError("Ingredient is required")
        if batch.quantity <= 0:
            raise ValidationError(f"Cannot store an empty batch of '{batch.name}'")

        existing = self._bins.get(batch.bin_key)
        if existing is None:
            stored = batch.copy()
            self._bins[batch.bin_key] = stored
            log.info("Stored new batch %s %g %s (expires %s)", stored.name, stored.quantity, stored.unit, stored.expiry_date)
            return stored.copy()

        if not existing.is_same_kind(batch):
            raise DuplicateNameError(
                f"'{existing.name}' expiring {existing.expiry_date.isoformat()} is already stored "
                f"at {existing.price_per_unit:.2f}/{existing.unit.symbol}; "
                f"cannot merge a batch priced {batch.price_per_unit:.2f}/{batch.unit.symbol}"
            )

        existing.increase_quantity(batch.quantity, batch.unit)
        log.info("Merged %g %s into %s (now %g %s)", batch.quantity, batch.unit, existing.name, existing.quantity, existing.unit)
        return existing.copy()

    def remove_quantity(self, name: str, quantity: float, unit: Unit, expiry_date: date) -> Optional[IngredientBatch]:
        """Take `quantity` out of the batch identified by name, expiry and unit
        dimension. Returns the remaining batch, or None when it was emptied."""
        target = self._locate(name, unit, expiry_date)
        target.decrease_quantity(quantity, unit)
        if target.quantity <= 0:
            del self._bins[target.bin_key]
            log.info("Batch %s (expires %s) emptied and removed", target.name, target.expiry_date)
            return None
        log.debug("Removed %g %s of %s (left %g %s)", quantity, unit, target.name, target.quantity, target.unit)
        return target.copy()

    def remove_batch(self, name: str, expiry_date: date, unit: Unit) -> IngredientBatch:
        target = self._locate(name, unit, expiry_date)
        del self._bins[target.bin_key]
        log.info("Batch %s (expires %s) removed", target.name, target.expiry_date)
        return target

    def _locate(self, name: str, unit: Unit, expiry_date: date) -> IngredientBatch:
        key = normalize_name(name)
        if not key:
            raise ValidationError("Ingredient name must not be blank")
        if unit is None:
            raise ValidationError("Unit is required")
        if expiry_date is None:
            raise ValidationError("Expiry date is required")
        target = self._bins.get((key, expiry_date, unit.dimension))
        if target is None:
            raise NotFoundError(
                f"No '{name.strip()}' expiring {expiry_date.isoformat()} measured in {unit.dimension.value} was found",
                key=key,
            )
        return target

    # ----------------------------
    # Queries (snapshots only)
    # ----------------------------
    def all(self) -> List[IngredientBatch]:
        return [b.copy() for b in self._bins.values()]

    def find_by_name(self, name: str) -> List[IngredientBatch]:
        key = normalize_name(name)
        if not key:
            raise ValidationError("Ingredient name must not be blank")
        return [b.copy() for b in self._bins.values() if b.key == key]

    def find_expiring_before(self, when: date) -> List[IngredientBatch]:
        if when is None:
            raise ValidationError("Date is required")
        return [b.copy() for b in self._bins.values() if b.expiry_date < when]

    def find_expired(self, as_of: date) -> List[IngredientBatch]:
        if as_of is None:
            raise ValidationError("Date is required")
        return [b.copy() for b in self._bins.values() if b.is_expired(as_of)]

    def find_all_sorted_by_name(self) -> List[IngredientBatch]:
        # sorted() is stable; ties keep insertion order
        return sorted(self.all(), key=lambda b: b.name.lower())

    def total_value(self) -> float:
        return sum(b.price for b in self._bins.values())

    def value_expiring_before(self, when: date) -> float:
        return sum(b.price for b in self.find_expiring_before(when))

    def names(self) -> List[str]:
        seen: Dict[str, str] = {}
        for b in self._bins.values():
            seen.setdefault(b.key, b.name)
        return list(seen.values())

    def __len__(self) -> int:
        return len(self._bins)

    def __contains__(self, name: object) -> bool:
        key = normalize_name(name) if isinstance(name, str) else ""
        return any(b.key == key for b in self._bins.values())


Inventory = Fridge
