# smart_fridge/smart_fridge/core/errors.py
from __future__ import annotations


class FridgeError(Exception):
    """Base class for every error raised by the fridge/cookbook core."""


class ValidationError(FridgeError, ValueError):
    """Malformed construction or operation arguments."""


class IncompatibleUnitsError(FridgeError, ValueError):
    def __init__(self, from_symbol: str, to_symbol: str) -> None:
        super().__init__(f"Units are not compatible: {from_symbol} -> {to_symbol}")
        self.from_symbol = from_symbol
        self.to_symbol = to_symbol


class InsufficientQuantityError(FridgeError, ValueError):
    def __init__(self, name: str, available: float, requested: float, symbol: str) -> None:
        super().__init__(
            f"Not enough '{name}': requested {requested:g} {symbol}, available {available:g} {symbol}"
        )
        self.name = name
        self.available = available
        self.requested = requested
        self.symbol = symbol


class NotFoundError(FridgeError, LookupError):
    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class DuplicateNameError(FridgeError, ValueError):
    """Insertion collides with an existing unique key."""
