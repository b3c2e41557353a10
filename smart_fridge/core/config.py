# smart_fridge/smart_fridge/core/config.py
from __future__ import annotations
from dataclasses import dataclass
import os
import logging


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATE_FORMAT: str = os.getenv("SMART_FRIDGE_DATE_FORMAT", "%d/%m/%Y")
CURRENCY: str = os.getenv("SMART_FRIDGE_CURRENCY", "kr")
SEED_SAMPLE_DATA: bool = _env_bool("SMART_FRIDGE_SEED_SAMPLE_DATA", "1")
SUGGESTIONS: int = int(os.getenv("SMART_FRIDGE_SUGGESTIONS", "3"))
SUGGEST_MIN_SCORE: float = float(os.getenv("SMART_FRIDGE_SUGGEST_MIN_SCORE", "0.3"))

# Quantities whose base-unit values agree to this relative tolerance are equal.
QUANTITY_REL_TOL: float = 1e-9


@dataclass(frozen=True)
class Settings:
    date_format: str = DATE_FORMAT
    currency: str = CURRENCY
    seed_sample_data: bool = SEED_SAMPLE_DATA
    suggestions: int = SUGGESTIONS
    suggest_min_score: float = SUGGEST_MIN_SCORE


# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
LOGGER = logging.getLogger("smart_fridge")
