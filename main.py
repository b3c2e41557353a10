from __future__ import annotations

import logging
from dotenv import load_dotenv
load_dotenv()
from smart_fridge.core.config import Settings

from smart_fridge.api.console import ConsoleApp
from smart_fridge.application.meal_planner import MealPlanner
from smart_fridge.infrastructure.cookbook_store import Cookbook
from smart_fridge.infrastructure.inventory_store import Fridge
from smart_fridge.infrastructure.sample_data import populate

log = logging.getLogger("app")


def build_app(settings: Settings | None = None) -> ConsoleApp:
    settings = settings or Settings()

    fridge = Fridge()
    cookbook = Cookbook()
    planner = MealPlanner(fridge, cookbook)

    if settings.seed_sample_data:
        populate(fridge, cookbook, today=planner.today())

    log.info("Startup complete")
    return ConsoleApp(fridge, cookbook, planner, settings=settings)


def main() -> int:
    build_app().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
