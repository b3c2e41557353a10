from __future__ import annotations

from main import build_app
from smart_fridge.core.config import Settings


def test_build_app_seeds_sample_data() -> None:
    app = build_app(Settings(seed_sample_data=True))
    assert len(app.fridge) == 4
    assert app.cookbook.names() == ["Pancakes", "Omelette"]
    # the flour is already past its date
    assert [r.name for r in app.planner.suggested_recipes()] == ["Omelette"]
    assert not app.planner.can_make_recipe("Pancakes")


def test_build_app_without_sample_data() -> None:
    app = build_app(Settings(seed_sample_data=False))
    assert len(app.fridge) == 0
    assert len(app.cookbook) == 0
