"""Shared test fixtures for recipe-rank.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from recipe_rank.core.models import Nutrition, Recipe

SAMPLE_RECIPES: list[dict[str, object]] = [
    {
        "id": 3,
        "name": "Salmon teriyaki",
        "category": "main",
        "servings": 2,
        "cookingTime": 25,
        "nutrition": {"calories": 420, "protein": 32.5, "fat": 18},
        "ingredients": [{"name": "salmon", "amount": 2, "unit": "fillet"}],
        "steps": ["Marinate", "Grill"],
        "description": "Glazed salmon.",
    },
    {
        "id": 1,
        "name": "Chicken salad",
        "category": "salad",
        "servings": 1,
        "cookingTime": 15,
        "nutrition": {"calories": 320, "protein": 28},
        "ingredients": [{"name": "chicken breast", "amount": 150, "unit": "g"}],
        "steps": ["Boil", "Slice", "Toss"],
    },
    {
        "id": 2,
        "name": "Miso soup",
        "category": "soup",
        "servings": 2,
        "cookingTime": 10,
        "nutrition": {"calories": 80, "protein": 6},
    },
    {
        "id": 4,
        "name": "Beef stew",
        "category": "main",
        "servings": 4,
        "cookingTime": 90,
        "nutrition": {"calories": 650, "protein": 45},
    },
]


def make_recipe(
    recipe_id: int,
    name: str | None = None,
    calories: float | None = 100,
    protein: float | None = 10,
    cooking_time: float | None = 10,
    **kwargs: object,
) -> Recipe:
    """Build a recipe with sensible defaults for tests."""
    return Recipe(
        id=recipe_id,
        name=name if name is not None else f"Recipe {recipe_id}",
        cooking_time=cooking_time,
        nutrition=Nutrition(calories=calories, protein=protein),
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "recipe_rank"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def sample_data() -> list[dict[str, object]]:
    """Return wire-format recipe dicts (a fresh copy per test)."""
    return json.loads(json.dumps(SAMPLE_RECIPES))


@pytest.fixture()
def recipe_file(tmp_path: Path, sample_data: list[dict[str, object]]) -> Path:
    """Write the sample recipes to a JSON file and return its path."""
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps(sample_data, ensure_ascii=False), encoding="utf-8")
    return path
