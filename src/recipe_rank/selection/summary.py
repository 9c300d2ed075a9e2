"""Totals for a selection result, resolved back to recipe records."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from recipe_rank.core.errors import MalformedRecipeError
from recipe_rank.core.models import Recipe, SelectionResult


@dataclass(frozen=True)
class SelectionSummary:
    """The chosen recipes together with their calorie, time and protein totals.

    Parameters
    ----------
    recipes:
        Chosen recipe records, in the order of the selection result.
    total_calories:
        Sum of ``nutrition.calories`` over ``recipes``.
    total_cooking_time:
        Sum of ``cookingTime`` over ``recipes``.
    total_protein:
        Protein total reported by the selector.
    """

    recipes: tuple[Recipe, ...]
    total_calories: int
    total_cooking_time: int
    total_protein: float

    @property
    def is_empty(self) -> bool:
        return not self.recipes


def summarize(recipes: Sequence[Recipe], result: SelectionResult) -> SelectionSummary:
    """Resolve ``result`` against ``recipes`` and total up the chosen ones.

    Each selected id maps to the first recipe in ``recipes`` with that id.

    Raises
    ------
    MalformedRecipeError
        If a selected id does not occur in ``recipes``, or a chosen
        recipe lacks calories or cooking time.
    """
    by_id: dict[int, Recipe] = {}
    for recipe in recipes:
        by_id.setdefault(recipe.id, recipe)

    chosen: list[Recipe] = []
    for recipe_id in result.selected_recipe_ids:
        if recipe_id not in by_id:
            raise MalformedRecipeError(recipe_id, "id", "selected but not in the collection")
        chosen.append(by_id[recipe_id])

    total_calories = 0
    total_cooking_time = 0
    for recipe in chosen:
        calories = recipe.nutrient("calories")
        if calories is None:
            raise MalformedRecipeError(recipe.id, "nutrition.calories", "missing")
        if recipe.cooking_time is None:
            raise MalformedRecipeError(recipe.id, "cookingTime", "missing")
        total_calories += calories
        total_cooking_time += recipe.cooking_time

    return SelectionSummary(
        recipes=tuple(chosen),
        total_calories=total_calories,
        total_cooking_time=total_cooking_time,
        total_protein=result.total_protein,
    )
