"""Protein-maximising recipe selection under calorie and time budgets.

This is a 0/1 knapsack with two independent integer capacities.  The
dynamic-programming table ``table[i][c][t]`` holds the best protein
total reachable with the first ``i`` recipes, at most ``c`` calories and
at most ``t`` minutes of cooking.  It is stored as one flat list
(``ProteinTable``) whose bounds are fixed when it is built.

After the table is filled the chosen recipes are recovered by walking
back from the last row: a row whose value differs from the row above it
at the current remaining capacities means that recipe was taken.  Equal
values are read as "not taken", so among equally good subsets the
later-listed recipes are the ones left out.

Usage
-----
::

    from recipe_rank.selection import select_recipes

    result = select_recipes(recipes, max_calories=800, max_cooking_time=45)
    result.selected_recipe_ids   # (2, 5)
    result.total_protein         # 61.5
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real

from recipe_rank.core.errors import (
    CapacityTooLargeError,
    InvalidCapacityError,
    MalformedRecipeError,
)
from recipe_rank.core.models import Recipe, SelectionResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input checks
# ---------------------------------------------------------------------------


def _check_capacity(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCapacityError(name, value)
    if value < 0:
        raise InvalidCapacityError(name, value)
    return value


@dataclass(frozen=True, slots=True)
class _Item:
    """The cost and value of one recipe, checked once up front."""

    recipe_id: int
    calories: int
    cooking_time: int
    protein: float


def _cost(recipe: Recipe, field: str, value: object) -> int:
    if value is None:
        raise MalformedRecipeError(recipe.id, field, "required for selection but missing")
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRecipeError(recipe.id, field, f"must be an integer, got {value!r}")
    if value < 0:
        raise MalformedRecipeError(recipe.id, field, f"must not be negative, got {value!r}")
    return value


def _item(recipe: Recipe) -> _Item:
    calories = _cost(recipe, "nutrition.calories", recipe.nutrient("calories"))
    cooking_time = _cost(recipe, "cookingTime", recipe.cooking_time)
    protein = recipe.nutrient("protein")
    if protein is None:
        raise MalformedRecipeError(recipe.id, "nutrition.protein", "required for selection but missing")
    if isinstance(protein, bool) or not isinstance(protein, Real):
        raise MalformedRecipeError(recipe.id, "nutrition.protein", f"must be a number, got {protein!r}")
    if protein < 0:
        raise MalformedRecipeError(recipe.id, "nutrition.protein", f"must not be negative, got {protein!r}")
    return _Item(recipe.id, calories, cooking_time, protein)


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


class ProteinTable:
    """Dense ``(items + 1) x (calories + 1) x (time + 1)`` table in one flat list.

    Parameters
    ----------
    items:
        Number of recipes; rows run ``0..items``.
    max_calories:
        Calorie budget; columns run ``0..max_calories``.
    max_cooking_time:
        Time budget; the innermost axis runs ``0..max_cooking_time``.
    """

    __slots__ = ("rows", "calorie_span", "time_span", "_cells")

    def __init__(self, items: int, max_calories: int, max_cooking_time: int) -> None:
        self.rows = items + 1
        self.calorie_span = max_calories + 1
        self.time_span = max_cooking_time + 1
        self._cells: list[float] = [0] * self.size(items, max_calories, max_cooking_time)

    @staticmethod
    def size(items: int, max_calories: int, max_cooking_time: int) -> int:
        """Return the number of cells a table for these bounds holds."""
        return (items + 1) * (max_calories + 1) * (max_cooking_time + 1)

    def _index(self, i: int, c: int, t: int) -> int:
        if not (0 <= i < self.rows and 0 <= c < self.calorie_span and 0 <= t < self.time_span):
            raise IndexError(f"table index ({i}, {c}, {t}) out of range")
        return (i * self.calorie_span + c) * self.time_span + t

    def __getitem__(self, index: tuple[int, int, int]) -> float:
        return self._cells[self._index(*index)]

    def __setitem__(self, index: tuple[int, int, int], value: float) -> None:
        self._cells[self._index(*index)] = value

    def __len__(self) -> int:
        return len(self._cells)

    def fill(self, items: Sequence[_Item]) -> None:
        """Run the knapsack recurrence over ``items``, one row per item."""
        cells = self._cells
        cal_span = self.calorie_span
        time_span = self.time_span
        plane = cal_span * time_span
        for i, item in enumerate(items, start=1):
            row = i * plane
            prev = row - plane
            shift = item.calories * time_span + item.cooking_time
            for c in range(cal_span):
                base = c * time_span
                for t in range(time_span):
                    best = cells[prev + base + t]
                    if c >= item.calories and t >= item.cooking_time:
                        taken = cells[prev + base + t - shift] + item.protein
                        if taken > best:
                            best = taken
                    cells[row + base + t] = best


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def _reconstruct(
    table: ProteinTable, items: Sequence[_Item], max_calories: int, max_cooking_time: int
) -> tuple[int, ...]:
    chosen: list[int] = []
    c, t = max_calories, max_cooking_time
    i = len(items)
    # A zero cell means no protein is left to account for in rows 1..i.
    while i > 0 and table[i, c, t] != 0:
        if table[i, c, t] != table[i - 1, c, t]:
            item = items[i - 1]
            chosen.append(item.recipe_id)
            c -= item.calories
            t -= item.cooking_time
        i -= 1
    chosen.reverse()
    return tuple(chosen)


def select_recipes(
    recipes: Sequence[Recipe],
    max_calories: int,
    max_cooking_time: int,
    *,
    max_table_cells: int | None = None,
) -> SelectionResult:
    """Choose the recipes with the most total protein that fit both budgets.

    Parameters
    ----------
    recipes:
        Candidate recipes.  Each needs ``cookingTime``,
        ``nutrition.calories`` (non-negative integers) and
        ``nutrition.protein`` (non-negative number).
    max_calories:
        Calorie budget, a non-negative integer.
    max_cooking_time:
        Cooking time budget in minutes, a non-negative integer.
    max_table_cells:
        Optional ceiling on the size of the working table.

    Returns
    -------
    SelectionResult
        Selected ids in input order and their total protein.  Recipes
        with zero protein are never reported as selected.

    Raises
    ------
    InvalidCapacityError
        If a budget is negative or not an integer.
    CapacityTooLargeError
        If the table would exceed ``max_table_cells``.
    MalformedRecipeError
        If a recipe lacks a cost or protein value, or holds a bad one.
    """
    max_calories = _check_capacity("max_calories", max_calories)
    max_cooking_time = _check_capacity("max_cooking_time", max_cooking_time)
    items = [_item(recipe) for recipe in recipes]

    cells = ProteinTable.size(len(items), max_calories, max_cooking_time)
    if max_table_cells is not None and cells > max_table_cells:
        raise CapacityTooLargeError(cells, max_table_cells)

    logger.debug(
        "Selecting from %d recipe(s) within %d kcal / %d min (%d cells)",
        len(items),
        max_calories,
        max_cooking_time,
        cells,
    )
    table = ProteinTable(len(items), max_calories, max_cooking_time)
    table.fill(items)

    total_protein = table[len(items), max_calories, max_cooking_time]
    selected = _reconstruct(table, items, max_calories, max_cooking_time)
    logger.debug("Selected %d recipe(s), total protein %s", len(selected), total_protein)
    return SelectionResult(selected_recipe_ids=selected, total_protein=total_protein)
