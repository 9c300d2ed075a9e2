"""recipe-rank: ranking and protein-maximising selection over recipe collections.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import recipe_rank

    recipes = recipe_rank.load_recipes("recipes.json")

    # Order by calories, highest first
    ranked = recipe_rank.sort(recipes, "calories", "desc")

    # Most protein within 800 kcal and 45 minutes of cooking
    result = recipe_rank.select(recipes, 800, 45)
    result.selected_recipe_ids
    result.total_protein

    # Totals for the chosen recipes
    summary = recipe_rank.summarize(recipes, result)

    # Data-integrity checks
    findings = recipe_rank.check(recipes)

    recipe_rank.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from recipe_rank.convenience import RecipeBook
from recipe_rank.core.errors import (
    CapacityTooLargeError,
    ConfigError,
    InvalidCapacityError,
    InvalidSortDirectionError,
    InvalidSortKeyError,
    MalformedRecipeError,
    RecipeLoadError,
    RecipeRankError,
)
from recipe_rank.core.models import (
    Nutrition,
    Recipe,
    SelectionResult,
    SortDirection,
    SortKey,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from recipe_rank.selection.summary import SelectionSummary
    from recipe_rank.validator.diagnostics import Diagnostic


def sort(
    recipes: Sequence[Recipe],
    key: SortKey | str,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[Recipe]:
    """Return ``recipes`` ordered by ``key`` in ``direction``.

    Parameters
    ----------
    recipes:
        The collection to order.  It is not modified.
    key:
        ``"id"``, ``"name"``, ``"calories"`` or ``"cookingTime"`` (or a
        ``SortKey``).
    direction:
        ``"asc"`` or ``"desc"`` (or a ``SortDirection``).

    Raises
    ------
    InvalidSortKeyError, InvalidSortDirectionError
        For an unrecognized key or direction.
    MalformedRecipeError
        If a recipe has no value for ``key``.
    """
    from recipe_rank.sorting import sort_recipes

    return sort_recipes(recipes, key, direction)


def select(
    recipes: Sequence[Recipe],
    max_calories: int,
    max_cooking_time: int,
    *,
    max_table_cells: int | None = None,
) -> SelectionResult:
    """Choose the recipes with the most total protein within both budgets.

    Raises
    ------
    InvalidCapacityError
        If a budget is negative or not an integer.
    CapacityTooLargeError
        If ``max_table_cells`` is given and the working table exceeds it.
    MalformedRecipeError
        If a recipe lacks ``cookingTime``, calories or protein.
    """
    from recipe_rank.selection import select_recipes

    return select_recipes(
        recipes, max_calories, max_cooking_time, max_table_cells=max_table_cells
    )


def load_recipes(path: str | Path) -> list[Recipe]:
    """Load a recipe collection from a JSON or YAML file.

    Raises
    ------
    RecipeLoadError
        If the file cannot be read or decoded.
    MalformedRecipeError
        If a record is missing ``id`` / ``name`` or has a mistyped field.
    """
    from recipe_rank.loader import load_recipes as _load

    return _load(path)


def summarize(recipes: Sequence[Recipe], result: SelectionResult) -> "SelectionSummary":
    """Resolve ``result`` against ``recipes`` and total calories, time and protein."""
    from recipe_rank.selection import summarize as _summarize

    return _summarize(recipes, result)


def check(recipes: Sequence[Recipe], strict: bool = False) -> list["Diagnostic"]:
    """Run the data-integrity checks over ``recipes``.

    Parameters
    ----------
    recipes:
        The collection to check.
    strict:
        If ``True``, warnings become errors.
    """
    from recipe_rank.validator import check as _check

    return _check(recipes, strict=strict)


__all__ = [
    "__version__",
    "sort",
    "select",
    "load_recipes",
    "summarize",
    "check",
    "RecipeBook",
    "Recipe",
    "Nutrition",
    "SelectionResult",
    "SortKey",
    "SortDirection",
    "RecipeRankError",
    "InvalidSortKeyError",
    "InvalidSortDirectionError",
    "InvalidCapacityError",
    "CapacityTooLargeError",
    "MalformedRecipeError",
    "RecipeLoadError",
    "ConfigError",
]
