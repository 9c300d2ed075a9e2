"""Convenience API for recipe-rank.

The top-level ``recipe_rank`` module already exposes ``sort`` and
``select`` as module-level functions.  This module adds a ``RecipeBook``
wrapper for the common load-then-rank flow.

Example
-------
::

    from recipe_rank import RecipeBook

    book = RecipeBook.from_file("recipes.json")
    quickest = book.sorted_by("cookingTime")
    result = book.select(max_calories=900, max_cooking_time=60)
    summary = book.summarize(result)
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from recipe_rank.config import RankConfig

if TYPE_CHECKING:
    from recipe_rank.core.models import (
        Recipe,
        SelectionResult,
        SortDirection,
        SortKey,
    )
    from recipe_rank.selection.summary import SelectionSummary
    from recipe_rank.validator.diagnostics import Diagnostic


class RecipeBook:
    """An immutable recipe collection with ranking and selection helpers.

    Parameters
    ----------
    recipes:
        The recipes, kept in the given order.
    config:
        Defaults for sort key and direction, and the selection table
        size limit.
    """

    def __init__(self, recipes: Iterable["Recipe"] = (), config: RankConfig | None = None) -> None:
        self._recipes: tuple[Recipe, ...] = tuple(recipes)
        self._config = config or RankConfig()

    @classmethod
    def from_file(cls, path: str | Path, config: RankConfig | None = None) -> "RecipeBook":
        """Load a book from a JSON or YAML recipe file."""
        from recipe_rank.loader import load_recipes

        return cls(load_recipes(path), config=config)

    @property
    def recipes(self) -> tuple["Recipe", ...]:
        return self._recipes

    def find(self, recipe_id: int) -> "Recipe | None":
        """Return the first recipe with ``recipe_id``, or ``None``."""
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def sorted_by(
        self,
        key: "SortKey | str | None" = None,
        direction: "SortDirection | str | None" = None,
    ) -> list["Recipe"]:
        """Return the recipes ordered by ``key``; defaults come from the config."""
        from recipe_rank.sorting import sort_recipes

        return sort_recipes(
            self._recipes,
            key if key is not None else self._config.default_key,
            direction if direction is not None else self._config.default_direction,
        )

    def select(self, max_calories: int, max_cooking_time: int) -> "SelectionResult":
        """Run the protein-maximising selection, bounded by the config's table limit."""
        from recipe_rank.selection import select_recipes

        return select_recipes(
            self._recipes,
            max_calories,
            max_cooking_time,
            max_table_cells=self._config.max_table_cells,
        )

    def summarize(self, result: "SelectionResult") -> "SelectionSummary":
        """Resolve a selection result against this book."""
        from recipe_rank.selection import summarize

        return summarize(self._recipes, result)

    def check(self, strict: bool = False) -> list["Diagnostic"]:
        """Run the collection checks."""
        from recipe_rank.validator import check

        return check(self._recipes, strict=strict)

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator["Recipe"]:
        return iter(self._recipes)

    def __repr__(self) -> str:
        return f"RecipeBook(recipes={len(self._recipes)})"
