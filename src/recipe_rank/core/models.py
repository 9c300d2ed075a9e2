"""Data model shared by the sorter, the selector and the loader.

Every record is a frozen dataclass so that the ranking and selection
code can hand the caller's recipes back without copying them and
without any risk of mutating them.  Field names are Python-style; the
camelCase names used by ``recipes.json`` are called *wire names* and
are resolved through ``lookup``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SortKey(Enum):
    """The recipe fields a collection can be ranked by.

    Values are wire names.  ``CALORIES`` and ``COOKING_TIME`` resolve
    through the nutrition record first and fall back to the top-level
    field of the same name.
    """

    ID = "id"
    NAME = "name"
    CALORIES = "calories"
    COOKING_TIME = "cookingTime"

    @property
    def is_nutritional(self) -> bool:
        """Return True if this key is looked up in ``Recipe.nutrition`` first."""
        return self in (SortKey.CALORIES, SortKey.COOKING_TIME)


class SortDirection(Enum):
    """Ascending or descending order."""

    ASC = "asc"
    DESC = "desc"


# ---------------------------------------------------------------------------
# Recipe records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Nutrition:
    """Per-recipe nutrition facts.

    Parameters
    ----------
    calories:
        Energy in kcal, a whole number for selection purposes.  ``None``
        when the source omitted it.
    protein:
        Protein in grams.  ``None`` when the source omitted it.
    extra:
        Any other nutrition fields (fat, carbohydrate, ...) keyed by
        their wire names.
    """

    calories: float | None = None
    protein: float | None = None
    extra: dict[str, Any] = field(default_factory=dict, hash=False)

    def lookup(self, name: str) -> Any:
        """Return the value of wire field ``name``, or ``None`` if absent."""
        if name == "calories":
            return self.calories
        if name == "protein":
            return self.protein
        return self.extra.get(name)


@dataclass(frozen=True)
class Recipe:
    """A single recipe record.

    Only ``id``, ``name``, ``cooking_time`` and ``nutrition`` are read by
    the ranking and selection code; everything else is payload carried
    through untouched.  Payload containers (``ingredients``, ``steps`` and
    ``extra``) still take part in equality but are left out of the hash,
    so records holding dicts there remain hashable.

    Parameters
    ----------
    id:
        Identifier, unique within a well-formed collection.
    name:
        Display name.
    cooking_time:
        Cooking time in whole minutes (wire name ``cookingTime``).
    nutrition:
        Nutrition facts, or ``None`` when the source had none.
    servings, category, description, ingredients, steps:
        Opaque payload.
    extra:
        Unknown top-level fields keyed by their wire names.
    """

    id: int
    name: str
    cooking_time: float | None = None
    nutrition: Nutrition | None = None
    servings: int | None = None
    category: str | None = None
    description: str | None = None
    ingredients: tuple[Any, ...] = field(default=(), hash=False)
    steps: tuple[str, ...] = field(default=(), hash=False)
    extra: dict[str, Any] = field(default_factory=dict, hash=False)

    def lookup(self, name: str) -> Any:
        """Return the value of top-level wire field ``name``, or ``None``."""
        if name == "id":
            return self.id
        if name == "name":
            return self.name
        if name == "cookingTime":
            return self.cooking_time
        return self.extra.get(name)

    def nutrient(self, name: str) -> Any:
        """Return nutrition field ``name``, or ``None`` if there is no such value."""
        if self.nutrition is None:
            return None
        return self.nutrition.lookup(name)


# ---------------------------------------------------------------------------
# Selection output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SelectionResult:
    """The protein-maximising subset chosen by the selector.

    Parameters
    ----------
    selected_recipe_ids:
        Ids of the chosen recipes, in input order.
    total_protein:
        Sum of protein over the chosen recipes.
    """

    selected_recipe_ids: tuple[int, ...]
    total_protein: float

    @property
    def is_empty(self) -> bool:
        return not self.selected_recipe_ids

    def to_dict(self) -> dict[str, object]:
        """Return the wire form ``{"selectedRecipeIds": [...], "totalProtein": ...}``."""
        return {
            "selectedRecipeIds": list(self.selected_recipe_ids),
            "totalProtein": self.total_protein,
        }
