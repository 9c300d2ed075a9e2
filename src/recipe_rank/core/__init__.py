"""Core domain types.

Foundational models and the error hierarchy live here.  Submodules in
core/ must not import from sorting/, selection/, loader/ or cli/.
"""
from __future__ import annotations

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

__all__ = [
    "Nutrition",
    "Recipe",
    "SelectionResult",
    "SortDirection",
    "SortKey",
    "RecipeRankError",
    "InvalidSortKeyError",
    "InvalidSortDirectionError",
    "InvalidCapacityError",
    "CapacityTooLargeError",
    "MalformedRecipeError",
    "RecipeLoadError",
    "ConfigError",
]
