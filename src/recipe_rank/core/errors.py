"""Exception types raised by recipe-rank.

Every error derives from ``RecipeRankError`` so callers can catch the
whole family at once.  Errors that describe a bad argument also derive
from ``ValueError``.  Each error keeps the offending value on an
attribute so the CLI and other callers can report it precisely.
"""
from __future__ import annotations

from typing import Any

from recipe_rank.core.models import SortKey


class RecipeRankError(Exception):
    """Base class for all recipe-rank errors."""


class InvalidSortKeyError(RecipeRankError, ValueError):
    """Raised when a sort key is not one of the recognized ``SortKey`` values."""

    def __init__(self, key: object) -> None:
        self.key = key
        valid = ", ".join(repr(k.value) for k in SortKey)
        super().__init__(f"Unknown sort key {key!r}. Expected one of: {valid}.")


class InvalidSortDirectionError(RecipeRankError, ValueError):
    """Raised when a sort direction is neither ``"asc"`` nor ``"desc"``."""

    def __init__(self, direction: object) -> None:
        self.direction = direction
        super().__init__(
            f"Unknown sort direction {direction!r}. Expected 'asc' or 'desc'."
        )


class InvalidCapacityError(RecipeRankError, ValueError):
    """Raised when a capacity budget is negative or not an integer."""

    def __init__(self, name: str, value: object, reason: str | None = None) -> None:
        self.name = name
        self.value = value
        super().__init__(
            reason
            or f"{name} must be a non-negative integer, got {value!r}."
        )


class CapacityTooLargeError(InvalidCapacityError):
    """Raised when the selection table would exceed the configured cell limit."""

    def __init__(self, cells: int, limit: int) -> None:
        self.cells = cells
        self.limit = limit
        super().__init__(
            "max_table_cells",
            cells,
            f"Selection table needs {cells:,} cells, more than the limit of "
            f"{limit:,}. Lower the calorie or cooking time budget.",
        )


class MalformedRecipeError(RecipeRankError, ValueError):
    """Raised when a recipe lacks a field, or holds a bad value, for the requested operation.

    Parameters
    ----------
    recipe_id:
        Id of the offending recipe, or ``None`` when it has no usable id.
    field:
        Wire name of the offending field, e.g. ``"nutrition.protein"``.
    message:
        Human-readable description of the problem.
    """

    def __init__(self, recipe_id: Any, field: str, message: str) -> None:
        self.recipe_id = recipe_id
        self.field = field
        where = f"recipe {recipe_id!r}" if recipe_id is not None else "recipe"
        super().__init__(f"Malformed {where}: {field}: {message}")


class RecipeLoadError(RecipeRankError):
    """Raised when a recipe source cannot be read or decoded."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        self.message = message
        super().__init__(f"Cannot load recipes from {source}: {message}")


class ConfigError(RecipeRankError):
    """Raised when a settings file is unreadable or holds invalid values."""
