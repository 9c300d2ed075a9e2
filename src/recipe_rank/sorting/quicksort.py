"""Partition-exchange sort for recipe collections.

The sort is written out by hand rather than delegated to ``sorted`` so
that its behavior is fully pinned down:

- the pivot is always the *last* element of the current sub-sequence;
- elements equal to the pivot always go to the right-hand partition, so
  the sort is not stable;
- sorted and reverse-sorted inputs degrade to O(n²) comparisons.

Instead of recursing on each partition, pending partitions are kept on
an explicit work stack.  The output is identical to
``sort(left) + [pivot] + sort(right)`` but the depth of the interpreter
stack no longer grows with the input, so adversarial orderings cannot
hit the recursion limit.

Usage
-----
::

    from recipe_rank.sorting import sort_recipes

    by_calories = sort_recipes(recipes, "calories", "desc")
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Union

from recipe_rank.core.errors import (
    InvalidSortDirectionError,
    InvalidSortKeyError,
    MalformedRecipeError,
)
from recipe_rank.core.models import Recipe, SortDirection, SortKey

logger = logging.getLogger(__name__)

# A work item is either a partition still to sort or a pivot ready to emit.
_Partition = list[Recipe]
_WorkItem = Union[_Partition, Recipe]


def coerce_key(key: SortKey | str) -> SortKey:
    """Return ``key`` as a ``SortKey``, accepting its wire name.

    Raises
    ------
    InvalidSortKeyError
        If ``key`` does not name a recognized sort key.
    """
    if isinstance(key, SortKey):
        return key
    try:
        return SortKey(key)
    except ValueError:
        raise InvalidSortKeyError(key) from None


def coerce_direction(direction: SortDirection | str) -> SortDirection:
    """Return ``direction`` as a ``SortDirection``, accepting ``"asc"``/``"desc"``.

    Raises
    ------
    InvalidSortDirectionError
        If ``direction`` is neither.
    """
    if isinstance(direction, SortDirection):
        return direction
    try:
        return SortDirection(direction)
    except ValueError:
        raise InvalidSortDirectionError(direction) from None


def sort_value(recipe: Recipe, key: SortKey) -> Any:
    """Extract the value ``recipe`` is ranked by under ``key``.

    Calorie and cooking-time keys read the nutrition record when it
    carries the field and fall back to the top-level field otherwise.

    Raises
    ------
    MalformedRecipeError
        If the recipe has no value for ``key``.
    """
    value = None
    if key.is_nutritional:
        value = recipe.nutrient(key.value)
    if value is None:
        value = recipe.lookup(key.value)
    if value is None:
        raise MalformedRecipeError(recipe.id, key.value, "missing value to sort by")
    return value


def sort_recipes(
    recipes: Sequence[Recipe],
    key: SortKey | str,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[Recipe]:
    """Return a new list with ``recipes`` ordered by ``key`` in ``direction``.

    Parameters
    ----------
    recipes:
        The collection to order.  It is not modified.
    key:
        Field to order by, as a ``SortKey`` or its wire name.
    direction:
        ``SortDirection`` or ``"asc"`` / ``"desc"``.

    Returns
    -------
    list[Recipe]
        The same recipe objects, reordered.  Recipes with equal keys may
        come out in any relative order.

    Raises
    ------
    InvalidSortKeyError, InvalidSortDirectionError
        For an unrecognized key or direction.
    MalformedRecipeError
        If a recipe has no value for ``key``.
    """
    sort_key = coerce_key(key)
    descending = coerce_direction(direction) is SortDirection.DESC
    logger.debug(
        "Sorting %d recipe(s) by %s (%s)",
        len(recipes),
        sort_key.value,
        "desc" if descending else "asc",
    )

    ordered: list[Recipe] = []
    stack: list[_WorkItem] = [list(recipes)]
    while stack:
        item = stack.pop()
        if isinstance(item, Recipe):
            ordered.append(item)
            continue
        if len(item) <= 1:
            ordered.extend(item)
            continue

        pivot = item[-1]
        pivot_value = sort_value(pivot, sort_key)
        left: _Partition = []
        right: _Partition = []
        for recipe in item[:-1]:
            value = sort_value(recipe, sort_key)
            precedes = value > pivot_value if descending else value < pivot_value
            if precedes:
                left.append(recipe)
            else:
                right.append(recipe)

        # Last in, first out: left is processed before the pivot, then right.
        stack.append(right)
        stack.append(pivot)
        stack.append(left)

    return ordered
