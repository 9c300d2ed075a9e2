"""Ranking sorter.

Exports ``sort_recipes`` and the helpers that normalize its key and
direction arguments.
"""
from __future__ import annotations

from recipe_rank.sorting.quicksort import (
    coerce_direction,
    coerce_key,
    sort_recipes,
    sort_value,
)

__all__ = [
    "sort_recipes",
    "sort_value",
    "coerce_key",
    "coerce_direction",
]
