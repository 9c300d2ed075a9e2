"""Capacity-constrained selector.

Exports ``select_recipes``, the ``ProteinTable`` it works in, and the
``summarize`` helper that totals a result.
"""
from __future__ import annotations

from recipe_rank.selection.knapsack import ProteinTable, select_recipes
from recipe_rank.selection.summary import SelectionSummary, summarize

__all__ = [
    "select_recipes",
    "ProteinTable",
    "SelectionSummary",
    "summarize",
]
