"""Recipe loading.

Exports the ``RecipeSerializer`` and the ``load_recipes`` file reader.
"""
from __future__ import annotations

from recipe_rank.loader.serializer import RecipeSerializer
from recipe_rank.loader.sources import load_recipes

__all__ = ["RecipeSerializer", "load_recipes"]
