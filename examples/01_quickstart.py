#!/usr/bin/env python3
"""Example: Quickstart for recipe-rank

Minimal working example: load a recipe file, order it by calories, and
pick the most protein that fits a calorie and cooking time budget.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install recipe-rank
"""
from __future__ import annotations

from pathlib import Path

import recipe_rank

RECIPE_FILE = Path(__file__).parent / "recipes.json"


def main() -> None:
    print(f"recipe-rank version: {recipe_rank.__version__}")

    # Step 1: Load the collection
    recipes = recipe_rank.load_recipes(RECIPE_FILE)
    print(f"Loaded {len(recipes)} recipes")

    # Step 2: Order by calories, lightest first
    for recipe in recipe_rank.sort(recipes, "calories", "asc"):
        print(f"  {recipe.nutrient('calories'):>5} kcal  {recipe.name}")

    # Step 3: Most protein within 800 kcal and 45 minutes
    result = recipe_rank.select(recipes, max_calories=800, max_cooking_time=45)
    print(f"\nSelected ids: {list(result.selected_recipe_ids)}")
    print(f"Total protein: {result.total_protein} g")

    # Step 4: Totals for the chosen recipes
    summary = recipe_rank.summarize(recipes, result)
    print(f"Total calories: {summary.total_calories} kcal")
    print(f"Total cooking time: {summary.total_cooking_time} min")


if __name__ == "__main__":
    main()
