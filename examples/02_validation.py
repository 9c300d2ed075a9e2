#!/usr/bin/env python3
"""Example: Recipe data checks

Demonstrates checking a recipe collection in normal and strict modes,
and interpreting diagnostic messages.

Usage:
    python examples/02_validation.py

Requirements:
    pip install recipe-rank
"""
from __future__ import annotations

import recipe_rank
from recipe_rank.loader import RecipeSerializer

MESSY_RECIPES = '''
- id: 1
  name: Tofu scramble
  cookingTime: 12
  nutrition: {calories: 310, protein: 21}
- id: 1
  name: Tofu scramble (copy)
  cookingTime: 12
  nutrition: {calories: 310, protein: 21}
- id: 2
  name: Overnight oats
  nutrition: {calories: 350.5, protein: 14}
- id: 3
  name: "  "
  cookingTime: -5
  nutrition: {calories: 120}
'''


def print_diagnostics(label: str, diagnostics: list[object]) -> None:
    print(f"\n{label} ({len(diagnostics)} diagnostics):")
    if not diagnostics:
        print("  No issues found.")
        return
    for diag in diagnostics:
        print(f"  {diag}")


def main() -> None:
    print(f"recipe-rank version: {recipe_rank.__version__}")

    recipes = RecipeSerializer().from_yaml(MESSY_RECIPES)
    print_diagnostics("Normal mode", recipe_rank.check(recipes))
    print_diagnostics("Strict mode", recipe_rank.check(recipes, strict=True))

    # Selection refuses records it cannot cost
    try:
        recipe_rank.select(recipes, 1_000, 60)
    except recipe_rank.MalformedRecipeError as exc:
        print(f"\nselect() rejected the collection: {exc}")


if __name__ == "__main__":
    main()
