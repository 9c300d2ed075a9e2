#!/usr/bin/env python3
"""Example: RecipeBook convenience wrapper

Shows the one-object API: load once, then sort, select and check with
settings taken from a YAML file.

Usage:
    python examples/03_recipe_book.py

Requirements:
    pip install recipe-rank
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from recipe_rank import RecipeBook
from recipe_rank.config import load_config
from recipe_rank.loader import RecipeSerializer

RECIPE_FILE = Path(__file__).parent / "recipes.json"

SETTINGS = """\
default_key: cookingTime
default_direction: desc
max_table_cells: 2000000
"""


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        settings_path = Path(tmp) / "recipe-rank.yaml"
        settings_path.write_text(SETTINGS, encoding="utf-8")
        config = load_config(settings_path)

    book = RecipeBook.from_file(RECIPE_FILE, config=config)
    print(book)

    print("\nSlowest first (settings default):")
    for recipe in book.sorted_by():
        print(f"  {recipe.cooking_time:>3} min  {recipe.name}")

    result = book.select(max_calories=600, max_cooking_time=30)
    print("\nSelection as YAML:")
    print(RecipeSerializer().result_to_yaml(result))

    print(f"Data checks: {len(book.check())} finding(s)")


if __name__ == "__main__":
    main()
