"""Unit tests for recipe_rank.sorting: key extraction, ordering rules,
tie placement, argument coercion, and behavior on adversarial inputs.
"""
from __future__ import annotations

import random

import pytest

from conftest import make_recipe
from recipe_rank.core.errors import (
    InvalidSortDirectionError,
    InvalidSortKeyError,
    MalformedRecipeError,
)
from recipe_rank.core.models import Nutrition, Recipe, SortDirection, SortKey
from recipe_rank.sorting import coerce_direction, coerce_key, sort_recipes, sort_value


def _ids(recipes: list[Recipe]) -> list[int]:
    return [r.id for r in recipes]


def _random_recipes(seed: int, count: int) -> list[Recipe]:
    rng = random.Random(seed)
    return [
        make_recipe(
            i,
            name=rng.choice(["Curry", "Soup", "Salad", "Stew", "Tacos"]) + f" {rng.randint(0, 9)}",
            calories=rng.randint(0, 800),
            protein=rng.randint(0, 50),
            cooking_time=rng.randint(0, 120),
        )
        for i in rng.sample(range(1000), count)
    ]


# ===========================================================================
# Argument coercion
# ===========================================================================


class TestCoercion:
    @pytest.mark.parametrize("raw,expected", [
        ("id", SortKey.ID),
        ("name", SortKey.NAME),
        ("calories", SortKey.CALORIES),
        ("cookingTime", SortKey.COOKING_TIME),
    ])
    def test_wire_names_map_to_keys(self, raw: str, expected: SortKey) -> None:
        assert coerce_key(raw) is expected

    def test_key_passes_through(self) -> None:
        assert coerce_key(SortKey.NAME) is SortKey.NAME

    @pytest.mark.parametrize("raw", ["protein", "cooking_time", "ID", "", None])
    def test_unknown_key_raises(self, raw: object) -> None:
        with pytest.raises(InvalidSortKeyError) as info:
            coerce_key(raw)  # type: ignore[arg-type]
        assert info.value.key == raw

    def test_invalid_key_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            coerce_key("servings")

    def test_directions(self) -> None:
        assert coerce_direction("asc") is SortDirection.ASC
        assert coerce_direction("desc") is SortDirection.DESC
        assert coerce_direction(SortDirection.DESC) is SortDirection.DESC

    @pytest.mark.parametrize("raw", ["ascending", "DESC", "", 1])
    def test_unknown_direction_raises(self, raw: object) -> None:
        with pytest.raises(InvalidSortDirectionError):
            coerce_direction(raw)  # type: ignore[arg-type]


# ===========================================================================
# Key extraction
# ===========================================================================


class TestSortValue:
    def test_calories_read_from_nutrition(self) -> None:
        recipe = make_recipe(1, calories=250)
        assert sort_value(recipe, SortKey.CALORIES) == 250

    def test_calories_fall_back_to_top_level_field(self) -> None:
        recipe = Recipe(id=1, name="x", nutrition=None, extra={"calories": 99})
        assert sort_value(recipe, SortKey.CALORIES) == 99

    def test_cooking_time_falls_back_to_top_level(self) -> None:
        recipe = make_recipe(1, cooking_time=42)
        assert sort_value(recipe, SortKey.COOKING_TIME) == 42

    def test_cooking_time_prefers_nutrition_entry(self) -> None:
        recipe = Recipe(
            id=1,
            name="x",
            cooking_time=42,
            nutrition=Nutrition(calories=1, protein=1, extra={"cookingTime": 7}),
        )
        assert sort_value(recipe, SortKey.COOKING_TIME) == 7

    def test_id_and_name_read_directly(self) -> None:
        recipe = make_recipe(5, name="Udon")
        assert sort_value(recipe, SortKey.ID) == 5
        assert sort_value(recipe, SortKey.NAME) == "Udon"

    def test_missing_value_raises(self) -> None:
        recipe = Recipe(id=9, name="bare")
        with pytest.raises(MalformedRecipeError) as info:
            sort_value(recipe, SortKey.CALORIES)
        assert info.value.recipe_id == 9
        assert info.value.field == "calories"


# ===========================================================================
# Ordering
# ===========================================================================


class TestSortRecipes:
    def test_sorts_by_id_ascending(self) -> None:
        recipes = [make_recipe(3, "C"), make_recipe(1, "A"), make_recipe(2, "B")]
        assert _ids(sort_recipes(recipes, "id", "asc")) == [1, 2, 3]

    def test_sorts_by_id_descending(self) -> None:
        recipes = [make_recipe(3), make_recipe(1), make_recipe(2)]
        assert _ids(sort_recipes(recipes, SortKey.ID, SortDirection.DESC)) == [3, 2, 1]

    def test_sorts_by_name_lexicographically(self) -> None:
        recipes = [make_recipe(1, "banana"), make_recipe(2, "Apple"), make_recipe(3, "apple")]
        assert [r.name for r in sort_recipes(recipes, "name")] == ["Apple", "apple", "banana"]

    def test_sorts_by_calories(self) -> None:
        recipes = [make_recipe(1, calories=300), make_recipe(2, calories=120), make_recipe(3, calories=640)]
        assert _ids(sort_recipes(recipes, "calories", "asc")) == [2, 1, 3]
        assert _ids(sort_recipes(recipes, "calories", "desc")) == [3, 1, 2]

    def test_sorts_by_cooking_time(self) -> None:
        recipes = [make_recipe(1, cooking_time=30), make_recipe(2, cooking_time=5), make_recipe(3, cooking_time=15)]
        assert _ids(sort_recipes(recipes, "cookingTime")) == [2, 3, 1]

    def test_default_direction_is_ascending(self) -> None:
        recipes = [make_recipe(2), make_recipe(1)]
        assert _ids(sort_recipes(recipes, "id")) == [1, 2]

    def test_empty_input(self) -> None:
        assert sort_recipes([], "id", "asc") == []

    def test_single_element_is_returned_without_key_lookup(self) -> None:
        bare = Recipe(id=1, name="bare")
        assert sort_recipes([bare], "calories") == [bare]

    def test_returns_same_objects(self) -> None:
        recipes = [make_recipe(2), make_recipe(1)]
        result = sort_recipes(recipes, "id")
        assert result[0] is recipes[1]
        assert result[1] is recipes[0]

    def test_input_is_not_modified(self) -> None:
        recipes = [make_recipe(3), make_recipe(1), make_recipe(2)]
        before = list(recipes)
        sort_recipes(recipes, "id", "desc")
        assert recipes == before

    def test_accepts_tuples(self) -> None:
        recipes = (make_recipe(2), make_recipe(1))
        assert _ids(sort_recipes(recipes, "id")) == [1, 2]

    def test_equal_keys_follow_pivot_placement(self) -> None:
        # Ties go right of the last-element pivot, so equal keys come out reversed.
        recipes = [make_recipe(1, calories=50), make_recipe(2, calories=50), make_recipe(3, calories=50)]
        assert _ids(sort_recipes(recipes, "calories", "asc")) == [3, 2, 1]
        assert _ids(sort_recipes(recipes, "calories", "desc")) == [3, 2, 1]

    def test_ties_mixed_with_distinct_keys(self) -> None:
        recipes = [
            make_recipe(1, calories=200),
            make_recipe(2, calories=100),
            make_recipe(3, calories=200),
            make_recipe(4, calories=150),
        ]
        assert _ids(sort_recipes(recipes, "calories")) == [2, 4, 3, 1]

    def test_invalid_key_raises(self) -> None:
        with pytest.raises(InvalidSortKeyError):
            sort_recipes([make_recipe(1), make_recipe(2)], "protein")

    def test_invalid_direction_raises_even_for_empty_input(self) -> None:
        with pytest.raises(InvalidSortDirectionError):
            sort_recipes([], "id", "sideways")

    def test_missing_key_value_raises(self) -> None:
        recipes = [make_recipe(1), Recipe(id=2, name="bare"), make_recipe(3)]
        with pytest.raises(MalformedRecipeError):
            sort_recipes(recipes, "calories")

    def test_sorting_by_id_ignores_missing_nutrition(self) -> None:
        recipes = [Recipe(id=2, name="b"), Recipe(id=1, name="a")]
        assert _ids(sort_recipes(recipes, "id")) == [1, 2]

    @pytest.mark.parametrize("direction", ["asc", "desc"])
    def test_presorted_input_does_not_exhaust_the_stack(self, direction: str) -> None:
        recipes = [make_recipe(i) for i in range(1500)]
        result = sort_recipes(recipes, "id", direction)
        expected = list(range(1500)) if direction == "asc" else list(range(1499, -1, -1))
        assert _ids(result) == expected


# ===========================================================================
# Properties over random collections
# ===========================================================================


class TestSortProperties:
    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("key", list(SortKey))
    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_output_is_ordered_permutation(
        self, seed: int, key: SortKey, direction: SortDirection
    ) -> None:
        recipes = _random_recipes(seed, 40)
        result = sort_recipes(recipes, key, direction)

        assert sorted(_ids(result)) == sorted(_ids(recipes))
        values = [sort_value(r, key) for r in result]
        for earlier, later in zip(values, values[1:]):
            if direction is SortDirection.ASC:
                assert earlier <= later
            else:
                assert earlier >= later

    def test_duplicate_ids_are_kept(self) -> None:
        recipes = [make_recipe(1, calories=5), make_recipe(1, calories=3), make_recipe(2, calories=4)]
        result = sort_recipes(recipes, "calories")
        assert _ids(result) == [1, 2, 1]

    def test_deterministic(self) -> None:
        recipes = _random_recipes(7, 30)
        first = sort_recipes(recipes, "name", "desc")
        second = sort_recipes(recipes, "name", "desc")
        assert first == second
