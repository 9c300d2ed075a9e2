"""Unit tests for recipe_rank.loader.serializer: wire-format decoding,
type checks, payload preservation, and result serialization.
"""
from __future__ import annotations

import json

import pytest
import yaml

from recipe_rank.core.errors import MalformedRecipeError, RecipeLoadError
from recipe_rank.core.models import Nutrition, Recipe, SelectionResult
from recipe_rank.loader import RecipeSerializer


@pytest.fixture()
def serializer() -> RecipeSerializer:
    return RecipeSerializer()


class TestFromDict:
    def test_full_record(self, serializer: RecipeSerializer, sample_data: list[dict[str, object]]) -> None:
        recipe = serializer.from_dict(sample_data[0])
        assert recipe.id == 3
        assert recipe.name == "Salmon teriyaki"
        assert recipe.cooking_time == 25
        assert recipe.category == "main"
        assert recipe.servings == 2
        assert recipe.nutrition == Nutrition(calories=420, protein=32.5, extra={"fat": 18})
        assert recipe.steps == ("Marinate", "Grill")
        assert recipe.ingredients == ({"name": "salmon", "amount": 2, "unit": "fillet"},)
        assert recipe.description == "Glazed salmon."

    def test_minimal_record(self, serializer: RecipeSerializer) -> None:
        recipe = serializer.from_dict({"id": 1, "name": "Toast"})
        assert recipe == Recipe(id=1, name="Toast")

    def test_unknown_keys_go_to_extra(self, serializer: RecipeSerializer) -> None:
        recipe = serializer.from_dict({"id": 1, "name": "x", "calories": 50, "tags": ["quick"]})
        assert recipe.extra == {"calories": 50, "tags": ["quick"]}
        assert recipe.lookup("calories") == 50

    def test_integral_floats_become_ints(self, serializer: RecipeSerializer) -> None:
        recipe = serializer.from_dict(
            {"id": 2.0, "name": "x", "cookingTime": 15.0, "nutrition": {"calories": 320.0, "protein": 12}}
        )
        assert recipe.id == 2 and isinstance(recipe.id, int)
        assert isinstance(recipe.cooking_time, int)
        assert isinstance(recipe.nutrition.calories, int)  # type: ignore[union-attr]

    def test_fractional_costs_are_kept(self, serializer: RecipeSerializer) -> None:
        recipe = serializer.from_dict({"id": 1, "name": "x", "cookingTime": 7.5, "nutrition": {"calories": 99.9}})
        assert recipe.cooking_time == 7.5
        assert recipe.nutrient("calories") == 99.9

    @pytest.mark.parametrize("data,field", [
        ({"name": "x"}, "id"),
        ({"id": None, "name": "x"}, "id"),
        ({"id": True, "name": "x"}, "id"),
        ({"id": "7", "name": "x"}, "id"),
        ({"id": 1}, "name"),
        ({"id": 1, "name": 5}, "name"),
        ({"id": 1, "name": "x", "cookingTime": "10"}, "cookingTime"),
        ({"id": 1, "name": "x", "nutrition": []}, "nutrition"),
        ({"id": 1, "name": "x", "nutrition": {"protein": "high"}}, "nutrition.protein"),
        ({"id": 1, "name": "x", "nutrition": {"calories": False}}, "nutrition.calories"),
        ({"id": 1, "name": "x", "servings": 1.5}, "servings"),
        ({"id": 1, "name": "x", "steps": "Boil"}, "steps"),
        ({"id": 1, "name": "x", "ingredients": "rice"}, "ingredients"),
        ({"id": 1, "name": "x", "ingredients": {"rice": 1}}, "ingredients"),
    ])
    def test_bad_fields(self, serializer: RecipeSerializer, data: dict[str, object], field: str) -> None:
        with pytest.raises(MalformedRecipeError) as info:
            serializer.from_dict(data)
        assert info.value.field == field

    def test_text_steps_are_not_split_into_characters(self, serializer: RecipeSerializer) -> None:
        with pytest.raises(MalformedRecipeError) as info:
            serializer.from_dict({"id": 1, "name": "x", "steps": "Boil", "ingredients": ["rice"]})
        assert info.value.field == "steps"
        assert "expected a list" in str(info.value)

    def test_list_payload_round_trips(self, serializer: RecipeSerializer) -> None:
        data = {"id": 1, "name": "x", "ingredients": ["rice", "water"], "steps": ["Rinse", "Boil"]}
        recipe = serializer.from_dict(data)
        assert recipe.steps == ("Rinse", "Boil")
        assert serializer.to_dict(recipe) == data

    def test_non_mapping_record(self, serializer: RecipeSerializer) -> None:
        with pytest.raises(MalformedRecipeError):
            serializer.from_dict(["id", 1])  # type: ignore[arg-type]


class TestToDict:
    def test_round_trip_preserves_payload(
        self, serializer: RecipeSerializer, sample_data: list[dict[str, object]]
    ) -> None:
        for data in sample_data:
            assert serializer.to_dict(serializer.from_dict(data)) == data

    def test_absent_fields_are_omitted(self, serializer: RecipeSerializer) -> None:
        assert serializer.to_dict(Recipe(id=1, name="x")) == {"id": 1, "name": "x"}

    def test_camel_case_keys(self, serializer: RecipeSerializer) -> None:
        data = serializer.to_dict(Recipe(id=1, name="x", cooking_time=5))
        assert data["cookingTime"] == 5


class TestCollections:
    def test_from_json_list(self, serializer: RecipeSerializer, sample_data: list[dict[str, object]]) -> None:
        recipes = serializer.from_json(json.dumps(sample_data))
        assert [r.id for r in recipes] == [3, 1, 2, 4]

    def test_from_json_wrapped(self, serializer: RecipeSerializer) -> None:
        recipes = serializer.from_json('{"recipes": [{"id": 1, "name": "x"}]}')
        assert len(recipes) == 1

    def test_from_json_empty(self, serializer: RecipeSerializer) -> None:
        assert serializer.from_json("[]") == []

    def test_invalid_json(self, serializer: RecipeSerializer) -> None:
        with pytest.raises(RecipeLoadError):
            serializer.from_json("[{")

    @pytest.mark.parametrize("text", ['"recipes"', '{"id": 1, "name": "x"}', "42"])
    def test_not_a_collection(self, serializer: RecipeSerializer, text: str) -> None:
        with pytest.raises(MalformedRecipeError):
            serializer.from_json(text)

    def test_from_yaml(self, serializer: RecipeSerializer) -> None:
        text = (
            "recipes:\n"
            "  - id: 1\n"
            "    name: Omelette\n"
            "    cookingTime: 5\n"
            "    nutrition:\n"
            "      calories: 210\n"
            "      protein: 14\n"
        )
        recipes = serializer.from_yaml(text)
        assert recipes[0].name == "Omelette"
        assert recipes[0].nutrient("protein") == 14

    def test_from_yaml_empty_document(self, serializer: RecipeSerializer) -> None:
        assert serializer.from_yaml("") == []

    def test_invalid_yaml(self, serializer: RecipeSerializer) -> None:
        with pytest.raises(RecipeLoadError):
            serializer.from_yaml("- [unclosed")

    def test_to_json_and_yaml(self, serializer: RecipeSerializer, sample_data: list[dict[str, object]]) -> None:
        recipes = serializer.from_json(json.dumps(sample_data))
        assert json.loads(serializer.to_json(recipes)) == sample_data
        assert yaml.safe_load(serializer.to_yaml(recipes)) == sample_data


class TestResultSerialization:
    def test_result_to_json(self, serializer: RecipeSerializer) -> None:
        text = serializer.result_to_json(SelectionResult((2, 5), 41.5))
        assert json.loads(text) == {"selectedRecipeIds": [2, 5], "totalProtein": 41.5}

    def test_result_to_yaml(self, serializer: RecipeSerializer) -> None:
        text = serializer.result_to_yaml(SelectionResult((), 0))
        assert yaml.safe_load(text) == {"selectedRecipeIds": [], "totalProtein": 0}
