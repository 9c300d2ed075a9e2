"""Conversion between wire-format recipe dicts and ``Recipe`` records.

The wire format is the one used by ``recipes.json``: camelCase keys,
nutrition facts nested under ``"nutrition"``::

    {
      "id": 1,
      "name": "Chicken salad",
      "cookingTime": 15,
      "servings": 2,
      "nutrition": {"calories": 320, "protein": 28.5, "fat": 12},
      "ingredients": [{"name": "chicken", "amount": 200, "unit": "g"}],
      "steps": ["Boil", "Slice", "Toss"]
    }

Only ``id`` and ``name`` are mandatory here.  Numeric fields may be
absent (the operation that needs them reports it) but when present they
must have the right type.  Integral floats such as ``320.0`` are
accepted for integer fields.  Fractional calories and cooking times are
kept as floats for the checker to report.  Keys the model does not know
about are kept in ``extra`` and written back out by ``to_dict``.

Usage
-----
::

    from recipe_rank.loader import RecipeSerializer

    serializer = RecipeSerializer()
    recipes = serializer.from_json(text)
    data = serializer.to_dict(recipes[0])
"""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import yaml

from recipe_rank.core.errors import MalformedRecipeError, RecipeLoadError
from recipe_rank.core.models import Nutrition, Recipe, SelectionResult

_RECIPE_KEYS = frozenset(
    {"id", "name", "cookingTime", "nutrition", "servings", "category",
     "description", "ingredients", "steps"}
)
_NUTRITION_KEYS = frozenset({"calories", "protein"})


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class RecipeSerializer:
    """Converts between ``Recipe`` objects and plain Python dicts."""

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------

    def _optional_int(self, recipe_id: Any, field: str, value: object) -> int | None:
        if value is None:
            return None
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedRecipeError(recipe_id, field, f"expected an integer, got {value!r}")
        return value

    def _optional_cost(self, recipe_id: Any, field: str, value: object) -> float | None:
        # Fractional costs are kept; selection rejects them, the checker flags them.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return self._optional_number(recipe_id, field, value)

    def _optional_number(self, recipe_id: Any, field: str, value: object) -> float | None:
        if value is None:
            return None
        if not _is_number(value):
            raise MalformedRecipeError(recipe_id, field, f"expected a number, got {value!r}")
        return value  # type: ignore[return-value]

    def _optional_str(self, recipe_id: Any, field: str, value: object) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise MalformedRecipeError(recipe_id, field, f"expected text, got {value!r}")
        return value

    def _optional_list(self, recipe_id: Any, field: str, value: object) -> tuple[Any, ...]:
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            raise MalformedRecipeError(recipe_id, field, f"expected a list, got {value!r}")
        return tuple(value)

    # ------------------------------------------------------------------
    # Deserialization (dict → Recipe)
    # ------------------------------------------------------------------

    def _nutrition_from_dict(self, recipe_id: Any, data: object) -> Nutrition | None:
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise MalformedRecipeError(recipe_id, "nutrition", f"expected an object, got {data!r}")
        return Nutrition(
            calories=self._optional_cost(recipe_id, "nutrition.calories", data.get("calories")),
            protein=self._optional_number(recipe_id, "nutrition.protein", data.get("protein")),
            extra={k: v for k, v in data.items() if k not in _NUTRITION_KEYS},
        )

    def from_dict(self, data: Mapping[str, Any]) -> Recipe:
        """Deserialize a ``Recipe`` from a wire-format dict.

        Raises
        ------
        MalformedRecipeError
            If ``id`` or ``name`` is missing, or a field has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise MalformedRecipeError(None, "<record>", f"expected an object, got {data!r}")
        recipe_id = data.get("id")
        if recipe_id is None:
            raise MalformedRecipeError(None, "id", "missing")
        recipe_id = self._optional_int(recipe_id, "id", recipe_id)
        name = self._optional_str(recipe_id, "name", data.get("name"))
        if name is None:
            raise MalformedRecipeError(recipe_id, "name", "missing")

        return Recipe(
            id=recipe_id,
            name=name,
            cooking_time=self._optional_cost(recipe_id, "cookingTime", data.get("cookingTime")),
            nutrition=self._nutrition_from_dict(recipe_id, data.get("nutrition")),
            servings=self._optional_int(recipe_id, "servings", data.get("servings")),
            category=self._optional_str(recipe_id, "category", data.get("category")),
            description=self._optional_str(recipe_id, "description", data.get("description")),
            ingredients=self._optional_list(recipe_id, "ingredients", data.get("ingredients")),
            steps=self._optional_list(recipe_id, "steps", data.get("steps")),
            extra={k: v for k, v in data.items() if k not in _RECIPE_KEYS},
        )

    def from_data(self, data: object) -> list[Recipe]:
        """Deserialize a collection: a list of recipes, or ``{"recipes": [...]}``."""
        if isinstance(data, Mapping) and "recipes" in data:
            data = data["recipes"]
        if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
            raise MalformedRecipeError(
                None, "<collection>", "expected a list of recipes or an object with a 'recipes' list"
            )
        return [self.from_dict(item) for item in data]

    # ------------------------------------------------------------------
    # Serialization (Recipe → dict)
    # ------------------------------------------------------------------

    def _nutrition_to_dict(self, nutrition: Nutrition) -> dict[str, object]:
        out: dict[str, object] = {}
        if nutrition.calories is not None:
            out["calories"] = nutrition.calories
        if nutrition.protein is not None:
            out["protein"] = nutrition.protein
        out.update(nutrition.extra)
        return out

    def to_dict(self, recipe: Recipe) -> dict[str, object]:
        """Serialize a ``Recipe`` to a wire-format dict, omitting absent fields."""
        out: dict[str, object] = {"id": recipe.id, "name": recipe.name}
        optional = {
            "category": recipe.category,
            "servings": recipe.servings,
            "cookingTime": recipe.cooking_time,
            "description": recipe.description,
        }
        out.update({k: v for k, v in optional.items() if v is not None})
        if recipe.nutrition is not None:
            out["nutrition"] = self._nutrition_to_dict(recipe.nutrition)
        if recipe.ingredients:
            out["ingredients"] = list(recipe.ingredients)
        if recipe.steps:
            out["steps"] = list(recipe.steps)
        out.update(recipe.extra)
        return out

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def from_json(self, text: str) -> list[Recipe]:
        """Deserialize a recipe collection from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RecipeLoadError("<json>", f"invalid JSON: {exc}") from exc
        return self.from_data(data)

    def to_json(self, recipes: Sequence[Recipe], indent: int = 2) -> str:
        """Serialize a recipe collection to a JSON string."""
        return json.dumps([self.to_dict(r) for r in recipes], indent=indent, ensure_ascii=False)

    def result_to_json(self, result: SelectionResult, indent: int = 2) -> str:
        """Serialize a ``SelectionResult`` to a JSON string."""
        return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def from_yaml(self, text: str) -> list[Recipe]:
        """Deserialize a recipe collection from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise RecipeLoadError("<yaml>", f"invalid YAML: {exc}") from exc
        return self.from_data(data if data is not None else [])

    def to_yaml(self, recipes: Sequence[Recipe]) -> str:
        """Serialize a recipe collection to a YAML string."""
        return yaml.dump(
            [self.to_dict(r) for r in recipes],
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def result_to_yaml(self, result: SelectionResult) -> str:
        """Serialize a ``SelectionResult`` to a YAML string."""
        return yaml.dump(result.to_dict(), default_flow_style=False, sort_keys=False)
