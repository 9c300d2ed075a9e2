"""Reading recipe collections from files."""
from __future__ import annotations

import logging
from pathlib import Path

from recipe_rank.core.errors import RecipeLoadError
from recipe_rank.core.models import Recipe
from recipe_rank.loader.serializer import RecipeSerializer

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_recipes(path: str | Path) -> list[Recipe]:
    """Load a recipe collection from a JSON or YAML file.

    The format is chosen by suffix: ``.yaml`` / ``.yml`` are read as
    YAML, anything else as JSON.

    Raises
    ------
    RecipeLoadError
        If the file cannot be read or decoded.
    MalformedRecipeError
        If a record lacks ``id`` / ``name`` or has a mistyped field.
    """
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise RecipeLoadError(str(source), "file not found") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise RecipeLoadError(str(source), str(exc)) from exc

    serializer = RecipeSerializer()
    try:
        if source.suffix.lower() in _YAML_SUFFIXES:
            recipes = serializer.from_yaml(text)
        else:
            recipes = serializer.from_json(text)
    except RecipeLoadError as exc:
        raise RecipeLoadError(str(source), exc.message) from exc

    logger.debug("Loaded %d recipe(s) from %s", len(recipes), source)
    return recipes
