"""Individual checks for recipe collections.

Each rule is a callable that accepts a sequence of ``Recipe`` objects
and returns a list of ``Diagnostic`` objects.  Rules are composed into
the ``Validator`` class which runs them all and aggregates results.

Rule codes use the ``RCP`` prefix followed by a three-digit number:

    RCP001  Duplicate recipe id
    RCP002  Missing cooking time
    RCP003  Missing calories
    RCP004  Missing protein
    RCP005  Negative numeric value
    RCP006  Non-integer calories or cooking time
    RCP007  Blank recipe name
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Callable

from recipe_rank.core.models import Recipe
from recipe_rank.validator.diagnostics import Diagnostic, DiagnosticSeverity

Rule = Callable[[Sequence[Recipe]], list[Diagnostic]]


def _make(
    code: str,
    severity: DiagnosticSeverity,
    message: str,
    index: int,
    recipe: Recipe,
    suggestion: str | None = None,
    rule: str = "",
) -> Diagnostic:
    return Diagnostic(
        severity=severity,
        code=code,
        message=message,
        index=index,
        recipe_id=recipe.id,
        suggestion=suggestion,
        rule=rule,
    )


def _numeric_fields(recipe: Recipe) -> list[tuple[str, object]]:
    return [
        ("cookingTime", recipe.cooking_time),
        ("nutrition.calories", recipe.nutrient("calories")),
        ("nutrition.protein", recipe.nutrient("protein")),
    ]


# ---------------------------------------------------------------------------
# RCP001: duplicate ids
# ---------------------------------------------------------------------------

def rule_duplicate_ids(recipes: Sequence[Recipe]) -> list[Diagnostic]:
    """RCP001: Recipe ids must be unique within a collection."""
    counts = Counter(r.id for r in recipes)
    seen: set[int] = set()
    diagnostics: list[Diagnostic] = []
    for index, recipe in enumerate(recipes):
        if counts[recipe.id] > 1 and recipe.id in seen:
            diagnostics.append(
                _make(
                    "RCP001",
                    DiagnosticSeverity.ERROR,
                    f"Duplicate recipe id {recipe.id!r} ({counts[recipe.id]} occurrences)",
                    index,
                    recipe,
                    suggestion="Selection results identify recipes by id; give each recipe its own",
                    rule="rule_duplicate_ids",
                )
            )
        seen.add(recipe.id)
    return diagnostics


# ---------------------------------------------------------------------------
# RCP002-RCP004: missing selection inputs
# ---------------------------------------------------------------------------

def _missing(code: str, field: str, rule: str, recipes: Sequence[Recipe]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for index, recipe in enumerate(recipes):
        values = dict(_numeric_fields(recipe))
        if values[field] is None:
            diagnostics.append(
                _make(
                    code,
                    DiagnosticSeverity.WARNING,
                    f"Recipe {recipe.name!r} has no {field}",
                    index,
                    recipe,
                    suggestion="Selection will reject this collection until the value is filled in",
                    rule=rule,
                )
            )
    return diagnostics


def rule_missing_cooking_time(recipes: Sequence[Recipe]) -> list[Diagnostic]:
    """RCP002: Every recipe should have a cooking time."""
    return _missing("RCP002", "cookingTime", "rule_missing_cooking_time", recipes)


def rule_missing_calories(recipes: Sequence[Recipe]) -> list[Diagnostic]:
    """RCP003: Every recipe should have nutrition calories."""
    return _missing("RCP003", "nutrition.calories", "rule_missing_calories", recipes)


def rule_missing_protein(recipes: Sequence[Recipe]) -> list[Diagnostic]:
    """RCP004: Every recipe should have nutrition protein."""
    return _missing("RCP004", "nutrition.protein", "rule_missing_protein", recipes)


# ---------------------------------------------------------------------------
# RCP005: negative values
# ---------------------------------------------------------------------------

def rule_negative_values(recipes: Sequence[Recipe]) -> list[Diagnostic]:
    """RCP005: Calories, protein and cooking time cannot be negative."""
    diagnostics: list[Diagnostic] = []
    for index, recipe in enumerate(recipes):
        for field, value in _numeric_fields(recipe):
            if isinstance(value, (int, float)) and value < 0:
                diagnostics.append(
                    _make(
                        "RCP005",
                        DiagnosticSeverity.ERROR,
                        f"Recipe {recipe.name!r}: {field} is negative ({value})",
                        index,
                        recipe,
                        rule="rule_negative_values",
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# RCP006: fractional costs
# ---------------------------------------------------------------------------

def rule_integer_costs(recipes: Sequence[Recipe]) -> list[Diagnostic]:
    """RCP006: Calories and cooking time are selection costs and must be whole numbers."""
    diagnostics: list[Diagnostic] = []
    for index, recipe in enumerate(recipes):
        for field, value in _numeric_fields(recipe)[:2]:
            if value is not None and not isinstance(value, int):
                diagnostics.append(
                    _make(
                        "RCP006",
                        DiagnosticSeverity.WARNING,
                        f"Recipe {recipe.name!r}: {field} is not a whole number ({value!r})",
                        index,
                        recipe,
                        suggestion="Round the value before running a selection",
                        rule="rule_integer_costs",
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# RCP007: blank names
# ---------------------------------------------------------------------------

def rule_blank_name(recipes: Sequence[Recipe]) -> list[Diagnostic]:
    """RCP007: A recipe name should not be blank."""
    return [
        _make(
            "RCP007",
            DiagnosticSeverity.HINT,
            "Recipe name is blank",
            index,
            recipe,
            rule="rule_blank_name",
        )
        for index, recipe in enumerate(recipes)
        if not recipe.name.strip()
    ]


DEFAULT_RULES: tuple[Rule, ...] = (
    rule_duplicate_ids,
    rule_missing_cooking_time,
    rule_missing_calories,
    rule_missing_protein,
    rule_negative_values,
    rule_integer_costs,
    rule_blank_name,
)
