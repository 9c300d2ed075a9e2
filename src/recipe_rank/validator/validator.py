"""Recipe collection checker.

The ``Validator`` runs a configurable set of rules against a recipe
collection and returns a list of ``Diagnostic`` objects.  In strict
mode, warnings are promoted to errors so that data pipelines can refuse
collections that selection would reject.

Usage
-----
::

    from recipe_rank.loader import load_recipes
    from recipe_rank.validator import Validator

    recipes = load_recipes("recipes.json")
    diagnostics = Validator().validate(recipes)
    errors = [d for d in diagnostics if d.is_error]
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from recipe_rank.core.models import Recipe
from recipe_rank.validator.diagnostics import Diagnostic, DiagnosticSeverity
from recipe_rank.validator.rules import DEFAULT_RULES, Rule

logger = logging.getLogger(__name__)


class Validator:
    """Data-integrity checker for recipe collections.

    Parameters
    ----------
    rules:
        The rules to run.  Defaults to all built-in rules
        (``DEFAULT_RULES``).
    strict:
        When ``True``, WARNING-level diagnostics are promoted to ERROR.
    """

    def __init__(
        self,
        rules: list[Rule] | None = None,
        strict: bool = False,
    ) -> None:
        self._rules: list[Rule] = rules if rules is not None else list(DEFAULT_RULES)
        self._strict: bool = strict

    def validate(self, recipes: Sequence[Recipe]) -> list[Diagnostic]:
        """Run all rules against ``recipes`` and return the collected diagnostics.

        Returns
        -------
        list[Diagnostic]
            All findings, ordered by recipe position then code.
        """
        all_diagnostics: list[Diagnostic] = []
        for rule in self._rules:
            try:
                all_diagnostics.extend(rule(recipes))
            except Exception as exc:  # noqa: BLE001
                logger.debug("Rule %s raised", rule.__name__, exc_info=True)
                all_diagnostics.append(
                    Diagnostic(
                        severity=DiagnosticSeverity.ERROR,
                        code="RCP999",
                        message=f"Internal checker error in rule {rule.__name__!r}: {exc}",
                        index=0,
                        suggestion="Please report this as a bug",
                        rule=rule.__name__,
                    )
                )

        if self._strict:
            all_diagnostics = [
                replace(d, severity=DiagnosticSeverity.ERROR)
                if d.severity == DiagnosticSeverity.WARNING
                else d
                for d in all_diagnostics
            ]

        all_diagnostics.sort(key=lambda d: (d.index, d.code))
        return all_diagnostics

    def add_rule(self, rule: Rule) -> None:
        """Add a custom rule ``(Sequence[Recipe]) -> list[Diagnostic]``."""
        self._rules.append(rule)

    @property
    def rule_count(self) -> int:
        """Return the number of rules currently registered."""
        return len(self._rules)


def check(recipes: Sequence[Recipe], strict: bool = False) -> list[Diagnostic]:
    """Convenience function: check ``recipes`` with the default rules."""
    return Validator(strict=strict).validate(recipes)
