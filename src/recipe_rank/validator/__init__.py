"""Recipe collection checker.

Exports the ``Validator`` class, the ``check`` convenience function,
``Diagnostic`` types, and all built-in rules.
"""
from __future__ import annotations

from recipe_rank.validator.diagnostics import Diagnostic, DiagnosticSeverity
from recipe_rank.validator.rules import DEFAULT_RULES, Rule
from recipe_rank.validator.validator import Validator, check

__all__ = [
    "Validator",
    "check",
    "Diagnostic",
    "DiagnosticSeverity",
    "Rule",
    "DEFAULT_RULES",
]
