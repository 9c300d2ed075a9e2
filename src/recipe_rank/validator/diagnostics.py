"""Diagnostic types for the recipe collection checker.

A ``Diagnostic`` is a finding attached to one recipe of a collection,
identified both by its position and by its id (ids may be duplicated,
positions never are).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostics, aligned with LSP conventions."""

    ERROR = auto()
    WARNING = auto()
    INFORMATION = auto()
    HINT = auto()


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a recipe collection.

    Parameters
    ----------
    severity:
        How serious this finding is.
    code:
        A short machine-readable identifier, e.g. ``"RCP001"``.
    message:
        Human-readable description of the problem.
    index:
        0-based position of the offending recipe in the collection.
    recipe_id:
        Id of the offending recipe.
    suggestion:
        Optional human-readable fix suggestion.
    rule:
        The rule name that produced this diagnostic.
    """

    severity: DiagnosticSeverity
    code: str
    message: str
    index: int
    recipe_id: object = None
    suggestion: str | None = field(default=None)
    rule: str = field(default="")

    def __str__(self) -> str:
        prefix = f"[{self.code}] {self.severity.name}"
        suggestion_part = f" (hint: {self.suggestion})" if self.suggestion else ""
        return f"{prefix} at #{self.index} (id {self.recipe_id!r}): {self.message}{suggestion_part}"

    @property
    def is_error(self) -> bool:
        """Return True if this diagnostic should fail the check."""
        return self.severity == DiagnosticSeverity.ERROR
