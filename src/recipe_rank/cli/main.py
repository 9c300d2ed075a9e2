"""CLI entry point for recipe-rank.

Invoked as::

    recipe-rank [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m recipe_rank.cli.main

Commands
--------
sort        Order the recipes of a file by a key
select      Pick the most protein within calorie and time budgets
check       Run data-integrity checks over a recipe file
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from collections import Counter
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from recipe_rank.config import RankConfig, load_config
from recipe_rank.core.errors import RecipeRankError
from recipe_rank.core.models import SortDirection, SortKey

if TYPE_CHECKING:
    from recipe_rank.core.models import Recipe

console = Console()
err_console = Console(stderr=True)

_FORMATS = click.Choice(["table", "json", "yaml"], case_sensitive=False)


def _fail(exc: RecipeRankError) -> NoReturn:
    """Print a recipe-rank error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    sys.exit(1)


def _load_or_exit(path: str) -> list["Recipe"]:
    """Load a recipe file, printing errors and exiting on failure."""
    from recipe_rank.loader import load_recipes

    try:
        return load_recipes(path)
    except RecipeRankError as exc:
        _fail(exc)


def _severity_color(severity_name: str) -> str:
    """Map a DiagnosticSeverity name to a Rich color string."""
    colors = {
        "ERROR": "red",
        "WARNING": "yellow",
        "INFORMATION": "blue",
        "HINT": "dim",
    }
    return colors.get(severity_name, "white")


def _fmt_number(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _recipe_table(title: str, recipes: list["Recipe"]) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Time (min)", justify="right")
    table.add_column("Calories (kcal)", justify="right")
    table.add_column("Protein (g)", justify="right")
    for recipe in recipes:
        table.add_row(
            str(recipe.id),
            escape(recipe.name),
            escape(recipe.category or "-"),
            _fmt_number(recipe.cooking_time),
            _fmt_number(recipe.nutrient("calories")),
            _fmt_number(recipe.nutrient("protein")),
        )
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="recipe-rank")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML settings file (defaults to $RECIPE_RANK_CONFIG)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """Rank recipes and pick the most protein within calorie and time budgets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
    try:
        ctx.obj = load_config(config_path)
    except RecipeRankError as exc:
        _fail(exc)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from recipe_rank import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]recipe-rank[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# sort command
# ---------------------------------------------------------------------------


@cli.command(name="sort")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--key",
    type=click.Choice([k.value for k in SortKey]),
    default=None,
    help="Field to order by (default from settings: id)",
)
@click.option(
    "--order",
    type=click.Choice([d.value for d in SortDirection], case_sensitive=False),
    default=None,
    help="Sort direction (default from settings: asc)",
)
@click.option("--format", "output_format", type=_FORMATS, default="table", help="Output format")
@click.pass_obj
def sort_command(
    config: RankConfig, file: str, key: str | None, order: str | None, output_format: str
) -> None:
    """Order the recipes in FILE by a key.

    FILE is a JSON or YAML recipe collection.
    """
    from recipe_rank.loader import RecipeSerializer
    from recipe_rank.sorting import sort_recipes

    recipes = _load_or_exit(file)
    sort_key = SortKey(key) if key else config.default_key
    direction = SortDirection(order.lower()) if order else config.default_direction
    try:
        ordered = sort_recipes(recipes, sort_key, direction)
    except RecipeRankError as exc:
        _fail(exc)

    serializer = RecipeSerializer()
    if output_format == "json":
        click.echo(serializer.to_json(ordered))
    elif output_format == "yaml":
        click.echo(serializer.to_yaml(ordered), nl=False)
    else:
        console.print(_recipe_table(f"Recipes by {sort_key.value} ({direction.value})", ordered))


# ---------------------------------------------------------------------------
# select command
# ---------------------------------------------------------------------------


@cli.command(name="select")
@click.argument("file", type=click.Path(exists=False))
@click.option("--max-calories", type=int, required=True, help="Calorie budget (kcal)")
@click.option("--max-cooking-time", type=int, required=True, help="Cooking time budget (minutes)")
@click.option("--format", "output_format", type=_FORMATS, default="table", help="Output format")
@click.pass_obj
def select_command(
    config: RankConfig, file: str, max_calories: int, max_cooking_time: int, output_format: str
) -> None:
    """Pick the recipes in FILE with the most protein within both budgets.

    FILE is a JSON or YAML recipe collection.
    """
    from recipe_rank.loader import RecipeSerializer
    from recipe_rank.selection import select_recipes, summarize

    recipes = _load_or_exit(file)
    try:
        result = select_recipes(
            recipes,
            max_calories,
            max_cooking_time,
            max_table_cells=config.max_table_cells,
        )
        summary = summarize(recipes, result)
    except RecipeRankError as exc:
        _fail(exc)

    serializer = RecipeSerializer()
    if output_format == "json":
        click.echo(serializer.result_to_json(result))
        return
    if output_format == "yaml":
        click.echo(serializer.result_to_yaml(result), nl=False)
        return

    console.print(f"[bold]Budget:[/bold] {max_calories} kcal, {max_cooking_time} min")
    if summary.is_empty:
        console.print("[yellow]No combination of recipes fits these budgets.[/yellow]")
        return

    console.print(_recipe_table("Selected recipes", list(summary.recipes)))
    console.print(f"[bold]Total protein:[/bold] {summary.total_protein:.2f} g")
    console.print(f"[bold]Total calories:[/bold] {summary.total_calories} kcal")
    console.print(f"[bold]Total cooking time:[/bold] {summary.total_cooking_time} min")

    counts = Counter(r.id for r in recipes)
    shared = sorted({i for i in result.selected_recipe_ids if counts[i] > 1})
    if shared:
        console.print(
            f"[yellow]Note:[/yellow] recipe id(s) {', '.join(map(str, shared))} occur more than once "
            "in this file; the rows above show the first record with each id. "
            "Run `recipe-rank check` for details."
        )


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False))
@click.option("--strict", is_flag=True, default=False, help="Treat warnings as errors")
def check_command(file: str, strict: bool) -> None:
    """Run data-integrity checks over the recipes in FILE."""
    from recipe_rank.validator import Validator

    recipes = _load_or_exit(file)
    diagnostics = Validator(strict=strict).validate(recipes)

    if not diagnostics:
        console.print(f"[green]OK[/green] {file}: {len(recipes)} recipe(s), no issues found")
        sys.exit(0)

    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if not d.is_error]

    table = Table(title=f"Check: {file}", show_lines=True)
    table.add_column("Severity", style="bold", min_width=10)
    table.add_column("Code", min_width=8)
    table.add_column("Recipe", min_width=10)
    table.add_column("Message")

    for d in diagnostics:
        color = _severity_color(d.severity.name)
        table.add_row(
            f"[{color}]{d.severity.name}[/{color}]",
            d.code,
            f"#{d.index} (id {d.recipe_id})",
            escape(d.message) + (f"\n[dim]hint: {escape(d.suggestion)}[/dim]" if d.suggestion else ""),
        )

    console.print(table)
    console.print(
        f"\n[bold]Summary:[/bold] {len(errors)} error(s), {len(warnings)} other finding(s)"
    )

    if errors:
        sys.exit(1)


if __name__ == "__main__":
    cli()
