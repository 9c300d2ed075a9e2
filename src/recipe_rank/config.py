"""Settings for the recipe-rank command line and convenience API.

Settings come from a YAML mapping such as::

    default_key: calories
    default_direction: desc
    max_table_cells: 2000000

The file is named explicitly, or through the ``RECIPE_RANK_CONFIG``
environment variable.  Without either, the defaults below apply.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from recipe_rank.core.errors import (
    ConfigError,
    InvalidSortDirectionError,
    InvalidSortKeyError,
)
from recipe_rank.core.models import SortDirection, SortKey
from recipe_rank.sorting import coerce_direction, coerce_key

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RECIPE_RANK_CONFIG"


@dataclass(frozen=True)
class RankConfig:
    """Configuration for sorting and selection front ends.

    Parameters
    ----------
    default_key:
        Sort key used when none is given.
    default_direction:
        Sort direction used when none is given.
    max_table_cells:
        Largest selection table (recipes+1 × calories+1 × minutes+1)
        a front end will build before refusing the budgets.
    """

    default_key: SortKey = SortKey.ID
    default_direction: SortDirection = SortDirection.ASC
    max_table_cells: int = 5_000_000


def _from_mapping(data: dict[str, Any], source: str) -> RankConfig:
    known = {f.name for f in fields(RankConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{source}: unknown setting(s): {', '.join(unknown)}")

    config = RankConfig()
    try:
        if "default_key" in data:
            config = replace(config, default_key=coerce_key(data["default_key"]))
        if "default_direction" in data:
            config = replace(config, default_direction=coerce_direction(data["default_direction"]))
    except (InvalidSortKeyError, InvalidSortDirectionError) as exc:
        raise ConfigError(f"{source}: {exc}") from exc

    if "max_table_cells" in data:
        cells = data["max_table_cells"]
        if isinstance(cells, bool) or not isinstance(cells, int) or cells <= 0:
            raise ConfigError(f"{source}: max_table_cells must be a positive integer, got {cells!r}")
        config = replace(config, max_table_cells=cells)
    return config


def load_config(path: str | Path | None = None) -> RankConfig:
    """Load settings from ``path``, from ``$RECIPE_RANK_CONFIG``, or use defaults.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not a YAML mapping, or holds an
        unknown setting or invalid value.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return RankConfig()

    source = Path(path)
    try:
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file {source}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in settings file {source}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping of settings")
    config = _from_mapping(data, str(source))
    logger.debug("Loaded settings from %s: %s", source, config)
    return config
