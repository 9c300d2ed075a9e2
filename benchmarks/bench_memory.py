"""Benchmark: peak memory of the selection table."""
from __future__ import annotations

import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import recipe_rank
from bench_throughput import make_recipes

_RECIPES = make_recipes(10, seed=3)
_MAX_CALORIES: int = 500
_MAX_COOKING_TIME: int = 60


def bench_select_memory() -> dict[str, object]:
    """Measure the peak traced allocation of a single select call.

    Returns
    -------
    dict with keys: operation, iterations, table_cells, peak_memory_kb,
    current_memory_kb.
    """
    tracemalloc.start()
    recipe_rank.select(_RECIPES, _MAX_CALORIES, _MAX_COOKING_TIME)
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    cells = (len(_RECIPES) + 1) * (_MAX_CALORIES + 1) * (_MAX_COOKING_TIME + 1)
    result: dict[str, object] = {
        "operation": "recipe_select_memory",
        "iterations": 1,
        "table_cells": cells,
        "peak_memory_kb": round(peak / 1024, 2),
        "current_memory_kb": round(current / 1024, 2),
        "ops_per_second": 0.0,
        "avg_latency_ms": 0.0,
    }
    print(
        f"[bench_memory] {result['operation']}: peak {result['peak_memory_kb']:.2f} KB "
        f"for {cells:,} table cells"
    )
    return result


if __name__ == "__main__":
    result = bench_select_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
