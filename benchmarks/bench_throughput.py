"""Benchmark: recipe sorting and selection throughput.

Measures how many sort and select calls can complete per second using
the public recipe_rank.sort() and recipe_rank.select() APIs.
"""
from __future__ import annotations

import json
import random
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import recipe_rank
from recipe_rank.core.models import Nutrition, Recipe

_SORT_ITERATIONS: int = 200
_SELECT_ITERATIONS: int = 20

_SORT_SIZE: int = 200
_SELECT_SIZE: int = 10
_MAX_CALORIES: int = 300
_MAX_COOKING_TIME: int = 30


def make_recipes(count: int, seed: int = 7) -> list[Recipe]:
    """Build ``count`` recipes with random costs and protein."""
    rng = random.Random(seed)
    return [
        Recipe(
            id=i,
            name=f"Recipe {rng.randint(0, 10_000):05d}",
            cooking_time=rng.randint(5, 60),
            nutrition=Nutrition(calories=rng.randint(50, 700), protein=round(rng.uniform(0, 50), 1)),
        )
        for i in range(count)
    ]


def _report(operation: str, iterations: int, total: float) -> dict[str, object]:
    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_sort_throughput() -> dict[str, object]:
    """Benchmark sorting a shuffled collection by calories.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    recipes = make_recipes(_SORT_SIZE)
    start = time.perf_counter()
    for _ in range(_SORT_ITERATIONS):
        recipe_rank.sort(recipes, "calories", "desc")
    total = time.perf_counter() - start
    return _report("recipe_sort_throughput", _SORT_ITERATIONS, total)


def bench_select_throughput() -> dict[str, object]:
    """Benchmark protein-maximising selection on a small collection.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    recipes = make_recipes(_SELECT_SIZE)
    start = time.perf_counter()
    for _ in range(_SELECT_ITERATIONS):
        recipe_rank.select(recipes, _MAX_CALORIES, _MAX_COOKING_TIME)
    total = time.perf_counter() - start
    return _report("recipe_select_throughput", _SELECT_ITERATIONS, total)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    for name, bench in [
        ("sort_throughput_baseline.json", bench_sort_throughput),
        ("select_throughput_baseline.json", bench_select_throughput),
    ]:
        output_path = results_dir / name
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(bench(), fh, indent=2)
        print(f"Results saved to {output_path}")
