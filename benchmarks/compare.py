"""Summarise saved recipe-rank benchmark results in one table.

Each benchmark script writes a JSON result under ``benchmarks/results/``.
Sort and select throughput report ops/sec, the latency run adds its
p50/p95, and the memory run reports the selection table it built next to
the traced peak.

Usage::

    python benchmarks/bench_throughput.py
    python benchmarks/bench_latency.py
    python benchmarks/bench_memory.py
    python benchmarks/compare.py
"""
from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

RESULTS_DIR = Path(__file__).parent / "results"

# Result file -> the script that produces it.
RESULT_SOURCES: dict[str, str] = {
    "sort_throughput_baseline.json": "bench_throughput.py",
    "select_throughput_baseline.json": "bench_throughput.py",
    "latency_baseline.json": "bench_latency.py",
    "memory_baseline.json": "bench_memory.py",
}


def _ms(value: object) -> str:
    return f"{float(value):.3f} ms" if value else "-"  # type: ignore[arg-type]


def describe(result: dict[str, object]) -> tuple[str, str, str]:
    """Return ``(operation, speed, detail)`` cells for one result dict."""
    operation = str(result.get("operation", "?"))
    ops = float(result.get("ops_per_second") or 0)  # type: ignore[arg-type]
    speed = f"{ops:,.0f} ops/s" if ops > 0 else "-"

    if "peak_memory_kb" in result:
        cells = int(result.get("table_cells", 0))  # type: ignore[call-overload]
        peak_kb = float(result["peak_memory_kb"])  # type: ignore[arg-type]
        per_cell = peak_kb * 1024 / cells if cells else 0.0
        detail = f"peak {peak_kb:,.1f} KB for {cells:,} cells ({per_cell:.1f} B/cell)"
    elif "p50_ms" in result:
        detail = f"p50 {_ms(result['p50_ms'])}, p95 {_ms(result.get('p95_ms'))}"
    else:
        detail = f"avg {_ms(result.get('avg_latency_ms'))} over {result.get('iterations', '?')} runs"
    return operation, speed, detail


def collect_rows(results_dir: Path = RESULTS_DIR) -> list[tuple[str, str, str]]:
    """Read every known result file; missing ones become a hint row."""
    rows: list[tuple[str, str, str]] = []
    for name, script in RESULT_SOURCES.items():
        path = results_dir / name
        if not path.exists():
            rows.append((name, "-", f"not run yet: python benchmarks/{script}"))
            continue
        rows.append(describe(json.loads(path.read_text(encoding="utf-8"))))
    return rows


def main() -> None:
    table = Table(title="recipe-rank benchmarks")
    table.add_column("Operation")
    table.add_column("Speed", justify="right")
    table.add_column("Detail")
    for row in collect_rows():
        table.add_row(*row)
    Console().print(table)


if __name__ == "__main__":
    main()
