"""Benchmark: command dispatch latency (p50/p95/mean).

Measures per-call latency of ``parse_command`` over a mix of constant,
argument-taking and failing command lines.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from loanbook.parser import CommandDispatcher, NullObserver, ParseError

_WARMUP: int = 100
_ITERATIONS: int = 3_000

_LINES: tuple[str, ...] = (
    "exit",
    "find alice bob",
    "add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2, #02-25 t/friends",
    "edit 2 p/91234567 t/",
    "issue 1 b/3 d/2026-12-01",
    "extend 1 b/3 days/7",
    "frobnicate 123",
    "delete",
)


def _dispatch_all(dispatcher: CommandDispatcher) -> None:
    for line in _LINES:
        try:
            dispatcher.parse_command(line)
        except ParseError:
            pass


def bench_dispatch_latency() -> dict[str, object]:
    """Benchmark dispatch latency over the mixed line set.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    dispatcher = CommandDispatcher(observer=NullObserver())

    # Warmup
    for _ in range(_WARMUP):
        _dispatch_all(dispatcher)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        _dispatch_all(dispatcher)
        latencies_ms.append((time.perf_counter() - t0) * 1000 / len(_LINES))

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) * len(_LINES) / 1000
    calls = _ITERATIONS * len(_LINES)

    result: dict[str, object] = {
        "operation": "loanbook_dispatch_latency_mixed",
        "iterations": calls,
        "total_seconds": round(total, 4),
        "ops_per_second": round(calls / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    result = bench_dispatch_latency()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
