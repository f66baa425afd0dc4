"""Benchmark: value construction and cache throughput.

Measures how many values the factory can build per second from raw
input, and how many get/set round trips a hash-backed cache handler
completes per second, using the public semval API.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import semval
from semval.context import SemvalContext

_ITERATIONS: int = 5_000
_CACHE_ITERATIONS: int = 20_000

_SAMPLE_INPUT: tuple[tuple[str, str], ...] = (
    ("_txt", "Some free text"),
    ("_num", "1,234,567.5"),
    ("_qty", "12.5 km"),
    ("_dat", "1 Jan 1970"),
    ("_wpg", "category:Cities"),
    ("_uri", "https://example.org/path?q=1"),
    ("_ema", "someone@example.org"),
    ("_boo", "yes"),
)


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


def bench_value_throughput() -> dict[str, object]:
    """Benchmark building values of every built-in kind from raw input.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    factory = SemvalContext.from_settings().factory

    start = time.perf_counter()
    for i in range(_ITERATIONS):
        type_id, raw = _SAMPLE_INPUT[i % len(_SAMPLE_INPUT)]
        factory.new_type_id_value(type_id, raw).get_wiki_value()
    total = time.perf_counter() - start
    return _report("semval_value_throughput", _ITERATIONS, total)


def bench_cache_throughput() -> dict[str, object]:
    """Benchmark set/get round trips through a hash-backed handler.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    cache = semval.new_cache_handler("hash")
    cache.set_cache_enabled(True)

    start = time.perf_counter()
    for i in range(_CACHE_ITERATIONS):
        cache.key("bench", str(i % 64))
        cache.set(i)
        cache.get()
    total = time.perf_counter() - start
    cache.reset()
    return _report("semval_cache_throughput", _CACHE_ITERATIONS, total)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_value_throughput, "value_throughput_baseline.json"),
        (bench_cache_throughput, "cache_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
