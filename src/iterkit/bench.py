"""Benchmark: max() over a mapped range, Iter versus plain Python.

Run with the `iterkit-bench` script. Size and repetitions come from
ITERKIT_BENCH_COUNT / ITERKIT_BENCH_RUNS / ITERKIT_BENCH_SEED.
"""

from __future__ import annotations

import random
import time
from functools import reduce
from typing import Callable

from .config import get_settings
from .observability import configure_from_settings, get_logger, timed
from .util import int_range

Case = Callable[[int, Callable[[int], int]], int]


def _seeded_rand(seed: int | None) -> Callable[[int], int]:
    """Pseudo-random projection of v into [0, 100)."""
    rng = random.Random(seed)
    return lambda v: int(rng.random() * v) % 100


def _max_with_iter(count: int, rand: Callable[[int], int]) -> int:
    return int_range(count).map(rand).max().unwrap_or(0)


def _max_with_reduce(count: int, rand: Callable[[int], int]) -> int:
    return reduce(lambda best, v: v if v > best else best, [rand(v) for v in range(count)], 0)


def _max_with_loop(count: int, rand: Callable[[int], int]) -> int:
    best = 0
    for elem in range(count):
        if (value := rand(elem)) > best:
            best = value
    return best


CASES: dict[str, Case] = {
    "max with Iter": _max_with_iter,
    "max with list and reduce": _max_with_reduce,
    "max with for loop": _max_with_loop,
}


def run_benchmarks(count: int | None = None, runs: int | None = None, seed: int | None = None) -> dict[str, float]:
    """Run every case and return its best duration in milliseconds.

    Unset arguments fall back to the bench settings.
    """
    settings = get_settings().bench
    count = settings.count if count is None else count
    runs = settings.runs if runs is None else runs
    seed = settings.seed if seed is None else seed

    log = get_logger("iterkit.bench", count=count, runs=runs)
    measured = {name: timed(log, level="debug", event="bench run")(case) for name, case in CASES.items()}
    best: dict[str, float] = {}
    for name, case in measured.items():
        rand = _seeded_rand(seed)
        durations: list[float] = []
        with log.scope(case=name):
            for _ in range(runs):
                start = time.perf_counter()
                case(count, rand)
                durations.append((time.perf_counter() - start) * 1000)
            best[name] = round(min(durations, default=0.0), 2)
            log.info("bench case finished", best_ms=best[name])
    return best


def main() -> None:
    configure_from_settings()
    for name, ms in run_benchmarks().items():
        print(f"{name:<28} {ms:>10.2f} ms")


if __name__ == "__main__":
    main()
