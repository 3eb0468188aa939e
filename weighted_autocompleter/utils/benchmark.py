# benchmark.py
"""
Small profiling harness for the autocomplete engines.

profile() times top_k_matches calls after a warmup, summarize() turns the
latencies into a report and compare_engines() runs both for every registered
engine on the same vocabulary and prefixes.

Usage (through the CLI):
    weighted-autocomplete data/words.txt --bench
"""

from __future__ import annotations

import random
import statistics
import time
from typing import Dict, Iterable, List, Optional, Sequence

from weighted_autocompleter.core.protocols import Autocompletor
from weighted_autocompleter.core.registry import ENGINES, create_engine
from weighted_autocompleter.utils.logger_utils import Log


def profile(engine: Autocompletor, prefixes: Sequence[str], k: int = 5,
            runs: int = 200, warmup: int = 20, seed: Optional[int] = 0) -> List[float]:
    """Return per-call latencies (ms) of engine.top_k_matches over random prefixes."""
    if not prefixes:
        raise ValueError("need at least one prefix to profile")
    rng = random.Random(seed)

    for i in range(warmup):
        engine.top_k_matches(prefixes[i % len(prefixes)], k)

    times = []
    for _ in range(runs):
        p = rng.choice(prefixes)
        t0 = time.perf_counter()
        engine.top_k_matches(p, k)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000.0)  # ms
    return times


def summarize(times: Sequence[float]) -> Dict[str, float]:
    if not times:
        return {"count": 0}
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": times_sorted[-1],
    }


def sample_prefixes(words: Iterable[str], n: int = 50, seed: Optional[int] = 0) -> List[str]:
    """Pick `n` prefixes (1-3 chars) of random vocabulary words."""
    pool = [w for w in words if w]
    if not pool:
        return [""]
    rng = random.Random(seed)
    out = []
    for _ in range(n):
        w = rng.choice(pool)
        out.append(w[: rng.randint(1, min(3, len(w)))])
    return out


def compare_engines(words: Sequence[str], weights: Sequence[float], prefixes: Sequence[str],
                    k: int = 5, runs: int = 200, warmup: int = 20,
                    names: Optional[Iterable[str]] = None) -> Dict[str, Dict[str, float]]:
    """Build each engine, time its queries and return {name: summary}."""
    report: Dict[str, Dict[str, float]] = {}
    for name in names or ENGINES:
        with Log.time_block(f"{name} build") as timer:
            engine = create_engine(name, words, weights)
        summary = summarize(profile(engine, prefixes, k=k, runs=runs, warmup=warmup))
        summary["build_s"] = timer.elapsed
        report[name] = summary
    return report
