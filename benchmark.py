#!/usr/bin/env python3
"""Benchmark: piece enumeration and symmetry reduction.

Run from the repository root:
    python benchmark.py --repeat 5

Measures:
  1. Raw enumeration: walking all 65536 pieces
  2. Symmetry operations: rotate/flip over the raw space
  3. Orbit reduction: grouping raw pieces into symmetry classes (uncached)
  4. Burnside count: orbit count from fixed points only
"""

from __future__ import annotations

import argparse
import json
import logging
import time

from hcube.config import settings
from hcube.enumeration import (
    all_pieces,
    count_orbits_burnside,
    orbit_size_distribution,
    orbits,
)

logger = logging.getLogger("benchmark")


def _timed(fn, repeat: int) -> dict:
    durations = []
    result = None
    for _ in range(repeat):
        t0 = time.monotonic()
        result = fn()
        durations.append(time.monotonic() - t0)
    return {"result": result, "best_ms": min(durations) * 1000, "avg_ms": sum(durations) / len(durations) * 1000}


def bench_raw_enumeration(repeat: int) -> dict:
    return _timed(lambda: sum(1 for _ in all_pieces()), repeat)


def bench_symmetry_ops(repeat: int) -> dict:
    def run() -> int:
        changed = 0
        for piece in all_pieces():
            if piece.rotate_clockwise() != piece or piece.flip() != piece:
                changed += 1
        return changed

    return _timed(run, repeat)


def bench_orbit_reduction(repeat: int) -> dict:
    return _timed(lambda: len(orbits()), repeat)


def bench_burnside(repeat: int) -> dict:
    return _timed(count_orbits_burnside, repeat)


def main() -> None:
    parser = argparse.ArgumentParser(description="hcube enumeration benchmark")
    parser.add_argument("--repeat", type=int, default=3, help="Runs per measurement")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    settings.cache_orbits = False

    results = {
        "raw_enumeration": bench_raw_enumeration(args.repeat),
        "symmetry_ops": bench_symmetry_ops(args.repeat),
        "orbit_reduction": bench_orbit_reduction(args.repeat),
        "burnside": bench_burnside(args.repeat),
    }
    if results["orbit_reduction"]["result"] != results["burnside"]["result"]:
        logger.error(
            "Orbit reduction (%d) disagrees with Burnside count (%d)",
            results["orbit_reduction"]["result"], results["burnside"]["result"],
        )
    results["orbit_sizes"] = orbit_size_distribution()
    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
