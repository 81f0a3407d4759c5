"""
Performance Benchmark
=====================

Measures throughput of the picking pipeline and of ranking merges.

Usage:
    python -m tools.benchmark_speed [--fruits N] [--sizes S ...]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

import numpy as np

from fruit_picking.picking_core.picker import Picker
from fruit_picking.picking_core.ranking import Ranking
from fruit_picking.picking_core.rng import FruitBag


def benchmark_append(
    num_fruits: int = 10000,
    seed: int = 42
) -> dict:
    """
    Benchmark the append pipeline of a single picker.

    Args:
        num_fruits: Number of fruits to append.
        seed: Random seed for the fruit bag.

    Returns:
        Dict with timing results.
    """
    bag = FruitBag(seed=seed)
    fruits = [bag.draw() for _ in range(num_fruits)]

    picker = Picker("Benchmark")
    start = time.perf_counter()
    for fruit in fruits:
        picker.append(fruit)
    elapsed = time.perf_counter() - start

    return {
        "mode": "append",
        "size": num_fruits,
        "elapsed_seconds": elapsed,
        "ops_per_second": num_fruits / elapsed,
        "ms_per_op": (elapsed * 1000) / num_fruits
    }


def benchmark_merge(
    num_pickers: int = 100,
    fruits_per_picker: int = 20,
    seed: int = 42
) -> dict:
    """
    Benchmark merging two rankings of `num_pickers` pickers each.

    Args:
        num_pickers: Pickers per ranking.
        fruits_per_picker: Upper bound of fruits picked by each picker.
        seed: Random seed.

    Returns:
        Dict with timing results.
    """
    bag = FruitBag(seed=seed)
    rng = np.random.default_rng(seed)

    def build_ranking(prefix: str) -> Ranking:
        pickers = []
        for i in range(num_pickers):
            picker = Picker(f"{prefix}-{i}")
            for _ in range(int(rng.integers(1, fruits_per_picker + 1))):
                picker.append(bag.draw())
            pickers.append(picker)
        return Ranking(pickers)

    left = build_ranking("L")
    right = build_ranking("R")

    start = time.perf_counter()
    merged = left + right
    elapsed = time.perf_counter() - start

    return {
        "mode": "merge",
        "size": merged.count_pickers(),
        "elapsed_seconds": elapsed,
        "ops_per_second": merged.count_pickers() / elapsed,
        "ms_per_op": (elapsed * 1000) / merged.count_pickers()
    }


def run_all_benchmarks(
    num_fruits: int = 10000,
    ranking_sizes: Sequence[int] = (10, 100, 1000)
) -> list:
    """Run comprehensive benchmarks."""
    results = []

    print("=" * 60)
    print("FRUIT PICKING PERFORMANCE BENCHMARK")
    print("=" * 60)
    print()

    print(f"Benchmarking Picker.append (n={num_fruits})...")
    result = benchmark_append(num_fruits=num_fruits)
    results.append(result)
    print(f"  Appends/sec: {result['ops_per_second']:.1f}")
    print(f"  ms/append:   {result['ms_per_op']:.4f}")
    print()

    for size in ranking_sizes:
        print(f"Benchmarking Ranking merge (n={size} + {size})...")
        result = benchmark_merge(num_pickers=size)
        results.append(result)
        print(f"  Pickers/sec: {result['ops_per_second']:.1f}")
        print(f"  ms/picker:   {result['ms_per_op']:.4f}")
        print()

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print()
    print(f"{'Mode':<20} {'Size':>8} {'Ops/s':>12} {'ms/op':>10}")
    print("-" * 52)

    for r in results:
        print(f"{r['mode']:<20} {r['size']:>8} {r['ops_per_second']:>12.1f} {r['ms_per_op']:>10.4f}")

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark fruit picking performance")
    parser.add_argument("--fruits", type=int, default=10000, help="Fruits for the append benchmark")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 100, 1000],
                        help="Ranking sizes to merge")
    parser.add_argument("--quick", action="store_true", help="Quick benchmark (fewer fruits)")

    args = parser.parse_args()

    num_fruits = 1000 if args.quick else args.fruits

    run_all_benchmarks(
        num_fruits=num_fruits,
        ranking_sizes=args.sizes
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
