"""
Harvest Harness
===============

Runs random harvests: a few pickers pick fruit dealt from a seeded fruit bag,
trade fruit with each other, and end up ranked. Results of several seeds are
summarized and their rankings merged.

Usage:
    python -m fruit_picking.simulation.run_sim --seeds 1 2 3 [--show]
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from fruit_picking.picking_core.config_loader import PickingConfig, get_config, load_config
from fruit_picking.picking_core.display import format_ranking
from fruit_picking.picking_core.fruit import Quality, Size, Taste
from fruit_picking.picking_core.picker import Picker
from fruit_picking.picking_core.ranking import Ranking
from fruit_picking.picking_core.rng import FruitBag

logger = logging.getLogger(__name__)


class HarvestInvariantError(RuntimeError):
    """A picker's attribute counts do not add up to its fruit count."""


@dataclass
class HarvestResult:
    """Result for a single seed."""
    seed: int
    ranking: Ranking
    fruits_picked: int
    trades_made: int
    elapsed_time: float

    @property
    def winner(self) -> Picker:
        return self.ranking[0]


@dataclass
class HarvestSummary:
    """Summary of harvests across all seeds."""
    mean_winner_healthy: float
    std_winner_healthy: float
    min_winner_healthy: int
    max_winner_healthy: int
    mean_fruits_per_picker: float
    total_time: float
    overall: Ranking
    results: List[HarvestResult]


def check_partition(picker: Picker) -> None:
    """
    Check that taste, size and quality counts each add up to the fruit count.

    Raises:
        HarvestInvariantError: If any of the three partitions is off.
    """
    total = picker.count_fruits()
    partitions = {
        "taste": sum(picker.count_taste(t) for t in Taste),
        "size": sum(picker.count_size(s) for s in Size),
        "quality": sum(picker.count_quality(q) for q in Quality),
    }
    for attribute, count in partitions.items():
        if count != total:
            raise HarvestInvariantError(
                f"{picker.name}: {attribute} counts sum to {count}, expected {total}"
            )


def run_harvest(
    seed: int,
    config: Optional[PickingConfig] = None,
    num_pickers: Optional[int] = None,
    num_fruits: Optional[int] = None,
    num_trades: Optional[int] = None
) -> HarvestResult:
    """
    Run one random harvest.

    Fruits from a seeded FruitBag go to randomly chosen pickers. Afterwards
    random pairs of pickers trade: each trade is a give or a take of one
    fruit, chosen at random. Every picker is checked and ranked.

    Args:
        seed: Random seed for the bag and for picker/trade choices.
        config: Picking configuration. Uses default if None.
        num_pickers: Pickers taking part. Uses config if None.
        num_fruits: Fruits dealt. Uses config if None.
        num_trades: Trades after dealing. Uses config if None.

    Returns:
        HarvestResult for this seed.
    """
    if config is None:
        config = get_config()

    harvest = config.harvest
    num_pickers = harvest.pickers if num_pickers is None else num_pickers
    num_fruits = harvest.fruits if num_fruits is None else num_fruits
    num_trades = harvest.trades if num_trades is None else num_trades

    if num_pickers <= 0:
        raise ValueError(f"num_pickers must be positive, got {num_pickers}")

    bag = FruitBag(config, seed=seed)
    rng = random.Random(seed)
    pickers = [Picker(f"Picker-{i}") for i in range(num_pickers)]

    start_time = time.time()

    for _ in range(num_fruits):
        rng.choice(pickers).append(bag.draw())

    for _ in range(num_trades):
        a = rng.choice(pickers)
        b = rng.choice(pickers)
        if rng.random() < 0.5:
            a.give(b)
        else:
            a.take(b)

    for picker in pickers:
        check_partition(picker)

    elapsed = time.time() - start_time
    ranking = Ranking(pickers)

    logger.info(
        "Harvest seed=%d: %d fruits, %d trades, winner %s",
        seed, num_fruits, num_trades, ranking[0].name
    )

    return HarvestResult(
        seed=seed,
        ranking=ranking,
        fruits_picked=num_fruits,
        trades_made=num_trades,
        elapsed_time=elapsed
    )


def run_harvests(
    seeds: Sequence[int],
    config: Optional[PickingConfig] = None,
    num_pickers: Optional[int] = None,
    num_fruits: Optional[int] = None,
    num_trades: Optional[int] = None,
    verbose: bool = False
) -> HarvestSummary:
    """
    Run one harvest per seed and summarize.

    Args:
        seeds: Seeds to run. Must not be empty.
        config: Picking configuration. Uses default if None.
        num_pickers: Pickers per harvest. Uses config if None.
        num_fruits: Fruits per harvest. Uses config if None.
        num_trades: Trades per harvest. Uses config if None.
        verbose: If True, print progress.

    Returns:
        HarvestSummary with aggregate statistics and the merged ranking.
    """
    if not seeds:
        raise ValueError("At least one seed is required")

    results: List[HarvestResult] = []
    overall = Ranking()
    total_start = time.time()

    for i, seed in enumerate(seeds):
        result = run_harvest(
            seed,
            config=config,
            num_pickers=num_pickers,
            num_fruits=num_fruits,
            num_trades=num_trades
        )
        results.append(result)
        overall += result.ranking

        if verbose:
            winner = result.winner
            print(f"[{i+1}/{len(seeds)}] Seed {seed}: winner={winner.name}, "
                  f"healthy={winner.count_quality(Quality.HEALTHY)}, "
                  f"fruits={winner.count_fruits()}")

    total_time = time.time() - total_start

    winner_healthy = [r.winner.count_quality(Quality.HEALTHY) for r in results]
    fruits_per_picker = [p.count_fruits() for r in results for p in r.ranking]

    return HarvestSummary(
        mean_winner_healthy=float(np.mean(winner_healthy)),
        std_winner_healthy=float(np.std(winner_healthy)),
        min_winner_healthy=int(min(winner_healthy)),
        max_winner_healthy=int(max(winner_healthy)),
        mean_fruits_per_picker=float(np.mean(fruits_per_picker)),
        total_time=total_time,
        overall=overall,
        results=results
    )


def print_summary(summary: HarvestSummary) -> None:
    print()
    print("=" * 50)
    print("HARVEST SUMMARY")
    print("=" * 50)
    print(f"Harvests run:          {len(summary.results)}")
    print(f"Mean winner healthy:   {summary.mean_winner_healthy:.2f}")
    print(f"Std deviation:         {summary.std_winner_healthy:.2f}")
    print(f"Min winner healthy:    {summary.min_winner_healthy}")
    print(f"Max winner healthy:    {summary.max_winner_healthy}")
    print(f"Mean fruits/picker:    {summary.mean_fruits_per_picker:.2f}")
    print(f"Pickers ranked:        {summary.overall.count_pickers()}")
    print(f"Total time:            {summary.total_time:.2f}s")
    print("=" * 50)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run random fruit harvests")
    parser.add_argument(
        "--seeds",
        type=int,
        nargs="+",
        default=[42],
        help="Seeds to run, one harvest each"
    )
    parser.add_argument(
        "--pickers",
        type=int,
        default=None,
        help="Pickers per harvest (uses config if not specified)"
    )
    parser.add_argument(
        "--fruits",
        type=int,
        default=None,
        help="Fruits dealt per harvest (uses config if not specified)"
    )
    parser.add_argument(
        "--trades",
        type=int,
        default=None,
        help="Trades per harvest (uses config if not specified)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to picking config YAML (uses default if not specified)"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the merged ranking of all harvests"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print per-seed progress and debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = load_config(args.config) if args.config else get_config()

    summary = run_harvests(
        args.seeds,
        config=config,
        num_pickers=args.pickers,
        num_fruits=args.fruits,
        num_trades=args.trades,
        verbose=args.verbose
    )

    print_summary(summary)

    if args.show:
        print()
        print(format_ranking(summary.overall, config), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
