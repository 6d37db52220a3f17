"""CLI command for benchmarking shuffle algorithms."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

import click

from deckshuffle.algorithms.registry import ALGORITHMS, list_algorithms
from deckshuffle.analysis.statistics import StatisticsStore, average_execution_time
from deckshuffle.benchmark import BenchmarkConfig, run_benchmark
from deckshuffle.errors import InvalidInputError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def print_summary(store: StatisticsStore) -> None:
    """Print a per-algorithm results table."""
    click.echo("\n" + "=" * 72)
    click.echo("Shuffle Benchmark")
    click.echo("=" * 72)
    click.echo(f"{'Algorithm':<20}{'Shuffles':>10}{'Randomness':>12}{'Avg steps':>12}{'Avg ms':>12}")
    for name, stats in store.items():
        click.echo(
            f"{name:<20}{stats.shuffle_count:>10}{stats.randomness_score:>12.1f}"
            f"{stats.average_step_count:>12.1f}{average_execution_time(stats):>12.3f}"
        )


def print_comparison(store: StatisticsStore, first: str, second: str) -> None:
    comparison = store.compare(first, second)
    click.echo(f"\n--- {first} vs {second} ---")
    for result in (comparison.randomness, comparison.speed, comparison.steps):
        (name_a, value_a), (name_b, value_b) = result.first, result.second
        click.echo(
            f"  {result.metric:<11} {name_a}: {value_a:.3f}  {name_b}: {value_b:.3f}  "
            f"Winner: {result.winner}"
        )


@click.command()
@click.option("-n", "--trials", type=int, default=None, help="Shuffles per algorithm (default: $DECKSHUFFLE_TRIALS or 100)")
@click.option("--size", type=click.IntRange(1, 52), default=52, help="Deck size")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option(
    "-a", "--algorithm", "algorithms",
    multiple=True,
    help="Algorithm to run (repeatable, default: all)",
)
@click.option(
    "--compare",
    nargs=2,
    type=str,
    default=None,
    help="Compare two algorithms after the run",
)
@click.option("--list", "list_only", is_flag=True, help="List algorithms and exit")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    trials: Optional[int],
    size: int,
    seed: Optional[int],
    algorithms: Tuple[str, ...],
    compare: Optional[Tuple[str, str]],
    list_only: bool,
    verbose: bool,
) -> None:
    """Shuffle an ordered deck repeatedly and report per-algorithm statistics."""
    setup_logging(verbose)

    if list_only:
        for descriptor in list_algorithms():
            click.echo(f"{descriptor.name} [{descriptor.complexity}]")
            click.echo(f"  {descriptor.description}")
        return

    config = BenchmarkConfig(deck_size=size, seed=seed)
    if trials is not None:
        config.trials = trials
    if algorithms:
        config.algorithms = list(algorithms)
    if compare:
        # Compared algorithms must be part of the run
        config.algorithms += [name for name in compare if name not in config.algorithms]

    try:
        store = run_benchmark(config)
    except InvalidInputError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(f"Available algorithms: {', '.join(ALGORITHMS)}", err=True)
        sys.exit(2)

    print_summary(store)
    if compare:
        print_comparison(store, *compare)


if __name__ == "__main__":
    main()
