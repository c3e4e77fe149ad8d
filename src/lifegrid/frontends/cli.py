"""Command-line interface for Life-like cellular automata."""

import argparse
import sys
import time
from typing import Optional, Tuple

import numpy as np

from ..core.grid import Grid
from ..core.rules import SUPPORTED_RULES
from ..core.simulation import Simulation, SimulationConfig
from ..core.errors import SimulationSetupError


class CLIGameOfLife:
    """Command-line interface for running simulations with text output."""

    def __init__(self, show_grid: bool = False, verbose: bool = False, max_grid_size: int = 50):
        """Initialize CLI interface.

        Args:
            show_grid: Print every generation as text
            verbose: Print population alongside the iteration counter
            max_grid_size: Largest grid edge that is printed in full
        """
        self.show_grid = show_grid
        self.verbose = verbose
        self.max_grid_size = max_grid_size

    def render(self, cells: np.ndarray, iteration: int, tlength: int, rule: str) -> None:
        """Print one generation."""
        line = f"Time: {iteration} / {tlength}"
        if self.verbose:
            line += f"  (alive: {int(cells.sum())})"
        print(line)

        if self.show_grid:
            print(self._format_grid(cells))
            print()

    def run_simulation(
        self,
        size: int,
        tlength: int,
        prob: float,
        rule: str,
        seed: Optional[int] = None,
        delay: float = 0.0,
    ) -> Tuple[int, dict]:
        """Run a simulation for tlength generations.

        Args:
            size: Grid edge length
            tlength: Number of generations to run
            prob: Initial probability of a cell being alive
            rule: Birth/survival rule notation
            seed: Optional random seed
            delay: Pause between generations in seconds

        Returns:
            Tuple of (generations_run, statistics)

        Raises:
            SimulationSetupError: If any parameter is invalid
        """
        config = SimulationConfig(size=size, tlength=tlength, prob=prob, rule=rule, seed=seed, delay=delay)
        simulation = Simulation(config, renderer=self.render)

        initial_population = simulation.engine.population

        print(f"Simulation of the Game of Life: {simulation.engine.rule.notation}")
        if self.verbose:
            print(f"Rule: {simulation.engine.rule.description}")
            print(f"Grid: {size}x{size}, initial population: {initial_population} ({prob:.2%} requested)")

        if self.show_grid:
            print("\nInitial grid:")
            print(self._format_grid(simulation.engine.cells))
            print()

        start_time = time.time()
        simulation.run()
        duration = time.time() - start_time

        stats = {
            "generation": simulation.engine.generation,
            "initial_population": initial_population,
            "population": simulation.engine.population,
            "population_density": simulation.engine.population / (size * size),
            "duration_seconds": duration,
        }
        return simulation.iteration, stats

    def _format_grid(self, cells: np.ndarray) -> str:
        """Format grid for display, truncating if too large.

        Args:
            cells: Cell array to format

        Returns:
            Formatted grid string
        """
        size = cells.shape[0]
        if size > self.max_grid_size:
            return f"Grid too large to display ({size}x{size})"

        return str(Grid.from_array(cells))

    def list_rules(self) -> None:
        """List the documented rules."""
        print("Available rules:")
        for notation, description in SUPPORTED_RULES.items():
            print(f"  {notation:<8} {description}")
        print("\nAny B<digits>/S<digits> rule with digits 0-8 is also accepted.")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Simulate Conway's Game of Life and its rule variants from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the default 20x20 Conway simulation for 50 generations
  lifegrid-cli

  # Run HighLife on a 50x50 grid for 100 generations, printing every frame
  lifegrid-cli --size 50 --tlength 100 --prob 0.2 --rule B36/S23 --show-grid

  # Reproducible run without pauses
  lifegrid-cli --seed 42 --delay 0

  # List documented rules
  lifegrid-cli --list-rules
        """,
    )

    parser.add_argument("-n", "--size", type=int, default=20, help="Edge length of the square grid (default: 20)")

    parser.add_argument(
        "-t",
        "--tlength",
        type=int,
        default=50,
        help="Number of iterations to run (default: 50)",
    )

    parser.add_argument(
        "-p",
        "--prob",
        type=float,
        default=0.5,
        help="Initial probability of a cell being alive 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument(
        "-r",
        "--rule",
        type=str,
        default="B3/S23",
        help="Birth/survival rule, e.g. B3/S23, B2/S, B36/S23 (default: B3/S23)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible initial grid",
    )

    parser.add_argument(
        "--delay",
        type=float,
        default=0.1,
        help="Pause between generations in seconds (default: 0.1)",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Print every generation (small grids only)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List documented rules and exit",
    )

    return parser


def print_results(generations: int, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        generations: Number of generations run
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation complete after specified time: {generations}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    cli = CLIGameOfLife(show_grid=args.show_grid, verbose=args.verbose)

    if args.list_rules:
        cli.list_rules()
        return 0

    try:
        generations, stats = cli.run_simulation(
            size=args.size,
            tlength=args.tlength,
            prob=args.prob,
            rule=args.rule,
            seed=args.seed,
            delay=args.delay,
        )
    except SimulationSetupError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    print_results(generations, stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
