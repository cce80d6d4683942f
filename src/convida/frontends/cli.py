"""Command-line host for stepping and printing a Game of Life universe."""

import argparse
import logging
import sys
import time
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..core.seeds import GENERATORS
from ..core.universe import Universe


class CLIConvida:
    """Command-line driver that ticks a universe and prints each generation."""

    def __init__(self, output=None):
        """Initialize CLI interface.

        Args:
            output: Stream frames are written to (defaults to stdout)
        """
        self.output = output

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.output or sys.stdout)

    def build_universe(
        self,
        width: int,
        height: int,
        generator: str = "random",
        clear: bool = False,
        gliders: Sequence[Tuple[int, int]] = (),
        pulsars: Sequence[Tuple[int, int]] = (),
        verbose: bool = False,
    ) -> Universe:
        """Create a universe and stamp the requested patterns onto it.

        Args:
            width: Universe width
            height: Universe height
            generator: Seeding generator name
            clear: Start from an empty universe instead of the generator output
            gliders: Anchor (row, col) of each glider to stamp
            pulsars: Anchor (row, col) of each pulsar to stamp
            verbose: Print setup details

        Returns:
            The prepared universe
        """
        if verbose:
            self._print(f"Initializing {width}x{height} universe (generator: {generator})")

        universe = Universe(width, height, generator)

        if clear:
            universe.clear()

        for row, col in gliders:
            if verbose:
                self._print(f"Stamping glider at ({row}, {col})")
            universe.glider(row, col)

        for row, col in pulsars:
            if verbose:
                self._print(f"Stamping pulsar at ({row}, {col})")
            universe.pulsar(row, col)

        if verbose:
            self._print(f"Initial population: {universe.population} cells")

        return universe

    def run_simulation(
        self,
        universe: Universe,
        generations: int,
        delay: float = 0.0,
        verbose: bool = False,
    ) -> Dict:
        """Print the universe, then tick and print it once per generation.

        Args:
            universe: Universe to drive
            generations: Number of ticks
            delay: Seconds to sleep between frames
            verbose: Print a header above each frame

        Returns:
            Dictionary with run statistics
        """
        initial_population = universe.population
        start_time = time.time()

        self._print_frame(universe, verbose)
        for _ in range(generations):
            if delay > 0:
                time.sleep(delay)
            universe.tick()
            self._print_frame(universe, verbose)

        duration = time.time() - start_time

        return {
            "generation": universe.generation,
            "initial_population": initial_population,
            "population": universe.population,
            "duration_seconds": duration,
            "generations_per_second": generations / duration if duration > 0 else 0,
        }

    def _print_frame(self, universe: Universe, verbose: bool) -> None:
        if verbose:
            self._print(f"Generation {universe.generation} (population {universe.population}):")
        self._print(universe.render(), end="")
        self._print()


def parse_coordinate(value: str) -> Tuple[int, int]:
    """Parse a 'ROW,COL' argument.

    Args:
        value: Argument text

    Returns:
        Tuple of (row, col)

    Raises:
        argparse.ArgumentTypeError: If the text is not two comma-separated integers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected ROW,COL but got '{value}'")
    try:
        row, col = (int(part.strip()) for part in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid numeric value in coordinate: '{value}'")
    return row, col


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Step a toroidal Game of Life universe and print it as text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print 10 generations of a random 40x20 universe
  convida -W 40 -H 20 -n 10

  # Watch the seeded glider cross an 8x8 universe
  convida -W 8 -H 8 --generator glider -n 32 --delay 0.2

  # Pulsar on an otherwise empty universe
  convida -W 17 -H 17 --clear --pulsar 2,2 -n 3
        """,
    )

    # Universe configuration
    parser.add_argument("-W", "--width", type=int, default=64, help="Universe width (default: 64)")

    parser.add_argument("-H", "--height", type=int, default=32, help="Universe height (default: 32)")

    parser.add_argument(
        "--generator",
        choices=GENERATORS,
        default="random",
        help="Seeding generator (default: random)",
    )

    parser.add_argument(
        "--clear",
        action="store_true",
        help="Start from an empty universe before stamping patterns",
    )

    # Pattern configuration
    parser.add_argument(
        "--glider",
        type=parse_coordinate,
        action="append",
        default=[],
        metavar="ROW,COL",
        help="Stamp a glider anchored at ROW,COL (repeatable)",
    )

    parser.add_argument(
        "--pulsar",
        type=parse_coordinate,
        action="append",
        default=[],
        metavar="ROW,COL",
        help="Stamp a pulsar anchored at ROW,COL (repeatable)",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Generations to simulate (default: 10)",
    )

    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait between frames (default: 0)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible universes")

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log tick timings and cell transitions",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    for name, anchors in (("Glider", args.glider), ("Pulsar", args.pulsar)):
        for row, col in anchors:
            if row < 0 or col < 0:
                errors.append(f"{name} anchor ({row}, {col}) must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(stats: Dict, verbose: bool = False) -> None:
    """Print a summary of a finished run.

    Args:
        stats: Statistics returned by ``CLIConvida.run_simulation``
        verbose: Include timing details
    """
    print(
        f"Generations: {stats['generation']}, "
        f"Population: {stats['initial_population']} -> {stats['population']}"
    )
    if verbose:
        print(
            f"Duration: {stats['duration_seconds']:.3f}s, "
            f"Speed: {stats['generations_per_second']:.0f} gen/s"
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.seed is not None:
        np.random.seed(args.seed)

    cli = CLIConvida()

    try:
        universe = cli.build_universe(
            width=args.width,
            height=args.height,
            generator=args.generator,
            clear=args.clear,
            gliders=args.glider,
            pulsars=args.pulsar,
            verbose=args.verbose,
        )
        stats = cli.run_simulation(
            universe,
            generations=args.generations,
            delay=args.delay,
            verbose=args.verbose,
        )
        print_results(stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
