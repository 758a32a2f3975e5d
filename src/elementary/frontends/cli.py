"""Command-line interface for elementary cellular automata."""

import argparse
import sys
import time
from typing import Optional, Tuple, Union, TextIO

from ..core.catalog import RuleCatalog
from ..core.engine import ElementaryAutomaton
from ..core.errors import AutomatonError
from ..core.row import random_row, seed
from ..core.rule import MAX_RULE, Rule, decode, parse_rule_number
from .render import TextRenderer


class CLIElementaryAutomaton:
    """Command-line interface for running elementary automaton simulations."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        """Initialize CLI interface.

        Args:
            output: Stream receiving rendered rows (defaults to stdout)
        """
        self.rule_catalog = RuleCatalog()
        self.output = output

    def resolve_rule(self, rule: Union[Rule, int, str]) -> Rule:
        """Decode a rule given as a Rule, a number or a catalog name."""
        if isinstance(rule, Rule):
            return rule
        if isinstance(rule, int):
            return decode(rule)
        return self.rule_catalog.resolve(rule)

    def run_simulation(
        self,
        length: int,
        steps: int,
        rule: Union[Rule, int, str],
        random_start: bool = False,
        probability: float = 0.5,
        rng_seed: Optional[int] = None,
        alive: str = "*",
        dead: str = " ",
        stop_on_cycle: bool = False,
        verbose: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a simulation, writing every generation as a line of text.

        Args:
            length: Number of cells in the row
            steps: Number of generations to compute after generation 0
            rule: Rule number, catalog name or decoded rule
            random_start: Start from a random row instead of a single live cell
            probability: Alive probability for a random start
            rng_seed: Random seed for a reproducible random start
            alive: Marker for living cells
            dead: Marker for dead cells
            stop_on_cycle: Stop as soon as a row repeats
            verbose: Print progress to stderr

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        output = self.output or sys.stdout
        renderer = TextRenderer(alive, dead)
        decoded = self.resolve_rule(rule)

        if verbose:
            print(f"Rule {decoded.number} ({decoded.bits})", file=sys.stderr)

        if random_start:
            if verbose:
                print(f"Generating random row of {length} cells (rate: {probability:.2%})", file=sys.stderr)
            initial_row = random_row(length, probability, rng_seed)
        else:
            if verbose:
                print(f"Seeding row of {length} cells at index {length // 2}", file=sys.stderr)
            initial_row = seed(length)

        automaton = ElementaryAutomaton(decoded, initial_row)
        initial_population = automaton.population
        reason = "completed"

        start_time = time.time()

        for row in automaton.run(steps):
            output.write(renderer.render(row) + "\n")

            if stop_on_cycle and automaton.cycle_detected:
                reason = "cycle"
                break

        duration = time.time() - start_time

        if verbose:
            print(f"Computed {automaton.generation} generations in {duration:.3f}s", file=sys.stderr)

        stats = automaton.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = automaton.generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        return automaton.generation, reason, stats

    def list_rules(self) -> None:
        """List catalog rules by category."""
        categories = self.rule_catalog.get_rules_by_category()

        print("Available rules:")
        for category, names in categories.items():
            print(f"\n{category}:")
            for name in names:
                named_rule = self.rule_catalog.get_rule(name)
                print(f"  {name}: rule {named_rule.number} ({named_rule.rule.bits})")
                if named_rule.description:
                    print(f"    {named_rule.description}")


class ListRulesAction(argparse.Action):
    """Print the rule catalog and exit, ignoring the positional arguments."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        CLIElementaryAutomaton().list_rules()
        parser.exit()


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="eca-cli",
        description="Run elementary cellular automata from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rule 90 on 31 cells for 15 generations
  eca-cli 31 15 90

  # Same rule by catalog name, drawn with '#' and '.'
  eca-cli 31 15 sierpinski --alive '#' --dead '.'

  # Rule 30 from a random row, reproducible
  eca-cli 64 32 30 --random --probability 0.3 --seed 42

  # Stop once the row repeats and print a summary
  eca-cli 16 100 184 --random --stop-on-cycle --stats

  # List catalog rules
  eca-cli --list-rules
        """,
    )

    parser.add_argument("length", type=int, help="Number of cells in the row")

    parser.add_argument("steps", type=int, help="Number of generations to compute")

    parser.add_argument("rule", type=str, help=f"Rule number (0-{MAX_RULE}) or catalog name")

    # Initial row configuration
    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="Start from a random row instead of a single live cell",
    )

    parser.add_argument(
        "-p",
        "--probability",
        type=float,
        default=0.5,
        help="Alive probability for --random, 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible --random row",
    )

    # Output configuration
    parser.add_argument("--alive", type=str, default="*", help="Marker for living cells (default: '*')")

    parser.add_argument("--dead", type=str, default=" ", help="Marker for dead cells (default: ' ')")

    parser.add_argument(
        "-c",
        "--stop-on-cycle",
        action="store_true",
        help="Stop as soon as a row repeats",
    )

    parser.add_argument(
        "-s",
        "--stats",
        action="store_true",
        help="Print a summary to stderr after the run",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information to stderr",
    )

    parser.add_argument(
        "--list-rules",
        action=ListRulesAction,
        help="List catalog rules and exit",
    )

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason from CLIElementaryAutomaton.run_simulation
        stats: Statistics dictionary

    Returns:
        Formatted reason string
    """
    if reason == "completed":
        return f"Completed all {stats.get('generation', 0)} generations"
    elif reason == "cycle":
        cycle_len = stats.get("cycle_length", 0)
        cycle_start = stats.get("cycle_start_generation", 0)
        return f"Cycle detected - length {cycle_len}, started at generation {cycle_start}"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results to stderr.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation stopped at generation {final_generation}", file=sys.stderr)
    print(f"Finish reason: {format_finish_reason(reason, stats)}", file=sys.stderr)

    if verbose:
        print("\nDetailed Statistics:", file=sys.stderr)
        print(f"  Rule: {stats['rule']} ({stats['rule_bits']})", file=sys.stderr)
        print(f"  Row length: {stats['row_length']}", file=sys.stderr)
        print(f"  Initial population: {stats['initial_population']}", file=sys.stderr)
        print(f"  Final population: {stats['population']}", file=sys.stderr)
        print(f"  Population density: {stats['population_density']:.2%}", file=sys.stderr)
        print(f"  Population change rate: {stats['population_change_rate']:.2f}", file=sys.stderr)
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds", file=sys.stderr)
            print(f"  Speed: {stats['generations_per_second']:.0f} generations/second", file=sys.stderr)
    else:
        print(
            "Population: {} → {}, Duration: {:.3f}s".format(
                stats["initial_population"], stats["population"], stats.get("duration_seconds", 0)
            ),
            file=sys.stderr,
        )


def validate_args(args: argparse.Namespace, catalog: Optional[RuleCatalog] = None) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments
        catalog: Catalog used to check rule names (built on demand)

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.length <= 0:
        errors.append("Length must be positive")

    if args.steps < 0:
        errors.append("Steps must be non-negative")

    rule_text = args.rule.strip()
    rule_number = parse_rule_number(rule_text)
    if rule_number is not None:
        if not 0 <= rule_number <= MAX_RULE:
            errors.append(f"Rule number must be between 0 and {MAX_RULE}")
    elif (catalog or RuleCatalog()).get_rule(rule_text) is None:
        errors.append(f"Unknown rule '{args.rule}' (use --list-rules to see names)")

    if not 0.0 <= args.probability <= 1.0:
        errors.append("Probability must be between 0.0 and 1.0")

    if len(args.alive) != 1 or len(args.dead) != 1:
        errors.append("Cell markers must be single characters")
    elif args.alive == args.dead:
        errors.append("Alive and dead markers must differ")

    if errors:
        print("Error: Invalid arguments:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIElementaryAutomaton()

    if not validate_args(args, cli.rule_catalog):
        return 1

    try:
        final_generation, reason, stats = cli.run_simulation(
            length=args.length,
            steps=args.steps,
            rule=args.rule,
            random_start=args.random,
            probability=args.probability,
            rng_seed=args.seed,
            alive=args.alive,
            dead=args.dead,
            stop_on_cycle=args.stop_on_cycle,
            verbose=args.verbose,
        )

        if args.stats or args.verbose:
            print_results(final_generation, reason, stats, args.verbose)

        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user", file=sys.stderr)
        return 1
    except (AutomatonError, ValueError, KeyError) as e:
        message = e.args[0] if e.args else e
        print(f"Error: {message}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
