#! /usr/bin/env python
import sys
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO, Optional

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore

from rps_guide import strategy

INPUT_DIR = Path("inputs/")
DEFAULT_INPUT = INPUT_DIR / "day02.txt"


def print_solution(solution):
    print(solution)


def get_input(input_file: Optional[str] = None) -> IO[str]:
    if input_file is not None:
        return open(input_file)
    return open(DEFAULT_INPUT) if sys.stdin.isatty() else sys.stdin


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
)


@cli.definition
class RPSGuide:
    """Score a rock-paper-scissors strategy guide under either of its two readings"""

    @cli_spec.output_handler(print_solution)
    def run(
        self, *, input_file: Optional[str] = None, part_2: bool = False, verbose: bool = False
    ):
        """Score a strategy guide. The default input is in the inputs/ folder, but input will be
        read from stdin if input is piped there.

        :param input_file: path to a strategy guide to read instead of the default input
        :param part_2: read the second column as the desired outcome rather than our play
        :param verbose: print parsing and per-round scoring details to stderr
        """
        with get_input(input_file) as input_:
            print(f"Scoring strategy guide (part {2 if part_2 else 1})...", file=sys.stderr)
            tic = perf_counter_ns()
            solution = strategy.run(input_, part_2=part_2, verbose=verbose)
            toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return solution

    def test(self):
        """Run the scorer's self-checks against the worked example"""
        strategy.test()
        print("Tests pass!")

    def info(self):
        """Print the scorer's doc string and the two rule sets it supports"""
        if strategy.__doc__:
            print(strategy.__doc__, end="\n\n")
        print("Rule sets:")
        for rule_set, rules in strategy.RULES.items():
            print(f"  {rule_set.value}: {rules.description}")
        print("Signature:")
        print(signature(strategy.run))

    def input(self):
        """Print the default input text to stdout"""
        with open(DEFAULT_INPUT, "r") as f:
            for line in f:
                print(line, file=sys.stdout, end="")


def main() -> int:
    try:
        cli.run()
    except strategy.StrategyGuideError as e:
        print(f"Bad strategy guide: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
