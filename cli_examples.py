#!/usr/bin/env python3
"""
Examples of the eca-cli command, run in-process.
"""

from elementary.frontends.cli import main as cli_main

EXAMPLES = [
    (["31", "15", "90"], "Sierpinski triangle from a single cell"),
    (["31", "15", "sierpinski", "--alive", "#", "--dead", "."], "Same rule by name with custom markers"),
    (["63", "30", "30"], "Rule 30 from a single cell"),
    (["64", "32", "110", "--random", "--seed", "7"], "Rule 110 from a random row"),
    (["16", "100", "170", "--stop-on-cycle", "--stats"], "Shift rule stops after one rotation"),
    (["9", "4", "300"], "Rule out of range (reports an error)"),
]


def main():
    """Run each example and report its exit code."""
    for args, description in EXAMPLES:
        print(f"\n{description}: eca-cli {' '.join(args)}")
        print(f"Exit code: {cli_main(args)}")


if __name__ == "__main__":
    main()
