#!/usr/bin/env python3
"""
Example usage of the elementary package.
"""

from elementary import ElementaryAutomaton, RuleCatalog, decode, seed


def main():
    """Demonstrate programmatic usage of the elementary package."""
    catalog = RuleCatalog()
    named_rule = catalog.get_rule("sierpinski")

    print(f"{named_rule.name}: rule {named_rule.number} ({named_rule.rule})")
    print(named_rule.description)
    print()

    automaton = ElementaryAutomaton(named_rule.rule, seed(31))
    for row in automaton.run(15):
        print(row)

    print()

    # A shift rule on a short ring repeats after one full rotation
    automaton = ElementaryAutomaton(decode(170), seed(8))
    final_generation, reason = automaton.run_until_stable(100)
    print(f"Rule 170 stopped at generation {final_generation}: {reason}")

    stats = automaton.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
