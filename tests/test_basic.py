"""Basic tests for the elementary package."""

import elementary
from elementary import ElementaryAutomaton, RuleCatalog, decode, seed, step


def test_public_api():
    """Test the package exposes the core operations."""
    assert elementary.__version__ == "0.1.0"
    for name in elementary.__all__:
        assert hasattr(elementary, name)


def test_decode_seed_step():
    """Test the three core operations work together."""
    rule = decode(222)
    row = seed(9)
    assert step(row, rule) == [0, 0, 0, 1, 1, 1, 0, 0, 0]


def test_catalog_rule_simulation():
    """Test a catalog rule drives an automaton."""
    rule = RuleCatalog().get_rule("sierpinski").rule
    automaton = ElementaryAutomaton(rule, seed(7))

    rows = list(automaton.run(3))
    assert [str(row) for row in rows] == [
        "   *   ",
        "  * *  ",
        " *   * ",
        "* * * *",
    ]
