"""Core cellular automata logic."""

from .errors import AutomatonError, OutOfRange, InvalidLength, EmptyRow
from .rule import Rule, decode, complementary_index, neighborhood_pattern
from .row import Row, seed, random_row
from .engine import ElementaryAutomaton, step, evolve
from .catalog import NamedRule, RuleCatalog

__all__ = [
    "AutomatonError",
    "OutOfRange",
    "InvalidLength",
    "EmptyRow",
    "Rule",
    "decode",
    "complementary_index",
    "neighborhood_pattern",
    "Row",
    "seed",
    "random_row",
    "ElementaryAutomaton",
    "step",
    "evolve",
    "NamedRule",
    "RuleCatalog",
]
