"""Elementary (one-dimensional, two-state) cellular automata."""

__version__ = "0.1.0"

from .core.errors import AutomatonError, OutOfRange, InvalidLength, EmptyRow
from .core.rule import Rule, decode, complementary_index
from .core.row import Row, seed, random_row
from .core.engine import ElementaryAutomaton, step, evolve
from .core.catalog import NamedRule, RuleCatalog

__all__ = [
    "AutomatonError",
    "OutOfRange",
    "InvalidLength",
    "EmptyRow",
    "Rule",
    "decode",
    "complementary_index",
    "Row",
    "seed",
    "random_row",
    "ElementaryAutomaton",
    "step",
    "evolve",
    "NamedRule",
    "RuleCatalog",
]
