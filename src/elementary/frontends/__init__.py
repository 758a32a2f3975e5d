"""Frontend interfaces for elementary cellular automata."""

from .render import TextRenderer
from .cli import CLIElementaryAutomaton

__all__ = ["TextRenderer", "CLIElementaryAutomaton"]
