"""Rule decoding for elementary cellular automata.

A rule number 0-255 is written as eight binary digits, most significant bit
first. Digit 0 gives the new state for the neighborhood ``111`` and digit 7
the new state for ``000``, so a neighborhood is looked up through its
complementary index ``7 - pattern``.
"""

import re
from typing import Iterator, Optional, Union
import numpy as np

from .errors import OutOfRange

RULE_BITS = 8
MAX_RULE = 2**RULE_BITS - 1
MAX_PATTERN = RULE_BITS - 1


def neighborhood_pattern(left, center, right):
    """Encode a 3-cell neighborhood as an integer 0-7.

    Args:
        left: State of the left neighbor (most significant bit)
        center: State of the cell itself
        right: State of the right neighbor (least significant bit)

    Returns:
        ``4*left + 2*center + right``; works elementwise on arrays
    """
    return 4 * left + 2 * center + right


def complementary_index(pattern):
    """Map a neighborhood pattern to its position in the rule digits.

    Args:
        pattern: Neighborhood pattern 0-7, or an integer array of patterns

    Returns:
        ``7 - pattern``

    Raises:
        ValueError: If any pattern is outside 0-7
    """
    if isinstance(pattern, np.ndarray):
        if ((pattern < 0) | (pattern > MAX_PATTERN)).any():
            raise ValueError(f"Neighborhood patterns out of range (0-{MAX_PATTERN})")
        return MAX_PATTERN - pattern

    if not 0 <= pattern <= MAX_PATTERN:
        raise ValueError(f"Neighborhood pattern {pattern} out of range (0-{MAX_PATTERN})")

    return MAX_PATTERN - pattern


class Rule:
    """Decoded transition rule: eight binary digits, MSB first.

    Rules are immutable. They compare equal to other rules with the same
    digits and to the equivalent bit string.
    """

    def __init__(self, bits: str) -> None:
        """Initialize a rule from its bit string.

        Args:
            bits: Exactly eight '0'/'1' characters, MSB first

        Raises:
            ValueError: If bits is not an 8-character binary string
        """
        if not isinstance(bits, str) or len(bits) != RULE_BITS or set(bits) - {"0", "1"}:
            raise ValueError(f"Rule must be {RULE_BITS} binary digits, got {bits!r}")

        self._bits = bits
        self._table = np.array([int(b) for b in bits], dtype=np.int8)
        self._table.setflags(write=False)

    @classmethod
    def from_bits(cls, bits: str) -> "Rule":
        """Create a rule from an 8-character bit string."""
        return cls(bits)

    @property
    def bits(self) -> str:
        """The rule as an 8-character bit string."""
        return self._bits

    @property
    def number(self) -> int:
        """The decimal rule number."""
        return int(self._bits, 2)

    @property
    def table(self) -> np.ndarray:
        """Read-only array of the eight digits, indexed by complementary index."""
        return self._table

    def lookup(self, left: int, center: int, right: int) -> int:
        """Get the next state of a cell from its neighborhood.

        Args:
            left: Left neighbor state
            center: Cell state
            right: Right neighbor state

        Returns:
            New cell state (0 or 1)
        """
        return self[complementary_index(neighborhood_pattern(left, center, right))]

    def __getitem__(self, index: int) -> int:
        return int(self._table[index])

    def __len__(self) -> int:
        return RULE_BITS

    def __iter__(self) -> Iterator[int]:
        return (int(b) for b in self._table)

    def __eq__(self, other: object) -> bool:
        """Check equality against another rule or a bit string."""
        if isinstance(other, Rule):
            return self._bits == other._bits
        if isinstance(other, str):
            return self._bits == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bits)

    def __str__(self) -> str:
        return self._bits

    def __repr__(self) -> str:
        return f"Rule({self.number}, '{self._bits}')"


def decode(rule_decimal: int) -> Rule:
    """Decode a decimal rule number into its eight binary digits.

    Args:
        rule_decimal: Rule number 0-255

    Returns:
        Decoded rule, e.g. ``decode(90) == "01011010"``

    Raises:
        TypeError: If rule_decimal is not an integer
        OutOfRange: If rule_decimal is outside 0-255
    """
    if isinstance(rule_decimal, bool) or not isinstance(rule_decimal, (int, np.integer)):
        raise TypeError(f"Rule number must be an integer, got {type(rule_decimal).__name__}")

    if not 0 <= rule_decimal <= MAX_RULE:
        raise OutOfRange(f"Rule number {rule_decimal} out of range (0-{MAX_RULE})")

    return Rule(format(int(rule_decimal), f"0{RULE_BITS}b"))


def as_rule(rule: Union[Rule, str]) -> Rule:
    """Coerce a rule or bit string to a Rule."""
    if isinstance(rule, Rule):
        return rule
    if isinstance(rule, str):
        return Rule.from_bits(rule)
    raise TypeError(f"Expected Rule or bit string, got {type(rule).__name__}")


def parse_rule_number(text: str) -> Optional[int]:
    """Parse a decimal rule argument.

    Args:
        text: Command-line rule argument

    Returns:
        The integer value (not range checked), or None if text is not an
        optionally signed run of ASCII digits
    """
    text = text.strip()
    if re.fullmatch(r"-?[0-9]+", text) is None:
        return None
    return int(text)
