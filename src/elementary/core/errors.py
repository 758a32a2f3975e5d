"""Exceptions raised by the automaton core."""


class AutomatonError(Exception):
    """Base class for all elementary automaton errors."""


class OutOfRange(AutomatonError, ValueError):
    """Rule number outside 0-255."""


class InvalidLength(AutomatonError, ValueError):
    """Row length that is not a positive integer."""


class EmptyRow(AutomatonError, ValueError):
    """Evolution requested for a row with no cells."""
