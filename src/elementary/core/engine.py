"""Evolution engine for elementary cellular automata."""

from typing import Deque, Dict, Iterator, List, Optional, Sequence, Tuple, Union
from collections import deque
import numpy as np

from .errors import EmptyRow
from .row import Row
from .rule import Rule, as_rule, complementary_index

RowLike = Union[Row, Sequence[int]]
RuleLike = Union[Rule, str]


def step(row: RowLike, rule: RuleLike) -> Row:
    """Compute the next generation of a row.

    Every cell is updated from the same prior row: its (left, center, right)
    neighborhood, wrapping around at both ends, is encoded as
    ``4*left + 2*center + right`` and the new state is
    ``rule[complementary_index(pattern)]``.

    Args:
        row: Current generation
        rule: Decoded rule or its 8-character bit string

    Returns:
        New Row of the same length; the input is left untouched

    Raises:
        EmptyRow: If the row has no cells
    """
    current = row if isinstance(row, Row) else Row(row)
    decoded = as_rule(rule)

    if len(current) == 0:
        raise EmptyRow("Cannot evolve an empty row")

    lookup = complementary_index(current.neighborhood_patterns())
    return Row(decoded.table[lookup])


def evolve(row: RowLike, rule: RuleLike, num_steps: int) -> List[Row]:
    """Compute the generation sequence starting at row.

    Args:
        row: Generation 0
        rule: Decoded rule or its bit string
        num_steps: Number of generations to compute after row

    Returns:
        List of ``num_steps + 1`` rows, generation 0 first

    Raises:
        ValueError: If num_steps is negative
    """
    if num_steps < 0:
        raise ValueError(f"Number of steps must be non-negative, got {num_steps}")

    current = row if isinstance(row, Row) else Row(row)
    decoded = as_rule(rule)

    generations = [current]
    for _ in range(num_steps):
        current = step(current, decoded)
        generations.append(current)

    return generations


class ElementaryAutomaton:
    """Elementary cellular automaton simulation.

    Wraps the pure ``step`` function with generation counting, population
    history and cycle detection. Rows handed out are immutable snapshots.
    """

    def __init__(self, rule: RuleLike, row: RowLike, max_history: int = 1000) -> None:
        """Initialize the automaton.

        Args:
            rule: Decoded rule or its bit string
            row: Generation 0
            max_history: Maximum number of past rows remembered for cycle detection

        Raises:
            EmptyRow: If the row has no cells
        """
        self.rule = as_rule(rule)
        self.max_history = max_history

        self._initial_row = row if isinstance(row, Row) else Row(row)
        if len(self._initial_row) == 0:
            raise EmptyRow("Cannot simulate an empty row")

        self._row = self._initial_row
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[Tuple[int, bytes]] = deque()
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._check_for_cycles()

    @property
    def row(self) -> Row:
        """Current row."""
        return self._row

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._row.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a row has repeated."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> Row:
        """Advance the simulation by one generation.

        Returns:
            The new current row
        """
        self._row = step(self._row, self.rule)
        self._generation += 1

        self._update_population_history()
        self._check_for_cycles()

        return self._row

    def run(self, num_steps: int) -> Iterator[Row]:
        """Iterate over the current row and the next num_steps generations.

        Args:
            num_steps: Number of times to evolve

        Returns:
            Iterator yielding ``num_steps + 1`` rows, current row first

        Raises:
            ValueError: If num_steps is negative
        """
        if num_steps < 0:
            raise ValueError(f"Number of steps must be non-negative, got {num_steps}")

        return self._run(num_steps)

    def _run(self, num_steps: int) -> Iterator[Row]:
        yield self._row
        for _ in range(num_steps):
            yield self.step()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until the row repeats or dies out.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self._cycle_detected:
                return self._generation, "cycle"

            if self.population == 0:
                return self._generation, "extinction"

        return self._generation, "max_generations"

    def reset(self, row: Optional[RowLike] = None) -> None:
        """Restart the simulation at generation 0.

        Args:
            row: New starting row; defaults to the original starting row
        """
        if row is not None:
            new_row = row if isinstance(row, Row) else Row(row)
            if len(new_row) == 0:
                raise EmptyRow("Cannot simulate an empty row")
            self._initial_row = new_row

        self._row = self._initial_row
        self._generation = 0
        self._population_history.clear()
        self._state_history.clear()
        self._seen_states.clear()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._check_for_cycles()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _check_for_cycles(self) -> None:
        """Record the current row, flagging a cycle if it was seen before."""
        if self._cycle_detected:
            return

        current_state = self._row.tobytes()

        if current_state in self._seen_states:
            first_occurrence = self._seen_states[current_state]
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        self._seen_states[current_state] = self._generation
        self._state_history.append((self._generation, current_state))

        # Forget the oldest rows to bound memory
        while len(self._state_history) > self.max_history:
            old_generation, old_state = self._state_history.popleft()
            if self._seen_states.get(old_state) == old_generation:
                del self._seen_states[old_state]

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        return {
            "generation": self._generation,
            "rule": self.rule.number,
            "rule_bits": self.rule.bits,
            "row_length": len(self._row),
            "population": self.population,
            "population_density": self._row.density,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
        }
