"""Row data structure for one-dimensional cellular automata."""

from typing import Iterator, List, Optional, Sequence, Tuple, Union
import numpy as np
import torch
import torch.nn.functional as F

from .errors import EmptyRow, InvalidLength

# Keep tensor ops single-threaded; rows are small and evolved sequentially
torch.set_num_threads(1)

# Weights for (left, center, right) so that a 1D convolution yields 4*l + 2*c + r
_PATTERN_KERNEL = torch.tensor([4.0, 2.0, 1.0], dtype=torch.float32).view(1, 1, 3)


class Row:
    """An immutable row of binary cells at a single generation.

    The row is treated as a ring: the left neighbor of cell 0 is the last
    cell and the right neighbor of the last cell is cell 0.
    """

    def __init__(self, cells: Union["Row", Sequence[int], np.ndarray]) -> None:
        """Initialize a row.

        Args:
            cells: Cell states, each exactly 0 or 1

        Raises:
            ValueError: If cells is not one-dimensional or holds values other than 0/1
        """
        if isinstance(cells, Row):
            arr = cells._cells.copy()
        else:
            source = np.asarray(cells)
            if source.ndim != 1:
                raise ValueError(f"Row must be one-dimensional, got shape {source.shape}")
            if source.size and not np.isin(source, (0, 1)).all():
                raise ValueError("Row cells must be 0 or 1")
            arr = source.astype(np.int8)

        arr.setflags(write=False)
        self._cells = arr

    @classmethod
    def from_string(cls, text: str, alive: str = "*") -> "Row":
        """Parse a rendered line back into a row.

        Args:
            text: Rendered line, one character per cell
            alive: Marker used for alive cells; every other character is dead

        Returns:
            New Row instance
        """
        return cls([1 if char == alive else 0 for char in text])

    @property
    def cells(self) -> np.ndarray:
        """Get the read-only cell array."""
        return self._cells

    @property
    def length(self) -> int:
        """Number of cells in the row."""
        return int(self._cells.size)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells))

    @property
    def density(self) -> float:
        """Fraction of living cells (0.0 for an empty row)."""
        if self.length == 0:
            return 0.0
        return self.population / self.length

    def neighborhood(self, index: int) -> Tuple[int, int, int]:
        """Get the (left, center, right) states around a cell.

        Args:
            index: Cell index, 0 to length-1

        Returns:
            Tuple of neighbor states with wraparound at both ends

        Raises:
            EmptyRow: If the row has no cells
            IndexError: If index is out of bounds
        """
        length = self.length
        if length == 0:
            raise EmptyRow("Row has no cells")
        if not 0 <= index < length:
            raise IndexError(f"Cell index {index} out of bounds for row of length {length}")

        left = self[(index - 1 + length) % length]
        right = self[(index + 1) % length]
        return (left, self[index], right)

    def neighborhood_patterns(self) -> np.ndarray:
        """Encode the neighborhood of every cell using a circular convolution.

        Returns:
            Integer array where entry i is ``4*left + 2*center + right`` for cell i

        Raises:
            EmptyRow: If the row has no cells
        """
        if self.length == 0:
            raise EmptyRow("Row has no cells")

        # Shape (batch, channel, width) as conv1d expects
        cells = torch.from_numpy(self._cells.astype(np.float32)).view(1, 1, -1)
        padded = F.pad(cells, (1, 1), mode="circular")
        patterns = F.conv1d(padded, _PATTERN_KERNEL)

        return patterns[0, 0].numpy().astype(np.intp)

    def to_list(self) -> List[int]:
        """Convert row to a list of ints."""
        return self._cells.tolist()

    def tobytes(self) -> bytes:
        """Byte representation, used as a key for cycle detection."""
        return self._cells.tobytes()

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> int:
        return int(self._cells[index])

    def __iter__(self) -> Iterator[int]:
        return (int(cell) for cell in self._cells)

    def __eq__(self, other: object) -> bool:
        """Check equality against another row or a sequence of cell values."""
        if isinstance(other, Row):
            return np.array_equal(self._cells, other._cells)
        if isinstance(other, (list, tuple, np.ndarray)):
            return np.array_equal(self._cells, np.asarray(other))
        return NotImplemented

    def __hash__(self) -> int:
        """Hash the cell bytes; consistent with equality between Row instances only."""
        return hash(self.tobytes())

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as ' '."""
        return "".join("*" if cell else " " for cell in self._cells)

    def __repr__(self) -> str:
        return f"Row({self.to_list()})"


def _check_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise TypeError(f"Row length must be an integer, got {type(length).__name__}")
    if length <= 0:
        raise InvalidLength(f"Row length must be positive, got {length}")


def seed(length: int) -> Row:
    """Build the starting row: all dead except the middle cell.

    Args:
        length: Number of cells, at least 1

    Returns:
        Row with cell ``length // 2`` alive, e.g. ``seed(9) == [0,0,0,0,1,0,0,0,0]``

    Raises:
        TypeError: If length is not an integer
        InvalidLength: If length is not positive
    """
    _check_length(length)

    cells = np.zeros(length, dtype=np.int8)
    cells[length // 2] = 1
    return Row(cells)


def random_row(length: int, probability: float = 0.5, rng_seed: Optional[int] = None) -> Row:
    """Build a randomly populated row.

    Args:
        length: Number of cells, at least 1
        probability: Chance each cell will be alive (0.0 to 1.0)
        rng_seed: Optional seed for reproducible rows

    Returns:
        New Row instance

    Raises:
        InvalidLength: If length is not positive
        ValueError: If probability is outside 0.0-1.0
    """
    _check_length(length)
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

    rng = np.random.default_rng(rng_seed)
    mask = rng.random(length) < probability
    return Row(mask.astype(np.int8))
