"""Text rendering of rows."""

from typing import Iterable

from ..core.row import Row


class TextRenderer:
    """Renders rows as lines of text, one character per cell."""

    def __init__(self, alive: str = "*", dead: str = " ") -> None:
        """Initialize the renderer.

        Args:
            alive: Marker for living cells
            dead: Marker for dead cells

        Raises:
            ValueError: If a marker is not a single character or both are the same
        """
        if len(alive) != 1 or len(dead) != 1:
            raise ValueError("Cell markers must be single characters")
        if alive == dead:
            raise ValueError("Alive and dead markers must differ")

        self.alive = alive
        self.dead = dead

    def render(self, row: Row) -> str:
        """Render one row, without a trailing newline."""
        return "".join(self.alive if cell else self.dead for cell in row)

    def render_all(self, rows: Iterable[Row]) -> str:
        """Render a generation sequence, one newline-terminated line per row."""
        return "".join(self.render(row) + "\n" for row in rows)
