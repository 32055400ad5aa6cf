"""The playing field: a grid of cell states and its boundary outline."""

from __future__ import annotations

import logging
from enum import IntEnum

from blockfall.block import BLOCK_SIZE, COLUMNS, ROWS

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]


class CellState(IntEnum):
    """What a square of the board holds."""

    EMPTY = 0
    ACTIVE = 1
    LOCKED = 2


class TetrisBoard:
    """A rows-by-columns grid of cell states, all empty at the start."""

    def __init__(self, rows: int = ROWS, columns: int = COLUMNS) -> None:
        self.rows = rows
        self.columns = columns
        self._grid: list[list[int]] = [
            [CellState.EMPTY] * columns for _ in range(rows)
        ]

    @property
    def grid(self) -> tuple[tuple[int, ...], ...]:
        """A snapshot of the board contents, row by row."""
        return tuple(tuple(int(v) for v in row) for row in self._grid)

    def board_origin(self, size: float = BLOCK_SIZE) -> Vec3:
        """World position of the outline's bottom-left corner."""
        start_x = -((self.rows + 2) / 2.0) * size
        start_y = -(self.columns / 2.0) * size
        return (start_x, start_y, 0.0)

    def outline_positions(self, size: float = BLOCK_SIZE) -> list[Vec3]:
        """World positions of the boundary blocks surrounding the board."""
        ox, oy, oz = self.board_origin(size)
        positions: list[Vec3] = []
        for i in range(self.rows + 2):
            positions.append((ox + i * size, oy, oz))
            positions.append((ox + i * size, oy + (self.columns + 1) * size, oz))
        for j in range(self.columns + 2):
            positions.append((ox + (self.rows + 1) * size, oy + j * size, oz))
            positions.append((ox, oy + j * size, oz))
        return positions

    def render(self) -> str:
        """Text dump of the board state; also written to the log."""
        lines = ["Current Board State:"]
        for index, row in enumerate(self._grid):
            row_data = "".join(f"{int(value)} " for value in row)
            lines.append(f"Row {index}: {row_data}")
        text = "\n".join(lines)
        for line in lines:
            logger.info(line)
        return text

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.rows and 0 <= y < self.columns):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def value(self, x: int, y: int) -> int:
        """State of the cell at row ``x``, column ``y``."""
        self._check(x, y)
        return int(self._grid[x][y])

    def add_block(self, x: int, y: int) -> None:
        """Mark the cell as holding the active piece."""
        self._check(x, y)
        self._grid[x][y] = CellState.ACTIVE

    def add_lock_block(self, x: int, y: int) -> None:
        """Mark the cell as holding a locked piece."""
        self._check(x, y)
        self._grid[x][y] = CellState.LOCKED

    def delete_block(self, x: int, y: int) -> None:
        """Empty the cell."""
        self._check(x, y)
        self._grid[x][y] = CellState.EMPTY