"""Tetromino shapes and the logic that moves and rotates a falling piece."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

ROWS = 20
COLUMNS = 10
BLOCK_SIZE = 87.0

Vec = tuple[float, float]


class BlockType(Enum):
    """The seven tetromino shapes."""

    I_BLOCK = 0
    O_BLOCK = 1
    T_BLOCK = 2
    S_BLOCK = 3
    Z_BLOCK = 4
    J_BLOCK = 5
    L_BLOCK = 6

    @property
    def display_name(self) -> str:
        return f"{self.name[0]} Block"


# Each shape: (relative pivot, relative cells).
_SHAPES: dict[BlockType, tuple[Vec, tuple[Vec, ...]]] = {
    BlockType.I_BLOCK: ((1, 1), ((1, 0), (1, 1), (1, 2), (1, 3))),
    BlockType.O_BLOCK: ((1, 1), ((0, 1), (0, 2), (1, 1), (1, 2))),
    BlockType.T_BLOCK: ((1, 1), ((1, 1), (0, 1), (1, 0), (1, 2))),
    BlockType.S_BLOCK: ((1, 1), ((0, 1), (0, 2), (1, 0), (1, 1))),
    BlockType.Z_BLOCK: ((1, 1), ((0, 0), (0, 1), (1, 1), (1, 2))),
    BlockType.J_BLOCK: ((2, 1), ((1, 0), (2, 0), (2, 1), (2, 2))),
    BlockType.L_BLOCK: ((2, 1), ((1, 2), (2, 0), (2, 1), (2, 2))),
}


def _vec(value: Sequence[float]) -> Vec:
    x, y = value
    return (float(x), float(y))


@dataclass
class BlockLogic:
    """A falling piece: cells relative to a pivot, placed at a world pivot."""

    relative_pivot: Vec = (0.0, 0.0)
    world_pivot: Vec = (0.0, 0.0)
    relative_cells: list[Vec] = field(default_factory=list)

    def world_cells(self) -> list[Vec]:
        """World positions of every cell, scaled by the block size."""
        px, py = self.relative_pivot
        wx, wy = self.world_pivot
        return [
            (wx + (x - px) * BLOCK_SIZE, wy + (y - py) * BLOCK_SIZE)
            for x, y in self.relative_cells
        ]

    def initialize(self, block_type: BlockType, initial_pivot: Sequence[float]) -> None:
        """Reset the piece to the given shape placed at ``initial_pivot``."""
        pivot, cells = _SHAPES[block_type]
        self.world_pivot = _vec(initial_pivot)
        self.relative_pivot = _vec(pivot)
        self.relative_cells = [_vec(cell) for cell in cells]

    def move_by_offset(self, offset: Sequence[float]) -> None:
        """Shift every cell by ``offset`` grid units."""
        dx, dy = _vec(offset)
        self.relative_cells = [(x + dx, y + dy) for x, y in self.relative_cells]

    def _rotated_cells(self) -> list[Vec]:
        px, py = self.relative_pivot
        return [(-(y - py) + px, (x - px) + py) for x, y in self.relative_cells]

    def can_rotate(self, board: Sequence[Sequence[int]]) -> bool:
        """Whether every rotated cell lands on an empty square of ``board``."""
        px, py = self.relative_pivot
        wx, wy = self.world_pivot
        for rx, ry in self._rotated_cells():
            x = wx + (rx - px)
            y = wy + (ry - py)
            if x < 0 or x >= len(board):
                return False
            if y < 0 or y >= len(board[0]):
                return False
            if board[int(x)][int(y)] != 0:
                return False
        return True

    def rotate(self) -> None:
        """Turn the piece a quarter turn about its pivot."""
        self.relative_cells = self._rotated_cells()