"""A playing session: the falling piece, its board bookkeeping and its visuals."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence

from blockfall.block import BLOCK_SIZE, COLUMNS, ROWS, BlockLogic, BlockType, Vec
from blockfall.board import CellState, TetrisBoard

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]

LEFT: Vec = (0.0, -1.0)
RIGHT: Vec = (0.0, 1.0)
DOWN: Vec = (-1.0, 0.0)

SPAWN_PIVOT: Vec = (BLOCK_SIZE * (ROWS * 0.5 - 1), 0.0)

_ROW_ORIGIN = BLOCK_SIZE * (ROWS // 2 - 1)
_COLUMN_ORIGIN = BLOCK_SIZE * (COLUMNS // 2 - 1)


def world_to_board(position: Sequence[float]) -> tuple[int, int]:
    """Board row and column of a world position, truncated toward zero."""
    x, y = position
    row = int(-(x - _ROW_ORIGIN) / BLOCK_SIZE)
    column = int((y + _COLUMN_ORIGIN) / BLOCK_SIZE)
    return row, column


def _in_bounds(row: int, column: int) -> bool:
    return 0 <= row < ROWS and 0 <= column < COLUMNS


class Game:
    """The player's session: a board and the piece currently falling on it."""

    def __init__(
        self,
        rng: random.Random | None = None,
        board: TetrisBoard | None = None,
        first_block: BlockType | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board = board if board is not None else TetrisBoard()
        self.outline: list[Vec3] = self.board.outline_positions()
        self.current_block = BlockLogic()
        self._previous_cells: list[Vec] = []
        self._visual_blocks: list[Vec3] = []
        self.spawn_block(first_block)

    def _random_type(self) -> BlockType:
        return BlockType(self.rng.randint(0, 6))

    def spawn_block(self, block_type: BlockType | None = None) -> BlockType:
        """Place a new piece at the top; a random shape when none is given."""
        if block_type is None:
            block_type = self._random_type()
        self.current_block.initialize(block_type, SPAWN_PIVOT)
        for x, y in self.current_block.world_cells():
            logger.info("Block Cell at World Position: (%f, %f)", x, y)
        self._visual_blocks.extend((x, y, 0.0) for x, y in self.current_block.world_cells())
        self._update_board()
        self._previous_cells = self.current_block.world_cells()
        self.board.render()
        return block_type

    def can_move(self, offset: Sequence[float]) -> bool:
        """Whether the piece can shift by ``offset`` grid units."""
        dx, dy = offset
        current = self.current_block.world_cells()
        for x, y in current:
            nxt = (x + dx * BLOCK_SIZE, y + dy * BLOCK_SIZE)
            row, column = world_to_board(nxt)
            if not _in_bounds(row, column):
                return False
            if nxt not in current and self.board.value(row, column) == CellState.LOCKED:
                return False
        return True

    def _shift(self, offset: Vec) -> bool:
        if not self.can_move(offset):
            return False
        self.current_block.move_by_offset(offset)
        self._update_visuals()
        self._update_board()
        self.board.render()
        return True

    def move_left(self) -> bool:
        """Shift the piece one column left; return whether it moved."""
        logger.warning("Input Left")
        return self._shift(LEFT)

    def move_right(self) -> bool:
        """Shift the piece one column right; return whether it moved."""
        logger.warning("Input Right")
        return self._shift(RIGHT)

    def move_down(self) -> bool:
        """Drop the piece one row, landing it and spawning the next when it stops."""
        logger.warning("Input Down")
        if not self._shift(DOWN):
            return False
        if not self.can_move(DOWN):
            self._lock_block()
            self.spawn_block()
        return True

    def rotate(self) -> None:
        """Turn the piece a quarter turn about its pivot."""
        self.current_block.rotate()

    def visual_positions(self) -> list[Vec3]:
        """World positions of every spawned visual block."""
        return list(self._visual_blocks)

    def _clear_previous(self) -> None:
        for position in self._previous_cells:
            row, column = world_to_board(position)
            if self.board.value(row, column) != CellState.ACTIVE:
                self.board.delete_block(row, column)
                logger.info("Cleared Block at Previous Position: (%d, %d)", row, column)

    def _update_board(self) -> None:
        self._clear_previous()
        self._previous_cells = self.current_block.world_cells()
        for position in self._previous_cells:
            row, column = world_to_board(position)
            self.board.add_block(row, column)
            logger.info("Updated Block at New Position: (%d, %d)", row, column)

    def _update_visuals(self) -> None:
        cells = self.current_block.world_cells()
        for index, (x, y) in enumerate(cells[: len(self._visual_blocks)]):
            self._visual_blocks[index] = (x, y, 0.0)

    def _lock_block(self) -> None:
        for position in self.current_block.world_cells():
            row, column = world_to_board(position)
            if _in_bounds(row, column):
                self.board.add_block(row, column)
                logger.info("Block locked at position: (%d, %d)", row, column)


_COMMANDS = {
    "a": "move_left",
    "left": "move_left",
    "d": "move_right",
    "right": "move_right",
    "s": "move_down",
    "down": "move_down",
    "w": "rotate",
    "rotate": "rotate",
}


def main(argv: Sequence[str] | None = None) -> int:
    """Play from standard input: a/d/s/w move and rotate, q quits."""
    parser = argparse.ArgumentParser(prog="blockfall", description=main.__doc__)
    parser.add_argument("--seed", type=int, default=None, help="random seed for piece order")
    args = parser.parse_args(argv)

    game = Game(rng=random.Random(args.seed))
    print(game.board.render())
    for line in sys.stdin:
        command = line.strip().lower()
        if not command:
            continue
        if command in ("q", "quit"):
            break
        action = _COMMANDS.get(command)
        if action is None:
            print(f"unknown command: {command}", file=sys.stderr)
            continue
        getattr(game, action)()
        print(game.board.render())
    return 0