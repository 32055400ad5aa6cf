# blockfall

Game logic for a falling-block puzzle. The package has the seven tetromino
shapes, a 20 × 10 board grid with its boundary frame, and a small game loop
that reads moves from standard input and prints the board after each one.

## Install

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Play

    blockfall [--seed N]

The game reads one command per line from standard input:

| Command         | Action                     |
|-----------------|----------------------------|
| `a` or `left`   | move the block one column left  |
| `d` or `right`  | move the block one column right |
| `s` or `down`   | drop the block one row          |
| `w` or `rotate` | turn the block a quarter turn   |
| `q` or `quit`   | stop                            |

Unknown commands are reported on standard error. After every command the
board is printed as rows of numbers: `0` is an empty cell and `1` is a cell
holding a block. When a block moves down and can fall no further, its cells
stay marked on the board and a new block of random shape appears at the top.
`--seed` fixes the order of the random shapes.

## Use as a library

```python
from blockfall.block import BlockLogic, BlockType
from blockfall.board import TetrisBoard
from blockfall.game import Game, world_to_board

game = Game(first_block=BlockType.T_BLOCK)
if game.can_move((0, -1)):
    game.move_left()
game.move_down()
print(game.board.render())
```

- `blockfall.block`
  - `BlockType` is an enum of the seven shapes, `I_BLOCK` to `L_BLOCK`.
  - `BlockLogic` holds a block's cells relative to its pivot. Its methods are
    `initialize`, `world_cells`, `move_by_offset`, `rotate` and `can_rotate`.
  - The module also has the constants `ROWS`, `COLUMNS` and `BLOCK_SIZE`.
- `blockfall.board`
  - `TetrisBoard` is the grid. Use `value`, `add_block`, `add_lock_block` and
    `delete_block` to read and change cells. These raise `IndexError` for a
    cell outside the board.
  - `render` returns the board as text and also writes it to the log.
  - `grid` gives a snapshot of the board.
  - `board_origin` and `outline_positions` give the world positions of the
    boundary frame.
  - `CellState` names the cell values `EMPTY` (0), `ACTIVE` (1) and
    `LOCKED` (2).
- `blockfall.game`
  - `Game` keeps a board and the falling block. Its methods are
    `spawn_block`, `can_move`, `move_left`, `move_right`, `move_down`,
    `rotate` and `visual_positions`. The move methods return whether the
    block moved.
  - `world_to_board` converts a world position to a `(row, column)` cell.
  - `main` is the entry point of the `blockfall` command.

`Game` takes an optional `random.Random`, an optional `TetrisBoard` and an
optional first shape.

## What it does not do

This is the core movement logic only:

- Full rows are never cleared, and there is no score.
- Nothing ends the game when the board fills.
- Blocks do not fall on a timer; they move only on commands.
- Movement is stopped only by the board edges and by cells marked `LOCKED`.
  Landed blocks are marked `1`, not `2`, so they do not stop other blocks.
- `rotate` turns the block without checking the board and without updating
  the printed board. `BlockLogic.can_rotate` is available to make that check.
- There is no graphical display. `visual_positions` and `outline_positions`
  only give the world coordinates where block and frame meshes would be
  drawn.