import pytest

from blockfall.block import BLOCK_SIZE, COLUMNS, ROWS, BlockLogic, BlockType


def _made(block_type, pivot=(0.0, 0.0)):
    logic = BlockLogic()
    logic.initialize(block_type, pivot)
    return logic


@pytest.mark.parametrize("block_type", list(BlockType))
def test_initialize_has_four_distinct_cells(block_type):
    logic = _made(block_type, (3.0, 4.0))
    assert logic.world_pivot == (3.0, 4.0)
    assert len(logic.relative_cells) == 4
    assert len(set(logic.relative_cells)) == 4


@pytest.mark.parametrize("block_type", list(BlockType))
def test_pivot_cell_sits_at_world_pivot(block_type):
    logic = _made(block_type, (500.0, -200.0))
    assert (500.0, -200.0) in logic.world_cells()


@pytest.mark.parametrize("block_type", list(BlockType))
def test_world_cells_lie_on_block_grid(block_type):
    logic = _made(block_type, (10.0, 20.0))
    for x, y in logic.world_cells():
        assert ((x - 10.0) / BLOCK_SIZE).is_integer()
        assert ((y - 20.0) / BLOCK_SIZE).is_integer()


def test_t_block_world_cells_worked_example():
    logic = _made(BlockType.T_BLOCK)
    assert logic.world_cells() == [
        (0.0, 0.0),
        (-BLOCK_SIZE, 0.0),
        (0.0, -BLOCK_SIZE),
        (0.0, BLOCK_SIZE),
    ]


def test_l_block_initialized_with_its_shape_and_name():
    logic = _made(BlockType.L_BLOCK)
    assert BlockType.L_BLOCK.display_name == "L Block"
    assert logic.relative_pivot == (2, 1)
    assert sorted(logic.relative_cells) == [(1, 2), (2, 0), (2, 1), (2, 2)]


@pytest.mark.parametrize("offset", [(0, -1), (0, 1), (-1, 0), (2, 3)])
def test_move_by_offset_shifts_world_cells(offset):
    logic = _made(BlockType.S_BLOCK, (100.0, 50.0))
    before = logic.world_cells()
    logic.move_by_offset(offset)
    after = logic.world_cells()
    dx, dy = offset
    assert after == [
        (x + dx * BLOCK_SIZE, y + dy * BLOCK_SIZE) for x, y in before
    ]
    assert logic.world_pivot == (100.0, 50.0)


@pytest.mark.parametrize("block_type", list(BlockType))
def test_four_rotations_restore_cells(block_type):
    logic = _made(block_type)
    original = list(logic.relative_cells)
    for _ in range(4):
        logic.rotate()
    assert logic.relative_cells == original


@pytest.mark.parametrize("block_type", list(BlockType))
def test_rotation_keeps_pivot_and_distances(block_type):
    logic = _made(block_type)
    px, py = logic.relative_pivot

    def dists(cells):
        return sorted((x - px) ** 2 + (y - py) ** 2 for x, y in cells)

    before = dists(logic.relative_cells)
    logic.rotate()
    assert dists(logic.relative_cells) == before
    assert logic.relative_pivot in logic.relative_cells


def test_rotation_of_i_block_turns_row_into_column():
    logic = _made(BlockType.I_BLOCK)
    assert len({x for x, _ in logic.relative_cells}) == 1
    logic.rotate()
    assert len({y for _, y in logic.relative_cells}) == 1


def _empty(rows=ROWS, columns=COLUMNS):
    return [[0] * columns for _ in range(rows)]


def test_can_rotate_on_empty_board_in_the_middle():
    logic = _made(BlockType.T_BLOCK, (5.0, 5.0))
    assert logic.can_rotate(_empty()) is True


def test_can_rotate_blocked_by_full_board():
    logic = _made(BlockType.T_BLOCK, (5.0, 5.0))
    full = [[2] * COLUMNS for _ in range(ROWS)]
    assert logic.can_rotate(full) is False


def test_can_rotate_refuses_outside_board():
    logic = _made(BlockType.I_BLOCK, (0.0, 0.0))
    assert logic.can_rotate(_empty()) is False


def test_can_rotate_refuses_far_pivot():
    logic = _made(BlockType.O_BLOCK, (ROWS + 5.0, 0.0))
    assert logic.can_rotate(_empty()) is False


def test_can_rotate_does_not_change_piece():
    logic = _made(BlockType.J_BLOCK, (5.0, 5.0))
    cells = list(logic.relative_cells)
    logic.can_rotate(_empty())
    assert logic.relative_cells == cells


def test_can_rotate_matches_rotated_occupancy():
    logic = _made(BlockType.L_BLOCK, (8.0, 4.0))
    board = _empty()
    rotated = _made(BlockType.L_BLOCK, (8.0, 4.0))
    rotated.rotate()
    px, py = rotated.relative_pivot
    x, y = rotated.relative_cells[0]
    board[int(8.0 + x - px)][int(4.0 + y - py)] = 2
    assert logic.can_rotate(board) is False
    board[int(8.0 + x - px)][int(4.0 + y - py)] = 0
    assert logic.can_rotate(board) is True