import math
from dataclasses import dataclass
from enum import Enum

from .errors import CellOccupied, InvalidSize, OutOfBounds

# float slack when deciding how many cells fit in the board side
CELL_COUNT_EPSILON = 1e-9


class Cell(Enum):
    EMPTY = " "
    X = "X"
    O = "O"


@dataclass(frozen=True)
class Coordinates:
    row: int
    col: int


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """
    on-screen box of the board: origin corner + square side
    origin is the bottom-left corner in y-up space, top-left in y-down space
    """
    x: float
    y: float
    side: float


class Board:
    """
    square grid of cells, size fixed at creation
    """
    def __init__(self, size):
        if size < 1:
            raise InvalidSize(f"board size must be positive, got {size}")
        self.size = size
        self.grid = [[Cell.EMPTY for _ in range(size)] for _ in range(size)]

    def _check(self, coords):
        if not (0 <= coords.row < self.size and 0 <= coords.col < self.size):
            raise OutOfBounds(f"{coords} outside {self.size}x{self.size} board")

    def cell_at(self, coords):
        self._check(coords)
        return self.grid[coords.row][coords.col]

    def set_cell(self, coords, value):
        self._check(coords)
        if self.grid[coords.row][coords.col] is not Cell.EMPTY:
            raise CellOccupied(f"{coords} already holds {self.grid[coords.row][coords.col].value}")
        self.grid[coords.row][coords.col] = value

    def is_full(self):
        return all(c is not Cell.EMPTY for row in self.grid for c in row)

    def empty_cells(self):
        return [Coordinates(r, c)
                for r in range(self.size) for c in range(self.size)
                if self.grid[r][c] is Cell.EMPTY]

    def lines(self):
        """
        every row, column and both diagonals as coordinate tuples
        """
        n = self.size
        for i in range(n):
            yield tuple(Coordinates(i, j) for j in range(n))
        for j in range(n):
            yield tuple(Coordinates(i, j) for i in range(n))
        yield tuple(Coordinates(i, i) for i in range(n))
        yield tuple(Coordinates(i, n - 1 - i) for i in range(n))

    def rows(self):
        return tuple(tuple(row) for row in self.grid)

    def __repr__(self):
        return f"Board(size={self.size})"


def create_empty(size):
    return Board(size)


def cell_at(board, coords):
    return board.cell_at(coords)


def set_cell(board, coords, value):
    board.set_cell(coords, value)


def pixel_to_coordinates(bounds, cell_size, pointer_pos, y_axis_up=True):
    """
    Map a pointer position to the board cell under it.

    The pointer is moved into board-local space with row 0 at the top edge.
    In y-up space (world/scene coordinates) the top edge is ``bounds.y + side``
    so the vertical axis is flipped; in y-down space (widget coordinates)
    the top edge is ``bounds.y``. Local positions are divided by
    ``cell_size`` and truncated toward zero.

    Returns None when the pointer lies outside the box.
    """
    if cell_size <= 0:
        return None
    local_x = pointer_pos.x - bounds.x
    if y_axis_up:
        local_y = bounds.y + bounds.side - pointer_pos.y
    else:
        local_y = pointer_pos.y - bounds.y
    # only inside grid
    if not (0 <= local_x < bounds.side and 0 <= local_y < bounds.side):
        return None
    # a partial last cell still counts as a cell
    last = max(0, math.ceil(bounds.side / cell_size - CELL_COUNT_EPSILON) - 1)
    col = int(local_x / cell_size)
    row = int(local_y / cell_size)
    # float error at the far edge can land one past the end
    return Coordinates(min(row, last), min(col, last))


def coordinates_to_pixel(bounds, cell_size, coords, y_axis_up=True):
    """
    centre of a cell in the same pixel space as ``pixel_to_coordinates``
    """
    x = bounds.x + coords.col * cell_size + cell_size / 2
    offset = coords.row * cell_size + cell_size / 2
    if y_axis_up:
        return Point(x, bounds.y + bounds.side - offset)
    return Point(x, bounds.y + offset)


def render_as_text(board):
    # one row per line, '.' for empty
    return "\n".join(
        " ".join("." if c is Cell.EMPTY else c.value for c in row)
        for row in board.grid
    )
