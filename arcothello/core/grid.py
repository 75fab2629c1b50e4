# arcothello/core/grid.py
import string
from typing import List, Optional, Tuple

from arcothello.models.enums import Cell
from .constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, DIRECTIONS

Move = Tuple[int, int]


class GridState:
    """
    Cell occupancy of a width x height board.
    Indexed [col][row] like the wire format: col 0 is the 'A' column,
    row 0 is the '1' row.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 cells: Optional[List[List[Cell]]] = None):
        self.width = width
        self.height = height
        if cells is None:
            cells = [[Cell.EMPTY for _ in range(height)] for _ in range(width)]
        self.cells = cells

    @classmethod
    def initial(cls, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> 'GridState':
        """Empty board with the 2x2 starting block seeded around the centre."""
        grid = cls(width, height)
        c0 = width // 2 - 1
        r0 = (height - 1) // 2
        grid.cells[c0][r0] = Cell.SIDE_A
        grid.cells[c0][r0 + 1] = Cell.SIDE_B
        grid.cells[c0 + 1][r0] = Cell.SIDE_B
        grid.cells[c0 + 1][r0 + 1] = Cell.SIDE_A
        return grid

    @classmethod
    def from_matrix(cls, matrix: List[List[int]]) -> 'GridState':
        """
        Builds a grid from the wire format: matrix[col][row] with
        0 = SideA (white), 1 = SideB (black), -1 = empty.
        The matrix is copied, never aliased.
        Raises ValueError on an empty or ragged matrix.
        """
        width = len(matrix)
        height = len(matrix[0]) if width else 0
        if not height:
            raise ValueError("matrix must have at least one column and one row")
        if any(len(column) != height for column in matrix):
            raise ValueError(f"every column must have {height} rows")
        cells = [[Cell(value) for value in column] for column in matrix]
        return cls(width, height, cells)

    def to_matrix(self) -> List[List[int]]:
        return [[int(cell) for cell in column] for column in self.cells]

    def copy(self) -> 'GridState':
        return GridState(self.width, self.height, [column[:] for column in self.cells])

    # --- Access ---

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def _check_bounds(self, col: int, row: int):
        if not 0 <= col < self.width:
            raise IndexError(f"Invalid column index {col} (width {self.width})")
        if not 0 <= row < self.height:
            raise IndexError(f"Invalid row index {row} (height {self.height})")

    def cell_at(self, col: int, row: int) -> Cell:
        self._check_bounds(col, row)
        return self.cells[col][row]

    def set_cell(self, col: int, row: int, cell: Cell):
        self._check_bounds(col, row)
        self.cells[col][row] = cell

    def is_empty_slot(self, col: int, row: int) -> bool:
        """True when (col, row) is off the board or holds no piece."""
        return not self.in_bounds(col, row) or self.cells[col][row] == Cell.EMPTY

    # --- Capture rule ---

    def _captures_in_direction(self, col: int, row: int, side: Cell, d_col: int, d_row: int) -> List[Move]:
        enemy = side.opponent
        run = []
        c, r = col + d_col, row + d_row
        while self.in_bounds(c, r) and self.cells[c][r] == enemy:
            run.append((c, r))
            c += d_col
            r += d_row
        # The run only counts when it is closed by one of our own pieces
        if self.in_bounds(c, r) and self.cells[c][r] == side:
            return run
        return []

    def captures_for(self, col: int, row: int, side: Cell) -> List[Move]:
        """Opponent cells flipped if `side` plays at (col, row)."""
        captured = []
        for d_col, d_row in DIRECTIONS:
            captured.extend(self._captures_in_direction(col, row, side, d_col, d_row))
        return captured

    def is_legal(self, col: int, row: int, side: Cell) -> bool:
        if not self.in_bounds(col, row) or self.cells[col][row] != Cell.EMPTY:
            return False
        # Any single direction is enough
        return any(self._captures_in_direction(col, row, side, d_col, d_row)
                   for d_col, d_row in DIRECTIONS)

    def apply(self, col: int, row: int, side: Cell) -> bool:
        """
        Places a piece for `side` and flips the captured runs.
        Returns False and leaves the grid untouched when the move is illegal.
        """
        if not self.in_bounds(col, row) or self.cells[col][row] != Cell.EMPTY:
            return False
        captured = self.captures_for(col, row, side)
        if not captured:
            return False

        self.cells[col][row] = side
        for c, r in captured:
            self.cells[c][r] = side
        return True

    def legal_moves(self, side: Cell) -> List[Move]:
        """Legal targets for `side`, column by column."""
        return [(c, r)
                for c in range(self.width)
                for r in range(self.height)
                if self.cells[c][r] == Cell.EMPTY and self.is_legal(c, r, side)]

    # --- Status ---

    def count(self, side: Cell) -> int:
        return sum(column.count(side) for column in self.cells)

    def empty_count(self) -> int:
        return self.count(Cell.EMPTY)

    def is_full(self) -> bool:
        return all(Cell.EMPTY not in column for column in self.cells)

    def corners(self) -> List[Move]:
        w, h = self.width - 1, self.height - 1
        return [(0, 0), (0, h), (w, 0), (w, h)]

    def neighbors(self, col: int, row: int) -> List[Move]:
        """In-bounds 8-neighbourhood of (col, row)."""
        return [(col + d_col, row + d_row)
                for d_col, d_row in DIRECTIONS
                if self.in_bounds(col + d_col, row + d_row)]

    # --- Formatting ---

    def render(self) -> str:
        """ASCII grid with lettered columns and 1-based rows."""
        symbols = {Cell.EMPTY: ".", Cell.SIDE_A: "O", Cell.SIDE_B: "X"}
        header = "   " + " ".join(string.ascii_uppercase[c] for c in range(self.width))
        lines = [header]
        for r in range(self.height):
            row_cells = [symbols[self.cells[c][r]] for c in range(self.width)]
            lines.append(f"{r + 1:>2} " + " ".join(row_cells))
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, GridState):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self):
        return f"GridState({self.width}x{self.height}, A={self.count(Cell.SIDE_A)}, B={self.count(Cell.SIDE_B)})"


def parse_notation(text: str) -> Move:
    """'D3' -> (3, 2). Column letter first, then the 1-based row number."""
    text = text.strip().upper()
    if len(text) < 2 or text[0] not in string.ascii_uppercase or not text[1:].isdigit():
        raise ValueError(f"Invalid move notation: {text!r}")
    col = string.ascii_uppercase.index(text[0])
    row = int(text[1:]) - 1
    if row < 0:
        raise ValueError(f"Invalid move notation: {text!r}")
    return col, row


def to_notation(move: Move) -> str:
    col, row = move
    if col < 0 or row < 0:
        return "PASS"
    return f"{string.ascii_uppercase[col]}{row + 1}"
