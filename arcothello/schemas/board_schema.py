from pydantic import BaseModel, ConfigDict, field_validator
from typing import List, Tuple

from arcothello.core.grid import GridState, to_notation

ALLOWED_VALUES = {-1, 0, 1}

class BoardMatrix(BaseModel):
    """
    Wire board: cells[column][row] with 0 = white, 1 = black, -1 = empty.
    """
    model_config = ConfigDict(extra='forbid')

    cells: List[List[int]]

    @field_validator("cells")
    @classmethod
    def check_shape(cls, cells: List[List[int]]) -> List[List[int]]:
        if not cells or not cells[0]:
            raise ValueError("board must have at least one column and one row")
        height = len(cells[0])
        for col, column in enumerate(cells):
            if len(column) != height:
                raise ValueError(f"column {col} has {len(column)} rows, expected {height}")
            bad = [v for v in column if v not in ALLOWED_VALUES]
            if bad:
                raise ValueError(f"column {col} holds invalid cell values {bad}")
        return cells

    def to_grid(self) -> GridState:
        return GridState.from_matrix(self.cells)

class MoveResult(BaseModel):
    column: int
    row: int
    notation: str
    score: float

    @classmethod
    def from_move(cls, move: Tuple[int, int], score: float) -> "MoveResult":
        return cls(column=move[0], row=move[1], notation=to_notation(move), score=score)
