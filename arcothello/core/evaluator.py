# arcothello/core/evaluator.py
from typing import Optional

from arcothello.config.settings import HeuristicWeights
from arcothello.models.enums import Cell
from .grid import GridState, Move
from .constants import PASS_MOVE


class Evaluator:
    """
    Scores a position for one side: raw piece count, faded out over the
    early rounds, plus the positional bonus of the move that produced it.
    """

    def __init__(self, weights: Optional[HeuristicWeights] = None):
        self.weights = weights or HeuristicWeights()

    def phase_weight(self, round_number: int) -> float:
        early = self.weights.early_rounds
        return max(early - round_number, 0) / early

    def evaluate(self, state: GridState, side: Cell, bonus: float = 0.0, round_number: int = 0) -> float:
        raw = state.count(side)
        return raw * self.phase_weight(round_number) + bonus

    def positional_bonus(self, state: GridState, move: Optional[Move]) -> float:
        """
        Bonus/malus for a piece at `move`, read against the board *after*
        the move was played (open corners and empty neighbours are dynamic).
        """
        if move is None or move == PASS_MOVE:
            return 0.0

        w = self.weights
        bonus = 0.0

        if self.is_corner(state, move):
            bonus += w.corner_bonus
        elif self.is_wall(state, move):
            bonus -= w.wall_malus

        bonus -= w.corner_giving_malus * self.open_corners_touched(state, move)

        if self.is_risky_territory(state, move):
            bonus -= w.risky_territory_malus

        bonus -= self.frontier_exposure(state, move)
        return bonus

    # --- Board geometry ---

    @staticmethod
    def is_corner(state: GridState, move: Move) -> bool:
        return move in state.corners()

    @staticmethod
    def is_on_edge(state: GridState, move: Move) -> bool:
        col, row = move
        return col in (0, state.width - 1) or row in (0, state.height - 1)

    @classmethod
    def is_wall(cls, state: GridState, move: Move) -> bool:
        """Edge cell that is neither a corner nor right next to one."""
        if not cls.is_on_edge(state, move) or cls.is_corner(state, move):
            return False
        col, row = move
        for c_col, c_row in state.corners():
            if abs(col - c_col) + abs(row - c_row) == 1:
                return False
        return True

    @classmethod
    def is_risky_territory(cls, state: GridState, move: Move) -> bool:
        """Ring one cell in from the walls."""
        if cls.is_on_edge(state, move):
            return False
        col, row = move
        return col in (1, state.width - 2) or row in (1, state.height - 2)

    @staticmethod
    def open_corners_touched(state: GridState, move: Move) -> int:
        """How many still-empty corners `move` sits next to (diagonals included)."""
        col, row = move
        touched = 0
        for c_col, c_row in state.corners():
            if (c_col, c_row) == move:
                continue
            if max(abs(col - c_col), abs(row - c_row)) == 1 and state.cells[c_col][c_row] == Cell.EMPTY:
                touched += 1
        return touched

    @staticmethod
    def frontier_exposure(state: GridState, move: Move) -> int:
        """Empty cells among the in-bounds 8 neighbours."""
        return sum(1 for c, r in state.neighbors(*move) if state.cells[c][r] == Cell.EMPTY)
