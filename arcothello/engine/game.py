import logging
from typing import List, Optional, Tuple, Dict, Any

from arcothello.config.settings import EngineSettings, settings as default_settings
from arcothello.core.evaluator import Evaluator
from arcothello.core.grid import GridState, to_notation
from arcothello.core.search import SearchEngine
from arcothello.models.enums import Cell
from arcothello.schemas.board_schema import BoardMatrix, MoveResult

# Logger setup
logger = logging.getLogger(__name__)

class OthelloEngine:
    def __init__(self, config: Optional[EngineSettings] = None):
        """
        Live game plus move search.
        Board uses [column][row] indexing, column 0 = 'A', row 0 = '1'.
        Values: 0=White (SideA), 1=Black (SideB), -1=Empty
        """
        self.config = config or default_settings
        self.grid = GridState.initial(self.config.width, self.config.height)
        self.round_number = 0
        self.history: List[Dict[str, Any]] = []
        self.searcher = SearchEngine(Evaluator(self.config.weights))

    def get_name(self) -> str:
        return self.config.name

    # --- Search ---

    def analyse(self, game: List[List[int]], level: int, white_turn: bool) -> MoveResult:
        """Runs the search on a copy of `game` and reports the move with its score."""
        state = BoardMatrix(cells=game).to_grid()
        side = Cell.from_turn(white_turn)
        node = self.searcher.search(state, level, side, self.round_number)
        return MoveResult.from_move(node.move, node.score)

    def get_next_move(self, game: List[List[int]], level: int, white_turn: bool) -> Tuple[int, int]:
        """
        Best move for the side to play on `game` (game[column][row]).
        Returns (-1, -1) when that side has to pass.
        Neither `game` nor the live board is modified.
        """
        result = self.analyse(game, level, white_turn)
        logger.debug("Next move for %s: %s (%.2f)", "white" if white_turn else "black",
                     result.notation, result.score)
        return result.column, result.row

    # --- Live game ---

    def is_playable(self, column: int, row: int, is_white: bool) -> bool:
        return self.grid.is_legal(column, row, Cell.from_turn(is_white))

    def play_move(self, column: int, row: int, is_white: bool) -> bool:
        """
        Applies the move to the live board.
        Returns True if successful, False if illegal (board unchanged).
        """
        side = Cell.from_turn(is_white)
        if not self.grid.apply(column, row, side):
            return False

        self.round_number += 1
        self.history.append({
            "player": int(side),
            "column": column,
            "row": row,
            "round": self.round_number,
        })
        logger.info("Round %d: %s plays %s", self.round_number, side.name, to_notation((column, row)))
        return True

    def get_board(self) -> List[List[int]]:
        return self.grid.to_matrix()

    def get_white_score(self) -> int:
        return self.grid.count(Cell.SIDE_A)

    def get_black_score(self) -> int:
        return self.grid.count(Cell.SIDE_B)

    def number_possible_moves(self, is_white: bool) -> int:
        return len(self.grid.legal_moves(Cell.from_turn(is_white)))

    def is_game_over(self) -> bool:
        """Neither side can move (this includes a full board)."""
        return not self.grid.legal_moves(Cell.SIDE_A) and not self.grid.legal_moves(Cell.SIDE_B)

    def winner(self) -> Optional[Cell]:
        """Side with more pieces once the game is over; None while playing or on a draw."""
        if not self.is_game_over():
            return None
        white, black = self.get_white_score(), self.get_black_score()
        if white == black:
            return None
        return Cell.SIDE_A if white > black else Cell.SIDE_B

    # --- Formatting ---

    def get_visual_board(self) -> str:
        return self.grid.render()
