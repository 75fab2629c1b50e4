# arcothello/core/search.py
import logging
from dataclasses import dataclass
from typing import Optional

from arcothello.models.enums import Cell
from .constants import INF, PASS_MOVE
from .evaluator import Evaluator
from .grid import GridState, Move

logger = logging.getLogger(__name__)


@dataclass
class SearchNode:
    score: float
    move: Move = PASS_MOVE


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None):
        self.evaluator = evaluator or Evaluator()
        self.nodes = 0

    def search(self, state: GridState, depth: int, side: Cell, round_number: int = 0) -> SearchNode:
        """
        Root Entry Point.
        Maximises for `side`; no pruning bound at the root.
        The given state is never modified.
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.nodes = 0
        node = self.alphabeta(state, depth, 1, INF, side, round_number, None, 0.0)

        logger.debug("Search depth=%d side=%s round=%d -> move=%s score=%.2f nodes=%d",
                     depth, side.name, round_number, node.move, node.score, self.nodes)
        return node

    def alphabeta(self, state: GridState, level: int, min_or_max: int, parent_best: float,
                  side: Cell, round_number: int, last_move: Optional[Move],
                  accumulated: float) -> SearchNode:
        """
        Depth-bounded minimax with a single running pruning bound.

        min_or_max: +1 when this node maximises, -1 when it minimises.
        parent_best: best score already secured by the parent.
        accumulated: sum of the per-ply scores along the path to this node.
        """
        self.nodes += 1

        # 1. Score the move that led here, from the mover's point of view
        current = 0.0
        if last_move is not None:
            mover = side.opponent
            bonus = self.evaluator.positional_bonus(state, last_move)
            current = -min_or_max * self.evaluator.evaluate(state, mover, bonus, round_number - 1)

        # 2. Terminal: budget spent, board full, or nothing to play
        if level == 0 or state.is_full():
            return SearchNode(current + accumulated)

        available = state.legal_moves(side)
        if not available:
            # Side to move is blocked; credit whoever blocked it
            blocking = self.evaluator.weights.blocking_opponent
            return SearchNode(current + accumulated - min_or_max * blocking)

        # 3. Recursive Search
        best = SearchNode(-min_or_max * INF)
        for move in available:
            child = state.copy()
            child.apply(move[0], move[1], side)

            result = self.alphabeta(child, level - 1, -min_or_max, best.score, side.opponent,
                                    round_number + 1, move, current + accumulated)

            if result.score * min_or_max > best.score * min_or_max:
                best = SearchNode(result.score, move)
                if best.score * min_or_max > parent_best * min_or_max:
                    break  # Cutoff

        return best
