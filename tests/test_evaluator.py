import unittest
from arcothello.config.settings import HeuristicWeights
from arcothello.core.evaluator import Evaluator
from arcothello.core.grid import GridState
from arcothello.core.constants import PASS_MOVE
from arcothello.models.enums import Cell

A = Cell.SIDE_A
B = Cell.SIDE_B

class TestEvaluator(unittest.TestCase):
    def setUp(self):
        self.evaluator = Evaluator(HeuristicWeights())
        self.grid = GridState()  # empty 9x7

    def test_phase_weight(self):
        self.assertEqual(self.evaluator.phase_weight(0), 1.0)
        self.assertAlmostEqual(self.evaluator.phase_weight(5), 10 / 15)
        self.assertEqual(self.evaluator.phase_weight(15), 0.0)
        self.assertEqual(self.evaluator.phase_weight(40), 0.0)

    def test_evaluate_piece_count(self):
        grid = GridState.initial()
        self.assertEqual(self.evaluator.evaluate(grid, A), 2.0)
        self.assertEqual(self.evaluator.evaluate(grid, B, bonus=3.0), 5.0)
        # Past the early rounds only the bonus is left
        self.assertEqual(self.evaluator.evaluate(grid, A, bonus=-7.0, round_number=15), -7.0)

    def test_geometry(self):
        g = self.grid
        self.assertTrue(Evaluator.is_corner(g, (0, 0)))
        self.assertTrue(Evaluator.is_corner(g, (8, 6)))
        self.assertFalse(Evaluator.is_corner(g, (8, 5)))

        self.assertTrue(Evaluator.is_wall(g, (4, 0)))
        self.assertTrue(Evaluator.is_wall(g, (0, 3)))
        self.assertFalse(Evaluator.is_wall(g, (1, 0)))  # next to a corner
        self.assertFalse(Evaluator.is_wall(g, (0, 5)))
        self.assertFalse(Evaluator.is_wall(g, (0, 0)))
        self.assertFalse(Evaluator.is_wall(g, (4, 3)))

        self.assertTrue(Evaluator.is_risky_territory(g, (1, 3)))
        self.assertTrue(Evaluator.is_risky_territory(g, (4, 1)))
        self.assertTrue(Evaluator.is_risky_territory(g, (7, 5)))
        self.assertFalse(Evaluator.is_risky_territory(g, (4, 3)))
        self.assertFalse(Evaluator.is_risky_territory(g, (0, 1)))

    def test_corner_beats_wall(self):
        """
        Scenario: the same three-piece line played into a corner and
        onto a plain wall cell. The corner move must score higher.
        """
        corner_state = GridState()
        for c in (0, 1, 2):
            corner_state.set_cell(c, 0, A)
        wall_state = GridState()
        for c in (4, 5, 6):
            wall_state.set_cell(c, 0, A)

        corner_bonus = self.evaluator.positional_bonus(corner_state, (0, 0))
        wall_bonus = self.evaluator.positional_bonus(wall_state, (4, 0))

        # +50000 corner, 2 empty neighbours
        self.assertEqual(corner_bonus, 50000 - 2)
        # -8 wall, 4 empty neighbours
        self.assertEqual(wall_bonus, -8 - 4)

        corner_score = self.evaluator.evaluate(corner_state, A, corner_bonus)
        wall_score = self.evaluator.evaluate(wall_state, A, wall_bonus)
        self.assertGreater(corner_score, wall_score)

    def test_weak_spot_follows_open_corner(self):
        """
        Scenario: a piece diagonal to corner A1.
        Penalised while A1 is empty, not once A1 is taken.
        """
        self.grid.set_cell(1, 1, A)
        # -75 open corner, -4 risky ring, -8 empty neighbours
        self.assertEqual(self.evaluator.positional_bonus(self.grid, (1, 1)), -87)

        self.grid.set_cell(0, 0, B)
        # corner taken: -4 risky ring, -7 empty neighbours
        self.assertEqual(self.evaluator.positional_bonus(self.grid, (1, 1)), -11)

    def test_frontier_ignores_off_board(self):
        self.grid.set_cell(0, 3, A)
        # Only 5 neighbours exist on the west wall
        self.assertEqual(Evaluator.frontier_exposure(self.grid, (0, 3)), 5)
        self.grid.set_cell(1, 3, B)
        self.assertEqual(Evaluator.frontier_exposure(self.grid, (0, 3)), 4)

    def test_no_move_no_bonus(self):
        self.assertEqual(self.evaluator.positional_bonus(self.grid, None), 0.0)
        self.assertEqual(self.evaluator.positional_bonus(self.grid, PASS_MOVE), 0.0)

    def test_custom_weights(self):
        evaluator = Evaluator(HeuristicWeights(corner_bonus=10, early_rounds=4))
        self.grid.set_cell(0, 0, A)
        self.assertEqual(evaluator.positional_bonus(self.grid, (0, 0)), 10 - 3)
        self.assertEqual(evaluator.phase_weight(2), 0.5)

if __name__ == '__main__':
    unittest.main()
