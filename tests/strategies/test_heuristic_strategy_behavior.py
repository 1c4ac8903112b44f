import unittest

from ludo_chat.engine.moves import candidate_moves
from ludo_chat.engine.session import GameSession
from ludo_chat.engine.types import Color, OnStretch, OnTrack
from ludo_chat.strategy.heuristic import HeuristicStrategy


class TestHeuristicStrategyBehavior(unittest.TestCase):
    def setUp(self):
        self.session = GameSession()
        self.strategy = HeuristicStrategy()

    def place(self, color, pawn_index, position):
        self.session.seat(color).pawns[pawn_index].move_to(position)

    def scores(self, roll, color=Color.RED):
        moves = candidate_moves(self.session, color, roll)
        return {mv.pawn_index: self.strategy.score_move(self.session, mv) for mv in moves}

    def choose(self, roll, color=Color.RED):
        moves = candidate_moves(self.session, color, roll)
        chosen = self.strategy.select_move(self.session, moves)
        return None if chosen is None else chosen.pawn_index

    def test_prefers_leaving_base(self):
        self.place(Color.RED, 1, OnTrack(10))
        scores = self.scores(6)
        self.assertEqual(scores[0], 100)
        self.assertEqual(scores[1], 0)
        self.assertEqual(self.choose(6), 0)

    def test_home_stretch_bonus(self):
        self.place(Color.RED, 0, OnTrack(20))
        self.place(Color.RED, 1, OnTrack(50))
        self.assertEqual(self.scores(3)[1], 75)
        self.assertEqual(self.choose(3), 1)

    def test_moving_inside_stretch_and_finishing_count_as_home(self):
        self.place(Color.RED, 0, OnStretch(0))
        self.place(Color.RED, 1, OnStretch(2))
        scores = self.scores(2)
        self.assertEqual(scores[0], 75)
        self.assertEqual(scores[1], 75)
        # tie goes to the lowest pawn index
        self.assertEqual(self.choose(2), 0)

    def test_capture_bonus(self):
        self.place(Color.RED, 0, OnTrack(10))
        self.place(Color.RED, 1, OnTrack(30))
        self.place(Color.GREEN, 2, OnTrack(14))
        scores = self.scores(4)
        self.assertEqual(scores[0], 50)
        self.assertEqual(scores[1], 0)  # 34 is a safe cell
        self.assertEqual(self.choose(4), 0)

    def test_danger_penalty(self):
        self.place(Color.RED, 0, OnTrack(5))
        self.place(Color.RED, 1, OnTrack(20))
        self.place(Color.BLUE, 0, OnTrack(4))
        scores = self.scores(2)
        self.assertEqual(scores[0], -25)
        self.assertEqual(scores[1], 0)
        self.assertEqual(self.choose(2), 1)

    def test_safe_cell_is_never_dangerous(self):
        self.place(Color.RED, 0, OnTrack(6))
        self.place(Color.BLUE, 0, OnTrack(5))
        # 8 is safe even though blue is three cells behind it
        self.assertEqual(self.scores(2)[0], 0)

    def test_opponent_turning_home_is_no_threat(self):
        # green at 11 turns into its stretch after cell 12
        self.place(Color.GREEN, 0, OnTrack(11))
        self.place(Color.RED, 0, OnTrack(10))
        move = candidate_moves(self.session, Color.RED, 4)[0]
        self.assertEqual(move.new_position, OnTrack(14))
        self.assertFalse(self.strategy.in_danger(self.session, move))
        self.place(Color.RED, 0, OnTrack(8))
        move = candidate_moves(self.session, Color.RED, 4)[0]
        self.assertEqual(move.new_position, OnTrack(12))
        self.assertTrue(self.strategy.in_danger(self.session, move))

    def test_scores_combine(self):
        # leaving base onto a start cell is safe, so only the exit bonus applies
        self.place(Color.BLUE, 0, OnTrack(50))
        self.assertEqual(self.scores(6)[0], 100)

    def test_no_moves_means_pass(self):
        self.assertIsNone(self.choose(3))
        self.assertIsNone(self.strategy.decide(self.session, 3))

    def test_deterministic_choice(self):
        self.place(Color.RED, 1, OnTrack(20))
        self.place(Color.RED, 2, OnTrack(30))
        picks = {self.choose(1) for _ in range(20)}
        self.assertEqual(picks, {1})

    def test_custom_weights(self):
        strategy = HeuristicStrategy(exit_base_bonus=0, capture_bonus=500)
        self.place(Color.RED, 1, OnTrack(10))
        self.place(Color.YELLOW, 0, OnTrack(16))
        moves = candidate_moves(self.session, Color.RED, 6)
        self.assertEqual(strategy.select_move(self.session, moves).pawn_index, 1)


if __name__ == "__main__":
    unittest.main()
