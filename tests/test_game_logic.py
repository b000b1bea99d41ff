import unittest

from tictactoe_menu.board import Cell, Coordinates
from tictactoe_menu.errors import CellOccupied, MatchFinished, OutOfBounds
from tictactoe_menu.game_logic import (
    Match,
    MatchOutcome,
    MatchPhase,
    TurnOwner,
)


def play(match, *moves):
    outcome = None
    for r, c in moves:
        outcome = match.attempt_move(Coordinates(r, c))
    return outcome


class TestMatch(unittest.TestCase):
    def test_new_match_starts_playing_with_x(self):
        match = Match(3)
        self.assertIs(match.phase, MatchPhase.PLAYING)
        self.assertIs(match.turn, TurnOwner.X)
        self.assertIs(match.outcome, MatchOutcome.IN_PROGRESS)

    def test_turns_alternate_on_success_only(self):
        match = Match(3)
        seen = []
        for r, c in [(0, 0), (0, 0), (1, 1), (5, 5), (2, 2)]:
            before = match.turn
            try:
                match.attempt_move(Coordinates(r, c))
            except (CellOccupied, OutOfBounds):
                self.assertIs(match.turn, before)
                continue
            seen.append(before)
        self.assertEqual(seen, [TurnOwner.X, TurnOwner.O, TurnOwner.X])
        self.assertIs(match.turn, TurnOwner.O)

    def test_top_row_win_then_finished(self):
        match = Match(3)
        outcome = play(match, (0, 0), (1, 1), (0, 1), (1, 0))
        self.assertIs(outcome, MatchOutcome.IN_PROGRESS)
        outcome = play(match, (0, 2))
        self.assertIs(outcome, MatchOutcome.WIN_X)
        self.assertIs(outcome.winner, Cell.X)
        self.assertIs(match.phase, MatchPhase.GAME_OVER)
        self.assertEqual(match.winning_line(), tuple(Coordinates(0, c) for c in range(3)))
        before = match.board.rows()
        with self.assertRaises(MatchFinished):
            match.attempt_move(Coordinates(2, 2))
        self.assertEqual(match.board.rows(), before)

    def test_o_wins_on_anti_diagonal(self):
        match = Match(3)
        outcome = play(match, (0, 0), (0, 2), (0, 1), (1, 1), (2, 2), (2, 0))
        self.assertIs(outcome, MatchOutcome.WIN_O)

    def test_full_board_without_line_is_draw(self):
        # X O X / X O O / O X X
        match = Match(3)
        outcome = play(match, (0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                       (1, 2), (2, 1), (2, 0), (2, 2))
        self.assertIs(outcome, MatchOutcome.DRAW)
        self.assertIsNone(outcome.winner)
        self.assertIs(match.phase, MatchPhase.GAME_OVER)
        with self.assertRaises(MatchFinished):
            match.attempt_move(Coordinates(0, 0))

    def test_occupied_cell_keeps_turn_and_board(self):
        match = Match(3)
        play(match, (1, 1))
        before = match.board.rows()
        with self.assertRaises(CellOccupied):
            match.attempt_move(Coordinates(1, 1))
        self.assertIs(match.turn, TurnOwner.O)
        self.assertEqual(match.board.rows(), before)
        self.assertEqual(match.move_count, 1)

    def test_out_of_bounds_keeps_board(self):
        match = Match(3)
        with self.assertRaises(OutOfBounds):
            match.attempt_move(Coordinates(3, 1))
        self.assertEqual(len(match.board.empty_cells()), 9)
        self.assertIs(match.turn, TurnOwner.X)

    def test_larger_board_needs_full_line(self):
        match = Match(4)
        # three X in the top row is not enough on 4x4
        outcome = play(match, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (2, 2))
        self.assertIs(outcome, MatchOutcome.IN_PROGRESS)
        outcome = play(match, (0, 3))
        self.assertIs(outcome, MatchOutcome.WIN_X)

    def test_larger_board_column_win(self):
        match = Match(5)
        moves = []
        for r in range(5):
            moves.append((r, 4))
            if r < 4:
                moves.append((r, 0))
        self.assertIs(play(match, *moves), MatchOutcome.WIN_X)

    def test_single_cell_board_wins_immediately(self):
        match = Match(1)
        self.assertIs(play(match, (0, 0)), MatchOutcome.WIN_X)


if __name__ == "__main__":
    unittest.main()
