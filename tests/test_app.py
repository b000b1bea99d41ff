import unittest

from tictactoe_menu.app import GameApp, TopLevelMode
from tictactoe_menu.board import Bounds, Cell, Coordinates, Point
from tictactoe_menu.game_logic import MatchOutcome, MatchPhase, TurnOwner
from tictactoe_menu.menu import MenuAction, MenuScreen


class TestGameApp(unittest.TestCase):
    def setUp(self):
        self.app = GameApp()

    def _start(self):
        self.assertTrue(self.app.handle_menu_action(MenuAction.PLAY_PLAYERS))

    def test_starts_in_menu_without_match(self):
        snap = self.app.snapshot()
        self.assertIs(snap.mode, TopLevelMode.IN_MENU)
        self.assertIs(snap.screen, MenuScreen.MAIN)
        self.assertIsNone(snap.rows)
        self.assertIs(snap.turn, TurnOwner.NONE)
        self.assertFalse(self.app.play_cell(Coordinates(0, 0)))

    def test_board_size_setting_applies_to_next_match(self):
        self.app.handle_menu_action(MenuAction.SETTINGS)
        self.app.handle_menu_action(MenuAction.SETTINGS_BOARD_SIZE)
        self.assertTrue(self.app.select_option(5))
        self.app.handle_menu_action(MenuAction.BACK)
        self.app.handle_menu_action(MenuAction.BACK)
        self._start()
        snap = self.app.snapshot()
        self.assertIs(snap.mode, TopLevelMode.IN_MATCH)
        self.assertEqual(len(snap.rows), 5)
        self.assertTrue(all(len(row) == 5 for row in snap.rows))
        self.assertIs(snap.turn, TurnOwner.X)

    def test_rejected_inputs_are_absorbed(self):
        self.assertFalse(self.app.handle_menu_action(MenuAction.BACK))
        self.assertFalse(self.app.select_option(4))
        self.app.handle_menu_action(MenuAction.SETTINGS)
        self.app.handle_menu_action(MenuAction.SETTINGS_BOARD_SIZE)
        self.assertFalse(self.app.select_option(12))
        self.assertEqual(self.app.settings.board_size.value, 3)
        self.assertIs(self.app.menu.screen, MenuScreen.SETTINGS_BOARD_SIZE)

    def test_menu_locked_during_match(self):
        self._start()
        self.assertFalse(self.app.handle_menu_action(MenuAction.SETTINGS))
        self.assertFalse(self.app.select_option(4))
        self.assertIs(self.app.mode, TopLevelMode.IN_MATCH)

    def test_occupied_click_changes_nothing(self):
        self._start()
        self.assertTrue(self.app.play_cell(Coordinates(0, 0)))
        before = self.app.snapshot()
        self.assertFalse(self.app.play_cell(Coordinates(0, 0)))
        self.assertEqual(self.app.snapshot(), before)
        self.assertIs(self.app.match.turn, TurnOwner.O)

    def test_win_then_further_moves_rejected(self):
        self._start()
        for r, c in [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]:
            self.assertTrue(self.app.play_cell(Coordinates(r, c)))
        snap = self.app.snapshot()
        self.assertIs(snap.outcome, MatchOutcome.WIN_X)
        self.assertIs(snap.phase, MatchPhase.GAME_OVER)
        self.assertEqual(len(snap.winning_line), 3)
        self.assertFalse(self.app.play_cell(Coordinates(2, 2)))
        self.assertIs(self.app.match.board.cell_at(Coordinates(2, 2)), Cell.EMPTY)

    def test_back_to_main_menu_discards_match(self):
        self._start()
        self.app.play_cell(Coordinates(1, 1))
        self.assertTrue(self.app.back_to_main_menu())
        self.assertIsNone(self.app.match)
        self.assertIs(self.app.mode, TopLevelMode.IN_MENU)
        self.assertIs(self.app.menu.screen, MenuScreen.MAIN)
        self._start()
        self.assertEqual(len(self.app.match.board.empty_cells()), 9)
        self.assertIs(self.app.match.turn, TurnOwner.X)

    def test_back_to_main_menu_outside_match_rejected(self):
        self.assertFalse(self.app.back_to_main_menu())
        self.assertIs(self.app.menu.screen, MenuScreen.MAIN)

    def test_pointer_click_maps_to_cell(self):
        self._start()
        bounds = Bounds(-300.0, -300.0, 600.0)
        # top-right cell in y-up space
        self.assertTrue(self.app.pointer_click(Point(250.0, 250.0), bounds))
        self.assertIs(self.app.match.board.cell_at(Coordinates(0, 2)), Cell.X)
        # outside the board
        self.assertFalse(self.app.pointer_click(Point(400.0, 0.0), bounds))
        self.assertIs(self.app.match.turn, TurnOwner.O)
        # widget space, y down: bottom-left cell
        self.assertTrue(self.app.pointer_click(Point(-250.0, 250.0), bounds, y_axis_up=False))
        self.assertIs(self.app.match.board.cell_at(Coordinates(2, 0)), Cell.O)

    def test_quit_sets_flag(self):
        self.assertTrue(self.app.handle_menu_action(MenuAction.QUIT))
        self.assertTrue(self.app.quit_requested)


if __name__ == "__main__":
    unittest.main()
