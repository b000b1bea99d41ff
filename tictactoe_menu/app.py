import logging
from dataclasses import dataclass
from enum import Enum

from .board import pixel_to_coordinates
from .errors import GameError
from .game_logic import Match, TurnOwner
from .menu import MenuAction, MenuEffect, MenuMachine, MenuScreen, Settings

logger = logging.getLogger(__name__)


class TopLevelMode(Enum):
    IN_MENU = "in_menu"
    IN_MATCH = "in_match"


@dataclass(frozen=True)
class Snapshot:
    """
    read-only view for the presentation layer
    match fields stay None outside a match
    """
    mode: TopLevelMode
    screen: MenuScreen
    board_size: int
    search_depth: int
    rows: tuple = None
    turn: TurnOwner = TurnOwner.NONE
    outcome: object = None
    phase: object = None
    winning_line: tuple = None


class GameApp:
    """
    owns settings, the menu machine and at most one match
    errors from either machine are logged and swallowed here
    """
    def __init__(self, settings=None):
        self.settings = settings if settings is not None else Settings()
        self.menu = MenuMachine(self.settings)
        self.mode = TopLevelMode.IN_MENU
        self.match = None               # only set while IN_MATCH
        self.quit_requested = False

    # ------------------------------------------------------------------ menu

    def handle_menu_action(self, action):
        """
        returns False when the action was rejected
        """
        if self.mode is TopLevelMode.IN_MATCH and action is not MenuAction.BACK_TO_MAIN_MENU:
            logger.debug("menu action %s ignored during match", action.value)
            return False
        try:
            effect = self.menu.dispatch(action)
        except GameError as exc:
            logger.debug("rejected: %s", exc)
            return False
        if effect is MenuEffect.START_MATCH:
            self._start_match()
        elif effect is MenuEffect.LEAVE_MATCH:
            self._leave_match()
        elif effect is MenuEffect.QUIT:
            logger.info("quit requested")
            self.quit_requested = True
        return True

    def select_option(self, value):
        if self.mode is not TopLevelMode.IN_MENU:
            return False
        try:
            self.menu.select(value)
        except GameError as exc:
            logger.debug("rejected: %s", exc)
            return False
        return True

    def back_to_main_menu(self):
        return self.handle_menu_action(MenuAction.BACK_TO_MAIN_MENU)

    def _start_match(self):
        size = self.settings.board_size.value
        self.match = Match(size)
        self.mode = TopLevelMode.IN_MATCH
        logger.info("new %dx%d match", size, size)

    def _leave_match(self):
        self.match = None
        self.mode = TopLevelMode.IN_MENU
        logger.info("back to main menu")

    # ----------------------------------------------------------------- match

    def play_cell(self, coords):
        """
        returns True if the move was accepted
        """
        if self.mode is not TopLevelMode.IN_MATCH or self.match is None:
            return False
        try:
            self.match.attempt_move(coords)
        except GameError as exc:
            logger.debug("rejected: %s", exc)
            return False
        return True

    def pointer_click(self, position, bounds, y_axis_up=True):
        """
        map a click inside bounds to a cell and play it
        """
        if self.match is None:
            return False
        cell_size = bounds.side / self.match.board.size
        coords = pixel_to_coordinates(bounds, cell_size, position, y_axis_up)
        logger.debug("click at (%.1f, %.1f) -> %s", position.x, position.y, coords)
        if coords is None:
            return False
        return self.play_cell(coords)

    # -------------------------------------------------------------- snapshot

    def snapshot(self):
        base = dict(
            mode=self.mode,
            screen=self.menu.screen,
            board_size=self.settings.board_size.value,
            search_depth=self.settings.search_depth.value,
        )
        if self.match is None:
            return Snapshot(**base)
        return Snapshot(
            rows=self.match.board.rows(),
            turn=self.match.turn,
            outcome=self.match.outcome,
            phase=self.match.phase,
            winning_line=self.match.winning_line(),
            **base,
        )
