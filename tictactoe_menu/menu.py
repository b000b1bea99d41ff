import logging
from dataclasses import dataclass, field
from enum import Enum

from . import constants
from .errors import InvalidAction, InvalidSize

logger = logging.getLogger(__name__)


class ChoiceSetting:
    """
    one setting with a fixed list of offered values, exactly one selected
    """
    def __init__(self, name, options, default):
        if default not in options:
            raise InvalidSize(f"{name}: default {default} not in {options}")
        self.name = name
        self.options = tuple(options)
        self.value = default

    def is_selected(self, value):
        return value == self.value

    def select(self, value):
        """
        select value, returns the one it replaced
        """
        if value not in self.options:
            raise InvalidSize(f"{self.name}: {value} not in {self.options}")
        previous = self.value
        if previous != value:
            self.value = value
            logger.info("%s: %d -> %d", self.name, previous, value)
        return previous

    def __repr__(self):
        return f"ChoiceSetting({self.name!r}, value={self.value})"


def _board_size_setting():
    return ChoiceSetting("board size", constants.BOARD_SIZE_OPTIONS,
                         constants.DEFAULT_BOARD_SIZE)


def _search_depth_setting():
    return ChoiceSetting("search depth", constants.SEARCH_DEPTH_OPTIONS,
                         constants.DEFAULT_SEARCH_DEPTH)


@dataclass
class Settings:
    # search_depth is kept for a future AI opponent, nothing reads it yet
    board_size: ChoiceSetting = field(default_factory=_board_size_setting)
    search_depth: ChoiceSetting = field(default_factory=_search_depth_setting)


class MenuScreen(Enum):
    MAIN = "main"
    SETTINGS = "settings"
    SETTINGS_BOARD_SIZE = "settings_board_size"
    SETTINGS_SEARCH_DEPTH = "settings_search_depth"
    DISABLED = "disabled"


class MenuAction(Enum):
    PLAY_AI = "play_ai"
    PLAY_PLAYERS = "play_players"
    SETTINGS = "settings"
    SETTINGS_BOARD_SIZE = "settings_board_size"
    SETTINGS_SEARCH_DEPTH = "settings_search_depth"
    BACK = "back"
    BACK_TO_MAIN_MENU = "back_to_main_menu"
    QUIT = "quit"


class MenuEffect(Enum):
    NONE = "none"
    START_MATCH = "start_match"
    LEAVE_MATCH = "leave_match"
    QUIT = "quit"


# (screen, action) -> (next screen, effect); Quit keeps the screen
TRANSITIONS = {
    (MenuScreen.MAIN, MenuAction.PLAY_AI): (MenuScreen.DISABLED, MenuEffect.START_MATCH),
    (MenuScreen.MAIN, MenuAction.PLAY_PLAYERS): (MenuScreen.DISABLED, MenuEffect.START_MATCH),
    (MenuScreen.MAIN, MenuAction.SETTINGS): (MenuScreen.SETTINGS, MenuEffect.NONE),
    (MenuScreen.MAIN, MenuAction.QUIT): (MenuScreen.MAIN, MenuEffect.QUIT),
    (MenuScreen.SETTINGS, MenuAction.SETTINGS_BOARD_SIZE): (MenuScreen.SETTINGS_BOARD_SIZE, MenuEffect.NONE),
    (MenuScreen.SETTINGS, MenuAction.SETTINGS_SEARCH_DEPTH): (MenuScreen.SETTINGS_SEARCH_DEPTH, MenuEffect.NONE),
    (MenuScreen.SETTINGS, MenuAction.BACK): (MenuScreen.MAIN, MenuEffect.NONE),
    (MenuScreen.SETTINGS_BOARD_SIZE, MenuAction.BACK): (MenuScreen.SETTINGS, MenuEffect.NONE),
    (MenuScreen.SETTINGS_SEARCH_DEPTH, MenuAction.BACK): (MenuScreen.SETTINGS, MenuEffect.NONE),
    (MenuScreen.DISABLED, MenuAction.BACK_TO_MAIN_MENU): (MenuScreen.MAIN, MenuEffect.LEAVE_MATCH),
}


class MenuMachine:
    """
    screen navigation; settings only change on their own sub-screen
    """
    def __init__(self, settings=None):
        self.settings = settings if settings is not None else Settings()
        self.screen = MenuScreen.MAIN

    def dispatch(self, action):
        """
        apply one action, returns the effect the caller must carry out
        """
        try:
            target, effect = TRANSITIONS[(self.screen, action)]
        except KeyError:
            raise InvalidAction(f"{action.value} not available on {self.screen.value}") from None
        if target is not self.screen:
            logger.info("menu: %s -> %s", self.screen.value, target.value)
        self.screen = target
        return effect

    def active_setting(self):
        if self.screen is MenuScreen.SETTINGS_BOARD_SIZE:
            return self.settings.board_size
        if self.screen is MenuScreen.SETTINGS_SEARCH_DEPTH:
            return self.settings.search_depth
        return None

    def select(self, value):
        """
        select value in the setting of the current screen
        """
        setting = self.active_setting()
        if setting is None:
            raise InvalidAction(f"no setting on {self.screen.value}")
        return setting.select(value)
