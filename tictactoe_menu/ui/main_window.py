import logging

from .. import constants
from ..app import GameApp, TopLevelMode
from ..game_logic import MatchOutcome
from ..menu import MenuAction, MenuScreen
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QStackedWidget, QButtonGroup, QSizePolicy
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

class TicTacToeWindow(QMainWindow):
    """
    main window: menu screens + board, all state lives in GameApp
    """
    def __init__(self, app=None):
        """
        init core, ui pages, signals
        """
        super().__init__()
        self.app = app if app is not None else GameApp()
        self.board_widget = BoardWidget(self.app, parent=self)
        self.pages = {}            # MenuScreen / "game" -> page widget
        self.option_groups = {}    # MenuScreen -> QButtonGroup of option buttons

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + stacked pages'''
        self.setWindowTitle(constants.GAME_STRING)
        side = int(constants.BOARD_LENGTH)
        self.resize(side, side + constants.BUTTON_HEIGHT * 2)
        self.setStyleSheet(f"""
            QMainWindow, QStackedWidget {{ background-color: {constants.MENU_BACKGROUND}; }}
            QLabel {{ color: {constants.TEXT_COLOR}; }}
            QPushButton {{
                background-color: {constants.NORMAL_BUTTON};
                color: {constants.TEXT_COLOR};
                border: none;
                font-size: {constants.BUTTON_FONT_SIZE}px;
            }}
            QPushButton:hover {{ background-color: {constants.HOVERED_BUTTON}; }}
            QPushButton:pressed, QPushButton:checked {{ background-color: {constants.PRESSED_BUTTON}; }}
            QPushButton:checked:hover {{ background-color: {constants.HOVERED_PRESS_BUTTON}; }}
        """)
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self._add_page(MenuScreen.MAIN, self._create_main_menu())
        self._add_page(MenuScreen.SETTINGS, self._create_settings_menu())
        self._add_page(MenuScreen.SETTINGS_BOARD_SIZE, self._create_option_menu(
            MenuScreen.SETTINGS_BOARD_SIZE, constants.BOARD_SIZE_SETTING_STRING,
            self.app.settings.board_size.options))
        self._add_page(MenuScreen.SETTINGS_SEARCH_DEPTH, self._create_option_menu(
            MenuScreen.SETTINGS_SEARCH_DEPTH, constants.SEARCH_DEPTH_SETTING_STRING,
            self.app.settings.search_depth.options))
        self._add_page("game", self._create_game_page())

    def _add_page(self, key, widget):
        self.pages[key] = widget
        self.stack.addWidget(widget)

    def _menu_button(self, text, action):
        # one full-size button bound to a menu action
        button = QPushButton(text)
        button.setFixedSize(constants.BUTTON_WIDTH, constants.BUTTON_HEIGHT)
        button.clicked.connect(lambda checked=False: self._on_menu_action(action))
        return button

    def _column(self, widgets):
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setSpacing(constants.BUTTON_MARGIN)
        layout.addStretch(1)
        for w in widgets:
            layout.addWidget(w, alignment=Qt.AlignCenter)
        layout.addStretch(1)
        return page

    def _create_main_menu(self):
        title = QLabel(constants.GAME_STRING)
        f = QFont(); f.setPointSize(constants.TITLE_FONT_SIZE); f.setBold(True)
        title.setFont(f)
        return self._column([
            title,
            self._menu_button(constants.PLAY_AI_STRING, MenuAction.PLAY_AI),
            self._menu_button(constants.PLAY_AGAINST_PLAYER_STRING, MenuAction.PLAY_PLAYERS),
            self._menu_button(constants.SETTINGS_STRING, MenuAction.SETTINGS),
            self._menu_button(constants.QUIT_STRING, MenuAction.QUIT),
        ])

    def _create_settings_menu(self):
        return self._column([
            self._menu_button(constants.SEARCH_DEPTH_SETTING_STRING, MenuAction.SETTINGS_SEARCH_DEPTH),
            self._menu_button(constants.BOARD_SIZE_SETTING_STRING, MenuAction.SETTINGS_BOARD_SIZE),
            self._menu_button(constants.BACK_STRING, MenuAction.BACK),
        ])

    def _create_option_menu(self, screen, label, options):
        '''label + one checkable button per value + back'''
        row = QWidget()
        hl = QHBoxLayout(row)
        hl.addWidget(QLabel(label))
        group = QButtonGroup(self)
        group.setExclusive(True)
        for value in options:
            b = QPushButton(str(value))
            b.setCheckable(True)
            b.setFixedSize(constants.OPTION_BUTTON_SIDE, constants.OPTION_BUTTON_SIDE)
            group.addButton(b, value)
            hl.addWidget(b)
        group.idClicked.connect(self._on_option_clicked)
        self.option_groups[screen] = group
        return self._column([row, self._menu_button(constants.BACK_STRING, MenuAction.BACK)])

    def _create_game_page(self):
        page = QWidget()
        layout = QVBoxLayout(page)
        top = QHBoxLayout()
        back = self._menu_button(constants.BACK_STRING, MenuAction.BACK_TO_MAIN_MENU)
        top.addWidget(back)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        top.addWidget(self.message_label)
        layout.addLayout(top)
        layout.addWidget(self.board_widget, 1)
        self.board_widget.move_played.connect(self._on_move_played)
        return page

    def _update_message(self, text, is_success=False):
        # status text under the back button
        style = "color: lime; font-weight: bold;" if is_success else f"color: {constants.TEXT_COLOR};"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _on_menu_action(self, action):
        self.app.handle_menu_action(action)
        if self.app.quit_requested:
            self.close()
            return
        self._refresh()

    @Slot(int)
    def _on_option_clicked(self, value):
        self.app.select_option(value)
        self._refresh()

    @Slot()
    def _on_move_played(self):
        # rejected clicks never get here, nothing to redraw
        self._refresh()

    def _refresh(self):
        '''sync visible page + widgets from the core snapshot'''
        snap = self.app.snapshot()
        if snap.mode is TopLevelMode.IN_MATCH:
            self.stack.setCurrentWidget(self.pages["game"])
            if snap.outcome is MatchOutcome.DRAW:
                self._update_message("it's a draw!", is_success=True)
            elif snap.outcome.winner is not None:
                self._update_message(f"player {snap.outcome.winner.value} wins!", is_success=True)
            else:
                self._update_message(f"player {snap.turn.value}'s turn")
            self.board_widget.set_accept_clicks(not snap.outcome.finished)
            self.board_widget.update()
            return
        self.stack.setCurrentWidget(self.pages[snap.screen])
        values = {
            MenuScreen.SETTINGS_BOARD_SIZE: snap.board_size,
            MenuScreen.SETTINGS_SEARCH_DEPTH: snap.search_depth,
        }
        for screen, group in self.option_groups.items():
            button = group.button(values[screen])
            if button is not None:
                button.setChecked(True)

    def closeEvent(self, event):
        logger.info("window closed")
        event.accept()
