# -----------------------------------------------------------------------------
# SETTINGS DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_BOARD_SIZE = 3
DEFAULT_SEARCH_DEPTH = 4

# values offered on the settings screens (3..8 inclusive)
BOARD_SIZE_OPTIONS = tuple(range(3, 9))
SEARCH_DEPTH_OPTIONS = tuple(range(3, 9))

# -----------------------------------------------------------------------------
# BOARD GEOMETRY
# -----------------------------------------------------------------------------

BOARD_LENGTH = 600.0      # side of the board in pixels
TILE_PADDING = 4.0        # gap drawn between tiles
MIN_BOARD_PIXELS = 150

# -----------------------------------------------------------------------------
# COLORS
# -----------------------------------------------------------------------------

NORMAL_BUTTON = "#262626"
HOVERED_BUTTON = "#404040"
HOVERED_PRESS_BUTTON = "#40a640"
PRESSED_BUTTON = "#59bf59"
TEXT_COLOR = "#e6e6e6"
MENU_BACKGROUND = "#808080"

BOARD_BACKGROUND = "#ffffff"
TILE_COLOR = "#000000"
X_COLOR = "#ff4040"
O_COLOR = "#4060ff"
WIN_LINE_COLOR = "#40ff40"

# -----------------------------------------------------------------------------
# BUTTON METRICS
# -----------------------------------------------------------------------------

BUTTON_WIDTH = 250
BUTTON_HEIGHT = 65
BUTTON_MARGIN = 20
OPTION_BUTTON_SIDE = 50
BUTTON_FONT_SIZE = 24
TITLE_FONT_SIZE = 48

# -----------------------------------------------------------------------------
# STRINGS
# -----------------------------------------------------------------------------

GAME_STRING = "Tic Tac Toe"
PLAY_AI_STRING = "Play vs AI"
PLAY_AGAINST_PLAYER_STRING = "Play 1vs1"
SETTINGS_STRING = "Settings"
QUIT_STRING = "Quit"
SEARCH_DEPTH_SETTING_STRING = "AI Depth"
BOARD_SIZE_SETTING_STRING = "Matrix size"
BACK_STRING = "Back"
