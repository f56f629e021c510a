"""
app-wide constants: window, board drawing, status colours, palette
"""

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
BOARD_MIN_SIZE = 150          # px, board stays square
DEFAULT_LOG_LEVEL = "WARNING"

# -----------------------------------------------------------------------------
# BOARD DRAWING
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_COLOR = "#555"
GRID_WIDTH = 2
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
MARK_WIDTH = 4
MARK_SCALE = 0.7              # mark radius as a share of half a cell
WIN_LINE_COLOR = "#c8ff8a"
WIN_LINE_WIDTH = 8

# -----------------------------------------------------------------------------
# STATUS LABEL
# -----------------------------------------------------------------------------

STATUS_TURN_STYLE = f"color: {X_COLOR}; font-weight: bold;"
STATUS_WIN_STYLE = "color: lime; font-weight: bold;"
STATUS_DRAW_STYLE = "color: #eee; font-weight: bold;"

# -----------------------------------------------------------------------------
# DARK PALETTE (r, g, b)
# -----------------------------------------------------------------------------

WINDOW_COLOR = (53, 53, 53)
BASE_COLOR = (35, 35, 35)
ALT_BASE_COLOR = (53, 53, 53)
BUTTON_COLOR = (66, 66, 66)
HIGHLIGHT_COLOR = (42, 130, 218)
PLACEHOLDER_TEXT_COLOR = (160, 160, 160)
DISABLED_TEXT_COLOR = (127, 127, 127)
