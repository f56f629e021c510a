import sys
import argparse
import logging

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from tictactoe_score import config
from tictactoe_score.ui.main_window import TicTacToeWindow

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette from the config colours.
    """
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, QColor(*config.WINDOW_COLOR))
    palette.setColor(QPalette.WindowText, Qt.white)
    palette.setColor(QPalette.Base, QColor(*config.BASE_COLOR))
    palette.setColor(QPalette.AlternateBase, QColor(*config.ALT_BASE_COLOR))
    palette.setColor(QPalette.ToolTipBase, Qt.white)
    palette.setColor(QPalette.ToolTipText, Qt.black)
    palette.setColor(QPalette.Text, Qt.white)
    palette.setColor(QPalette.Button, QColor(*config.BUTTON_COLOR))
    palette.setColor(QPalette.ButtonText, Qt.white)
    palette.setColor(QPalette.BrightText, Qt.red)
    palette.setColor(QPalette.Highlight, QColor(*config.HIGHLIGHT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    palette.setColor(QPalette.PlaceholderText, QColor(*config.PLACEHOLDER_TEXT_COLOR))
    # Disabled roles
    disabled = QColor(*config.DISABLED_TEXT_COLOR)
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, disabled)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Two-player Tic-Tac-Toe with round scores")
    p.add_argument("--log-level", choices=LOG_LEVELS, default=config.DEFAULT_LOG_LEVEL,
                   help="logging verbosity")
    p.add_argument("--light", action="store_true",
                   help="keep the platform palette instead of the dark theme")
    # anything unknown is left for Qt (-platform, -style, ...)
    return p.parse_known_args(argv)


def main(argv=None):
    args, qt_args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s: %(message)s")

    app = QApplication(sys.argv[:1] + qt_args)
    if '-style' not in qt_args:
        app.setStyle('Fusion')
    if not args.light:
        apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
