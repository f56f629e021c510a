import logging

from ..config import (
    WINDOW_TITLE, STATUS_TURN_STYLE, STATUS_WIN_STYLE, STATUS_DRAW_STYLE
)
from ..game_engine import GameEngine, Outcome
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: scores, status, board and round buttons
    """
    def __init__(self, engine=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine(self)
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._shown_once = False

        self._setup_ui()
        self.engine.state_changed.connect(self._on_state_changed)
        self.engine.round_finished.connect(self._on_round_finished)
        self._on_state_changed(self.engine.state)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
            QPushButton { padding: 8px; font-weight: bold; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + scores + status
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # round buttons + hint
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.engine.new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _score_box(self, caption):
        # caption over a big number, returns (widget, number label)
        box = QWidget(); vl = QVBoxLayout(box)
        name = QLabel(caption); name.setAlignment(Qt.AlignCenter)
        value = QLabel("0"); value.setAlignment(Qt.AlignCenter)
        f = QFont(); f.setPointSize(20); f.setBold(True); value.setFont(f)
        vl.addWidget(name); vl.addWidget(value)
        return box, value

    def _create_header(self):
        self.header_widget = QWidget()
        vl = QVBoxLayout(self.header_widget)
        title = QLabel(WINDOW_TITLE)
        f = QFont(); f.setPointSize(24); f.setBold(True); title.setFont(f)
        title.setAlignment(Qt.AlignCenter)
        vl.addWidget(title)

        scores = QHBoxLayout()
        box_x, self.score_x_label = self._score_box("Player X")
        box_o, self.score_o_label = self._score_box("Player O")
        scores.addWidget(box_x); scores.addWidget(box_o)
        vl.addLayout(scores)

        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        vl.addWidget(self.message_label)

    def _create_bottom_controls(self):
        # left button restarts the round, right one clears scores too
        self.controls_bottom_widget = QWidget()
        vl = QVBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        hl = QHBoxLayout()
        self.round_button = QPushButton("Restart")
        self.round_button.clicked.connect(self._on_round_button)
        self.new_game_button = QPushButton("Reset Scores")
        self.new_game_button.clicked.connect(self.engine.new_game)
        hl.addWidget(self.round_button); hl.addWidget(self.new_game_button)
        vl.addLayout(hl)
        self.hint_label = QLabel("")
        self.hint_label.setAlignment(Qt.AlignCenter)
        self.hint_label.setStyleSheet("color: #999;")
        vl.addWidget(self.hint_label)

    @Slot(object)
    def _on_state_changed(self, state):
        """
        redraw everything from the engine snapshot
        """
        self.score_x_label.setText(str(state.score_x))
        self.score_o_label.setText(str(state.score_o))
        self.message_label.setText(state.message)
        if state.outcome is Outcome.WIN:
            self.message_label.setStyleSheet(STATUS_WIN_STYLE)
        elif state.outcome is Outcome.DRAW:
            self.message_label.setStyleSheet(STATUS_DRAW_STYLE)
        else:
            self.message_label.setStyleSheet(STATUS_TURN_STYLE)

        if state.is_game_over:
            self.round_button.setText("Play Again")
            self.new_game_button.setText("New Game")
        else:
            self.round_button.setText("Restart")
            self.new_game_button.setText("Reset Scores")
        self.board_widget.set_accept_clicks(not state.is_game_over)
        self.hint_label.setText(
            f"Tap a cell to play. {state.current_player.value} starts."
        )

    @Slot(object)
    def _on_round_finished(self, state):
        # one line per finished round, running score included
        result = "draw" if state.outcome is Outcome.DRAW else f"{state.winner.value} won"
        logger.info("round over: %s (X %d - O %d)", result, state.score_x, state.score_o)

    @Slot(int)
    def _on_cell_clicked(self, index):
        self.engine.make_move(index)

    @Slot()
    def _on_round_button(self):
        # over: winner opens next round; mid-round: plain restart with X
        if self.engine.is_game_over:
            self.engine.play_again()
        else:
            self.engine.reset()

    def showEvent(self, event):
        # fresh round on first show, scores untouched
        if not self._shown_once:
            self._shown_once = True
            logger.debug("window shown, resetting board")
            self.engine.reset()
        super().showEvent(event)
