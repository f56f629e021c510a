import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

BOARD_CELLS = 9

# fixed 3x3 lines, row-major indices
WINNING_LINES = (
    frozenset((0, 1, 2)), frozenset((3, 4, 5)), frozenset((6, 7, 8)),  # rows
    frozenset((0, 3, 6)), frozenset((1, 4, 7)), frozenset((2, 5, 8)),  # cols
    frozenset((0, 4, 8)), frozenset((2, 4, 6)),                        # diags
)


class Player(Enum):
    """
    the two marks
    """
    X = "X"
    O = "O"

    @property
    def next(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Outcome(Enum):
    """
    how the current round stands
    """
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


class MoveRejected(Enum):
    """
    why make_move would ignore an index
    """
    GAME_ALREADY_OVER = "game already over"
    OUT_OF_RANGE = "index out of range"
    CELL_OCCUPIED = "cell occupied"


@dataclass(frozen=True)
class GameState:
    """
    read-only snapshot handed to observers
    """
    board: Tuple[Optional[Player], ...]
    current_player: Player
    is_game_over: bool
    message: str
    score_x: int
    score_o: int
    outcome: Outcome = Outcome.ONGOING
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None


def turn_message(player):
    return f"{player.value}'s turn"


class GameEngine(QObject):
    """
    board, turn, round result and running scores.

    Invalid moves are silently ignored: make_move never raises and never
    signals for an index it refuses. check_move reports the reason for
    callers that want it.
    """
    state_changed = Signal(object)   # GameState after every mutation
    round_finished = Signal(object)  # GameState when a move ends the round

    def __init__(self, parent=None):
        super().__init__(parent)
        self._board = [None] * BOARD_CELLS
        self._current_player = Player.X
        self._is_game_over = False
        self._message = turn_message(Player.X)
        self._scores = {Player.X: 0, Player.O: 0}
        self._outcome = Outcome.ONGOING
        self._winner = None
        self._winning_line = None

    # ------------------------------------------------------------------
    # published state
    # ------------------------------------------------------------------

    @property
    def board(self):
        return tuple(self._board)

    @property
    def current_player(self):
        return self._current_player

    @property
    def is_game_over(self):
        return self._is_game_over

    @property
    def message(self):
        return self._message

    @property
    def score_x(self):
        return self._scores[Player.X]

    @property
    def score_o(self):
        return self._scores[Player.O]

    @property
    def outcome(self):
        return self._outcome

    @property
    def winner(self):
        return self._winner

    @property
    def winning_line(self):
        return self._winning_line

    @property
    def state(self) -> GameState:
        return GameState(
            board=self.board,
            current_player=self._current_player,
            is_game_over=self._is_game_over,
            message=self._message,
            score_x=self.score_x,
            score_o=self.score_o,
            outcome=self._outcome,
            winner=self._winner,
            winning_line=self._winning_line,
        )

    def score_for(self, player):
        return self._scores[player]

    def is_cell_empty(self, index):
        """
        true if index is on the board and blank
        """
        return self._in_range(index) and self._board[index] is None

    def empty_cells(self):
        return [i for i, cell in enumerate(self._board) if cell is None]

    # ------------------------------------------------------------------
    # rules
    # ------------------------------------------------------------------

    @staticmethod
    def _in_range(index):
        # bool is an int subclass but never a cell index
        return (isinstance(index, int) and not isinstance(index, bool)
                and 0 <= index < BOARD_CELLS)

    def check_move(self, index) -> Optional[MoveRejected]:
        """
        reason make_move(index) would be ignored, or None if it is legal
        """
        if self._is_game_over:
            return MoveRejected.GAME_ALREADY_OVER
        if not self._in_range(index):
            return MoveRejected.OUT_OF_RANGE
        if self._board[index] is not None:
            return MoveRejected.CELL_OCCUPIED
        return None

    def winning_line_for(self, player) -> Optional[Tuple[int, int, int]]:
        """
        first line fully owned by player, recomputed from the board
        """
        owned = {i for i, cell in enumerate(self._board) if cell is player}
        for line in WINNING_LINES:
            if line <= owned:
                return tuple(sorted(line))
        return None

    def has_won(self, player):
        return self.winning_line_for(player) is not None

    def make_move(self, index):
        """
        place current player's mark at index, then settle win/draw/next turn.
        invalid calls are no-ops
        """
        rejected = self.check_move(index)
        if rejected is not None:
            logger.debug("ignored move at %r: %s", index, rejected.value)
            return

        mover = self._current_player
        self._board[index] = mover
        logger.debug("%s marked cell %d", mover.value, index)

        line = self.winning_line_for(mover)
        if line is not None:
            # winner stays current so they can open the next round
            self._is_game_over = True
            self._outcome = Outcome.WIN
            self._winner = mover
            self._winning_line = line
            self._scores[mover] += 1
            self._message = f"{mover.value} wins!"
            logger.info("%s wins on %s (X %d - O %d)",
                        mover.value, line, self.score_x, self.score_o)
        elif all(cell is not None for cell in self._board):
            self._is_game_over = True
            self._outcome = Outcome.DRAW
            self._message = "It's a draw!"
            logger.info("round drawn")
        else:
            self._current_player = mover.next
            self._message = turn_message(self._current_player)

        snapshot = self.state
        self.state_changed.emit(snapshot)
        if self._is_game_over:
            self.round_finished.emit(snapshot)

    # ------------------------------------------------------------------
    # rounds
    # ------------------------------------------------------------------

    def _clear_round(self, winner_starts_next):
        self._board = [None] * BOARD_CELLS
        self._is_game_over = False
        self._outcome = Outcome.ONGOING
        self._winner = None
        self._winning_line = None
        if not winner_starts_next:
            self._current_player = Player.X
        self._message = turn_message(self._current_player)

    def reset(self, winner_starts_next=False):
        """
        clear the board, keep scores.
        with winner_starts_next the current player (the winner, after a win)
        keeps the opening move; otherwise X opens
        """
        self._clear_round(winner_starts_next)
        logger.info("board reset, %s to start", self._current_player.value)
        self.state_changed.emit(self.state)

    def play_again(self):
        """
        next round: the winner opens after a win, X after a draw
        """
        self.reset(winner_starts_next=self._outcome is Outcome.WIN)

    def new_game(self):
        """
        fresh board with X to move and both scores zeroed
        """
        self._clear_round(False)
        self._scores = {Player.X: 0, Player.O: 0}
        logger.info("new game, scores cleared")
        self.state_changed.emit(self.state)
