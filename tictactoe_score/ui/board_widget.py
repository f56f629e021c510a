from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, Slot
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    BOARD_MIN_SIZE, BOARD_BACKGROUND, GRID_COLOR, GRID_WIDTH,
    X_COLOR, O_COLOR, MARK_WIDTH, MARK_SCALE, WIN_LINE_COLOR, WIN_LINE_WIDTH
)
from ..game_engine import Player

GRID = 3  # cells per side


class BoardWidget(QWidget):
    """
    paints the engine's board and reports clicks as cell indices
    """
    cell_clicked = Signal(int)  # emits index 0-8

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # read-only use, moves go through cell_clicked
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(BOARD_MIN_SIZE, BOARD_MIN_SIZE))
        self._accept_clicks = True
        self.engine.state_changed.connect(self._on_state_changed)

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    @Slot(object)
    def _on_state_changed(self, state):
        self.update()

    def _geometry(self):
        """
        square area (offset_x, offset_y, side) centred in the widget
        """
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def _cell_center(self, index, ox, oy, cell):
        row, col = divmod(index, GRID)
        return QPointF(ox + col*cell + cell/2, oy + row*cell + cell/2)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / GRID
        col = min(int((x-ox) // cell), GRID-1)
        row = min(int((y-oy) // cell), GRID-1)
        return row*GRID + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and strike through the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            cell = side / GRID
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), GRID_WIDTH))
            for i in range(1, GRID):
                x = ox + i*cell
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # marks
            rad = cell/2 * MARK_SCALE
            for index, mark in enumerate(self.engine.board):
                if mark is None:
                    continue
                c = self._cell_center(index, ox, oy, cell)
                if mark is Player.X:
                    painter.setPen(QPen(QColor(X_COLOR), MARK_WIDTH))
                    painter.drawLine(QPointF(c.x()-rad, c.y()-rad), QPointF(c.x()+rad, c.y()+rad))
                    painter.drawLine(QPointF(c.x()+rad, c.y()-rad), QPointF(c.x()-rad, c.y()+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), MARK_WIDTH))
                    painter.drawEllipse(c, rad, rad)
            # winning line, end cell to end cell
            line = self.engine.winning_line
            if line is not None:
                painter.setPen(QPen(QColor(WIN_LINE_COLOR), WIN_LINE_WIDTH,
                                    Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawLine(self._cell_center(line[0], ox, oy, cell),
                                 self._cell_center(line[-1], ox, oy, cell))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks on open cells only
        """
        if not self.accepts_clicks() or self.engine.is_game_over:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is None or not self.engine.is_cell_empty(index):
            return
        self.cell_clicked.emit(index)  # notify main window
