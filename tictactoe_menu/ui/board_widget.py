from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from .. import constants
from ..board import Bounds, Cell, Point, coordinates_to_pixel

class BoardWidget(QWidget):
    """
    custom widget to draw and click on the NxN board
    """
    move_played = Signal()  # emits after an accepted click

    def __init__(self, app, parent=None):
        super().__init__(parent)
        self.app = app                  # reference to core state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(constants.MIN_BOARD_PIXELS, constants.MIN_BOARD_PIXELS))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def board_bounds(self):
        """
        centred square in widget (y-down) pixels
        """
        w, h = self.width(), self.height()
        side = min(w, h)
        return Bounds((w - side) / 2, (h - side) / 2, side)

    def paintEvent(self, event):
        """
        draw tiles, marks, and the winning line
        """
        snap = self.app.snapshot()
        if snap.rows is None:
            return
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            bounds = self.board_bounds()
            size = len(snap.rows)
            cell_size = bounds.side / size
            painter.fillRect(self.rect(), QColor(constants.MENU_BACKGROUND))
            painter.fillRect(QRectF(bounds.x, bounds.y, bounds.side, bounds.side),
                             QColor(constants.BOARD_BACKGROUND))
            pad = constants.TILE_PADDING / 2
            for r, row in enumerate(snap.rows):
                for c, cell in enumerate(row):
                    x = bounds.x + c*cell_size
                    y = bounds.y + r*cell_size
                    painter.fillRect(QRectF(x+pad, y+pad, cell_size-2*pad, cell_size-2*pad),
                                     QColor(constants.TILE_COLOR))
                    if cell is Cell.EMPTY: continue
                    cx, cy = x + cell_size/2, y + cell_size/2
                    rad = cell_size/2 * 0.6
                    if cell is Cell.X:
                        painter.setPen(QPen(QColor(constants.X_COLOR), 4))
                        # two crossing lines
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.setPen(QPen(QColor(constants.O_COLOR), 4))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # strike through winning line
            if snap.winning_line:
                first = coordinates_to_pixel(bounds, cell_size, snap.winning_line[0], y_axis_up=False)
                last = coordinates_to_pixel(bounds, cell_size, snap.winning_line[-1], y_axis_up=False)
                painter.setPen(QPen(QColor(constants.WIN_LINE_COLOR), 8, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(QPointF(first.x, first.y), QPointF(last.x, last.y))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        hand the click to the core, emit when a move was accepted
        """
        if not self._accept_clicks or self.app.match is None:
            return
        pos = event.position()
        # board widget space has y pointing down
        if self.app.pointer_click(Point(pos.x(), pos.y()), self.board_bounds(), y_axis_up=False):
            self.move_played.emit()  # notify main window
