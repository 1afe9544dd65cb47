"""BoardWidget — a playable board that takes moves by press and release."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QFont, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from chesshelper.board.geometry import BoardRect
from chesshelper.board.position import PositionBoard
from chesshelper.core.enums import Color, PieceType
from chesshelper.core.move import ConcreteMove
from chesshelper.core.types import Square, file_of, make_square, rank_of
from chesshelper.ui.promotion import PromotionBar
from chesshelper.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardWidget(QWidget):
    """Draws a :class:`PositionBoard` and lets the user drag pieces.

    A move is a button press on the origin square and a release on the
    target square. A promoting pawn opens the :class:`PromotionBar`; the
    move completes once a piece is picked there.

    Signals:
        move_made(ConcreteMove): Emitted after a move has been played.
    """

    move_made = pyqtSignal(ConcreteMove)

    def __init__(self, position: PositionBoard, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._position = position
        self._theme = BoardTheme.default()
        self._flipped = False
        self._press_sq: Square | None = None
        self._pending_promotion: tuple[Square, Square] | None = None
        self._last_move: ConcreteMove | None = None

        self._promotion_bar = PromotionBar(self)
        self._promotion_bar.piece_chosen.connect(self._on_promotion_chosen)

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def position(self) -> PositionBoard:
        return self._position

    @property
    def promotion_bar(self) -> PromotionBar:
        return self._promotion_bar

    def set_position(self, position: PositionBoard) -> None:
        """Show another position (cancels any drag or pending promotion)."""
        self._position = position
        self._press_sq = None
        self._cancel_promotion()
        self._last_move = None
        self.update()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self.update()

    def is_flipped(self) -> bool:
        return self._flipped

    def board_rect(self) -> BoardRect:
        """Board area inside the widget, anchored at the top-left corner."""
        return BoardRect(0.0, 0.0, float(min(self.width(), self.height())))

    # ── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        try:
            self._paint_squares(painter)
            self._paint_pieces(painter)
        finally:
            painter.end()

    def _square_rect(self, sq: Square) -> QRectF:
        w = self.board_rect().square_width
        col, row = file_of(sq), 7 - rank_of(sq)
        if self._flipped:
            col, row = 7 - col, 7 - row
        return QRectF(col * w, row * w, w, w)

    def _paint_squares(self, painter: QPainter) -> None:
        painter.setPen(QPen(Qt.PenStyle.NoPen))
        highlighted = set()
        if self._last_move is not None:
            highlighted = {self._last_move.from_sq, self._last_move.to_sq}
        for file in range(8):
            for rank in range(8):
                sq = make_square(file, rank)
                rect = self._square_rect(sq)
                is_dark = (file + rank) % 2 == 0
                painter.fillRect(
                    rect, self._theme.dark_square if is_dark else self._theme.light_square
                )
                if sq in highlighted:
                    painter.fillRect(rect, self._theme.last_move)
                if sq == self._press_sq:
                    painter.fillRect(rect, self._theme.highlight_from)

    def _paint_pieces(self, painter: QPainter) -> None:
        w = self.board_rect().square_width
        painter.setFont(QFont("Adwaita Sans", max(8, int(w * 0.6))))
        for piece in self._position.get_pieces_setup().values():
            painter.setPen(
                self._theme.piece_white
                if piece.color == Color.WHITE
                else self._theme.piece_black
            )
            painter.drawText(
                self._square_rect(piece.area),
                Qt.AlignmentFlag.AlignCenter,
                piece.symbol,
            )

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        if self._pending_promotion is not None:
            self._cancel_promotion()
        self._press_sq = self._square_at(event)
        self.update()

    def mouseReleaseEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mouseReleaseEvent(event)
        from_sq, self._press_sq = self._press_sq, None
        to_sq = self._square_at(event)
        self.update()

        if from_sq is None or to_sq is None or from_sq == to_sq:
            return
        if not self._position.is_legal_move(from_sq, to_sq):
            _LOGGER.debug("Dropped illegal move %s%s", from_sq, to_sq)
            return
        if self._position.needs_promotion(from_sq, to_sq):
            self._ask_promotion(from_sq, to_sq)
            return
        self._play(ConcreteMove(from_sq, to_sq))

    def _square_at(self, event: QMouseEvent) -> Square | None:
        pos = event.position()
        return self.board_rect().square_at(pos.x(), pos.y(), flipped=self._flipped)

    # ── Promotion ────────────────────────────────────────────────────────

    def _ask_promotion(self, from_sq: Square, to_sq: Square) -> None:
        self._pending_promotion = (from_sq, to_sq)
        self._promotion_bar.set_color(self._position.side_to_move)
        self._promotion_bar.adjustSize()
        self._promotion_bar.move(0, 0)
        self._promotion_bar.show()
        self._promotion_bar.raise_()

    def _cancel_promotion(self) -> None:
        self._pending_promotion = None
        self._promotion_bar.hide()

    def _on_promotion_chosen(self, letter: str) -> None:
        if self._pending_promotion is None:
            return
        from_sq, to_sq = self._pending_promotion
        self._pending_promotion = None
        self._play(ConcreteMove(from_sq, to_sq, PieceType(letter)))

    def _play(self, move: ConcreteMove) -> None:
        if not self._position.push(move):
            _LOGGER.warning("Board refused move %s", move)
            return
        self._last_move = move
        self.update()
        self.move_made.emit(move)
