"""PointerMoveExecutor — plays a move by simulating a mouse drag."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QApplication, QWidget

from chesshelper.board.geometry import BoardRect
from chesshelper.core.interfaces import IMoveExecutor
from chesshelper.core.move import ConcreteMove
from chesshelper.core.types import is_square
from chesshelper.ui.promotion import make_promotion_move

_LOGGER = logging.getLogger(__name__)


class PointerMoveExecutor(IMoveExecutor):
    """Sends a left-button press on the origin square and a release on the
    target square of *target*, the widget the board is drawn in.

    The board is assumed to fill the largest square anchored at the
    widget's top-left corner. When a move carries a promotion piece and a
    *promotion_area* is given, the piece is picked there after
    *promotion_delay_ms*.
    """

    def __init__(
        self,
        target: QWidget,
        *,
        flipped: bool = False,
        promotion_area: QWidget | None = None,
        promotion_delay_ms: int = 100,
    ) -> None:
        self._target = target
        self._flipped = flipped
        self._promotion_area = promotion_area
        self._promotion_delay_ms = promotion_delay_ms

    def set_flipped(self, flipped: bool) -> None:
        self._flipped = flipped

    def set_promotion_delay(self, delay_ms: int) -> None:
        self._promotion_delay_ms = delay_ms

    def board_rect(self) -> BoardRect:
        side = min(self._target.width(), self._target.height())
        return BoardRect(0.0, 0.0, float(side))

    def make_move(self, move: ConcreteMove) -> bool:
        if not (is_square(move.from_sq) and is_square(move.to_sq)):
            _LOGGER.warning("Cannot play move with invalid squares: %r", move)
            return False
        rect = self.board_rect()
        if rect.width <= 0:
            _LOGGER.warning("Board widget has no size; dropping move %s", move)
            return False

        self._send(
            QEvent.Type.MouseButtonPress,
            rect.square_center(move.from_sq, flipped=self._flipped),
            Qt.MouseButton.LeftButton,
        )
        self._send(
            QEvent.Type.MouseButtonRelease,
            rect.square_center(move.to_sq, flipped=self._flipped),
            Qt.MouseButton.NoButton,
        )

        if move.promotion is not None and self._promotion_area is not None:
            make_promotion_move(
                self._promotion_area, move.promotion, self._promotion_delay_ms
            )
        _LOGGER.info("Played %s", move)
        return True

    def _send(
        self,
        event_type: QEvent.Type,
        point: tuple[float, float],
        buttons: Qt.MouseButton,
    ) -> None:
        local = QPointF(*point)
        event = QMouseEvent(
            event_type,
            local,
            self._target.mapToGlobal(local),
            Qt.MouseButton.LeftButton,
            buttons,
            Qt.KeyboardModifier.NoModifier,
        )
        QApplication.sendEvent(self._target, event)
