"""Promotion picker on the board and the helper that clicks it."""

from __future__ import annotations

from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QAbstractButton, QHBoxLayout, QPushButton, QWidget

from chesshelper.core.enums import Color, PieceType
from chesshelper.core.piece import PlacedPiece

_CHOICES = (PieceType.QUEEN, PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP)


class PromotionBar(QWidget):
    """Row of buttons shown over the board when a pawn promotes.

    Every button carries a ``piece`` property holding the piece letter.

    Signals:
        piece_chosen(str): Letter of the chosen piece.
    """

    piece_chosen = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._color = Color.WHITE
        self._buttons: dict[PieceType, QPushButton] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)
        for piece_type in _CHOICES:
            btn = QPushButton()
            btn.setFont(QFont("Adwaita Sans", 20))
            btn.setFixedSize(48, 48)
            btn.setObjectName(f"promotion_{piece_type.value}")
            btn.setProperty("piece", piece_type.value)
            btn.setToolTip(piece_type.name.capitalize())
            btn.clicked.connect(lambda checked, p=piece_type: self._choose(p))
            layout.addWidget(btn)
            self._buttons[piece_type] = btn
        self._refresh_symbols()
        self.hide()

    def set_color(self, color: Color) -> None:
        self._color = color
        self._refresh_symbols()

    def _refresh_symbols(self) -> None:
        for piece_type, btn in self._buttons.items():
            btn.setText(PlacedPiece(self._color, piece_type, "a1").symbol)

    def _choose(self, piece_type: PieceType) -> None:
        self.hide()
        self.piece_chosen.emit(piece_type.value)


def find_promotion_button(area: QWidget, piece: PieceType) -> QAbstractButton | None:
    """The button in *area* whose ``piece`` property is *piece*."""
    for button in area.findChildren(QAbstractButton):
        if button.property("piece") == piece.value:
            return button
    return None


def make_promotion_move(area: QWidget, piece: PieceType, delay_ms: int = 100) -> None:
    """Pick *piece* in the promotion *area* once it has settled.

    The area is hidden straight away so it does not flash, then restored
    after *delay_ms*. Nothing is clicked if the area was already hidden
    when this was called.
    """
    was_hidden = area.isHidden()
    area.hide()

    def _click() -> None:
        if was_hidden:
            return
        area.show()
        button = find_promotion_button(area, piece)
        if button is not None:
            button.click()

    QTimer.singleShot(delay_ms, _click)
