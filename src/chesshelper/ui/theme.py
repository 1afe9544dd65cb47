"""Board colours for the helper's board widget."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # square a drag started on
    last_move: QColor  # origin and destination of the last move
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            last_move=QColor(155, 199, 0, 105),  # green
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )
