"""Board snapshot value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chesshelper.core.enums import Color, PieceType
from chesshelper.core.types import Square

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class PlacedPiece:
    """A live piece on the board: who owns it, what it is, where it stands."""

    color: Color
    type: PieceType
    area: Square

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.type)]


# Opaque index → piece. One entry per live piece; iteration order is the
# order candidates are reported in.
PieceSetup: TypeAlias = dict[int, PlacedPiece]
