"""Core enumerations for the move-helper domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color, numbered the way board markup reports it."""

    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> Color:
        return Color(3 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(str, Enum):
    """Chess piece kinds, encoded as their lowercase letter."""

    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"

    @classmethod
    def from_letter(cls, letter: str) -> PieceType | None:
        """Piece type for *letter* (any case), or ``None`` if unknown."""
        try:
            return cls(letter.lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


# Pieces a pawn may promote to.
PROMOTION_TYPES: frozenset[PieceType] = frozenset(
    {PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}
)


class MoveType(str, Enum):
    """How a move is notated."""

    MOVE = "move"
    CAPTURE = "capture"
    SHORT_CASTLING = "short-castling"
    LONG_CASTLING = "long-castling"

    @property
    def is_castling(self) -> bool:
        return self in (MoveType.SHORT_CASTLING, MoveType.LONG_CASTLING)

    def __str__(self) -> str:
        return self.value
