"""Move value objects: the parser's descriptor and the resolver's result."""

from __future__ import annotations

from dataclasses import dataclass

from chesshelper.core.enums import MoveType, PieceType
from chesshelper.core.types import WILDCARD, Square, SquarePattern


@dataclass(frozen=True, slots=True)
class MoveDescriptor:
    """A partially specified move as written by the user.

    ``piece`` is ``None`` when any piece may move (coordinate input).
    ``from_sq`` is a two-character origin pattern; ``from_sq`` and ``to_sq``
    are both ``None`` for castling, whose squares depend on the board.
    """

    piece: PieceType | None
    from_sq: SquarePattern | None
    to_sq: Square | None
    move_type: MoveType = MoveType.MOVE
    promotion: PieceType | None = None

    @property
    def piece_letter(self) -> str:
        """Piece letter, ``'.'`` for the wildcard."""
        return WILDCARD if self.piece is None else self.piece.value

    @property
    def is_castling(self) -> bool:
        return self.move_type.is_castling

    def __str__(self) -> str:
        if self.is_castling:
            return f"k {self.move_type}"
        promo = f"={self.promotion}" if self.promotion is not None else ""
        return f"{self.piece_letter} {self.from_sq}-{self.to_sq}{promo} {self.move_type}"


@dataclass(frozen=True, slots=True)
class ConcreteMove:
    """A fully specified origin/destination pair, ready to be played."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def as_tuple(self) -> tuple[str, ...]:
        """``(from, to)`` or ``(from, to, promotion)``."""
        if self.promotion is None:
            return (self.from_sq, self.to_sq)
        return (self.from_sq, self.to_sq, self.promotion.value)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += self.promotion.value
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
