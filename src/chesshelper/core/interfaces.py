"""Abstract capabilities the resolver and the UI layer depend on.

Follows Dependency Inversion: parsing and resolution depend on these ABCs,
not on a concrete board, page or widget.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesshelper.core.enums import Color
    from chesshelper.core.move import ConcreteMove
    from chesshelper.core.piece import PieceSetup
    from chesshelper.core.types import Square


class IGameRules(ABC):
    """Legality oracle that judges a move against a given snapshot."""

    @abstractmethod
    def is_legal_move(self, setup: PieceSetup, from_sq: Square, to_sq: Square) -> bool:
        """Is *from_sq* → *to_sq* legal with pieces placed as in *setup*?"""


class IBoard(ABC):
    """A board the helper can read and ask about, but never changes."""

    @abstractmethod
    def is_players_move(self) -> bool:
        """Is it the local side's turn?"""

    @abstractmethod
    def get_pieces_setup(self) -> PieceSetup:
        """Snapshot of every live piece."""

    @abstractmethod
    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Legality oracle under full chess rules."""

    def get_player_color(self) -> Color | None:
        """Color the local side plays, ``None`` when the board cannot tell."""
        return None

    @property
    def game_rules(self) -> IGameRules | None:
        """Snapshot-based oracle used for castling, if the board has one."""
        return None


class IMoveExecutor(ABC):
    """Performs a resolved move on the actual board UI."""

    @abstractmethod
    def make_move(self, move: ConcreteMove) -> bool:
        """Play *move*. Returns True if the move was dispatched."""
