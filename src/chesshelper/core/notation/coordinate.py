"""Coordinate move notation: ``e2e4``."""

from __future__ import annotations

from chesshelper.core.enums import MoveType
from chesshelper.core.move import MoveDescriptor
from chesshelper.core.types import is_square


def parse_from_to(text: str) -> MoveDescriptor | None:
    """Parse ``<from><to>`` into a descriptor that lets any piece move.

    Exactly four characters, both squares fully specified; anything else
    returns ``None``.
    """
    token = text.strip().lower()
    if len(token) != 4:
        return None
    from_sq, to_sq = token[:2], token[2:]
    if not (is_square(from_sq) and is_square(to_sq)):
        return None
    return MoveDescriptor(
        piece=None, from_sq=from_sq, to_sq=to_sq, move_type=MoveType.MOVE
    )
