"""Single entry point over the supported move grammars."""

from __future__ import annotations

from chesshelper.core.move import MoveDescriptor
from chesshelper.core.notation.algebraic import parse_algebraic
from chesshelper.core.notation.coordinate import parse_from_to

# Coordinate input comes first: "e2e4" is also a valid pawn move in
# algebraic notation, but the coordinate reading lets any piece move.
_GRAMMARS = (parse_from_to, parse_algebraic)


def parse(text: str | None) -> MoveDescriptor | None:
    """Parse user input into a :class:`MoveDescriptor`, or ``None``."""
    if not text:
        return None
    for grammar in _GRAMMARS:
        descriptor = grammar(text)
        if descriptor is not None:
            return descriptor
    return None
