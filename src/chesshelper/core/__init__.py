"""Core domain layer — move notation and resolution, zero external dependencies.

Quick start::

    from chesshelper.core import parse, resolve

    descriptor = parse("Nbd7")
    for move in resolve(board, descriptor):
        print(move)
"""

from chesshelper.core.enums import PROMOTION_TYPES, Color, MoveType, PieceType
from chesshelper.core.interfaces import IBoard, IGameRules, IMoveExecutor
from chesshelper.core.move import ConcreteMove, MoveDescriptor
from chesshelper.core.notation import parse, parse_algebraic, parse_from_to
from chesshelper.core.piece import PieceSetup, PlacedPiece
from chesshelper.core.resolver import resolve
from chesshelper.core.types import (
    ANY_SQUARE,
    WILDCARD,
    Square,
    SquarePattern,
    file_of,
    is_square,
    make_pattern,
    make_square,
    matches_pattern,
    parse_square,
    rank_of,
)

__all__ = [
    # Enums
    "Color",
    "MoveType",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "ANY_SQUARE",
    "WILDCARD",
    "Square",
    "SquarePattern",
    "file_of",
    "is_square",
    "make_pattern",
    "make_square",
    "matches_pattern",
    "parse_square",
    "rank_of",
    # Domain objects
    "ConcreteMove",
    "MoveDescriptor",
    "PieceSetup",
    "PlacedPiece",
    # Capabilities
    "IBoard",
    "IGameRules",
    "IMoveExecutor",
    # Notation / resolution
    "parse",
    "parse_algebraic",
    "parse_from_to",
    "resolve",
]
