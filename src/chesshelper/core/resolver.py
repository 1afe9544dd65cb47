"""Resolve a move descriptor into concrete moves on a given board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chesshelper.core.enums import MoveType, PieceType
from chesshelper.core.move import ConcreteMove, MoveDescriptor
from chesshelper.core.types import is_square, matches_pattern

if TYPE_CHECKING:
    from chesshelper.core.enums import Color
    from chesshelper.core.interfaces import IBoard
    from chesshelper.core.piece import PieceSetup, PlacedPiece

_LOGGER = logging.getLogger(__name__)

_CASTLING_FILE: dict[MoveType, str] = {
    MoveType.SHORT_CASTLING: "g",
    MoveType.LONG_CASTLING: "c",
}


def resolve(board: IBoard, descriptor: MoveDescriptor | None) -> list[ConcreteMove]:
    """Every concrete move on *board* that fits *descriptor*.

    Ambiguity is not resolved here: when several pieces fit, each yields a
    candidate, in snapshot order. An empty list means nothing fits or it is
    not the player's turn.
    """
    if not descriptor:
        return []
    if not board.is_players_move():
        _LOGGER.debug("Not the player's move; ignoring %s", descriptor)
        return []

    setup = board.get_pieces_setup()
    color = board.get_player_color()

    if descriptor.is_castling:
        moves = _resolve_castling(board, setup, color, descriptor.move_type)
    else:
        moves = _resolve_general(board, setup, color, descriptor)

    _LOGGER.debug("%s resolved to %d candidate(s)", descriptor, len(moves))
    return moves


def _resolve_general(
    board: IBoard,
    setup: PieceSetup,
    color: Color | None,
    descriptor: MoveDescriptor,
) -> list[ConcreteMove]:
    to_sq = descriptor.to_sq
    if to_sq is None or not is_square(to_sq):
        return []

    moves: list[ConcreteMove] = []
    for piece in setup.values():
        if not _fits(piece, descriptor, color):
            continue
        if not board.is_legal_move(piece.area, to_sq):
            continue
        moves.append(ConcreteMove(piece.area, to_sq, descriptor.promotion))
    return moves


def _fits(piece: PlacedPiece, descriptor: MoveDescriptor, color: Color | None) -> bool:
    if not is_square(piece.area):
        return False
    if descriptor.piece is not None and piece.type != descriptor.piece:
        return False
    if color is not None and piece.color != color:
        return False
    return matches_pattern(piece.area, descriptor.from_sq)


def _resolve_castling(
    board: IBoard,
    setup: PieceSetup,
    color: Color | None,
    move_type: MoveType,
) -> list[ConcreteMove]:
    rules = board.game_rules
    if rules is None:
        _LOGGER.debug("Board has no game rules; cannot castle")
        return []

    target_file = _CASTLING_FILE[move_type]
    for piece in setup.values():
        if piece.type != PieceType.KING or not is_square(piece.area):
            continue
        if color is not None and piece.color != color:
            continue
        king_to = target_file + piece.area[1]
        # The oracle gets its own copy so the board's snapshot stays untouched.
        if rules.is_legal_move(dict(setup), piece.area, king_to):
            return [ConcreteMove(piece.area, king_to)]
    return []
