"""Board capability backed by a python-chess position."""

from __future__ import annotations

import chess

from chesshelper.core.enums import Color, PieceType
from chesshelper.core.interfaces import IBoard, IGameRules
from chesshelper.core.move import ConcreteMove
from chesshelper.core.piece import PieceSetup, PlacedPiece
from chesshelper.core.types import Square, is_square

_TO_CHESS_COLOR: dict[Color, chess.Color] = {
    Color.WHITE: chess.WHITE,
    Color.BLACK: chess.BLACK,
}
_FROM_CHESS_COLOR: dict[chess.Color, Color] = {
    v: k for k, v in _TO_CHESS_COLOR.items()
}


def _has_legal_move(board: chess.Board, from_sq: Square, to_sq: Square) -> bool:
    if not (is_square(from_sq) and is_square(to_sq)):
        return False
    origin = chess.parse_square(from_sq)
    target = chess.parse_square(to_sq)
    return any(
        move.from_square == origin and move.to_square == target
        for move in board.legal_moves
    )


class PositionRules(IGameRules):
    """Judges moves on a position rebuilt from a snapshot.

    Turn, castling rights and en-passant square come from the live board,
    since a snapshot only records where pieces stand.
    """

    __slots__ = ("_live",)

    def __init__(self, live: chess.Board) -> None:
        self._live = live

    def board_from_setup(self, setup: PieceSetup) -> chess.Board:
        board = chess.Board(None)
        for piece in setup.values():
            if not is_square(piece.area):
                continue
            board.set_piece_at(
                chess.parse_square(piece.area),
                chess.Piece(
                    chess.PIECE_SYMBOLS.index(piece.type.value),
                    _TO_CHESS_COLOR[piece.color],
                ),
            )
        board.turn = self._live.turn
        board.castling_rights = self._live.castling_rights
        board.ep_square = self._live.ep_square
        return board

    def is_legal_move(self, setup: PieceSetup, from_sq: Square, to_sq: Square) -> bool:
        return _has_legal_move(self.board_from_setup(setup), from_sq, to_sq)


class PositionBoard(IBoard):
    """An :class:`IBoard` over a :class:`chess.Board`.

    Args:
        board: The position to read. It is only changed through :meth:`push`.
        player_color: Side the local player controls; ``None`` lets the
            player move for whichever side is to move.
    """

    def __init__(
        self,
        board: chess.Board | None = None,
        player_color: Color | None = None,
    ) -> None:
        self._board = board if board is not None else chess.Board()
        self._player_color = player_color
        self._rules = PositionRules(self._board)

    @classmethod
    def from_fen(cls, fen: str, player_color: Color | None = None) -> PositionBoard:
        return cls(chess.Board(fen), player_color)

    @property
    def board(self) -> chess.Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return _FROM_CHESS_COLOR[self._board.turn]

    # ── IBoard ───────────────────────────────────────────────────────────

    def is_players_move(self) -> bool:
        if self._board.is_game_over():
            return False
        return self._player_color is None or self._player_color == self.side_to_move

    def get_player_color(self) -> Color | None:
        return self._player_color

    def get_pieces_setup(self) -> PieceSetup:
        setup: PieceSetup = {}
        pieces = sorted(self._board.piece_map().items())
        for index, (square, piece) in enumerate(pieces):
            setup[index] = PlacedPiece(
                color=_FROM_CHESS_COLOR[piece.color],
                type=PieceType(piece.symbol().lower()),
                area=chess.square_name(square),
            )
        return setup

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        return _has_legal_move(self._board, from_sq, to_sq)

    @property
    def game_rules(self) -> PositionRules:
        return self._rules

    # ── Mutation ─────────────────────────────────────────────────────────

    def to_chess_move(self, move: ConcreteMove) -> chess.Move | None:
        """The legal python-chess move for *move*, or ``None``.

        A pawn reaching the last rank without a promotion piece promotes
        to a queen.
        """
        if not (is_square(move.from_sq) and is_square(move.to_sq)):
            return None
        origin = chess.parse_square(move.from_sq)
        target = chess.parse_square(move.to_sq)
        promotion = None
        if move.promotion is not None:
            promotion = chess.PIECE_SYMBOLS.index(move.promotion.value)
        elif self.needs_promotion(move.from_sq, move.to_sq):
            promotion = chess.QUEEN
        candidate = chess.Move(origin, target, promotion=promotion)
        return candidate if candidate in self._board.legal_moves else None

    def needs_promotion(self, from_sq: Square, to_sq: Square) -> bool:
        """Would a pawn moving *from_sq* → *to_sq* promote?"""
        if not (is_square(from_sq) and is_square(to_sq)):
            return False
        origin = chess.parse_square(from_sq)
        target = chess.parse_square(to_sq)
        is_pawn = self._board.piece_type_at(origin) == chess.PAWN
        return is_pawn and chess.square_rank(target) in (0, 7)

    def push(self, move: ConcreteMove) -> bool:
        """Play *move* if legal. Returns True on success."""
        chess_move = self.to_chess_move(move)
        if chess_move is None:
            return False
        self._board.push(chess_move)
        return True
