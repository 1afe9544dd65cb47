"""Tests for the python-chess backed board capability."""

import chess

from chesshelper.board.position import PositionBoard
from chesshelper.core.enums import Color, PieceType
from chesshelper.core.move import ConcreteMove
from chesshelper.core.notation import parse
from chesshelper.core.piece import PlacedPiece
from chesshelper.core.resolver import resolve

CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


class TestCapability:
    def test_starting_setup(self) -> None:
        setup = PositionBoard().get_pieces_setup()
        assert len(setup) == 32
        assert setup[0] == PlacedPiece(Color.WHITE, PieceType.ROOK, "a1")

    def test_legal_move(self) -> None:
        board = PositionBoard()
        assert board.is_legal_move("e2", "e4")
        assert not board.is_legal_move("e2", "e5")
        assert not board.is_legal_move("zz", "e4")

    def test_players_move(self) -> None:
        assert PositionBoard().is_players_move()
        assert PositionBoard(player_color=Color.WHITE).is_players_move()
        assert not PositionBoard(player_color=Color.BLACK).is_players_move()

    def test_no_move_after_mate(self) -> None:
        fen = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        assert not PositionBoard.from_fen(fen).is_players_move()

    def test_rules_rebuild_uses_live_turn(self) -> None:
        board = PositionBoard.from_fen(CASTLING_FEN)
        rebuilt = board.game_rules.board_from_setup(board.get_pieces_setup())
        assert rebuilt.turn == chess.WHITE
        assert rebuilt.has_kingside_castling_rights(chess.WHITE)


class TestResolveOnPosition:
    def test_knight_and_pawn(self) -> None:
        board = PositionBoard()
        assert resolve(board, parse("Nf3")) == [ConcreteMove("g1", "f3")]
        assert resolve(board, parse("e4")) == [ConcreteMove("e2", "e4")]
        assert resolve(board, parse("e2e4")) == [ConcreteMove("e2", "e4")]

    def test_b_pawn_push(self) -> None:
        board = PositionBoard()
        assert resolve(board, parse("b4")) == [ConcreteMove("b2", "b4")]
        assert resolve(board, parse("B3")) == [ConcreteMove("b2", "b3")]

    def test_b_pawn_promotion(self) -> None:
        board = PositionBoard.from_fen("7k/1P6/8/8/8/8/8/K7 w - - 0 1")
        assert resolve(board, parse("b8=Q")) == [
            ConcreteMove("b7", "b8", PieceType.QUEEN)
        ]

    def test_ambiguous_knights(self) -> None:
        board = PositionBoard.from_fen("4k3/8/8/8/8/8/8/1N2KN2 w - - 0 1")
        assert resolve(board, parse("Nd2")) == [
            ConcreteMove("b1", "d2"),
            ConcreteMove("f1", "d2"),
        ]
        assert resolve(board, parse("Nbd2")) == [ConcreteMove("b1", "d2")]

    def test_castling_both_sides(self) -> None:
        board = PositionBoard.from_fen(CASTLING_FEN, Color.WHITE)
        assert resolve(board, parse("O-O")) == [ConcreteMove("e1", "g1")]
        assert resolve(board, parse("O-O-O")) == [ConcreteMove("e1", "c1")]

    def test_black_castling(self) -> None:
        fen = CASTLING_FEN.replace(" w ", " b ")
        board = PositionBoard.from_fen(fen, Color.BLACK)
        assert resolve(board, parse("0-0")) == [ConcreteMove("e8", "g8")]

    def test_castling_through_attack(self) -> None:
        fen = "4kr2/8/8/8/8/8/8/R3K2R w KQ - 0 1"
        board = PositionBoard.from_fen(fen, Color.WHITE)
        assert resolve(board, parse("O-O")) == []
        assert resolve(board, parse("O-O-O")) == [ConcreteMove("e1", "c1")]

    def test_en_passant(self) -> None:
        board = PositionBoard.from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert resolve(board, parse("exd6e.p.")) == [ConcreteMove("e5", "d6")]

    def test_promotion(self) -> None:
        board = PositionBoard.from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1")
        assert resolve(board, parse("a8=N")) == [
            ConcreteMove("a7", "a8", PieceType.KNIGHT)
        ]


class TestPush:
    def test_push_promotion(self) -> None:
        board = PositionBoard.from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1")
        assert board.push(ConcreteMove("a7", "a8", PieceType.ROOK))
        assert board.board.piece_at(chess.A8) == chess.Piece(chess.ROOK, chess.WHITE)

    def test_push_defaults_to_queen(self) -> None:
        board = PositionBoard.from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1")
        assert board.needs_promotion("a7", "a8")
        assert board.push(ConcreteMove("a7", "a8"))
        assert board.board.piece_at(chess.A8) == chess.Piece(chess.QUEEN, chess.WHITE)

    def test_push_illegal(self) -> None:
        board = PositionBoard()
        assert not board.push(ConcreteMove("e2", "e5"))
        assert board.side_to_move == Color.WHITE

    def test_push_switches_side(self) -> None:
        board = PositionBoard()
        assert board.push(ConcreteMove("e2", "e4"))
        assert board.side_to_move == Color.BLACK
