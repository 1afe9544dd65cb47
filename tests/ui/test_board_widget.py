"""Tests for the playable board widget and its pointer executor."""

from __future__ import annotations

import chess
from PyQt6.QtTest import QTest

from chesshelper.board.position import PositionBoard
from chesshelper.core.enums import Color, PieceType
from chesshelper.core.move import ConcreteMove
from chesshelper.ui.board_widget import BoardWidget
from chesshelper.ui.pointer import PointerMoveExecutor

PROMOTION_FEN = "8/P6k/8/8/8/8/8/K7 w - - 0 1"


def _widget(position: PositionBoard | None = None) -> BoardWidget:
    widget = BoardWidget(position or PositionBoard())
    widget.resize(400, 400)
    widget.show()
    return widget


def test_board_rect_uses_shorter_side() -> None:
    widget = _widget()
    widget.resize(500, 400)
    assert widget.board_rect().width == 400


def test_pointer_drag_plays_move() -> None:
    widget = _widget()
    played: list[ConcreteMove] = []
    widget.move_made.connect(played.append)

    assert PointerMoveExecutor(widget).make_move(ConcreteMove("g1", "f3"))

    assert played == [ConcreteMove("g1", "f3")]
    assert widget.position.board.piece_at(chess.F3) == chess.Piece(
        chess.KNIGHT, chess.WHITE
    )


def test_pointer_respects_flipped_board() -> None:
    widget = _widget()
    widget.set_flipped(True)
    played: list[ConcreteMove] = []
    widget.move_made.connect(played.append)

    PointerMoveExecutor(widget, flipped=True).make_move(ConcreteMove("e2", "e4"))

    assert played == [ConcreteMove("e2", "e4")]


def test_orientation_mismatch_does_not_play() -> None:
    widget = _widget()
    played: list[ConcreteMove] = []
    widget.move_made.connect(played.append)

    # Unflipped e2/e4 land on d7/d5 of a flipped board: black pawn, white to move.
    widget.set_flipped(True)
    PointerMoveExecutor(widget).make_move(ConcreteMove("e2", "e4"))

    assert played == []


def test_illegal_drop_is_ignored() -> None:
    widget = _widget()
    played: list[ConcreteMove] = []
    widget.move_made.connect(played.append)

    PointerMoveExecutor(widget).make_move(ConcreteMove("e2", "e5"))

    assert played == []
    assert widget.position.side_to_move == Color.WHITE


def test_executor_rejects_bad_squares() -> None:
    widget = _widget()
    assert not PointerMoveExecutor(widget).make_move(ConcreteMove("z9", "e4"))


def test_promotion_drop_opens_bar() -> None:
    widget = _widget(PositionBoard.from_fen(PROMOTION_FEN))
    PointerMoveExecutor(widget).make_move(ConcreteMove("a7", "a8"))

    assert not widget.promotion_bar.isHidden()
    assert widget.position.board.piece_at(chess.A7) is not None


def test_promotion_is_picked_after_delay() -> None:
    widget = _widget(PositionBoard.from_fen(PROMOTION_FEN))
    played: list[ConcreteMove] = []
    widget.move_made.connect(played.append)
    executor = PointerMoveExecutor(
        widget, promotion_area=widget.promotion_bar, promotion_delay_ms=10
    )

    executor.make_move(ConcreteMove("a7", "a8", PieceType.KNIGHT))
    assert played == []
    assert widget.promotion_bar.isHidden()

    QTest.qWait(100)

    assert played == [ConcreteMove("a7", "a8", PieceType.KNIGHT)]
    assert widget.position.board.piece_at(chess.A8) == chess.Piece(
        chess.KNIGHT, chess.WHITE
    )


def test_set_position_cancels_pending_promotion() -> None:
    widget = _widget(PositionBoard.from_fen(PROMOTION_FEN))
    PointerMoveExecutor(widget).make_move(ConcreteMove("a7", "a8"))

    widget.set_position(PositionBoard())

    assert widget.promotion_bar.isHidden()
