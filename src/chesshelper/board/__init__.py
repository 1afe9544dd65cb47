"""Board adapters — reading a board page and backing the board capability."""

from chesshelper.board.geometry import (
    BoardRect,
    coords_to_square,
    square_class,
    square_to_coords,
)
from chesshelper.board.markup import (
    PieceElement,
    piece_from_element,
    pieces_setup_from_elements,
)
from chesshelper.board.position import PositionBoard, PositionRules

__all__ = [
    "BoardRect",
    "PieceElement",
    "PositionBoard",
    "PositionRules",
    "coords_to_square",
    "piece_from_element",
    "pieces_setup_from_elements",
    "square_class",
    "square_to_coords",
]
