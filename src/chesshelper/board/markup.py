"""Build a piece snapshot from the board page's piece elements.

Each piece on the page is an element whose class carries its square
(``piece square-52``) and whose inline style carries the piece image
(``background-image: url("…/wp.png")``): the first letter of the image
name is the color, the second the piece type.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from chesshelper.board.geometry import coords_to_square
from chesshelper.core.enums import Color, PieceType
from chesshelper.core.piece import PieceSetup, PlacedPiece

_LOGGER = logging.getLogger(__name__)

_SQUARE_RE = re.compile(r"square-(\d+)")
_IMAGE_RE = re.compile(r"([bw]?)(.)\.png\"?")


@dataclass(frozen=True, slots=True)
class PieceElement:
    """The two attributes of a piece element the snapshot needs."""

    class_name: str
    style: str


def piece_from_element(element: PieceElement) -> PlacedPiece | None:
    """Decode one element, or ``None`` if its attributes are unreadable."""
    square_match = _SQUARE_RE.search(element.class_name)
    image_match = _IMAGE_RE.search(element.style)
    if square_match is None or image_match is None:
        return None

    piece_type = PieceType.from_letter(image_match.group(2))
    if piece_type is None:
        return None
    try:
        area = coords_to_square(square_match.group(1))
    except ValueError:
        return None

    color = Color.BLACK if image_match.group(1) == "b" else Color.WHITE
    return PlacedPiece(color=color, type=piece_type, area=area)


def pieces_setup_from_elements(elements: Iterable[PieceElement]) -> PieceSetup:
    """Snapshot keyed by element index; unreadable elements are skipped."""
    setup: PieceSetup = {}
    for index, element in enumerate(elements):
        piece = piece_from_element(element)
        if piece is None:
            _LOGGER.warning("Skipping unreadable piece element: %r", element)
            continue
        setup[index] = piece
    return setup
