"""Square ↔ board-markup coordinates and on-screen pixel positions.

Board markup numbers squares by 1-based file and rank digits: ``e4`` is
file 5, rank 4, written ``square-54`` in a class name or ``"05"``/``"04"``
as a zero-padded pair.
"""

from __future__ import annotations

from dataclasses import dataclass

from chesshelper.core.types import Square, file_of, make_square, parse_square, rank_of

_SQUARE_CLASS_PREFIX = "square-"


def square_to_coords(square: Square) -> tuple[int, int]:
    """``'e4'`` → ``(5, 4)``."""
    sq = parse_square(square)
    return file_of(sq) + 1, rank_of(sq) + 1


def coords_to_square(code: str) -> Square:
    """Decode ``'54'`` or ``'0504'`` into ``'e4'``."""
    digits = code.strip()
    if len(digits) == 4 and digits.isdigit():
        digits = digits[1] + digits[3]
    if len(digits) != 2 or not digits.isdigit():
        raise ValueError(f"Invalid square coordinates: {code!r}")
    return make_square(int(digits[0]) - 1, int(digits[1]) - 1)


def square_class(square: Square) -> str:
    """CSS class naming *square*, e.g. ``'square-54'``."""
    file, rank = square_to_coords(square)
    return f"{_SQUARE_CLASS_PREFIX}{file}{rank}"


@dataclass(frozen=True, slots=True)
class BoardRect:
    """Where the board sits on screen: top-left corner and side length."""

    left: float
    top: float
    width: float

    @property
    def square_width(self) -> float:
        return self.width / 8

    def square_center(self, square: Square, *, flipped: bool = False) -> tuple[float, float]:
        """Pixel centre of *square*; ``flipped`` means black is at the bottom."""
        file, rank = square_to_coords(square)
        if flipped:
            file, rank = 9 - file, 9 - rank
        w = self.square_width
        half = w / 2
        x = self.left + w * file - half
        y = self.top + self.width - w * rank + half
        return x, y

    def square_at(self, x: float, y: float, *, flipped: bool = False) -> Square | None:
        """Square under pixel ``(x, y)``, or ``None`` off the board."""
        w = self.square_width
        if w <= 0:
            return None
        col = int((x - self.left) // w)
        row = int((y - self.top) // w)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        file, rank = col, 7 - row
        if flipped:
            file, rank = 7 - file, 7 - rank
        return make_square(file, rank)
