"""Type a chess move, get it played on the board.

The two entry points are :func:`parse` (text → descriptor) and
:func:`resolve` (descriptor + board → concrete moves).
"""

from chesshelper.core.move import ConcreteMove, MoveDescriptor
from chesshelper.core.notation import parse, parse_algebraic, parse_from_to
from chesshelper.core.resolver import resolve

__all__ = [
    "ConcreteMove",
    "MoveDescriptor",
    "parse",
    "parse_algebraic",
    "parse_from_to",
    "resolve",
]
