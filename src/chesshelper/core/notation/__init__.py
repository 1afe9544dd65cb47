"""Notation package: turns typed move text into move descriptors."""

from chesshelper.core.notation.algebraic import parse_algebraic
from chesshelper.core.notation.coordinate import parse_from_to
from chesshelper.core.notation.parser import parse
from chesshelper.core.notation.scanner import Scanner

__all__ = [
    "Scanner",
    "parse",
    "parse_algebraic",
    "parse_from_to",
]
