"""Character scanner shared by the notation grammars."""

from __future__ import annotations


class Scanner:
    """Forward-only cursor over a move string.

    All lookahead helpers return ``""`` past the end of input, so grammar
    code never has to bounds-check.
    """

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        return self._text[idx] if idx < len(self._text) else ""

    def advance(self) -> str:
        ch = self.peek()
        if ch:
            self._pos += 1
        return ch

    def accept(self, chars: str) -> str:
        """Consume and return the next character if it is one of *chars*."""
        ch = self.peek()
        if ch and ch in chars:
            self._pos += 1
            return ch
        return ""

    def looking_at(self, literal: str) -> bool:
        return self._text.startswith(literal, self._pos)

    def accept_literal(self, literal: str) -> bool:
        """Consume *literal* if the input continues with it."""
        if self.looking_at(literal):
            self._pos += len(literal)
            return True
        return False

    def skip_whitespace(self) -> None:
        while self.peek().isspace():
            self._pos += 1

    def rest(self) -> str:
        return self._text[self._pos :]

    def text_since(self, start: int) -> str:
        """Characters consumed since position *start*."""
        return self._text[start : self._pos]
