"""MoveEntry — the text field a move is typed into."""

from __future__ import annotations

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLineEdit, QWidget

from chesshelper.core.interfaces import IBoard, IMoveExecutor
from chesshelper.core.move import ConcreteMove
from chesshelper.core.notation import parse
from chesshelper.core.resolver import resolve

_LOGGER = logging.getLogger(__name__)


class MoveEntry(QLineEdit):
    """Parses typed notation on Return and plays the resulting move.

    Exactly one candidate is played. With several candidates the
    ``"ask"`` policy reports them through ``ambiguous`` and plays nothing;
    the ``"first"`` policy plays the first one.

    Signals:
        executed(ConcreteMove): A move was handed to the executor.
        ambiguous(list): Several moves fit; carries the candidates.
        rejected(str): The text is not a move, or no move fits.
    """

    executed = pyqtSignal(ConcreteMove)
    ambiguous = pyqtSignal(list)
    rejected = pyqtSignal(str)

    def __init__(
        self,
        board: IBoard,
        executor: IMoveExecutor,
        *,
        ambiguity_policy: str = "ask",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._board = board
        self._executor = executor
        self._ambiguity_policy = ambiguity_policy

        self.setFont(QFont("Adwaita Mono", 14))
        self.setPlaceholderText("Type a move: e4, Nf3, exd5, O-O, e7e8…")
        self.setClearButtonEnabled(True)
        self.returnPressed.connect(self._on_return)

    def set_board(self, board: IBoard) -> None:
        self._board = board

    def set_ambiguity_policy(self, policy: str) -> None:
        self._ambiguity_policy = policy

    def submit(self, text: str) -> list[ConcreteMove]:
        """Handle *text* as if it had been typed; returns the candidates."""
        descriptor = parse(text)
        if descriptor is None:
            _LOGGER.warning("Not a move: %r", text)
            self.rejected.emit(text)
            return []

        candidates = resolve(self._board, descriptor)
        if not candidates:
            _LOGGER.info("No legal move fits %r", text)
            self.rejected.emit(text)
            return candidates

        if len(candidates) > 1 and self._ambiguity_policy == "ask":
            self.ambiguous.emit(candidates)
            return candidates

        move = candidates[0]
        if self._executor.make_move(move):
            self.clear()
            self.executed.emit(move)
        return candidates

    def _on_return(self) -> None:
        self.submit(self.text())
