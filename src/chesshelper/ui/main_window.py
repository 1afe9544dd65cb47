"""MainWindow — board on top, move entry and status line below."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from chesshelper.board.position import PositionBoard
from chesshelper.core.move import ConcreteMove
from chesshelper.ui.board_widget import BoardWidget
from chesshelper.ui.move_entry import MoveEntry
from chesshelper.ui.pointer import PointerMoveExecutor
from chesshelper.ui.settings import HelperSettings


class MainWindow(QMainWindow):
    """Wires the typed-move helper to a playable board."""

    def __init__(self, settings: HelperSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or HelperSettings()
        self.setWindowTitle("Chess Helper")

        position = PositionBoard.from_fen(
            self._settings.start_fen, self._settings.color
        )
        self._board_view = BoardWidget(position)
        self._executor = PointerMoveExecutor(
            self._board_view,
            promotion_area=self._board_view.promotion_bar,
        )
        self._entry = MoveEntry(position, self._executor)
        self._status = QLabel()

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addWidget(self._board_view, stretch=1)
        layout.addWidget(self._entry)
        layout.addWidget(self._status)
        self.setCentralWidget(central)

        self._board_view.move_made.connect(self._on_move_made)
        self._entry.ambiguous.connect(self._on_ambiguous)
        self._entry.rejected.connect(self._on_rejected)

        self._apply_settings()
        self.resize(560, 660)

    @property
    def board_view(self) -> BoardWidget:
        return self._board_view

    @property
    def move_entry(self) -> MoveEntry:
        return self._entry

    def _apply_settings(self) -> None:
        s = self._settings
        self._board_view.set_flipped(s.flipped)
        self._executor.set_flipped(s.flipped)
        self._executor.set_promotion_delay(s.promotion_delay_ms)
        self._entry.set_ambiguity_policy(s.ambiguity_policy)

    def _on_move_made(self, move: ConcreteMove) -> None:
        self._status.setText(f"Played {move}")

    def _on_ambiguous(self, candidates: list[ConcreteMove]) -> None:
        options = ", ".join(str(m) for m in candidates)
        self._status.setText(f"Ambiguous: {options}")

    def _on_rejected(self, text: str) -> None:
        self._status.setText(f"No move for {text!r}")
