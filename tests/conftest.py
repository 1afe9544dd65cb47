"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from chesshelper.core.enums import Color, PieceType
from chesshelper.core.interfaces import IBoard, IGameRules
from chesshelper.core.piece import PieceSetup, PlacedPiece

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


# ── Scripted board capability ───────────────────────────────────────────────


class ScriptedRules(IGameRules):
    """Oracle that accepts exactly the listed moves and records every query."""

    def __init__(self, legal: set[tuple[str, str]] | None = None) -> None:
        self.legal = legal or set()
        self.calls: list[tuple[PieceSetup, str, str]] = []

    def is_legal_move(self, setup: PieceSetup, from_sq: str, to_sq: str) -> bool:
        self.calls.append((setup, from_sq, to_sq))
        return (from_sq, to_sq) in self.legal


class ScriptedBoard(IBoard):
    """Board whose pieces, turn and oracles are set by the test."""

    def __init__(
        self,
        pieces: list[PlacedPiece],
        *,
        players_move: bool = True,
        player_color: Color | None = None,
        legal: set[tuple[str, str]] | None = None,
        rules: IGameRules | None = None,
    ) -> None:
        self.setup: PieceSetup = dict(enumerate(pieces))
        self.players_move = players_move
        self.player_color = player_color
        # None means every pair is legal.
        self.legal = legal
        self.rules = rules
        self.legal_queries: list[tuple[str, str]] = []

    def is_players_move(self) -> bool:
        return self.players_move

    def get_pieces_setup(self) -> PieceSetup:
        return self.setup

    def is_legal_move(self, from_sq: str, to_sq: str) -> bool:
        self.legal_queries.append((from_sq, to_sq))
        return self.legal is None or (from_sq, to_sq) in self.legal

    def get_player_color(self) -> Color | None:
        return self.player_color

    @property
    def game_rules(self) -> IGameRules | None:
        return self.rules


def piece(letter: str, area: str, color: Color = Color.WHITE) -> PlacedPiece:
    """Shorthand: ``piece("n", "g1")``."""
    return PlacedPiece(color=color, type=PieceType(letter), area=area)
