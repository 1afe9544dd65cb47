"""HelperSettings — user-configurable behaviour of the move helper.

Values come from keyword arguments first, then ``CHESSHELPER_*``
environment variables, then the defaults below.
"""

from __future__ import annotations

from typing import Literal

import chess
from pydantic import Field
from pydantic_settings import BaseSettings

from chesshelper.core.enums import Color

PlayerColor = Literal["auto", "white", "black"]
AmbiguityPolicy = Literal["ask", "first"]


class HelperSettings(BaseSettings):
    """All user-configurable settings."""

    model_config = {
        "frozen": True,
        "env_prefix": "CHESSHELPER_",
    }

    # Board
    player_color: PlayerColor = "auto"
    flipped: bool = False
    start_fen: str = chess.STARTING_FEN

    # Move entry
    ambiguity_policy: AmbiguityPolicy = "ask"  # "ask" lists candidates, "first" plays one
    promotion_delay_ms: int = Field(default=100, ge=0)

    @property
    def color(self) -> Color | None:
        """The configured side, ``None`` for ``"auto"``."""
        if self.player_color == "white":
            return Color.WHITE
        if self.player_color == "black":
            return Color.BLACK
        return None
