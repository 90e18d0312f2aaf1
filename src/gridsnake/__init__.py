"""Grid snake: simulation engine plus a small pygame host."""

from gridsnake.core import (
    Direction,
    Game,
    GameState,
    InitArgs,
    Snake,
    advance_tick,
    init,
    pause,
    queue_direction,
    reset,
    resume,
    score,
)

__all__ = [
    "Direction",
    "Game",
    "GameState",
    "InitArgs",
    "Snake",
    "advance_tick",
    "init",
    "pause",
    "queue_direction",
    "reset",
    "resume",
    "score",
]
