# game.py
"""
Host side of the game: turns key presses into engine calls, drives ticks at a
fixed period and records the high score when a run ends.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

import pygame  # type: ignore

from . import core
from .core import Direction, Game, GameState
from .highscore import HighScoreStore

logger = logging.getLogger(__name__)


class Intent(Enum):
    MOVE_LEFT = "move_left"
    MOVE_UP = "move_up"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    PAUSE = "pause"
    RESTART = "restart"
    QUIT = "quit"


KEY_INTENTS = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_a: Intent.MOVE_LEFT,
    pygame.K_UP: Intent.MOVE_UP,
    pygame.K_w: Intent.MOVE_UP,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_d: Intent.MOVE_RIGHT,
    pygame.K_DOWN: Intent.MOVE_DOWN,
    pygame.K_s: Intent.MOVE_DOWN,
    pygame.K_ESCAPE: Intent.PAUSE,
    pygame.K_RETURN: Intent.RESTART,
    pygame.K_KP_ENTER: Intent.RESTART,
    pygame.K_SPACE: Intent.RESTART,
    pygame.K_q: Intent.QUIT,
}

MOVES = {
    Intent.MOVE_LEFT: Direction.LEFT,
    Intent.MOVE_UP: Direction.UP,
    Intent.MOVE_RIGHT: Direction.RIGHT,
    Intent.MOVE_DOWN: Direction.DOWN,
}

# Keys that never resume a paused game (Alt-Tab and friends)
RESUME_IGNORED = {pygame.K_LALT, pygame.K_RALT}


def decode_key(key: int) -> Optional[Intent]:
    return KEY_INTENTS.get(key)


# ---------- State ----------
@dataclass
class Session:
    game: Game
    store: HighScoreStore
    ms_per_tick: int
    high_score: Optional[int] = None
    last_tick_ms: int = 0
    needs_render: bool = True
    recorded: bool = False         # high score already handled for this run


def new_session(game: Game, store: HighScoreStore, ms_per_tick: int, now_ms: int = 0) -> Session:
    return Session(
        game=game,
        store=store,
        ms_per_tick=ms_per_tick,
        high_score=store.get_high_score(),
        last_tick_ms=now_ms,
    )


# ---------- Input / Update ----------
def handle_key(session: Session, key: int) -> bool:
    """Apply one key press to the session. Return False to quit."""
    game = session.game
    intent = decode_key(key)
    if intent is Intent.QUIT:
        return False

    if game.state is GameState.IN_PROGRESS:
        if intent in MOVES:
            core.queue_direction(game, MOVES[intent])
        elif intent is Intent.PAUSE:
            core.pause(game)
            session.needs_render = True
    elif game.state is GameState.PAUSED:
        if key not in RESUME_IGNORED:
            core.resume(game)
            session.needs_render = True
    elif intent is Intent.RESTART:
        restart(session)
    return True


def handle_events(session: Session, events) -> bool:
    """Process pygame events. Return False to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and not handle_key(session, event.key):
            return False
    return True


def restart(session: Session) -> None:
    core.reset(session.game)
    session.recorded = False
    session.needs_render = True


def step_session(session: Session, now_ms: int) -> None:
    """Advance at most one tick if the tick period has elapsed."""
    game = session.game
    if game.state is not GameState.IN_PROGRESS:
        # Paused/ended time does not count toward the next tick
        session.last_tick_ms = now_ms
        return
    if now_ms - session.last_tick_ms < session.ms_per_tick:
        return  # not time to move yet

    core.advance_tick(game)
    session.last_tick_ms = now_ms
    session.needs_render = True

    if game.state in (GameState.LOST, GameState.WON):
        record_high_score(session)


def record_high_score(session: Session) -> None:
    if session.recorded:
        return
    session.recorded = True
    result = core.score(session.game)
    if session.high_score is None or result > session.high_score:
        logger.info("New high score %d (previous %s)", result, session.high_score)
        session.high_score = result
        session.store.set_high_score(result)
