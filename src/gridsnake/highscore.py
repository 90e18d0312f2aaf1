# highscore.py
"""
Best-effort high score persistence.

A store that cannot be read reports "no previous high score"; a store that
cannot be written is logged and otherwise ignored. Neither case may take the
game loop down.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol
import json
import logging

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def get_high_score(self) -> Optional[int]: ...

    def set_high_score(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only."""

    def __init__(self, initial: Optional[int] = None):
        self._score = initial

    def get_high_score(self) -> Optional[int]:
        return self._score

    def set_high_score(self, score: int) -> None:
        self._score = score


class JsonHighScoreStore:
    """Stores the high score as {"high_score": n} in a JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def get_high_score(self) -> Optional[int]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            score = data["high_score"]
        except FileNotFoundError:
            return None
        except (OSError, ValueError, TypeError, KeyError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return None
        if isinstance(score, bool) or not isinstance(score, int):
            logger.warning("Ignoring non-integer high score %r in %s", score, self.path)
            return None
        return score

    def set_high_score(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": int(score)}), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
