from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .core import Direction, InitArgs

# ----- Window -----
CAPTION = "Snake"
HUD_HEIGHT = 28

# ----- Colors -----
BG = (0, 0, 0)
HEAD = (255, 255, 255)
TEXT = (220, 220, 230)
ALERT = (240, 20, 20)

# ----- Directions by name (for the CLI) -----
DIRECTIONS = {
    "left": Direction.LEFT,
    "up": Direction.UP,
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
}


def default_highscore_path() -> Path:
    return Path.home() / ".gridsnake" / "highscore.json"


# ----- Tunables -----
@dataclass
class Config:
    grid_width: int = 20
    grid_height: int = 20
    cell_size: int = 30
    ms_per_tick: int = 100
    fps: int = 60
    snake_length: int = 4
    start_x: int = 1
    start_y: int = 1
    direction: str = "right"
    seed: Optional[int] = None
    highscore_path: Optional[Path] = field(default_factory=default_highscore_path)

    @property
    def window_size(self) -> tuple[int, int]:
        return (
            self.grid_width * self.cell_size,
            self.grid_height * self.cell_size + HUD_HEIGHT,
        )

    def validate(self) -> list[str]:
        """Return a list of problems; empty means the config is usable."""
        errors = []
        if self.cell_size < 4:
            errors.append(f"cell_size must be >= 4, got {self.cell_size}")
        if self.ms_per_tick < 1:
            errors.append(f"ms_per_tick must be >= 1, got {self.ms_per_tick}")
        if self.fps < 1:
            errors.append(f"fps must be >= 1, got {self.fps}")
        if self.direction not in DIRECTIONS:
            errors.append(
                f"direction must be one of {sorted(DIRECTIONS)}, got '{self.direction}'"
            )
        else:
            errors.extend(self._init_args().validate())
        return errors

    def _init_args(self) -> InitArgs:
        return InitArgs(
            grid_size=(self.grid_width, self.grid_height),
            direction=DIRECTIONS[self.direction],
            position=(self.start_x, self.start_y),
            snake_length=self.snake_length,
        )

    def init_args(self) -> InitArgs:
        errors = self.validate()
        if errors:
            raise ValueError("Invalid config:\n  " + "\n  ".join(errors))
        return self._init_args()


CFG = Config()
