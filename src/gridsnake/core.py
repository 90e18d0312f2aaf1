# core.py
"""
Simulation engine for the snake game.

The snake's body is stored as a countdown trail on the grid: every occupied
cell holds the number of ticks it stays occupied, the head holds the current
snake length. Each plain tick ages the whole trail by one; a growth tick skips
the aging so the trail lengthens by exactly one cell.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
import logging
import random

import numpy as np  # type: ignore

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ---------- Types ----------
class Direction(Enum):
    LEFT = (-1, 0)
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    LOST = "lost"
    WON = "won"


@dataclass(frozen=True)
class InitArgs:
    """Everything needed to build (and rebuild) a game."""
    grid_size: Tuple[int, int]
    direction: Direction
    position: Position
    snake_length: int

    def validate(self) -> list[str]:
        errors = []
        width, height = self.grid_size
        if width < 1 or height < 1:
            errors.append(f"grid_size must be positive, got {self.grid_size}")
        elif width * height < 2:
            errors.append(f"grid_size must hold at least 2 cells, got {self.grid_size}")
        x, y = self.position
        if not (0 <= x < width and 0 <= y < height):
            errors.append(f"position {self.position} is outside grid {self.grid_size}")
        if self.snake_length < 1:
            errors.append(f"snake_length must be >= 1, got {self.snake_length}")
        return errors


@dataclass
class Snake:
    length: int
    direction: Direction
    next_direction: Direction
    position: Position
    pending_direction: Optional[Direction] = None  # second queued turn


@dataclass
class Game:
    init_args: InitArgs
    grid: np.ndarray                # shape (width, height), indexed grid[x, y]
    snake: Snake
    food: Optional[Position]        # None only once the board is full
    state: GameState = GameState.IN_PROGRESS
    ticks: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def grid_size(self) -> Tuple[int, int]:
        return self.init_args.grid_size

    @property
    def width(self) -> int:
        return self.init_args.grid_size[0]

    @property
    def height(self) -> int:
        return self.init_args.grid_size[1]


# ---------- Helpers ----------
def is_reverse(a: Direction, b: Direction) -> bool:
    return a.vector[0] == -b.vector[0] and a.vector[1] == -b.vector[1]


def is_grid_full(grid: np.ndarray) -> bool:
    return not bool((grid == 0).any())


def occupied_cells(game: Game) -> int:
    """Number of cells currently covered by the trail."""
    return int(np.count_nonzero(game.grid))


def in_bounds(game: Game, pos: Position) -> bool:
    x, y = pos
    return 0 <= x < game.width and 0 <= y < game.height


def spawn_food(
    grid: np.ndarray,
    rng: random.Random,
    exclude: Optional[Position] = None,
) -> Position:
    """
    Pick a uniformly random empty cell by rejection sampling.

    After width * height * 4 rejected draws, fall back to choosing among the
    empty cells found by a full scan. Raises RuntimeError if there is no
    empty cell at all.
    """
    width, height = grid.shape
    for _ in range(width * height * 4):
        fx = rng.randrange(width)
        fy = rng.randrange(height)
        if grid[fx, fy] == 0 and (fx, fy) != exclude:
            return (fx, fy)

    empty = [(int(x), int(y)) for x, y in np.argwhere(grid == 0) if (x, y) != exclude]
    if not empty:
        raise RuntimeError("no empty cell left to place food on")
    logger.debug("Food rejection sampling exhausted; scanning %d empty cells", len(empty))
    return rng.choice(empty)


def _fresh_snake(args: InitArgs) -> Snake:
    return Snake(
        length=args.snake_length,
        direction=args.direction,
        next_direction=args.direction,
        position=args.position,
    )


# ---------- Operations ----------
def init(args: InitArgs, rng: Optional[random.Random] = None) -> Game:
    """
    Build a fresh game from `args`.

    The head is recorded on the snake but not painted; the trail emerges from
    the head cell over the first ticks. Food never spawns under the head.
    """
    errors = args.validate()
    if errors:
        raise ValueError("Invalid game setup:\n  " + "\n  ".join(errors))

    if rng is None:
        rng = random.Random()
    grid = np.zeros(args.grid_size, dtype=np.int64)
    game = Game(
        init_args=args,
        grid=grid,
        snake=_fresh_snake(args),
        food=spawn_food(grid, rng, exclude=args.position),
        rng=rng,
    )
    logger.debug("New game %s, food at %s", args, game.food)
    return game


def reset(game: Game) -> None:
    """Restart `game` from its own init args."""
    game.grid.fill(0)
    game.snake = _fresh_snake(game.init_args)
    game.food = spawn_food(game.grid, game.rng, exclude=game.init_args.position)
    game.state = GameState.IN_PROGRESS
    game.ticks = 0
    logger.debug("Game reset, food at %s", game.food)


def queue_direction(game: Game, requested: Direction) -> None:
    """
    Queue a turn without ever allowing a reversal.

    With no turn queued the request replaces next_direction unless it
    reverses the applied direction. With a turn already queued it goes to
    pending_direction unless it reverses the queued one.
    """
    if game.state is not GameState.IN_PROGRESS:
        return
    snake = game.snake
    if snake.direction == snake.next_direction:
        if not is_reverse(requested, snake.direction):
            snake.next_direction = requested
    elif not is_reverse(requested, snake.next_direction):
        snake.pending_direction = requested


def advance_tick(game: Game) -> None:
    """Advance the game by one tick. No-op unless the game is in progress."""
    if game.state is not GameState.IN_PROGRESS:
        return

    snake = game.snake
    grid = game.grid
    hx, hy = snake.position
    dx, dy = snake.next_direction.vector
    candidate = (hx + dx, hy + dy)

    # Value 1 is vacated this tick, so only > 1 blocks.
    if not in_bounds(game, candidate) or grid[candidate] > 1:
        game.state = GameState.LOST
        logger.info("Snake crashed at %s, score %d", candidate, score(game))
        return

    snake.position = candidate
    game.ticks += 1

    if candidate == game.food:
        snake.length += 1
        grid[candidate] = snake.length
        if is_grid_full(grid):
            game.food = None
        else:
            game.food = spawn_food(grid, game.rng)
            logger.debug("Food eaten, length %d, new food at %s", snake.length, game.food)
    else:
        grid[grid > 0] -= 1
        grid[candidate] = snake.length

    snake.direction = snake.next_direction
    if snake.pending_direction is not None:
        snake.next_direction = snake.pending_direction
        snake.pending_direction = None

    if is_grid_full(grid):
        game.state = GameState.WON
        logger.info("Board full, snake wins with score %d", score(game))


def score(game: Game) -> int:
    return game.snake.length - game.init_args.snake_length


def pause(game: Game) -> None:
    if game.state is GameState.IN_PROGRESS:
        game.state = GameState.PAUSED


def resume(game: Game) -> None:
    if game.state is GameState.PAUSED:
        game.state = GameState.IN_PROGRESS
