# render.py
from typing import Optional, Tuple
import math

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import BG, HEAD, TEXT, ALERT, HUD_HEIGHT
from .core import Game, GameState, score

Color = Tuple[int, int, int]

# Tail gradient endpoints (oldest -> newest segment)
TAIL_FROM = (150, 150, 140)
TAIL_TO = (200, 255, 100)


# ---------- Pure color functions ----------
def lerp(pct: float, start: int, end: int) -> int:
    return start + math.floor(pct * (end - start))


def pct_to_byte(pct: float) -> int:
    return math.floor(pct * 255.999999)


def cell_color(value: int, length: int) -> Optional[Color]:
    """Color of a trail cell; None for an empty cell."""
    if value <= 0:
        return None
    if value >= length:
        return HEAD
    pct = value / length
    return tuple(lerp(pct, a, b) for a, b in zip(TAIL_FROM, TAIL_TO))  # type: ignore


def food_color(time_ms: float) -> Color:
    """Food flickers on its own clock, unrelated to the simulation."""
    b = (time_ms % 100) / 100
    g = (time_ms % 200) / 200
    return (255, pct_to_byte(g), pct_to_byte(b))


def grid_colors(game: Game, time_ms: float) -> np.ndarray:
    """
    Colors for every cell of the board as a (width, height, 3) uint8 array.
    Reads the game only.
    """
    colors = np.empty((game.width, game.height, 3), dtype=np.uint8)
    colors[:, :] = BG
    length = game.snake.length
    for x, y in np.argwhere(game.grid > 0):
        colors[x, y] = cell_color(int(game.grid[x, y]), length)
    if game.food is not None:
        colors[game.food] = food_color(time_ms)
    return colors


# ---------- Drawing ----------
def draw_game(
    screen: pygame.Surface,
    font: pygame.font.Font,
    game: Game,
    time_ms: float,
    high_score: Optional[int],
    cell_size: int,
) -> None:
    screen.fill(BG)
    colors = grid_colors(game, time_ms)
    for x in range(game.width):
        for y in range(game.height):
            color = tuple(int(c) for c in colors[x, y])
            if color == BG:
                continue
            rect = pygame.Rect(x * cell_size, HUD_HEIGHT + y * cell_size, cell_size, cell_size)
            pygame.draw.rect(screen, color, rect)

    best = "-" if high_score is None else str(high_score)
    txt = font.render(f"Score: {score(game)}   Best: {best}", True, TEXT)
    screen.blit(txt, (8, 6))

    if game.state is GameState.PAUSED:
        draw_overlay(screen, font, "Paused", [])
    elif game.state is GameState.LOST:
        draw_overlay(screen, font, "You died", [f"Score: {score(game)}", "Press Enter or Space to restart"])
    elif game.state is GameState.WON:
        draw_overlay(screen, font, "You won", [f"Score: {score(game)}", "Press Enter or Space to restart"])


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, title: str, lines: list) -> None:
    width, height = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    head = font.render(title, True, ALERT)
    screen.blit(head, head.get_rect(center=(width // 2, height // 2 - 16)))
    for i, line in enumerate(lines):
        sub = font.render(line, True, TEXT)
        screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 16 + 28 * i)))


def draw_food(screen: pygame.Surface, game: Game, time_ms: float, cell_size: int) -> None:
    """Repaint only the food cell; used on frames where nothing else moved."""
    if game.food is None:
        return
    fx, fy = game.food
    rect = pygame.Rect(fx * cell_size, HUD_HEIGHT + fy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, food_color(time_ms), rect)
