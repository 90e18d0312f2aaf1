# main.py
import argparse
import dataclasses
import logging
import random
import sys

import pygame  # type: ignore

from . import core
from .config import CFG, CAPTION, Config
from .game import new_session, handle_events, step_session
from .highscore import JsonHighScoreStore, MemoryHighScoreStore
from .render import draw_game, draw_food

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake.")
    parser.add_argument("--width", type=int, default=CFG.grid_width, help="board width in cells")
    parser.add_argument("--height", type=int, default=CFG.grid_height, help="board height in cells")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size, help="pixels per cell")
    parser.add_argument("--tick-ms", type=int, default=CFG.ms_per_tick, help="milliseconds per tick")
    parser.add_argument("--length", type=int, default=CFG.snake_length, help="initial snake length")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--highscore-file",
        type=str,
        default=None,
        help="where to keep the high score (default: ~/.gridsnake/highscore.json)",
    )
    parser.add_argument("--no-save", action="store_true", help="keep the high score in memory only")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    cfg = dataclasses.replace(
        CFG,
        grid_width=args.width,
        grid_height=args.height,
        cell_size=args.cell_size,
        ms_per_tick=args.tick_ms,
        snake_length=args.length,
        seed=args.seed,
    )
    if args.no_save:
        cfg.highscore_path = None
    elif args.highscore_file:
        cfg.highscore_path = args.highscore_file
    return cfg


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)
    try:
        init_args = cfg.init_args()
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2

    if cfg.highscore_path is None:
        store = MemoryHighScoreStore()
    else:
        store = JsonHighScoreStore(cfg.highscore_path)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    game = core.init(init_args, rng=random.Random(cfg.seed))
    session = new_session(game, store, cfg.ms_per_tick, pygame.time.get_ticks())
    logger.debug("Starting with %s", cfg)

    running = True
    while running:
        # 1) input
        running = handle_events(session, pygame.event.get())
        if not running:
            break

        # 2) update
        now = pygame.time.get_ticks()
        step_session(session, now)

        # 3) render
        if session.needs_render:
            draw_game(screen, font, game, now, session.high_score, cfg.cell_size)
            session.needs_render = False
        elif game.state is core.GameState.IN_PROGRESS:
            draw_food(screen, game, now, cfg.cell_size)
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
