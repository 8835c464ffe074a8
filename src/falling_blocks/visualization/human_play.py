from __future__ import annotations

import argparse
import logging
from typing import Optional, Tuple

import pygame

from falling_blocks.game import BestScoreStore, COLS, GameConfig, ROWS, TetrisGame
from .controls import KEY_TO_COMMAND, Command, apply_command, classify_gesture, command_for_click
from .effects import LineFlash
from .renderer import Renderer
from .scheduler import GravityScheduler


GRAVITY_EVENT = pygame.USEREVENT + 1

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece generator")
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--best-score-file", type=str, default=None,
                   help="JSON file holding the best score (default: ~/.falling_blocks/best_score.json)")
    p.add_argument("--log-level", type=str, default="WARNING")
    return p


def run(seed: Optional[int] = None, cell_size: int = 28, best_score_file: Optional[str] = None) -> None:
    pygame.init()
    game = TetrisGame(GameConfig(random_seed=seed))
    scheduler = GravityScheduler(game, lambda ms: pygame.time.set_timer(GRAVITY_EVENT, ms))
    store = BestScoreStore(best_score_file)
    logger.info("Best score so far: %d", store.best)
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.window_size(ROWS, COLS))
        pygame.display.set_caption("Falling Blocks")

        touch_start: Optional[Tuple[float, float, int]] = None
        flash = LineFlash()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == GRAVITY_EVENT:
                    scheduler.on_tick()
                elif event.type == pygame.KEYDOWN:
                    command = KEY_TO_COMMAND.get(event.key)
                    if command is Command.QUIT:
                        running = False
                    elif command is not None:
                        apply_command(game, command)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    command = command_for_click(event.pos, renderer.click_targets)
                    if command is not None:
                        apply_command(game, command)
                elif event.type == pygame.FINGERDOWN and game.is_running:
                    w, h = screen.get_size()
                    touch_start = (event.x * w, event.y * h, pygame.time.get_ticks())
                elif event.type == pygame.FINGERUP:
                    start, touch_start = touch_start, None
                    if start is None or not game.is_running:
                        continue
                    w, h = screen.get_size()
                    command = classify_gesture(
                        event.x * w - start[0],
                        event.y * h - start[1],
                        pygame.time.get_ticks() - start[2],
                    )
                    if command is not None:
                        apply_command(game, command)

            scheduler.sync()
            store.record(game.score)
            now = pygame.time.get_ticks()
            flash.observe(game.lines, now)
            renderer.draw(screen, game, store.best, flash=flash.visible(now))
            clock.tick(60)
    finally:
        scheduler.close()
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    run(seed=args.seed, cell_size=args.cell_size, best_score_file=args.best_score_file)


if __name__ == "__main__":  # pragma: no cover
    main()
