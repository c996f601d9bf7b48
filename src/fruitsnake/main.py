# main.py
from __future__ import annotations
import argparse
import logging

import numpy as np  # type: ignore
import pygame # type: ignore

from .config import WIDTH, HEIGHT, PANEL_W, Config
from .game import Phase
from .render import Confetti, draw_board, draw_overlay, draw_panel
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)

PYGAME_KEYS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {text}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Snake with fruit worth different points")
    p.add_argument("--seed", type=int, default=None, help="seed the fruit spawner")
    p.add_argument("--tick-ms", type=positive_int, default=Config.tick_ms, help="ms between snake moves")
    p.add_argument("--avoid-snake", action="store_true", help="never spawn fruit under the snake")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def handle_input(scheduler: TickScheduler) -> bool:
    """Forward key events to the scheduler. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key in PYGAME_KEYS:
            scheduler.on_direction_key(PYGAME_KEYS[event.key])
        elif event.key == pygame.K_SPACE:
            scheduler.start()
        elif event.key == pygame.K_p:
            if scheduler.state.phase is Phase.PAUSED:
                scheduler.resume()
            else:
                scheduler.pause()
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(tick_ms=args.tick_ms, seed=args.seed, fruit_avoids_snake=args.avoid_snake)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    big = pygame.font.SysFont(None, 96)
    screen = pygame.display.set_mode((WIDTH + PANEL_W, HEIGHT))
    pygame.display.set_caption("Fruit Snake")
    clock = pygame.time.Clock()

    confetti = Confetti(np.random.default_rng(args.seed))
    scheduler = TickScheduler(
        cfg,
        clock=pygame.time.get_ticks,
        on_game_over=lambda snap: confetti.burst(),
    )
    logger.info("Grid %dx%d, tick %d ms", cfg.grid_w, cfg.grid_h, cfg.tick_ms)

    running = True
    while running:
        # 1) input
        running = handle_input(scheduler)
        if not running:
            break

        # 2) update
        scheduler.pump()
        snap = scheduler.snapshot()
        if not snap.celebrating:
            confetti.clear()

        # 3) render
        draw_board(screen, font, snap)
        draw_panel(screen, font, snap)
        draw_overlay(screen, font, big, snap)
        confetti.update_and_draw(screen)
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by the scheduler's timers

    pygame.quit()

if __name__ == "__main__":
    main()
