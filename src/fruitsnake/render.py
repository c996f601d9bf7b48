# render.py
from typing import Tuple

import numpy as np  # type: ignore
import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, PANEL_W,
    BG, GRID, GREEN, HEAD, PANEL, TEXT,
    FRUITS,
)
from .game import Phase
from .scheduler import Snapshot

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

def draw_centered(screen: pygame.Surface, font: pygame.font.Font, text: str, dy: int = 0) -> None:
    surf = font.render(text, True, TEXT)
    screen.blit(surf, surf.get_rect(center=(WIDTH // 2, HEIGHT // 2 + dy)))


class Confetti:
    """Falling paper bits shown over the board after a game ends."""

    def __init__(self, rng: np.random.Generator, count: int = 150):
        self.rng = rng
        self.count = count
        self.pos = np.zeros((0, 2), dtype=np.float32)
        self.vel = np.zeros((0, 2), dtype=np.float32)
        self.colors = np.zeros((0, 3), dtype=np.uint8)

    def burst(self) -> None:
        n = self.count
        self.pos = np.column_stack([
            self.rng.uniform(0, WIDTH, n),
            self.rng.uniform(-HEIGHT, 0, n),
        ]).astype(np.float32)
        self.vel = np.column_stack([
            self.rng.uniform(-0.6, 0.6, n),
            self.rng.uniform(1.0, 3.0, n),
        ]).astype(np.float32)
        self.colors = self.rng.integers(80, 256, size=(n, 3), dtype=np.uint8)

    def clear(self) -> None:
        self.pos = self.pos[:0]

    def update_and_draw(self, screen: pygame.Surface) -> None:
        if len(self.pos) == 0:
            return
        self.pos += self.vel
        # wrap to the top so the shower keeps going until the next start
        self.pos[:, 1] = np.where(self.pos[:, 1] > HEIGHT, self.pos[:, 1] - HEIGHT, self.pos[:, 1])
        for (x, y), color in zip(self.pos, self.colors):
            pygame.draw.rect(screen, tuple(int(c) for c in color), pygame.Rect(int(x), int(y), 4, 7))


# ---------- Draw ----------
def draw_board(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)
    for x in range(0, WIDTH + 1, CELL_SIZE):
        pygame.draw.line(screen, GRID, (x, 0), (x, HEIGHT))
    for y in range(0, HEIGHT + 1, CELL_SIZE):
        pygame.draw.line(screen, GRID, (0, y), (WIDTH, y))

    # fruit
    fx, fy = snap.fruit.cell
    draw_cell(screen, fx, fy, snap.fruit.kind.color)
    # snake, head brighter
    for i, (x, y) in enumerate(snap.snake):
        draw_cell(screen, x, y, HEAD if i == 0 else GREEN)
    # score
    txt = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(txt, (8, 6))

def draw_panel(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    panel = pygame.Rect(WIDTH, 0, PANEL_W, HEIGHT)
    pygame.draw.rect(screen, PANEL, panel)

    y = 12
    screen.blit(font.render("Fruit Points", True, TEXT), (WIDTH + 12, y))
    for kind in FRUITS:
        y += 26
        pygame.draw.rect(screen, kind.color, pygame.Rect(WIDTH + 12, y + 2, 12, 12))
        line = font.render(f"{kind.label.upper()} = {kind.points}", True, TEXT)
        screen.blit(line, (WIDTH + 32, y))

    hints = {
        Phase.IDLE: "SPACE: start",
        Phase.COUNTDOWN: "get ready",
        Phase.RUNNING: "P: pause",
        Phase.PAUSED: "P: resume",
        Phase.OVER: "SPACE: restart",
    }
    screen.blit(font.render(hints[snap.phase], True, TEXT), (WIDTH + 12, HEIGHT - 30))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, big: pygame.font.Font, snap: Snapshot) -> None:
    if snap.phase is Phase.COUNTDOWN and snap.countdown > 0:
        draw_centered(screen, big, str(snap.countdown))
    elif snap.phase is Phase.PAUSED:
        draw_centered(screen, big, "PAUSED")
    elif snap.phase is Phase.OVER:
        # Dim with translucent overlay
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        screen.blit(overlay, (0, 0))
        draw_centered(screen, font, "GAME OVER", -16)
        draw_centered(screen, font, f"Your score: {snap.score}", 16)
        draw_centered(screen, font, "Press SPACE to restart", 44)
