from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 600, 400
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE
PANEL_W = 200  # fruit legend to the right of the board

# ----- Colors -----
BG    = (20, 20, 24)
GRID  = (32, 32, 40)
GREEN = (80, 200, 80)
HEAD  = (120, 240, 120)
PANEL = (40, 40, 48)
TEXT  = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Fruit catalog -----
@dataclass(frozen=True)
class FruitKind:
    label: str
    points: int
    glyph: str
    color: Tuple[int, int, int]

FRUITS: Tuple[FruitKind, ...] = (
    FruitKind("apple", 10, "\U0001F34E", (220, 50, 50)),
    FruitKind("banana", 5, "\U0001F34C", (240, 220, 80)),
    FruitKind("cherry", 15, "\U0001F352", (180, 20, 60)),
    FruitKind("pineapple", 20, "\U0001F34D", (230, 180, 40)),
    FruitKind("grapes", 12, "\U0001F347", (140, 60, 180)),
    FruitKind("kiwi", 18, "\U0001F95D", (120, 160, 60)),
    FruitKind("watermelon", 25, "\U0001F349", (60, 180, 90)),
)

# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    tick_ms: int = 200
    countdown_from: int = 3
    countdown_ms: int = 1000
    start_cell: Tuple[int, int] = (5, 5)
    start_direction: Tuple[int, int] = RIGHT
    seed: Optional[int] = None          # None -> fresh entropy every run
    fruit_avoids_snake: bool = False    # reference game lets fruit land on the snake

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"Grid must be positive, got {self.grid_w}x{self.grid_h}")
        if self.tick_ms <= 0 or self.countdown_ms <= 0:
            raise ValueError("Timer intervals must be positive")
        if self.countdown_from < 0:
            raise ValueError(f"countdown_from must be >= 0, got {self.countdown_from}")
        x, y = self.start_cell
        if not (0 <= x < self.grid_w and 0 <= y < self.grid_h):
            raise ValueError(f"start_cell {self.start_cell} is off the grid")
        if tuple(self.start_direction) not in DIRECTIONS:
            raise ValueError(f"start_direction {self.start_direction} is not a unit direction")

CFG = Config()
