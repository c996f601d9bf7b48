# game.py
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import FRUITS, UP, DOWN, LEFT, RIGHT, Config, FruitKind, CFG

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]


class Phase(Enum):
    IDLE = "idle"
    COUNTDOWN = "countdown"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass(frozen=True)
class Fruit:
    cell: Cell
    kind: FruitKind


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def check_collision(head: Cell, snake: Iterable[Cell], grid_w: int, grid_h: int) -> bool:
    """True if `head` is off the grid or lands on any cell of the pre-move snake."""
    x, y = head
    if not (0 <= x < grid_w and 0 <= y < grid_h):
        return True
    return head in snake

def spawn_fruit(
    rng: np.random.Generator,
    grid_w: int,
    grid_h: int,
    catalog: Tuple[FruitKind, ...] = FRUITS,
    occupied: Iterable[Cell] = (),
) -> Fruit:
    """
    Pick a uniformly random cell and fruit kind.
    Cells in `occupied` are redrawn; an empty `occupied` means any cell goes,
    including one under the snake.
    """
    taken = set(occupied)
    while True:
        cell = (int(rng.integers(grid_w)), int(rng.integers(grid_h)))
        if cell not in taken or len(taken) >= grid_w * grid_h:
            break
    kind = catalog[int(rng.integers(len(catalog)))]
    return Fruit(cell=cell, kind=kind)


# ---------- Input ----------
KEY_DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "arrowup": UP,
    "arrowdown": DOWN,
    "arrowleft": LEFT,
    "arrowright": RIGHT,
}

def direction_for_key(key: str) -> Optional[Direction]:
    """Map a raw key name to a direction; None for keys that don't steer."""
    return KEY_DIRECTIONS.get(key.lower())


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Cell, ...]   # head at index 0
    direction: Direction      # committed by the last move
    pending: Direction        # committed by the next move
    fruit: Fruit
    score: int
    phase: Phase
    countdown: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

def new_game_state(cfg: Config, rng: np.random.Generator, phase: Phase = Phase.IDLE) -> GameState:
    snake = (tuple(cfg.start_cell),)
    occupied = snake if cfg.fruit_avoids_snake else ()
    return GameState(
        snake=snake,
        direction=tuple(cfg.start_direction),
        pending=tuple(cfg.start_direction),
        fruit=spawn_fruit(rng, cfg.grid_w, cfg.grid_h, occupied=occupied),
        score=0,
        phase=phase,
        countdown=0,
    )


# ---------- Transitions ----------
def set_direction(state: GameState, requested: Direction) -> GameState:
    """Buffer a turn for the next move; a 180° reversal is ignored."""
    if is_opposite(requested, state.direction):
        return state
    return replace(state, pending=tuple(requested))

def advance(state: GameState, rng: np.random.Generator, cfg: Config = CFG) -> GameState:
    """Move the snake one cell. Collisions end the game with the snake left where it was."""
    if state.phase is not Phase.RUNNING:
        return state

    direction = state.pending
    hx, hy = state.head
    dx, dy = direction
    new_head = (hx + dx, hy + dy)

    if check_collision(new_head, state.snake, cfg.grid_w, cfg.grid_h):
        return replace(state, direction=direction, phase=Phase.OVER)

    if new_head == state.fruit.cell:
        snake = (new_head,) + state.snake
        occupied = snake if cfg.fruit_avoids_snake else ()
        logger.debug("Ate %s at %s (+%d)", state.fruit.kind.label, new_head, state.fruit.kind.points)
        return replace(
            state,
            snake=snake,
            direction=direction,
            score=state.score + state.fruit.kind.points,
            fruit=spawn_fruit(rng, cfg.grid_w, cfg.grid_h, occupied=occupied),
        )

    return replace(state, snake=(new_head,) + state.snake[:-1], direction=direction)
