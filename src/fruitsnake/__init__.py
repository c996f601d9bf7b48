# __init__.py
"""Headless Snake engine with a fruit catalog, plus a pygame front end."""

from .config import CFG, FRUITS, Config, FruitKind
from .game import (
    Fruit, GameState, Phase,
    advance, check_collision, direction_for_key, new_game_state, set_direction, spawn_fruit,
)
from .scheduler import Snapshot, TickScheduler

__all__ = [
    "CFG", "FRUITS", "Config", "FruitKind",
    "Fruit", "GameState", "Phase",
    "advance", "check_collision", "direction_for_key", "new_game_state", "set_direction", "spawn_fruit",
    "Snapshot", "TickScheduler",
]
