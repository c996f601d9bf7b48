# scheduler.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple
import logging
import time

import numpy as np  # type: ignore

from .config import CFG, Config
from .game import (
    Cell, Fruit, GameState, Phase,
    advance, direction_for_key, new_game_state, set_direction,
)

logger = logging.getLogger(__name__)


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one game for whoever draws it."""
    snake: Tuple[Cell, ...]
    fruit: Fruit
    score: int
    phase: Phase
    countdown: int
    celebrating: bool


@dataclass
class Timer:
    interval_ms: int
    due_ms: int
    callback: Callable[[int], None]
    catch_up: bool = True   # replay every missed interval, or fire once and re-base
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class TickScheduler:
    """
    Owns the single live GameState and the two timers that move it along:
    a one-second countdown timer and the movement tick. Nothing runs on its
    own; the front end calls pump() from its loop and due timers fire there.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], int]] = None,
        on_change: Optional[Callable[[Snapshot], None]] = None,
        on_game_over: Optional[Callable[[Snapshot], None]] = None,
    ):
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.clock = clock or _monotonic_ms
        self.on_change = on_change
        self.on_game_over = on_game_over

        self.state: GameState = new_game_state(cfg, self.rng)
        self.celebrating = False
        self._countdown_timer: Optional[Timer] = None
        self._tick_timer: Optional[Timer] = None

    # ---------- Lifecycle ----------
    def start(self) -> None:
        if self.state.phase not in (Phase.IDLE, Phase.OVER):
            logger.debug("start() ignored in phase %s", self.state.phase.value)
            return
        self._cancel_timers()
        self.state = new_game_state(self.cfg, self.rng)
        self.celebrating = False
        logger.info("New game, fruit %s at %s", self.state.fruit.kind.label, self.state.fruit.cell)
        self._begin_countdown()

    restart = start

    def pause(self) -> None:
        if self.state.phase is not Phase.RUNNING:
            logger.debug("pause() ignored in phase %s", self.state.phase.value)
            return
        self._cancel_timers()
        self._set_phase(Phase.PAUSED)

    def resume(self) -> None:
        if self.state.phase is not Phase.PAUSED:
            logger.debug("resume() ignored in phase %s", self.state.phase.value)
            return
        self._begin_countdown()

    def stop(self) -> None:
        self._cancel_timers()
        self.state = new_game_state(self.cfg, self.rng)
        self.celebrating = False
        self._notify()

    def on_direction_key(self, key: str) -> None:
        requested = direction_for_key(key)
        if requested is None:
            return
        self.state = set_direction(self.state, requested)

    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(
            snake=s.snake,
            fruit=s.fruit,
            score=s.score,
            phase=s.phase,
            countdown=s.countdown,
            celebrating=self.celebrating,
        )

    # ---------- Driving ----------
    def pump(self, now_ms: Optional[int] = None) -> None:
        """
        Fire every timer that has come due by `now_ms`, oldest first.
        A timer without catch_up fires at most once per pump; after a stall
        longer than its interval it restarts its cadence from `now_ms`.
        """
        now = self.clock() if now_ms is None else now_ms
        while True:
            timer = self._next_due(now)
            if timer is None:
                return
            fired_at = timer.due_ms
            if not timer.catch_up and now - timer.due_ms >= timer.interval_ms:
                timer.due_ms = now + timer.interval_ms
            else:
                timer.due_ms += timer.interval_ms
            timer.callback(fired_at)

    def _next_due(self, now: int) -> Optional[Timer]:
        live = [t for t in (self._countdown_timer, self._tick_timer)
                if t is not None and t.active and t.due_ms <= now]
        if not live:
            return None
        return min(live, key=lambda t: t.due_ms)

    def _arm(
        self, interval_ms: int, callback: Callable[[int], None], base_ms: int, catch_up: bool = True,
    ) -> Timer:
        return Timer(interval_ms=interval_ms, due_ms=base_ms + interval_ms, callback=callback, catch_up=catch_up)

    def _cancel_timers(self) -> None:
        for timer in (self._countdown_timer, self._tick_timer):
            if timer is not None:
                timer.cancel()
        self._countdown_timer = None
        self._tick_timer = None

    # ---------- Callbacks ----------
    def _begin_countdown(self) -> None:
        self._cancel_timers()
        base = self.clock()
        self.state = replace(self.state, phase=Phase.COUNTDOWN, countdown=self.cfg.countdown_from)
        logger.debug("Counting down from %d", self.cfg.countdown_from)
        if self.cfg.countdown_from == 0:
            self._begin_running(base)
            return
        self._countdown_timer = self._arm(self.cfg.countdown_ms, self._on_countdown, base)
        self._notify()

    def _on_countdown(self, fired_at: int) -> None:
        remaining = self.state.countdown - 1
        self.state = replace(self.state, countdown=remaining)
        if remaining > 0:
            self._notify()
            return
        self._begin_running(fired_at)

    def _begin_running(self, base_ms: int) -> None:
        self._cancel_timers()
        self._tick_timer = self._arm(self.cfg.tick_ms, self._on_tick, base_ms, catch_up=False)
        self._set_phase(Phase.RUNNING)

    def _on_tick(self, fired_at: int) -> None:
        self.state = advance(self.state, self.rng, self.cfg)
        if self.state.phase is Phase.OVER:
            self._cancel_timers()
            self.celebrating = True
            logger.info("Game over: score %d, length %d", self.state.score, len(self.state.snake))
            if self.on_game_over is not None:
                self.on_game_over(self.snapshot())
        self._notify()

    def _set_phase(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.state.phase.value, phase.value)
        self.state = replace(self.state, phase=phase)
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
