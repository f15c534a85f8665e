"""
session.py: Session state machine and the tick scheduler that drives it.

States run NOT_STARTED -> PLAYING -> OVER, with reset() returning to
NOT_STARTED from either of the latter two. A tick only happens while
PLAYING; once the game ends the loop simply stops being driven.
"""

import logging
import random
import time
from typing import Callable, List, Optional

import pygame

from .data_models import GameState, Session, TimeOfDay
from .physics_engine import GameEngine

logger = logging.getLogger(__name__)

GameOverListener = Callable[[Session], None]


class SessionController:
    """Owns one game: the world, the session bookkeeping and the sky cycle."""

    def __init__(self, width: int, height: int,
                 rng: Optional[random.Random] = None,
                 engine: Optional[GameEngine] = None,
                 time_of_day: Optional[TimeOfDay] = None,
                 surface: Optional[pygame.Surface] = None,
                 renderer=None):
        self.engine = engine or GameEngine(width=width, height=height,
                                           rng=rng or random.Random())
        if engine is not None:
            if rng is not None:
                self.engine.rng = rng
            self.engine.resize(width, height)
            self.engine.reset()
        self.session = Session()
        self.time_of_day = time_of_day or TimeOfDay()
        self.surface = surface
        self.renderer = renderer
        self.tick_count = 0
        self._listeners: List[GameOverListener] = []

    # ---------- Read-only views ----------

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def running(self) -> bool:
        return self.session.state is GameState.PLAYING

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def highest_score(self) -> int:
        return self.session.highest_score

    @property
    def final_score(self) -> int:
        return self.session.final_score

    def add_game_over_listener(self, listener: GameOverListener):
        self._listeners.append(listener)

    # ---------- Commands ----------

    def start(self):
        if self.session.state is not GameState.NOT_STARTED:
            logger.debug("Ignoring start while %s", self.session.state.value)
            return
        self.engine.reset()
        self.session.clear_run()
        self.session.state = GameState.PLAYING
        logger.info("Game started (%dx%d)", self.engine.width, self.engine.height)

    def flap(self):
        state = self.session.state
        if state is GameState.NOT_STARTED:
            # A flap on the start screen starts the game instead.
            self.start()
        elif state is GameState.PLAYING:
            self.engine.do_flap()
        else:
            logger.debug("Ignoring flap after game over")

    def end_game(self):
        if self.session.state is not GameState.PLAYING:
            return
        session = self.session
        session.state = GameState.OVER
        session.final_score = session.score
        session.highest_score = max(session.highest_score, session.score)
        logger.info("Game over: score %d, best %d, pipes passed %d",
                    session.score, session.highest_score, session.pipes_passed)
        for listener in self._listeners:
            listener(session)

    def reset(self):
        if self.session.state is GameState.NOT_STARTED:
            logger.debug("Ignoring reset before start")
            return
        self.engine.reset()
        self.session.clear_run()
        self.session.state = GameState.NOT_STARTED
        self.time_of_day.reset()
        logger.info("Game reset")
        self.render()

    def resize(self, width: int, height: int):
        self.engine.resize(width, height)
        if self.session.state is GameState.NOT_STARTED:
            self.engine.bird.y = height / 2

    # ---------- Scheduling ----------

    def _sync_surface_size(self):
        if self.surface is None:
            return
        width, height = self.surface.get_size()
        if (width, height) != (self.engine.width, self.engine.height):
            self.resize(width, height)

    def tick(self, now_ms: Optional[float] = None) -> bool:
        """
        Runs one simulate step and, when a surface is attached, one render.
        Returns whether another tick should be scheduled.
        """
        if not self.running:
            return False
        self._sync_surface_size()
        self.time_of_day.advance()
        if self.engine.step(self.session):
            self.end_game()
        self.tick_count += 1
        self.render(now_ms)
        return self.running

    def run(self, max_ticks: int) -> int:
        """Steps without a display until the game stops or max_ticks elapse."""
        ticks = 0
        while ticks < max_ticks and self.running:
            self.tick()
            ticks += 1
        return ticks

    def render(self, now_ms: Optional[float] = None):
        if self.surface is None or self.renderer is None:
            return
        if now_ms is None:
            now_ms = time.monotonic() * 1000.0
        if self.session.state is GameState.NOT_STARTED:
            self.renderer.draw_idle(self.surface, self.engine, self.time_of_day, now_ms)
        else:
            self.renderer.draw(self.surface, self.engine, self.time_of_day, now_ms)
