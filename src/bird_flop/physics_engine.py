"""
physics_engine.py: The world simulation: bird, pipes, ground and scoring.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List

from .constants import (
    BIRD_RADIUS, BIRD_X, GROUND_HEIGHT, PIPE_GAP, PIPE_GROUND_CLEARANCE,
    PIPE_MIN_TOP, PIPE_SPAWN_SPACING, PIPE_SPEED, PIPE_WIDTH,
    SCORE_DIVISOR, SCREEN_HEIGHT, SCREEN_WIDTH
)
from .data_models import Bird, Pipe, Session
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns one world and advances it one tick at a time.
    Inherits core physics and collision from PhysicsCore.
    """
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    rng: random.Random = field(default_factory=random.Random)
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)

    pipe_width: float = PIPE_WIDTH
    pipe_gap: float = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    spawn_spacing: float = PIPE_SPAWN_SPACING
    ground_height: float = GROUND_HEIGHT
    score_divisor: float = SCORE_DIVISOR

    def __post_init__(self):
        self._check_size(self.width, self.height)
        self.bird.y = self.height / 2

    @staticmethod
    def _check_size(width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")

    @property
    def ground_y(self) -> float:
        return self.height - self.ground_height

    def reset(self):
        """Centers the bird at rest and clears every pipe."""
        self.bird = Bird(x=BIRD_X, y=self.height / 2, velocity=0.0, radius=BIRD_RADIUS)
        self.pipes = []

    def resize(self, width: int, height: int):
        self._check_size(width, height)
        self.width = width
        self.height = height

    # ---------- Pipes ----------

    def _spawn_pipe(self):
        """Adds a pipe at the right edge with its gap inside the playable band."""
        # Highest gap top that still fits above the ground; the preferred
        # margins shrink first when the viewport is short.
        room = max(0.0, self.ground_y - self.pipe_gap)
        min_top = min(PIPE_MIN_TOP, room)
        max_top = max(min_top, self.ground_y - PIPE_GROUND_CLEARANCE - self.pipe_gap)
        top_height = min_top + self.rng.random() * (max_top - min_top)
        self.pipes.append(Pipe(x=float(self.width), top_height=top_height,
                               width=self.pipe_width, gap=self.pipe_gap))
        logger.debug("Spawned pipe at x=%.1f, gap top %.1f", self.width, top_height)

    def _needs_spawn(self) -> bool:
        return not self.pipes or self.pipes[-1].x < self.width - self.spawn_spacing

    def step_pipes(self) -> bool:
        """
        Spawns, scrolls and culls pipes, then tests each survivor against the bird.
        Returns True on a terminal collision.
        """
        if self._needs_spawn():
            self._spawn_pipe()

        for pipe in self.pipes:
            pipe.x -= self.pipe_speed

        before = len(self.pipes)
        self.pipes = [p for p in self.pipes if p.right >= 0]
        if len(self.pipes) != before:
            logger.debug("Culled %d pipe(s)", before - len(self.pipes))

        return any(self.check_collision(self.bird, pipe) for pipe in self.pipes)

    def mark_passed(self) -> int:
        """Flags pipes the bird has fully cleared. Returns how many were newly flagged."""
        passed = 0
        for pipe in self.pipes:
            if not pipe.scored and pipe.right < self.bird.x - self.bird.radius:
                pipe.scored = True
                passed += 1
        return passed

    # ---------- Bird ----------

    def step_bird(self) -> bool:
        """Integrates gravity and clamps to the playfield. Returns True on ground contact."""
        bird = self.bird
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)
        return self.clamp_to_bounds(bird, self.ground_y)

    def do_flap(self):
        self.bird.velocity = self.flap()

    # ---------- Score ----------

    def accrue_score(self, session: Session):
        """Distance-based score; only counts while the run is live."""
        if not session.active:
            return
        session.distance_traveled += self.pipe_speed
        session.score = int(session.distance_traveled // self.score_divisor)
        if session.score > session.highest_score:
            session.highest_score = session.score

    def step(self, session: Session) -> bool:
        """
        The main simulation step. Mutates bird, pipes and session.
        Returns True if a terminal collision happened this tick.
        """
        hit_pipe = self.step_pipes()
        # A pipe hit ends the run before this tick's distance is counted.
        if not hit_pipe:
            self.accrue_score(session)
        session.pipes_passed += self.mark_passed()
        hit_ground = self.step_bird()
        return hit_pipe or hit_ground
