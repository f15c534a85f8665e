"""
data_models.py: Data structures for the game state.
"""

import enum
import math
from dataclasses import dataclass

from .constants import (
    BIRD_X, BIRD_RADIUS, PIPE_GAP, PIPE_WIDTH, SCREEN_HEIGHT,
    PHASE_ORDER, TRANSITION_SPEED
)


class GameState(enum.Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    OVER = "over"


@dataclass
class Bird:
    """The player's avatar. Only y and velocity change during play."""
    x: float = BIRD_X
    y: float = SCREEN_HEIGHT / 2
    velocity: float = 0.0
    radius: float = BIRD_RADIUS

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius


@dataclass
class Pipe:
    """A pipe pair: a top segment down to top_height, a bottom segment from gap_bottom."""
    x: float
    top_height: float
    scored: bool = False
    width: float = PIPE_WIDTH
    gap: float = PIPE_GAP

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def gap_bottom(self) -> float:
        return self.top_height + self.gap


@dataclass
class Session:
    """Per-run bookkeeping. highest_score outlives resets."""
    state: GameState = GameState.NOT_STARTED
    score: int = 0
    distance_traveled: float = 0.0
    highest_score: int = 0
    final_score: int = 0
    pipes_passed: int = 0

    @property
    def started(self) -> bool:
        return self.state is not GameState.NOT_STARTED

    @property
    def over(self) -> bool:
        return self.state is GameState.OVER

    @property
    def active(self) -> bool:
        return self.state is GameState.PLAYING

    def clear_run(self):
        self.score = 0
        self.distance_traveled = 0.0
        self.pipes_passed = 0


@dataclass
class TimeOfDay:
    """
    Sky cycle state. Progress is kept as a tick count so that a phase lasts
    exactly ceil(1 / speed) ticks without float drift.
    """
    current_phase: str = PHASE_ORDER[0]
    next_phase: str = PHASE_ORDER[1]
    transition_ticks: int = 0
    speed: float = TRANSITION_SPEED
    phases: tuple = PHASE_ORDER

    def __post_init__(self):
        if self.speed <= 0:
            raise ValueError(f"transition speed must be positive, got {self.speed}")

    @property
    def ticks_per_phase(self) -> int:
        # round() first so 1 / 0.002 does not ceil to 501
        return max(1, math.ceil(round(1.0 / self.speed, 9)))

    @property
    def transition_progress(self) -> float:
        return self.transition_ticks * self.speed

    def advance(self) -> bool:
        """Moves one tick forward. Returns True when the phase changed."""
        self.transition_ticks += 1
        if self.transition_ticks < self.ticks_per_phase:
            return False
        self.transition_ticks = 0
        self.current_phase = self.next_phase
        index = self.phases.index(self.current_phase)
        self.next_phase = self.phases[(index + 1) % len(self.phases)]
        return True

    def reset(self):
        self.current_phase = self.phases[0]
        self.next_phase = self.phases[1 % len(self.phases)]
        self.transition_ticks = 0
