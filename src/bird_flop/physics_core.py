"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .constants import GRAVITY, JUMP_STRENGTH
from .data_models import Bird, Pipe


class NonFiniteStateError(ArithmeticError):
    """Raised when the simulation produces a NaN or infinite bird state."""


@dataclass
class PhysicsCore:
    """
    Single-body gravity and bounding-box collision, one fixed tick at a time.
    Velocity and position are in pixels per tick; positive y points down.
    """
    gravity: float = GRAVITY
    jump_strength: float = JUMP_STRENGTH

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """Calculates new position and velocity after one tick."""
        velocity += self.gravity
        y += velocity
        if not (math.isfinite(y) and math.isfinite(velocity)):
            raise NonFiniteStateError(f"bird state diverged: y={y}, velocity={velocity}")
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity after a flap. It replaces, not adds to, the current one."""
        return self.jump_strength

    def clamp_to_bounds(self, bird: Bird, ground_y: float) -> bool:
        """
        Keeps the bird inside the playfield. The ceiling pins position only,
        so an upward velocity survives. Returns True when the ground was hit.
        """
        if bird.bottom > ground_y:
            bird.y = ground_y - bird.radius
            return True
        if bird.top < 0:
            bird.y = bird.radius
        return False

    def check_collision(self, bird: Bird, pipe: Pipe) -> bool:
        """Bird is treated as a box of its radius around its center."""
        overlaps_x = bird.x + bird.radius > pipe.x and bird.x - bird.radius < pipe.right
        if not overlaps_x:
            return False
        return bird.top < pipe.top_height or bird.bottom > pipe.gap_bottom
