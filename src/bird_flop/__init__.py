"""
bird_flop: a single-button scrolling bird game with a day/night sky.
"""

from .data_models import Bird, GameState, Pipe, Session, TimeOfDay
from .physics_core import NonFiniteStateError, PhysicsCore
from .physics_engine import GameEngine
from .session import SessionController

__version__ = "1.0.0"

__all__ = [
    "Bird", "GameState", "Pipe", "Session", "TimeOfDay",
    "NonFiniteStateError", "PhysicsCore", "GameEngine", "SessionController",
]
