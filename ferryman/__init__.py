"""Solver for the wolf, goat and cabbage river-crossing puzzle.

This package exposes the public API surface via:

- ``ferryman.engine.safety.is_safe``: rejects banks where something gets eaten.
- ``ferryman.engine.moves.legal_moves``: safe crossings from a configuration.
- ``ferryman.engine.search.solve``: breadth-first shortest crossing plan.
- ``ferryman.engine.hints.hint``: next crossing from any configuration.
- ``ferryman.engine.session``: explicit game state for auto, manual and
  assisted play.
"""

from .core.models import GOAL_STATE, INITIAL_STATE, Configuration, Move
from .engine.hints import Hint, HintStatus, hint
from .engine.moves import legal_moves
from .engine.safety import is_safe
from .engine.search import solve

__all__ = [
    "Configuration",
    "Move",
    "INITIAL_STATE",
    "GOAL_STATE",
    "is_safe",
    "legal_moves",
    "solve",
    "hint",
    "Hint",
    "HintStatus",
]

__version__ = "0.1.0"
