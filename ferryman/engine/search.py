"""Breadth-first shortest-path search over bank configurations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set, Tuple

from ..core.models import GOAL_STATE, Configuration, Move
from ..utils.logger import get_logger
from .moves import legal_moves

LOGGER = get_logger(__name__)


@dataclass
class SearchResult:
    """Outcome of one search call plus the statistics gathered on the way."""

    start: Configuration
    goal: Configuration
    path: Optional[List[Move]]
    expanded: int = 0
    visited: Set[Configuration] = field(default_factory=set, repr=False)

    @property
    def found(self) -> bool:
        return self.path is not None


def search(start: Configuration, goal: Configuration = GOAL_STATE) -> SearchResult:
    """Explore configurations level by level until ``goal`` is dequeued.

    The visited set is seeded with ``start`` and every configuration is marked
    when it is enqueued, so each one enters the frontier at most once. The first
    path that reaches ``goal`` is therefore a shortest one.
    """

    frontier: Deque[Tuple[Configuration, List[Move]]] = deque([(start, [])])
    visited: Set[Configuration] = {start}
    expanded = 0

    while frontier:
        current, path = frontier.popleft()
        if current == goal:
            LOGGER.debug(
                "Reached %s from %s in %d crossings (%d expanded, %d visited)",
                goal, start, len(path), expanded, len(visited),
            )
            return SearchResult(start, goal, path, expanded, visited)

        expanded += 1
        for move in legal_moves(current):
            if move.result in visited:
                continue
            visited.add(move.result)
            frontier.append((move.result, path + [move]))

    LOGGER.debug(
        "No path from %s to %s (%d expanded, %d visited)",
        start, goal, expanded, len(visited),
    )
    return SearchResult(start, goal, None, expanded, visited)


def solve(start: Configuration, goal: Configuration = GOAL_STATE) -> Optional[List[Move]]:
    """Return a shortest list of moves from ``start`` to ``goal``.

    An empty list means ``start`` already is the goal; ``None`` means the
    goal cannot be reached under the safety rules.
    """

    return search(start, goal).path


def reachable_distances(start: Configuration) -> Dict[Configuration, int]:
    """Crossing count from ``start`` to every configuration reachable through legal moves."""

    distances: Dict[Configuration, int] = {start: 0}
    frontier: Deque[Configuration] = deque([start])
    while frontier:
        current = frontier.popleft()
        for move in legal_moves(current):
            if move.result not in distances:
                distances[move.result] = distances[current] + 1
                frontier.append(move.result)
    return distances
