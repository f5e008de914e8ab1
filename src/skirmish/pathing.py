"""Shortest-path distances over open floor."""
from __future__ import annotations
from collections import deque
from typing import Iterable, Optional

from .models import Position
from .world import World


def distances_from(world: World, source: Position) -> dict[Position, int]:
    """Return the step count from ``source`` to every reachable open cell.

    Steps are orthogonal and cost 1; walls and cells holding a living unit
    block movement. The source itself is always included at distance 0,
    even though it is usually occupied by the unit searching from it.
    Unreachable cells are absent from the result.
    """
    distances = {source: 0}
    frontier = deque([source])
    while frontier:
        current = frontier.popleft()
        next_distance = distances[current] + 1
        for neighbor in current.neighbors():
            if neighbor in distances or not world.is_open(neighbor):
                continue
            distances[neighbor] = next_distance
            frontier.append(neighbor)
    return distances


def nearest(candidates: Iterable[Position], distances: dict[Position, int]) -> Optional[Position]:
    """Pick the reachable candidate with the smallest distance, ties in reading order."""
    reachable = [pos for pos in candidates if pos in distances]
    if not reachable:
        return None
    return min(reachable, key=lambda pos: (distances[pos], pos.y, pos.x))
