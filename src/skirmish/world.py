"""Combat world: terrain grid plus unit roster."""
from __future__ import annotations
from copy import deepcopy
from typing import TYPE_CHECKING, Optional
import numpy as np

from .enums import Faction, Tile
from .models import Position, Unit

if TYPE_CHECKING:
    from .battle import TurnEvent


class World:
    """Complete state of a combat.

    The tile grid doubles as the occupancy layer: the cell under every
    living unit holds that unit's faction marker. Only ``move_unit`` and
    ``damage_unit`` change unit positions or kill units, and both go
    through ``_set_tile`` so the grid and the roster never disagree.
    """

    def __init__(self, tiles: np.ndarray, units: list[Unit]):
        self.tiles = tiles
        self.units = units
        self.rounds_completed = 0

        # Every move, attack and death, in order
        self.history: list[TurnEvent] = []

    @property
    def width(self) -> int:
        return self.tiles.shape[1]

    @property
    def height(self) -> int:
        return self.tiles.shape[0]

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile(self, pos: Position) -> Optional[Tile]:
        """Get the tile at a position, or None when outside the map."""
        if not self.in_bounds(pos):
            return None
        return Tile(int(self.tiles[pos.y, pos.x]))

    def is_open(self, pos: Position) -> bool:
        """True for in-bounds floor with no living unit on it."""
        return self.tile(pos) == Tile.OPEN

    def _set_tile(self, pos: Position, tile: Tile) -> None:
        self.tiles[pos.y, pos.x] = tile

    def move_unit(self, unit: Unit, destination: Position) -> None:
        """Move a living unit to an open cell, keeping the grid in sync."""
        if not unit.is_alive:
            raise ValueError("Dead units cannot move")
        if not self.is_open(destination):
            raise ValueError(f"Cannot move onto {destination}: cell is not open")
        self._set_tile(unit.position, Tile.OPEN)
        self._set_tile(destination, unit.faction.marker)
        unit.position = destination

    def damage_unit(self, unit: Unit, amount: int) -> bool:
        """Apply damage to a unit. Returns True if the unit died."""
        if not unit.is_alive:
            return False
        unit.health -= amount
        if unit.health <= 0:
            self._set_tile(unit.position, Tile.OPEN)
            return True
        return False

    def unit_index(self, unit: Unit) -> int:
        """Get a unit's stable index in the roster."""
        for i, candidate in enumerate(self.units):
            if candidate is unit:
                return i
        raise ValueError("Unit is not part of this world")

    def unit_at(self, pos: Position) -> Optional[Unit]:
        """Get the living unit at a position."""
        for unit in self.units:
            if unit.is_alive and unit.position == pos:
                return unit
        return None

    def living_units(self, faction: Optional[Faction] = None) -> list[Unit]:
        return [
            u for u in self.units
            if u.is_alive and (faction is None or u.faction == faction)
        ]

    def has_living(self, faction: Faction) -> bool:
        return any(u.is_alive and u.faction == faction for u in self.units)

    def deaths(self, faction: Faction) -> int:
        """Number of units of a faction killed so far."""
        return sum(1 for u in self.units if u.faction == faction and not u.is_alive)

    def total_health(self) -> int:
        """Sum of health over all living units."""
        return sum(u.health for u in self.units if u.is_alive)

    def occupancy(self) -> np.ndarray:
        """Get the faction marker layer (0 where no unit stands)."""
        layer = np.zeros_like(self.tiles)
        mask = (self.tiles == Tile.ELF) | (self.tiles == Tile.GOBLIN)
        layer[mask] = self.tiles[mask]
        return layer

    def copy(self) -> "World":
        """Independent copy of the grid and roster."""
        clone = World(self.tiles.copy(), deepcopy(self.units))
        clone.rounds_completed = self.rounds_completed
        clone.history = list(self.history)
        return clone

    def __str__(self) -> str:
        return "\n".join(
            "".join(Tile(int(v)).char for v in row)
            for row in self.tiles
        )

    def __repr__(self) -> str:
        return (
            f"World({self.width}x{self.height}, units={len(self.living_units())}"
            f"/{len(self.units)}, rounds={self.rounds_completed})"
        )
