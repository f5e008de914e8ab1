"""Data models for the combat simulator."""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Iterator

from .enums import Faction

DEFAULT_HEALTH = 200
DEFAULT_ATTACK_POWER = 3

# Orthogonal offsets in reading order: up, left, right, down
READING_ORDER_OFFSETS = ((0, -1), (-1, 0), (1, 0), (0, 1))


@dataclass(frozen=True)
class Position:
    """Grid position (x=column, y=row).

    Positions sort in reading order: top to bottom, then left to right.
    """
    x: int
    y: int

    def __lt__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __add__(self, offset: tuple[int, int]) -> "Position":
        dx, dy = offset
        return Position(self.x + dx, self.y + dy)

    @property
    def reading_key(self) -> tuple[int, int]:
        return (self.y, self.x)

    def neighbors(self) -> Iterator["Position"]:
        """Yield the four orthogonal neighbours in reading order."""
        for offset in READING_ORDER_OFFSETS:
            yield self + offset

    def is_adjacent(self, other: "Position") -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1


@dataclass
class Unit:
    """A combatant on the map.

    Dead units stay in the world roster so unit indices never shift.
    """
    faction: Faction
    position: Position
    health: int = DEFAULT_HEALTH
    attack_power: int = DEFAULT_ATTACK_POWER

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def is_enemy_of(self, other: "Unit") -> bool:
        return self.faction != other.faction


@dataclass
class CombatConfig:
    """Configuration for combat simulation."""
    health: int = DEFAULT_HEALTH
    attack_power: int = DEFAULT_ATTACK_POWER

    # Per-faction attack power, overriding attack_power
    attack_power_overrides: dict[Faction, int] = field(default_factory=dict)

    def power_for(self, faction: Faction) -> int:
        return self.attack_power_overrides.get(faction, self.attack_power)

    def with_attack_power(self, faction: Faction, power: int) -> "CombatConfig":
        """Return a copy of this config with one faction's attack power set."""
        overrides = dict(self.attack_power_overrides)
        overrides[faction] = power
        return replace(self, attack_power_overrides=overrides)
