"""Core combat engine: turns, rounds and the combat loop."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging

from .enums import Faction
from .errors import CombatAlreadyDecided, StalemateError
from .loader import parse_map
from .models import CombatConfig, Position, Unit
from .pathing import distances_from, nearest
from .world import World


class CombatStatus(Enum):
    """Combat outcome."""
    IN_PROGRESS = 0
    DECIDED = 1
    HALTED = 2  # stopped early on a loss, see run_combat(halt_on_loss=...)


@dataclass(frozen=True)
class TurnEvent:
    """Something that happened during a unit's turn."""
    kind: str  # move, attack, death
    round: int
    unit_index: int
    position: Position
    target_index: Optional[int] = None
    damage: int = 0


@dataclass
class CombatOutcome:
    """Result of running a combat."""
    status: CombatStatus
    rounds: int
    remaining_health: int
    winner: Optional[Faction] = None
    deaths: dict[Faction, int] = field(default_factory=dict)

    @property
    def outcome(self) -> int:
        """Completed rounds times the health left over on the map."""
        return self.rounds * self.remaining_health

    @property
    def is_decided(self) -> bool:
        return self.status == CombatStatus.DECIDED


def take_turn(world: World, unit: Unit) -> list[TurnEvent]:
    """
    Resolve one unit's turn: move towards the nearest enemy, then attack.

    Returns:
        Events produced by the turn (empty if the unit did nothing)

    Raises:
        CombatAlreadyDecided: The unit has no living enemies left
    """
    if not unit.is_alive:
        return []

    if not world.has_living(unit.faction.enemy):
        raise CombatAlreadyDecided(f"No {unit.faction.enemy.name} units left")
    enemies = world.living_units(unit.faction.enemy)

    events = []
    index = world.unit_index(unit)

    if not any(unit.position.is_adjacent(e.position) for e in enemies):
        destination = choose_destination(world, unit, enemies)
        step = choose_step(world, unit, destination) if destination is not None else None
        if step is not None:
            world.move_unit(unit, step)
            events.append(TurnEvent("move", world.rounds_completed, index, step))

    target = choose_target(unit, enemies)
    if target is not None:
        target_index = world.unit_index(target)
        killed = world.damage_unit(target, unit.attack_power)
        events.append(TurnEvent(
            "attack", world.rounds_completed, index, target.position,
            target_index=target_index, damage=unit.attack_power
        ))
        if killed:
            events.append(TurnEvent(
                "death", world.rounds_completed, target_index, target.position
            ))

    for event in events:
        logging.debug(f"Round {event.round}: unit {event.unit_index} {event.kind} {event.position}")
    world.history.extend(events)
    return events


def in_range_tiles(world: World, enemies: list[Unit]) -> set[Position]:
    """Open cells next to at least one living enemy."""
    return {
        pos
        for enemy in enemies
        if enemy.is_alive
        for pos in enemy.position.neighbors()
        if world.is_open(pos)
    }


def choose_destination(world: World, unit: Unit, enemies: list[Unit]) -> Optional[Position]:
    """Get the nearest reachable in-range cell, ties in reading order."""
    distances = distances_from(world, unit.position)
    return nearest(in_range_tiles(world, enemies), distances)


def choose_step(world: World, unit: Unit, destination: Position) -> Optional[Position]:
    """Get the neighbouring cell on a shortest path to ``destination``, or None to stay put."""
    to_destination = distances_from(world, destination)
    steps = [pos for pos in unit.position.neighbors() if world.is_open(pos)]
    return nearest(steps, to_destination)


def choose_target(unit: Unit, enemies: list[Unit]) -> Optional[Unit]:
    """Get the adjacent enemy with the least health, ties in reading order."""
    adjacent = [
        e for e in enemies
        if e.is_alive and unit.is_enemy_of(e) and unit.position.is_adjacent(e.position)
    ]
    if not adjacent:
        return None
    return min(adjacent, key=lambda e: (e.health, e.position.y, e.position.x))


def turn_order(world: World) -> list[Unit]:
    """Living units sorted by position in reading order."""
    return sorted(world.living_units(), key=lambda u: u.position.reading_key)


def run_round(world: World) -> bool:
    """
    Resolve one round: every living unit takes a turn in reading order.

    The order is fixed at the start of the round; units killed before their
    turn comes are skipped.

    Returns:
        True if the round ran to completion, False if it was cut short
        because one side had no enemies left

    Raises:
        StalemateError: A full round passed with no unit moving or attacking
    """
    order = turn_order(world)
    if not order:
        return False

    acted = False
    for unit in order:
        if not unit.is_alive:
            continue
        try:
            if take_turn(world, unit):
                acted = True
        except CombatAlreadyDecided:
            return False

    if not acted:
        raise StalemateError(world.rounds_completed)

    world.rounds_completed += 1
    return True


def run_combat(world: World, halt_on_loss: Optional[Faction] = None) -> CombatOutcome:
    """
    Run rounds until one faction is wiped out.

    Args:
        world: World to simulate (mutated in place)
        halt_on_loss: Stop after the first round in which this faction loses a unit

    Returns:
        CombatOutcome with completed rounds and remaining health
    """
    status = CombatStatus.IN_PROGRESS
    while status == CombatStatus.IN_PROGRESS:
        if not run_round(world):
            status = CombatStatus.DECIDED
        elif halt_on_loss is not None and world.deaths(halt_on_loss) > 0:
            status = CombatStatus.HALTED

    result = combat_outcome(world, status)
    logging.info(
        f"Combat {status.name.lower()} after {result.rounds} rounds: "
        f"winner={result.winner.name if result.winner else None}, outcome={result.outcome}"
    )
    return result


def combat_outcome(world: World, status: CombatStatus) -> CombatOutcome:
    """Summarize a world's current state without running any more turns."""
    winner = None
    if status == CombatStatus.DECIDED:
        survivors = {u.faction for u in world.living_units()}
        if len(survivors) == 1:
            winner = survivors.pop()

    return CombatOutcome(
        status=status,
        rounds=world.rounds_completed,
        remaining_health=world.total_health(),
        winner=winner,
        deaths={faction: world.deaths(faction) for faction in Faction}
    )


class CombatSimulator:
    """High-level simulator that builds worlds from map text and runs them."""

    def __init__(self, config: Optional[CombatConfig] = None):
        self.config = config or CombatConfig()

    def create_world(self, map_text: str) -> World:
        """Parse a fresh world using this simulator's config."""
        return parse_map(map_text, self.config)

    def run(self, map_text: str, halt_on_loss: Optional[Faction] = None) -> tuple[World, CombatOutcome]:
        """Run a complete combat on a freshly parsed map."""
        world = self.create_world(map_text)
        logging.debug(f"Starting combat on {world!r}")
        outcome = run_combat(world, halt_on_loss=halt_on_loss)
        return world, outcome
