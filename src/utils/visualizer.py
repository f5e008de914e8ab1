"""Text rendering of combat state for debugging and verification."""
from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from src.skirmish.world import World
    from src.skirmish.battle import TurnEvent, CombatOutcome
    from src.skirmish.search import PowerSearchResult

from src.skirmish.enums import Faction, Tile


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"


FACTION_COLORS = {
    Faction.ELF: Colors.GREEN,
    Faction.GOBLIN: Colors.RED,
}

TILE_COLORS = {
    Tile.ELF: Colors.GREEN,
    Tile.GOBLIN: Colors.RED,
}


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{Colors.RESET}" if enabled else text


def render_grid(world: "World", show_health: bool = True, color: bool = False) -> str:
    """
    Render the map, one line per row.

    With ``show_health`` each row is followed by the living units on it,
    left to right, e.g. ``#G.E..#   G(200), E(197)``.
    """
    units_by_row: dict[int, list] = {}
    for unit in world.living_units():
        units_by_row.setdefault(unit.position.y, []).append(unit)

    lines = []
    for y in range(world.height):
        row = "".join(
            _paint(tile.char, TILE_COLORS[tile], color) if tile in TILE_COLORS else tile.char
            for tile in (Tile(int(v)) for v in world.tiles[y])
        )
        row_units = sorted(units_by_row.get(y, []), key=lambda u: u.position.x)
        if show_health and row_units:
            labels = ", ".join(
                _paint(f"{u.faction.char}({u.health})", FACTION_COLORS[u.faction], color)
                for u in row_units
            )
            row = f"{row}   {labels}"
        lines.append(row)
    return "\n".join(lines)


def render_roster(world: "World") -> str:
    """List every unit, dead or alive, with its index, position and health."""
    lines = []
    for i, unit in enumerate(world.units):
        state = "alive" if unit.is_alive else "dead"
        lines.append(
            f"[{i}] {unit.faction.name:<6} ({unit.position.x}, {unit.position.y}) "
            f"HP: {unit.health} ATK: {unit.attack_power} {state}"
        )
    return "\n".join(lines)


def render_summary(outcome: "CombatOutcome", search: Optional["PowerSearchResult"] = None) -> str:
    """Summarize a combat outcome (and the attack power search, if given)."""
    winner = outcome.winner.name if outcome.winner else "nobody"
    lines = [
        f"Winner: {winner}",
        f"Completed rounds: {outcome.rounds}",
        f"Remaining health: {outcome.remaining_health}",
        f"Outcome: {outcome.outcome}",
    ]
    losses = ", ".join(f"{f.name}={n}" for f, n in outcome.deaths.items())
    lines.append(f"Losses: {losses}")
    if search is not None:
        lines.append(f"Minimal {search.faction.name} attack power: {search.attack_power} ({search.trials} trials)")
    return "\n".join(lines)


class CombatLog:
    """Tracks and displays combat history."""

    ICONS = {
        "move": "->",
        "attack": "x",
        "death": "+",
    }

    def __init__(self, max_events: int = 100):
        self.events: list["TurnEvent"] = []
        self.max_events = max_events
        self.kills = 0

    def add_events(self, events: list["TurnEvent"]) -> None:
        """Add events to the log."""
        for event in events:
            self.events.append(event)
            if event.kind == "death":
                self.kills += 1

        # Limit log size
        if len(self.events) > self.max_events:
            self.events = self.events[-self.max_events:]

    def render_recent(self, world: "World", n: int = 15, color: bool = False) -> str:
        """Render the last N events."""
        lines = [_paint(f"=== Combat Log (Last {n} events) ===", Colors.BOLD, color)]

        if not self.events:
            lines.append("No events yet")
            return "\n".join(lines)

        current_round = None
        for event in self.events[-n:]:
            if event.round != current_round:
                current_round = event.round
                lines.append(_paint(f"[Round {event.round + 1}]", Colors.CYAN, color))

            unit = world.units[event.unit_index]
            actor = _paint(f"{unit.faction.char}{event.unit_index}", FACTION_COLORS[unit.faction], color)
            icon = self.ICONS.get(event.kind, "*")
            pos = f"({event.position.x}, {event.position.y})"

            if event.kind == "move":
                lines.append(f"  {icon} {actor} moves to {pos}")
            elif event.kind == "attack":
                target = world.units[event.target_index]
                victim = _paint(f"{target.faction.char}{event.target_index}", FACTION_COLORS[target.faction], color)
                lines.append(f"  {icon} {actor} hits {victim} at {pos} for {event.damage}")
            elif event.kind == "death":
                lines.append(f"  {icon} {actor} dies at {pos}")

        return "\n".join(lines)
