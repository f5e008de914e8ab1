"""Grid combat simulator package."""
from .enums import Tile, Faction, TILE_CHARS, UNIT_TILES
from .errors import (
    SkirmishError, MapParseError, MapError, CombatAlreadyDecided, StalemateError
)
from .models import (
    Position, Unit, CombatConfig, DEFAULT_HEALTH, DEFAULT_ATTACK_POWER
)
from .world import World
from .loader import parse_map, load_map, read_map_text
from .pathing import distances_from, nearest
from .battle import (
    CombatStatus, TurnEvent, CombatOutcome, CombatSimulator,
    take_turn, turn_order, run_round, run_combat, combat_outcome,
    in_range_tiles, choose_destination, choose_step, choose_target
)
from .search import PowerSearchResult, find_minimal_attack_power

__all__ = [
    # Enums
    "Tile", "Faction", "TILE_CHARS", "UNIT_TILES",
    # Errors
    "SkirmishError", "MapParseError", "MapError", "CombatAlreadyDecided",
    "StalemateError",
    # Models
    "Position", "Unit", "CombatConfig", "DEFAULT_HEALTH", "DEFAULT_ATTACK_POWER",
    "World",
    # Loader
    "parse_map", "load_map", "read_map_text",
    # Pathing
    "distances_from", "nearest",
    # Combat
    "CombatStatus", "TurnEvent", "CombatOutcome", "CombatSimulator",
    "take_turn", "turn_order", "run_round", "run_combat", "combat_outcome",
    "in_range_tiles", "choose_destination", "choose_step", "choose_target",
    # Attack power search
    "PowerSearchResult", "find_minimal_attack_power",
]
