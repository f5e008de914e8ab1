"""Map loader for parsing combat map text."""
from __future__ import annotations
from pathlib import Path
from typing import Optional
import numpy as np

from .enums import Tile, UNIT_TILES
from .errors import MapParseError
from .models import CombatConfig, Position, Unit
from .world import World


def parse_map(text: str, config: Optional[CombatConfig] = None) -> World:
    """
    Parse a map into a fresh World.

    The map is a block of ``.`` (open), ``#`` (wall), ``E`` (elf) and
    ``G`` (goblin) characters. Surrounding whitespace is stripped; the
    first line sets the width and every other line must match it.

    Args:
        text: Map text
        config: Unit health and per-faction attack power (defaults apply if None)

    Returns:
        World with one unit per faction marker, in reading order

    Raises:
        MapParseError: Empty map, ragged rows or unknown characters
    """
    config = config or CombatConfig()
    lines = text.strip().splitlines()
    if not lines:
        raise MapParseError("Map is empty")

    width = len(lines[0])
    codes = []
    for y, line in enumerate(lines):
        if len(line) != width:
            raise MapParseError(
                f"Row length {len(line)} does not match map width {width}", row=y
            )
        row = []
        for x, c in enumerate(line):
            try:
                row.append(Tile.from_char(c))
            except KeyError:
                raise MapParseError(f"Unrecognized map character {c!r}", row=y, column=x) from None
        codes.append(row)

    tiles = np.array(codes, dtype=np.int8)

    # argwhere walks the array row by row, so units come out in reading order
    units = []
    unit_cells = np.argwhere((tiles == Tile.ELF) | (tiles == Tile.GOBLIN))
    for y, x in unit_cells:
        faction = UNIT_TILES[Tile(int(tiles[y, x]))]
        units.append(Unit(
            faction=faction,
            position=Position(int(x), int(y)),
            health=config.health,
            attack_power=config.power_for(faction)
        ))

    return World(tiles, units)


def load_map(path: str | Path, config: Optional[CombatConfig] = None) -> World:
    """Load and parse a map file."""
    return parse_map(read_map_text(path), config)


def read_map_text(path: str | Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
