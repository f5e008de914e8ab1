"""Map tiles and factions."""
from enum import IntEnum


class Tile(IntEnum):
    """Contents of a single map cell.

    ELF and GOBLIN mark a cell occupied by a living unit of that faction;
    the underlying terrain of an occupied cell is always open floor.
    """
    OPEN = 0
    WALL = 1
    ELF = 2
    GOBLIN = 3

    @property
    def char(self) -> str:
        return TILE_CHARS[self]

    @classmethod
    def from_char(cls, c: str) -> "Tile":
        """Look up a tile by its map character. Raises KeyError if unknown."""
        return CHAR_TILES[c]


class Faction(IntEnum):
    """The two opposing sides of a combat."""
    ELF = 1
    GOBLIN = 2

    @property
    def marker(self) -> Tile:
        """Tile used to mark a cell occupied by this faction."""
        return Tile.ELF if self == Faction.ELF else Tile.GOBLIN

    @property
    def enemy(self) -> "Faction":
        return Faction.GOBLIN if self == Faction.ELF else Faction.ELF

    @property
    def char(self) -> str:
        return self.marker.char

    @classmethod
    def from_char(cls, c: str) -> "Faction":
        return FACTION_CHARS[c.upper()]


TILE_CHARS = {
    Tile.OPEN: ".",
    Tile.WALL: "#",
    Tile.ELF: "E",
    Tile.GOBLIN: "G",
}

CHAR_TILES = {c: tile for tile, c in TILE_CHARS.items()}

FACTION_CHARS = {
    "E": Faction.ELF,
    "G": Faction.GOBLIN,
}

# Tiles that carry a unit
UNIT_TILES = {
    Tile.ELF: Faction.ELF,
    Tile.GOBLIN: Faction.GOBLIN,
}
