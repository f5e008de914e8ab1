#!/usr/bin/env python3
"""
Demo script for the combat simulator.
Shows how to parse a map, run a combat and search for attack power.
"""

import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent))

from src.skirmish import (
    CombatSimulator, Faction, Position, distances_from, find_minimal_attack_power,
    parse_map, run_combat
)
from src.utils.visualizer import render_grid, render_summary

EXAMPLE_MAP = """
#######
#.G...#
#...EG#
#.#.#G#
#..G#E#
#.....#
#######
"""


def print_separator(title: str = ""):
    """Print a section separator."""
    print("\n" + "=" * 60)
    if title:
        print(f" {title}")
        print("=" * 60)
    print()


def demo_map_parsing():
    """Demonstrate parsing a map."""
    print_separator("Map Parsing Demo")

    world = parse_map(EXAMPLE_MAP)
    print(f"Map size: {world.width}x{world.height}")
    print(f"Elves: {len(world.living_units(Faction.ELF))}")
    print(f"Goblins: {len(world.living_units(Faction.GOBLIN))}")
    print()
    print(render_grid(world))
    return world


def demo_distances():
    """Demonstrate the distance search from the first goblin."""
    print_separator("Distance Search Demo")

    world = parse_map(EXAMPLE_MAP)
    goblin = world.living_units(Faction.GOBLIN)[0]
    distances = distances_from(world, goblin.position)

    print(f"Distances from goblin at ({goblin.position.x}, {goblin.position.y}):")
    for y in range(world.height):
        row = ""
        for x in range(world.width):
            d = distances.get(Position(x, y))
            row += f"{d:3d}" if d is not None else "  ."
        print(row)


def demo_combat():
    """Demonstrate running a full combat."""
    print_separator("Combat Demo")

    world = parse_map(EXAMPLE_MAP)
    outcome = run_combat(world)

    print(render_grid(world))
    print()
    print(render_summary(outcome))


def demo_attack_power_search():
    """Demonstrate finding the smallest elf attack power without losses."""
    print_separator("Attack Power Search Demo")

    result = find_minimal_attack_power(EXAMPLE_MAP)
    print(render_summary(result.outcome, result))

    world, _ = CombatSimulator().run(EXAMPLE_MAP)
    print(f"\nFor comparison, default power leaves {len(world.living_units(Faction.ELF))} elves alive")


def main():
    """Run all demos."""
    print("\n" + "=" * 60)
    print(" COMBAT SIMULATOR DEMO")
    print("=" * 60)

    demo_map_parsing()
    demo_distances()
    demo_combat()
    demo_attack_power_search()

    print_separator("Demo Complete")
    print("You can now:")
    print("  - Run tests: pytest tests/ -v")
    print("  - Solve a map: python scripts/run_combat.py input.txt")
    print("  - Watch a combat: python scripts/combat_step_by_step.py --auto")


if __name__ == "__main__":
    main()
