#!/usr/bin/env python3
"""Run a combat from a map file and search for the minimal attack power.

Prints:
- The outcome of the combat with default attack power
- The smallest attack power that lets the chosen faction win without losses
"""
import argparse
import logging
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.skirmish import (
    CombatConfig, CombatSimulator, Faction, MapParseError, StalemateError,
    find_minimal_attack_power, read_map_text
)
from src.utils.visualizer import Colors, render_grid, render_summary


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a grid combat between elves and goblins")
    parser.add_argument("map_file", help="Path to the map text file")
    parser.add_argument("--faction", default="E", choices=["E", "G"],
                        help="Faction whose attack power is searched")
    parser.add_argument("--max-power", type=int, default=None,
                        help="Give up the search above this attack power")
    parser.add_argument("--show-grid", action="store_true", help="Print the final grid of each combat")
    parser.add_argument("--color", action="store_true", help="Use ANSI colors in the grid dump")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log combat progress")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    try:
        map_text = read_map_text(args.map_file)
        config = CombatConfig()
        world, outcome = CombatSimulator(config).run(map_text)
    except OSError as e:
        print(f"Cannot read {args.map_file}: {e}", file=sys.stderr)
        return 1
    except MapParseError as e:
        print(f"Invalid map: {e}", file=sys.stderr)
        return 1
    except StalemateError as e:
        print(f"{Colors.YELLOW}{e}{Colors.RESET}" if args.color else str(e), file=sys.stderr)
        return 1

    print("=== Default attack power ===")
    if args.show_grid:
        print(render_grid(world, color=args.color))
    print(render_summary(outcome))

    faction = Faction.from_char(args.faction)
    try:
        result = find_minimal_attack_power(map_text, faction=faction, max_power=args.max_power, config=config)
    except StalemateError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"\n=== Minimal {faction.name} attack power ===")
    if result is None:
        print(f"No attack power up to {args.max_power} wins without losses")
        return 1

    if args.show_grid:
        search_world, _ = CombatSimulator(config.with_attack_power(faction, result.attack_power)).run(map_text)
        print(render_grid(search_world, color=args.color))
    print(render_summary(result.outcome, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
