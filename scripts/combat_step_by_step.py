#!/usr/bin/env python3
"""Step-by-step combat visualization script.

This script runs a combat and shows every round:
- Initial map and roster
- The moves, attacks and deaths of each round
- The map after each round
- Final outcome
"""
import argparse
import sys
import time
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.skirmish import (
    CombatConfig, CombatSimulator, CombatStatus, Faction, StalemateError, World,
    combat_outcome, run_round
)
from src.utils.visualizer import (
    Colors, CombatLog, render_grid, render_roster, render_summary
)

DEFAULT_MAP = """
#######
#.G...#
#...EG#
#.#.#G#
#..G#E#
#.....#
#######
"""


class StepByStepCombat:
    """Run and visualize a combat round by round."""

    def __init__(self, world: World, auto_mode: bool = False, delay: float = 0.5):
        self.world = world
        self.log = CombatLog()
        self.auto_mode = auto_mode
        self.delay = delay

    def show_initial_state(self):
        """Show the initial combat state."""
        print(f"\n{Colors.BOLD}{'=' * 70}{Colors.RESET}")
        print(f"{Colors.BOLD}COMBAT BEGINS!{Colors.RESET}")
        print(f"{Colors.BOLD}{'=' * 70}{Colors.RESET}\n")

        print(f"{Colors.CYAN}Roster:{Colors.RESET}")
        print(render_roster(self.world))

        print(f"\n{Colors.CYAN}Map:{Colors.RESET}")
        print(render_grid(self.world, color=True))

        if not self.auto_mode:
            input(f"\n{Colors.YELLOW}Press Enter to start the combat...{Colors.RESET}")

    def execute_round(self) -> bool:
        """Execute one round. Returns False once the combat is decided."""
        round_number = self.world.rounds_completed + 1
        seen = len(self.world.history)

        print(f"\n{Colors.BOLD}{'=' * 70}{Colors.RESET}")
        print(f"{Colors.BOLD}ROUND {round_number}{Colors.RESET}")
        print(f"{Colors.BOLD}{'=' * 70}{Colors.RESET}\n")

        completed = run_round(self.world)
        events = self.world.history[seen:]
        self.log.add_events(events)
        print(self.log.render_recent(self.world, n=len(events) or 1, color=True))

        print(f"\n{Colors.CYAN}Map:{Colors.RESET}")
        print(render_grid(self.world, color=True))

        if not completed:
            print(f"\n{Colors.YELLOW}Round {round_number} was cut short and does not count.{Colors.RESET}")
            return False

        if not self.auto_mode:
            input(f"\n{Colors.YELLOW}Press Enter to continue to next round...{Colors.RESET}")
        return True

    def run_combat(self):
        """Run the complete combat round by round."""
        self.show_initial_state()

        try:
            while self.execute_round():
                if self.auto_mode:
                    time.sleep(self.delay)
        except StalemateError as e:
            print(f"\n{Colors.YELLOW}{e}{Colors.RESET}")
            return

        self._show_final_results()

    def _show_final_results(self):
        """Show the final combat results."""
        print(f"\n{Colors.BOLD}{'=' * 70}{Colors.RESET}")
        print(f"{Colors.BOLD}COMBAT ENDED!{Colors.RESET}")
        print(f"{Colors.BOLD}{'=' * 70}{Colors.RESET}\n")

        outcome = combat_outcome(self.world, CombatStatus.DECIDED)
        color = Colors.GREEN if outcome.winner == Faction.ELF else Colors.RED
        print(f"{color}{render_summary(outcome)}{Colors.RESET}")
        print(f"\n  Kills: {self.log.kills}")


def main():
    """Run a step-by-step combat visualization."""
    parser = argparse.ArgumentParser(description="Watch a combat round by round")
    parser.add_argument("map_file", nargs="?", help="Map file (defaults to a built-in example)")
    parser.add_argument("--elf-power", type=int, default=None, help="Elf attack power")
    parser.add_argument("--auto", action="store_true", help="Play rounds without waiting for Enter")
    args = parser.parse_args()

    print(f"{Colors.BOLD}Combat Simulator - Step-by-Step Visualization{Colors.RESET}")

    map_text = Path(args.map_file).read_text(encoding="utf-8") if args.map_file else DEFAULT_MAP
    config = CombatConfig()
    if args.elf_power is not None:
        config = config.with_attack_power(Faction.ELF, args.elf_power)
    world = CombatSimulator(config).create_world(map_text)

    try:
        StepByStepCombat(world, auto_mode=args.auto).run_combat()
    except KeyboardInterrupt:
        print(f"\n\n{Colors.YELLOW}Combat interrupted by user.{Colors.RESET}")


if __name__ == "__main__":
    main()
