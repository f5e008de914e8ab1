"""Tests for text rendering."""
from src.skirmish.battle import run_combat, run_round
from src.skirmish.loader import parse_map
from src.skirmish.search import find_minimal_attack_power
from src.utils.visualizer import (
    Colors, CombatLog, render_grid, render_roster, render_summary
)


class TestRenderGrid:

    def test_without_health(self, first_example):
        world = parse_map(first_example)
        assert render_grid(world, show_health=False) == first_example.strip()

    def test_health_annotations(self):
        world = parse_map("#G.E#")
        assert render_grid(world) == "#G.E#   G(200), E(200)"

    def test_color(self):
        world = parse_map("#G.E#")
        rendered = render_grid(world, color=True)

        assert f"{Colors.RED}G{Colors.RESET}" in rendered
        assert f"{Colors.GREEN}E(200){Colors.RESET}" in rendered


class TestRenderRoster:

    def test_dead_units_listed(self):
        world = parse_map("#GE#")
        run_combat(world)

        lines = render_roster(world).splitlines()
        assert lines[0].startswith("[0] GOBLIN")
        assert lines[0].endswith("alive")
        assert lines[1].endswith("dead")


class TestRenderSummary:

    def test_combat_summary(self, first_example):
        outcome = run_combat(parse_map(first_example))
        summary = render_summary(outcome)

        assert "Winner: GOBLIN" in summary
        assert "Completed rounds: 47" in summary
        assert "Outcome: 27730" in summary
        assert "Losses: ELF=2, GOBLIN=0" in summary

    def test_search_summary(self):
        result = find_minimal_attack_power("#EG#")
        summary = render_summary(result.outcome, result)

        assert "Minimal ELF attack power: 3 (1 trials)" in summary


class TestCombatLog:

    def test_empty(self):
        world = parse_map("#GE#")
        assert "No events yet" in CombatLog().render_recent(world)

    def test_records_events(self):
        world = parse_map("######\n#E.G.#\n######")
        log = CombatLog()
        run_round(world)
        log.add_events(world.history)

        rendered = log.render_recent(world)
        assert "[Round 1]" in rendered
        assert "E0 moves to (2, 1)" in rendered
        assert "E0 hits G1 at (3, 1) for 3" in rendered
        assert "G1 hits E0 at (2, 1) for 3" in rendered

    def test_counts_kills_and_trims(self):
        world = parse_map("#GE#")
        run_combat(world)

        log = CombatLog(max_events=10)
        log.add_events(world.history)

        assert log.kills == 1
        assert len(log.events) == 10
        assert log.events[-1].kind == "death"
