"""Tests for the attack power search."""
import pytest

from src.skirmish.battle import CombatStatus
from src.skirmish.enums import Faction
from src.skirmish.errors import StalemateError
from src.skirmish.models import CombatConfig
from src.skirmish.search import find_minimal_attack_power


class TestFindMinimalAttackPower:
    """Tests for find_minimal_attack_power."""

    def test_first_example(self, first_example):
        result = find_minimal_attack_power(first_example)

        assert result.faction == Faction.ELF
        assert result.attack_power == 15
        assert result.outcome.outcome == 4988
        assert result.outcome.rounds == 29
        assert result.outcome.remaining_health == 172
        assert result.outcome.winner == Faction.ELF
        assert result.outcome.deaths[Faction.ELF] == 0
        assert result.trials == 13

    def test_worked_examples(self, search_example):
        map_text, power, outcome = search_example
        result = find_minimal_attack_power(map_text)

        assert result.attack_power == power
        assert result.outcome.outcome == outcome
        assert result.outcome.status == CombatStatus.DECIDED

    def test_start_at_minimum(self, first_example):
        """The scan reports the first sufficient power at or above start."""
        result = find_minimal_attack_power(first_example, start=15)
        assert result.attack_power == 15
        assert result.trials == 1

    def test_max_power_exhausted(self, first_example):
        assert find_minimal_attack_power(first_example, max_power=10) is None

    def test_already_lossless(self):
        """Elves that win at the default power need no boost."""
        result = find_minimal_attack_power("#EG#")
        assert result.attack_power == 3
        assert result.outcome.winner == Faction.ELF

    def test_goblin_search(self):
        """The search can boost either faction."""
        result = find_minimal_attack_power("#GEG#", faction=Faction.GOBLIN)
        assert result.attack_power == 3
        assert result.outcome.winner == Faction.GOBLIN

    def test_other_faction_keeps_base_power(self):
        """Goblins keep the base config's attack power during an elf search."""
        config = CombatConfig(attack_power=3).with_attack_power(Faction.GOBLIN, 100)
        result = find_minimal_attack_power("#E.G#", config=config, max_power=50)
        assert result is None

    def test_stalemate_propagates(self):
        with pytest.raises(StalemateError):
            find_minimal_attack_power("#E#G#")
