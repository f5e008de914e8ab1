"""Search for the smallest attack power that wins a combat without losses."""
from __future__ import annotations
from dataclasses import dataclass
from itertools import count
from typing import Optional
import logging

from .battle import CombatOutcome, CombatSimulator
from .enums import Faction
from .models import CombatConfig, DEFAULT_ATTACK_POWER


@dataclass
class PowerSearchResult:
    """Minimal attack power found by the search."""
    faction: Faction
    attack_power: int
    outcome: CombatOutcome
    trials: int


def find_minimal_attack_power(
    map_text: str,
    faction: Faction = Faction.ELF,
    start: int = DEFAULT_ATTACK_POWER,
    max_power: Optional[int] = None,
    config: Optional[CombatConfig] = None
) -> Optional[PowerSearchResult]:
    """
    Scan attack powers upward until ``faction`` wins without losing a unit.

    Each trial parses a fresh world from ``map_text``, so no state leaks
    between trials. A trial is abandoned at the end of the first round in
    which the faction loses a unit.

    Args:
        map_text: Map to fight on
        faction: Faction whose attack power is raised
        start: First attack power to try
        max_power: Last attack power to try (unbounded if None)
        config: Base config; the other faction keeps its attack power from it

    Returns:
        PowerSearchResult for the smallest sufficient power, or None if
        max_power was reached without success
    """
    config = config or CombatConfig()
    powers = count(start) if max_power is None else range(start, max_power + 1)

    trials = 0
    for power in powers:
        trials += 1
        simulator = CombatSimulator(config.with_attack_power(faction, power))
        _, outcome = simulator.run(map_text, halt_on_loss=faction)

        if outcome.is_decided and outcome.deaths[faction] == 0:
            logging.info(f"{faction.name} attack power {power} wins without losses")
            return PowerSearchResult(
                faction=faction,
                attack_power=power,
                outcome=outcome,
                trials=trials
            )
        logging.debug(f"{faction.name} attack power {power}: {outcome.deaths[faction]} lost")

    logging.warning(f"No {faction.name} attack power up to {max_power} avoids losses")
    return None
