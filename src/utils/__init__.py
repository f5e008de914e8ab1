"""Utility modules for the combat simulator."""
from .visualizer import (
    Colors,
    CombatLog,
    render_grid,
    render_roster,
    render_summary
)

__all__ = [
    "Colors",
    "CombatLog",
    "render_grid",
    "render_roster",
    "render_summary",
]
