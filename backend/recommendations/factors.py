from __future__ import annotations

import re

from .catalog import GAME_WEIGHTS
from .models import Resolution

RESOLUTION_MULTIPLIERS: dict[Resolution, float] = {
    Resolution.fhd: 1.0,
    Resolution.qhd: 0.8,
    Resolution.uhd: 0.6,
}

_GAME_SEPARATORS = re.compile(r"[,;\n]+")


def resolution_multiplier(resolution: Resolution) -> float:
    return RESOLUTION_MULTIPLIERS[Resolution(resolution)]


def cpu_bottleneck_factor(cores: int | None) -> float:
    """Scale down GPU benefit when a low core count limits frame rate."""
    if not cores:
        return 1.0
    if cores <= 4:
        return 0.8
    if cores <= 6:
        return 0.92
    return 1.0


def parse_games(text: str | None) -> list[str]:
    if not text:
        return []
    return [g.strip() for g in _GAME_SEPARATORS.split(text.lower()) if g.strip()]


def game_multiplier(games: list[str]) -> float:
    """
    Return the demand multiplier of the most demanding listed game.

    Unknown titles weigh 1.0; with no games at all the multiplier is neutral.
    """
    if not games:
        return 1.0
    return max(GAME_WEIGHTS.get(g, 1.0) for g in games)
