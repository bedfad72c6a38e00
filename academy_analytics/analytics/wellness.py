"""
Wellness Summaries

Average exertion, dominant energy state and high-load signal counts over
self-reported wellness entries.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from academy_analytics.analytics.rates import round_half_up
from academy_analytics.analytics.windows import in_range
from academy_analytics.models.filters import DateRange
from academy_analytics.models.wellness import EnergyLevel, WellnessEntry

NO_ENERGY_DATA = "N/A"


@dataclass(frozen=True)
class WellnessSummary:
    """Wellness summary for one player over a window."""

    avg_exertion: float = 0
    avg_energy: str = NO_ENERGY_DATA
    entries: int = 0


def mean_exertion(entries: list[WellnessEntry], ndigits: int = 1) -> float:
    """Mean exertion rounded half-up, 0 for no entries."""
    if not entries:
        return 0
    return round_half_up(float(np.mean([e.exertion for e in entries])), ndigits)


def dominant_energy(entries: Iterable[WellnessEntry]) -> str:
    """
    Most frequently reported energy level.

    Ties go to the level encountered first. Returns "N/A" for no entries.
    """
    counts = Counter(e.energy for e in entries)
    best: EnergyLevel | None = None
    for energy, count in counts.items():
        if best is None or count > counts[best]:
            best = energy
    return best.value if best is not None else NO_ENERGY_DATA


def summarize_wellness(
    player_id: str,
    entries: Iterable[WellnessEntry],
    date_range: DateRange | None = None,
) -> WellnessSummary:
    """
    Summarize a player's wellness entries.

    Args:
        player_id: Player to summarize
        entries: All wellness entries in the dataset
        date_range: Optional inclusive window

    Returns:
        WellnessSummary; zero exertion and "N/A" energy when nothing matches
    """
    own = [e for e in entries if e.player_id == player_id and in_range(e.date, date_range)]
    if not own:
        return WellnessSummary()
    return WellnessSummary(
        avg_exertion=mean_exertion(own),
        avg_energy=dominant_energy(own),
        entries=len(own),
    )


def is_high_load(entry: WellnessEntry, min_exertion: int = 4) -> bool:
    """Hard session reported with low energy."""
    return entry.exertion >= min_exertion and entry.energy == EnergyLevel.LOW


def count_high_load_signals(
    entries: Iterable[WellnessEntry],
    window: DateRange | None = None,
    min_exertion: int = 4,
) -> int:
    """Count high-load entries inside the window."""
    return sum(
        1 for e in entries if in_range(e.date, window) and is_high_load(e, min_exertion)
    )
