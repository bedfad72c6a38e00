"""
Analytics Configuration

Thresholds and time windows used by the calculators and rule engine.
Values are read from ``config/analytics.yaml`` and overlaid on the built-in
defaults, so a partial file only overrides what it names.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

DEFAULT_CONFIG_PATH = Path("config/analytics.yaml")


@dataclass(frozen=True)
class AttendanceBands:
    """Attendance label banding (percent)."""

    strong: int = 85
    moderate: int = 70


@dataclass(frozen=True)
class ReadinessThresholds:
    """Readiness label thresholds (percent)."""

    on_track_attendance: int = 85
    on_track_exposure: int = 50
    nearly_there_attendance: int = 70


@dataclass(frozen=True)
class PlayerWindows:
    """Now-relative windows and display settings for the player view."""

    trailing_days: int = 30
    recent_matches: int = 10
    attendance_target: int = 85
    unassigned_level: str = "Youth League"


@dataclass(frozen=True)
class QueueRuleSettings:
    """Feedback-queue rule parameters."""

    feedback_staleness_days: int = 60
    low_attendance_threshold: int = 70
    high_load_window_days: int = 14
    high_load_min_exertion: int = 4
    high_load_min_signals: int = 3


@dataclass(frozen=True)
class ForecastSettings:
    """Placeholder growth multipliers for the cohort forecast."""

    three_month_multiplier: float = 1.05
    six_month_multiplier: float = 1.10


@dataclass(frozen=True)
class AnalyticsConfig:
    """Complete engine configuration."""

    attendance: AttendanceBands = field(default_factory=AttendanceBands)
    readiness: ReadinessThresholds = field(default_factory=ReadinessThresholds)
    player: PlayerWindows = field(default_factory=PlayerWindows)
    feedback_queue: QueueRuleSettings = field(default_factory=QueueRuleSettings)
    forecast: ForecastSettings = field(default_factory=ForecastSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> AnalyticsConfig:
        """Overlay a (possibly partial) mapping on the defaults."""
        return _overlay(cls(), data or {})


def _overlay(base: Any, data: dict[str, Any]) -> Any:
    updates: dict[str, Any] = {}
    known = {f.name: f for f in fields(base)}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        current = getattr(base, key)
        if is_dataclass(current) and isinstance(value, dict):
            updates[key] = _overlay(current, value)
        else:
            updates[key] = value
    return replace(base, **updates)


def load_config(config_path: str | Path | None = None) -> AnalyticsConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file. Defaults to config/analytics.yaml

    Returns:
        AnalyticsConfig with file values overlaid on defaults
    """
    path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)

    if not path.exists():
        logger.warning(f"Analytics config not found at {path}, using defaults")
        return AnalyticsConfig()

    with open(path) as f:
        data = yaml.safe_load(f)

    logger.debug(f"Loaded analytics config from {path}")
    return AnalyticsConfig.from_dict(data)
