"""Daily heating-load profiles derived from the occupancy pattern."""

from collections.abc import Callable
from enum import StrEnum

import numpy as np
from numpy.typing import NDArray

from core.rules import KeywordRule, first_match

_HOURS = np.arange(24, dtype=np.float64)


class ScheduleArchetype(StrEnum):
    EVENING = "evening"
    NIGHT_SHIFT = "night_shift"
    ALWAYS_HOME = "always_home"
    DAYTIME = "daytime"


SCHEDULE_RULES: tuple[KeywordRule[ScheduleArchetype], ...] = (
    KeywordRule(("ноч", "смен", "night", "shift"), ScheduleArchetype.NIGHT_SHIFT),
    KeywordRule(("всегда", "весь день", "always", "all day", "remote"), ScheduleArchetype.ALWAYS_HOME),
    KeywordRule(("вечер", "evening"), ScheduleArchetype.EVENING),
)


def _wave(hours: NDArray[np.float64], peak_hour: float) -> NDArray[np.float64]:
    """Unit cosine over the day, maximal at ``peak_hour``."""
    return np.cos(2 * np.pi * (hours - peak_hour) / 24)


def _daytime(h: NDArray[np.float64]) -> NDArray[np.float64]:
    return 0.85 + 0.3 * np.sin(2 * np.pi * (h - 6) / 24) - 0.2 * np.sin(2 * np.pi * (h - 14) / 24)


def _evening(h: NDArray[np.float64]) -> NDArray[np.float64]:
    # Occupants back after work; morning peak kept small
    return 0.9 + 0.25 * _wave(h, 20.0) + 0.05 * _wave(h, 7.0)


def _night_shift(h: NDArray[np.float64]) -> NDArray[np.float64]:
    return 0.9 + 0.25 * _wave(h, 3.0)


def _always_home(h: NDArray[np.float64]) -> NDArray[np.float64]:
    # Near flat; slightly higher before dawn when it is coldest outside
    return 1.0 + 0.05 * _wave(h, 5.0)


_PROFILES: dict[ScheduleArchetype, Callable[[NDArray[np.float64]], NDArray[np.float64]]] = {
    ScheduleArchetype.DAYTIME: _daytime,
    ScheduleArchetype.EVENING: _evening,
    ScheduleArchetype.NIGHT_SHIFT: _night_shift,
    ScheduleArchetype.ALWAYS_HOME: _always_home,
}


def classify_schedule(occupancy: str | None) -> ScheduleArchetype:
    return first_match(SCHEDULE_RULES, occupancy, ScheduleArchetype.DAYTIME)


def daily_multipliers(occupancy: str | None) -> NDArray[np.float64]:
    """24 hourly load multipliers for the occupancy archetype, each >= 0."""
    profile = _PROFILES[classify_schedule(occupancy)]
    return np.clip(profile(_HOURS), 0.0, None)
