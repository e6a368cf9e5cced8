"""Time-window filter for the equity series."""

import logging
from enum import Enum
from typing import Sequence

from goldarena.simulation.equity import EquitySample

logger = logging.getLogger(__name__)


class TimeWindow(str, Enum):
    """Chart time ranges offered by the dashboard."""

    DAY = "24h"
    THREE_DAYS = "3d"
    WEEK = "7d"
    ALL = "all"


WINDOW_HOURS: dict[TimeWindow, int] = {
    TimeWindow.DAY: 24,
    TimeWindow.THREE_DAYS: 72,
    TimeWindow.WEEK: 168,
}


def parse_window(token: str | TimeWindow) -> TimeWindow:
    """Map a window token to TimeWindow. Unrecognized tokens mean ALL."""
    try:
        return TimeWindow(token)
    except ValueError:
        logger.debug(f"Unrecognized time window {token!r}, using 'all'")
        return TimeWindow.ALL


def filter_series(
    series: Sequence[EquitySample],
    window: str | TimeWindow,
    interval_hours: int = 6,
) -> list[EquitySample]:
    """Return the most recent samples covering the window."""
    window = parse_window(window)
    if window is TimeWindow.ALL:
        return list(series)

    count = WINDOW_HOURS[window] // interval_hours
    if count <= 0:
        return []
    return list(series[-count:])
