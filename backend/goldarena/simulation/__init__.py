"""Synthetic market data for the arena.

This package provides:
- Equity series generation (multiplicative random walk per agent)
- Leaderboard derivation from the final equity sample
- Time-window filtering of the series for display
"""

from .equity import EquitySample, generate_equity_series, step_balance
from .leaderboard import (
    STARTING_BALANCE,
    LeaderboardEntry,
    derive_leaderboard,
    derive_leaderboard_from_series,
)
from .random_source import RandomSource, create_random_source
from .windows import TimeWindow, filter_series, parse_window

__all__ = [
    # Equity
    "EquitySample",
    "generate_equity_series",
    "step_balance",
    # Leaderboard
    "STARTING_BALANCE",
    "LeaderboardEntry",
    "derive_leaderboard",
    "derive_leaderboard_from_series",
    # Randomness
    "RandomSource",
    "create_random_source",
    # Windows
    "TimeWindow",
    "filter_series",
    "parse_window",
]
