"""Leaderboard deriver.

Ranks agents by the account value in the final equity sample. Every other
statistic (trades, win rate, sharpe, fees, biggest win/loss) is drawn
independently on each call and has no relationship to the equity walk.
"""

import logging
from typing import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from goldarena.config import LeaderboardConfig
from goldarena.exceptions import InsufficientDataError
from goldarena.roster import BOTS, Agent
from goldarena.simulation.equity import EquitySample
from goldarena.simulation.random_source import RandomSource, create_random_source

logger = logging.getLogger(__name__)

STARTING_BALANCE = 10000.0


class LeaderboardEntry(BaseModel):
    """One agent's ranked standing with simulated performance stats."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    color: str
    avatar: str
    config: str
    rank: int
    account_value: float
    return_pct: float
    total_pnl: float = Field(alias="totalPnL")
    trades: int
    win_rate: float
    sharpe: float
    fees: float
    biggest_win: float
    biggest_loss: float

    def to_record(self) -> dict:
        """Presentation shape with camelCase keys."""
        return self.model_dump(by_alias=True)


def derive_leaderboard(
    latest: EquitySample | None,
    roster: Iterable[Agent] | None = None,
    *,
    rng: RandomSource | None = None,
    starting_balance: float = STARTING_BALANCE,
    config: LeaderboardConfig | None = None,
) -> list[LeaderboardEntry]:
    """Build the ranked leaderboard from the latest equity sample."""
    agents = tuple(roster) if roster is not None else BOTS
    config = config or LeaderboardConfig()
    rng = rng or create_random_source()

    if latest is None or not latest.values:
        raise InsufficientDataError("no data: latest equity sample is empty")

    missing = [agent.id for agent in agents if agent.id not in latest.values]
    if missing:
        raise InsufficientDataError(
            f"no data for agents: {', '.join(missing)}"
        )

    win_rate_span = config.max_win_rate - config.min_win_rate
    rows = []
    for agent in agents:
        value = latest.values[agent.id]
        return_pct = (value - starting_balance) / starting_balance * 100
        trades = rng.randrange(config.min_trades, config.max_trades)
        win_rate = rng.random() * win_rate_span + config.min_win_rate
        sharpe = round(return_pct / 10 + rng.random() * 0.5, 3)
        fees = round(trades * 0.5 + rng.random() * 50, 2)
        biggest_win = round(abs(return_pct) * 50 + rng.random() * 200, 2)
        biggest_loss = -round(abs(return_pct) * 30 + rng.random() * 150, 2)

        rows.append(
            dict(
                **agent.to_record(),
                account_value=value,
                return_pct=return_pct,
                total_pnl=value - starting_balance,
                trades=trades,
                win_rate=win_rate,
                sharpe=sharpe,
                fees=fees,
                biggest_win=biggest_win,
                biggest_loss=biggest_loss,
            )
        )

    # sorted() is stable: ties keep roster order
    rows = sorted(rows, key=lambda row: row["account_value"], reverse=True)
    entries = [LeaderboardEntry(rank=rank, **row) for rank, row in enumerate(rows, 1)]

    if entries:
        logger.debug(
            f"Leaderboard derived: leader={entries[0].id} "
            f"value={entries[0].account_value:,.2f}"
        )
    return entries


def derive_leaderboard_from_series(
    series: Sequence[EquitySample],
    roster: Iterable[Agent] | None = None,
    **kwargs,
) -> list[LeaderboardEntry]:
    """Derive the leaderboard from the final sample of a series."""
    if not series:
        raise InsufficientDataError("no data: equity series is empty")
    return derive_leaderboard(series[-1], roster, **kwargs)
