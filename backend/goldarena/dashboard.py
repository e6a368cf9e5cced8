"""Dashboard session: one generation pass cached for the lifetime of a load."""

import logging
from datetime import date
from typing import Any

from pydantic import BaseModel

from goldarena.config import Settings, get_settings
from goldarena.roster import BOTS, Agent
from goldarena.simulation import (
    EquitySample,
    LeaderboardEntry,
    RandomSource,
    TimeWindow,
    create_random_source,
    derive_leaderboard_from_series,
    filter_series,
    generate_equity_series,
)

logger = logging.getLogger(__name__)


class MarketQuote(BaseModel):
    """Header price quote for the traded instrument."""

    price: float
    change: float
    change_pct: float


class CompetitionSummary(BaseModel):
    """Live banner details."""

    season: str
    started_on: date
    instrument: str
    bot_count: int
    total_capital: float
    quote: MarketQuote


class DashboardSession:
    """Holds the generated series and leaderboard for one load."""

    def __init__(
        self,
        settings: Settings,
        series: list[EquitySample],
        leaderboard: list[LeaderboardEntry],
        roster: tuple[Agent, ...] = BOTS,
    ):
        self.settings = settings
        self.series = series
        self.leaderboard = leaderboard
        self.roster = roster

    @classmethod
    def load(
        cls,
        settings: Settings | None = None,
        rng: RandomSource | None = None,
        roster: tuple[Agent, ...] = BOTS,
    ) -> "DashboardSession":
        """Run the generator and deriver once."""
        settings = settings or get_settings()
        sim = settings.simulation
        rng = rng or create_random_source(sim.seed)

        series = generate_equity_series(roster, rng=rng, config=sim)
        leaderboard = derive_leaderboard_from_series(
            series,
            roster,
            rng=rng,
            starting_balance=sim.starting_balance,
            config=settings.leaderboard,
        )
        logger.info(
            f"Dashboard loaded: {len(series)} samples, leader={leaderboard[0].name}"
        )
        return cls(settings, series, leaderboard, roster)

    def window(self, token: str | TimeWindow) -> list[EquitySample]:
        """Series slice for the chart; never re-runs the walk."""
        return filter_series(
            self.series, token, self.settings.simulation.interval_hours
        )

    def legend(self) -> list[dict[str, Any]]:
        """Chart legend rows in roster order."""
        by_id = {entry.id: entry for entry in self.leaderboard}
        return [
            {
                "id": agent.id,
                "name": agent.name,
                "color": agent.color,
                "accountValue": by_id[agent.id].account_value,
            }
            for agent in self.roster
        ]

    def summary(self) -> CompetitionSummary:
        sim = self.settings.simulation
        comp = self.settings.competition
        return CompetitionSummary(
            season=comp.season,
            started_on=sim.start_date.date(),
            instrument=comp.instrument,
            bot_count=len(self.roster),
            total_capital=len(self.roster) * sim.starting_balance,
            quote=MarketQuote(
                price=comp.quote_price,
                change=comp.quote_change,
                change_pct=comp.quote_change_pct,
            ),
        )
