"""Equity series generator.

Produces a fixed-length, fixed-interval series of simulated account values
for every agent on the roster. Each agent's balance follows a multiplicative
random walk driven by its own volatility/trend tuning.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Iterable

import logfire
from pydantic import BaseModel, Field

from goldarena.config import SimulationConfig
from goldarena.roster import BOTS, Agent
from goldarena.simulation.random_source import RandomSource, create_random_source

logger = logging.getLogger(__name__)


class EquitySample(BaseModel):
    """One timestamped snapshot of every agent's account value."""

    timestamp: datetime
    label: str = Field(description="Short month/day label, e.g. '11/20'")
    values: dict[str, float]

    def to_record(self) -> dict[str, Any]:
        """Flatten to {timestamp, label, <agent_id>: value, ...}."""
        record: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "label": self.label,
        }
        record.update(self.values)
        return record


def format_label(ts: datetime) -> str:
    """Month/day label without zero padding."""
    return f"{ts.month}/{ts.day}"


def step_balance(
    balance: float,
    volatility: float,
    trend: float,
    draw: float,
    floor: float = 0.0,
) -> float:
    """Advance one balance by a single random-walk step.

    The result is clamped at ``floor`` and rounded to cents. Callers chain the
    rounded value into the next step.
    """
    balance *= 1 + (draw - 0.5) * volatility + trend
    return round(max(balance, floor), 2)


def generate_equity_series(
    roster: Iterable[Agent] | None = None,
    *,
    rng: RandomSource | None = None,
    config: SimulationConfig | None = None,
) -> list[EquitySample]:
    """Generate the full equity series for the roster."""
    agents = tuple(roster) if roster is not None else BOTS
    config = config or SimulationConfig()
    rng = rng or create_random_source(config.seed)

    balances = {agent.id: config.starting_balance for agent in agents}
    interval = timedelta(hours=config.interval_hours)
    series: list[EquitySample] = []

    with logfire.span(
        "simulation.generate_equity_series",
        agents=len(agents),
        steps=config.steps,
    ):
        for i in range(config.steps):
            ts = config.start_date + i * interval

            for agent in agents:
                balances[agent.id] = step_balance(
                    balances[agent.id],
                    agent.tuning.volatility,
                    agent.tuning.trend,
                    rng.random(),
                    config.balance_floor,
                )

            series.append(
                EquitySample(timestamp=ts, label=format_label(ts), values=dict(balances))
            )

    logger.debug(f"Generated {len(series)} samples for {len(agents)} agents")
    return series
