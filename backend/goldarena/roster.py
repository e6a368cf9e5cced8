"""Static competitor roster with per-agent random-walk tuning."""

from pydantic import BaseModel, ConfigDict, Field

from goldarena.exceptions import UnknownAgentError


class AgentTuning(BaseModel):
    """Random-walk parameters for one agent."""

    model_config = ConfigDict(frozen=True)

    volatility: float = Field(ge=0)
    trend: float


class Agent(BaseModel):
    """One competitor in the simulated arena."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str
    avatar: str
    config: str = Field(description="Descriptive strategy label shown on the dashboard")
    tuning: AgentTuning

    def to_record(self) -> dict[str, str]:
        """Presentation shape: {id, name, color, avatar, config}."""
        return self.model_dump(include={"id", "name", "color", "avatar", "config"})


BOTS: tuple[Agent, ...] = (
    Agent(
        id="aureus",
        name="Aureus Alpha",
        color="#FFD700",
        avatar="🦁",
        config="Momentum · RSI reversal on 4H",
        tuning=AgentTuning(volatility=0.015, trend=0.002),
    ),
    Agent(
        id="midas",
        name="Midas Touch",
        color="#00D4FF",
        avatar="👑",
        config="Macro · Fed-driven swing",
        tuning=AgentTuning(volatility=0.012, trend=0.001),
    ),
    Agent(
        id="bullion",
        name="Bullion Beast",
        color="#FF6B6B",
        avatar="🐂",
        config="Breakout · session open scalper",
        tuning=AgentTuning(volatility=0.018, trend=-0.001),
    ),
    Agent(
        id="goldfish",
        name="GoldFish AI",
        color="#7C3AED",
        avatar="🐟",
        config="Confluence · EMA + Fibonacci",
        tuning=AgentTuning(volatility=0.01, trend=0.0015),
    ),
)


def get_agent(agent_id: str, roster: tuple[Agent, ...] = BOTS) -> Agent:
    """Look up an agent by id."""
    for agent in roster:
        if agent.id == agent_id:
            return agent
    raise UnknownAgentError(agent_id)
