"""GoldArena exceptions."""


class GoldArenaError(Exception):
    """Base GoldArena exception."""

    pass


class InsufficientDataError(GoldArenaError):
    """Series or sample holds no usable data."""

    def __init__(self, message: str = "insufficient data"):
        super().__init__(message)


class UnknownAgentError(GoldArenaError):
    """Agent id is not part of the roster."""

    def __init__(self, agent_id: str):
        super().__init__(f"Unknown agent: {agent_id}")
        self.agent_id = agent_id
