"""Copy-trade toast notifications."""

import logging
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_DISMISS_MS = 3000


class CopyTradeNotification(BaseModel):
    """Transient notification raised by the copy-trade button."""

    agent_name: str = Field(min_length=1)
    message: str
    dismiss_after_ms: int = Field(default=DEFAULT_DISMISS_MS, ge=0)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def expires_at(self) -> datetime:
        return self.created_at + timedelta(milliseconds=self.dismiss_after_ms)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the auto-dismiss delay has elapsed."""
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at

    def __str__(self) -> str:
        return self.message


def copy_trade(
    agent_name: str,
    *,
    dismiss_after_ms: int | None = None,
) -> CopyTradeNotification:
    """Build the toast for copying an agent's trade settings."""
    notification = CopyTradeNotification(
        agent_name=agent_name,
        message=f"Copied {agent_name} trade settings",
        dismiss_after_ms=(
            DEFAULT_DISMISS_MS if dismiss_after_ms is None else dismiss_after_ms
        ),
    )
    logger.info(notification.message)
    return notification
