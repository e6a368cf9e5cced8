"""Configuration management using Pydantic Settings."""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class SimulationConfig(BaseModel):
    """Equity random-walk parameters."""

    starting_balance: float = Field(default=10000.0, gt=0)
    steps: int = Field(default=120, ge=1)
    interval_hours: int = Field(default=6, ge=1)
    start_date: datetime = datetime(2025, 11, 20, tzinfo=timezone.utc)
    balance_floor: float = 0.0  # Running balances are clamped here
    seed: int | None = None  # Unseeded unless set

    @field_validator("start_date", mode="after")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Treat naive start dates as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class LeaderboardConfig(BaseModel):
    """Ranges for the simulated leaderboard statistics."""

    min_trades: int = 50
    max_trades: int = 200  # Exclusive
    min_win_rate: float = 30.0
    max_win_rate: float = 50.0


class NotificationConfig(BaseModel):
    """Toast notification behavior."""

    dismiss_after_ms: int = Field(default=3000, ge=0)


class CompetitionConfig(BaseModel):
    """Static competition header details."""

    season: str = "Season 1"
    instrument: str = "XAU/USD"
    quote_price: float = 2651.30
    quote_change: float = 12.45
    quote_change_pct: float = 0.47


class ApiConfig(BaseModel):
    """Dashboard API server settings."""

    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )


class Settings(BaseSettings):
    """Main configuration class."""

    # Paths
    data_dir: Path = Path("data")

    # API Keys
    logfire_token: str = ""

    # Nested configuration sections
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    leaderboard: LeaderboardConfig = Field(default_factory=LeaderboardConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    competition: CompetitionConfig = Field(default_factory=CompetitionConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("data_dir", mode="after")
    @classmethod
    def resolve_data_dir(cls, v: Path) -> Path:
        """Resolve data directory to absolute path."""
        return v.resolve()

    def load_yaml_config(self) -> None:
        """Load and merge YAML configuration."""
        config_path = self.data_dir / "config.yaml"

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}. Using defaults.")
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            for section_name in [
                "simulation",
                "leaderboard",
                "notifications",
                "competition",
                "api",
            ]:
                if section_name in yaml_config:
                    section = getattr(self, section_name)
                    yaml_section = yaml_config[section_name]

                    section_dict = section.model_dump()
                    section_dict.update(yaml_section)

                    new_section = section.__class__(**section_dict)
                    setattr(self, section_name, new_section)

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
