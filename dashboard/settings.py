from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


DEFAULT_FIXTURE_PATH = Path(__file__).parent / "fixtures" / "contributions.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    """

    github_token: str = ""
    github_graphql_url: str = "https://api.github.com/graphql"
    github_username: str = "tchappus"
    contribution_weeks: int = Field(default=52, ge=1)
    contributions_fixture_path: Path = DEFAULT_FIXTURE_PATH

    weather_enabled: bool = False
    tomorrow_io_token: str = ""
    weather_url: str = "https://api.tomorrow.io/v4/timelines"
    weather_latitude: float = 45.5245773
    weather_longitude: float = -73.596708
    weather_timezone: str = "America/Montreal"

    http_timeout_seconds: float = Field(default=20.0, gt=0)
    host: str = "0.0.0.0"
    port: int = 8082
    log_level: str = "INFO"

    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def get_settings() -> Settings:
    return Settings()
