from datetime import date

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ContributionDay(BaseModel):
    """Single calendar day with its contribution count."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(ge=0)


class ContributionWeek(BaseModel):
    """Days of one contribution week, ordered by weekday (Sunday first)."""

    model_config = ConfigDict(frozen=True)

    days: list[ContributionDay] = Field(default_factory=list, max_length=7)


class ContributionHistory(BaseModel):
    """Chronological contribution weeks, oldest first."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0)
    weeks: list[ContributionWeek] = Field(default_factory=list)


class DashboardPage(BaseModel):
    """View model handed to the dashboard template."""

    username: str
    total_contributions: int
    week_days: list[list[int]]
    max_count: int
    commit_ratio: float
    temperature: float | None = None
    first_day: date | None = None
    last_day: date | None = None
