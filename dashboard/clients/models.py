"""Response shapes of the upstream GitHub GraphQL and Tomorrow.io APIs.

Only the fields the dashboard reads are modelled. Unknown fields are
ignored, missing or mistyped ones fail validation.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True, extra="ignore")


class GraphQLContributionDay(_UpstreamModel):
    contribution_count: int = Field(alias="contributionCount", ge=0)
    date: date


class GraphQLContributionWeek(_UpstreamModel):
    contribution_days: list[GraphQLContributionDay] = Field(
        alias="contributionDays", max_length=7
    )


class GraphQLContributionCalendar(_UpstreamModel):
    total_contributions: int = Field(alias="totalContributions", ge=0)
    weeks: list[GraphQLContributionWeek]


class GraphQLContributionsCollection(_UpstreamModel):
    contribution_calendar: GraphQLContributionCalendar = Field(
        alias="contributionCalendar"
    )


class GraphQLUser(_UpstreamModel):
    contributions_collection: GraphQLContributionsCollection = Field(
        alias="contributionsCollection"
    )


class GraphQLData(_UpstreamModel):
    user: GraphQLUser | None


class GraphQLContributionResponse(_UpstreamModel):
    data: GraphQLData | None = None
    errors: list[dict[str, Any]] | None = None


class WeatherValues(_UpstreamModel):
    # Tomorrow.io sends whole degrees as JSON integers.
    temperature: float = Field(strict=False)


class WeatherInterval(_UpstreamModel):
    start_time: str = Field(alias="startTime")
    values: WeatherValues


class WeatherTimeline(_UpstreamModel):
    timestep: str
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    intervals: list[WeatherInterval]


class WeatherData(_UpstreamModel):
    timelines: list[WeatherTimeline]


class WeatherResponse(_UpstreamModel):
    data: WeatherData
