from collections.abc import Callable

import pytest


def graphql_body(weeks: list[list[int]], total: int | None = None) -> dict[str, object]:
    """Build a GitHub GraphQL contribution response with sequential dates."""

    day_number = 0
    payload_weeks = []
    for counts in weeks:
        days = []
        for count in counts:
            day_number += 1
            days.append({"contributionCount": count, "date": f"2026-01-{day_number:02d}"})
        payload_weeks.append({"contributionDays": days})

    return {
        "data": {
            "user": {
                "contributionsCollection": {
                    "contributionCalendar": {
                        "totalContributions": (
                            total if total is not None else sum(map(sum, weeks))
                        ),
                        "weeks": payload_weeks,
                    }
                }
            }
        }
    }


def weather_body(temperature: float) -> dict[str, object]:
    """Build a Tomorrow.io timelines response with a single interval."""

    return {
        "data": {
            "timelines": [
                {
                    "timestep": "1h",
                    "startTime": "2026-10-17T10:00:00-04:00",
                    "endTime": "2026-10-17T16:00:00-04:00",
                    "intervals": [
                        {
                            "startTime": "2026-10-17T10:00:00-04:00",
                            "values": {"temperature": temperature},
                        }
                    ],
                }
            ]
        }
    }


@pytest.fixture
def make_graphql_body() -> Callable[..., dict[str, object]]:
    return graphql_body


@pytest.fixture
def make_weather_body() -> Callable[[float], dict[str, object]]:
    return weather_body
