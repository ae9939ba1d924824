import logging

import httpx

from dashboard.clients.models import WeatherResponse


logger = logging.getLogger(__name__)


def fetch_current_temperature(
    client: httpx.Client,
    token: str,
    weather_url: str,
    latitude: float,
    longitude: float,
    timezone: str,
) -> float:
    """Fetch the temperature of the first interval of a 6 hour timeline."""

    if not token:
        raise ValueError("TOMORROW_IO_TOKEN is required for weather requests")

    response = client.post(
        weather_url,
        params={"apikey": token},
        json={
            "location": [latitude, longitude],
            "fields": ["temperature"],
            "units": "metric",
            "startTime": "now",
            "endTime": "nowPlus6h",
            "timezone": timezone,
        },
    )
    logger.info(
        "Response from tomorrow.io: %s %s",
        response.status_code,
        response.reason_phrase,
    )
    response.raise_for_status()

    payload = WeatherResponse.model_validate_json(response.content)
    if not payload.data.timelines:
        raise ValueError("Weather response has no timelines")

    intervals = payload.data.timelines[0].intervals
    if not intervals:
        raise ValueError("Weather timeline has no intervals")

    return intervals[0].values.temperature
