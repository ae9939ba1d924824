import logging
from datetime import date
from functools import partial
from pathlib import Path

import httpx
from fastapi.templating import Jinja2Templates

from dashboard.api.schemas.contributions import ContributionHistory
from dashboard.api.schemas.contributions import ContributionWeek
from dashboard.api.schemas.contributions import DashboardPage
from dashboard.clients.github_client import fetch_contribution_history
from dashboard.clients.github_client import parse_contribution_payload
from dashboard.clients.weather_client import fetch_current_temperature
from dashboard.services.grid_service import build_contribution_grid
from dashboard.services.grid_service import commit_opacity
from dashboard.services.grid_service import display_ratio
from dashboard.settings import Settings


logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")


class DashboardError(Exception):
    """Base error for failures while assembling the dashboard."""


class GitHubAPIError(DashboardError):
    """Raised when contribution data cannot be fetched or decoded."""


class WeatherAPIError(DashboardError):
    """Raised when weather data cannot be fetched or decoded."""


def _day_range(weeks: list[ContributionWeek]) -> tuple[date | None, date | None]:
    days = [day for week in weeks for day in week.days]
    if not days:
        return None, None
    return days[0].date, days[-1].date


def build_dashboard_page(
    history: ContributionHistory,
    settings: Settings,
    temperature: float | None = None,
) -> DashboardPage:
    """Turn a contribution history into the dashboard view model.

    The total counts only the days shown in the windowed grid.
    """

    week_days, max_count = build_contribution_grid(
        history.weeks, window=settings.contribution_weeks
    )
    first_day, last_day = _day_range(history.weeks[-settings.contribution_weeks :])

    return DashboardPage(
        username=settings.github_username,
        total_contributions=sum(map(sum, week_days)),
        week_days=week_days,
        max_count=max_count,
        commit_ratio=display_ratio(max_count),
        temperature=temperature,
        first_day=first_day,
        last_day=last_day,
    )


def get_live_dashboard(client: httpx.Client, settings: Settings) -> DashboardPage:
    """Fetch contributions and, when enabled, the weather for the dashboard."""

    try:
        history = fetch_contribution_history(
            client=client,
            username=settings.github_username,
            token=settings.github_token,
            graphql_url=settings.github_graphql_url,
        )
    except (httpx.HTTPError, ValueError) as exc:
        raise GitHubAPIError(f"GitHub API request failed: {exc}") from exc

    temperature = None
    if settings.weather_enabled:
        try:
            temperature = fetch_current_temperature(
                client=client,
                token=settings.tomorrow_io_token,
                weather_url=settings.weather_url,
                latitude=settings.weather_latitude,
                longitude=settings.weather_longitude,
                timezone=settings.weather_timezone,
            )
        except (httpx.HTTPError, ValueError) as exc:
            raise WeatherAPIError(f"Weather API request failed: {exc}") from exc

    return build_dashboard_page(history, settings, temperature=temperature)


def get_fixture_dashboard(settings: Settings) -> DashboardPage:
    """Build the dashboard from a saved GraphQL response instead of GitHub."""

    fixture_path = settings.contributions_fixture_path
    try:
        raw_body = fixture_path.read_bytes()
        history = parse_contribution_payload(raw_body)
    except (OSError, ValueError) as exc:
        raise GitHubAPIError(
            f"Contribution fixture {fixture_path} is unusable: {exc}"
        ) from exc

    return build_dashboard_page(history, settings)


def render_dashboard(page: DashboardPage) -> str:
    """Render the whole dashboard page into a string."""

    template = templates.get_template("dashboard.html")
    return template.render(
        page=page,
        commit_opacity=partial(commit_opacity, ratio=page.commit_ratio),
    )
