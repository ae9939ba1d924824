import logging

import httpx

from dashboard.api.schemas.contributions import ContributionDay
from dashboard.api.schemas.contributions import ContributionHistory
from dashboard.api.schemas.contributions import ContributionWeek
from dashboard.clients.models import GraphQLContributionResponse


logger = logging.getLogger(__name__)

USER_AGENT = "personal-dashboard"

CONTRIBUTIONS_QUERY = """
query($userName: String!) {
  user(login: $userName) {
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            contributionCount
            date
          }
        }
      }
    }
  }
}
"""


def parse_contribution_payload(raw_body: str | bytes) -> ContributionHistory:
    """Decode a GitHub GraphQL response body into a contribution history.

    Raises:
        ValueError: If the body is not valid JSON, reports GraphQL errors,
            has no user, or misses any contribution field.
    """

    payload = GraphQLContributionResponse.model_validate_json(raw_body)

    if payload.errors:
        messages = ", ".join(
            str(error.get("message", "unknown error")) for error in payload.errors
        )
        raise ValueError(f"GitHub GraphQL returned errors: {messages}")

    if payload.data is None:
        raise ValueError("GitHub GraphQL data is missing")

    if payload.data.user is None:
        raise ValueError("GitHub user not found")

    calendar = payload.data.user.contributions_collection.contribution_calendar
    weeks = [
        ContributionWeek(
            days=[
                ContributionDay(date=day.date, count=day.contribution_count)
                for day in week.contribution_days
            ]
        )
        for week in calendar.weeks
    ]
    return ContributionHistory(total=calendar.total_contributions, weeks=weeks)


def fetch_contribution_history(
    client: httpx.Client,
    username: str,
    token: str,
    graphql_url: str,
) -> ContributionHistory:
    """Fetch the contribution calendar of `username` from GitHub GraphQL API."""

    if not token:
        raise ValueError("GITHUB_TOKEN is required for GraphQL requests")

    response = client.post(
        graphql_url,
        json={"query": CONTRIBUTIONS_QUERY, "variables": {"userName": username}},
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        },
    )
    logger.debug("GitHub GraphQL responded with %s", response.status_code)
    response.raise_for_status()

    return parse_contribution_payload(response.content)
