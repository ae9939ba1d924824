import json
from datetime import date

import pytest

from dashboard.api.schemas.contributions import ContributionDay
from dashboard.api.schemas.contributions import ContributionHistory
from dashboard.api.schemas.contributions import ContributionWeek
from dashboard.services.dashboard_service import GitHubAPIError
from dashboard.services.dashboard_service import build_dashboard_page
from dashboard.services.dashboard_service import get_fixture_dashboard
from dashboard.services.dashboard_service import render_dashboard
from dashboard.settings import Settings


def make_history(*weeks: list[int]) -> ContributionHistory:
    day_number = 0
    history_weeks = []
    for counts in weeks:
        days = []
        for count in counts:
            day_number += 1
            days.append(ContributionDay(date=f"2026-03-{day_number:02d}", count=count))
        history_weeks.append(ContributionWeek(days=days))
    return ContributionHistory(total=sum(map(sum, weeks)), weeks=history_weeks)


def test_build_dashboard_page_windows_history_and_computes_ratio() -> None:
    history = make_history([9, 9], [1, 0, 3, 0, 0, 0, 2], [0, 5, 0, 0, 1, 0, 0])
    settings = Settings(github_username="octocat", contribution_weeks=2)

    page = build_dashboard_page(history, settings, temperature=3.5)

    assert page.username == "octocat"
    assert page.total_contributions == 12
    assert page.week_days == [[1, 0], [0, 5], [3, 0], [0, 0], [0, 1], [0, 0], [2, 0]]
    assert page.max_count == 5
    assert page.commit_ratio == 20
    assert page.temperature == 3.5
    assert page.first_day == date(2026, 3, 3)
    assert page.last_day == date(2026, 3, 16)


def test_build_dashboard_page_for_empty_history() -> None:
    page = build_dashboard_page(ContributionHistory(), Settings())

    assert page.week_days == [[], [], [], [], [], [], []]
    assert page.max_count == 0
    assert page.commit_ratio == 0
    assert page.first_day is None
    assert page.last_day is None


def test_get_fixture_dashboard_uses_last_52_weeks_of_bundled_fixture() -> None:
    page = get_fixture_dashboard(Settings())

    assert [len(row) for row in page.week_days] == [52] * 7
    assert page.total_contributions == sum(map(sum, page.week_days))
    assert page.total_contributions == 1079
    assert page.first_day == date(2025, 10, 19)
    assert page.last_day == date(2026, 10, 17)
    assert page.temperature is None


def test_get_fixture_dashboard_rejects_malformed_fixture(tmp_path) -> None:
    fixture_path = tmp_path / "contributions.json"
    fixture_path.write_text(json.dumps({"data": {"user": {}}}))

    with pytest.raises(GitHubAPIError):
        get_fixture_dashboard(Settings(contributions_fixture_path=fixture_path))


def test_render_dashboard_escapes_username_and_clamps_opacity() -> None:
    history = make_history([0, 4, 2])
    page = build_dashboard_page(history, Settings(github_username="<b>octo</b>"))

    html = render_dashboard(page)

    assert "<b>octo</b>" not in html
    assert "&lt;b&gt;octo&lt;/b&gt;" in html
    assert "opacity: 100%" in html
    assert "opacity: 50%" in html
    assert "opacity: 0%" in html
