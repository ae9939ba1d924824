from collections.abc import Sequence

from dashboard.api.schemas.contributions import ContributionWeek


DAYS_PER_WEEK = 7
MAX_OPACITY = 100


def build_contribution_grid(
    weeks: Sequence[ContributionWeek],
    window: int | None = None,
) -> tuple[list[list[int]], int]:
    """Regroup weekly contribution counts into one row per weekday.

    Row `w` holds the count of weekday `w` for every week, oldest first.
    Weeks cut short at calendar boundaries leave their missing weekdays
    out, so rows are not guaranteed to have the same length.

    When `window` is given, only the most recent `window` weeks are used.
    Returns the rows together with the highest single-day count.
    """

    if window is not None:
        if window < 0:
            raise ValueError("window must not be negative")
        if len(weeks) > window:
            weeks = weeks[len(weeks) - window :]

    week_days: list[list[int]] = [[] for _ in range(DAYS_PER_WEEK)]
    max_count = 0

    for week in weeks:
        for weekday, day in enumerate(week.days):
            if day.count > max_count:
                max_count = day.count
            week_days[weekday].append(day.count)

    return week_days, max_count


def display_ratio(max_count: int) -> float:
    """Return the factor scaling a count into the 0..100 opacity range.

    A window without any contribution has no meaningful scale, so the
    ratio is 0 and every cell renders fully transparent.
    """

    if max_count < 0:
        raise ValueError("max_count must not be negative")
    if max_count == 0:
        return 0.0
    return MAX_OPACITY / max_count


def commit_opacity(count: int, ratio: float) -> int:
    """Map a daily count to an opacity percentage clamped to 0..100."""

    opacity = round(count * ratio)
    return max(0, min(MAX_OPACITY, opacity))
