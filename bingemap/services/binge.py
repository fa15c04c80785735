"""Binge schedule calculation: when will I finish watching?"""

import logging
import math
from datetime import date, timedelta
from typing import Optional

from bingemap.models.media import BingeEstimate, BingeParameters, SeriesData
from bingemap.services import stats

logger = logging.getLogger(__name__)

MAX_HOURS_PER_DAY = 24
MAX_DAYS_PER_WEEK = 7


class InvalidCadence(ValueError):
    """Raised when hours per day or days per week are out of range."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _is_positive(value: float) -> bool:
    # NaN fails every comparison, treat it as not positive
    return math.isfinite(value) and value > 0


def validate_cadence(hours_per_day: float, days_per_week: float) -> None:
    """Check a viewing cadence. The first failing rule wins.

    Raises:
        InvalidCadence: With a message suitable for display.
    """
    if hours_per_day > MAX_HOURS_PER_DAY:
        raise InvalidCadence("hours per day cannot exceed 24")
    if not _is_positive(hours_per_day):
        raise InvalidCadence("hours per day must be positive")
    if days_per_week > MAX_DAYS_PER_WEEK:
        raise InvalidCadence("days per week cannot exceed 7")
    if not _is_positive(days_per_week):
        raise InvalidCadence("days per week must be positive")


def days_required(
    total_runtime_minutes: int, hours_per_day: float, days_per_week: float
) -> int:
    """Calendar days needed to watch the runtime at the given cadence."""
    hours_per_week = hours_per_day * days_per_week
    total_hours = total_runtime_minutes / 60
    weeks_required = total_hours / hours_per_week
    return math.ceil(weeks_required * 7)


def compute_binge_finish(
    total_runtime_minutes: int,
    hours_per_day: float,
    days_per_week: float,
    start_date: date,
) -> Optional[date]:
    """Project the date a binge starting on ``start_date`` finishes.

    Returns:
        The finish date, or None when there is nothing to watch.

    Raises:
        InvalidCadence: If the cadence is out of range, or so slow the finish
            date falls past the end of the calendar. No date is computed.
    """
    validate_cadence(hours_per_day, days_per_week)
    if total_runtime_minutes <= 0:
        return None
    try:
        days = days_required(total_runtime_minutes, hours_per_day, days_per_week)
        return start_date + timedelta(days=days)
    except OverflowError:
        raise InvalidCadence("finish date is out of range") from None


def format_finish_date(finish: date) -> str:
    """Long, locale-formatted date without day padding, e.g. "Saturday, January 6, 2024"."""
    return f"{finish:%A, %B} {finish.day}, {finish.year}"


def plan_binge(series: SeriesData, params: BingeParameters) -> Optional[BingeEstimate]:
    """Compute a binge estimate for the caller to display.

    The runtime is recomputed for the selected season (or all seasons) on
    every call. Returns None when that runtime is zero, since there is
    nothing to watch. A rejected cadence is reported in ``error`` rather
    than raised.
    """
    runtime = stats.total_runtime_minutes(series, params.season_filter)
    if runtime <= 0:
        logger.debug(
            "No runtime for '%s' (season filter %s), skipping binge estimate",
            series.title,
            params.season_filter,
        )
        return None

    estimate = BingeEstimate(
        total_runtime_minutes=runtime, season_filter=params.season_filter
    )
    try:
        finish = compute_binge_finish(
            runtime, params.hours_per_day, params.days_per_week, params.start_date
        )
    except InvalidCadence as exc:
        estimate.error = exc.message
        return estimate

    estimate.finish_date = finish
    estimate.finish_date_label = format_finish_date(finish)
    estimate.days_required = (finish - params.start_date).days
    return estimate
