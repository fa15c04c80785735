"""Aggregate statistics over a series' episodes."""

import math
from typing import Iterator, List, Union

from bingemap.models.media import AggregateStats, Episode, SeasonFilter, SeriesData


def parse_season_filter(value: Union[str, int, None]) -> SeasonFilter:
    """Parse a season filter from user input.

    Accepts ``"all"`` (any case), ``None`` or an empty string for every
    season, otherwise a season number.

    Raises:
        ValueError: If the value is neither "all" nor an integer.
    """
    if value is None:
        return "all"
    if isinstance(value, int):
        return value
    cleaned = value.strip()
    if not cleaned or cleaned.lower() == "all":
        return "all"
    try:
        return int(cleaned)
    except ValueError:
        raise ValueError(
            f"Season filter must be 'all' or a season number, got {value!r}"
        ) from None


def iter_episodes(
    series: SeriesData, season_filter: SeasonFilter = "all"
) -> Iterator[Episode]:
    """Yield the episodes of every season matching the filter."""
    for season in series.seasons:
        if season_filter != "all" and season.season_number != season_filter:
            continue
        yield from season.episodes


def total_runtime_minutes(series: SeriesData, season_filter: SeasonFilter = "all") -> int:
    """Sum of episode runtimes; missing runtimes count as zero."""
    return sum(e.runtime or 0 for e in iter_episodes(series, season_filter))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_aggregate_stats(
    series: SeriesData, season_filter: SeasonFilter = "all"
) -> AggregateStats:
    """Compute total runtime, average rating and average runtime.

    Never raises on empty or partial data: a series (or season) without
    episodes yields all-zero stats.
    """
    episodes: List[Episode] = list(iter_episodes(series, season_filter))
    count = len(episodes)
    total_runtime = sum(e.runtime or 0 for e in episodes)
    rating_sum = sum(e.rating for e in episodes)

    return AggregateStats(
        total_runtime_minutes=total_runtime,
        total_runtime_hours=total_runtime // 60,
        total_runtime_remainder_minutes=total_runtime % 60,
        average_rating=rating_sum / count if count else 0.0,
        average_runtime_minutes=_round_half_up(total_runtime / count) if count else 0,
        episode_count=count,
    )
