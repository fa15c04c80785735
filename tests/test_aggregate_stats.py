import pytest

from bingemap.models.media import Episode, Season, SeriesData
from bingemap.services.stats import (
    compute_aggregate_stats,
    parse_season_filter,
    total_runtime_minutes,
)

from conftest import make_season


def test_average_rating_and_runtime_totals():
    """Ratings [8, 9, 7] average 8.0; runtimes [50, 55, 45] total 2h 30m."""
    series = SeriesData(
        title="Three", seasons=[make_season(1, [8, 9, 7], [50, 55, 45])]
    )
    stats = compute_aggregate_stats(series)

    assert stats.average_rating == 8.0
    assert stats.total_runtime_minutes == 150
    assert stats.total_runtime_hours == 2
    assert stats.total_runtime_remainder_minutes == 30
    assert stats.average_runtime_minutes == 50
    assert stats.episode_count == 3


def test_zero_episodes_yield_zero_stats(empty_series):
    stats = compute_aggregate_stats(empty_series)
    assert stats.total_runtime_minutes == 0
    assert stats.total_runtime_hours == 0
    assert stats.total_runtime_remainder_minutes == 0
    assert stats.average_rating == 0.0
    assert stats.average_runtime_minutes == 0
    assert stats.episode_count == 0


def test_missing_runtime_counts_as_zero():
    season = Season(
        season_number=1,
        episodes=[
            Episode(episode_number=1, title="A", rating=8.0, runtime=None),
            Episode(episode_number=2, title="B", rating=6.0, runtime=0),
            Episode(episode_number=3, title="C", rating=7.0, runtime=45),
        ],
    )
    stats = compute_aggregate_stats(SeriesData(title="Partial", seasons=[season]))
    assert stats.total_runtime_minutes == 45
    assert stats.average_runtime_minutes == 15
    assert stats.average_rating == 7.0


def test_average_runtime_rounds_half_up():
    series = SeriesData(title="Halves", seasons=[make_season(1, [7, 7], [45, 46])])
    assert compute_aggregate_stats(series).average_runtime_minutes == 46


def test_all_seasons(series):
    stats = compute_aggregate_stats(series)
    assert stats.episode_count == 6
    assert stats.total_runtime_minutes == 300
    assert stats.total_runtime_hours == 5
    assert stats.total_runtime_remainder_minutes == 0
    assert stats.average_rating == pytest.approx(47.6 / 6)


def test_season_filter(series):
    stats = compute_aggregate_stats(series, 1)
    assert stats.episode_count == 2
    assert stats.total_runtime_minutes == 100
    assert stats.average_rating == 7.5


def test_filter_to_empty_season(series):
    stats = compute_aggregate_stats(series, 3)
    assert stats.total_runtime_minutes == 0
    assert stats.average_rating == 0.0


def test_filter_to_unknown_season(series):
    assert compute_aggregate_stats(series, 42).episode_count == 0


def test_total_runtime_minutes(series):
    assert total_runtime_minutes(series) == 300
    assert total_runtime_minutes(series, 2) == 200
    assert total_runtime_minutes(series, 3) == 0


def test_idempotent(series):
    assert compute_aggregate_stats(series, 2) == compute_aggregate_stats(series, 2)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("all", "all"),
        ("ALL", "all"),
        ("", "all"),
        (None, "all"),
        ("2", 2),
        (" 3 ", 3),
        (4, 4),
    ],
)
def test_parse_season_filter(value, expected):
    assert parse_season_filter(value) == expected


def test_parse_season_filter_rejects_garbage():
    with pytest.raises(ValueError, match="Season filter"):
        parse_season_filter("first")
