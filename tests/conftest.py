import os

import pytest

# Settings require a TMDB key at import time
os.environ.setdefault("TMDB_API_KEY", "test-key")

from bingemap.models.media import Episode, Season, SeriesData  # noqa: E402


def make_season(season_number, ratings, runtimes=None, start=1):
    """Build a season with consecutive episode numbers starting at ``start``."""
    runtimes = runtimes or [None] * len(ratings)
    return Season(
        season_number=season_number,
        episodes=[
            Episode(
                episode_number=start + i,
                title=f"S{season_number}E{start + i}",
                rating=rating,
                runtime=runtime,
            )
            for i, (rating, runtime) in enumerate(zip(ratings, runtimes))
        ],
    )


@pytest.fixture
def series():
    """A small three-season series, seasons deliberately out of order."""
    return SeriesData(
        title="Test Show",
        year="2008",
        description="A show for tests",
        imdb_id="tt0903747",
        tmdb_id=1396,
        seasons=[
            make_season(2, [8.0, 9.0, 7.0, 8.6], [50, 55, 45, 50]),
            make_season(1, [9.0, 6.0], [60, 40]),
            Season(season_number=3, episodes=[]),
        ],
    )


@pytest.fixture
def empty_series():
    return SeriesData(title="Nothing Yet", seasons=[])
