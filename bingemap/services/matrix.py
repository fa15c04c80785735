"""Heatmap grid construction for a series' seasons and episodes."""

import logging
from typing import Dict, List, Optional

from bingemap.models.media import (
    Episode,
    EpisodeMatrix,
    EpisodeMatrixRow,
    EpisodeRef,
    Season,
    SeasonHighlights,
    SeriesData,
    SeriesHighlights,
)

logger = logging.getLogger(__name__)


def _sorted_seasons(series: SeriesData) -> List[Season]:
    return sorted(series.seasons, key=lambda s: s.season_number)


def _index_episodes(season: Season) -> Dict[int, Episode]:
    """Map episode number to episode. The first duplicate wins."""
    index: Dict[int, Episode] = {}
    for episode in season.episodes:
        index.setdefault(episode.episode_number, episode)
    return index


def build_episode_matrix(series: SeriesData) -> EpisodeMatrix:
    """Turn a series' seasons into a dense, column-aligned grid.

    Rows are ordered by season number. Every row is as wide as the highest
    episode number found in *any* season, so the columns line up. Episode
    numbers missing from a season come out as ``None`` cells.

    Args:
        series: The series to lay out. It is not modified.

    Returns:
        An EpisodeMatrix; empty with ``max_episode_number == 0`` when the
        series has no seasons or no episodes.
    """
    seasons = _sorted_seasons(series)
    indexes = [(season.season_number, _index_episodes(season)) for season in seasons]

    max_episode_number = 0
    for _, index in indexes:
        if index:
            max_episode_number = max(max_episode_number, max(index))

    rows = [
        EpisodeMatrixRow(
            season_number=season_number,
            cells=[index.get(i) for i in range(1, max_episode_number + 1)],
        )
        for season_number, index in indexes
    ]

    logger.debug(
        "Built %d x %d episode matrix for '%s'",
        len(rows),
        max_episode_number,
        series.title,
    )
    return EpisodeMatrix(rows=rows, max_episode_number=max_episode_number)


def _ref(season_number: int, episode: Episode) -> EpisodeRef:
    return EpisodeRef(
        season_number=season_number,
        episode_number=episode.episode_number,
        rating=episode.rating,
    )


def find_highlights(series: SeriesData) -> SeriesHighlights:
    """Find the best and worst rated episode per season and overall.

    Episodes are visited in episode-number order and comparisons are strict,
    so on a tie the earlier episode keeps its place. A season's only episode
    is its best episode and is not reported as the worst.
    """
    season_highlights: List[SeasonHighlights] = []
    best: Optional[EpisodeRef] = None
    worst: Optional[EpisodeRef] = None

    for season in _sorted_seasons(series):
        index = _index_episodes(season)
        season_best: Optional[EpisodeRef] = None
        season_worst: Optional[EpisodeRef] = None

        for number in sorted(index):
            ref = _ref(season.season_number, index[number])
            if season_best is None or ref.rating > season_best.rating:
                season_best = ref
            if season_worst is None or ref.rating < season_worst.rating:
                season_worst = ref
            if best is None or ref.rating > best.rating:
                best = ref
            if worst is None or ref.rating < worst.rating:
                worst = ref

        if season_worst is not None and season_worst == season_best:
            season_worst = None

        season_highlights.append(
            SeasonHighlights(
                season_number=season.season_number,
                best=season_best,
                worst=season_worst,
            )
        )

    return SeriesHighlights(seasons=season_highlights, best=best, worst=worst)
