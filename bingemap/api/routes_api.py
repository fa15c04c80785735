"""API routes returning heatmap, statistics and binge data as JSON."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from bingemap.core.config import get_settings
from bingemap.models.media import (
    AggregateStats,
    BingeEstimate,
    BingeParameters,
    Episode,
    ExternalLink,
    LegendEntry,
    RatingStyle,
    SeasonFilter,
    SeriesData,
    SeriesHighlights,
)
from bingemap.services.binge import plan_binge
from bingemap.services.links import (
    episode_discussion_url,
    episode_imdb_url,
    series_links,
)
from bingemap.services.matrix import build_episode_matrix, find_highlights
from bingemap.services.ratings import classify_rating, rating_legend
from bingemap.services.stats import compute_aggregate_stats, parse_season_filter
from bingemap.services.tmdb import (
    TMDBError,
    find_series_data,
    get_series_data,
    search_suggestions,
)

router = APIRouter()


class HeatmapCell(BaseModel):
    """A present episode in the heatmap with its colours and links."""

    episode: Episode
    style: RatingStyle
    discussion_url: str
    imdb_url: str


class HeatmapRow(BaseModel):
    """One season of the heatmap; ``None`` marks a missing episode number."""

    season_number: int
    cells: List[Optional[HeatmapCell]]


class HeatmapResponse(BaseModel):
    """Everything the rendering layer needs to draw a series heatmap."""

    title: str
    max_episode_number: int
    rows: List[HeatmapRow]
    legend: List[LegendEntry]
    highlights: SeriesHighlights


async def _load_series(tmdb_id: int) -> SeriesData:
    try:
        return await get_series_data(tmdb_id)
    except TMDBError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


def _season_filter(season: str) -> SeasonFilter:
    try:
        return parse_season_filter(season)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "service": "bingemap"}


@router.get("/suggestions", response_model=List[str])
async def api_suggestions(q: str = Query(..., description="Partial series name")):
    """Series name suggestions for a search box."""
    return await search_suggestions(q)


@router.get("/ratings/legend", response_model=List[LegendEntry])
async def api_rating_legend():
    """Rating buckets and their colours."""
    return rating_legend()


@router.get("/series/search", response_model=SeriesData)
async def api_find_series(q: str = Query(..., description="Series name")):
    """Fetch the series best matching a free-text query."""
    try:
        return await find_series_data(q)
    except TMDBError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.get("/series/{tmdb_id}", response_model=SeriesData)
async def api_series(tmdb_id: int):
    """Raw series data with all seasons and episodes."""
    return await _load_series(tmdb_id)


@router.get("/series/{tmdb_id}/heatmap", response_model=HeatmapResponse)
async def api_heatmap(tmdb_id: int):
    """Season x episode grid with rating colours for each present cell."""
    series = await _load_series(tmdb_id)
    matrix = build_episode_matrix(series)

    rows = []
    for row in matrix.rows:
        cells = []
        for episode in row.cells:
            if episode is None:
                cells.append(None)
                continue
            cells.append(
                HeatmapCell(
                    episode=episode,
                    style=classify_rating(episode.rating),
                    discussion_url=episode_discussion_url(
                        series, row.season_number, episode.episode_number
                    ),
                    imdb_url=episode_imdb_url(
                        series, row.season_number, episode.episode_number
                    ),
                )
            )
        rows.append(HeatmapRow(season_number=row.season_number, cells=cells))

    return HeatmapResponse(
        title=series.title,
        max_episode_number=matrix.max_episode_number,
        rows=rows,
        legend=rating_legend(),
        highlights=find_highlights(series),
    )


@router.get("/series/{tmdb_id}/stats", response_model=AggregateStats)
async def api_stats(
    tmdb_id: int,
    season: str = Query("all", description="'all' or a season number"),
):
    """Total runtime and averages, optionally for a single season."""
    season_filter = _season_filter(season)
    series = await _load_series(tmdb_id)
    return compute_aggregate_stats(series, season_filter)


@router.get("/series/{tmdb_id}/binge", response_model=Optional[BingeEstimate])
async def api_binge(
    tmdb_id: int,
    hours_per_day: Optional[float] = Query(None, description="Hours watched per day"),
    days_per_week: Optional[float] = Query(None, description="Days watched per week"),
    start_date: Optional[date] = Query(None, description="First viewing day"),
    season: str = Query("all", description="'all' or a season number"),
):
    """Projected finish date for a viewing cadence.

    Returns null when the selection has no runtime to watch.
    """
    settings = get_settings()
    params = BingeParameters(
        hours_per_day=(
            hours_per_day if hours_per_day is not None else settings.default_hours_per_day
        ),
        days_per_week=(
            days_per_week if days_per_week is not None else settings.default_days_per_week
        ),
        start_date=start_date or date.today(),
        season_filter=_season_filter(season),
    )
    series = await _load_series(tmdb_id)

    estimate = plan_binge(series, params)
    if estimate is not None and estimate.error:
        raise HTTPException(status_code=400, detail=estimate.error)
    return estimate


@router.get("/series/{tmdb_id}/links", response_model=List[ExternalLink])
async def api_links(tmdb_id: int):
    """IMDb, Reddit, Letterboxd and Rotten Tomatoes links for the series."""
    series = await _load_series(tmdb_id)
    return series_links(series)
