"""TMDB service for search suggestions and series episode data."""

import asyncio
import threading
from cachetools import cached
from cachetools import TTLCache
from typing import List, Optional

import tmdbsimple as tmdb

from bingemap.core.config import get_settings
from bingemap.models.media import Episode, Season, SeriesData
import logging
import requests

logger = logging.getLogger(__name__)


class TMDBError(Exception):
    """Domain exception for TMDB failures."""

    def __init__(self, message: str, original_exception: Exception = None):
        super().__init__(message)
        self.original_exception = original_exception


# Initialize TMDB
settings = get_settings()
tmdb.API_KEY = settings.tmdb_api_key
tmdb.REQUESTS_TIMEOUT = settings.request_timeout
if settings.proxy:
    tmdb.REQUESTS_SESSION = requests.Session()
    tmdb.REQUESTS_SESSION.proxies = {"http": settings.proxy, "https": settings.proxy}

series_cache = TTLCache(maxsize=100, ttl=settings.cache_ttl)

MIN_SUGGESTION_QUERY_LENGTH = 2


def _poster_url(poster_path: Optional[str]) -> Optional[str]:
    return f"https://image.tmdb.org/t/p/w500{poster_path}" if poster_path else None


def _search_suggestions_sync(query: str) -> List[str]:
    """Search TMDB for series names matching a partial query (synchronous)."""
    search = tmdb.Search()
    try:
        search.multi(query=query)
    except (requests.exceptions.RequestException, tmdb.APIError) as exc:
        logger.error("Error fetching suggestions for '%s': %s", query, exc)
        return []
    except Exception as exc:
        logger.exception("Unexpected error fetching suggestions for '%s': %s", query, exc)
        return []

    names = []
    for item in search.results:
        # Skip movies and people
        if item.get("media_type") != "tv":
            continue
        name = item.get("name")
        if name:
            names.append(name)
    return names[: settings.suggestion_limit]


async def search_suggestions(query: str) -> List[str]:
    """Search TMDB for series names matching a partial query (async)."""
    if len(query.strip()) < MIN_SUGGESTION_QUERY_LENGTH:
        return []
    return await asyncio.to_thread(_search_suggestions_sync, query)


def _parse_episode(ep: dict, fallback_runtime: Optional[int]) -> Episode:
    """Parse an episode from a TMDB season payload."""
    return Episode(
        episode_number=ep["episode_number"],
        title=ep.get("name") or f"Episode {ep['episode_number']}",
        rating=ep.get("vote_average") or 0.0,
        runtime=ep.get("runtime") or fallback_runtime,
        overview=ep.get("overview") or "",
        air_date=ep.get("air_date"),
    )


def _get_season_episodes_sync(
    tmdb_id: int, season_number: int, fallback_runtime: Optional[int] = None
) -> List[Episode]:
    """Fetch episodes for a specific season (synchronous)."""
    season_api = tmdb.TV_Seasons(tmdb_id, season_number)
    try:
        info = season_api.info()
    except Exception as exc:
        logger.error(
            "Failed to fetch season episodes for ID %s S%s: %s",
            tmdb_id,
            season_number,
            exc,
        )
        raise TMDBError(
            f"Failed to fetch season episodes for ID {tmdb_id} S{season_number}", exc
        ) from exc

    return [_parse_episode(ep, fallback_runtime) for ep in info.get("episodes", [])]


@cached(series_cache, lock=threading.Lock())
def _get_series_data_sync(tmdb_id: int) -> SeriesData:
    """Fetch a TV series with all seasons and episodes (synchronous, cached)."""
    tv_api = tmdb.TV(tmdb_id)
    try:
        info = tv_api.info(append_to_response="external_ids")
    except Exception as exc:
        logger.error("Failed to fetch series details for ID %s: %s", tmdb_id, exc)
        raise TMDBError(f"Failed to fetch series details for ID {tmdb_id}", exc) from exc

    # Used for episodes that carry no runtime of their own
    run_times = info.get("episode_run_time") or []
    fallback_runtime = run_times[0] if run_times else None

    # Season 0 holds specials, leave it out of the heatmap
    seasons = []
    for s in info.get("seasons", []):
        season_number = s.get("season_number", 0)
        if season_number > 0:
            episodes = _get_season_episodes_sync(tmdb_id, season_number, fallback_runtime)
            seasons.append(Season(season_number=season_number, episodes=episodes))

    first_air_date = info.get("first_air_date") or ""
    external_ids = info.get("external_ids") or {}

    logger.info(
        "Fetched '%s' (ID %s): %d seasons",
        info.get("name", "Unknown"),
        tmdb_id,
        len(seasons),
    )
    return SeriesData(
        title=info.get("name", "Unknown"),
        year=first_air_date[:4] if first_air_date else None,
        description=info.get("overview") or "",
        seasons=seasons,
        imdb_id=external_ids.get("imdb_id"),
        tmdb_id=info.get("id", tmdb_id),
        poster_url=_poster_url(info.get("poster_path")),
    )


async def get_series_data(tmdb_id: int) -> SeriesData:
    """Fetch a TV series with all seasons and episodes (async)."""
    return await asyncio.to_thread(_get_series_data_sync, tmdb_id)


def _find_series_id_sync(query: str) -> int:
    """Return the TMDB ID of the top search hit, which must be a TV series."""
    search = tmdb.Search()
    try:
        search.multi(query=query)
    except Exception as exc:
        logger.error("Error searching for '%s': %s", query, exc)
        raise TMDBError(f"Failed to search for '{query}'", exc) from exc

    if not search.results:
        raise TMDBError(f"No results for '{query}'")

    item = search.results[0]
    if item.get("media_type") != "tv":
        raise TMDBError(f"'{query}' is not a TV series")
    return item["id"]


async def find_series_data(query: str) -> SeriesData:
    """Search TMDB and fetch the top hit's series data (async)."""
    tmdb_id = await asyncio.to_thread(_find_series_id_sync, query)
    return await get_series_data(tmdb_id)
