"""Outbound links to IMDb, Reddit and review sites."""

from typing import List
from urllib.parse import quote, quote_plus

from bingemap.models.media import ExternalLink, SeriesData

GOOGLE_SEARCH_URL = "https://www.google.com/search?q="


def _google(query: str) -> str:
    return f"{GOOGLE_SEARCH_URL}{quote_plus(query)}"


def _has_imdb_title_id(series: SeriesData) -> bool:
    return bool(series.imdb_id) and series.imdb_id.startswith("tt")


def series_links(series: SeriesData) -> List[ExternalLink]:
    """Links for the series info panel."""
    title = series.title
    if _has_imdb_title_id(series):
        imdb_url = f"https://www.imdb.com/title/{series.imdb_id}/"
    else:
        imdb_url = f"https://www.imdb.com/find?q={quote_plus(title)}"

    return [
        ExternalLink(name="IMDb", url=imdb_url),
        ExternalLink(name="Reddit", url=_google(f"site:reddit.com {title} discussion")),
        ExternalLink(
            name="Letterboxd",
            url=f"https://letterboxd.com/search/{quote(title, safe='')}/",
        ),
        ExternalLink(
            name="Rotten Tomatoes",
            url=f"https://www.rottentomatoes.com/search?search={quote_plus(title)}",
        ),
    ]


def episode_discussion_url(
    series: SeriesData, season_number: int, episode_number: int
) -> str:
    """Search for the Reddit discussion thread of an episode."""
    return _google(
        f"site:reddit.com {series.title} season {season_number} "
        f"episode {episode_number} discussion"
    )


def episode_imdb_url(series: SeriesData, season_number: int, episode_number: int) -> str:
    """IMDb episode list for the season, or a web search when the IMDb id is unknown."""
    if _has_imdb_title_id(series):
        return f"https://www.imdb.com/title/{series.imdb_id}/episodes?season={season_number}"
    return _google(f"{series.title} season {season_number} episode {episode_number} imdb")
