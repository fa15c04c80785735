"""Media models for series data and the values derived from it."""

from datetime import date
from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel


class Episode(BaseModel):
    """An episode in a TV series."""

    episode_number: int
    title: str
    rating: float = 0.0
    runtime: Optional[int] = None  # minutes
    overview: str = ""
    air_date: Optional[str] = None


class Season(BaseModel):
    """A season of a TV series."""

    season_number: int
    episodes: List[Episode] = []


class SeriesData(BaseModel):
    """A TV series with every season and episode the provider returned."""

    title: str
    year: Optional[str] = None
    description: str = ""
    seasons: List[Season] = []
    imdb_id: Optional[str] = None
    tmdb_id: Optional[int] = None
    poster_url: Optional[str] = None


# "all" or a single season number
SeasonFilter = Union[Literal["all"], int]


class EpisodeMatrixRow(BaseModel):
    """One season of the heatmap; cells[i] holds episode number i + 1."""

    season_number: int
    cells: List[Optional[Episode]] = []


class EpisodeMatrix(BaseModel):
    """Dense season x episode grid where every row has the same width."""

    rows: List[EpisodeMatrixRow] = []
    max_episode_number: int = 0


class RatingBucket(str, Enum):
    """Fixed rating ranges used for heatmap colouring."""

    TOP = "top"
    HIGH = "high"
    MID = "mid"
    LOW = "low"


class RatingStyle(BaseModel):
    """Colours for a rating bucket."""

    bucket: RatingBucket
    fill_color: str
    text_color: str


class LegendEntry(BaseModel):
    """A rating bucket as shown in the heatmap legend."""

    bucket: RatingBucket
    label: str  # e.g. "8.5–10.0"
    fill_color: str
    text_color: str


class EpisodeRef(BaseModel):
    """Points at one episode of a series."""

    season_number: int
    episode_number: int
    rating: float


class SeasonHighlights(BaseModel):
    """Best and worst episode of a season."""

    season_number: int
    best: Optional[EpisodeRef] = None
    worst: Optional[EpisodeRef] = None


class SeriesHighlights(BaseModel):
    """Per-season and series-wide best/worst episodes."""

    seasons: List[SeasonHighlights] = []
    best: Optional[EpisodeRef] = None
    worst: Optional[EpisodeRef] = None


class AggregateStats(BaseModel):
    """Totals and averages over a series (or one season of it)."""

    total_runtime_minutes: int = 0
    total_runtime_hours: int = 0
    total_runtime_remainder_minutes: int = 0
    average_rating: float = 0.0
    average_runtime_minutes: int = 0
    episode_count: int = 0


class BingeParameters(BaseModel):
    """A viewing cadence plus the date to start from."""

    hours_per_day: float
    days_per_week: float
    start_date: date
    season_filter: SeasonFilter = "all"


class BingeEstimate(BaseModel):
    """Projected finish date, or the reason the cadence was rejected."""

    total_runtime_minutes: int
    season_filter: SeasonFilter = "all"
    finish_date: Optional[date] = None
    finish_date_label: Optional[str] = None
    days_required: Optional[int] = None
    error: Optional[str] = None


class ExternalLink(BaseModel):
    """A link to a third-party site about the series or an episode."""

    name: str
    url: str
