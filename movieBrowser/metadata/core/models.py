# Domain dataclasses (+ the list-type enum) shared by client, use-cases and presenters
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class MovieListType(Enum):
    POPULAR     = "popular"
    TOP_RATED   = "top_rated"
    NOW_PLAYING = "now_playing"
    UPCOMING    = "upcoming"

    @property
    def title(self) -> str:
        return _LIST_TITLES[self]

    @property
    def path(self) -> str:
        """TMDb endpoint for this list, e.g. ``/movie/popular``."""
        return f"/movie/{self.value}"


_LIST_TITLES = {
    MovieListType.POPULAR:     "Popular",
    MovieListType.TOP_RATED:   "Top Rated",
    MovieListType.NOW_PLAYING: "Now Playing",
    MovieListType.UPCOMING:    "Upcoming",
}


@dataclass(slots=True, frozen=True)
class Genre:
    id: int
    name: str


@dataclass(slots=True, frozen=True)
class MovieSummary:
    id: int
    title: str | None = None
    poster_path: str | None = None
    release_date: str = ""


@dataclass(slots=True, frozen=True)
class MoviesList:
    results: list[MovieSummary] = field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    total_results: int = 0


@dataclass(slots=True, frozen=True)
class MovieDetails:
    title: str | None = None
    overview: str | None = None
    poster_path: str | None = None
    budget: int | None = None            # whole currency units
    runtime: int | None = None           # minutes
    genres: list[Genre] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class ImagesConfig:
    base_url: str
    poster_sizes: list[str] = field(default_factory=list)

    @property
    def thumbnail_size(self) -> str | None:
        return self.poster_sizes[0] if self.poster_sizes else None

    @property
    def original_size(self) -> str | None:
        return self.poster_sizes[-1] if self.poster_sizes else None


@dataclass(slots=True, frozen=True)
class Configuration:
    images: ImagesConfig
