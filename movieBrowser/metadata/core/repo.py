"""metadata.core.repo
Data repositories behind the use-cases.

Remote repositories are the only place that talks to `TMDBClient`; local
repositories are plain in-memory holders (no eviction, nothing written to
disk) so the use-cases can hand back "what we last loaded".
"""

from __future__ import annotations
from typing import Dict, Optional, Tuple

from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient
from movieBrowser.metadata.core.models import (
    Configuration,
    MovieDetails,
    MovieListType,
    MoviesList,
)


# ───────────────────────────── configuration ──────────────────────────
class ConfigurationRemoteRepo:
    def __init__(self, client: TMDBClient):
        self.client = client

    def load_configuration(self) -> Configuration:
        return self.client.fetch_configuration()


class ConfigurationLocalRepo:
    """Holds the most recently loaded `Configuration` (or None)."""

    def __init__(self, initial: Configuration | None = None):
        self._configuration = initial

    @property
    def configuration(self) -> Optional[Configuration]:
        return self._configuration

    def save(self, configuration: Configuration) -> None:
        self._configuration = configuration


# ───────────────────────────── movies ─────────────────────────────────
class MoviesRemoteRepo:
    def __init__(self, client: TMDBClient):
        self.client = client

    def load_movies(self, list_type: MovieListType, page: int = 1) -> MoviesList:
        return self.client.fetch_movies(list_type, page=page)

    def load_movie_details(self, movie_id: int) -> MovieDetails:
        return self.client.fetch_movie_details(movie_id)


class MoviesLocalRepo:
    """Pass-through store keyed by (list type, page) and movie id."""

    def __init__(self):
        self._lists: Dict[Tuple[MovieListType, int], MoviesList] = {}
        self._details: Dict[int, MovieDetails] = {}

    def movies(self, list_type: MovieListType, page: int = 1) -> Optional[MoviesList]:
        return self._lists.get((list_type, page))

    def save_movies(self, list_type: MovieListType, movies: MoviesList) -> None:
        self._lists[(list_type, movies.page)] = movies

    def movie_details(self, movie_id: int) -> Optional[MovieDetails]:
        return self._details.get(movie_id)

    def save_movie_details(self, movie_id: int, details: MovieDetails) -> None:
        self._details[movie_id] = details
