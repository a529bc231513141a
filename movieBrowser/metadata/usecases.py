"""
metadata.usecases
~~~~~~~~~~~~~~~~~
What the presenters call. Each use-case fetches through its remote repo and
records the result in the matching local repo; nothing is read back from the
local side instead of fetching.

All `load_*` methods block – run them through a dispatcher, never on the
GUI thread.
"""

from __future__ import annotations

from movieBrowser.utils import log_debug
from movieBrowser.metadata.core.models import (
    Configuration,
    MovieDetails,
    MovieListType,
    MoviesList,
)
from movieBrowser.metadata.core.repo import (
    ConfigurationLocalRepo,
    ConfigurationRemoteRepo,
    MoviesLocalRepo,
    MoviesRemoteRepo,
)


class ConfigurationUseCase:
    def __init__(self, remote: ConfigurationRemoteRepo, local: ConfigurationLocalRepo):
        self.remote = remote
        self.local = local

    @property
    def configuration(self) -> Configuration | None:
        """Last configuration loaded, or None before the first load."""
        return self.local.configuration

    def load_configuration(self) -> Configuration:
        configuration = self.remote.load_configuration()
        self.local.save(configuration)
        log_debug(
            f"Configuration loaded ({len(configuration.images.poster_sizes)} poster sizes)"
        )
        return configuration


class MoviesUseCase:
    def __init__(self, remote: MoviesRemoteRepo, local: MoviesLocalRepo):
        self.remote = remote
        self.local = local

    def load_movies(self, list_type: MovieListType, page: int = 1) -> MoviesList:
        movies = self.remote.load_movies(list_type, page=page)
        self.local.save_movies(list_type, movies)
        return movies


class MovieDetailsUseCase:
    def __init__(self, remote: MoviesRemoteRepo, local: MoviesLocalRepo):
        self.remote = remote
        self.local = local

    def load_movie_details(self, movie_id: int) -> MovieDetails:
        details = self.remote.load_movie_details(movie_id)
        self.local.save_movie_details(movie_id, details)
        return details
