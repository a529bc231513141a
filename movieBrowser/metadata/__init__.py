"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – dataclasses + repositories
* api_clients – TMDb REST wrapper
* usecases    – what the presenters call
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieBrowser.metadata.core.models import (
    Configuration,
    Genre,
    ImagesConfig,
    MovieDetails,
    MovieListType,
    MoviesList,
    MovieSummary,
)

# ── API client ────────────────────────────────────────────────────────────
from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient, NetworkError

# ── use-cases ─────────────────────────────────────────────────────────────
from movieBrowser.metadata.usecases import (
    ConfigurationUseCase,
    MovieDetailsUseCase,
    MoviesUseCase,
)

__all__ = [
    "Configuration",
    "Genre",
    "ImagesConfig",
    "MovieDetails",
    "MovieListType",
    "MoviesList",
    "MovieSummary",
    "TMDBClient",
    "NetworkError",
    "ConfigurationUseCase",
    "MovieDetailsUseCase",
    "MoviesUseCase",
]
