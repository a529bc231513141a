# metadata/core: dataclasses + repositories
from movieBrowser.metadata.core.models import (
    Configuration,
    Genre,
    ImagesConfig,
    MovieDetails,
    MovieListType,
    MoviesList,
    MovieSummary,
)
from movieBrowser.metadata.core.repo import (
    ConfigurationLocalRepo,
    ConfigurationRemoteRepo,
    MoviesLocalRepo,
    MoviesRemoteRepo,
)

__all__ = [
    "Configuration", "Genre", "ImagesConfig", "MovieDetails",
    "MovieListType", "MoviesList", "MovieSummary",
    "ConfigurationLocalRepo", "ConfigurationRemoteRepo",
    "MoviesLocalRepo", "MoviesRemoteRepo",
]
