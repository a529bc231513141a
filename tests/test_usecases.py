from unittest import mock

import pytest

from movieBrowser.metadata.api_clients.tmdb_client import NetworkError
from movieBrowser.metadata.core.models import (
    Configuration,
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
from movieBrowser.metadata.usecases import (
    ConfigurationUseCase,
    MovieDetailsUseCase,
    MoviesUseCase,
)


@pytest.fixture
def tmdb():
    return mock.Mock()


def test_configuration_is_none_until_loaded(tmdb):
    config = Configuration(ImagesConfig("https://example.com", ["w500", "original"]))
    tmdb.fetch_configuration.return_value = config
    use_case = ConfigurationUseCase(ConfigurationRemoteRepo(tmdb), ConfigurationLocalRepo())

    assert use_case.configuration is None
    assert use_case.load_configuration() is config
    assert use_case.configuration is config


def test_failed_configuration_load_keeps_previous(tmdb):
    old = Configuration(ImagesConfig("https://old.example.com", ["w92"]))
    tmdb.fetch_configuration.side_effect = NetworkError("offline")
    use_case = ConfigurationUseCase(ConfigurationRemoteRepo(tmdb), ConfigurationLocalRepo(old))

    with pytest.raises(NetworkError):
        use_case.load_configuration()
    assert use_case.configuration is old


def test_load_movies_fetches_and_records(tmdb):
    movies = MoviesList(results=[MovieSummary(id=1, title="A")], page=3)
    tmdb.fetch_movies.return_value = movies
    local = MoviesLocalRepo()
    use_case = MoviesUseCase(MoviesRemoteRepo(tmdb), local)

    assert use_case.load_movies(MovieListType.UPCOMING, page=3) is movies
    tmdb.fetch_movies.assert_called_once_with(MovieListType.UPCOMING, page=3)
    assert local.movies(MovieListType.UPCOMING, 3) is movies
    assert local.movies(MovieListType.POPULAR, 3) is None


def test_load_movies_always_goes_remote(tmdb):
    tmdb.fetch_movies.return_value = MoviesList()
    use_case = MoviesUseCase(MoviesRemoteRepo(tmdb), MoviesLocalRepo())
    use_case.load_movies(MovieListType.POPULAR)
    use_case.load_movies(MovieListType.POPULAR)
    assert tmdb.fetch_movies.call_count == 2


def test_load_movie_details(tmdb):
    details = MovieDetails(title="Test Movie")
    tmdb.fetch_movie_details.return_value = details
    local = MoviesLocalRepo()
    use_case = MovieDetailsUseCase(MoviesRemoteRepo(tmdb), local)

    assert use_case.load_movie_details(42) is details
    tmdb.fetch_movie_details.assert_called_once_with(42)
    assert local.movie_details(42) is details


def test_details_error_propagates(tmdb):
    tmdb.fetch_movie_details.side_effect = NetworkError("boom")
    local = MoviesLocalRepo()
    use_case = MovieDetailsUseCase(MoviesRemoteRepo(tmdb), local)
    with pytest.raises(NetworkError):
        use_case.load_movie_details(1)
    assert local.movie_details(1) is None
