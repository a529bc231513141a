import pytest

from movieBrowser.dependencies import Container, MissingDependencyError, build_container
from movieBrowser.gui.presenters import MovieDetailsPresenter, MoviesListPresenter
from movieBrowser.gui.workers import Dispatcher, InlineDispatcher
from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient
from movieBrowser.metadata.core.models import MovieListType
from movieBrowser.metadata.usecases import ConfigurationUseCase, MoviesUseCase

from fakes import FakeNavigator


def test_missing_key_fails_at_composition(monkeypatch):
    monkeypatch.delenv("TMDB_API_KEY", raising=False)
    monkeypatch.setattr("movieBrowser.settings.TMDB_API_KEY", None)
    with pytest.raises(EnvironmentError):
        build_container()


def test_unregistered_dependency_fails_when_presenter_is_built():
    container = Container()
    with pytest.raises(MissingDependencyError):
        container.movies_list_presenter(MovieListType.POPULAR)


def test_resolve_returns_singletons():
    container = build_container(api_key="k", dispatcher_factory=InlineDispatcher)
    assert container.resolve(MoviesUseCase) is container.resolve(MoviesUseCase)
    assert container.resolve(TMDBClient).api_key == "k"
    assert isinstance(container.resolve(Dispatcher), InlineDispatcher)


def test_presenters_share_configuration_use_case():
    container = build_container(api_key="k", dispatcher_factory=InlineDispatcher)
    navigator = FakeNavigator()
    lists = container.movies_list_presenter(MovieListType.NOW_PLAYING, navigator=navigator)
    details = container.movie_details_presenter(7)

    assert isinstance(lists, MoviesListPresenter)
    assert isinstance(details, MovieDetailsPresenter)
    assert lists.navigator is navigator
    assert details.movie_id == 7
    assert lists.configuration_use_case is details.configuration_use_case
    assert lists.configuration_use_case is container.resolve(ConfigurationUseCase)


def test_register_overrides_factory():
    container = build_container(api_key="k", dispatcher_factory=InlineDispatcher)
    sentinel = object()
    container.register(MoviesUseCase, lambda: sentinel)
    assert container.resolve(MoviesUseCase) is sentinel
