"""
dependencies
~~~~~~~~~~~~
Composition root. Every collaborator is registered once as a factory and
resolved when a presenter is built; nothing looks services up per request.

    container = build_container()              # raises EnvironmentError w/o key
    presenter = container.movies_list_presenter(MovieListType.POPULAR)
"""

from __future__ import annotations
from typing import Any, Callable, Dict

from movieBrowser import settings
from movieBrowser.utils import log_debug
from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient
from movieBrowser.metadata.core.models import MovieListType
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
from movieBrowser.gui.workers import Dispatcher
from movieBrowser.gui.presenters import (
    MovieDetailsPresenter,
    MoviesListPresenter,
    Navigator,
)


class MissingDependencyError(RuntimeError):
    """A collaborator was requested that nobody registered."""


class Container:
    """Lazily-built singletons keyed by their interface type."""

    def __init__(self):
        self._factories: Dict[Any, Callable[[], Any]] = {}
        self._instances: Dict[Any, Any] = {}

    def register(self, key: Any, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory
        self._instances.pop(key, None)

    def resolve(self, key: Any) -> Any:
        if key in self._instances:
            return self._instances[key]
        try:
            factory = self._factories[key]
        except KeyError:
            name = getattr(key, "__name__", key)
            raise MissingDependencyError(f"No dependency registered for {name}") from None
        instance = self._instances[key] = factory()
        return instance

    # ── presenter factories ──────────────────────────────────────────
    def movies_list_presenter(
        self,
        list_type: MovieListType,
        navigator: Navigator | None = None,
        parent=None,
    ) -> MoviesListPresenter:
        return MoviesListPresenter(
            list_type,
            self.resolve(MoviesUseCase),
            self.resolve(ConfigurationUseCase),
            self.resolve(Dispatcher),
            navigator=navigator,
            parent=parent,
        )

    def poster_loader(self, parent=None):
        from movieBrowser.gui.poster_loader import PosterLoader
        client = self.resolve(TMDBClient)
        return PosterLoader(client.fetch_image, self.resolve(Dispatcher), parent=parent)

    def movie_details_presenter(self, movie_id: int, parent=None) -> MovieDetailsPresenter:
        return MovieDetailsPresenter(
            movie_id,
            self.resolve(MovieDetailsUseCase),
            self.resolve(ConfigurationUseCase),
            self.resolve(Dispatcher),
            parent=parent,
        )


def build_container(
    api_key: str | None = None,
    dispatcher_factory: Callable[[], Any] | None = None,
) -> Container:
    """
    Wire the TMDb client → repos → use-cases graph.

    *dispatcher_factory* defaults to `ThreadDispatcher`; pass
    `InlineDispatcher` for scripts that have no event loop.
    """
    key = api_key or settings.require_tmdb_key()

    if dispatcher_factory is None:
        from movieBrowser.gui.workers import ThreadDispatcher
        dispatcher_factory = ThreadDispatcher

    c = Container()
    c.register(TMDBClient, lambda: TMDBClient(
        api_key=key, base_url=settings.TMDB_BASE_URL, language=settings.TMDB_LANGUAGE,
    ))

    c.register(ConfigurationRemoteRepo, lambda: ConfigurationRemoteRepo(c.resolve(TMDBClient)))
    c.register(ConfigurationLocalRepo, ConfigurationLocalRepo)
    c.register(ConfigurationUseCase, lambda: ConfigurationUseCase(
        c.resolve(ConfigurationRemoteRepo), c.resolve(ConfigurationLocalRepo),
    ))

    c.register(MoviesRemoteRepo, lambda: MoviesRemoteRepo(c.resolve(TMDBClient)))
    c.register(MoviesLocalRepo, MoviesLocalRepo)
    c.register(MoviesUseCase, lambda: MoviesUseCase(
        c.resolve(MoviesRemoteRepo), c.resolve(MoviesLocalRepo),
    ))
    c.register(MovieDetailsUseCase, lambda: MovieDetailsUseCase(
        c.resolve(MoviesRemoteRepo), c.resolve(MoviesLocalRepo),
    ))

    c.register(Dispatcher, dispatcher_factory)
    log_debug("Container built")
    return c
