from __future__ import annotations
from dataclasses import replace
from typing import List

from PySide6.QtCore import QObject, Signal, Slot

from movieBrowser import settings
from movieBrowser.utils import format_release_date, image_url, log_debug
from movieBrowser.metadata.core.models import ImagesConfig, MovieListType, MoviesList
from movieBrowser.metadata.usecases import ConfigurationUseCase, MoviesUseCase
from movieBrowser.gui.presenters.view_models import (
    IndexPath,
    MovieRowViewModel,
    MoviesListState,
    Navigator,
)


def current_images_config(configuration_use_case: ConfigurationUseCase) -> ImagesConfig:
    """Loaded image config, or TMDb's public defaults when none is usable."""
    configuration = configuration_use_case.configuration
    if configuration is None or not configuration.images.base_url or not configuration.images.poster_sizes:
        return ImagesConfig(settings.DEFAULT_IMAGE_BASE_URL, list(settings.DEFAULT_POSTER_SIZES))
    return configuration.images


class MoviesListPresenter(QObject):
    """
    Backs one movie-list page (popular, top rated, …).

    State is a single frozen `MoviesListState`; every change replaces it and
    emits `state_changed` with the new value.
    """
    state_changed = Signal(object)

    def __init__(
        self,
        list_type: MovieListType,
        movies_use_case: MoviesUseCase,
        configuration_use_case: ConfigurationUseCase,
        dispatcher,
        navigator: Navigator | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.list_type = list_type
        self.movies_use_case = movies_use_case
        self.configuration_use_case = configuration_use_case
        self.dispatcher = dispatcher
        self.navigator = navigator
        self._state = MoviesListState()

    # ── read side ─────────────────────────────────────────────────────
    @property
    def title(self) -> str:
        return self.list_type.title

    @property
    def state(self) -> MoviesListState:
        return self._state

    @property
    def movie_view_models(self) -> tuple[MovieRowViewModel, ...]:
        return self._state.rows

    @property
    def load_error(self) -> Exception | None:
        return self._state.error

    def number_of_sections(self) -> int:
        return 1

    def number_of_rows_in_section(self, section: int) -> int:
        if section != 0:
            raise IndexError(f"No section {section} in a movie list")
        return len(self._state.rows)

    def row_at(self, index_path: IndexPath) -> MovieRowViewModel:
        rows = self._state.rows
        if index_path.section != 0 or not 0 <= index_path.row < len(rows):
            raise IndexError(f"No movie row at {tuple(index_path)} ({len(rows)} rows)")
        return rows[index_path.row]

    # ── commands ──────────────────────────────────────────────────────
    def load_movies(self, page: int = 1) -> None:
        log_debug(f"Loading {self.list_type.value} movies (page {page})")
        list_type = self.list_type
        self.dispatcher.dispatch(
            lambda: self.movies_use_case.load_movies(list_type, page=page),
            self._on_movies_loaded,
            self._on_movies_failed,
        )

    def select_row(self, index_path: IndexPath) -> None:
        row = self.row_at(index_path)
        if self.navigator is None:
            log_debug(f"Movie {row.id} selected but no navigator attached")
            return
        self.navigator.go_to_details(row.id)

    # ── mapping ───────────────────────────────────────────────────────
    def make_movie_row_view_models(self, movies_list: MoviesList) -> List[MovieRowViewModel]:
        """Untitled entries are dropped; order is kept."""
        images = current_images_config(self.configuration_use_case)
        return [
            MovieRowViewModel(
                id=movie.id,
                title=movie.title,
                release_date=format_release_date(movie.release_date),
                poster_url=(
                    image_url(images.base_url, images.thumbnail_size, movie.poster_path)
                    if movie.poster_path else settings.PLACEHOLDER_POSTER_URL
                ),
            )
            for movie in movies_list.results
            if movie.title is not None
        ]

    # ── completion (GUI thread) ───────────────────────────────────────
    @Slot(object)
    def _on_movies_loaded(self, movies_list: MoviesList) -> None:
        rows = tuple(self.make_movie_row_view_models(movies_list))
        log_debug(f"{self.list_type.value}: {len(rows)} movies")
        self._publish(MoviesListState(rows=rows))

    @Slot(object)
    def _on_movies_failed(self, error: Exception) -> None:
        log_debug(f"{self.list_type.value}: load failed – {error!r}")
        self._publish(replace(self._state, error=error))

    def _publish(self, state: MoviesListState) -> None:
        self._state = state
        self.state_changed.emit(state)
