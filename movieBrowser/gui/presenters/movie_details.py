from __future__ import annotations
from dataclasses import replace
from typing import List, Optional

from PySide6.QtCore import QObject, Signal, Slot

from movieBrowser.utils import format_budget, format_runtime, image_url, log_debug
from movieBrowser.metadata.core.models import MovieDetails
from movieBrowser.metadata.usecases import ConfigurationUseCase, MovieDetailsUseCase
from movieBrowser.gui.presenters.movies_list import current_images_config
from movieBrowser.gui.presenters.view_models import (
    DescriptionRow,
    DetailRow,
    ImageRow,
    IndexPath,
    MovieDetailsState,
    TitleValueRow,
)


class MovieDetailsPresenter(QObject):
    """
    Backs the details page of a single movie.

    Rows are always built in the same order – poster, overview, genres,
    budget, runtime – and a field that's missing simply contributes no row.
    """
    state_changed = Signal(object)

    def __init__(
        self,
        movie_id: int,
        details_use_case: MovieDetailsUseCase,
        configuration_use_case: ConfigurationUseCase,
        dispatcher,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.movie_id = movie_id
        self.details_use_case = details_use_case
        self.configuration_use_case = configuration_use_case
        self.dispatcher = dispatcher
        self._state = MovieDetailsState()

    # ── read side ─────────────────────────────────────────────────────
    @property
    def state(self) -> MovieDetailsState:
        return self._state

    @property
    def movie_title(self) -> str | None:
        return self._state.title

    @property
    def movie_details_view_models(self) -> tuple[DetailRow, ...]:
        return self._state.rows

    @property
    def load_error(self) -> Exception | None:
        return self._state.error

    @property
    def is_empty(self) -> bool:
        return not self._state.rows

    def number_of_sections(self) -> int:
        return 1

    def number_of_rows_in_section(self, section: int) -> int:
        return len(self._state.rows)

    def row_at(self, index_path: IndexPath) -> DetailRow:
        rows = self._state.rows
        if not 0 <= index_path.row < len(rows):
            raise IndexError(f"No detail row at {tuple(index_path)} ({len(rows)} rows)")
        return rows[index_path.row]

    # ── commands ──────────────────────────────────────────────────────
    def load_details(self) -> None:
        log_debug(f"Loading details for movie {self.movie_id}")
        movie_id = self.movie_id
        self.dispatcher.dispatch(
            lambda: self.details_use_case.load_movie_details(movie_id),
            self._on_details_loaded,
            self._on_details_failed,
        )

    # ── row builders ──────────────────────────────────────────────────
    def make_detail_rows(self, details: MovieDetails) -> List[DetailRow]:
        builders = (
            self.make_poster_row,
            self.make_overview_row,
            self.make_genres_row,
            self.make_budget_row,
            self.make_runtime_row,
        )
        return [row for row in (build(details) for build in builders) if row is not None]

    def make_poster_row(self, details: MovieDetails) -> Optional[ImageRow]:
        if not details.poster_path:
            return None
        images = current_images_config(self.configuration_use_case)
        return ImageRow(image_url(images.base_url, images.original_size, details.poster_path))

    def make_overview_row(self, details: MovieDetails) -> Optional[DescriptionRow]:
        if not details.overview:
            return None
        return DescriptionRow(details.overview)

    def make_genres_row(self, details: MovieDetails) -> Optional[TitleValueRow]:
        if not details.genres:
            return None
        return TitleValueRow("Genres", ", ".join(g.name for g in details.genres))

    def make_budget_row(self, details: MovieDetails) -> Optional[TitleValueRow]:
        if not details.budget:                      # None or 0
            return None
        return TitleValueRow("Budget", format_budget(details.budget))

    def make_runtime_row(self, details: MovieDetails) -> Optional[TitleValueRow]:
        if not details.runtime or details.runtime < 0:
            return None
        return TitleValueRow("Runtime", format_runtime(details.runtime))

    # ── completion (GUI thread) ───────────────────────────────────────
    @Slot(object)
    def _on_details_loaded(self, details: MovieDetails) -> None:
        rows = tuple(self.make_detail_rows(details))
        log_debug(f"Movie {self.movie_id}: {len(rows)} detail rows")
        self._publish(MovieDetailsState(title=details.title, rows=rows))

    @Slot(object)
    def _on_details_failed(self, error: Exception) -> None:
        log_debug(f"Movie {self.movie_id}: details failed – {error!r}")
        self._publish(replace(self._state, error=error))

    def _publish(self, state: MovieDetailsState) -> None:
        self._state = state
        self.state_changed.emit(state)
