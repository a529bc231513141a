from __future__ import annotations

from PySide6.QtCore    import QObject, Signal, Slot
from PySide6.QtWidgets import QStackedWidget

from movieBrowser.utils import log_debug
from movieBrowser.gui.details_page import DetailsPage


class MoviesCoordinator(QObject):
    """
    Navigation for the window: the list presenters call `go_to_details`,
    which stacks a details page on top; `back` pops it again.
    """
    title_changed = Signal(str)
    depth_changed = Signal(int)          # 0 == on the lists

    def __init__(self, stack: QStackedWidget, container, posters, parent: QObject | None = None):
        super().__init__(parent)
        self.stack     = stack
        self.container = container
        self.posters   = posters
        self._home     = stack.currentWidget()

    def go_to_details(self, movie_id: int) -> None:
        log_debug(f"Navigating to movie {movie_id}")
        presenter = self.container.movie_details_presenter(movie_id)
        page = DetailsPage(presenter, self.posters)
        presenter.setParent(page)
        presenter.state_changed.connect(
            lambda state: self.title_changed.emit(state.title or "")
        )
        self.stack.addWidget(page)
        self.stack.setCurrentWidget(page)
        self.depth_changed.emit(self.stack.count() - 1)
        presenter.load_details()

    @Slot()
    def back(self) -> None:
        page = self.stack.currentWidget()
        if page is self._home:
            return
        self.stack.removeWidget(page)
        page.deleteLater()
        self.stack.setCurrentWidget(self._home)
        self.title_changed.emit("")
        self.depth_changed.emit(0)
