# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot
from PySide6.QtGui     import QAction
from PySide6.QtWidgets import (
    QMainWindow, QListWidget, QListWidgetItem,
    QStackedWidget, QSplitter
)

from movieBrowser.settings           import ICON, WINDOW_SIZE
from movieBrowser.utils              import log_debug
from movieBrowser.metadata.core.models import MovieListType
from movieBrowser.metadata.usecases  import ConfigurationUseCase
from movieBrowser.gui.workers        import Dispatcher
from movieBrowser.gui.coordinator    import MoviesCoordinator
from movieBrowser.gui.movies_page    import MoviesPage

APP_TITLE = "Movies"


class MainWindow(QMainWindow):
    def __init__(self, container):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(*WINDOW_SIZE)
        self.container = container
        self.posters   = container.poster_loader(parent=self)

        # ── root stack: [lists | details…] ──────────────────────────────
        self.root_stack = QStackedWidget()

        # ── sidebar ─────────────────────────────────────────────────────
        self.nav_list = QListWidget()
        self.nav_list.setFixedWidth(170)
        for list_type in MovieListType:
            item = QListWidgetItem(ICON("film"), list_type.title)
            item.setTextAlignment(Qt.AlignHCenter)
            self.nav_list.addItem(item)

        # ── one page per list type ──────────────────────────────────────
        self.pages = QStackedWidget()
        splitter = QSplitter()
        splitter.addWidget(self.nav_list)
        splitter.addWidget(self.pages)
        splitter.setStretchFactor(1, 1)
        self.root_stack.addWidget(splitter)
        self.setCentralWidget(self.root_stack)

        self.coordinator = MoviesCoordinator(self.root_stack, container, self.posters, self)
        self.movie_pages: list[MoviesPage] = []
        for list_type in MovieListType:
            presenter = container.movies_list_presenter(
                list_type, navigator=self.coordinator, parent=self
            )
            page = MoviesPage(presenter, self.posters)
            self.pages.addWidget(page)
            self.movie_pages.append(page)

        self.nav_list.currentRowChanged.connect(self._on_page_changed)
        self.coordinator.title_changed.connect(self._on_title_changed)
        self.coordinator.depth_changed.connect(lambda depth: self.back_act.setEnabled(depth > 0))

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        self.back_act = QAction(ICON("back"), "Back", self)
        self.back_act.setShortcut("Alt+Left")
        self.back_act.setEnabled(False)
        self.back_act.triggered.connect(self.coordinator.back)
        tb.addAction(self.back_act)

        act = QAction(ICON("refresh"), "Refresh", self)
        act.setShortcut("Ctrl+R")
        act.triggered.connect(self._on_refresh)
        tb.addAction(act)

    # ───────────────────────────────────────────────────────────────────
    def start(self) -> None:
        """Load /configuration first, then the first list (either way)."""
        configuration = self.container.resolve(ConfigurationUseCase)
        self.container.resolve(Dispatcher).dispatch(
            configuration.load_configuration,
            self._on_configuration_ready,
            self._on_configuration_failed,
        )

    @Slot(object)
    def _on_configuration_ready(self, _configuration) -> None:
        self.nav_list.setCurrentRow(0)

    @Slot(object)
    def _on_configuration_failed(self, error: Exception) -> None:
        log_debug(f"Configuration unavailable, using default image sizes: {error!r}")
        self.nav_list.setCurrentRow(0)

    @Slot(int)
    def _on_page_changed(self, row: int) -> None:
        if row < 0:
            return
        self.coordinator.back()
        self.pages.setCurrentIndex(row)
        self.movie_pages[row].ensure_loaded()

    @Slot()
    def _on_refresh(self) -> None:
        self.movie_pages[self.pages.currentIndex()].reload()

    @Slot(str)
    def _on_title_changed(self, title: str) -> None:
        self.setWindowTitle(f"{title} – {APP_TITLE}" if title else APP_TITLE)

    def closeEvent(self, event) -> None:
        dispatcher = self.container.resolve(Dispatcher)
        if hasattr(dispatcher, "shutdown"):
            dispatcher.shutdown()
        super().closeEvent(event)
