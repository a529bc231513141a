from __future__ import annotations
from PySide6.QtCore    import Qt, QSize, Slot # type: ignore
from PySide6.QtGui     import QIcon, QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QListWidget, QListWidgetItem, QLabel
)

from movieBrowser.gui.poster_loader import PosterLoader
from movieBrowser.gui.presenters import IndexPath, MoviesListPresenter, MoviesListState

THUMB = QSize(46, 69)


class MoviesPage(QWidget):
    """One list type: poster thumbnail + title + release date per row."""

    def __init__(
        self,
        presenter: MoviesListPresenter,
        posters: PosterLoader,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.presenter = presenter
        self.posters   = posters
        self._loaded   = False

        self.heading = QLabel(presenter.title)
        self.heading.setStyleSheet("font-size:18px; font-weight:bold;")
        self.status  = QLabel("", alignment=Qt.AlignLeft)
        self.status.setStyleSheet("color:#e57373;")
        self.status.hide()

        self.list = QListWidget()
        self.list.setIconSize(THUMB)
        self.list.setSpacing(2)

        root = QVBoxLayout(self)
        root.addWidget(self.heading)
        root.addWidget(self.status)
        root.addWidget(self.list, 1)

        # ── wiring ───────────────────────────────────────────────────────
        presenter.state_changed.connect(self._render)
        posters.loaded.connect(self._set_poster)
        self.list.itemActivated.connect(self._on_activated)

    # -----------------------------------------------------------------
    def ensure_loaded(self) -> None:
        """First time the page becomes visible → fetch."""
        if not self._loaded:
            self._loaded = True
            self.presenter.load_movies()

    def reload(self) -> None:
        self._loaded = True
        self.presenter.load_movies()

    # -----------------------------------------------------------------
    @Slot(object)
    def _render(self, state: MoviesListState) -> None:
        if state.error is not None:
            self.status.setText(f"Couldn't load movies: {state.error}")
            self.status.show()
        else:
            self.status.hide()

        self.list.clear()
        p = self.presenter
        for row in range(p.number_of_rows_in_section(0)):
            vm   = p.row_at(IndexPath(row))
            item = QListWidgetItem(f"{vm.title}\n{vm.release_date}")
            item.setData(Qt.UserRole, vm.poster_url)
            item.setSizeHint(QSize(0, THUMB.height() + 8))
            self.list.addItem(item)
            self.posters.request(vm.poster_url)

    @Slot(str, QPixmap)
    def _set_poster(self, url: str, pix: QPixmap) -> None:
        icon = QIcon(pix.scaled(THUMB, Qt.KeepAspectRatio, Qt.SmoothTransformation))
        for i in range(self.list.count()):
            item = self.list.item(i)
            if item.data(Qt.UserRole) == url:
                item.setIcon(icon)

    @Slot(QListWidgetItem)
    def _on_activated(self, item: QListWidgetItem) -> None:
        self.presenter.select_row(IndexPath(self.list.row(item)))
