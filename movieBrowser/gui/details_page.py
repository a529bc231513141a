from __future__ import annotations
from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QFrame
)

from movieBrowser.gui.poster_loader import PosterLoader
from movieBrowser.gui.presenters import (
    IndexPath, MovieDetailsPresenter, MovieDetailsState, RowKind,
)

POSTER_WIDTH = 300


class DetailsPage(QWidget):
    """Scrollable column of detail rows; one widget per row variant."""

    def __init__(
        self,
        presenter: MovieDetailsPresenter,
        posters: PosterLoader,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.presenter = presenter
        self.posters   = posters
        self._poster_labels: dict[str, QLabel] = {}

        self.status = QLabel("Loading…", alignment=Qt.AlignCenter)

        body = QWidget()
        self.rows = QVBoxLayout(body)
        self.rows.setAlignment(Qt.AlignTop)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidget(body)

        root = QVBoxLayout(self)
        root.addWidget(self.status)
        root.addWidget(scroll, 1)

        presenter.state_changed.connect(self._render)
        posters.loaded.connect(self._set_poster)

    # -----------------------------------------------------------------
    @Slot(object)
    def _render(self, state: MovieDetailsState) -> None:
        while self.rows.count():
            w = self.rows.takeAt(0).widget()
            if w is not None:
                w.deleteLater()
        self._poster_labels.clear()

        if state.error is not None:
            # previous rows, if any, still render below the banner
            self.status.setText(f"Couldn't load details: {state.error}")
            self.status.setStyleSheet("color:#e57373;")
            self.status.show()
        else:
            self.status.hide()

        p = self.presenter
        for i in range(p.number_of_rows_in_section(0)):
            self.rows.addWidget(self._make_row(p.row_at(IndexPath(i))))

    def _make_row(self, row) -> QWidget:
        if row.kind is RowKind.IMAGE:
            lbl = QLabel(alignment=Qt.AlignCenter)
            self._poster_labels[row.image_url] = lbl
            self.posters.request(row.image_url)
            return lbl

        if row.kind is RowKind.DESCRIPTION:
            lbl = QLabel(row.text)
            lbl.setWordWrap(True)
            return lbl

        # title / value
        line = QWidget()
        box  = QHBoxLayout(line)
        box.setContentsMargins(0, 4, 0, 4)
        key  = QLabel(row.title)
        key.setStyleSheet("font-weight:bold;")
        box.addWidget(key)
        box.addStretch()
        box.addWidget(QLabel(row.value, alignment=Qt.AlignRight))
        return line

    @Slot(str, QPixmap)
    def _set_poster(self, url: str, pix: QPixmap) -> None:
        lbl = self._poster_labels.get(url)
        if lbl is not None:
            lbl.setPixmap(pix.scaledToWidth(POSTER_WIDTH, Qt.SmoothTransformation))
