from __future__ import annotations
from pathlib import Path
from typing import Callable
from urllib.parse import urlparse, unquote

from PySide6.QtCore import QObject, Signal, Slot
from PySide6.QtGui  import QPixmap

from movieBrowser.utils import log_debug


class PosterLoader(QObject):
    """
    Fetches poster bytes through the dispatcher and emits `loaded(url, pixmap)`
    on the GUI thread. `file://` URLs (the placeholder) load synchronously.
    """
    loaded = Signal(str, QPixmap)

    def __init__(self, fetch: Callable[[str], bytes], dispatcher, parent: QObject | None = None):
        super().__init__(parent)
        self.fetch = fetch
        self.dispatcher = dispatcher

    def request(self, url: str) -> None:
        if url.startswith("file:"):
            self.loaded.emit(url, QPixmap(str(Path(unquote(urlparse(url).path)))))
            return
        fetch = self.fetch
        self.dispatcher.dispatch(lambda: (url, fetch(url)), self._on_bytes, self._on_error)

    @Slot(object)
    def _on_bytes(self, result) -> None:
        url, data = result
        pix = QPixmap()
        if not pix.loadFromData(data):
            log_debug(f"Poster at {url} isn't a readable image")
            return
        self.loaded.emit(url, pix)

    @Slot(object)
    def _on_error(self, error: Exception) -> None:
        log_debug(f"Poster fetch failed: {error!r}")
