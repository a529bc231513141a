"""
gui.presenters
~~~~~~~~~~~~~~
Presenters turn use-case results into the row view models the pages
render. They use `QObject`/`Signal` only, never widgets.
"""

from movieBrowser.gui.presenters.view_models import (
    IndexPath,
    Navigator,
    MovieRowViewModel,
    RowKind,
    ImageRow,
    DescriptionRow,
    TitleValueRow,
    DetailRow,
    MoviesListState,
    MovieDetailsState,
)
from movieBrowser.gui.presenters.movies_list   import MoviesListPresenter
from movieBrowser.gui.presenters.movie_details import MovieDetailsPresenter

__all__ = [
    "IndexPath", "Navigator",
    "MovieRowViewModel", "RowKind", "ImageRow", "DescriptionRow",
    "TitleValueRow", "DetailRow", "MoviesListState", "MovieDetailsState",
    "MoviesListPresenter", "MovieDetailsPresenter",
]
