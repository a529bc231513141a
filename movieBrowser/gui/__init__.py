"""
gui
~~~
All Qt widgets, pages, presenters and the coordinator.

•  No HTTP here – pages talk to presenters, presenters to use-cases.
•  Re-export the high-level symbols so the app can simply:

    from movieBrowser.gui import MainWindow
"""

from movieBrowser.gui.workers      import ThreadDispatcher, InlineDispatcher
from movieBrowser.gui.presenters   import MoviesListPresenter, MovieDetailsPresenter
from movieBrowser.gui.coordinator  import MoviesCoordinator
from movieBrowser.gui.movies_page  import MoviesPage
from movieBrowser.gui.details_page import DetailsPage
from movieBrowser.gui.main_window  import MainWindow

__all__ = [
    "ThreadDispatcher", "InlineDispatcher",
    "MoviesListPresenter", "MovieDetailsPresenter",
    "MoviesCoordinator", "MoviesPage", "DetailsPage", "MainWindow",
]
