"""
movieBrowser
~~~~~~~~~~~~

Top-level package for the Movies browser (TMDb lists + details).

Exports:
  - Formatting helpers: format_release_date, format_budget, format_runtime
  - Composition: build_container, Container, MissingDependencyError
  - MainWindow GUI entrypoint
"""

# utils
from movieBrowser.utils import (
    log_debug,
    format_release_date,
    format_budget,
    format_runtime,
)

# composition root
from movieBrowser.dependencies import build_container, Container, MissingDependencyError

# GUI entrypoint
from movieBrowser.gui.main_window import MainWindow

__all__ = [
    # utils
    "log_debug",
    "format_release_date",
    "format_budget",
    "format_runtime",
    # composition
    "build_container",
    "Container",
    "MissingDependencyError",
    # GUI
    "MainWindow",
]
