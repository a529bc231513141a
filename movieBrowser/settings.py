from pathlib import Path
import os
from dotenv import load_dotenv
from PySide6.QtGui import QIcon # type: ignore

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

TMDB_API_KEY   = os.getenv("TMDB_API_KEY")
TMDB_BASE_URL  = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3").rstrip("/")
TMDB_LANGUAGE  = os.getenv("TMDB_LANGUAGE", "en-US")


def require_tmdb_key() -> str:
    """Return the TMDb key or fail at start-up when it's missing."""
    key = os.getenv("TMDB_API_KEY") or TMDB_API_KEY
    if not key:
        raise EnvironmentError("Missing TMDB_API_KEY in .env")
    return key


# File / folder paths
ICONS_DIR          = BASE_DIR / "icons"
LOG_PATH           = Path(os.getenv("MOVIE_BROWSER_LOG", BASE_DIR / "movie_browser.log"))
PLACEHOLDER_POSTER = ICONS_DIR / "poster-placeholder.svg"
PLACEHOLDER_POSTER_URL = PLACEHOLDER_POSTER.as_uri()

# Used until /configuration has answered (TMDb's published defaults)
DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"
DEFAULT_POSTER_SIZES   = ["w92", "w154", "w185", "w342", "w500", "w780", "original"]

# UI constants
ACCENT_COLOR = "#3b82f6"
WINDOW_SIZE  = (960, 640)
ICON = lambda name: QIcon(str(ICONS_DIR / f"{name}.svg"))
