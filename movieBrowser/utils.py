import datetime as _dt
import functools
import random
import time

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieBrowser import settings

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    log_path = settings.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    ts = _dt.datetime.now().isoformat(timespec="seconds")
    with log_path.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def throttle(min_delay: float = 1.0):
    """
    Decorator that sleeps `min_delay ±0.3 s` between *network* calls on the
    same function – thread-safe enough for one worker per screen.
    """
    def wrap(fn):
        last_hit = 0.0
        @functools.wraps(fn)
        def inner(*a, **kw):
            nonlocal last_hit
            wait = min_delay - (time.time() - last_hit)
            if wait > 0:
                time.sleep(wait + random.uniform(0, 0.3))
            out = fn(*a, **kw)
            last_hit = time.time()
            return out
        return inner
    return wrap


# --- presentation formatting --------------------------------------------------
def format_release_date(raw: str | None) -> str:
    """
    'YYYY-MM-DD' → 'Jan 1, 2023'.

    Month names are fixed English abbreviations so the output never depends
    on the host locale. Anything that doesn't parse comes back unchanged.
    """
    if not raw:
        return raw or ""
    try:
        d = _dt.date.fromisoformat(raw)
    except ValueError:
        return raw
    return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"


def format_budget(amount: int) -> str:
    """1000000 → 'US$1,000,000.00', -5 → '-US$5.00'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}US${abs(amount):,.2f}"


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def format_runtime(minutes: int) -> str:
    """120 → '2 hours', 95 → '1 hour 35 minutes', 45 → '45 minutes'."""
    hours, mins = divmod(minutes, 60)
    parts = []
    if hours:
        parts.append(_plural(hours, "hour"))
    if mins:
        parts.append(_plural(mins, "minute"))
    return " ".join(parts)


def image_url(base_url: str, size: str | None, path: str) -> str:
    """Join TMDb image parts: ('https://x.org/t/p/', 'w500', '/a.jpg') → '.../t/p/w500/a.jpg'."""
    segments = [base_url.rstrip("/")]
    if size:
        segments.append(size.strip("/"))
    segments.append(path.lstrip("/"))
    return "/".join(segments)


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#202124"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#2b2c2e"))
    palette.setColor(QPalette.AlternateBase, QColor("#323336"))
    palette.setColor(QPalette.Button,        QColor("#2d2e30"))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(settings.ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(settings.ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)
