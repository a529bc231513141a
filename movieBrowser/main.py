import sys
from PySide6.QtWidgets import QApplication, QMessageBox

from movieBrowser.utils          import apply_dark_palette, log_debug
from movieBrowser.dependencies   import build_container
from movieBrowser.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)

    # -------- wire everything once; a missing key stops us here -------
    try:
        container = build_container()
    except EnvironmentError as e:
        log_debug(f"Startup aborted: {e}")
        QMessageBox.critical(None, "Configuration error", str(e))
        sys.exit(1)

    # -------- create main window, then kick off /configuration --------
    window = MainWindow(container)
    window.show()
    window.start()

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
