"""
gui.workers
~~~~~~~~~~~
Run a blocking fetch off the GUI thread and hand the outcome back to it.

A dispatcher has one method::

    dispatch(job, on_success, on_failure)

*job* is a zero-arg callable, *on_success* gets its return value and
*on_failure* the exception it raised. Exactly one of the two is called.
"""

from __future__ import annotations
from typing import Any, Callable, Protocol

from PySide6.QtCore import QObject, QThread, Signal, Slot

from movieBrowser.utils import log_debug

Job       = Callable[[], Any]
OnSuccess = Callable[[Any], None]
OnFailure = Callable[[Exception], None]

# longer than TMDBClient's request timeout, so a blocked GET can return
SHUTDOWN_WAIT_MS = 12_000


class Dispatcher(Protocol):
    def dispatch(self, job: Job, on_success: OnSuccess, on_failure: OnFailure) -> None: ...


# ───────────────────────── Worker skeleton ───────────────────────────────
class _FetchWorker(QObject):
    succeeded = Signal(object)
    failed    = Signal(object)
    finished  = Signal(object)           # carries the worker itself

    def __init__(self, job: Job):
        super().__init__()
        self.job = job

    @Slot()
    def run(self):
        try:
            result = self.job()
        except Exception as e:
            log_debug(f"fetch-worker error: {e!r}")
            self.failed.emit(e)
        else:
            self.succeeded.emit(result)
        finally:
            self.finished.emit(self)


# ───────────────────────── Dispatchers ───────────────────────────────────
class ThreadDispatcher(QObject):
    """
    One `QThread` per job. Connect *on_success*/*on_failure* to slots of a
    QObject living on the GUI thread and Qt queues the call back onto it.
    """

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._running: dict[_FetchWorker, QThread] = {}   # keep alive until done

    def dispatch(self, job: Job, on_success: OnSuccess, on_failure: OnFailure) -> None:
        thr    = QThread(self)
        worker = _FetchWorker(job)
        worker.moveToThread(thr)

        worker.succeeded.connect(on_success)
        worker.failed.connect(on_failure)
        worker.finished.connect(self._forget)          # queued → GUI thread

        thr.started.connect(worker.run)
        self._running[worker] = thr
        thr.start()

    @Slot(object)
    def _forget(self, worker: _FetchWorker) -> None:
        thr = self._running.pop(worker, None)
        if thr is not None:
            thr.quit()
            thr.wait()
            thr.deleteLater()
        # worker goes with its last reference; its thread is already stopped

    @property
    def pending(self) -> int:
        return len(self._running)

    def shutdown(self, msecs: int = SHUTDOWN_WAIT_MS) -> None:
        """
        Drop delivery of in-flight results and wait for their threads
        (window closing). A thread still blocked after *msecs* stays
        referenced here so Qt never destroys it while running.
        """
        for worker, thr in list(self._running.items()):
            worker.blockSignals(True)
            thr.quit()
            if thr.wait(msecs):
                del self._running[worker]
            else:
                log_debug(f"fetch thread still running after {msecs} ms; left to finish")


class InlineDispatcher:
    """Runs the job right away on the caller's thread (tests, scripts)."""

    def dispatch(self, job: Job, on_success: OnSuccess, on_failure: OnFailure) -> None:
        try:
            result = job()
        except Exception as e:
            log_debug(f"inline job error: {e!r}")
            on_failure(e)
            return
        on_success(result)
