import threading
import time

from PySide6.QtCore import QCoreApplication, QEventLoop, QObject, QTimer, Slot

from movieBrowser.gui.workers import InlineDispatcher, ThreadDispatcher


class _Receiver(QObject):
    """Lives on the test (GUI) thread; records where callbacks land."""

    def __init__(self, loop: QEventLoop):
        super().__init__()
        self.loop = loop
        self.result = None
        self.error = None
        self.delivered_on = None

    @Slot(object)
    def on_success(self, result):
        self.result = result
        self.delivered_on = threading.get_ident()
        self.loop.quit()

    @Slot(object)
    def on_failure(self, error):
        self.error = error
        self.delivered_on = threading.get_ident()
        self.loop.quit()


def _run(job):
    loop = QEventLoop()
    receiver = _Receiver(loop)
    dispatcher = ThreadDispatcher()
    dispatcher.dispatch(job, receiver.on_success, receiver.on_failure)
    QTimer.singleShot(5000, loop.quit)
    loop.exec()
    for _ in range(100):                        # let the worker thread wind down
        if dispatcher.pending == 0:
            break
        QCoreApplication.processEvents()
        time.sleep(0.01)
    return receiver, dispatcher


def test_thread_dispatcher_runs_off_thread_and_delivers_on_gui_thread():
    receiver, dispatcher = _run(threading.get_ident)
    gui_thread = threading.get_ident()
    assert receiver.result is not None
    assert receiver.result != gui_thread
    assert receiver.delivered_on == gui_thread
    assert receiver.error is None
    assert dispatcher.pending == 0


def test_thread_dispatcher_reports_failure():
    def boom():
        raise ValueError("nope")

    receiver, dispatcher = _run(boom)
    assert isinstance(receiver.error, ValueError)
    assert receiver.result is None
    assert receiver.delivered_on == threading.get_ident()
    assert dispatcher.pending == 0


def test_inline_dispatcher_calls_exactly_one_callback():
    ok, failed = [], []
    d = InlineDispatcher()
    d.dispatch(lambda: 42, ok.append, failed.append)
    assert ok == [42] and failed == []

    err = RuntimeError("x")
    def boom():
        raise err
    d.dispatch(boom, ok.append, failed.append)
    assert ok == [42] and failed == [err]


def test_shutdown_keeps_blocked_thread_and_drops_its_result():
    gate = threading.Event()
    delivered = []
    dispatcher = ThreadDispatcher()
    dispatcher.dispatch(lambda: gate.wait(5), lambda r: delivered.append(r), lambda e: delivered.append(e))

    dispatcher.shutdown(msecs=50)
    assert dispatcher.pending == 1              # still running, not dropped

    gate.set()
    dispatcher.shutdown()
    QCoreApplication.processEvents()
    assert dispatcher.pending == 0
    assert delivered == []
