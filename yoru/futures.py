"""Running a callback on its own thread and collecting its result later."""

import threading


class Future:
    """Starts ``callback(args)`` on a new thread as soon as it is created.

    ``result()`` waits for the thread and returns what the callback returned.
    ``cancel()`` marks the future as finished with no result; a running
    callback cannot be stopped, but whatever it produces is discarded.
    """

    def __init__(self, callback, args=None):
        self._callback = callback
        self._args = args
        self._lock = threading.Lock()
        self._value = None
        self._error = None
        self._ready = False
        self._cancelled = False
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self):
        try:
            value = self._callback(self._args)
        except BaseException as exc:  # handed to the caller of result()
            with self._lock:
                if not self._cancelled:
                    self._error = exc
                    self._ready = True
            return
        with self._lock:
            if not self._cancelled:
                self._value = value
                self._ready = True

    @property
    def done(self):
        """True once the callback has finished or the future was cancelled."""
        with self._lock:
            return self._ready

    @property
    def cancelled(self):
        """True if ``cancel()`` was called before a result was collected."""
        with self._lock:
            return self._cancelled

    def result(self):
        """Wait for the callback and return its value; None if cancelled.

        An exception raised by the callback is raised again here.
        """
        with self._lock:
            if self._cancelled:
                return None
        self._thread.join()
        with self._lock:
            if self._cancelled:
                return None
            if self._error is not None:
                raise self._error
            return self._value

    def cancel(self):
        """Mark the future finished with no result."""
        with self._lock:
            self._cancelled = True
            self._ready = True
            self._value = None
            self._error = None