import threading
import logging
from typing import Callable, Optional

log = logging.getLogger("countryfinder.utils")

class Debouncer:
    """Collapse a burst of calls into one trailing call of ``fn``.

    Every ``call`` restarts the quiet period; ``fn`` runs once, with the
    arguments of the last call, ``delay_ms`` after that call.
    """

    def __init__(self, delay_ms: int, fn: Callable):
        if delay_ms <= 0:
            raise ValueError("delay_ms must be positive")
        self.delay = delay_ms / 1000.0
        self.fn = fn
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def call(self, *args, **kwargs):
        with self._lock:
            if self._timer:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self.fn, args=args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self):
        with self._lock:
            if self._timer:
                self._timer.cancel()
                log.debug("Pending debounced call cancelled")
            self._timer = None
