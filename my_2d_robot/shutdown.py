import threading
from logging import Logger, getLogger
from typing import Callable, List, Optional


class ShutdownRequest:
    """Cooperative, idempotent stop signal shared by the nodes of one process.

    Loops poll is_requested between units of work; nothing is interrupted
    mid-callback.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or getLogger(__name__)
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: List[Callable[[str], None]] = []
        self.reason: Optional[str] = None

    @property
    def is_requested(self) -> bool:
        return self._event.is_set()

    def request(self, reason: str = '') -> bool:
        """Issue the request. Returns True only for the first call"""
        with self._lock:
            if self._event.is_set():
                return False
            self.reason = reason
            self._event.set()
            callbacks = list(self._callbacks)

        self.logger.info(f'Shutdown requested: {reason}')
        for callback in callbacks:
            try:
                callback(reason)
            except Exception as e:
                self.logger.error(f'Shutdown callback failed: {str(e)}')
        return True

    def add_callback(self, callback: Callable[[str], None]) -> None:
        """Run callback once the request is issued (immediately if it already was)"""
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        callback(self.reason)

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._event.wait(timeout)
