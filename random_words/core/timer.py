"""Repeating resample trigger"""

import threading
from collections.abc import Callable

from ..logging_config import get_logger

logger = get_logger(__name__)


class ResampleTimer:
    """Cancellable periodic trigger built on ``threading.Timer``.

    An interval of 0 disables the timer (manual mode). Every start, stop or
    interval change bumps a generation counter; a trigger from an older
    generation that is already in flight does nothing when it fires.
    The callback runs on the timer thread, so callers that need a single
    thread should only enqueue work from it.
    """

    def __init__(self, interval: float, callback: Callable[[], None]):
        if interval < 0:
            raise ValueError("Interval cannot be negative")
        self._interval = interval
        self._callback = callback
        self._timer: threading.Timer | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._timer is not None

    def _arm(self, generation: int) -> None:
        timer = threading.Timer(self._interval, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._arm(generation)
        try:
            self._callback()
        except Exception as e:
            logger.error(f"Resample callback failed: {e}", exc_info=True)

    def _cancel(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def start(self) -> None:
        """Arm the timer, replacing any pending trigger"""
        with self._lock:
            self._cancel()
            if self._interval > 0:
                self._arm(self._generation)
                logger.debug(f"Timer armed every {self._interval}s")

    def reset(self) -> None:
        self.start()

    def stop(self) -> None:
        with self._lock:
            self._cancel()

    def pause(self) -> None:
        """Stop triggering; calling it again has no further effect"""
        if self._interval > 0:
            self.stop()

    def resume(self) -> None:
        """Re-arm with the current interval"""
        if self._interval > 0:
            self.start()

    def set_interval(self, interval: float) -> None:
        if interval < 0:
            raise ValueError("Interval cannot be negative")
        was_running = self.is_running
        self._interval = interval
        if interval == 0:
            self.stop()
        elif was_running:
            self.start()
