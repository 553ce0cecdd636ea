"""
services/countdown.py

Background one-second ticker for the exam timer.

The countdown only calls `on_tick`; the exam session owns the remaining
time and decides when to stop. `on_tick` returns False to end the loop.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Countdown:
    def __init__(self, on_tick: Callable[[], bool], interval: float = 1.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._on_tick = on_tick
        self._interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("Countdown already started")
        self._thread = threading.Thread(target=self._run, name="exam-countdown", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        # Event.wait returns True as soon as cancel() is called.
        while not self._stop.wait(self._interval):
            if not self._on_tick():
                break
        self._stop.set()

    def cancel(self, wait: bool = False) -> None:
        """Stop ticking. Safe to call from the tick callback itself."""
        self._stop.set()
        if wait and self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=self._interval * 2)

    @property
    def active(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop.is_set()
