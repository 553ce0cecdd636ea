"""
api/session.py — current learner identity (single learner, in memory)

No authentication: the id is whatever the client last set. An unset id is
reported as an empty string and is stamped as such on exam results.
"""

import threading
import time


class LearnerSession:
    def __init__(self, user_id: str = "") -> None:
        self._lock = threading.Lock()
        self._user_id = user_id
        self._updated_at = time.time()

    def current_user_id(self) -> str:
        with self._lock:
            return self._user_id or ""

    def set_user(self, user_id: str) -> None:
        with self._lock:
            self._user_id = user_id.strip()
            self._updated_at = time.time()

    def clear(self) -> None:
        self.set_user("")

    @property
    def updated_at(self) -> float:
        with self._lock:
            return self._updated_at
