"""
services/mistake_tracker.py

Deduplicated set of question ids the learner has answered incorrectly and
not yet dismissed. Shared by the exam and every practice mode.
"""

import logging
import threading
from typing import Iterable, List

logger = logging.getLogger(__name__)


class MistakeTracker:
    """
    Insertion-ordered set of question ids.

    record() is idempotent; clear() is the only way an id leaves the set.
    A later correct answer does not clear a mistake.
    """

    def __init__(self, question_ids: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._ids: dict[str, None] = dict.fromkeys(question_ids)

    def record(self, question_id: str) -> bool:
        """Add the id. Returns True if it was not already tracked."""
        with self._lock:
            if question_id in self._ids:
                return False
            self._ids[question_id] = None
        logger.debug(f"Mistake recorded: {question_id}")
        return True

    def clear(self, question_id: str) -> bool:
        """Remove the id. Returns True if it was tracked, no-op otherwise."""
        with self._lock:
            if question_id not in self._ids:
                return False
            del self._ids[question_id]
        logger.debug(f"Mistake cleared: {question_id}")
        return True

    def contains(self, question_id: str) -> bool:
        with self._lock:
            return question_id in self._ids

    def count(self) -> int:
        with self._lock:
            return len(self._ids)

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._ids)

    def __contains__(self, question_id: object) -> bool:
        return isinstance(question_id, str) and self.contains(question_id)

    def __len__(self) -> int:
        return self.count()
