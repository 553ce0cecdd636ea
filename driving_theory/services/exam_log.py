"""
services/exam_log.py

Append-only history of finished exam attempts, oldest first.
"""

import logging
import threading
from typing import List, Optional

from driving_theory.models.exam_result import ExamResult

logger = logging.getLogger(__name__)


class ExamResultLog:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._results: List[ExamResult] = []

    def append(self, result: ExamResult) -> None:
        with self._lock:
            if any(r.id == result.id for r in self._results):
                raise ValueError(f"Exam result {result.id} is already logged.")
            self._results.append(result)
        logger.info(
            f"Exam result logged: {result.score}/{result.total}, "
            f"passed={result.passed}, history size={len(self)}"
        )

    def all(self) -> List[ExamResult]:
        """Copy of the whole history, oldest first."""
        with self._lock:
            return list(self._results)

    def recent(self, n: int) -> List[ExamResult]:
        """The last n results (fewer if the history is shorter), oldest first."""
        if n <= 0:
            return []
        with self._lock:
            return self._results[-n:]

    def latest(self) -> Optional[ExamResult]:
        with self._lock:
            return self._results[-1] if self._results else None

    def get(self, result_id: str) -> Optional[ExamResult]:
        with self._lock:
            return next((r for r in self._results if r.id == result_id), None)

    def for_user(self, user_id: str) -> List[ExamResult]:
        with self._lock:
            return [r for r in self._results if r.user_id == user_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
