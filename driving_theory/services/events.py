"""Small synchronous pub/sub used to notify the rendering layer."""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

EXAM_STARTED = "exam_started"
EXAM_FINISHED = "exam_finished"
EXAM_ABANDONED = "exam_abandoned"
MISTAKE_RECORDED = "mistake_recorded"
MISTAKE_CLEARED = "mistake_cleared"
LESSON_COMPLETED = "lesson_completed"


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        self._subs.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        handlers = self._subs.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any = None) -> None:
        for h in list(self._subs.get(event, [])):
            h(payload)
        logger.debug(f"Event emitted: {event}")
