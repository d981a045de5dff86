"""Injectable event sinks for charge history auditing."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol

from ..logging_config import get_logger


@dataclass(frozen=True, slots=True)
class HistoryEvent:
    """One entry in the undo/redo audit trail."""

    operation: str
    undo_depth: int
    redo_depth: int
    change_description: Optional[str] = None
    detail: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def summary(self) -> str:
        text = f"[{self.operation}] undo: {self.undo_depth}, redo: {self.redo_depth}"
        if self.change_description:
            text += f" ({self.change_description})"
        if self.detail:
            text += f" : {self.detail}"
        return f"{text} at {self.timestamp:%Y-%m-%d %H:%M}"


class EventSink(Protocol):
    """Anything that accepts history events."""

    def record(self, event: HistoryEvent) -> None:  # pragma: no cover - interface
        ...


class NullEventSink:
    """Discard every event."""

    def record(self, event: HistoryEvent) -> None:
        return None


class InMemoryEventSink:
    """Keep the most recent ``capacity`` events in memory."""

    def __init__(self, capacity: int = 150) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._events: deque[HistoryEvent] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._events.maxlen or 0

    @property
    def events(self) -> list[HistoryEvent]:
        return list(self._events)

    def record(self, event: HistoryEvent) -> None:
        self._events.append(event)

    def recent(self, limit: int = 5) -> list[str]:
        if limit <= 0:
            return []
        return [event.summary for event in list(self._events)[-limit:]]

    @property
    def last_summary(self) -> str:
        if not self._events:
            return "No undo/redo events recorded."
        return self._events[-1].summary

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


class LoggingEventSink:
    """Forward events to the application logger with structured extras."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger or get_logger("audit")
        self.level = level

    def record(self, event: HistoryEvent) -> None:
        self.logger.log(
            self.level,
            "Charge history %s",
            event.operation,
            extra={
                "operation": event.operation,
                "change": event.change_description,
                "undo_depth": event.undo_depth,
                "redo_depth": event.redo_depth,
                "detail": event.detail,
            },
        )
