"""
Log Sink — explicitly constructed, subscribable logging handler.

Lets a caller (e.g. a debug panel) observe pipeline log records without a
process-wide singleton: the sink is created, attached to a logger for as
long as needed, and passed by reference to whoever wants to listen.

Usage
-----
    sink = LogSink(capacity=200)
    sink.subscribe(panel.push)

    with sink.attach("codeguard"):
        run_validation_pipeline(project)

    sink.unsubscribe(panel.push)
"""
from __future__ import annotations

import logging
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Deque, Generator, List, Optional

DEFAULT_CAPACITY: int = 500


@dataclass(frozen=True)
class LogEntry:
    """A single formatted log record delivered to listeners."""

    level: str
    logger_name: str
    message: str
    created: float

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "logger_name": self.logger_name,
            "message": self.message,
            "created": self.created,
        }


Listener = Callable[[LogEntry], None]


class LogSink(logging.Handler):
    """
    logging.Handler that keeps a bounded history and fans records out to
    subscribed listeners.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, level: int = logging.NOTSET):
        super().__init__(level=level)
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> bool:
        """Remove *listener*. Returns False if it was not subscribed."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    @property
    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    # ------------------------------------------------------------------
    # logging.Handler
    # ------------------------------------------------------------------

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogEntry(
                level=record.levelname,
                logger_name=record.name,
                message=self.format(record),
                created=record.created,
            )
        except Exception:  # noqa: BLE001
            self.handleError(record)
            return

        self._entries.append(entry)
        for listener in list(self._listeners):
            try:
                listener(entry)
            except Exception:  # noqa: BLE001
                self.handleError(record)

    @contextmanager
    def attach(
        self,
        logger_name: Optional[str] = "codeguard",
        level: int = logging.DEBUG,
    ) -> Generator["LogSink", None, None]:
        """Attach the sink to *logger_name* for the duration of the block."""
        target = logging.getLogger(logger_name)
        previous_level = target.level
        target.addHandler(self)
        if target.level == logging.NOTSET or target.level > level:
            target.setLevel(level)
        try:
            yield self
        finally:
            target.removeHandler(self)
            target.setLevel(previous_level)
