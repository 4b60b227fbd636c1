"""Shared progress and cancellation state for a combine run."""

from __future__ import annotations

import logging
import threading
from typing import Callable, List

LOGGER = logging.getLogger("scancombine.progress")

ProgressCallback = Callable[[int, int], None]


class Progress:
    """Counters describing total vs. completed output pages.

    The combine operation is the only writer of the counters. Observers on
    other threads may read them at any time, register callbacks, or request
    cancellation with :meth:`cancel`. Callbacks run on the thread doing the
    work, right after each page is written, with ``(completed, total)``.
    """

    def __init__(self, total_unit_count: int = 0) -> None:
        self._lock = threading.Lock()
        self._total = total_unit_count
        self._completed = 0
        self._cancelled = threading.Event()
        self._observers: List[ProgressCallback] = []

    @property
    def total_unit_count(self) -> int:
        with self._lock:
            return self._total

    @total_unit_count.setter
    def total_unit_count(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"total_unit_count must be >= 0, got {value}")
        with self._lock:
            self._total = value
            self._completed = 0

    @property
    def completed_unit_count(self) -> int:
        with self._lock:
            return self._completed

    @property
    def fraction_completed(self) -> float:
        with self._lock:
            if self._total == 0:
                return 0.0
            return self._completed / self._total

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        if not self._cancelled.is_set():
            LOGGER.debug("Cancellation requested")
        self._cancelled.set()

    request_cancellation = cancel

    def add_observer(self, callback: ProgressCallback) -> None:
        with self._lock:
            self._observers.append(callback)

    def remove_observer(self, callback: ProgressCallback) -> None:
        with self._lock:
            if callback in self._observers:
                self._observers.remove(callback)

    def advance(self) -> int:
        """Record one more completed unit and notify observers."""
        with self._lock:
            if self._completed >= self._total:
                raise ValueError(
                    f"completed_unit_count cannot exceed total_unit_count ({self._total})"
                )
            self._completed += 1
            completed, total = self._completed, self._total
            observers = list(self._observers)

        for callback in observers:
            callback(completed, total)
        return completed

    def __repr__(self) -> str:
        return (
            f"Progress(completed={self.completed_unit_count}, total={self.total_unit_count}, "
            f"cancelled={self.is_cancelled})"
        )


__all__ = ["Progress", "ProgressCallback"]
