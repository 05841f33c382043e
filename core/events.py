# -*- coding: utf-8 -*-
"""Minimal in-process observer lists used by the localizer."""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, List


@dataclass(frozen=True)
class LanguageChanged:
    """Payload of :attr:`core.localizer.Localizer.language_changed`."""

    previous_language: str
    current_language: str


class EventHook:
    """
    Ordered list of callbacks invoked synchronously by :meth:`emit`.

    Callbacks are called in subscription order. Exceptions raised by a
    callback propagate to whoever emitted the event.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._lock = threading.RLock()
        self._listeners: List[Callable[..., Any]] = []

    def subscribe(self, callback: Callable[..., Any]) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe(callback)

        return _unsubscribe

    def unsubscribe(self, callback: Callable[..., Any]) -> None:
        with self._lock:
            try:
                self._listeners.remove(callback)
            except ValueError:
                pass

    def listeners(self) -> tuple:
        with self._lock:
            return tuple(self._listeners)

    def emit(self, *args: Any) -> None:
        for callback in self.listeners():
            callback(*args)

    def clear(self) -> None:
        with self._lock:
            self._listeners.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)


__all__ = ["EventHook", "LanguageChanged"]
