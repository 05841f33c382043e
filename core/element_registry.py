# -*- coding: utf-8 -*-
"""Weak tracking of UI elements that carry a localization uid."""
from __future__ import annotations

import asyncio
import logging
import threading
import weakref
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List

from core.events import EventHook

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class ElementAdded:
    element_type: type
    total: int


@dataclass(frozen=True)
class ElementRemoved:
    element_type: type
    total: int


class _Entry:
    __slots__ = ("reference", "element_type")

    def __init__(self, element: Any) -> None:
        self.reference = weakref.ref(element)
        self.element_type = type(element)


class WeakElementRegistry:
    """
    Keeps weak references to registered elements.

    The registry never keeps an element alive. Dead references are dropped
    lazily by :meth:`get_elements`, which emits one ``removed`` event per
    dropped entry.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._entries: List[_Entry] = []
        self._tracked: "weakref.WeakSet[Any]" = weakref.WeakSet()
        self.added = EventHook("added")
        self.removed = EventHook("removed")

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def add(self, element: Any) -> None:
        entry = _Entry(element)
        with self._lock:
            self._entries.append(entry)
            self._tracked.add(element)
            total = len(self._entries)
        self._notify(self.added, ElementAdded(entry.element_type, total))

    def contains(self, element: Any) -> bool:
        with self._lock:
            return element in self._tracked

    async def get_elements(self) -> List[Any]:
        """Return the elements still alive, pruning collected ones."""
        # Let pending finalizers and other tasks run before looking.
        await asyncio.sleep(0)

        with self._lock:
            entries = list(self._entries)

        alive: List[Any] = []
        dead: List[_Entry] = []
        for entry in entries:
            element = entry.reference()
            if element is None:
                dead.append(entry)
            else:
                alive.append(element)

        for entry in dead:
            with self._lock:
                try:
                    self._entries.remove(entry)
                except ValueError:
                    continue
                total = len(self._entries)
            self._notify(self.removed, ElementRemoved(entry.element_type, total))

        return alive

    def get_types(self) -> Dict[type, int]:
        """Tracked entry count per element type, dead entries included."""
        with self._lock:
            return dict(Counter(entry.element_type for entry in self._entries))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._tracked.clear()

    @staticmethod
    def _notify(hook: EventHook, payload: Any) -> None:
        for callback in hook.listeners():
            try:
                callback(payload)
            except Exception:
                logger.exception("Element registry listener failed. [Event: %s]", hook.name)


__all__ = ["ElementAdded", "ElementRemoved", "WeakElementRegistry"]
