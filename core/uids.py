# -*- coding: utf-8 -*-
"""Attached localization uids and the hook fired when one is set."""
from __future__ import annotations

import threading
import weakref
from typing import Any, Optional

from core.events import EventHook


class Uids:
    """
    Stores the uid attached to each element without keeping it alive.

    Every :meth:`set_uid` call fires :attr:`uid_set` with the element; the
    localizer subscribes to it to register the element.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._uids: "weakref.WeakKeyDictionary[Any, str]" = weakref.WeakKeyDictionary()
        self.uid_set = EventHook("uid_set")

    def set_uid(self, element: Any, uid: str) -> None:
        with self._lock:
            self._uids[element] = uid
        self.uid_set.emit(element)

    def get_uid(self, element: Any) -> Optional[str]:
        with self._lock:
            try:
                return self._uids.get(element)
            except TypeError:
                # Unhashable or non-weakrefable elements never carry a uid.
                return None

    def clear_uid(self, element: Any) -> None:
        with self._lock:
            self._uids.pop(element, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._uids)


__all__ = ["Uids"]
