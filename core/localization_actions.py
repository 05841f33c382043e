# -*- coding: utf-8 -*-
"""Fallback appliers for elements that have no matching property setter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Tuple


@dataclass(frozen=True)
class ActionArguments:
    element: Any
    value: str


@dataclass(frozen=True)
class ActionItem:
    target_type: type
    action: Callable[[ActionArguments], None]


class ActionDispatchTable:
    """
    Ordered, append-only list of :class:`ActionItem`.

    Dispatch matches the element's exact runtime type (subclasses do not
    match their base's entries) and runs every matching action in the
    order the entries were added.
    """

    def __init__(self, items: Iterable[ActionItem] = ()) -> None:
        self._items: List[ActionItem] = list(items)

    def add(self, item: ActionItem) -> None:
        self._items.append(item)

    def extend(self, items: Iterable[ActionItem]) -> None:
        for item in items:
            self.add(item)

    def get_actions(self, element_type: type) -> Tuple[ActionItem, ...]:
        return tuple(item for item in self._items if item.target_type is element_type)

    def dispatch(self, element: Any, value: str) -> int:
        """Run every action registered for ``type(element)``; return how many ran."""
        actions = self.get_actions(type(element))
        for item in actions:
            item.action(ActionArguments(element, value))
        return len(actions)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(tuple(self._items))


__all__ = ["ActionArguments", "ActionItem", "ActionDispatchTable"]
