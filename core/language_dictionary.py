# -*- coding: utf-8 -*-
"""In-memory per-language dictionary of localization items."""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    """One ``(uid, property_name, value)`` localization entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    uid: str
    property_name: str
    value: str


class LanguageDictionary:
    """
    Items of one language grouped by uid.

    Items under a uid keep insertion order. Nothing is ever de-duplicated:
    adding a second item with the same uid and property name appends it,
    and lookups treat the last one as the current value.
    """

    def __init__(self, language: str) -> None:
        self._language = language
        self._items_by_uid: Dict[str, List[Item]] = {}
        self._items: List[Item] = []

    @property
    def language(self) -> str:
        return self._language

    def add_item(self, item: Item) -> None:
        self._items_by_uid.setdefault(item.uid, []).append(item)
        self._items.append(item)

    def try_get_items(self, uid: str) -> Optional[Tuple[Item, ...]]:
        items = self._items_by_uid.get(uid)
        if items is None:
            return None
        return tuple(items)

    def get_items(self) -> Tuple[Item, ...]:
        """All items in the order they were added."""
        return tuple(self._items)

    def get_items_count(self) -> int:
        return len(self._items)

    def uids(self) -> Tuple[str, ...]:
        return tuple(self._items_by_uid.keys())

    def __contains__(self, uid: object) -> bool:
        return uid in self._items_by_uid

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.get_items())

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return "LanguageDictionary(language={!r}, items={})".format(self._language, len(self._items))


__all__ = ["Item", "LanguageDictionary"]
