# -*- coding: utf-8 -*-
"""Localization engine: dictionaries, tracked elements and language switching."""
from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from core.element_registry import ElementAdded, ElementRemoved, WeakElementRegistry
from core.events import EventHook, LanguageChanged
from core.exceptions import (
    AvailableLanguagesError,
    LocalizedStringError,
    LocalizerError,
    SetLanguageError,
)
from core.language_dictionary import Item, LanguageDictionary
from core.localization_actions import ActionDispatchTable, ActionItem
from core.property_setters import PropertySetters
from core.uids import Uids
from infra.models import LocalizerOptions

_default_logger = logging.getLogger(__name__)
_default_logger.addHandler(logging.NullHandler())


class LocalizerState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    LANGUAGE_ACTIVE = "language_active"


class Localizer:
    """
    Applies localized values to uid-tagged elements and re-applies them on
    every language switch.

    The localizer subscribes to ``uids.uid_set`` on construction, so any
    element that gets a uid afterwards is tracked and localized right away.
    Calls are expected to come from one UI thread; only the element snapshot
    taken during :meth:`set_language` suspends.
    """

    def __init__(
        self,
        options: Optional[LocalizerOptions] = None,
        *,
        uids: Optional[Uids] = None,
        property_setters: Optional[PropertySetters] = None,
        default_actions: Iterable[ActionItem] = (),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.options = options if options is not None else LocalizerOptions()
        self.uids = uids if uids is not None else Uids()
        self.property_setters = property_setters if property_setters is not None else PropertySetters()
        self.language_changed = EventHook("language_changed")

        self._logger = logger or _default_logger
        self._dictionaries: Dict[str, LanguageDictionary] = {}
        self._current_dictionary = LanguageDictionary("")
        self._registry = WeakElementRegistry()
        self._actions = ActionDispatchTable()
        if not self.options.disable_default_localization_actions:
            self._actions.extend(default_actions)

        self._registry.added.subscribe(self._on_element_added)
        self._registry.removed.subscribe(self._on_element_removed)
        self._uid_unsub = self.uids.uid_set.subscribe(self.register_element)
        self._closed = False

    # ---- Queries ---------------------------------------------------------

    @property
    def state(self) -> LocalizerState:
        if self._current_dictionary.language:
            return LocalizerState.LANGUAGE_ACTIVE
        if self._dictionaries:
            return LocalizerState.READY
        return LocalizerState.UNINITIALIZED

    @property
    def registry(self) -> WeakElementRegistry:
        return self._registry

    @property
    def actions(self) -> ActionDispatchTable:
        return self._actions

    def get_available_languages(self) -> Set[str]:
        try:
            return set(self._dictionaries.keys())
        except Exception as exc:
            error = AvailableLanguagesError()
            self._logger.error("%s", error, exc_info=exc)
            raise error from exc

    def get_current_language(self) -> str:
        return self._current_dictionary.language

    def get_current_language_dictionary(self) -> LanguageDictionary:
        return self._current_dictionary

    def get_language_dictionaries(self) -> Tuple[LanguageDictionary, ...]:
        return tuple(self._dictionaries.values())

    def get_localized_string(self, uid: str) -> str:
        try:
            items = self._current_dictionary.try_get_items(uid)
            if items:
                return items[-1].value
        except LocalizerError:
            raise
        except Exception as exc:
            error = LocalizedStringError(uid)
            self._logger.error("%s", error, exc_info=exc)
            raise error from exc

        return uid if self.options.use_uid_when_not_found else ""

    def get_localized_strings(self, uid: str) -> List[str]:
        try:
            items = self._current_dictionary.try_get_items(uid)
            if items is not None:
                return [item.value for item in items]
        except LocalizerError:
            raise
        except Exception as exc:
            error = LocalizedStringError(uid)
            self._logger.error("%s", error, exc_info=exc)
            raise error from exc

        return [uid] if self.options.use_uid_when_not_found else []

    # ---- Commands --------------------------------------------------------

    async def set_language(self, language: str) -> None:
        """
        Switch to ``language`` and re-localize every live element.

        Unknown languages are ignored. ``language_changed`` fires only after
        all elements were updated. On failure the new dictionary stays
        current and :class:`SetLanguageError` is raised.
        """
        previous_language = self._current_dictionary.language
        try:
            dictionary = self._dictionaries.get(language)
            if dictionary is None:
                self._logger.debug("Language not available. [Language: %s]", language)
                return

            self._current_dictionary = dictionary
            await self._localize_elements()
            self._on_language_changed(previous_language, dictionary.language)
        except LocalizerError:
            raise
        except Exception as exc:
            error = SetLanguageError(previous_language, language)
            self._logger.error("%s", error, exc_info=exc)
            raise error from exc

    def add_language_dictionary(self, dictionary: LanguageDictionary) -> None:
        if not dictionary.language:
            raise ValueError("Language dictionary must have a non-empty language.")

        target = self._dictionaries.get(dictionary.language)
        if target is not None:
            previous_count = target.get_items_count()
            for item in dictionary.get_items():
                target.add_item(item)
            self._logger.info(
                "Merged dictionaries. [Language: %s Items: %d -> %d]",
                target.language,
                previous_count,
                target.get_items_count(),
            )
            return

        new_dictionary = LanguageDictionary(dictionary.language)
        for item in dictionary.get_items():
            new_dictionary.add_item(item)
        self._dictionaries[new_dictionary.language] = new_dictionary
        self._logger.info(
            "Added new dictionary. [Language: %s Items: %d]",
            new_dictionary.language,
            new_dictionary.get_items_count(),
        )

    def add_localization_action(self, item: ActionItem) -> None:
        self._actions.add(item)

    def register_element(self, element: Any) -> None:
        if not self._registry.contains(element):
            self._registry.add(element)
        self.localize_element(element)

    def localize_element(self, element: Any, dictionary: Optional[LanguageDictionary] = None) -> None:
        """Apply the items for the element's uid from ``dictionary`` (default: current)."""
        uid = self.uids.get_uid(element)
        if uid is None:
            return

        if dictionary is None:
            dictionary = self._current_dictionary
        items = dictionary.try_get_items(uid)
        if items is None:
            return

        for item in items:
            self._apply_item(element, item)

    def set_logger(self, logger: logging.Logger) -> None:
        self._logger = logger

    def close(self) -> None:
        if self._closed:
            return
        self._uid_unsub()
        self._registry.added.unsubscribe(self._on_element_added)
        self._registry.removed.unsubscribe(self._on_element_removed)
        self._registry.clear()
        self.language_changed.clear()
        self._closed = True

    def __enter__(self) -> "Localizer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ---- Internals -------------------------------------------------------

    async def _localize_elements(self) -> None:
        dictionary = self._current_dictionary
        for element in await self._registry.get_elements():
            self.localize_element(element, dictionary)

    def _apply_item(self, element: Any, item: Item) -> None:
        setter = self.property_setters.resolve(type(element), item.property_name)
        if setter is not None:
            setter(element, item.value)
            return
        self._actions.dispatch(element, item.value)

    def _on_language_changed(self, previous_language: str, current_language: str) -> None:
        self.language_changed.emit(LanguageChanged(previous_language, current_language))
        self._logger.info("Changed language. [%s -> %s]", previous_language, current_language)

    def _on_element_added(self, event: ElementAdded) -> None:
        self._logger.debug(
            "Added element. [Type: %s Total: %d]", event.element_type.__name__, event.total
        )

    def _on_element_removed(self, event: ElementRemoved) -> None:
        self._logger.debug(
            "Removed element. [Type: %s Total: %d]", event.element_type.__name__, event.total
        )


__all__ = ["Localizer", "LocalizerState"]
