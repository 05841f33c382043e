# -*- coding: utf-8 -*-
"""Building language dictionaries from in-memory mappings, plus the built-in set."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from core.language_dictionary import Item, LanguageDictionary
from infra.models import DictionaryPayload

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "ru": "Русский",
    "de": "Deutsch",
}

# uid -> {property name: value}. Property names are tkinter option names
# ("text") or names handled by the fallback actions ("Title", "Header").
BUILTIN_ENTRIES: Dict[str, Dict[str, Dict[str, str]]] = {
    "en": {
        "MainWindow": {"Title": "Widget Localizer"},
        "MainWindow.Greeting": {"text": "Hello!"},
        "MainWindow.SettingsButton": {"text": "Settings"},
        "MainWindow.ClearButton": {"text": "Clear"},
        "MainWindow.Notes": {"text": "Notes"},
        "MainWindow.History": {"Header": "History"},
        "Status.Ready": {"text": "Ready"},
        "Status.LanguageChanged": {"text": "Language switched: {previous} -> {current}"},
        "SettingsDialog": {"Title": "Settings"},
        "SettingsDialog.LanguageLabel": {"text": "Interface language:"},
        "SettingsDialog.Hint": {"text": "Language changes apply immediately."},
        "SettingsDialog.CloseButton": {"text": "Close"},
        "Cli.Description": {"text": "Look up localized strings by uid."},
        "Cli.Arg.Uids": {"text": "Uids to look up."},
        "Cli.Arg.Language": {"text": "Language to switch to before the lookup."},
        "Cli.Arg.List": {"text": "List the available languages and exit."},
        "Cli.Arg.All": {"text": "Print every value stored for a uid."},
        "Cli.Arg.UseUid": {"text": "Print the uid itself when it is not found."},
        "Cli.UnknownLanguage": {"text": "Unknown language: {language}"},
    },
    "ru": {
        "MainWindow": {"Title": "Локализатор виджетов"},
        "MainWindow.Greeting": {"text": "Привет!"},
        "MainWindow.SettingsButton": {"text": "Настройки"},
        "MainWindow.ClearButton": {"text": "Очистить"},
        "MainWindow.Notes": {"text": "Заметки"},
        "MainWindow.History": {"Header": "История"},
        "Status.Ready": {"text": "Готово"},
        "Status.LanguageChanged": {"text": "Язык переключён: {previous} -> {current}"},
        "SettingsDialog": {"Title": "Настройки"},
        "SettingsDialog.LanguageLabel": {"text": "Язык интерфейса:"},
        "SettingsDialog.Hint": {"text": "Изменения языка применяются сразу."},
        "SettingsDialog.CloseButton": {"text": "Закрыть"},
        "Cli.Description": {"text": "Поиск локализованных строк по uid."},
        "Cli.Arg.Uids": {"text": "Искомые uid."},
        "Cli.Arg.Language": {"text": "Язык, на который переключиться перед поиском."},
        "Cli.Arg.List": {"text": "Показать доступные языки и выйти."},
        "Cli.Arg.All": {"text": "Показать все значения uid."},
        "Cli.Arg.UseUid": {"text": "Печатать сам uid, если он не найден."},
        "Cli.UnknownLanguage": {"text": "Неизвестный язык: {language}"},
    },
    "de": {
        "MainWindow": {"Title": "Widget-Lokalisierer"},
        "MainWindow.Greeting": {"text": "Hallo!"},
        "MainWindow.SettingsButton": {"text": "Einstellungen"},
        "MainWindow.ClearButton": {"text": "Leeren"},
        "MainWindow.Notes": {"text": "Notizen"},
        "MainWindow.History": {"Header": "Verlauf"},
        "Status.Ready": {"text": "Bereit"},
        "Status.LanguageChanged": {"text": "Sprache gewechselt: {previous} -> {current}"},
        "SettingsDialog": {"Title": "Einstellungen"},
        "SettingsDialog.LanguageLabel": {"text": "Sprache:"},
        "SettingsDialog.Hint": {"text": "Sprachänderungen gelten sofort."},
        "SettingsDialog.CloseButton": {"text": "Schließen"},
    },
}


def build_language_dictionary(language: str, entries: Mapping[str, Mapping[str, str]]) -> LanguageDictionary:
    """
    Validate ``entries`` and turn them into a :class:`LanguageDictionary`.
    Raises pydantic ``ValidationError`` for an empty language or non-string values.
    """
    return load_payload({"language": language, "items": entries})


def dictionary_from_payload(payload: DictionaryPayload) -> LanguageDictionary:
    dictionary = LanguageDictionary(payload.language)
    for uid, properties in payload.items.items():
        for property_name, value in properties.items():
            dictionary.add_item(Item(uid=uid, property_name=property_name, value=value))
    return dictionary


def load_payload(data: Any) -> LanguageDictionary:
    """Build a dictionary from an already-parsed ``{"language": ..., "items": ...}`` object."""
    return dictionary_from_payload(DictionaryPayload.model_validate(data))


def builtin_dictionaries() -> List[LanguageDictionary]:
    return [build_language_dictionary(code, entries) for code, entries in BUILTIN_ENTRIES.items()]


def language_name(language: str) -> str:
    return LANGUAGE_NAMES.get(language, language)


__all__ = [
    "LANGUAGE_NAMES",
    "BUILTIN_ENTRIES",
    "build_language_dictionary",
    "dictionary_from_payload",
    "load_payload",
    "builtin_dictionaries",
    "language_name",
]
