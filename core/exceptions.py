# -*- coding: utf-8 -*-
"""
Localizer exceptions.

Raised only for unexpected faults. Expected misses (unknown language,
unknown uid) never raise; they fall back silently.
"""
from __future__ import annotations


class LocalizerError(Exception):
    """Base class for every failure raised by the localizer."""


class AvailableLanguagesError(LocalizerError):
    """Raised when the set of registered languages cannot be read."""

    def __init__(self, message: str = "Failed to get available languages.") -> None:
        super().__init__(message)


class SetLanguageError(LocalizerError):
    """Raised when switching languages fails part way.

    The current dictionary is not rolled back; some elements may already
    show the target language.
    """

    def __init__(self, previous_language: str, language: str, message: str = "") -> None:
        self.previous_language = previous_language
        self.language = language
        super().__init__(
            message or "Failed to set language. [{} -> {}]".format(previous_language, language)
        )


class LocalizedStringError(LocalizerError):
    """Raised when looking up a uid fails for a reason other than a miss."""

    def __init__(self, uid: object, message: str = "") -> None:
        self.uid = uid
        super().__init__(message or "Failed to get localized string. [Uid: {}]".format(uid))


__all__ = [
    "LocalizerError",
    "AvailableLanguagesError",
    "SetLanguageError",
    "LocalizedStringError",
]
