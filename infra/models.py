# -*- coding: utf-8 -*-
"""
infra/models.py: Pydantic models for localizer options and for in-memory
dictionary sources.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from infra.config import DISABLE_DEFAULT_LOCALIZATION_ACTIONS, USE_UID_WHEN_NOT_FOUND


class LocalizerOptions(BaseModel):
    """Switches consumed by :class:`core.localizer.Localizer`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Return the uid itself (instead of "") when a lookup misses.
    use_uid_when_not_found: bool = Field(default=USE_UID_WHEN_NOT_FOUND)
    # Start with an empty action table instead of the toolkit defaults.
    disable_default_localization_actions: bool = Field(default=DISABLE_DEFAULT_LOCALIZATION_ACTIONS)


class DictionaryPayload(BaseModel):
    """
    One language worth of entries:
      {
        "language": "en",
        "items": {"<uid>": {"<property name>": "<value>", ...}, ...}
      }
    """
    model_config = ConfigDict(extra="ignore")

    language: str = Field(min_length=1)
    items: Dict[str, Dict[str, str]] = Field(default_factory=dict)


__all__ = ["LocalizerOptions", "DictionaryPayload"]
