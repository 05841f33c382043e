# -*- coding: utf-8 -*-
"""
Global constants and defaults for the localizer and its demo UI.
"""
import os

# === Localizer defaults ===
DEFAULT_LANGUAGE = "en"
USE_UID_WHEN_NOT_FOUND = False
DISABLE_DEFAULT_LOCALIZATION_ACTIONS = False

# === Logging ===
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = os.environ.get("LOCALIZER_LOG_LEVEL", "INFO")

# === UI window size ===
WINDOW_SIZE = "640x420"
SETTINGS_WINDOW_SIZE = "360x200"

# === UI fonts ===
LOG_TEXT_HEIGHT = 12
LOG_FONT = ("Consolas", 10)

PAD_X = 10
PAD_Y = 8
PAD_BTN = 8
