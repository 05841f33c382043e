# -*- coding: utf-8 -*-
"""Tkinter demo window whose texts are driven by the localizer."""
from __future__ import annotations

import asyncio
import tkinter as tk
from tkinter import Toplevel, messagebox, ttk
from typing import Dict, Optional

from core.events import LanguageChanged
from core.exceptions import LocalizerError
from core.localization_actions import ActionItem
from core.localizer import Localizer
from infra.config import PAD_X, PAD_Y, SETTINGS_WINDOW_SIZE, WINDOW_SIZE
from infra.dictionaries import language_name
from ui.gui_layout import build_body, build_status_bar, build_top_panel
from ui.tk_bindings import set_title


class SettingsDialog(Toplevel):
    """Settings window to select the interface language."""

    def __init__(self, app: "LocalizedWindow") -> None:
        super().__init__(app)
        self.app = app
        self.localizer = app.localizer
        self._updating = False
        self._name_to_code: Dict[str, str] = {}

        self.geometry(SETTINGS_WINDOW_SIZE)
        self.resizable(False, False)
        self.transient(app)
        self.protocol("WM_DELETE_WINDOW", self._close)
        self.columnconfigure(0, weight=1)

        self._build_widgets()
        self.app.uids.set_uid(self, "SettingsDialog")
        self.refresh_languages()
        self.bind("<Escape>", lambda _event: self._close())

    def _build_widgets(self) -> None:
        uids = self.app.uids

        self.lbl_language = tk.Label(self, anchor="w")
        self.lbl_language.grid(row=0, column=0, sticky="w", padx=PAD_X, pady=(PAD_Y, 4))
        uids.set_uid(self.lbl_language, "SettingsDialog.LanguageLabel")

        self.lang_var = tk.StringVar()
        self.cbo_language = ttk.Combobox(self, state="readonly", textvariable=self.lang_var, width=24)
        self.cbo_language.grid(row=1, column=0, sticky="we", padx=PAD_X)
        self.cbo_language.bind("<<ComboboxSelected>>", lambda _event: self._on_language_selected())

        self.lbl_hint = tk.Label(self, anchor="w")
        self.lbl_hint.grid(row=2, column=0, sticky="w", padx=PAD_X, pady=(8, 4))
        uids.set_uid(self.lbl_hint, "SettingsDialog.Hint")

        self.btn_close = ttk.Button(self, command=self._close)
        self.btn_close.grid(row=3, column=0, sticky="e", padx=PAD_X, pady=(0, PAD_Y))
        uids.set_uid(self.btn_close, "SettingsDialog.CloseButton")

    def refresh_languages(self) -> None:
        self._updating = True
        try:
            codes = sorted(self.localizer.get_available_languages())
            self._name_to_code = {language_name(code): code for code in codes}
            self.cbo_language.config(values=list(self._name_to_code))
            self.lang_var.set(language_name(self.localizer.get_current_language()))
        finally:
            self._updating = False

    def _on_language_selected(self) -> None:
        if self._updating:
            return
        code = self._name_to_code.get(self.lang_var.get())
        if code:
            self.app.switch_language(code)

    def _close(self) -> None:
        self.app._settings_closed(self)
        self.destroy()


class LocalizedWindow(tk.Tk):
    """Main window; every captioned control carries a uid."""

    def __init__(self, localizer: Localizer) -> None:
        super().__init__()
        self.localizer = localizer
        self.uids = localizer.uids
        self.geometry(WINDOW_SIZE)

        self.status: tk.StringVar = tk.StringVar()
        self.lbl_greeting: Optional[tk.Label] = None
        self.btn_settings: Optional[tk.Button] = None
        self.btn_clear: Optional[tk.Button] = None
        self.tree_history: Optional[ttk.Treeview] = None
        self.frm_notes: Optional[tk.LabelFrame] = None
        self.txt_notes = None
        self.status_label: Optional[tk.Label] = None
        self.settings_window: Optional[SettingsDialog] = None

        self.uids.set_uid(self, "MainWindow")
        self._build_ui()
        self.status.set(self.localizer.get_localized_string("Status.Ready"))

        self._lang_unsub = self.localizer.language_changed.subscribe(self._on_language_change)
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _build_ui(self) -> None:
        build_top_panel(self)
        build_body(self)
        build_status_bar(self)

    # ---- Localization helpers -------------------------------------------

    def switch_language(self, language: str) -> None:
        try:
            asyncio.run(self.localizer.set_language(language))
        except LocalizerError as exc:
            messagebox.showerror(self.localizer.get_localized_string("MainWindow"), str(exc))

    def _on_language_change(self, event: LanguageChanged) -> None:
        template = self.localizer.get_localized_string("Status.LanguageChanged")
        self.status.set(
            template.format(
                previous=language_name(event.previous_language) if event.previous_language else "-",
                current=language_name(event.current_language),
            )
        )
        self.tree_history.insert("", tk.END, text=language_name(event.current_language))
        if self.settings_window is not None:
            self.settings_window.refresh_languages()

    # ---- Commands --------------------------------------------------------

    def open_settings(self) -> None:
        if self.settings_window is not None:
            self.settings_window.lift()
            return
        self.settings_window = SettingsDialog(self)

    def clear_notes(self) -> None:
        if self.txt_notes is not None:
            self.txt_notes.delete("1.0", tk.END)

    def _settings_closed(self, dialog: SettingsDialog) -> None:
        if self.settings_window is dialog:
            self.settings_window = None

    def _on_close(self) -> None:
        if self.settings_window is not None:
            self.settings_window.destroy()
            self.settings_window = None
        self.destroy()

    def destroy(self) -> None:  # type: ignore[override]
        if getattr(self, "_lang_unsub", None):
            self._lang_unsub()
            self._lang_unsub = None
        super().destroy()


def register_window_actions(localizer: Localizer) -> None:
    """Title actions for the window classes; dispatch matches exact types only."""
    localizer.add_localization_action(ActionItem(LocalizedWindow, set_title))
    localizer.add_localization_action(ActionItem(SettingsDialog, set_title))


__all__ = ["LocalizedWindow", "SettingsDialog", "register_window_actions"]
