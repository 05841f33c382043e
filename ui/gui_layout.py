# -*- coding: utf-8 -*-
"""Layout helpers that build the uid-tagged controls of :mod:`ui.localized_window`."""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from tkinter.scrolledtext import ScrolledText

from infra.config import LOG_FONT, LOG_TEXT_HEIGHT, PAD_BTN, PAD_X, PAD_Y


def build_top_panel(app) -> tk.Frame:
    top = tk.Frame(app)
    top.pack(fill=tk.X, padx=PAD_X, pady=PAD_Y)

    app.lbl_greeting = tk.Label(top, anchor="w", font=("TkDefaultFont", 12, "bold"))
    app.lbl_greeting.pack(side=tk.LEFT)
    app.uids.set_uid(app.lbl_greeting, "MainWindow.Greeting")

    app.btn_settings = tk.Button(top, command=app.open_settings)
    app.btn_settings.pack(side=tk.RIGHT)
    app.uids.set_uid(app.btn_settings, "MainWindow.SettingsButton")

    app.btn_clear = tk.Button(top, command=app.clear_notes)
    app.btn_clear.pack(side=tk.RIGHT, padx=PAD_BTN)
    app.uids.set_uid(app.btn_clear, "MainWindow.ClearButton")
    return top


def build_body(app) -> tk.Frame:
    body = tk.Frame(app)
    body.pack(fill=tk.BOTH, expand=True, padx=PAD_X)

    app.tree_history = ttk.Treeview(body, height=LOG_TEXT_HEIGHT, selectmode="browse")
    app.tree_history.pack(side=tk.LEFT, fill=tk.Y)
    app.uids.set_uid(app.tree_history, "MainWindow.History")

    app.frm_notes = tk.LabelFrame(body)
    app.frm_notes.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(PAD_BTN, 0))
    app.uids.set_uid(app.frm_notes, "MainWindow.Notes")

    app.txt_notes = ScrolledText(app.frm_notes, height=LOG_TEXT_HEIGHT, wrap=tk.WORD, font=LOG_FONT)
    app.txt_notes.pack(fill=tk.BOTH, expand=True)
    return body


def build_status_bar(app) -> tk.Frame:
    bottom = tk.Frame(app)
    bottom.pack(fill=tk.X, padx=PAD_X, pady=PAD_Y)

    app.status_label = tk.Label(bottom, textvariable=app.status, anchor="w")
    app.status_label.pack(side=tk.LEFT, fill=tk.X, expand=True)
    return bottom


__all__ = ["build_top_panel", "build_body", "build_status_bar"]
