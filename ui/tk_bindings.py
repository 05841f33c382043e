# -*- coding: utf-8 -*-
"""tkinter property setters and fallback actions for the localizer."""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, List, Optional

from core.localization_actions import ActionArguments, ActionItem
from core.localizer import Localizer
from core.property_setters import PropertySetters, Setter
from core.uids import Uids
from infra.models import LocalizerOptions

# Widgets whose caption is the "text" option.
TEXT_WIDGET_TYPES = (
    tk.Label,
    tk.Button,
    tk.Checkbutton,
    tk.Radiobutton,
    tk.LabelFrame,
    tk.Menubutton,
    tk.Message,
    ttk.Label,
    ttk.Button,
    ttk.Checkbutton,
    ttk.Radiobutton,
    ttk.Labelframe,
    ttk.Menubutton,
)


def _is_alive(widget: Any) -> bool:
    try:
        return bool(widget.winfo_exists())
    except tk.TclError:
        return False


def option_setter(option: str) -> Setter:
    """Setter writing ``value`` into the widget option ``option``."""

    def _set(widget: Any, value: str) -> None:
        if _is_alive(widget):
            widget.configure(**{option: value})

    return _set


def default_property_setters() -> PropertySetters:
    setters = PropertySetters()
    setters.register_many(TEXT_WIDGET_TYPES, "text", option_setter("text"))
    return setters


# ---- Fallback actions ------------------------------------------------------

def set_title(args: ActionArguments) -> None:
    if _is_alive(args.element):
        args.element.title(args.value)


def _set_tree_header(args: ActionArguments) -> None:
    if _is_alive(args.element):
        args.element.heading("#0", text=args.value)


def default_actions() -> List[ActionItem]:
    return [
        ActionItem(tk.Tk, set_title),
        ActionItem(tk.Toplevel, set_title),
        ActionItem(ttk.Treeview, _set_tree_header),
    ]


def create_localizer(
    options: Optional[LocalizerOptions] = None,
    uids: Optional[Uids] = None,
) -> Localizer:
    """Localizer preloaded with the tkinter setters and default actions."""
    return Localizer(
        options,
        uids=uids,
        property_setters=default_property_setters(),
        default_actions=default_actions(),
    )


__all__ = [
    "TEXT_WIDGET_TYPES",
    "option_setter",
    "set_title",
    "default_property_setters",
    "default_actions",
    "create_localizer",
]
