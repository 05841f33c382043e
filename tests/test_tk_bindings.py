"""
Tests for the tkinter bindings.

TestDefaults and TestStandInWidgets run without a display: the widgets are
created with ``__new__`` and their Tcl-facing methods are stubbed.
TestTkLocalization needs a display and is skipped otherwise.
"""
import tkinter as tk
from tkinter import ttk
from tkinter.scrolledtext import ScrolledText
from unittest.mock import MagicMock

import pytest

from core.localization_actions import ActionArguments, ActionItem
from infra.dictionaries import build_language_dictionary
from infra.models import LocalizerOptions
from ui.tk_bindings import (
    TEXT_WIDGET_TYPES,
    create_localizer,
    default_actions,
    option_setter,
    set_title,
)


def stand_in(widget_type, alive=True):
    """Instance of ``widget_type`` that never touches Tcl."""
    widget = widget_type.__new__(widget_type)
    widget._w = ".stand_in_" + widget_type.__name__.lower()
    widget.tk = MagicMock()
    widget.winfo_exists = MagicMock(return_value=1 if alive else 0)
    for name in ("configure", "title", "heading", "delete", "insert", "get"):
        setattr(widget, name, MagicMock())
    return widget


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"no display: {exc}")
    window.withdraw()
    yield window
    window.destroy()


@pytest.fixture
def tk_localizer():
    localizer = create_localizer()
    localizer.add_language_dictionary(
        build_language_dictionary(
            "en",
            {
                "Window": {"Title": "Main"},
                "Greeting": {"text": "Hello"},
                "Notes": {"text": "Notes"},
                "History": {"Header": "History"},
            },
        )
    )
    localizer.add_language_dictionary(
        build_language_dictionary(
            "ru",
            {
                "Window": {"Title": "Главное"},
                "Greeting": {"text": "Привет"},
                "Notes": {"text": "Заметки"},
                "History": {"Header": "История"},
            },
        )
    )
    yield localizer
    localizer.close()


class TestDefaults:

    def test_default_actions_target_exact_widget_types(self):
        targets = [item.target_type for item in default_actions()]
        assert tk.Tk in targets
        assert ttk.Treeview in targets
        assert tk.Label not in targets

    def test_editable_widgets_have_no_default_action(self):
        targets = [item.target_type for item in default_actions()]
        for editable in (tk.Entry, ttk.Entry, tk.Text, ScrolledText):
            assert editable not in targets

    def test_default_actions_can_be_disabled(self):
        localizer = create_localizer(LocalizerOptions(disable_default_localization_actions=True))
        assert len(localizer.actions) == 0
        localizer.close()

    def test_text_widgets_resolve_text_setter(self):
        localizer = create_localizer()
        for widget_type in TEXT_WIDGET_TYPES:
            assert localizer.property_setters.resolve(widget_type, "text") is not None
        localizer.close()


class TestStandInWidgets:
    """Setters, actions and switches against stubbed widgets."""

    def test_option_setter_configures_live_widget(self):
        label = stand_in(tk.Label)
        option_setter("text")(label, "Hello")
        label.configure.assert_called_once_with(text="Hello")

    def test_option_setter_skips_destroyed_widget(self):
        label = stand_in(tk.Label, alive=False)
        option_setter("text")(label, "Hello")
        label.configure.assert_not_called()

    def test_tcl_error_counts_as_destroyed(self):
        label = stand_in(tk.Label)
        label.winfo_exists = MagicMock(side_effect=tk.TclError("bad window path name"))
        option_setter("text")(label, "Hello")
        label.configure.assert_not_called()

    def test_set_title(self):
        window = stand_in(tk.Tk)
        set_title(ActionArguments(window, "Main"))
        window.title.assert_called_once_with("Main")

    def test_set_title_skips_destroyed_window(self):
        window = stand_in(tk.Toplevel, alive=False)
        set_title(ActionArguments(window, "Main"))
        window.title.assert_not_called()

    def test_tree_header_action(self):
        tree = stand_in(ttk.Treeview)
        for item in default_actions():
            if item.target_type is not ttk.Treeview:
                continue
            item.action(ActionArguments(tree, "History"))
        tree.heading.assert_called_once_with("#0", text="History")

    @pytest.mark.asyncio
    async def test_switch_updates_captions_titles_and_headers(self, tk_localizer):
        label = stand_in(tk.Label)
        window = stand_in(tk.Tk)
        tree = stand_in(ttk.Treeview)
        await tk_localizer.set_language("en")
        tk_localizer.uids.set_uid(label, "Greeting")
        tk_localizer.uids.set_uid(window, "Window")
        tk_localizer.uids.set_uid(tree, "History")

        await tk_localizer.set_language("ru")

        label.configure.assert_called_with(text="Привет")
        window.title.assert_called_with("Главное")
        tree.heading.assert_called_with("#0", text="История")

    @pytest.mark.asyncio
    async def test_switch_keeps_user_text(self, tk_localizer):
        frame = stand_in(tk.LabelFrame)
        notes = stand_in(ScrolledText)
        entry = stand_in(ttk.Entry)
        await tk_localizer.set_language("en")
        tk_localizer.uids.set_uid(frame, "Notes")
        tk_localizer.uids.set_uid(notes, "Notes")
        tk_localizer.uids.set_uid(entry, "Notes")

        await tk_localizer.set_language("ru")

        frame.configure.assert_called_with(text="Заметки")
        for editable in (notes, entry):
            editable.delete.assert_not_called()
            editable.insert.assert_not_called()
            editable.configure.assert_not_called()


class TestTkLocalization:

    @pytest.mark.asyncio
    async def test_label_text_follows_language(self, root, tk_localizer):
        await tk_localizer.set_language("en")
        label = tk.Label(root)
        tk_localizer.uids.set_uid(label, "Greeting")
        assert label.cget("text") == "Hello"

        await tk_localizer.set_language("ru")

        assert label.cget("text") == "Привет"

    @pytest.mark.asyncio
    async def test_root_title_uses_fallback_action(self, root, tk_localizer):
        await tk_localizer.set_language("en")
        tk_localizer.uids.set_uid(root, "Window")
        assert root.title() == "Main"

    @pytest.mark.asyncio
    async def test_subclassed_window_needs_its_own_action(self, root, tk_localizer):
        class Dialog(tk.Toplevel):
            pass

        await tk_localizer.set_language("en")
        dialog = Dialog(root)
        tk_localizer.uids.set_uid(dialog, "Window")
        assert dialog.title() != "Main"

        tk_localizer.add_localization_action(ActionItem(Dialog, set_title))
        tk_localizer.uids.set_uid(dialog, "Window")
        assert dialog.title() == "Main"
        dialog.destroy()

    @pytest.mark.asyncio
    async def test_notes_keep_typed_text(self, root, tk_localizer):
        await tk_localizer.set_language("en")
        frame = tk.LabelFrame(root)
        notes = ScrolledText(frame)
        tree = ttk.Treeview(root)
        tk_localizer.uids.set_uid(frame, "Notes")
        tk_localizer.uids.set_uid(tree, "History")
        notes.insert("1.0", "typed by the user")

        await tk_localizer.set_language("ru")

        assert frame.cget("text") == "Заметки"
        assert notes.get("1.0", "end-1c") == "typed by the user"
        assert tree.heading("#0", "text") == "История"

    @pytest.mark.asyncio
    async def test_destroyed_widget_is_skipped(self, root, tk_localizer):
        await tk_localizer.set_language("en")
        label = tk.Label(root)
        tk_localizer.uids.set_uid(label, "Greeting")
        label.destroy()

        await tk_localizer.set_language("ru")

        assert tk_localizer.get_current_language() == "ru"
