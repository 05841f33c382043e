"""
Unit tests for building dictionaries from in-memory mappings.
"""
import pytest
from pydantic import ValidationError

from infra.dictionaries import (
    BUILTIN_ENTRIES,
    build_language_dictionary,
    builtin_dictionaries,
    language_name,
    load_payload,
)
from infra.models import LocalizerOptions


class TestBuildLanguageDictionary:

    def test_builds_one_item_per_property(self):
        dictionary = build_language_dictionary(
            "en", {"Save": {"text": "Save", "ToolTip": "Save the file"}, "Open": {"text": "Open"}}
        )
        assert dictionary.language == "en"
        assert dictionary.get_items_count() == 3
        assert [item.property_name for item in dictionary.try_get_items("Save")] == ["text", "ToolTip"]

    def test_empty_language_is_rejected(self):
        with pytest.raises(ValidationError):
            build_language_dictionary("", {"Save": {"text": "Save"}})

    def test_non_string_values_are_rejected(self):
        with pytest.raises(ValidationError):
            build_language_dictionary("en", {"Save": {"text": ["Save"]}})

    def test_load_payload(self):
        dictionary = load_payload({"language": "de", "items": {"Save": {"text": "Speichern"}}, "extra": 1})
        assert dictionary.language == "de"
        assert dictionary.try_get_items("Save")[0].value == "Speichern"


class TestBuiltins:

    def test_builtin_dictionaries_cover_every_language(self):
        languages = [dictionary.language for dictionary in builtin_dictionaries()]
        assert languages == list(BUILTIN_ENTRIES)

    def test_main_window_uids_exist_in_every_language(self):
        for dictionary in builtin_dictionaries():
            for uid in ("MainWindow", "MainWindow.Greeting", "Status.Ready"):
                assert uid in dictionary, (dictionary.language, uid)

    def test_language_name_fallback(self):
        assert language_name("en") == "English"
        assert language_name("xx") == "xx"


class TestLocalizerOptions:

    def test_defaults(self):
        options = LocalizerOptions()
        assert options.use_uid_when_not_found is False
        assert options.disable_default_localization_actions is False

    def test_options_are_frozen(self):
        options = LocalizerOptions(use_uid_when_not_found=True)
        with pytest.raises(ValidationError):
            options.use_uid_when_not_found = False
