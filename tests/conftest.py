"""
Pytest configuration and shared fixtures for localizer tests.
"""
import pytest

from core.language_dictionary import Item, LanguageDictionary
from core.localizer import Localizer
from core.property_setters import LocalizableProperty
from core.uids import Uids
from infra.models import LocalizerOptions


class FakeTextBlock:
    """Element exposing a class-level localizable property."""
    Text = LocalizableProperty("Text")
    ToolTip = LocalizableProperty("ToolTip")


class FakeHeaderedTextBlock(FakeTextBlock):
    pass


class FakeTitleBar:
    """Element with no localizable property; needs a fallback action."""

    def __init__(self):
        self.title = None


def make_dictionary(language, *entries):
    """Build a dictionary from ``(uid, property_name, value)`` triples."""
    dictionary = LanguageDictionary(language)
    for uid, property_name, value in entries:
        dictionary.add_item(Item(uid=uid, property_name=property_name, value=value))
    return dictionary


@pytest.fixture
def uids():
    return Uids()


@pytest.fixture
def localizer(uids):
    loc = Localizer(uids=uids)
    yield loc
    loc.close()


@pytest.fixture
def uid_localizer(uids):
    loc = Localizer(LocalizerOptions(use_uid_when_not_found=True), uids=uids)
    yield loc
    loc.close()


@pytest.fixture
def en_fr_localizer(localizer):
    localizer.add_language_dictionary(
        make_dictionary("en", ("Greeting", "Text", "Hello"), ("Farewell", "Text", "Bye"))
    )
    localizer.add_language_dictionary(
        make_dictionary("fr", ("Greeting", "Text", "Bonjour"), ("Farewell", "Text", "Au revoir"))
    )
    return localizer
