"""Tests for linguatree.i18n.translator module."""

import json

import pytest

from linguatree.i18n import (
    Catalog,
    InvalidLanguageError,
    LanguageNotFoundError,
    Translator,
    load_catalog,
)
from linguatree.i18n.models import PENDING
from tests.factories.i18n import make_catalog


class TestTranslatorConstruction:
    """Tests for Translator registry setup."""

    def test_same_instance_registered_once(self):
        fallback = make_catalog("en-US")
        translator = Translator(fallback, fallback)
        assert translator.get_available_languages() == {"en-US"}
        assert translator.language is fallback
        assert translator.fallback_language is fallback

    def test_distinct_default_registered(self):
        fallback = make_catalog("en-US")
        default = make_catalog("de-DE")
        translator = Translator(default, fallback)
        assert translator.get_available_languages() == {"en-US", "de-DE"}
        assert translator.language is default

    def test_same_code_distinct_instance_not_registered(self):
        """Identity, not code, decides dedup; the registry keeps the fallback."""
        fallback = make_catalog("en-US")
        default = make_catalog("en-US")
        translator = Translator(default, fallback)
        assert translator.language is default
        assert translator.languages["en-US"] is fallback

    def test_none_default_uses_fallback(self):
        fallback = make_catalog("en-US")
        assert Translator(None, fallback).language is fallback

    def test_none_fallback_rejected(self):
        with pytest.raises(InvalidLanguageError):
            Translator(make_catalog("en-US"), None)


class TestTranslatorRegistry:
    """Tests for add_language / set_language / load_language."""

    def test_available_languages(self, translator):
        assert translator.get_available_languages() == {"en-US", "de-DE", "de-AT"}

    def test_add_language_none(self, translator):
        with pytest.raises(InvalidLanguageError):
            translator.add_language(None)
        assert len(translator.languages) == 3

    def test_add_language_duplicate_is_noop(self, translator):
        original = translator.languages["de-DE"]
        translator.add_language(make_catalog("de-DE"))
        assert translator.languages["de-DE"] is original

    def test_set_language(self, translator):
        translator.set_language("de-AT")
        assert translator.language.code == "de-AT"

    def test_set_language_unknown(self, translator):
        """Unknown locale raises and leaves the current language unchanged."""
        before = translator.language
        with pytest.raises(LanguageNotFoundError) as exc_info:
            translator.set_language("xx-XX")
        assert exc_info.value.code == "xx-XX"
        assert translator.language is before

    def test_language_not_found_is_key_error(self, translator):
        with pytest.raises(KeyError):
            translator.set_language("xx-XX")

    def test_has_language(self, translator):
        assert translator.has_language("de-DE")
        assert not translator.has_language("fr-FR")

    def test_load_language_replaces_same_code(self, translator, tmp_path):
        path = tmp_path / "de-DE.json"
        path.write_text(
            json.dumps({"locale": "de-DE", "Menu": {"File": "Akte"}}), encoding="utf-8"
        )
        translator.set_language("de-DE")
        translator.load_language(path)
        assert translator.tr("Menu", "File") == "Akte"

    def test_load_language_never_replaces_fallback(self, translator, tmp_path):
        path = tmp_path / "other-en-US.json"
        path.write_text(json.dumps({"locale": "en-US", "Menu": {}}), encoding="utf-8")
        fallback = translator.fallback_language
        translator.load_language(path)
        assert translator.languages["en-US"] is fallback

    def test_load_language_with_fallback_code_returns_fallback(self, translator, tmp_path):
        """The discarded catalog is not handed back to the caller."""
        path = tmp_path / "other-en-US.json"
        path.write_text(json.dumps({"locale": "en-US", "Menu": {}}), encoding="utf-8")
        loaded = translator.load_language(path)
        assert loaded is translator.fallback_language
        assert loaded.source != path


class TestTranslatorLookup:
    """Tests for tr() with named parameters."""

    def test_translate_existing_key(self, translator):
        assert translator.tr("Menu", "File") == "File"

    def test_translate_german(self, translator):
        translator.set_language("de-DE")
        assert translator.tr("Menu", "File") == "Datei"

    def test_translate_austrian(self, translator):
        translator.set_language("de-AT")
        assert translator.tr("Menu", "Edit") == "Beorbait'n"

    def test_named_parameters(self, translator):
        translator.set_language("de-DE")
        result = translator.tr("Dialogs", "welcome", {"name": "Ada", "count": 3})
        assert result == "Hallo Ada, du hast 3 Nachrichten"

    def test_falls_back_when_current_misses(self, translator):
        translator.set_language("de-AT")
        result = translator.tr("Dialogs", "welcome", {"name": "Ada", "count": 3})
        assert result == "Hello Ada, you have 3 messages"

    def test_nested_context(self, translator):
        assert translator.tr("Dialogs.Confirm", "title") == "Are you sure?"

    def test_translation_equal_to_key_is_found(self, translator):
        """A stored value equal to its key is a hit, not a miss."""
        translator.tr("Menu", "Help")
        assert translator.fallback_language.get_context("Menu").translations["Help"].text == "Help"

    def test_pending_in_fallback_returns_key(self, translator):
        assert translator.tr("Dialogs.Confirm", "pending") == "pending"
        confirm = translator.fallback_language.get_context("Dialogs.Confirm")
        assert confirm.translations["pending"] is PENDING


class TestMissingRegistration:
    """Tests for auto-registration of missing keys in the fallback catalog."""

    def test_missing_key_returns_key_and_adds_pending(self, translator):
        assert translator.tr("Menu", "Save") == "Save"
        menu = translator.fallback_language.get_context("Menu")
        assert "Save" in menu.translations
        assert menu.translations["Save"] is PENDING

    def test_missing_context_chain_created(self, translator):
        assert translator.tr("A.B.C", "X") == "X"
        node = translator.fallback_language.get_context("A.B.C")
        assert node is not None
        assert node.translations == {"X": PENDING}

    def test_registration_is_idempotent(self, translator):
        translator.tr("Menu", "Save")
        menu_before = translator.fallback_language.get_context("Menu")
        translator.tr("Menu", "Save")
        menu_after = translator.fallback_language.get_context("Menu")
        assert menu_before is menu_after
        assert list(menu_after.translations).count("Save") == 1
        assert translator.fallback_language.pending_keys() == [
            ("Menu", "Save"),
            ("Dialogs.Confirm", "pending"),
        ]

    def test_registration_does_not_replace_existing_nodes(self, translator):
        dialogs = translator.fallback_language.get_context("Dialogs")
        translator.tr("Dialogs.New", "x")
        assert translator.fallback_language.get_context("Dialogs") is dialogs
        assert dialogs.children["New"].translations == {"x": PENDING}
        assert "Confirm" in dialogs.children

    def test_current_language_not_mutated(self, translator):
        translator.set_language("de-DE")
        translator.tr("Menu", "Save")
        assert not translator.language.contains_key_anywhere("Save")
        assert translator.fallback_language.contains_key_anywhere("Save")

    def test_found_in_current_does_not_register(self, translator):
        """A hit in the current language leaves the fallback untouched."""
        translator.set_language("de-DE")
        translator.tr("Menu", "File")
        assert translator.fallback_language.pending_keys() == [("Dialogs.Confirm", "pending")]

    def test_wrong_leaf_context(self):
        """Resolution through A.B.C works; a wrong leaf context misses and registers."""
        fallback = make_catalog("en-US", {"A": {"B": {"C": {"X": "val"}}}})
        translator = Translator(fallback, fallback)
        assert translator.tr("A.B.C", "X") == "val"
        assert translator.tr("A.B.Z", "X") == "X"
        assert fallback.get_context("A.B.Z").translations["X"] is PENDING
        assert fallback.get_context("A.B.C").translations["X"].text == "val"

    def test_dotted_key_registers_under_sub_context(self, translator):
        assert translator.tr("Menu", "Recent.Clear") == "Recent.Clear"
        recent = translator.fallback_language.get_context("Menu.Recent")
        assert recent.translations == {"Clear": PENDING}
        translator.tr("Menu", "Recent.Clear")
        assert translator.fallback_language.pending_keys().count(("Menu.Recent", "Clear")) == 1

    def test_register_missing_direct(self):
        catalog = Catalog(code="en-US")
        translator = Translator(catalog, catalog)
        assert translator.register_missing(catalog, "Menu", "Save") is True
        assert translator.register_missing(catalog, "Menu", "Save") is False

    def test_missing_keys_saved_as_null(self, translator, fallback_path):
        translator.tr("Menu", "Save")
        translator.save_fallback()
        translator.save_fallback()

        assert fallback_path.with_name(fallback_path.name + ".bak").exists()
        assert '"Save": null' in fallback_path.read_text(encoding="utf-8")
        reloaded = load_catalog(fallback_path)
        assert reloaded.get_context("Menu").translations["Save"] is PENDING


class TestPositionalLookup:
    """Tests for trp() with positional parameters."""

    def test_positional_parameters(self, translator):
        assert translator.trp("Dialogs", "found", 2, 3) == "Found 2 apples and 3 pears"

    def test_positional_too_few(self, translator):
        assert translator.trp("Dialogs", "found", 2) == "Found 2 apples and {} pears"

    def test_inline_template(self, translator):
        assert translator.trp("Dialogs", "greeting", "Hi {}", "Bob") == "Hi Bob"

    def test_inline_template_still_registers_miss(self, translator):
        translator.trp("Dialogs", "greeting", "Hi {}", "Bob")
        dialogs = translator.fallback_language.get_context("Dialogs")
        assert dialogs.translations["greeting"] is PENDING

    def test_fallback_translation_beats_inline_template(self, translator):
        """The inline template is used only when no catalog has the key."""
        translator.set_language("de-AT")
        result = translator.trp("Dialogs", "found", "{} items", 1, 2)
        assert result == "Found {} items apples and 1 pears"

    def test_missing_without_template_returns_key(self, translator):
        assert translator.trp("Dialogs", "count", 5) == "count"
