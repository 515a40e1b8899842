"""Feature-level fixtures for i18n system tests."""

import json

import pytest
import yaml

from linguatree.i18n import Translator, load_catalog
from tests.factories.i18n import make_catalog_document


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create a temporary directory with sample catalog documents.

    Returns a directory structure like:
    - fallback-en-US.json
    - de-DE.json
    - de-AT.yml
    """
    locales = tmp_path / "locales"
    locales.mkdir()

    (locales / "fallback-en-US.json").write_text(
        json.dumps(make_catalog_document("en-US")), encoding="utf-8"
    )

    de_de = make_catalog_document(
        "de-DE",
        {
            "Menu": {
                "File": "Datei",
                "Edit": "Bearbeiten",
                "View": "Ansicht",
                "Help": "Hilfe",
            },
            "Dialogs": {
                "welcome": "Hallo {name}, du hast {count} Nachrichten",
            },
        },
    )
    (locales / "de-DE.json").write_text(json.dumps(de_de), encoding="utf-8")

    de_at = make_catalog_document(
        "de-AT",
        {
            "Menu": {
                "File": "Datei",
                "Edit": "Beorbait'n",
                "View": "Ousicht",
                "Help": "Hüfe",
            }
        },
    )
    with open(locales / "de-AT.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(de_at, f, allow_unicode=True)

    return locales


@pytest.fixture
def fallback_path(temp_locales_dir):
    return temp_locales_dir / "fallback-en-US.json"


@pytest.fixture
def translator(temp_locales_dir, fallback_path):
    """Translator with en-US as default and fallback, plus de-DE and de-AT loaded."""
    fallback = load_catalog(fallback_path)
    translator = Translator(fallback, fallback)
    translator.load_language(temp_locales_dir / "de-DE.json")
    translator.load_language(temp_locales_dir / "de-AT.yml")
    return translator
