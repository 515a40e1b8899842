"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators from a directory
of catalog documents with configuration-driven defaults.
"""

from pathlib import Path
from typing import Dict, Optional

from linguatree.configuration import settings
from linguatree.i18n.errors import LanguageNotFoundError
from linguatree.i18n.loader import is_catalog_file, load_catalog
from linguatree.i18n.models import Catalog
from linguatree.i18n.translator import Translator
from linguatree.logging import get_module_logger

logger = get_module_logger()


def load_directory(locales_dir: Path) -> Dict[str, Catalog]:
    """Load every catalog document in a directory, keyed by locale code.

    Files are read in name order; when two files declare the same locale
    the first one wins.

    Raises:
        ValueError: If the directory does not exist.
        StructuralError: If a document is malformed.
    """
    locales_dir = Path(locales_dir)
    if not locales_dir.is_dir():
        raise ValueError(f"Translations directory not found: {locales_dir}")

    catalogs: Dict[str, Catalog] = {}
    for path in sorted(p for p in locales_dir.iterdir() if is_catalog_file(p)):
        catalog = load_catalog(path)
        if catalog.code in catalogs:
            logger.warning(
                "duplicate_locale_file_ignored",
                locale=catalog.code,
                path=str(path),
                kept=str(catalogs[catalog.code].source),
            )
            continue
        catalogs[catalog.code] = catalog

    return catalogs


def create_translator(
    locales_dir: Optional[Path] = None,
    fallback_locale: Optional[str] = None,
    default_locale: Optional[str] = None,
) -> Translator:
    """Create and configure a Translator from a directory of catalogs.

    Args:
        locales_dir: Directory with *.json / *.yml catalog documents
            (default: settings.i18n.locales_dir)
        fallback_locale: Code of the catalog receiving missing keys
            (default: settings.i18n.fallback_locale)
        default_locale: Code of the catalog active after creation
            (default: settings.i18n.default_locale, else the fallback)

    Returns:
        Translator: Configured translator with every catalog registered

    Raises:
        ValueError: If locales_dir does not exist
        LanguageNotFoundError: If the fallback or default locale has no catalog

    Usage:
        translator = create_translator()
        translator = create_translator(Path("/srv/app/locales"), fallback_locale="en-US")
    """
    locales_dir = Path(locales_dir or settings.i18n.locales_dir)
    fallback_locale = fallback_locale or settings.i18n.fallback_locale
    default_locale = default_locale or settings.i18n.default_locale or fallback_locale

    catalogs = load_directory(locales_dir)
    fallback = catalogs.get(fallback_locale)
    if fallback is None:
        raise LanguageNotFoundError(fallback_locale)

    translator = Translator(fallback, fallback)
    for code, catalog in catalogs.items():
        if code != fallback_locale:
            translator.add_language(catalog)
    translator.set_language(default_locale)

    logger.info(
        "translator_created",
        translations_dir=str(locales_dir),
        locale_count=len(translator.languages),
        language=default_locale,
        fallback_language=fallback_locale,
    )
    return translator
