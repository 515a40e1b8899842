"""linguatree - context-tree translation catalogs with fallback registration."""

from linguatree.i18n import (
    Catalog,
    ContextNode,
    LanguageNotFoundError,
    StructuralError,
    Translation,
    TranslationService,
    Translator,
    create_translator,
    load_catalog,
    save_catalog,
)

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "ContextNode",
    "Translation",
    "Translator",
    "TranslationService",
    "create_translator",
    "load_catalog",
    "save_catalog",
    "StructuralError",
    "LanguageNotFoundError",
]
