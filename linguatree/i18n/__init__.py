"""i18n system - hierarchical translation catalogs with fallback.

Main components:
- models: Translation, ContextNode, Catalog
- interpolation: named ({name}) and positional ({}) placeholder filling
- loader: JSONCatalogLoader and YAMLCatalogLoader with structural validation
- saver: catalog serialization with backup-then-write persistence
- translator: Translator with fallback and missing-key registration
- factory / service: directory-based construction and a DI facade
"""

from linguatree.i18n.errors import (
    BackupError,
    I18nError,
    InvalidLanguageError,
    LanguageNotFoundError,
    StructuralError,
)
from linguatree.i18n.interpolation import interpolate_named, interpolate_positional
from linguatree.i18n.loader import (
    CatalogLoader,
    JSONCatalogLoader,
    YAMLCatalogLoader,
    load_catalog,
    load_catalog_from_resources,
    parse_catalog,
    verify_structure,
)
from linguatree.i18n.models import PENDING, Catalog, ContextNode, Translation
from linguatree.i18n.saver import create_backup, save_catalog, serialize_catalog
from linguatree.i18n.translator import Translator
from linguatree.i18n.factory import create_translator
from linguatree.i18n.service import TranslationService

__all__ = [
    "Translation",
    "PENDING",
    "ContextNode",
    "Catalog",
    "interpolate_named",
    "interpolate_positional",
    "CatalogLoader",
    "JSONCatalogLoader",
    "YAMLCatalogLoader",
    "load_catalog",
    "load_catalog_from_resources",
    "parse_catalog",
    "verify_structure",
    "create_backup",
    "save_catalog",
    "serialize_catalog",
    "Translator",
    "create_translator",
    "TranslationService",
    "I18nError",
    "StructuralError",
    "LanguageNotFoundError",
    "InvalidLanguageError",
    "BackupError",
]
