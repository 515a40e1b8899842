"""Catalog loading interface and implementations.

A catalog document is an object with a string ``locale`` field; every other
top-level field is a context object. Inside a context, an object value is a
sub-context, a string is a translation and ``null`` is a pending translation.
The whole document is validated before any tree is built.
"""

import json
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from linguatree.i18n.errors import StructuralError
from linguatree.i18n.models import Catalog, ContextNode, Translation
from linguatree.logging import get_module_logger

logger = get_module_logger()

LOCALE_FIELD = "locale"


def verify_structure(document: Any) -> None:
    """Verify the shape of a parsed catalog document.

    Args:
        document: Parsed document (JSON or YAML).

    Raises:
        StructuralError: If the root is not an object, ``locale`` is missing or
            not a string, a top-level context is not an object, or a
            translation is neither a string nor null.
    """
    if not isinstance(document, dict):
        raise StructuralError("Root element is not an object")

    locale = document.get(LOCALE_FIELD)
    if not isinstance(locale, str) or not locale:
        raise StructuralError(
            f"'{LOCALE_FIELD}' key is missing or not a string", key=LOCALE_FIELD
        )

    for key, value in document.items():
        if key == LOCALE_FIELD:
            continue
        if not isinstance(key, str):
            raise StructuralError(f"Context key {key!r} is not a string", key=str(key))
        if not isinstance(value, dict):
            raise StructuralError(f"Context '{key}' is not an object", key=key)
        verify_context(key, value)


def verify_context(context_key: str, context: Dict[str, Any]) -> None:
    """Recursively verify a context object's translations and sub-contexts."""
    for key, value in context.items():
        if not isinstance(key, str):
            raise StructuralError(
                f"Key {key!r} in context '{context_key}' is not a string",
                key=str(key),
                context=context_key,
            )
        if isinstance(value, dict):
            verify_context(key, value)
        elif value is not None and not isinstance(value, str):
            raise StructuralError(
                f"Translation for key '{key}' in context '{context_key}' "
                "is not a string or null",
                key=key,
                context=context_key,
            )


def build_context(context_key: str, data: Dict[str, Any]) -> ContextNode:
    """Create a ContextNode mirroring a verified context object."""
    node = ContextNode(context_key)
    for key, value in data.items():
        if isinstance(value, dict):
            node.children[key] = build_context(key, value)
        else:
            node.translations[key] = Translation.from_raw(value)
    return node


def parse_catalog(document: Any, source: Optional[Path] = None) -> Catalog:
    """Validate a parsed document and build its Catalog.

    Raises:
        StructuralError: If the document shape is invalid.
    """
    verify_structure(document)

    catalog = Catalog(code=document[LOCALE_FIELD], source=source)
    for key, value in document.items():
        if key == LOCALE_FIELD:
            continue
        catalog.add_context(build_context(key, value))
    return catalog


def decode_document(data: bytes, origin: str) -> str:
    """Decode raw document bytes as UTF-8.

    Raises:
        StructuralError: If the bytes are not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error("decode_error", origin=origin, error=str(e))
        raise StructuralError(f"Failed to decode {origin}: {e}") from e


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations define how raw document text is parsed; validation and
    tree construction are shared.
    """

    suffixes: tuple = ()

    @abstractmethod
    def parse(self, text: str, origin: str) -> Any:
        """Parse document text into plain Python objects.

        Raises:
            StructuralError: If the text is not a well-formed document.
        """
        pass

    def loads(self, text: str, origin: str = "<string>", source: Optional[Path] = None) -> Catalog:
        catalog = parse_catalog(self.parse(text, origin), source=source)
        logger.info(
            "loaded_catalog",
            locale=catalog.code,
            origin=origin,
            context_count=len(catalog.contexts),
        )
        return catalog

    def load(self, path: Union[str, Path]) -> Catalog:
        """Load a catalog from a file.

        Raises:
            OSError: If the file cannot be read.
            StructuralError: If the document is malformed.
        """
        path = Path(path)
        text = decode_document(path.read_bytes(), str(path))
        return self.loads(text, origin=str(path), source=path)


class JSONCatalogLoader(CatalogLoader):
    """Loader for JSON catalog documents."""

    suffixes = (".json",)

    def parse(self, text: str, origin: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", origin=origin, error=str(e))
            raise StructuralError(f"Failed to parse {origin}: {e}") from e


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML catalog documents (same tree shape as JSON)."""

    suffixes = (".yml", ".yaml")

    def parse(self, text: str, origin: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", origin=origin, error=str(e))
            raise StructuralError(f"Failed to parse {origin}: {e}") from e


LOADERS = (JSONCatalogLoader(), YAMLCatalogLoader())


def loader_for(path: Union[str, Path]) -> CatalogLoader:
    """Pick the loader matching a file suffix.

    Raises:
        ValueError: If the suffix is not a supported catalog format.
    """
    suffix = Path(path).suffix.lower()
    for loader in LOADERS:
        if suffix in loader.suffixes:
            return loader
    raise ValueError(f"Unsupported catalog format: {path}")


def is_catalog_file(path: Path) -> bool:
    return path.is_file() and any(
        path.suffix.lower() in loader.suffixes for loader in LOADERS
    )


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load a catalog file, choosing the format from its suffix."""
    return loader_for(path).load(path)


def load_catalog_from_resources(package: str, resource: str) -> Catalog:
    """Load a catalog bundled as package data.

    Args:
        package: Importable package holding the resource (e.g. "myapp.locales").
        resource: Resource name inside the package (e.g. "en-US.json").

    Raises:
        FileNotFoundError: If the resource does not exist.
        StructuralError: If the document is malformed.
    """
    ref = resources.files(package).joinpath(resource)
    if not ref.is_file():
        raise FileNotFoundError(f"Resource not found: {package}/{resource}")
    origin = f"{package}/{resource}"
    text = decode_document(ref.read_bytes(), origin)
    return loader_for(resource).loads(text, origin=origin)
