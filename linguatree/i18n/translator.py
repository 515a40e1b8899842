"""Translation service with fallback and missing-key registration.

A Translator holds a registry of catalogs keyed by locale code, a current
catalog and a fixed fallback catalog. Lookups try the current catalog, then
the fallback. When both miss, the key is recorded in the fallback catalog as
a pending translation and the bare key is returned.

Note that ``tr``/``trp`` are therefore not pure: a miss mutates the fallback
catalog. Access is single-threaded; callers that translate while swapping or
saving catalogs from several threads must provide their own locking.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Set, Union

from linguatree.i18n.errors import InvalidLanguageError, LanguageNotFoundError
from linguatree.i18n.interpolation import interpolate_named, interpolate_positional
from linguatree.i18n.loader import load_catalog, load_catalog_from_resources
from linguatree.i18n.models import PATH_SEPARATOR, Catalog, apply_inline_template
from linguatree.i18n.saver import save_catalog
from linguatree.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Translates context/key pairs against a current and a fallback catalog.

    Attributes:
        languages: Registered catalogs by locale code.
        fallback_language: Catalog consulted on misses and extended with
            pending entries. Never changes after construction.
        language: Catalog currently used for lookups.
    """

    def __init__(
        self,
        default_language: Optional[Catalog],
        fallback_language: Catalog,
    ):
        """Initialize Translator.

        The fallback is registered first. The default is registered too unless
        it is the very same object; a distinct catalog with the fallback's code
        is kept as current but not registered.

        Args:
            default_language: Catalog active after construction. None selects
                the fallback.
            fallback_language: Catalog used when a lookup misses.

        Raises:
            InvalidLanguageError: If fallback_language is None.
        """
        if fallback_language is None:
            raise InvalidLanguageError("Fallback language cannot be None")

        self.languages: Dict[str, Catalog] = {}
        self.fallback_language = fallback_language
        self.language = default_language if default_language is not None else fallback_language

        self.languages[fallback_language.code] = fallback_language
        if self.language is not fallback_language:
            self.add_language(self.language)

        logger.info(
            "initialized_translator",
            language=self.language.code,
            fallback_language=fallback_language.code,
        )

    def add_language(self, language: Optional[Catalog]) -> None:
        """Register a catalog. A code that is already registered is left as is.

        Raises:
            InvalidLanguageError: If language is None.
        """
        if language is None:
            raise InvalidLanguageError("Language cannot be None")

        if language.code in self.languages:
            logger.debug("language_already_registered", locale=language.code)
            return

        self.languages[language.code] = language
        logger.info("registered_language", locale=language.code)

    def load_language(self, path: Union[str, Path]) -> Catalog:
        """Load a catalog file and register it, replacing any catalog with its code.

        The fallback catalog itself is never replaced: a file whose locale is
        the fallback's code is discarded and the fallback is returned.

        Returns:
            The catalog registered under the loaded locale code.

        Raises:
            OSError: If the file cannot be read.
            StructuralError: If the document is malformed.
        """
        return self._register_loaded(load_catalog(path))

    def load_language_from_resources(self, package: str, resource: str) -> Catalog:
        """Load a bundled catalog resource and register it, as ``load_language`` does."""
        return self._register_loaded(load_catalog_from_resources(package, resource))

    def _register_loaded(self, language: Catalog) -> Catalog:
        if language.code == self.fallback_language.code:
            logger.warning("loaded_language_shadows_fallback", locale=language.code)
            return self.fallback_language

        self.languages[language.code] = language
        if self.language.code == language.code:
            self.language = language
        logger.info("loaded_language", locale=language.code, source=str(language.source))
        return language

    def set_language(self, code: str) -> None:
        """Make the registered catalog with this code current.

        Raises:
            LanguageNotFoundError: If no catalog is registered under code.
        """
        language = self.languages.get(code)
        if language is None:
            logger.warning("language_not_loaded", locale=code)
            raise LanguageNotFoundError(code)

        self.language = language
        logger.info("language_changed", locale=code)

    def has_language(self, code: str) -> bool:
        return code in self.languages

    def get_available_languages(self) -> Set[str]:
        return set(self.languages)

    def tr(
        self,
        context: str,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Translate key in a dotted context path, filling ``{name}`` placeholders.

        Side effect: when neither the current nor the fallback catalog has the
        key, it is registered as pending in the fallback catalog.

        Returns:
            The translated string, or the key itself if no translation exists.
        """
        template = self._resolve(context, key)
        if template is None:
            return key
        return interpolate_named(template, params)

    def trp(self, context: str, key: str, *args: Any) -> str:
        """Translate key in a dotted context path, filling ``{}`` placeholders.

        If no translation exists and the first argument is a string, it is
        used as an inline default template for the remaining arguments.
        The miss is registered in the fallback catalog either way.

        Example:
            >>> translator.trp("Dialogs", "greeting", "Hi {}", "Bob")
            'Hi Bob'
        """
        template = self._resolve(context, key)
        if template is None:
            return apply_inline_template(key, args)
        return interpolate_positional(template, args)

    def _resolve(self, context: str, key: str) -> Optional[str]:
        """Find the stored template: current catalog, then fallback, then register the miss."""
        template = self.language.lookup(context, key)
        if template is not None:
            return template

        template = self.fallback_language.lookup(context, key)
        if template is not None:
            logger.debug(
                "used_fallback_translation",
                context=context,
                key=key,
                requested_locale=self.language.code,
                fallback_locale=self.fallback_language.code,
            )
            return template

        self.register_missing(self.fallback_language, context, key)
        return None

    def register_missing(self, language: Catalog, context: str, key: str) -> bool:
        """Record key as pending under the context path in language.

        A dotted key registers under the matching sub-contexts. Missing
        contexts along the path are created empty; existing contexts
        and existing entries (pending or translated) are left untouched.

        Returns:
            True if a new pending entry was added.
        """
        *sub_contexts, flat_key = key.split(PATH_SEPARATOR)
        node = language.ensure_context(PATH_SEPARATOR.join([context, *sub_contexts]))
        added = node.mark_pending(flat_key)
        if added:
            logger.info(
                "translation_missing_registered",
                locale=language.code,
                context=context,
                key=key,
            )
        return added

    def save_fallback(self, path: Union[str, Path, None] = None) -> Path:
        """Persist the fallback catalog, including newly registered pending keys."""
        return save_catalog(self.fallback_language, path)
