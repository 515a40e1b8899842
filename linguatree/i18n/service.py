"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from linguatree.i18n.factory import create_translator
from linguatree.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    A thin facade over a Translator so callers can depend on a service
    object and tests can substitute a mock.

    Usage:
        service = TranslationService()
        service.set_language("de-AT")
        title = service.tr("Menu.File", "Open")
        status = service.trp("Status", "items", 3)
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def tr(self, context: str, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate with named parameters; see Translator.tr."""
        return self._translator.tr(context, key, params)

    def trp(self, context: str, key: str, *args: Any) -> str:
        """Translate with positional parameters; see Translator.trp."""
        return self._translator.trp(context, key, *args)

    def set_language(self, code: str) -> None:
        """Switch the current language.

        Raises:
            LanguageNotFoundError: If code is not registered
        """
        self._translator.set_language(code)

    @property
    def current_language(self) -> str:
        return self._translator.language.code

    def get_available_languages(self) -> List[str]:
        return sorted(self._translator.get_available_languages())

    def pending_translations(self) -> List[Tuple[str, str]]:
        """List (context_path, key) pairs awaiting translation in the fallback catalog."""
        return self._translator.fallback_language.pending_keys()

    def save_fallback(self, path: Union[str, Path, None] = None) -> Path:
        """Persist the fallback catalog with its pending entries."""
        return self._translator.save_fallback(path)

    def coverage(self) -> Dict[str, int]:
        """Count pending entries per registered language."""
        return {
            code: len(language.pending_keys())
            for code, language in sorted(self._translator.languages.items())
        }

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
