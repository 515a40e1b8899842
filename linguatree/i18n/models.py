"""Translation models for the i18n system.

Defines the catalog tree: a Catalog owns a forest of ContextNodes, each node
owns its flat translations and its child contexts. Resolution is always
top-down by dotted path, so nodes hold no back-references.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from linguatree.i18n.errors import InvalidLanguageError
from linguatree.i18n.interpolation import interpolate_named, interpolate_positional

PATH_SEPARATOR = "."


@dataclass(frozen=True)
class Translation:
    """A single translation entry value.

    Either translated (``text`` holds the template) or pending, meaning the
    key is known but awaits a human translation. Serialized as ``null``.

    Attributes:
        text: Template string, or None while pending.
    """

    text: Optional[str] = None

    @classmethod
    def translated(cls, text: str) -> "Translation":
        return cls(text=text)

    @classmethod
    def pending(cls) -> "Translation":
        return PENDING

    @classmethod
    def from_raw(cls, value: Optional[str]) -> "Translation":
        """Build from a document value (string or None)."""
        return PENDING if value is None else cls(text=value)

    def to_raw(self) -> Optional[str]:
        return self.text

    @property
    def is_pending(self) -> bool:
        return self.text is None


PENDING = Translation()


@dataclass
class ContextNode:
    """A named group of translations with nested sub-contexts.

    Translation keys and child keys live in separate namespaces; the same
    string may appear in both.

    Attributes:
        key: Name of this context, unique among its siblings.
        translations: Flat mapping of translation key to Translation.
        children: Sub-contexts keyed by their own key.
    """

    key: str
    translations: Dict[str, Translation] = field(default_factory=dict)
    children: Dict[str, "ContextNode"] = field(default_factory=dict)

    def contains_translation(self, key: str) -> bool:
        return key in self.translations

    def contains_context(self, key: str) -> bool:
        return key in self.children

    def resolve(self, path: str) -> Optional["ContextNode"]:
        """Find the node owning the last segment of a dotted path.

        A single segment names a translation of this node, so the node itself
        is returned. Otherwise the first segment selects a child and the rest
        of the path is resolved there. Empty segments are looked up literally.

        Args:
            path: Dotted path relative to this node (e.g. "File.Recent.Clear").

        Returns:
            The owning ContextNode, or None if a sub-context is missing.
        """
        head, sep, rest = path.partition(PATH_SEPARATOR)
        if not sep:
            return self

        child = self.children.get(head)
        if child is None:
            return None
        return child.resolve(rest)

    def lookup(self, key: str) -> Optional[str]:
        """Return the stored template for a (possibly dotted) key.

        Returns:
            The template string, or None when the key is absent or pending.
        """
        node = self.resolve(key)
        if node is None:
            return None

        entry = node.translations.get(key.rpartition(PATH_SEPARATOR)[2])
        if entry is None or entry.is_pending:
            return None
        return entry.text

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate a key, filling ``{name}`` placeholders from params.

        Returns the key unchanged when it is missing or still pending.
        """
        template = self.lookup(key)
        if template is None:
            return key
        return interpolate_named(template, params)

    def translate_positional(self, key: str, *args: Any) -> str:
        """Translate a key, filling ``{}`` placeholders from args in order.

        When nothing is stored for the key and the first argument is a
        string, that string is used as the template and the remaining
        arguments fill it.
        """
        template = self.lookup(key)
        if template is not None:
            return interpolate_positional(template, args)
        return apply_inline_template(key, args)

    def get_or_create_child(self, key: str) -> "ContextNode":
        """Return the child named key, creating an empty one if absent."""
        child = self.children.get(key)
        if child is None:
            child = ContextNode(key)
            self.children[key] = child
        return child

    def mark_pending(self, key: str) -> bool:
        """Record key as pending unless an entry already exists.

        Returns:
            True if a new pending entry was inserted.
        """
        if key in self.translations:
            return False
        self.translations[key] = PENDING
        return True

    def contains_key_anywhere(self, key: str) -> bool:
        """Depth-first search for a translation entry named key.

        Pending entries count as present.
        """
        if key in self.translations:
            return True
        return any(child.contains_key_anywhere(key) for child in self.children.values())

    def iter_paths(self, prefix: str = "") -> Iterator[str]:
        """Yield the dotted path of this node and of every descendant."""
        path = f"{prefix}{PATH_SEPARATOR}{self.key}" if prefix else self.key
        yield path
        for child in self.children.values():
            yield from child.iter_paths(path)

    def pending_keys(self, prefix: str = "") -> Iterator[Tuple[str, str]]:
        """Yield (context_path, key) for every pending entry in this subtree."""
        path = f"{prefix}{PATH_SEPARATOR}{self.key}" if prefix else self.key
        for key, entry in self.translations.items():
            if entry.is_pending:
                yield path, key
        for child in self.children.values():
            yield from child.pending_keys(path)


def apply_inline_template(key: str, args: Tuple[Any, ...]) -> str:
    """Use a leading string argument as an ad-hoc template, else return key."""
    if args and isinstance(args[0], str):
        return interpolate_positional(args[0], args[1:])
    return key


@dataclass
class Catalog:
    """All translations for a single locale.

    Attributes:
        code: Locale identifier (e.g. "en-US"); the registry key in a Translator.
        contexts: Top-level ContextNodes keyed by their key.
        source: File the catalog was loaded from, if any.
    """

    code: str
    contexts: Dict[str, ContextNode] = field(default_factory=dict)
    source: Optional[Path] = None

    def __post_init__(self):
        if not self.code:
            raise InvalidLanguageError("Catalog locale code must be a non-empty string")

    def add_context(self, context: ContextNode) -> None:
        """Insert a top-level context, replacing any existing one with the same key."""
        self.contexts[context.key] = context

    def get_context(self, path: str) -> Optional[ContextNode]:
        """Walk a dotted context path from the top-level contexts.

        The first segment picks a top-level context; each further segment
        picks a sub-context.

        Returns:
            The ContextNode at path, or None if any segment is missing.
        """
        head, *rest = path.split(PATH_SEPARATOR)
        node = self.contexts.get(head)
        for part in rest:
            if node is None:
                return None
            node = node.children.get(part)
        return node

    def ensure_context(self, path: str) -> ContextNode:
        """Walk a dotted context path, creating empty nodes where missing.

        Existing nodes are never replaced.
        """
        head, *rest = path.split(PATH_SEPARATOR)
        node = self.contexts.get(head)
        if node is None:
            node = ContextNode(head)
            self.add_context(node)
        for part in rest:
            node = node.get_or_create_child(part)
        return node

    def lookup(self, path: str, key: str) -> Optional[str]:
        context = self.get_context(path)
        return None if context is None else context.lookup(key)

    def translate(
        self, path: str, key: str, params: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Translate key within the context at path using named parameters.

        Returns the key itself if the context or the key is not found.
        """
        context = self.get_context(path)
        return key if context is None else context.translate(key, params)

    def translate_positional(self, path: str, key: str, *args: Any) -> str:
        """Translate key within the context at path using positional arguments."""
        context = self.get_context(path)
        if context is None:
            return apply_inline_template(key, args)
        return context.translate_positional(key, *args)

    def contains_key_anywhere(self, key: str) -> bool:
        """Check every context for a translation entry named key, pending or not."""
        return any(context.contains_key_anywhere(key) for context in self.contexts.values())

    def context_paths(self) -> Set[str]:
        """Return the dotted path of every context in the catalog."""
        return {path for context in self.contexts.values() for path in context.iter_paths()}

    def pending_keys(self) -> List[Tuple[str, str]]:
        """List (context_path, key) pairs still awaiting translation."""
        return [entry for context in self.contexts.values() for entry in context.pending_keys()]
