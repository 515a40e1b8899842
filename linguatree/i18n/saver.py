"""Catalog persistence.

Saving is a two-step, non-atomic sequence: any existing file at the target
is renamed to a sibling backup, then the new document is written. If the
write fails after the rename, the target is left missing and only the backup
holds the previous content. There is no rollback; callers must treat a
failed save that way.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from linguatree.configuration import settings
from linguatree.i18n.errors import BackupError, StructuralError
from linguatree.i18n.loader import LOCALE_FIELD
from linguatree.i18n.models import Catalog, ContextNode
from linguatree.logging import get_module_logger

logger = get_module_logger()

JSON_INDENT = 4


def serialize_context(context: ContextNode) -> Dict[str, Any]:
    """Recursively convert a context to plain data; pending entries become None.

    Raises:
        StructuralError: If a name is both a translation and a sub-context of
            the same context. A document object cannot hold both.
    """
    for key in context.translations:
        if key in context.children:
            logger.error("context_key_collision", context=context.key, key=key)
            raise StructuralError(
                f"Key '{key}' in context '{context.key}' is both a translation "
                "and a sub-context",
                key=key,
                context=context.key,
            )

    data: Dict[str, Any] = {
        key: entry.to_raw() for key, entry in context.translations.items()
    }
    for key, child in context.children.items():
        data[key] = serialize_context(child)
    return data


def serialize_catalog(catalog: Catalog) -> Dict[str, Any]:
    """Convert a catalog to the document structure, ``locale`` first."""
    document: Dict[str, Any] = {LOCALE_FIELD: catalog.code}
    for key, context in catalog.contexts.items():
        document[key] = serialize_context(context)
    return document


def dumps_json(catalog: Catalog) -> str:
    return json.dumps(serialize_catalog(catalog), indent=JSON_INDENT, ensure_ascii=False)


def dumps_yaml(catalog: Catalog) -> str:
    return yaml.safe_dump(
        serialize_catalog(catalog),
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )


def backup_path(path: Path, suffix: Optional[str] = None) -> Path:
    """Sibling backup location: the original name with the suffix appended."""
    suffix = suffix or settings.i18n.backup_suffix
    return path.with_name(path.name + suffix)


def create_backup(path: Union[str, Path], suffix: Optional[str] = None) -> Optional[Path]:
    """Move an existing file to its backup location.

    Any previous backup at that location is deleted first.

    Returns:
        The backup path, or None if there was nothing to back up.

    Raises:
        BackupError: If the existing file cannot be renamed.
    """
    path = Path(path)
    if not path.exists():
        return None

    target = backup_path(path, suffix)
    try:
        target.unlink(missing_ok=True)
        path.rename(target)
    except OSError as e:
        logger.error("catalog_backup_failed", path=str(path), backup=str(target), error=str(e))
        raise BackupError(f"Could not create backup for file: {path.resolve()}") from e

    logger.debug("catalog_backup_created", path=str(path), backup=str(target))
    return target


def save_catalog(
    catalog: Catalog,
    path: Union[str, Path, None] = None,
    backup_suffix: Optional[str] = None,
) -> Path:
    """Back up the current file (if any) and write the catalog.

    The format follows the file suffix: YAML for ``.yml``/``.yaml``,
    pretty-printed JSON otherwise. Pending translations are written as
    explicit nulls.

    Args:
        catalog: Catalog to save.
        path: Target file. Defaults to the file the catalog was loaded from.
        backup_suffix: Override for the configured backup suffix.

    Returns:
        The path written.

    Raises:
        ValueError: If no path is given and the catalog has no source.
        StructuralError: If the tree cannot be written as a document. Raised
            before the existing file is touched.
        BackupError: If the existing file cannot be moved aside.
        OSError: If writing fails; the previous content is then only in the backup.
    """
    if path is None:
        if catalog.source is None:
            raise ValueError(f"No target path for catalog {catalog.code}")
        path = catalog.source
    path = Path(path)

    if path.suffix.lower() in (".yml", ".yaml"):
        content = dumps_yaml(catalog)
    else:
        content = dumps_json(catalog)

    backup = create_backup(path, backup_suffix)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(
            "catalog_write_failed",
            locale=catalog.code,
            path=str(path),
            backup=str(backup) if backup else None,
            error=str(e),
        )
        raise

    logger.info(
        "saved_catalog",
        locale=catalog.code,
        path=str(path),
        pending_count=len(catalog.pending_keys()),
    )
    return path
