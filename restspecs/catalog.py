"""Catalog assembly across source roots and manifest writing."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable

from .logging import get_logger
from .models import SpecCatalog
from .namespace import in_namespace, namespace_to_path, validate_namespace
from .scanner import SpecScanner

MANIFEST_FILENAME = "restspecs.rs"

logger = get_logger("catalog")


def _default_file_mode() -> int:
    # mkstemp creates 0600; match what a plain open() would produce.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def manifest_path(destination_root: Path, namespace: str) -> Path:
    """Return where the manifest for ``namespace`` lives under ``destination_root``."""
    return Path(destination_root).joinpath(*validate_namespace(namespace), MANIFEST_FILENAME)


class CatalogBuilder:
    """Collects specification resource paths from several source roots."""

    def __init__(self, scanner: SpecScanner | None = None) -> None:
        self._scanner = scanner or SpecScanner()

    def build(self, source_roots: Iterable[Path], namespace: str) -> SpecCatalog:
        """Return the deduplicated catalog of specs that live under ``namespace``."""
        validate_namespace(namespace)

        sources: Dict[str, Path] = {}
        for root in source_roots:
            for spec in self._scanner.scan(Path(root)):
                if spec.resource_path in sources:
                    logger.debug(
                        "Duplicate %s in %s; keeping %s",
                        spec.resource_path,
                        spec.source,
                        sources[spec.resource_path],
                    )
                    continue
                sources[spec.resource_path] = spec.source

        retained = {
            resource_path: source
            for resource_path, source in sources.items()
            if in_namespace(resource_path, namespace)
        }
        logger.info(
            "Cataloged %d of %d specification file(s) under namespace %s",
            len(retained),
            len(sources),
            namespace,
        )
        return SpecCatalog(namespace=namespace, entries=sorted(retained), sources=retained)


def write_catalog(destination_root: Path, catalog: SpecCatalog) -> Path:
    """Write ``catalog`` as ``restspecs.rs`` beneath its namespace directory.

    The manifest is written to a temporary sibling and moved into place, so an
    existing manifest is either replaced whole or left untouched.
    """
    target = manifest_path(destination_root, catalog.namespace)
    target.parent.mkdir(parents=True, exist_ok=True)

    content = "".join(f"{entry}\n" for entry in catalog.entries)
    fd, temp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{MANIFEST_FILENAME}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
        os.chmod(temp_name, _default_file_mode())
        os.replace(temp_name, target)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise

    logger.info("Wrote %d catalog entries to %s", len(catalog.entries), target)
    return target


def generate_catalog(
    source_roots: Iterable[Path], destination_root: Path, namespace: str
) -> Path:
    """Scan ``source_roots`` and write the ``namespace`` manifest under ``destination_root``."""
    catalog = CatalogBuilder().build(source_roots, namespace)
    return write_catalog(destination_root, catalog)


__all__ = [
    "CatalogBuilder",
    "MANIFEST_FILENAME",
    "generate_catalog",
    "manifest_path",
    "write_catalog",
]
