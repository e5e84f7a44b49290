"""Source tree scanning and resource path normalization."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, List, Tuple

from .logging import get_logger
from .models import SpecFile

SPEC_SUFFIX = ".spec.json"

logger = get_logger("scanner")


def is_spec_file(name: str) -> bool:
    """Return True when ``name`` follows the ``*.spec.json`` naming convention."""
    return name.endswith(SPEC_SUFFIX)


def to_resource_path(root: Path, path: Path) -> str:
    """Return the root-independent resource path of ``path``.

    The path is made relative to ``root`` and rewritten with ``/`` separators
    and a single leading ``/``, e.g. ``/com/foo/whoosh.spec.json``. Raises
    ``ValueError`` when ``path`` does not live under ``root``.
    """
    relative = Path(path).relative_to(root)
    if not relative.parts:
        raise ValueError(f"{path} is the source root itself, not a file beneath it")
    return "/" + "/".join(relative.parts)


def _log_walk_error(error: OSError) -> None:
    logger.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror)


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every regular file beneath ``root``.

    Symlinked directories are followed. A directory that resolves to one of its
    own ancestors is not entered, so link loops terminate while sibling links to
    the same directory are still walked. A missing root yields nothing.
    """
    root = Path(root)
    if not root.exists():
        logger.warning("Source root %s does not exist; skipping", root)
        return
    if not root.is_dir():
        logger.warning("Source root %s is not a directory; skipping", root)
        return

    # dirpath -> (dev, ino) of every directory above it on the current branch
    ancestors: Dict[str, FrozenSet[Tuple[int, int]]] = {}
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error, followlinks=True):
        stat_result = os.stat(dirpath)
        key = (stat_result.st_dev, stat_result.st_ino)
        chain = ancestors.pop(dirpath, frozenset())
        if key in chain:
            logger.debug("Not descending into %s: it loops back to an ancestor", dirpath)
            dirnames[:] = []
            continue
        chain = chain | {key}
        for name in dirnames:
            ancestors[os.path.join(dirpath, name)] = chain

        current_dir = Path(dirpath)
        for filename in filenames:
            path = current_dir / filename
            if path.is_file():
                yield path


class SpecScanner:
    """Finds specification files beneath a single source root."""

    def scan(self, root: Path) -> List[SpecFile]:
        """Return the specification files found under ``root``."""
        root_path = Path(root).expanduser()
        specs: List[SpecFile] = []
        for path in iter_files(root_path):
            if not is_spec_file(path.name):
                continue
            specs.append(SpecFile(resource_path=to_resource_path(root_path, path), source=path))
        logger.debug("Found %d specification file(s) under %s", len(specs), root_path)
        return specs


__all__ = ["SPEC_SUFFIX", "SpecScanner", "is_spec_file", "iter_files", "to_resource_path"]
