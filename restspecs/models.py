"""Core data models shared across restspecs components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List


@dataclass(frozen=True)
class SpecFile:
    """A specification file discovered beneath a source root."""

    resource_path: str
    source: Path


@dataclass
class SpecCatalog:
    """Deduplicated resource paths retained for a namespace."""

    namespace: str
    entries: List[str]
    sources: Dict[str, Path] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)
