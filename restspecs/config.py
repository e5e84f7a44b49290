"""Configuration loading for restspecs (.restspecs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".restspecs.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


def _default_source_roots() -> List[Path]:
    return [Path("src") / "main" / "resources"]


@dataclass
class CatalogConfig:
    """Inputs for catalog generation as declared in .restspecs.yml."""

    root: Path
    namespace: Optional[str] = None
    destination: Path = field(default_factory=lambda: Path("target") / "classes")
    source_roots: List[Path] = field(default_factory=_default_source_roots)

    def __post_init__(self) -> None:
        self.destination = self.root / self.destination
        self.source_roots = [self.root / source for source in self.source_roots]


def load_config(config_path: Path) -> CatalogConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CatalogConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    kwargs: Dict[str, Any] = {}

    namespace = _as_str(data.get("namespace"))
    if namespace:
        kwargs["namespace"] = namespace

    destination = _as_str(data.get("destination"))
    if destination:
        kwargs["destination"] = Path(destination).expanduser()

    if "source_roots" in data:
        kwargs["source_roots"] = [
            Path(item).expanduser() for item in _as_str_list(data.get("source_roots"))
        ]

    return CatalogConfig(root=root, **kwargs)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        items: List[str] = []
        for item in value:
            if isinstance(item, bool) or not isinstance(item, (str, int, float)):
                raise ConfigError(f"Expected a path in source_roots, got {item!r}")
            items.append(str(item))
        return items
    raise ConfigError(f"Expected a list of paths, got {type(value).__name__}")
