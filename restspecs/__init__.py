"""Build-time catalog of REST specification resources."""

from .catalog import CatalogBuilder, generate_catalog, manifest_path, write_catalog
from .models import SpecCatalog, SpecFile
from .namespace import NamespaceError

__all__ = [
    "CatalogBuilder",
    "NamespaceError",
    "SpecCatalog",
    "SpecFile",
    "generate_catalog",
    "manifest_path",
    "write_catalog",
]
