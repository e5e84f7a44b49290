"""CLI entrypoints for restspecs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .catalog import CatalogBuilder, write_catalog
from .config import ConfigError, load_config
from .logging import configure_logging
from .namespace import NamespaceError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="restspecs",
        description="Catalog *.spec.json resources into a namespace manifest.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write the restspecs.rs manifest for a namespace.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory or .restspecs.yml file (defaults to current directory).",
    )
    generate_parser.add_argument(
        "-n",
        "--namespace",
        help="Dotted namespace to catalog, e.g. com.example.",
    )
    generate_parser.add_argument(
        "-s",
        "--source-root",
        dest="source_roots",
        action="append",
        type=Path,
        help="Directory to scan for specs; repeat for several roots.",
    )
    generate_parser.add_argument(
        "-d",
        "--destination",
        type=Path,
        help="Directory the namespace manifest is written beneath.",
    )
    generate_parser.add_argument(
        "--log-file",
        type=Path,
        help="Also append timestamped log records to this file.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the catalog entries without writing the manifest.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for restspecs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=getattr(args, "log_file", None),
    )

    if args.command == "generate":
        try:
            config = load_config(Path(args.path))
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")

        namespace = args.namespace or config.namespace
        if not namespace:
            parser.exit(1, "No namespace given. Pass --namespace or set it in .restspecs.yml.\n")
        source_roots = args.source_roots or config.source_roots
        destination = args.destination or config.destination

        try:
            catalog = CatalogBuilder().build(source_roots, namespace)
            if args.dry_run:
                for entry in catalog.entries:
                    print(entry)
                return
            manifest = write_catalog(destination, catalog)
        except NamespaceError as exc:
            parser.exit(1, f"Invalid namespace: {exc}\n")
        except OSError as exc:
            parser.exit(1, f"restspecs generate failed: {exc}\nRun with --verbose for more details.\n")
        print(f"Catalog written to {_relativize(manifest)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
