"""CLI entrypoint for the class map generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from classmap import __version__
from classmap.cache import build_payload
from classmap.config import apply_overrides, build_resolver, load_config
from classmap.config.model import ClassMapConfig
from classmap.constants.branding import CLI_DESCRIPTION, PRODUCT_NAME
from classmap.constants.policy import VALID_SCAN_POLICIES
from classmap.exceptions import ClassMapError, ConfigError
from classmap.model import LookupStatus


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=PRODUCT_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Rescan all roots and write the class map")
    _add_scan_arguments(generate)

    resolve = subparsers.add_parser("resolve", help="Print the file declaring a type name")
    resolve.add_argument("name", help="Type name, e.g. 'App\\Models\\User'")
    _add_scan_arguments(resolve)
    resolve.add_argument(
        "-s",
        "--scan-policy",
        action="append",
        choices=sorted(VALID_SCAN_POLICIES),
        default=None,
        help="Rescan policy on a miss (repeat to combine, e.g. -s once -s cache)",
    )

    list_parser = subparsers.add_parser("list", help="List every known type name and its file")
    _add_scan_arguments(list_parser)

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_scan_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument(
        "-a",
        "--add-root",
        type=Path,
        action="append",
        default=[],
        help="Additional directory to scan (repeat flag for multiple values)",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        type=Path,
        action="append",
        default=[],
        help="Directory to exclude from scans (repeat flag for multiple values)",
    )
    parser.add_argument(
        "-e",
        "--ext",
        action="append",
        default=[],
        help="File extension to scan (repeat flag for multiple values; default: php, inc)",
    )
    parser.add_argument("-o", "--cache-file", type=Path, default=None, help="Class map artifact path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show per-file diagnostics")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        config = load_config(args.root, args.config)
        if args.command == "validate-config":
            build_resolver(config)
            print("Configuration is valid.")
            return 0
        config = apply_overrides(
            config,
            roots=tuple(args.add_root),
            exclude=tuple(args.exclude),
            extensions=tuple(args.ext),
            cache_file=args.cache_file,
            scan_policy=tuple(getattr(args, "scan_policy", None) or ()),
        )
        if args.command == "generate":
            return _handle_generate(config)
        if args.command == "resolve":
            return _handle_resolve(config, args.name)
        if args.command == "list":
            return _handle_list(config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except ClassMapError as exc:
        print(f"Class map error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")


def _handle_generate(config: ClassMapConfig) -> int:
    resolver = build_resolver(config)
    if resolver.generate():
        print(f"Wrote {len(resolver.store)} entries to {resolver.cache_file}")
        return 0

    resolver.refresh()
    print(yaml.safe_dump(dict(build_payload(resolver.registered_classes())), sort_keys=True), end="")
    return 0


def _handle_resolve(config: ClassMapConfig, name: str) -> int:
    resolver = build_resolver(config)
    resolution = resolver.resolve(name)
    if resolution.found:
        print(resolution.path)
        return 0

    reason = "known absent" if resolution.status is LookupStatus.KNOWN_ABSENT else "not found"
    print(f"{name}: {reason}", file=sys.stderr)
    return 1


def _handle_list(config: ClassMapConfig) -> int:
    resolver = build_resolver(config)
    if resolver.cache_file is None or not len(resolver.store):
        resolver.refresh()
    for name, path in sorted(resolver.registered_classes().items()):
        print(f"{name}\t{path if path is not None else '-'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
