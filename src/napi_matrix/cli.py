"""Command-line interface for napi-matrix."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from napi_matrix import __version__
from napi_matrix.config import MatrixConfig, load_matrix_config
from napi_matrix.errors import MatrixError
from napi_matrix.logging_utils import LogOptions, configure_logging
from napi_matrix.matrix import generate
from napi_matrix.outputs import OUTPUT_MODES, publish_outputs, resolve_output_mode
from napi_matrix.platforms import (
    format_platform,
    get_platform,
    is_supported,
    list_platforms,
    lookup,
    platform_as_dict,
)

LOGGER = logging.getLogger("napi_matrix.cli")


def _add_generate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the generate subcommand."""
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the build matrix for the targets declared in package.json.",
    )
    generate_parser.add_argument(
        "--package-json",
        default=None,
        help="Path to the package.json declaring napi.targets.",
    )
    generate_parser.add_argument(
        "--build-command",
        default=None,
        help="Base build command parametrized per target (e.g. 'yarn build').",
    )
    generate_parser.add_argument(
        "--config",
        default=None,
        help="Optional napi-matrix JSON config file.",
    )
    generate_parser.add_argument(
        "--output-mode",
        choices=OUTPUT_MODES,
        default="auto",
        help="Where to publish outputs (default: github when GITHUB_OUTPUT is set).",
    )
    generate_parser.add_argument(
        "--output",
        default=None,
        help="Write the JSON outputs document to this path instead of stdout.",
    )


def _add_platforms_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the platforms subcommand."""
    platforms = subparsers.add_parser("platforms", help="List supported platforms.")
    platforms.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format.",
    )


def _add_show_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the show subcommand."""
    show = subparsers.add_parser("show", help="Show the matrix entry for one target.")
    show.add_argument("identifier", help="Platform identifier, e.g. x86_64-apple-darwin.")
    show.add_argument(
        "--build-command",
        default=None,
        help="Base build command parametrized for the target.",
    )
    show.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format.",
    )


def _add_version_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the version subcommand."""
    subparsers.add_parser("version", help="Print the current version.")


def _load_config(args: argparse.Namespace) -> MatrixConfig:
    config_value = getattr(args, "config", None)
    return load_matrix_config(Path(config_value) if config_value else None)


def _run_generate(args: argparse.Namespace) -> int:
    """Generate and publish the matrix, returning an exit code."""
    mode = resolve_output_mode(args.output_mode)
    try:
        config = _load_config(args)
        LOGGER.debug("Config defaults: %s", config.as_dict())
        package_json = args.package_json or config.package_json_path
        build_command = args.build_command or config.build_command
        result = generate(package_json, build_command)
    except MatrixError as exc:
        LOGGER.error("Error generating build matrix: %s", exc)
        return 1
    try:
        publish_outputs(result, mode, Path(args.output) if args.output else None)
    except OSError as exc:
        LOGGER.error("Failed to publish matrix outputs: %s", exc)
        return 1
    return 0


def _run_show(args: argparse.Namespace) -> int:
    if not is_supported(args.identifier):
        LOGGER.error("Unsupported target: %s", args.identifier)
        return 1
    try:
        build_command = args.build_command or _load_config(args).build_command
    except MatrixError as exc:
        LOGGER.error("%s", exc)
        return 1
    entry = lookup(args.identifier, build_command)
    platform = get_platform(args.identifier)
    if entry is None or platform is None:
        return 1
    if args.format == "json":
        print(json.dumps(entry.as_dict(), indent=2))
    else:
        print(format_platform(platform))
        print(f"  build: {entry.build}")
    return 0


def _annotations_enabled(args: argparse.Namespace) -> bool:
    """Return True when failures should also surface as workflow annotations."""
    if args.command != "generate":
        return False
    return resolve_output_mode(args.output_mode) == "github"


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint and return an exit code."""
    parser = argparse.ArgumentParser(
        prog="napi-matrix",
        description="Node-API cross-platform build matrix generator",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable).",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce log output to warnings and errors.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON on stderr.",
    )
    parser.add_argument(
        "--log-file",
        help="Optional path for JSON log output.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_generate_parser(subparsers)
    _add_platforms_parser(subparsers)
    _add_show_parser(subparsers)
    _add_version_parser(subparsers)

    args = parser.parse_args(argv)
    log_file_value = getattr(args, "log_file", None)
    configure_logging(
        LogOptions(
            verbose=getattr(args, "verbose", 0) or 0,
            quiet=bool(getattr(args, "quiet", False)),
            log_file=Path(log_file_value) if log_file_value else None,
            json_console=bool(getattr(args, "log_json", False)),
            annotations=_annotations_enabled(args),
        )
    )

    if args.command == "version":
        print(__version__)
        return 0
    if args.command == "generate":
        return _run_generate(args)
    if args.command == "platforms":
        platforms = list_platforms()
        if args.format == "json":
            print(json.dumps([platform_as_dict(platform) for platform in platforms], indent=2))
        else:
            for platform in platforms:
                print(format_platform(platform))
        return 0
    if args.command == "show":
        return _run_show(args)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
