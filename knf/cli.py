"""knf CLI - Inspect, validate and compare knf configuration files."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from loguru import logger
from pydantic import ValidationError as SettingsError

from . import __version__
from .config import Config
from .core.exceptions import KnfError
from .core.types import ValueType
from .diff import diff_configs
from .settings import get_settings
from .validators import Validator, empty


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="knf",
        description="Inspect, validate and compare knf configuration files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  knf -c app.knf get server:port --type int
  knf -c app.knf check --require server:host --require server:port
  knf -c app.knf export --format yaml
  knf diff old.knf new.knf --changed-only
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"knf {__version__}",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file (default: $KNF_CONFIG)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    get_parser = subparsers.add_parser(
        "get",
        help="Print a property value",
    )
    get_parser.add_argument(
        "key",
        help="Composite key, e.g. server:port",
    )
    get_parser.add_argument(
        "--type",
        default=ValueType.STRING.value,
        choices=ValueType.names(),
        help="Type to coerce the value into (default: str)",
    )
    get_parser.add_argument(
        "--default",
        help="Value to print when the property is absent",
    )

    subparsers.add_parser(
        "sections",
        help="List sections",
    )

    props_parser = subparsers.add_parser(
        "props",
        help="List properties of a section",
    )
    props_parser.add_argument(
        "section",
        help="Section name",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Load the file and check required properties",
    )
    check_parser.add_argument(
        "--require",
        action="append",
        default=[],
        help="Property that must not be empty (can be specified multiple times)",
    )

    export_parser = subparsers.add_parser(
        "export",
        help="Print resolved values",
    )
    export_parser.add_argument(
        "--format",
        default="json",
        choices=["json", "yaml"],
        help="Output format (default: json)",
    )

    diff_parser = subparsers.add_parser(
        "diff",
        help="Compare resolved values of two files",
    )
    diff_parser.add_argument(
        "old",
        type=Path,
        help="Original configuration file",
    )
    diff_parser.add_argument(
        "new",
        type=Path,
        help="Updated configuration file",
    )
    diff_parser.add_argument(
        "--changed-only",
        action="store_true",
        help="Only print changed properties",
    )

    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level and settings."""
    logger.remove()  # Remove default handler

    log_level = "DEBUG" if verbose else get_settings().effective_log_level
    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )

    logger.add(
        sys.stderr,
        format=log_format,
        level=log_level,
        colorize=True,
    )


def load_config(args: argparse.Namespace) -> Config:
    """Load the file given by --config or $KNF_CONFIG."""
    path = args.config or get_settings().config
    if path is None:
        raise KnfError("No configuration file given, use --config or set KNF_CONFIG")
    return Config.read(path)


def format_value(value: object, value_type: ValueType) -> str:
    """Render a typed value for output."""
    if value_type == ValueType.BOOLEAN:
        return "true" if value else "false"
    if value_type == ValueType.FILE_MODE:
        return f"{value:04o}"
    return str(value)


def get_command(args: argparse.Namespace) -> int:
    """Handle get command."""
    config = load_config(args)
    value_type = ValueType.from_string(args.type)

    if args.default is not None and not config.has_prop(args.key):
        print(args.default)
        return 0

    if value_type == ValueType.INTEGER:
        value: object = config.get_int(args.key)
    elif value_type == ValueType.FLOAT:
        value = config.get_float(args.key)
    elif value_type == ValueType.BOOLEAN:
        value = config.get_bool(args.key)
    elif value_type == ValueType.FILE_MODE:
        value = config.get_mode(args.key)
    else:
        value = config.get_str(args.key)

    print(format_value(value, value_type))
    return 0


def sections_command(args: argparse.Namespace) -> int:
    """Handle sections command."""
    config = load_config(args)
    for section in config.sections():
        print(section)
    return 0


def props_command(args: argparse.Namespace) -> int:
    """Handle props command."""
    config = load_config(args)

    if not config.has_section(args.section):
        logger.error(f"Section not found: {args.section}")
        return 1

    for prop in config.props(args.section):
        print(prop)
    return 0


def check_command(args: argparse.Namespace) -> int:
    """Handle check command."""
    config = load_config(args)
    errors = config.validate([Validator(key, empty) for key in args.require])

    if errors:
        print(f"Configuration {config.file} has {len(errors)} issue(s):")
        for error in errors:
            print(f"  • {error}")
        return 1

    print(f"Configuration {config.file} is valid")
    return 0


def export_command(args: argparse.Namespace) -> int:
    """Handle export command."""
    config = load_config(args)
    data = config.to_dict()

    if args.format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), end="")
    else:
        print(json.dumps(data, indent=2))
    return 0


def diff_command(args: argparse.Namespace) -> int:
    """Handle diff command."""
    old = Config.read(args.old)
    new = Config.read(args.new)

    for key, changed in diff_configs(old, new).items():
        if changed:
            print(f"changed    {key}")
        elif not args.changed_only:
            print(f"unchanged  {key}")
    return 0


COMMANDS = {
    "get": get_command,
    "sections": sections_command,
    "props": props_command,
    "check": check_command,
    "export": export_command,
    "diff": diff_command,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        setup_logging(args.verbose)
        sys.exit(COMMANDS[args.command](args))
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        sys.exit(0)
    except KnfError as e:
        logger.error(str(e))
        sys.exit(1)
    except SettingsError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
