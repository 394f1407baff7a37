# SPDX-License-Identifier: MIT
"""Command-line interface for ccconfig."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from ccconfig.configure.config import Config, load_config
from ccconfig.core.errors import CcConfigError

# Set up logging
logger = logging.getLogger("ccconfig")

COMMANDS = ("show", "check")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def parse_variables(args: list[str]) -> tuple[dict[str, str], list[str]]:
    """Parse KEY=value arguments from a list.

    Args:
        args: List of arguments.

    Returns:
        Tuple of (variables dict, remaining args).
    """
    variables: dict[str, str] = {}
    remaining: list[str] = []

    for arg in args:
        if "=" in arg and not arg.startswith("-"):
            key, _, value = arg.partition("=")
            if key:  # Valid KEY=value
                variables[key] = value
            else:
                remaining.append(arg)
        else:
            remaining.append(arg)

    return variables, remaining


def build_environ(args: argparse.Namespace) -> dict[str, str]:
    """Build the environment to resolve against.

    Precedence (highest to lowest):
        1. --product
        2. Command line: ccconfig SDCLANG=true
        3. Process environment
    """
    environ = dict(os.environ)
    variables, remaining = parse_variables(getattr(args, "extra", []))
    for arg in remaining:
        logger.warning("Ignoring argument: %s", arg)
    environ.update(variables)

    product = getattr(args, "product", None)
    if product:
        environ["TARGET_PRODUCT"] = product
    return environ


def resolve(args: argparse.Namespace) -> Config | None:
    """Resolve the configuration, logging any fatal error.

    Returns:
        The Config, or None if configuration failed.
    """
    try:
        return load_config(build_environ(args))
    except CcConfigError as e:
        logger.error("%s", e)
        return None


def cmd_show(args: argparse.Namespace) -> int:
    """Print the published build variables."""
    setup_logging(args.verbose, args.debug)

    config = resolve(args)
    if config is None:
        return 1

    variables = config.variables()
    if args.json:
        print(json.dumps(variables, indent=2, sort_keys=True))
    else:
        for name in sorted(variables):
            print(f"{name}={variables[name]}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Validate the configuration and print a summary."""
    setup_logging(args.verbose, args.debug)

    config = resolve(args)
    if config is None:
        return 1

    product = config.product or "(no product)"
    if config.sdclang.enabled:
        print(f"{product}: SDClang enabled ({config.sdclang.path})")
    else:
        print(f"{product}: SDClang disabled")
    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")
    parser.add_argument(
        "-p", "--product", metavar="NAME", help="Product to resolve (TARGET_PRODUCT)"
    )
    parser.add_argument(
        "extra",
        nargs="*",
        help="Environment overrides (KEY=value)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ccconfig CLI."""
    parser = argparse.ArgumentParser(
        prog="ccconfig",
        description="Resolve native compiler configuration (SDClang, prebuilt Clang).",
        epilog="Run 'ccconfig <command> --help' for command-specific help.",
    )
    from ccconfig import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ccconfig show
    show_parser = subparsers.add_parser("show", help="Print resolved build variables")
    add_common_args(show_parser)
    show_parser.add_argument("--json", action="store_true", help="Output JSON")
    show_parser.set_defaults(func=cmd_show)

    # ccconfig check
    check_parser = subparsers.add_parser("check", help="Validate the configuration")
    add_common_args(check_parser)
    check_parser.set_defaults(func=cmd_check)

    argv = list(sys.argv[1:] if argv is None else argv)

    # The command goes first; default to show
    command = next((arg for arg in argv if arg in COMMANDS), None)
    if command is not None:
        argv.remove(command)
        argv.insert(0, command)
    elif not argv or argv[0] not in ("-h", "--help", "--version"):
        argv.insert(0, "show")

    args = parser.parse_args(argv)
    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
