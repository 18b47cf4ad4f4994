# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the SharpName command-line interface."""

import argparse
import sys
from pathlib import Path

from sharpname.config.options import (
    CONFIG_FILE_NAME,
    FormatterConfigError,
    FormatterOptions,
    load_formatter_options,
)
from sharpname.formatter.type_names import InvalidDescriptorError, TypeNameFormatter
from sharpname.model.descriptor_file import DescriptorFileError, load_descriptor
from sharpname.model.keywords import CONTEXTUAL_KEYWORDS, RESERVED_KEYWORDS

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the SharpName CLI."""
    parser = argparse.ArgumentParser(
        prog="sharpname",
        description="SharpName: C# display names for type descriptors",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # format subcommand
    format_parser = subparsers.add_parser(
        "format",
        help="Print the display name of one or more type descriptors",
        description="Render YAML or JSON type descriptor documents as C# type names.",
    )
    format_parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="Descriptor documents to format",
    )
    format_parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Do not prefix keyword identifiers with '@'",
    )
    format_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a config file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )

    # keywords subcommand
    subparsers.add_parser(
        "keywords",
        help="List the identifiers that are escaped",
        description="List the reserved and contextual keywords that get an '@' prefix.",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "format":
        return _cmd_format(args)
    if args.command == "keywords":
        return _cmd_keywords(args)
    return 0


def _cmd_format(args: argparse.Namespace) -> int:
    """Handle the format subcommand."""
    try:
        options = _resolve_options(args)
    except FormatterConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    formatter = TypeNameFormatter(options)
    has_errors = False
    for file_name in args.files:
        try:
            descriptor = load_descriptor(Path(file_name))
            print(formatter.format(descriptor))
        except (DescriptorFileError, InvalidDescriptorError) as exc:
            print(f"Error: {file_name}: {exc}", file=sys.stderr)
            has_errors = True

    return 1 if has_errors else 0


def _cmd_keywords(args: argparse.Namespace) -> int:
    """Handle the keywords subcommand."""
    for keyword in sorted(RESERVED_KEYWORDS):
        print(keyword)
    for keyword in sorted(CONTEXTUAL_KEYWORDS):
        print(f"{keyword} (contextual)")
    return 0


def _resolve_options(args: argparse.Namespace) -> FormatterOptions:
    """Combine the config file, if any, with command-line overrides."""
    if args.config is not None:
        options = load_formatter_options(Path(args.config))
    elif Path(CONFIG_FILE_NAME).exists():
        options = load_formatter_options(Path(CONFIG_FILE_NAME))
    else:
        options = FormatterOptions()

    if args.no_escape:
        options = FormatterOptions(escape_keywords=False)
    return options
