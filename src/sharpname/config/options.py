# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Formatter options and the YAML parser for the SharpName config file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".sharpname.yaml"


class FormatterConfigError(Exception):
    """Raised when a formatter config file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class FormatterOptions:
    """Options controlling how type names are rendered.

    Attributes:
        escape_keywords: Prefix identifiers that are C# keywords with ``@``.
    """

    escape_keywords: bool = True


def load_formatter_options(path: Path) -> FormatterOptions:
    """Load and parse a SharpName config file.

    Args:
        path: Path to the `.sharpname.yaml` file.

    Returns:
        A FormatterOptions instance populated from the file.

    Raises:
        FormatterConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FormatterConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise FormatterConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_formatter_options(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"escape-keywords"})


def _parse_formatter_options(text: str, source_label: str = "<string>") -> FormatterOptions:
    """Parse config YAML text into FormatterOptions.

    An empty document yields the default options.

    Raises:
        FormatterConfigError: If the YAML is invalid or contains unknown or mistyped fields.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FormatterConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return FormatterOptions()
    if not isinstance(data, dict):
        raise FormatterConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise FormatterConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    escape_keywords = _optional_bool(data, "escape-keywords", True, source_label)
    return FormatterOptions(escape_keywords=escape_keywords)


def _optional_bool(mapping: dict[str, object], key: str, default: bool, source_label: str) -> bool:
    """Extract an optional boolean field from a mapping, raising FormatterConfigError if mistyped."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, bool):
        raise FormatterConfigError(f"{source_label}: '{key}' must be a boolean")
    return value
