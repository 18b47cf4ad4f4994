# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for SharpName."""

from sharpname.config.options import (
    CONFIG_FILE_NAME,
    FormatterConfigError,
    FormatterOptions,
    load_formatter_options,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "FormatterConfigError",
    "FormatterOptions",
    "load_formatter_options",
]
