# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""SharpName: C# display names for structural type descriptors."""

from sharpname.formatter import InvalidDescriptorError, TypeNameFormatter, format_type_name

__all__ = [
    "InvalidDescriptorError",
    "TypeNameFormatter",
    "format_type_name",
]
