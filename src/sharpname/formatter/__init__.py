# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""C# display names for type descriptors."""

from sharpname.formatter.classify import TypeKind, classify, is_value_type
from sharpname.formatter.escaping import escape_identifier
from sharpname.formatter.type_names import (
    InvalidDescriptorError,
    TypeNameFormatter,
    array_rank_suffix,
    format_type_name,
)

__all__ = [
    "TypeKind",
    "classify",
    "is_value_type",
    "escape_identifier",
    "InvalidDescriptorError",
    "TypeNameFormatter",
    "array_rank_suffix",
    "format_type_name",
]
