# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptor model for SharpName."""

from sharpname.model.descriptor_file import (
    DescriptorFileError,
    dump_descriptor,
    load_descriptor,
    parse_descriptor,
    save_descriptor,
)
from sharpname.model.types import (
    VOID,
    ArrayTypeRef,
    NamedTypeRef,
    NestingLevel,
    NullableTypeRef,
    PointerTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TypeParameterRef,
    TypeRef,
    VoidTypeRef,
    WellKnownType,
    array_of,
    named,
    nullable_named,
    nullable_of,
    pointer_to,
    primitive,
)

__all__ = [
    # Descriptors
    "PrimitiveType",
    "WellKnownType",
    "PrimitiveTypeRef",
    "VoidTypeRef",
    "TypeParameterRef",
    "NestingLevel",
    "NamedTypeRef",
    "ArrayTypeRef",
    "PointerTypeRef",
    "NullableTypeRef",
    "TypeRef",
    "VOID",
    # Builders
    "primitive",
    "named",
    "array_of",
    "pointer_to",
    "nullable_of",
    "nullable_named",
    # Documents
    "DescriptorFileError",
    "load_descriptor",
    "parse_descriptor",
    "dump_descriptor",
    "save_descriptor",
]
