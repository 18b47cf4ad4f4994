# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of type descriptors into their display variants."""

from __future__ import annotations

import enum

from sharpname.model.keywords import REFERENCE_PRIMITIVES
from sharpname.model.types import (
    ArrayTypeRef,
    NamedTypeRef,
    NullableTypeRef,
    PointerTypeRef,
    PrimitiveTypeRef,
    TypeParameterRef,
    TypeRef,
    VoidTypeRef,
    WellKnownType,
)

# ###############
# Public Interface
# ###############


class TypeKind(enum.Enum):
    """Display variant of a type descriptor."""

    PRIMITIVE = "primitive"
    VOID = "void"
    NAMED = "named"
    PARAMETER = "parameter"
    ARRAY = "array"
    POINTER = "pointer"
    NULLABLE = "nullable"


def classify(descriptor: TypeRef) -> TypeKind:
    """Return the display variant of *descriptor*.

    A named type tagged as the nullable wrapper classifies as
    :attr:`TypeKind.NULLABLE`, never as :attr:`TypeKind.NAMED`.
    """
    if isinstance(descriptor, NullableTypeRef) or is_nullable_wrapper(descriptor):
        return TypeKind.NULLABLE
    if isinstance(descriptor, NamedTypeRef):
        return TypeKind.NAMED
    if isinstance(descriptor, PrimitiveTypeRef):
        return TypeKind.PRIMITIVE
    if isinstance(descriptor, VoidTypeRef):
        return TypeKind.VOID
    if isinstance(descriptor, TypeParameterRef):
        return TypeKind.PARAMETER
    if isinstance(descriptor, ArrayTypeRef):
        return TypeKind.ARRAY
    if isinstance(descriptor, PointerTypeRef):
        return TypeKind.POINTER
    raise TypeError(f"Not a type descriptor: {descriptor!r}")


def is_nullable_wrapper(descriptor: TypeRef) -> bool:
    """Return True if *descriptor* is a constructed named type carrying the nullable identity.

    The unconstructed definition (``System.Nullable<T>``) is an ordinary named type.
    """
    if not isinstance(descriptor, NamedTypeRef) or descriptor.well_known is not WellKnownType.NULLABLE:
        return False
    return not any(
        isinstance(arg, TypeParameterRef) for level in descriptor.levels for arg in level.type_arguments
    )


def is_value_type(descriptor: TypeRef) -> bool:
    """Return True if *descriptor* denotes a value type.

    Free type parameters and named types not flagged either way count as value
    types: their constraints or kind are not part of the descriptor.
    """
    kind = classify(descriptor)
    if kind is TypeKind.PRIMITIVE:
        return descriptor.primitive.value not in REFERENCE_PRIMITIVES
    if kind is TypeKind.NAMED:
        return descriptor.value_type is not False
    return kind in (TypeKind.NULLABLE, TypeKind.PARAMETER)
