# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors: the structural description of a type handed to the formatter."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveType(Enum):
    """Built-in types that display as their C# keyword."""

    OBJECT = "object"
    BOOL = "bool"
    CHAR = "char"
    SBYTE = "sbyte"
    BYTE = "byte"
    SHORT = "short"
    USHORT = "ushort"
    INT = "int"
    UINT = "uint"
    LONG = "long"
    ULONG = "ulong"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    STRING = "string"


class WellKnownType(Enum):
    """Generic definitions that get dedicated display syntax."""

    NULLABLE = "System.Nullable`1"


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PrimitiveTypeRef(_Descriptor):
    """Reference to a primitive type."""

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType


class VoidTypeRef(_Descriptor):
    """The ``void`` type. Only meaningful on its own or as a pointee."""

    kind: Literal["void"] = "void"


class TypeParameterRef(_Descriptor):
    """A free generic parameter of an unconstructed generic definition."""

    kind: Literal["parameter"] = "parameter"
    name: str


class NestingLevel(_Descriptor):
    """One level of an enclosing chain: a simple name plus its own generic arguments.

    Plain strings among the arguments are free parameter names and are stored
    as :class:`TypeParameterRef`.
    """

    name: str
    type_arguments: tuple[TypeRef, ...] = ()

    @field_validator("type_arguments", mode="before")
    @classmethod
    def _wrap_parameter_names(cls, value: Any) -> Any:
        if isinstance(value, str) or not isinstance(value, Sequence):
            return value
        return [TypeParameterRef(name=arg) if isinstance(arg, str) else arg for arg in value]


class NamedTypeRef(_Descriptor):
    """Reference to a namespaced, possibly nested and generic, class or struct.

    Attributes:
        namespace: Namespace segments, outermost first. Empty for the global namespace.
        levels: The enclosing chain, outermost containing type first, the type itself last.
        value_type: True for structs and enums, False for classes and interfaces, None when
            the caller does not know. Explicit reference types cannot be wrapped as nullable.
        well_known: Identity of a generic definition with dedicated display syntax.
    """

    kind: Literal["named"] = "named"
    namespace: tuple[str, ...] = ()
    levels: tuple[NestingLevel, ...] = _Field(min_length=1)
    value_type: bool | None = None
    well_known: WellKnownType | None = None


class ArrayTypeRef(_Descriptor):
    """Reference to an array of the given rank.

    ``multi_dimensional`` distinguishes a rank-1 array created through the
    multi-dimensional constructor from a plain vector. Both display as ``[]``.
    """

    kind: Literal["array"] = "array"
    element_type: TypeRef
    rank: int = _Field(default=1, ge=1)
    multi_dimensional: bool = False


class PointerTypeRef(_Descriptor):
    """Reference to an unmanaged pointer."""

    kind: Literal["pointer"] = "pointer"
    pointee: TypeRef


class NullableTypeRef(_Descriptor):
    """The optional-value wrapper around a value type, displayed as ``T?``."""

    kind: Literal["nullable"] = "nullable"
    underlying: TypeRef


# A type descriptor: one of the primitive, named, parameter, or wrapper variants.
TypeRef = Annotated[
    PrimitiveTypeRef
    | VoidTypeRef
    | TypeParameterRef
    | NamedTypeRef
    | ArrayTypeRef
    | PointerTypeRef
    | NullableTypeRef,
    _Field(discriminator="kind"),
]

VOID = VoidTypeRef()

TypeArgument = TypeRef | str


def primitive(name: str | PrimitiveType) -> PrimitiveTypeRef:
    """Return the descriptor of a primitive given its keyword, e.g. ``primitive("int")``."""
    return PrimitiveTypeRef(primitive=PrimitiveType(name))


def named(
    namespace: str,
    *levels: str | tuple[str, Sequence[TypeArgument]],
    value_type: bool | None = None,
) -> NamedTypeRef:
    """Build a named type from a dotted namespace and its enclosing chain.

    Each level is either a bare simple name or a ``(name, arguments)`` pair.

    Example::

        named("N", ("C", [primitive("int"), primitive("string")]), ("D", ["V", "W"]))
    """
    chain = [NestingLevel(name=level) if isinstance(level, str) else _level(*level) for level in levels]
    segments = tuple(namespace.split(".")) if namespace else ()
    return NamedTypeRef(namespace=segments, levels=tuple(chain), value_type=value_type)


def array_of(element_type: TypeRef, rank: int = 1, multi_dimensional: bool = False) -> ArrayTypeRef:
    """Return an array of *element_type* with the given rank."""
    return ArrayTypeRef(element_type=element_type, rank=rank, multi_dimensional=multi_dimensional)


def pointer_to(pointee: TypeRef) -> PointerTypeRef:
    """Return a pointer to *pointee*."""
    return PointerTypeRef(pointee=pointee)


def nullable_of(underlying: TypeRef) -> NullableTypeRef:
    """Return the nullable wrapper variant around *underlying*."""
    return NullableTypeRef(underlying=underlying)


def nullable_named(underlying: TypeArgument) -> NamedTypeRef:
    """Return ``System.Nullable<underlying>`` as a named type tagged with its well-known identity.

    Passing a parameter name yields the unconstructed definition.
    """
    return NamedTypeRef(
        namespace=("System",),
        levels=(_level("Nullable", [underlying]),),
        value_type=True,
        well_known=WellKnownType.NULLABLE,
    )


# ################
# Implementation
# ################


def _level(name: str, type_arguments: Sequence[TypeArgument]) -> NestingLevel:
    return NestingLevel(name=name, type_arguments=tuple(type_arguments))


# Resolve forward references for models that use TypeRef.
NestingLevel.model_rebuild()
NamedTypeRef.model_rebuild()
ArrayTypeRef.model_rebuild()
PointerTypeRef.model_rebuild()
NullableTypeRef.model_rebuild()
