# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of type descriptors as C# display names.

The renderer peels pointer and array layers from the outside in without
recursing, renders the named, primitive or nullable core, then appends one
suffix per layer, innermost layer first:

* Named types render as ``Ns.Outer<Args>.Inner<Args>``; every nesting level
  keeps its own argument list, and each argument is a full rendering.
* A pointer appends ``*``, so an array of pointers renders as ``int*[]``.
* A run of nested arrays is collected outermost first and its rank tokens are
  appended in that order after the element, so a rank-1 array of rank-2
  arrays of ``int`` renders as ``int[][,]``.
* The nullable wrapper renders its single argument followed by ``?``.
"""

from __future__ import annotations

from sharpname.config.options import FormatterOptions
from sharpname.formatter.classify import TypeKind, classify, is_nullable_wrapper, is_value_type
from sharpname.formatter.escaping import escape_identifier
from sharpname.model.types import ArrayTypeRef, NamedTypeRef, NestingLevel, TypeRef

# ###############
# Public Interface
# ###############


class InvalidDescriptorError(Exception):
    """Raised when a descriptor violates the formatter's structural contract.

    Well-formed descriptors always format; this error only signals malformed
    nullable wrappers.
    """


def format_type_name(descriptor: TypeRef, escape_keywords: bool = True) -> str:
    """Return the C# display name of *descriptor*.

    Args:
        descriptor: The type to render.
        escape_keywords: Prefix identifiers that are C# keywords with ``@``.

    Returns:
        The display name, e.g. ``"N.C<int, string>.D<A, A.B>"``.

    Raises:
        InvalidDescriptorError: If a nullable wrapper does not wrap exactly
            one value type.
    """
    return _render(descriptor, escape_keywords)


class TypeNameFormatter:
    """Formats descriptors with a fixed set of :class:`FormatterOptions`."""

    def __init__(self, options: FormatterOptions | None = None) -> None:
        self.options = options if options is not None else FormatterOptions()

    def format(self, descriptor: TypeRef) -> str:
        """Return the display name of *descriptor* under this formatter's options."""
        return format_type_name(descriptor, escape_keywords=self.options.escape_keywords)


def array_rank_suffix(rank: int) -> str:
    """Return the bracket token of an array of the given rank (``[]``, ``[,]``, ...)."""
    return "[" + "," * (rank - 1) + "]"


# ################
# Implementation
# ################


def _render(descriptor: TypeRef, escape: bool) -> str:
    # Suffixes of the pointer and array layers, outermost first.
    suffix_groups: list[str] = []
    core = descriptor
    kind = classify(core)
    while kind in (TypeKind.POINTER, TypeKind.ARRAY):
        if kind is TypeKind.POINTER:
            suffix_groups.append("*")
            core = core.pointee
        else:
            suffix, core = _peel_array_run(core)
            suffix_groups.append(suffix)
        kind = classify(core)
    # The layer closest to the core is written first.
    return _render_core(core, kind, escape) + "".join(reversed(suffix_groups))


def _render_core(descriptor: TypeRef, kind: TypeKind, escape: bool) -> str:
    if kind is TypeKind.PRIMITIVE:
        return descriptor.primitive.value
    if kind is TypeKind.VOID:
        return "void"
    if kind is TypeKind.PARAMETER:
        return escape_identifier(descriptor.name, escape)
    if kind is TypeKind.NULLABLE:
        return _render(_nullable_underlying(descriptor), escape) + "?"
    return _render_named(descriptor, escape)


def _render_named(descriptor: NamedTypeRef, escape: bool) -> str:
    parts = [escape_identifier(segment, escape) for segment in descriptor.namespace]
    parts.extend(_render_level(level, escape) for level in descriptor.levels)
    return ".".join(parts)


def _render_level(level: NestingLevel, escape: bool) -> str:
    name = escape_identifier(level.name, escape)
    if not level.type_arguments:
        return name
    arguments = ", ".join(_render(arg, escape) for arg in level.type_arguments)
    return f"{name}<{arguments}>"


def _peel_array_run(descriptor: ArrayTypeRef) -> tuple[str, TypeRef]:
    """Return the rank tokens of a run of directly nested arrays, outermost first, and its element."""
    suffixes: list[str] = []
    element: TypeRef = descriptor
    while isinstance(element, ArrayTypeRef):
        suffixes.append(array_rank_suffix(element.rank))
        element = element.element_type
    return "".join(suffixes), element


def _nullable_underlying(descriptor: TypeRef) -> TypeRef:
    """Return the single wrapped type of a nullable, validating the wrapper's shape."""
    if is_nullable_wrapper(descriptor):
        levels = descriptor.levels
        if len(levels) != 1 or len(levels[0].type_arguments) != 1:
            arity = sum(len(level.type_arguments) for level in levels)
            raise InvalidDescriptorError(
                f"Nullable wrapper must have exactly one type argument, got {arity} "
                f"across {len(levels)} nesting level(s)"
            )
        underlying = levels[0].type_arguments[0]
    else:
        underlying = descriptor.underlying

    if classify(underlying) is TypeKind.NULLABLE:
        raise InvalidDescriptorError("Nullable wrapper cannot wrap another nullable type")
    if not is_value_type(underlying):
        raise InvalidDescriptorError(
            f"Nullable wrapper requires a value type, got '{_render(underlying, escape=False)}'"
        )
    return underlying
