# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Keyword tables of the C# display syntax."""

from __future__ import annotations

# ###############
# Public Interface
# ###############

# Keywords that can never be used as a bare identifier.
RESERVED_KEYWORDS: frozenset[str] = frozenset(
    {
        "__arglist",
        "__makeref",
        "__reftype",
        "__refvalue",
        "abstract",
        "as",
        "base",
        "bool",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "checked",
        "class",
        "const",
        "continue",
        "decimal",
        "default",
        "delegate",
        "do",
        "double",
        "else",
        "enum",
        "event",
        "explicit",
        "extern",
        "false",
        "finally",
        "fixed",
        "float",
        "for",
        "foreach",
        "goto",
        "if",
        "implicit",
        "in",
        "int",
        "interface",
        "internal",
        "is",
        "lock",
        "long",
        "namespace",
        "new",
        "null",
        "object",
        "operator",
        "out",
        "override",
        "params",
        "private",
        "protected",
        "public",
        "readonly",
        "ref",
        "return",
        "sbyte",
        "sealed",
        "short",
        "sizeof",
        "stackalloc",
        "static",
        "string",
        "struct",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "uint",
        "ulong",
        "unchecked",
        "unsafe",
        "ushort",
        "using",
        "virtual",
        "void",
        "volatile",
        "while",
    }
)

# Keywords that only have meaning in some positions. They are escaped too so
# the rendered name stays unambiguous wherever it is pasted.
CONTEXTUAL_KEYWORDS: frozenset[str] = frozenset(
    {
        "add",
        "alias",
        "ascending",
        "assembly",
        "async",
        "await",
        "by",
        "descending",
        "equals",
        "field",
        "from",
        "get",
        "global",
        "group",
        "into",
        "join",
        "let",
        "method",
        "module",
        "nameof",
        "on",
        "orderby",
        "param",
        "partial",
        "property",
        "remove",
        "select",
        "set",
        "type",
        "typevar",
        "when",
        "where",
        "yield",
    }
)

ESCAPED_KEYWORDS: frozenset[str] = RESERVED_KEYWORDS | CONTEXTUAL_KEYWORDS

# Prefix that turns a keyword into a verbatim identifier.
ESCAPE_MARKER = "@"

# Primitive keywords that denote reference types; every other primitive is a value type.
REFERENCE_PRIMITIVES: frozenset[str] = frozenset({"object", "string"})


def is_keyword(identifier: str) -> bool:
    """Return True if *identifier* collides with a reserved or contextual keyword."""
    return identifier in ESCAPED_KEYWORDS
