# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Escaping of identifiers that collide with C# keywords."""

from sharpname.model.keywords import ESCAPE_MARKER, is_keyword

# ###############
# Public Interface
# ###############


def escape_identifier(identifier: str, escape_keywords: bool = True) -> str:
    """Return *identifier*, prefixed with ``@`` if it is a keyword and escaping is on.

    >>> escape_identifier("object")
    '@object'
    >>> escape_identifier("object", escape_keywords=False)
    'object'
    """
    if escape_keywords and is_keyword(identifier):
        return ESCAPE_MARKER + identifier
    return identifier
