# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for loading and saving descriptor documents."""

import json
from pathlib import Path

import pytest

from sharpname.model.descriptor_file import (
    DescriptorFileError,
    load_descriptor,
    parse_descriptor,
    save_descriptor,
)
from sharpname.model.types import (
    VOID,
    NamedTypeRef,
    TypeParameterRef,
    WellKnownType,
    array_of,
    named,
    nullable_named,
    pointer_to,
    primitive,
)

# ###############
# Helpers
# ###############


def _write(tmp_path: Path, content: str, name: str = "type.yaml") -> Path:
    """Write a descriptor document and return its path."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Normal Cases
# ###############


def test_load_primitive(tmp_path: Path) -> None:
    path = _write(tmp_path, "kind: primitive\nprimitive: int\n")
    assert load_descriptor(path) == primitive("int")


def test_load_nested_generic(tmp_path: Path) -> None:
    content = """\
kind: named
namespace: [N]
levels:
  - name: C
    type_arguments:
      - {kind: primitive, primitive: int}
      - {kind: primitive, primitive: string}
  - name: D
    type_arguments: [V, W]
"""
    descriptor = load_descriptor(_write(tmp_path, content))

    assert isinstance(descriptor, NamedTypeRef)
    assert descriptor.namespace == ("N",)
    assert descriptor.levels[0].type_arguments == (primitive("int"), primitive("string"))
    assert descriptor.levels[1].type_arguments == (TypeParameterRef(name="V"), TypeParameterRef(name="W"))


def test_load_json_document(tmp_path: Path) -> None:
    document = {"kind": "array", "rank": 2, "element_type": {"kind": "pointer", "pointee": {"kind": "void"}}}
    path = _write(tmp_path, json.dumps(document), name="type.json")
    assert load_descriptor(path) == array_of(pointer_to(VOID), rank=2)


def test_load_nullable_identity(tmp_path: Path) -> None:
    content = """\
kind: named
namespace: [System]
value_type: true
well_known: System.Nullable`1
levels:
  - name: Nullable
    type_arguments:
      - {kind: primitive, primitive: bool}
"""
    descriptor = load_descriptor(_write(tmp_path, content))
    assert isinstance(descriptor, NamedTypeRef)
    assert descriptor.well_known is WellKnownType.NULLABLE
    assert descriptor == nullable_named(primitive("bool"))


def test_save_then_load(tmp_path: Path) -> None:
    value_type = named("N", "C", value_type=True)
    descriptor = array_of(named("N", ("A", [nullable_named(value_type)]), ("B", ["U"])), rank=3)
    path = tmp_path / "saved.yaml"
    save_descriptor(descriptor, path)
    assert load_descriptor(path) == descriptor


# ###############
# Error Cases
# ###############


def test_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(DescriptorFileError, match="Cannot read"):
        load_descriptor(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(DescriptorFileError, match="Invalid YAML"):
        load_descriptor(_write(tmp_path, "kind: [unclosed\n"))


def test_not_a_mapping() -> None:
    with pytest.raises(DescriptorFileError, match="must be a YAML mapping"):
        parse_descriptor("- int\n")


def test_unknown_kind() -> None:
    with pytest.raises(DescriptorFileError, match="Invalid descriptor"):
        parse_descriptor("kind: function\n")


def test_invalid_rank() -> None:
    with pytest.raises(DescriptorFileError, match="Invalid descriptor"):
        parse_descriptor("kind: array\nrank: 0\nelement_type: {kind: primitive, primitive: int}\n")


def test_unknown_field() -> None:
    with pytest.raises(DescriptorFileError, match="Invalid descriptor"):
        parse_descriptor("kind: void\nsize: 0\n")
