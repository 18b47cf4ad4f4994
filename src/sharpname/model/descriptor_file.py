# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading and writing type descriptors as YAML or JSON documents."""

from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from sharpname.model.types import TypeRef

# ###############
# Public Interface
# ###############


class DescriptorFileError(Exception):
    """Raised when a descriptor document cannot be read, written, or is invalid."""


def load_descriptor(path: Path) -> TypeRef:
    """Load and validate a type descriptor document from disk.

    JSON documents are accepted as well, since YAML is a superset of JSON.

    Args:
        path: Path to the descriptor document.

    Returns:
        The validated descriptor.

    Raises:
        DescriptorFileError: If the file cannot be read, contains invalid
            YAML, or does not describe a type.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DescriptorFileError(f"Cannot read descriptor file '{path}': {exc}") from exc

    return parse_descriptor(raw, source_label=str(path))


def parse_descriptor(text: str, source_label: str = "<string>") -> TypeRef:
    """Parse descriptor YAML/JSON text into a descriptor.

    Raises:
        DescriptorFileError: If the text is not a valid descriptor document.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DescriptorFileError(f"Invalid YAML in descriptor '{source_label}': {exc}") from exc

    if not isinstance(data, dict):
        raise DescriptorFileError(f"{source_label}: descriptor must be a YAML mapping")

    try:
        return _TYPE_REF_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise DescriptorFileError(f"Invalid descriptor '{source_label}': {exc}") from exc


def dump_descriptor(descriptor: TypeRef) -> str:
    """Return the YAML document describing *descriptor*."""
    data = _TYPE_REF_ADAPTER.dump_python(descriptor, mode="json")
    return yaml.dump(data, default_flow_style=False, sort_keys=True)


def save_descriptor(descriptor: TypeRef, path: Path) -> None:
    """Save a descriptor to disk as YAML.

    Raises:
        DescriptorFileError: If the file cannot be written.
    """
    try:
        path.write_text(dump_descriptor(descriptor), encoding="utf-8")
    except OSError as exc:
        raise DescriptorFileError(f"Cannot write descriptor file '{path}': {exc}") from exc


# ################
# Implementation
# ################

_TYPE_REF_ADAPTER: TypeAdapter[TypeRef] = TypeAdapter(TypeRef)
