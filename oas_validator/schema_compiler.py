"""Compiling JSON Schema documents into validators."""

from __future__ import annotations

import json
from typing import Any, Iterator, Optional, Union

from jsonschema import exceptions as js_exceptions
from jsonschema import validators

from .config import ValidationOptions


class SchemaCompileError(Exception):
    """A JSON schema could not be decoded or compiled."""


def _refs(node: Any) -> Iterator[str]:
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str):
            yield ref
        for value in node.values():
            yield from _refs(value)
    elif isinstance(node, list):
        for value in node:
            yield from _refs(value)


def _resolve_pointer(doc: Any, pointer: str) -> None:
    node = doc
    for raw_segment in filter(None, pointer.split("/")):
        segment = raw_segment.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            raise KeyError(pointer)


def new_compiled_schema(
    name: str, json_schema: Union[bytes, str], options: Optional[ValidationOptions]
) -> Any:
    """Decode and compile a JSON schema, returning a validator for it."""
    resource_name = f"{name}.json"
    try:
        decoded = json.loads(json_schema)
    except ValueError as exc:
        raise SchemaCompileError(f"failed to unmarshal JSON schema: {exc}") from exc

    cls = validators.validator_for(decoded, default=validators.Draft202012Validator)
    try:
        cls.check_schema(decoded)
    except js_exceptions.SchemaError as exc:
        raise SchemaCompileError(
            f"failed to compile JSON schema: {resource_name}: {exc.message}"
        ) from exc

    for ref in _refs(decoded):
        if ref.startswith("#"):
            try:
                _resolve_pointer(decoded, ref[1:])
            except KeyError as exc:
                raise SchemaCompileError(
                    f"failed to compile JSON schema: {resource_name}: "
                    f"unresolvable reference {ref}"
                ) from exc

    format_checker = None
    if options is not None and options.format_assertions:
        format_checker = cls.FORMAT_CHECKER
    return cls(decoded, format_checker=format_checker)