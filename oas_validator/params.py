"""Extracting operation parameters and decoding encoded parameter values."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Sequence

from .constants import ARRAY, COMMA, EQUALS, FORM, PERIOD, PIPE, PIPE_DELIMITED
from .constants import SEMI_COLON, SPACE, SPACE_DELIMITED
from .model import Parameter, PathItem, Request, Schema, SecurityRequirement
from .operations import extract_operation

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_DECIMAL_FLOAT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_HEX_FLOAT = re.compile(r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+")
_SPECIAL_FLOAT = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)
_DECIMAL_INT = re.compile(r"[+-]?\d+")


@dataclass
class QueryParam:
    """A query parameter key, its raw values and, for deep objects, its property."""

    key: str = ""
    values: list[str] = field(default_factory=list)
    property: str = ""


def extract_params_for_operation(request: Request, item: PathItem) -> list[Parameter]:
    """Return the path-level parameters followed by those of the request's operation."""
    params = list(item.parameters)
    op = extract_operation(request, item)
    if op is not None:
        params.extend(op.parameters)
    return params


def extract_security_for_operation(
    request: Request, item: PathItem
) -> list[SecurityRequirement]:
    """Return the security requirements of the request's operation."""
    op = extract_operation(request, item)
    return list(op.security) if op is not None else []


def _parse_float(v: str) -> Optional[float]:
    """Parse a float with the same acceptance rules as a strict decimal parser."""
    if _SPECIAL_FLOAT.fullmatch(v):
        return float(v)
    if _HEX_FLOAT.fullmatch(v):
        result = float.fromhex(v)
    elif _DECIMAL_FLOAT.fullmatch(v):
        result = float(v)
    else:
        return None
    if math.isinf(result):
        return None
    return result


def cast_value(v: str) -> Any:
    """Convert a raw string into a bool, int or float where it looks like one."""
    if v in ("true", "false"):
        return v == "true"
    number = _parse_float(v)
    if number is None:
        return v
    if PERIOD not in v:
        if _DECIMAL_INT.fullmatch(v):
            return min(max(int(v), _INT64_MIN), _INT64_MAX)
        return 0
    return number


def _is_array(schema: Optional[Schema]) -> bool:
    return schema is not None and ARRAY in schema.type


def _has_array_additional_properties(schema: Optional[Schema]) -> bool:
    if schema is None:
        return False
    extra = schema.additional_properties
    return isinstance(extra, Schema) and ARRAY in extra.type


def construct_param_map_from_deep_object_encoding(
    values: Iterable[QueryParam], schema: Optional[Schema]
) -> dict[str, Any]:
    """Build an object map from deepObject-encoded query parameters."""
    decoded: dict[str, Any] = {}
    wants_list = _is_array(schema) or _has_array_additional_properties(schema)
    for qp in values:
        props = decoded.setdefault(qp.key, {})
        if wants_list:
            props[qp.property] = [cast_value(raw) for raw in qp.values]
        else:
            props[qp.property] = cast_value(qp.values[0])
    return decoded


def construct_param_map_from_query_param_input(
    values: dict[str, Sequence[QueryParam]],
) -> dict[str, Any]:
    """Map each query parameter key to its first value, cast."""
    return {qp.key: cast_value(qp.values[0]) for group in values.values() for qp in group}


def _strict_pairs(items: Sequence[str]) -> Iterator[tuple[str, str]]:
    if len(items) % 2:
        raise ValueError(f"value {items[-1]!r} has no matching key or value")
    return zip(items[::2], items[1::2])


def _loose_pairs(items: Sequence[str]) -> Iterator[tuple[str, str]]:
    return zip(items[::2], items[1::2])


def _map_from_delimited(values: Iterable[QueryParam], delimiter: str) -> dict[str, Any]:
    return {
        qp.key: {k: cast_value(v) for k, v in _strict_pairs(qp.values[0].split(delimiter))}
        for qp in values
    }


def construct_param_map_from_pipe_encoding(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Build object maps from pipe-delimited key|value sequences.

    Raises ValueError when a key has no value.
    """
    return _map_from_delimited(values, PIPE)


def construct_param_map_from_space_encoding(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Build object maps from space-delimited key value sequences.

    Raises ValueError when a key has no value.
    """
    return _map_from_delimited(values, SPACE)


def construct_map_from_csv(csv: str) -> dict[str, Any]:
    """Build a map from 'k1,v1,k2,v2'; a trailing key without value is dropped."""
    return {k: cast_value(v) for k, v in _loose_pairs(csv.split(COMMA))}


def _kv_pairs(values: str, delimiter: str) -> dict[str, Any]:
    props: dict[str, Any] = {}
    for chunk in values.split(delimiter):
        parts = chunk.split(EQUALS)
        if len(parts) == 2:
            props[parts[0]] = cast_value(parts[1])
    return props


def construct_kv_from_csv(values: str) -> dict[str, Any]:
    """Build a map from 'k1=v1,k2=v2'."""
    return _kv_pairs(values, COMMA)


def construct_kv_from_label_encoding(values: str) -> dict[str, Any]:
    """Build a map from label-style 'k1=v1.k2=v2'."""
    return _kv_pairs(values, PERIOD)


def construct_kv_from_matrix_csv(values: str) -> dict[str, Any]:
    """Build a map from matrix-style 'k1=v1;k2=v2'."""
    return _kv_pairs(values, SEMI_COLON)


def construct_param_map_from_form_encoding_array(
    values: Iterable[QueryParam],
) -> dict[str, Any]:
    """Build object maps from form-encoded 'k1,v1,k2,v2' values."""
    return {
        qp.key: {k: cast_value(v) for k, v in _loose_pairs(qp.values[0].split(COMMA))}
        for qp in values
    }


def does_form_param_contain_delimiter(value: str, style: str) -> bool:
    """True when a form (or unstyled) parameter value contains a comma."""
    return COMMA in value and style in ("", FORM)


def explode_query_value(value: str, style: str) -> list[str]:
    """Split a query value by the delimiter its style uses."""
    if style == SPACE_DELIMITED:
        return value.split(SPACE)
    if style == PIPE_DELIMITED:
        return value.split(PIPE)
    return value.split(COMMA)


def collapse_csv_into_form_style(key: str, value: str) -> str:
    """Turn 'a,b' into '&key=a&key=b'."""
    return f"&{key}=" + f"&{key}=".join(value.split(","))


def collapse_csv_into_space_delimited_style(key: str, values: Iterable[str]) -> str:
    """Turn ['a', 'b'] into 'key=a%20b'."""
    return f"{key}=" + "%20".join(values)


def collapse_csv_into_pipe_delimited_style(key: str, values: Iterable[str]) -> str:
    """Turn ['a', 'b'] into 'key=a|b'."""
    return f"{key}=" + PIPE.join(values)