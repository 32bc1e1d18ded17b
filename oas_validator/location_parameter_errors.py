"""Errors raised while checking header, cookie and path parameters."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from . import constants
from .errors import (
    HOW_TO_FIX_INVALID_ENCODING,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    ValidationError,
)
from .model import Parameter, Position, Schema


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _join_enum(values: Optional[Iterable[Any]]) -> str:
    return ", ".join(_format_value(v) for v in values or ())


def _items_type_position(sch: Optional[Schema]) -> Position:
    if sch is not None and isinstance(sch.items, Schema):
        return sch.items.type_position
    return Position()


def _param_schema(param: Parameter) -> Schema:
    return param.schema if param.schema is not None else Schema()


def _error(sub_type: str, pos: Position, **kwargs: Any) -> ValidationError:
    return ValidationError(
        validation_type=constants.PARAMETER_VALIDATION,
        validation_sub_type=sub_type,
        spec_line=pos.line,
        spec_col=pos.column,
        **kwargs,
    )


def _missing(param: Parameter, sub_type: str, label: str) -> ValidationError:
    return _error(
        sub_type,
        param.required_position,
        message=f"{label.capitalize()} parameter '{param.name}' is missing",
        reason=(
            f"The {label} parameter '{param.name}' is defined as being required, "
            "however it's missing from the requests"
        ),
        how_to_fix=HOW_TO_FIX_MISSING_VALUE,
    )


def _enum_mismatch(
    param: Parameter, ef: str, sch: Optional[Schema], sub_type: str, label: str
) -> ValidationError:
    valid = _join_enum(sch.enum if sch is not None else None)
    return _error(
        sub_type,
        _param_schema(param).enum_position,
        message=f"{label.capitalize()} parameter '{param.name}' does not match allowed values",
        reason=(
            f"The {label} parameter '{param.name}' has pre-defined values set via an enum. "
            f"The value '{ef}' is not one of those values."
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_ENUM % (ef, valid),
    )


def _not_number(
    param: Parameter, ef: str, sch: Optional[Schema], sub_type: str, label: str
) -> ValidationError:
    return _error(
        sub_type,
        param.schema_position,
        message=f"{label.capitalize()} parameter '{param.name}' is not a valid number",
        reason=(
            f"The {label} parameter '{param.name}' is defined as being a number, "
            f"however the value '{ef}' is not a valid number"
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_NUMBER % ef,
    )


def _not_bool(
    param: Parameter, ef: str, sch: Optional[Schema], sub_type: str, label: str
) -> ValidationError:
    return _error(
        sub_type,
        param.schema_position,
        message=f"{label.capitalize()} parameter '{param.name}' is not a valid boolean",
        reason=(
            f"The {label} parameter '{param.name}' is defined as being a boolean, "
            f"however the value '{ef}' is not a valid boolean"
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_BOOLEAN % ef,
    )


def _array_bool(
    param: Parameter,
    item: str,
    sch: Optional[Schema],
    items_schema: Optional[Schema],
    sub_type: str,
    label: str,
    invalid_text: str = "not a valid true/false value",
) -> ValidationError:
    return _error(
        sub_type,
        _items_type_position(sch),
        message=f"{label.capitalize()} array parameter '{param.name}' is not a valid boolean",
        reason=(
            f"The {label} parameter (which is an array) '{param.name}' is defined as being a "
            f"boolean, however the value '{item}' is {invalid_text}"
        ),
        context=items_schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_BOOLEAN % item,
    )


def _array_number(
    param: Parameter,
    item: str,
    sch: Optional[Schema],
    items_schema: Optional[Schema],
    sub_type: str,
    label: str,
) -> ValidationError:
    return _error(
        sub_type,
        _items_type_position(sch),
        message=f"{label.capitalize()} array parameter '{param.name}' is not a valid number",
        reason=(
            f"The {label} parameter (which is an array) '{param.name}' is defined as being a "
            f"number, however the value '{item}' is not a valid number"
        ),
        context=items_schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_NUMBER % item,
    )


_HEADER = constants.PARAMETER_VALIDATION_HEADER
_COOKIE = constants.PARAMETER_VALIDATION_COOKIE
_PATH = constants.PARAMETER_VALIDATION_PATH


def header_parameter_missing(param: Parameter) -> ValidationError:
    """A required header parameter is absent."""
    return _missing(param, _HEADER, "header")


def header_parameter_cannot_be_decoded(param: Parameter, val: str) -> ValidationError:
    """A header value could not be decoded into an object."""
    line = _param_schema(param).type_position.line
    # The column mirrors the line here, as the error has always reported it.
    return _error(
        _HEADER,
        Position(line, line),
        message=f"Header parameter '{param.name}' cannot be decoded",
        reason=(
            f"The header parameter '{param.name}' cannot be extracted into an object, "
            f"'{val}' is malformed"
        ),
        how_to_fix=HOW_TO_FIX_INVALID_ENCODING,
    )


def incorrect_header_param_enum(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A header value is not one of the schema's enum values."""
    return _enum_mismatch(param, ef, sch, _HEADER, "header")


def incorrect_cookie_param_array_boolean(
    param: Parameter, item: str, sch: Optional[Schema], items_schema: Optional[Schema]
) -> ValidationError:
    """An item of a boolean array cookie is not true/false."""
    return _array_bool(param, item, sch, items_schema, _COOKIE, "cookie")


def incorrect_cookie_param_array_number(
    param: Parameter, item: str, sch: Optional[Schema], items_schema: Optional[Schema]
) -> ValidationError:
    """An item of a number array cookie is not a number."""
    return _array_number(param, item, sch, items_schema, _COOKIE, "cookie")


def invalid_header_param_number(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A number header is not a valid number."""
    return _not_number(param, ef, sch, _HEADER, "header")


def invalid_cookie_param_number(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A number cookie is not a valid number."""
    return _not_number(param, ef, sch, _COOKIE, "cookie")


def incorrect_header_param_bool(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A boolean header is not a valid boolean."""
    return _not_bool(param, ef, sch, _HEADER, "header")


def incorrect_cookie_param_bool(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A boolean cookie is not a valid boolean."""
    return _not_bool(param, ef, sch, _COOKIE, "cookie")


def incorrect_cookie_param_enum(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A cookie value is not one of the schema's enum values."""
    return _enum_mismatch(param, ef, sch, _COOKIE, "cookie")


def incorrect_header_param_array_boolean(
    param: Parameter, item: str, sch: Optional[Schema], items_schema: Optional[Schema]
) -> ValidationError:
    """An item of a boolean array header is not true/false."""
    return _array_bool(param, item, sch, items_schema, _HEADER, "header")


def incorrect_header_param_array_number(
    param: Parameter, item: str, sch: Optional[Schema], items_schema: Optional[Schema]
) -> ValidationError:
    """An item of a number array header is not a number."""
    return _array_number(param, item, sch, items_schema, _HEADER, "header")


def incorrect_path_param_bool(
    param: Parameter, item: str, sch: Optional[Schema]
) -> ValidationError:
    """A boolean path parameter is not a valid boolean."""
    return _not_bool(param, item, sch, _PATH, "path")


def incorrect_path_param_enum(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A path parameter value is not one of the schema's enum values."""
    return _enum_mismatch(param, ef, sch, _PATH, "path")


def incorrect_path_param_number(
    param: Parameter, item: str, sch: Optional[Schema]
) -> ValidationError:
    """A number path parameter is not a valid number."""
    return _not_number(param, item, sch, _PATH, "path")


def incorrect_path_param_array_number(
    param: Parameter, item: str, sch: Optional[Schema], items_schema: Optional[Schema]
) -> ValidationError:
    """An item of a number array path parameter is not a number."""
    return _array_number(param, item, sch, items_schema, _PATH, "path")


def incorrect_path_param_array_boolean(
    param: Parameter, item: str, sch: Optional[Schema], items_schema: Optional[Schema]
) -> ValidationError:
    """An item of a boolean array path parameter is not a boolean."""
    return _array_bool(
        param, item, sch, items_schema, _PATH, "path", invalid_text="not a valid boolean"
    )


def path_parameter_missing(param: Parameter) -> ValidationError:
    """A required path parameter is absent."""
    return _missing(param, _PATH, "path")