"""Errors raised while checking query parameters against the specification."""

from __future__ import annotations

from typing import Any, Iterable, Optional
from urllib.parse import quote_plus

from . import constants
from .errors import (
    HOW_TO_FIX_INVALID_JSON,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_RESERVED_VALUES,
    ValidationError,
)
from .model import Parameter, Position, Schema
from .params import (
    QueryParam,
    collapse_csv_into_form_style,
    collapse_csv_into_pipe_delimited_style,
    collapse_csv_into_space_delimited_style,
)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _join_enum(values: Optional[Iterable[Any]]) -> str:
    return ", ".join(_format_value(v) for v in values or ())


def _items_schema(sch: Optional[Schema]) -> Optional[Schema]:
    if sch is not None and isinstance(sch.items, Schema):
        return sch.items
    return None


def _items_type_position(sch: Optional[Schema]) -> Position:
    items = _items_schema(sch)
    return items.type_position if items is not None else Position()


def _param_enum_position(param: Parameter) -> Position:
    return param.schema.enum_position if param.schema is not None else Position()


def _query_error(**kwargs: Any) -> ValidationError:
    return ValidationError(
        validation_type=constants.PARAMETER_VALIDATION,
        validation_sub_type=constants.PARAMETER_VALIDATION_QUERY,
        **kwargs,
    )


def incorrect_form_encoding(param: Parameter, qp: QueryParam, i: int) -> ValidationError:
    """A form-style value was sent comma separated instead of exploded."""
    value = qp.values[i]
    return _query_error(
        message=f"Query parameter '{param.name}' is not exploded correctly",
        reason=(
            f"The query parameter '{param.name}' has a default or 'form' encoding defined, "
            f"however the value '{value}' is encoded as an object or an array using commas. "
            "The contract defines the explode value to set to 'true'"
        ),
        spec_line=param.explode_position.line,
        spec_col=param.explode_position.column,
        context=param,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE
        % collapse_csv_into_form_style(param.name, value),
    )


def incorrect_space_delimiting(param: Parameter, qp: QueryParam) -> ValidationError:
    """A spaceDelimited, non-exploded parameter was sent as several values."""
    return _query_error(
        message=f"Query parameter '{param.name}' delimited incorrectly",
        reason=(
            f"The query parameter '{param.name}' has 'spaceDelimited' style defined, "
            f"and explode is defined as false. There are multiple values ({len(qp.values)}) "
            "supplied, instead of a single space delimited value"
        ),
        spec_line=param.style_position.line,
        spec_col=param.style_position.column,
        context=param,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE
        % collapse_csv_into_space_delimited_style(param.name, qp.values),
    )


def incorrect_pipe_delimiting(param: Parameter, qp: QueryParam) -> ValidationError:
    """A pipeDelimited, non-exploded parameter was sent as several values."""
    return _query_error(
        message=f"Query parameter '{param.name}' delimited incorrectly",
        reason=(
            f"The query parameter '{param.name}' has 'pipeDelimited' style defined, "
            f"and explode is defined as false. There are multiple values ({len(qp.values)}) "
            "supplied, instead of a single space delimited value"
        ),
        spec_line=param.style_position.line,
        spec_col=param.style_position.column,
        context=param,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE
        % collapse_csv_into_pipe_delimited_style(param.name, qp.values),
    )


def invalid_deep_object(param: Parameter, qp: QueryParam) -> ValidationError:
    """A deepObject property was given more than one value."""
    return _query_error(
        message=f"Query parameter '{param.name}' is not a valid deepObject",
        reason=(
            f"The query parameter '{param.name}' has the 'deepObject' style defined, "
            f"There are multiple values ({len(qp.values)}) supplied, instead of a single value"
        ),
        spec_line=param.style_position.line,
        spec_col=param.style_position.column,
        context=param,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES
        % collapse_csv_into_pipe_delimited_style(param.name, qp.values),
    )


def query_parameter_missing(param: Parameter) -> ValidationError:
    """A required query parameter is absent."""
    return _query_error(
        message=f"Query parameter '{param.name}' is missing",
        reason=(
            f"The query parameter '{param.name}' is defined as being required, "
            "however it's missing from the requests"
        ),
        spec_line=param.required_position.line,
        spec_col=param.required_position.column,
        how_to_fix=HOW_TO_FIX_MISSING_VALUE,
    )


def incorrect_query_param_array_boolean(
    param: Parameter, item: str, sch: Optional[Schema], items_schema: Optional[Schema]
) -> ValidationError:
    """An item of a boolean array query parameter is not true/false."""
    pos = _items_type_position(sch)
    return _query_error(
        message=f"Query array parameter '{param.name}' is not a valid boolean",
        reason=(
            f"The query parameter (which is an array) '{param.name}' is defined as being a "
            f"boolean, however the value '{item}' is not a valid true/false value"
        ),
        spec_line=pos.line,
        spec_col=pos.column,
        context=items_schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_BOOLEAN % item,
    )


def incorrect_query_param_array_number(
    param: Parameter, item: str, sch: Optional[Schema], items_schema: Optional[Schema]
) -> ValidationError:
    """An item of a number array query parameter is not a number."""
    pos = _items_type_position(sch)
    return _query_error(
        message=f"Query array parameter '{param.name}' is not a valid number",
        reason=(
            f"The query parameter (which is an array) '{param.name}' is defined as being a "
            f"number, however the value '{item}' is not a valid number"
        ),
        spec_line=pos.line,
        spec_col=pos.column,
        context=items_schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_NUMBER % item,
    )


def incorrect_param_encoding_json(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A query parameter with JSON content is not valid JSON."""
    pos = param.content_positions.get(constants.JSON_CONTENT_TYPE, Position())
    return _query_error(
        message=f"Query parameter '{param.name}' is not valid JSON",
        reason=(
            f"The query parameter '{param.name}' is defined as being a JSON object, "
            f"however the value '{ef}' is not valid JSON"
        ),
        spec_line=pos.line,
        spec_col=pos.column,
        context=sch,
        how_to_fix=HOW_TO_FIX_INVALID_JSON,
    )


def incorrect_query_param_bool(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A boolean query parameter is not a valid boolean."""
    return _query_error(
        message=f"Query parameter '{param.name}' is not a valid boolean",
        reason=(
            f"The query parameter '{param.name}' is defined as being a boolean, "
            f"however the value '{ef}' is not a valid boolean"
        ),
        spec_line=param.schema_position.line,
        spec_col=param.schema_position.column,
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_BOOLEAN % ef,
    )


def invalid_query_param_number(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A number query parameter is not a valid number."""
    return _query_error(
        message=f"Query parameter '{param.name}' is not a valid number",
        reason=(
            f"The query parameter '{param.name}' is defined as being a number, "
            f"however the value '{ef}' is not a valid number"
        ),
        spec_line=param.schema_position.line,
        spec_col=param.schema_position.column,
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_NUMBER % ef,
    )


def incorrect_query_param_enum(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A query parameter value is not one of the schema's enum values."""
    valid = _join_enum(sch.enum if sch is not None else None)
    pos = _param_enum_position(param)
    return _query_error(
        message=f"Query parameter '{param.name}' does not match allowed values",
        reason=(
            f"The query parameter '{param.name}' has pre-defined values set via an enum. "
            f"The value '{ef}' is not one of those values."
        ),
        spec_line=pos.line,
        spec_col=pos.column,
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_ENUM % (ef, valid),
    )


def incorrect_query_param_enum_array(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """An item of an array query parameter is not one of the items' enum values."""
    items = _items_schema(param.schema)
    valid = _join_enum(items.enum if items is not None else None)
    pos = items.enum_position if items is not None else Position()
    return _query_error(
        message=f"Query array parameter '{param.name}' does not match allowed values",
        reason=(
            f"The query array parameter '{param.name}' has pre-defined values set via an "
            f"enum. The value '{ef}' is not one of those values."
        ),
        spec_line=pos.line,
        # The column mirrors the line here, as the error has always reported it.
        spec_col=pos.line,
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_ENUM % (ef, valid),
    )


def incorrect_reserved_values(
    param: Parameter, ef: str, sch: Optional[Schema]
) -> ValidationError:
    """A query value contains reserved characters while allowReserved is false."""
    return _query_error(
        message=f"Query parameter '{param.name}' value contains reserved values",
        reason=(
            f"The query parameter '{param.name}' has 'allowReserved' set to false, "
            f"however the value '{ef}' contains one of the following characters: "
            ":/?#[]@!$&'()*+,;="
        ),
        spec_line=param.schema_position.line,
        spec_col=param.schema_position.column,
        context=sch,
        how_to_fix=HOW_TO_FIX_RESERVED_VALUES % quote_plus(ef, safe=""),
    )