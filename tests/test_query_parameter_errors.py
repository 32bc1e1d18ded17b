import pytest

from oas_validator import constants
from oas_validator.errors import HOW_TO_FIX_INVALID_JSON, HOW_TO_FIX_MISSING_VALUE
from oas_validator.model import MediaType, Parameter, Position, Schema
from oas_validator.params import QueryParam
from oas_validator.query_parameter_errors import (
    incorrect_form_encoding,
    incorrect_param_encoding_json,
    incorrect_pipe_delimiting,
    incorrect_query_param_array_boolean,
    incorrect_query_param_array_number,
    incorrect_query_param_bool,
    incorrect_query_param_enum,
    incorrect_query_param_enum_array,
    incorrect_reserved_values,
    incorrect_space_delimiting,
    invalid_deep_object,
    invalid_query_param_number,
    query_parameter_missing,
)


def _param_with_schema():
    return Parameter(
        name="testParam",
        style="form",
        explode=False,
        schema=Schema(
            type=["string"],
            enum=["enum1", "enum2"],
            enum_position=Position(10, 20),
        ),
        style_position=Position(15, 25),
        explode_position=Position(18, 30),
        required_position=Position(22, 32),
    )


def _query_param():
    return Parameter(
        name="testQueryParam",
        schema=Schema(),
        content={"application/json": MediaType()},
        content_positions={"application/json": Position(3, 4)},
        schema_position=Position(7, 8),
    )


def _assert_query(err):
    assert err.validation_type == constants.PARAMETER_VALIDATION
    assert err.validation_sub_type == constants.PARAMETER_VALIDATION_QUERY


def test_incorrect_form_encoding():
    err = incorrect_form_encoding(
        _param_with_schema(), QueryParam(key="testParam", values=["incorrect,value"]), 0
    )
    _assert_query(err)
    assert "Query parameter 'testParam' is not exploded correctly" in err.message
    assert "'testParam' has a default or 'form' encoding defined" in err.reason
    assert (err.spec_line, err.spec_col) == (18, 30)
    assert "&testParam=incorrect&testParam=value'" in err.how_to_fix


def test_incorrect_space_delimiting():
    err = incorrect_space_delimiting(
        _param_with_schema(), QueryParam(key="testParam", values=["value1", "value2"])
    )
    _assert_query(err)
    assert "Query parameter 'testParam' delimited incorrectly" in err.message
    assert "'spaceDelimited' style defined" in err.reason
    assert "multiple values (2)" in err.reason
    assert "testParam=value1%20value2" in err.how_to_fix
    assert (err.spec_line, err.spec_col) == (15, 25)


def test_incorrect_pipe_delimiting():
    err = incorrect_pipe_delimiting(
        _param_with_schema(), QueryParam(key="testParam", values=["value1", "value2"])
    )
    _assert_query(err)
    assert "Query parameter 'testParam' delimited incorrectly" in err.message
    assert "'pipeDelimited' style defined" in err.reason
    assert "testParam=value1|value2" in err.how_to_fix


def test_query_parameter_missing():
    err = query_parameter_missing(_param_with_schema())
    _assert_query(err)
    assert "Query parameter 'testParam' is missing" in err.message
    assert "'testParam' is defined as being required" in err.reason
    assert err.how_to_fix == HOW_TO_FIX_MISSING_VALUE
    assert (err.spec_line, err.spec_col) == (22, 32)


def test_invalid_deep_object():
    param = Parameter(
        name="testParam", style="deepObject", style_position=Position(12, 22)
    )
    err = invalid_deep_object(param, QueryParam(key="testParam", values=["value1", "value2"]))
    _assert_query(err)
    assert "Query parameter 'testParam' is not a valid deepObject" in err.message
    assert "'testParam' has the 'deepObject' style defined" in err.reason
    assert "testParam=value1|value2" in err.how_to_fix
    assert err.spec_line == 12


def test_incorrect_query_param_array_boolean():
    items = Schema(type=["boolean"], type_position=Position(30, 40))
    sch = Schema(type=["array"], items=items)
    err = incorrect_query_param_array_boolean(_param_with_schema(), "notBoolean", sch, items)
    _assert_query(err)
    assert "Query array parameter 'testParam' is not a valid boolean" in err.message
    assert "the value 'notBoolean' is not a valid true/false value" in err.reason
    assert "true/false" in err.how_to_fix
    assert (err.spec_line, err.spec_col) == (30, 40)
    assert err.context is items


def test_incorrect_query_param_array_number():
    items = Schema(type=["string"])
    sch = Schema(type=["number"], items=items)
    err = incorrect_query_param_array_number(
        Parameter(name="testQueryParam"), "notNumber", sch, items
    )
    _assert_query(err)
    assert "Query array parameter 'testQueryParam' is not a valid number" in err.message
    assert "the value 'notNumber' is not a valid number" in err.reason
    assert "notNumber" in err.how_to_fix


def test_incorrect_param_encoding_json():
    err = incorrect_param_encoding_json(_query_param(), "invalidJSON", Schema())
    _assert_query(err)
    assert "Query parameter 'testQueryParam' is not valid JSON" in err.message
    assert "the value 'invalidJSON' is not valid JSON" in err.reason
    assert err.how_to_fix == HOW_TO_FIX_INVALID_JSON
    assert (err.spec_line, err.spec_col) == (3, 4)


def test_incorrect_query_param_bool():
    err = incorrect_query_param_bool(_query_param(), "notBoolean", Schema(type=["boolean"]))
    _assert_query(err)
    assert "Query parameter 'testQueryParam' is not a valid boolean" in err.message
    assert "the value 'notBoolean' is not a valid boolean" in err.reason
    assert "true/false" in err.how_to_fix
    assert (err.spec_line, err.spec_col) == (7, 8)


def test_invalid_query_param_number():
    err = invalid_query_param_number(_query_param(), "notNumber", Schema())
    _assert_query(err)
    assert "Query parameter 'testQueryParam' is not a valid number" in err.message
    assert "the value 'notNumber' is not a valid number" in err.reason
    assert "notNumber" in err.how_to_fix


def test_incorrect_query_param_enum():
    sch = Schema(enum=["fish", "crab", "lobster"], enum_position=Position(5, 6))
    param = _query_param()
    param.schema = sch
    err = incorrect_query_param_enum(param, "invalidEnum", sch)
    _assert_query(err)
    assert "Query parameter 'testQueryParam' does not match allowed values" in err.message
    assert "'invalidEnum' is not one of those values" in err.reason
    assert "fish, crab, lobster" in err.how_to_fix
    assert (err.spec_line, err.spec_col) == (5, 6)


def test_incorrect_query_param_enum_formats_booleans():
    sch = Schema(enum=[True, False, 3])
    err = incorrect_query_param_enum(_query_param(), "x", sch)
    assert err.how_to_fix == "Instead of 'x', use one of the allowed values: 'true, false, 3'"


def test_incorrect_query_param_enum_array():
    items = Schema(enum=["fish, crab, lobster"], enum_position=Position(9, 2))
    sch = Schema(type=["array"], items=items)
    param = _query_param()
    param.schema = sch
    err = incorrect_query_param_enum_array(param, "invalidEnum", sch)
    _assert_query(err)
    assert "Query array parameter 'testQueryParam' does not match allowed values" in err.message
    assert "'invalidEnum' is not one of those values" in err.reason
    assert "fish, crab, lobster" in err.how_to_fix
    assert (err.spec_line, err.spec_col) == (9, 9)


def test_incorrect_reserved_values():
    param = _query_param()
    param.name = "borked::?^&*"
    err = incorrect_reserved_values(param, "borked::?^&*", Schema())
    _assert_query(err)
    assert "Query parameter 'borked::?^&*' value contains reserved values" in err.message
    assert "The query parameter 'borked::?^&*' has 'allowReserved' set to false" in err.reason
    assert "borked%3A%3A%3F%5E%26%2A" in err.how_to_fix


@pytest.mark.parametrize(
    "value, encoded",
    [("a b", "a+b"), ("x/y", "x%2Fy"), ("safe-_.~", "safe-_.~")],
)
def test_incorrect_reserved_values_encoding(value, encoded):
    err = incorrect_reserved_values(_query_param(), value, None)
    assert err.how_to_fix.endswith(f"'{encoded}'")