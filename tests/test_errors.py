from oas_validator.errors import (
    SchemaValidationFailure,
    ValidationError,
    populate_validation_errors,
)
from oas_validator.model import Request


def test_schema_validation_failure_str():
    s = SchemaValidationFailure(reason="Invalid type", location="/path/to/property")
    assert str(s) == "Reason: Invalid type, Location: /path/to/property"


def test_validation_error_no_schema_errors():
    v = ValidationError(
        message="Missing required field",
        reason="The field 'id' is required but missing",
    )
    assert str(v) == (
        "Error: Missing required field, Reason: The field 'id' is required but missing"
    )


def test_validation_error_with_line_and_column():
    v = ValidationError(
        message="Invalid data type",
        reason="Expected 'string', got 'integer'",
        spec_line=10,
        spec_col=15,
    )
    assert str(v) == (
        "Error: Invalid data type, Reason: Expected 'string', got 'integer', "
        "Line: 10, Column: 15"
    )


def test_validation_error_line_without_column_omits_position():
    v = ValidationError(message="m", reason="r", spec_line=10, spec_col=0)
    assert str(v) == "Error: m, Reason: r"


def test_validation_error_with_schema_errors():
    schema_error = SchemaValidationFailure(
        reason="Invalid enum value", location="/path/to/enum"
    )
    v = ValidationError(
        message="Enum validation failed",
        reason="Invalid enum value",
        schema_validation_errors=[schema_error],
    )
    assert str(v) == (
        "Error: Enum validation failed, Reason: Invalid enum value, "
        "Validation Errors: [Reason: Invalid enum value, Location: /path/to/enum]"
    )


def test_validation_error_with_schema_errors_and_position():
    schema_error = SchemaValidationFailure(
        reason="Invalid enum value", location="/path/to/enum"
    )
    v = ValidationError(
        message="Enum validation failed",
        reason="Invalid enum value",
        schema_validation_errors=[schema_error],
        spec_line=12,
        spec_col=5,
    )
    assert str(v) == (
        "Error: Enum validation failed, Reason: Invalid enum value, "
        "Validation Errors: [Reason: Invalid enum value, Location: /path/to/enum], "
        "Line: 12, Column: 5"
    )


def test_validation_error_with_empty_schema_errors_list():
    v = ValidationError(message="m", reason="r", schema_validation_errors=[])
    assert str(v) == "Error: m, Reason: r, Validation Errors: []"


def test_is_path_missing_error():
    v = ValidationError(validation_type="path", validation_sub_type="missing")
    assert v.is_path_missing_error() is True

    v.validation_sub_type = "wrongType"
    assert v.is_path_missing_error() is False

    v.validation_type = "request"
    v.validation_sub_type = "missing"
    assert v.is_path_missing_error() is False


def test_is_operation_missing_error():
    v = ValidationError(validation_type="path", validation_sub_type="missingOperation")
    assert v.is_operation_missing_error() is True

    v.validation_sub_type = "wrongOperation"
    assert v.is_operation_missing_error() is False

    v.validation_type = "request"
    v.validation_sub_type = "missingOperation"
    assert v.is_operation_missing_error() is False


def test_populate_validation_errors():
    request = Request(method="GET", path="/test/path")
    errors = [
        ValidationError(message="Test validation error"),
        ValidationError(message="Test validation error"),
    ]
    populate_validation_errors(errors, request, "/spec/path")
    for error in errors:
        assert error.spec_path == "/spec/path"
        assert error.request_method == "GET"
        assert error.request_path == "/test/path"