"""Errors for request bodies, missing operations and responses."""

from __future__ import annotations

from . import constants
from .errors import (
    HOW_TO_FIX_INVALID_CONTENT_TYPE,
    HOW_TO_FIX_INVALID_RESPONSE_CODE,
    HOW_TO_FIX_PATH_METHOD,
    ValidationError,
)
from .model import HttpResponse, Operation, PathItem, Request
from .operations import extract_content_type


def request_content_type_not_found(
    op: Operation, request: Request, spec_path: str
) -> ValidationError:
    """The request's content type is not defined for the operation's body."""
    ct = request.get_header(constants.CONTENT_TYPE_HEADER)
    body = op.request_body
    ctypes = list(body.content)
    return ValidationError(
        validation_type=constants.REQUEST_BODY_VALIDATION,
        validation_sub_type=constants.REQUEST_BODY_CONTENT_TYPE,
        message=f"{request.method} operation request content type '{ct}' does not exist",
        reason=(
            f"The content type '{ct}' of the {request.method} request submitted has not "
            "been defined, it's an unknown type"
        ),
        spec_line=body.content_position.line,
        spec_col=body.content_position.column,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_CONTENT_TYPE % (len(body.content), ", ".join(ctypes)),
        request_path=request.path,
        request_method=request.method,
        spec_path=spec_path,
    )


def operation_not_found(
    path_item: PathItem, request: Request, method: str, spec_path: str
) -> ValidationError:
    """The path exists but has no operation for the request method."""
    return ValidationError(
        validation_type=constants.REQUEST_VALIDATION,
        validation_sub_type=constants.REQUEST_MISSING_OPERATION,
        message=f"{request.method} operation request content type '{method}' does not exist",
        reason=(
            f"The path was found, but there was no '{request.method}' method found in the spec"
        ),
        spec_line=path_item.position.line,
        spec_col=path_item.position.column,
        context=path_item,
        how_to_fix=HOW_TO_FIX_PATH_METHOD,
        request_path=request.path,
        request_method=request.method,
        spec_path=spec_path,
    )


def response_content_type_not_found(
    op: Operation,
    request: Request,
    response: HttpResponse,
    code: str,
    is_default: bool,
) -> ValidationError:
    """The response's content type is not defined for the code (or default).

    Raises KeyError when a non-default code is not defined for the operation.
    """
    ct = response.get_header(constants.CONTENT_TYPE_HEADER)
    media_type, _, _ = extract_content_type(ct)
    spec_response = op.responses.default if is_default else op.responses.codes[code]
    content = spec_response.content
    ctypes = list(content)
    return ValidationError(
        validation_type=constants.RESPONSE_BODY_VALIDATION,
        validation_sub_type=constants.REQUEST_BODY_CONTENT_TYPE,
        message=(
            f"{request.method} / {code} operation response content type "
            f"'{media_type}' does not exist"
        ),
        reason=(
            f"The content type '{media_type}' of the {request.method} response received has not "
            "been defined, it's an unknown type"
        ),
        spec_line=spec_response.content_position.line,
        spec_col=spec_response.content_position.column,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_CONTENT_TYPE % (len(content), ", ".join(ctypes)),
    )


def response_code_not_found(op: Operation, request: Request, code: int) -> ValidationError:
    """The response status code is not defined for the operation."""
    return ValidationError(
        validation_type=constants.RESPONSE_BODY_VALIDATION,
        validation_sub_type=constants.RESPONSE_BODY_RESPONSE_CODE,
        message=f"{request.method} operation request response code '{code}' does not exist",
        reason=(
            f"The response code '{code}' of the {request.method} request submitted has not "
            "been defined, it's an unknown type"
        ),
        spec_line=op.responses_position.line,
        spec_col=op.responses_position.column,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_RESPONSE_CODE,
    )