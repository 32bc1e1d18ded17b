"""A small OpenAPI and HTTP object model used by the validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass
class Position:
    """A line and column in the specification document."""

    line: int = 0
    column: int = 0


@dataclass
class Schema:
    """The parts of a JSON schema the validator reasons about."""

    type: list[str] = field(default_factory=list)
    enum: Optional[list[Any]] = None
    items: Union["Schema", bool, None] = None
    additional_properties: Union["Schema", bool, None] = None
    properties: dict[str, "Schema"] = field(default_factory=dict)
    type_position: Position = field(default_factory=Position)
    enum_position: Position = field(default_factory=Position)
    items_position: Position = field(default_factory=Position)


@dataclass
class MediaType:
    schema: Optional[Schema] = None


@dataclass
class Parameter:
    """An operation parameter with the spec positions of its keywords."""

    name: str = ""
    in_: str = ""
    required: bool = False
    style: str = ""
    explode: Optional[bool] = None
    allow_reserved: bool = False
    schema: Optional[Schema] = None
    content: dict[str, MediaType] = field(default_factory=dict)
    position: Position = field(default_factory=Position)
    required_position: Position = field(default_factory=Position)
    style_position: Position = field(default_factory=Position)
    explode_position: Position = field(default_factory=Position)
    schema_position: Position = field(default_factory=Position)
    content_positions: dict[str, Position] = field(default_factory=dict)

    def is_exploded(self) -> bool:
        """True only when explode is explicitly set to true."""
        return bool(self.explode)


@dataclass
class RequestBody:
    content: dict[str, MediaType] = field(default_factory=dict)
    content_position: Position = field(default_factory=Position)


@dataclass
class Response:
    content: dict[str, MediaType] = field(default_factory=dict)
    content_position: Position = field(default_factory=Position)


@dataclass
class Responses:
    codes: dict[str, Response] = field(default_factory=dict)
    default: Optional[Response] = None


@dataclass
class SecurityRequirement:
    requirements: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class Operation:
    summary: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    security: list[SecurityRequirement] = field(default_factory=list)
    request_body: Optional[RequestBody] = None
    responses: Optional[Responses] = None
    responses_position: Position = field(default_factory=Position)


@dataclass
class PathItem:
    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    trace: Optional[Operation] = None
    parameters: list[Parameter] = field(default_factory=list)
    position: Position = field(default_factory=Position)


def _find_header(headers: dict[str, str], name: str) -> str:
    wanted = name.lower()
    return next((v for k, v in headers.items() if k.lower() == wanted), "")


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str = "GET"
    path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)

    def get_header(self, name: str) -> str:
        """Return a header value, matched case-insensitively, or ''."""
        return _find_header(self.headers, name)


@dataclass
class HttpResponse:
    """An HTTP response returned by a service."""

    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)

    def get_header(self, name: str) -> str:
        """Return a header value, matched case-insensitively, or ''."""
        return _find_header(self.headers, name)