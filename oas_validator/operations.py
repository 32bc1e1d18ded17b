"""Finding operations and reading content types."""

from __future__ import annotations

from typing import Optional

from .model import Operation, PathItem, Request

_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD", "PATCH", "TRACE")

_TSPECIALS = set('()<>@,;:\\"/[]?=')


def _is_token(s: str) -> bool:
    return bool(s) and all(33 <= ord(c) < 127 and c not in _TSPECIALS for c in s)


def extract_operation(request: Request, item: PathItem) -> Optional[Operation]:
    """Return the operation of the path item for the request method, or None."""
    if request.method not in _METHODS:
        return None
    return getattr(item, request.method.lower())


def _parse_params(rest: str) -> Optional[dict[str, str]]:
    params: dict[str, str] = {}
    pieces = rest.split(";")
    for idx, piece in enumerate(pieces):
        text = piece.strip()
        if not text:
            if idx == len(pieces) - 1:
                continue
            return None
        key, sep, value = text.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not _is_token(key):
            return None
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        elif not _is_token(value):
            return None
        params[key.lower()] = value
    return params


def extract_content_type(content_type: str) -> tuple[str, str, str]:
    """Split a content type into (media type, charset, boundary).

    When the parameters are malformed the media type is still returned.
    """
    base, sep, rest = content_type.partition(";")
    media = base.strip().lower()
    major, slash, minor = media.partition("/")
    if not _is_token(major) or (slash and not _is_token(minor)):
        return "", "", ""
    if not sep:
        return media, "", ""
    params = _parse_params(rest)
    if params is None:
        return media, "", ""
    return media, params.get("charset", ""), params.get("boundary", "")