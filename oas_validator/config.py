"""Validation configuration built with small option functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

RegexEngine = Callable[[str], Any]


@dataclass
class ValidationOptions:
    """Settings that control how schemas are compiled and checked."""

    regex_engine: Optional[RegexEngine] = None
    format_assertions: bool = False
    content_assertions: bool = False


Option = Callable[[ValidationOptions], None]


def new_validation_options(*args: Optional[Option]) -> ValidationOptions:
    """Create options with defaults, then apply each given option in order."""
    options = ValidationOptions()
    for opt in args:
        if opt is not None:
            opt(options)
    return options


def with_regex_engine(engine: Optional[RegexEngine]) -> Option:
    """Use a custom regular-expression engine during validation."""

    def apply(options: ValidationOptions) -> None:
        options.regex_engine = engine

    return apply


def with_format_assertions() -> Option:
    """Enable checks of 'format' keywords (date, date-time, uuid, ...)."""

    def apply(options: ValidationOptions) -> None:
        options.format_assertions = True

    return apply


def with_content_assertions() -> Option:
    """Enable checks of contentType, contentEncoding and the like."""

    def apply(options: ValidationOptions) -> None:
        options.content_assertions = True

    return apply