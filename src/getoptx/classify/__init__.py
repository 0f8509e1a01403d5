"""Argument classification against option specs."""

from .events import (
    AMBIGUOUS_OPTION,
    INVALID_OPTION,
    UNEXPECTED_ARGUMENT,
    UNKNOWN_OPTION,
    ClassifiedEvent,
    EndOfOptions,
    LongOption,
    MissingArgument,
    ParseError,
    ShortOption,
    UnrecognizedOption,
    is_parse_error,
)
from .scanner import ArgumentClassifier, ParseState

__all__ = [
    "AMBIGUOUS_OPTION",
    "ArgumentClassifier",
    "ClassifiedEvent",
    "EndOfOptions",
    "INVALID_OPTION",
    "LongOption",
    "MissingArgument",
    "ParseError",
    "ParseState",
    "ShortOption",
    "UNEXPECTED_ARGUMENT",
    "UNKNOWN_OPTION",
    "UnrecognizedOption",
    "is_parse_error",
]
