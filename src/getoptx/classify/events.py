"""Events produced by the argument classifier."""

from __future__ import annotations

from dataclasses import dataclass

INVALID_OPTION = "invalid"
UNKNOWN_OPTION = "unknown"
AMBIGUOUS_OPTION = "ambiguous"
UNEXPECTED_ARGUMENT = "unexpected_argument"


@dataclass(slots=True, frozen=True)
class ShortOption:
    """Recognized short option; joins_previous marks a concatenated digit."""

    letter: str
    index: int
    value: str | None = None
    joins_previous: bool = False


@dataclass(slots=True, frozen=True)
class LongOption:
    """Recognized long option resolved to its table entry."""

    table_index: int
    name: str
    index: int
    value: str | None = None


@dataclass(slots=True, frozen=True)
class MissingArgument:
    """Option requiring an argument found at the end of input."""

    option: str
    index: int


@dataclass(slots=True, frozen=True)
class UnrecognizedOption:
    """Unknown, ambiguous or misused option."""

    option: str
    index: int
    reason: str = INVALID_OPTION
    candidates: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class EndOfOptions:
    """Terminal event carrying every operand in output order."""

    operands: tuple[str, ...]


ParseError = MissingArgument | UnrecognizedOption
ClassifiedEvent = ShortOption | LongOption | MissingArgument | UnrecognizedOption | EndOfOptions


def is_parse_error(event: ClassifiedEvent) -> bool:
    """Return True for events that count as classification failures."""
    return isinstance(event, (MissingArgument, UnrecognizedOption))
