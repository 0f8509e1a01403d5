"""Single-invocation orchestration of spec building, classification and output."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from getoptx.classify import (
    AMBIGUOUS_OPTION,
    UNEXPECTED_ARGUMENT,
    UNKNOWN_OPTION,
    ArgumentClassifier,
    ClassifiedEvent,
    MissingArgument,
    UnrecognizedOption,
    is_parse_error,
)
from getoptx.options import LongOptionTable, parse_short_spec
from getoptx.output import OutputBuilder, single_quote

RESULT_OK = 0
RESULT_PARSE_ERROR = 1
RESULT_USAGE_ERROR = 2

TOOL_NAME = "getoptx"


@dataclass(slots=True, frozen=True)
class UsageError(Exception):
    """Raised when the invocation itself (not the parsed input) is invalid."""

    message: str


@dataclass(slots=True, frozen=True)
class ReparseModes:
    """Behaviour switches for one reparse run."""

    concat_numeric: bool = False
    elide_errors: bool = False
    abort_on_error: bool = False
    normalize_punctuation: bool = False
    quiet: bool = False


@dataclass(slots=True, frozen=True)
class ReparseRequest:
    """Specs, input tokens and modes for one run."""

    short_spec: str
    long_specs: tuple[str, ...] = ()
    tokens: tuple[str, ...] = ()
    modes: ReparseModes = field(default_factory=ReparseModes)
    display_name: str = TOOL_NAME


@dataclass(slots=True, frozen=True)
class ReparseResult:
    """Result code, reassembled string and diagnostics of one run."""

    code: int
    output: str
    diagnostics: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.code == RESULT_OK


def build_long_option_table(
    specs: Sequence[str], normalize_punctuation: bool = False
) -> LongOptionTable:
    """Build a table from long-option specs, rejecting a spec with any bad name."""
    table = LongOptionTable()
    for spec in specs:
        if table.insert_from_spec(spec, normalize_punctuation=normalize_punctuation):
            raise UsageError(f"empty or illegal long option spec: {spec}")
    return table


def describe_parse_error(event: ClassifiedEvent, display_name: str) -> str:
    """Format a classification failure the way GNU getopt reports it."""
    if isinstance(event, MissingArgument):
        if event.option.startswith("--"):
            return f"{display_name}: option '{event.option}' requires an argument"
        return f"{display_name}: option requires an argument -- '{event.option[1:]}'"
    if isinstance(event, UnrecognizedOption):
        if event.reason == AMBIGUOUS_OPTION:
            possibilities = " ".join(f"'--{name}'" for name in event.candidates)
            return (
                f"{display_name}: option '{event.option}' is ambiguous; "
                f"possibilities: {possibilities}"
            )
        if event.reason == UNEXPECTED_ARGUMENT:
            return f"{display_name}: option '{event.option}' doesn't allow an argument"
        if event.reason == UNKNOWN_OPTION:
            return f"{display_name}: unrecognized option '{event.option}'"
        return f"{display_name}: invalid option -- '{event.option[1:]}'"
    raise TypeError(f"Not a parse error: {event!r}")


def reparse(request: ReparseRequest, quote: Callable[[str], str] = single_quote) -> ReparseResult:
    """Classify request.tokens and reassemble them into one quoted string."""
    modes = request.modes
    short_spec = parse_short_spec(
        request.short_spec, quiet=modes.quiet, concat_numeric=modes.concat_numeric
    )
    quiet = short_spec.quiet
    try:
        table = build_long_option_table(request.long_specs, modes.normalize_punctuation)
    except UsageError as error:
        diagnostics = () if quiet else (f"{TOOL_NAME}: {error.message}",)
        return ReparseResult(code=RESULT_USAGE_ERROR, output="", diagnostics=diagnostics)

    classifier = ArgumentClassifier(short_spec, table, concat_numeric=modes.concat_numeric)
    builder = OutputBuilder(
        elide_errors=modes.elide_errors,
        normalize_punctuation=modes.normalize_punctuation,
        quote=quote,
    )
    diagnostics: list[str] = []
    for event in classifier.classify(request.tokens):
        builder.add(event)
        if not is_parse_error(event):
            continue
        if not quiet:
            diagnostics.append(describe_parse_error(event, request.display_name))
        if modes.abort_on_error:
            break

    output = builder.finish(discard=modes.abort_on_error and builder.failed)
    code = RESULT_PARSE_ERROR if builder.failed else RESULT_OK
    return ReparseResult(code=code, output=output, diagnostics=tuple(diagnostics))
