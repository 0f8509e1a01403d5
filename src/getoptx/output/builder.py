"""Reassembly of classified events into one shell-evaluable string."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from getoptx.classify import (
    ClassifiedEvent,
    EndOfOptions,
    LongOption,
    MissingArgument,
    ShortOption,
    UnrecognizedOption,
)
from getoptx.options import strip_punctuation
from getoptx.output.quoting import single_quote

MISSING_ARGUMENT_MARKER = ":"
UNRECOGNIZED_OPTION_MARKER = "?"


@dataclass(slots=True)
class OutputBuilder:
    """Fold classified events into space-separated, quoted fragments."""

    elide_errors: bool = False
    normalize_punctuation: bool = False
    quote: Callable[[str], str] = single_quote
    failed: bool = False
    _fragments: list[str] = field(default_factory=list)

    def add(self, event: ClassifiedEvent) -> None:
        """Append the fragment(s) for one event."""
        if isinstance(event, MissingArgument):
            self._add_error(MISSING_ARGUMENT_MARKER)
        elif isinstance(event, UnrecognizedOption):
            self._add_error(UNRECOGNIZED_OPTION_MARKER)
        elif isinstance(event, LongOption):
            name = strip_punctuation(event.name) if self.normalize_punctuation else event.name
            self._fragments.append(f"--{name}")
            self._add_value(event.value)
        elif isinstance(event, ShortOption):
            if event.joins_previous and self._fragments:
                self._fragments[-1] += event.letter
            else:
                self._fragments.append(f"-{event.letter}")
            self._add_value(event.value)
        elif isinstance(event, EndOfOptions):
            self._fragments.append("--")
            for operand in event.operands:
                self._fragments.append(self.quote(operand))
        else:
            raise TypeError(f"Unsupported event: {event!r}")

    def finish(self, discard: bool = False) -> str:
        """Return the reassembled string, or an empty one when discarding."""
        if discard:
            self._fragments.clear()
            return ""
        return " ".join(self._fragments)

    def _add_error(self, marker: str) -> None:
        self.failed = True
        if not self.elide_errors:
            self._fragments.append(self.quote(marker))

    def _add_value(self, value: str | None) -> None:
        if value is not None:
            self._fragments.append(self.quote(value))
