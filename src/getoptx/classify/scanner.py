"""Token-by-token classification of an argument vector.

The scanner follows GNU ``getopt_long`` conventions: option clusters such
as ``-abc``, attached or separate option arguments, ``--name=value`` long
options resolved by exact match or unambiguous prefix, and ``--`` as the
end-of-options marker. Operands may be interspersed with options unless
the short spec asks for require-order scanning, in which case the first
operand ends option processing.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from getoptx.classify.events import (
    AMBIGUOUS_OPTION,
    INVALID_OPTION,
    UNEXPECTED_ARGUMENT,
    UNKNOWN_OPTION,
    ClassifiedEvent,
    EndOfOptions,
    LongOption,
    MissingArgument,
    ShortOption,
    UnrecognizedOption,
)
from getoptx.options import (
    DIGITS,
    NO_ARGUMENT,
    OPTIONAL_ARGUMENT,
    REQUIRED_ARGUMENT,
    LongOptionTable,
    ShortOptionSpec,
)


@dataclass(slots=True)
class ParseState:
    """Cursor and digit-tracking state for one classification run.

    ``current_index`` is the raw cursor into the token vector. Operands that
    are skipped over displace it, so option adjacency is tracked separately:
    ``last_observed_index`` is the logical position of the option token being
    scanned, counted in operands passed so far, and ``last_numeric_index`` is
    the logical position of the most recent digit option.
    ``saw_terminator`` records that a ``--`` token ended option scanning.
    """

    current_index: int = 0
    last_observed_index: int = 0
    last_numeric_index: int = -1
    saw_numeric_last: bool = False
    saw_terminator: bool = False


class ArgumentClassifier:
    """Classify input tokens against a short spec and a long-option table."""

    def __init__(
        self,
        short_spec: ShortOptionSpec,
        long_options: LongOptionTable | None = None,
        concat_numeric: bool = False,
    ) -> None:
        self._short = short_spec
        self._long = long_options if long_options is not None else LongOptionTable()
        self._concat_numeric = concat_numeric
        self.state = ParseState()

    def classify(self, tokens: Sequence[str]) -> Iterator[ClassifiedEvent]:
        """Yield one event per option, ending with EndOfOptions.

        A consumer may stop iterating early; tokens past that point are
        never examined.
        """
        state = self.state = ParseState()
        operands: list[str] = []
        while state.current_index < len(tokens):
            token = tokens[state.current_index]
            if token == "--":
                state.current_index += 1
                state.saw_terminator = True
                break
            if token == "-" or not token.startswith("-"):
                if self._short.require_order:
                    break
                operands.append(token)
                state.current_index += 1
                continue
            state.last_observed_index = len(operands)
            if token.startswith("--"):
                yield from self._scan_long(tokens, state)
            else:
                yield from self._scan_short(tokens, state)
        operands.extend(tokens[state.current_index :])
        yield EndOfOptions(operands=tuple(operands))

    def _scan_short(self, tokens: Sequence[str], state: ParseState) -> Iterator[ClassifiedEvent]:
        token = tokens[state.current_index]
        origin = state.current_index
        state.current_index += 1
        position = 1
        while position < len(token):
            letter = token[position]
            position += 1
            arity = self._short.arity_of(letter)
            if arity is None:
                state.saw_numeric_last = False
                yield UnrecognizedOption(option=f"-{letter}", index=origin, reason=INVALID_OPTION)
                continue
            if arity == NO_ARGUMENT:
                yield self._short_option(state, letter, None, origin)
                continue

            rest = token[position:]
            if arity == OPTIONAL_ARGUMENT:
                yield self._short_option(state, letter, rest or None, origin)
                return
            if rest:
                value = rest
            elif state.current_index < len(tokens):
                value = tokens[state.current_index]
                state.current_index += 1
            else:
                state.saw_numeric_last = False
                yield MissingArgument(option=f"-{letter}", index=origin)
                return
            yield self._short_option(state, letter, value, origin)
            return

    def _short_option(
        self, state: ParseState, letter: str, value: str | None, origin: int
    ) -> ShortOption:
        if not (self._concat_numeric and letter in DIGITS):
            state.saw_numeric_last = False
            return ShortOption(letter=letter, index=origin, value=value)
        joins = state.saw_numeric_last and state.last_numeric_index == state.last_observed_index
        # A value follows the digit in the output, so nothing may be appended to it.
        state.saw_numeric_last = value is None
        state.last_numeric_index = state.last_observed_index
        return ShortOption(letter=letter, index=origin, value=value, joins_previous=joins)

    def _scan_long(self, tokens: Sequence[str], state: ParseState) -> Iterator[ClassifiedEvent]:
        token = tokens[state.current_index]
        origin = state.current_index
        state.current_index += 1
        state.saw_numeric_last = False

        name, separator, attached = token[2:].partition("=")
        value = attached if separator else None
        if not name:
            yield UnrecognizedOption(option=token, index=origin, reason=UNKNOWN_OPTION)
            return
        table_index, candidates = self._long.match(name)
        if table_index is None:
            if len(candidates) > 1:
                yield UnrecognizedOption(
                    option=f"--{name}",
                    index=origin,
                    reason=AMBIGUOUS_OPTION,
                    candidates=tuple(self._long[candidate].name for candidate in candidates),
                )
            else:
                yield UnrecognizedOption(option=f"--{name}", index=origin, reason=UNKNOWN_OPTION)
            return

        entry = self._long[table_index]
        if entry.arity == NO_ARGUMENT and value is not None:
            yield UnrecognizedOption(
                option=f"--{entry.name}", index=origin, reason=UNEXPECTED_ARGUMENT
            )
            return
        if entry.arity == REQUIRED_ARGUMENT and value is None:
            if state.current_index >= len(tokens):
                yield MissingArgument(option=f"--{entry.name}", index=origin)
                return
            value = tokens[state.current_index]
            state.current_index += 1
        yield LongOption(table_index=table_index, name=entry.name, index=origin, value=value)
