"""Parsing of getopt-style short-option specs."""

from __future__ import annotations

from getoptx.options.models import (
    NO_ARGUMENT,
    OPTIONAL_ARGUMENT,
    REQUIRED_ARGUMENT,
    ShortOptionSpec,
)

DIGITS = "0123456789"


def parse_short_spec(
    spec: str,
    quiet: bool = False,
    concat_numeric: bool = False,
) -> ShortOptionSpec:
    """Parse a short-option spec such as ``"ab:c::"``.

    Leading ``:`` and ``+`` characters are flags (quiet and require-order)
    and may come in either order. When concat_numeric is set and the spec
    defines no digit, all ten digits are added as argument-less options.
    """
    index = 0
    require_order = False
    while index < len(spec) and spec[index] in ":+":
        if spec[index] == ":":
            quiet = True
        else:
            require_order = True
        index += 1

    letters: dict[str, str] = {}
    while index < len(spec):
        letter = spec[index]
        index += 1
        if letter == ":":
            continue
        arity = NO_ARGUMENT
        if spec.startswith("::", index):
            arity = OPTIONAL_ARGUMENT
            index += 2
        elif spec.startswith(":", index):
            arity = REQUIRED_ARGUMENT
            index += 1
        letters.setdefault(letter, arity)

    if concat_numeric and not any(digit in letters for digit in DIGITS):
        for digit in DIGITS:
            letters[digit] = NO_ARGUMENT

    return ShortOptionSpec(letters=letters, quiet=quiet, require_order=require_order)
