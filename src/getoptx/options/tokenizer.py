"""Tokenizer for free-form long-option spec strings."""

from __future__ import annotations

import re
from collections.abc import Iterator

from getoptx.options.models import NO_ARGUMENT, OPTIONAL_ARGUMENT, REQUIRED_ARGUMENT

_SEPARATOR_RE = re.compile(r"[ \t\r\n,|]+")


def tokenize_longopt_spec(spec: str) -> Iterator[tuple[str, str]]:
    """Yield ``(name, arity)`` pairs from a long-option spec string.

    Options are separated by runs of white space, commas or pipes. Each may
    start with ``--``; a trailing ``:`` marks a required argument and a
    trailing ``::`` an optional one. Tokens that end up empty are skipped.
    Names are yielded unvalidated; rejecting bad names is the table's job.
    """
    for token in _SEPARATOR_RE.split(spec):
        if not token:
            continue
        if len(token) >= 3 and token.startswith("--"):
            token = token[2:]
        arity = NO_ARGUMENT
        if len(token) >= 3 and token.endswith("::"):
            arity = OPTIONAL_ARGUMENT
            token = token[:-2]
        elif len(token) >= 2 and token.endswith(":"):
            arity = REQUIRED_ARGUMENT
            token = token[:-1]
        if token:
            yield token, arity
