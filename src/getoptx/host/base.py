"""Host adapter protocol: the caller's variables, streams and quoting."""

from __future__ import annotations

import re
from typing import Protocol

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class Host(Protocol):
    """Environment a getoptx invocation runs inside."""

    def positional_parameters(self) -> tuple[str, ...]:
        """Return the caller's positional parameters."""

    def script_name(self) -> str | None:
        """Return the name of the running script, if known."""

    def quote(self, value: str) -> str:
        """Quote a value so it can be re-read as shell source."""

    def assign_scalar(self, name: str, value: str) -> bool:
        """Set a scalar variable; return False on failure."""

    def eval_array_assignment(self, expression: str) -> bool:
        """Evaluate a ``name=( ... )`` expression; return False on failure."""

    def write_output(self, text: str) -> None:
        """Write one line of result text."""

    def write_diagnostic(self, message: str) -> None:
        """Write one diagnostic line."""


def is_identifier(name: str) -> bool:
    """Return True when name can be used as a variable name."""
    return _IDENTIFIER_RE.fullmatch(name) is not None


def array_assignment(name: str, body: str) -> str:
    """Return the array-assignment expression for a reassembled string."""
    return f"{name}=( {body} )"
