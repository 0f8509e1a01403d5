"""In-process host keeping variables in dictionaries."""

from __future__ import annotations

import re
import shlex
from dataclasses import dataclass, field

from getoptx.host.base import is_identifier
from getoptx.output import single_quote

_ARRAY_ASSIGNMENT_RE = re.compile(r"(?P<name>[^=\s]+)=\(\s(?P<body>.*)\s\)", re.DOTALL)


@dataclass(slots=True)
class InMemoryHost:
    """Host for embedding and tests; array expressions are evaluated with shlex."""

    positional: tuple[str, ...] = ()
    name: str | None = None
    scalars: dict[str, str] = field(default_factory=dict)
    arrays: dict[str, list[str]] = field(default_factory=dict)
    output: list[str] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)

    def positional_parameters(self) -> tuple[str, ...]:
        return self.positional

    def script_name(self) -> str | None:
        return self.name

    def quote(self, value: str) -> str:
        return single_quote(value)

    def assign_scalar(self, name: str, value: str) -> bool:
        if not is_identifier(name):
            return False
        self.scalars[name] = value
        return True

    def eval_array_assignment(self, expression: str) -> bool:
        match = _ARRAY_ASSIGNMENT_RE.fullmatch(expression)
        if match is None or not is_identifier(match.group("name")):
            return False
        try:
            values = shlex.split(match.group("body"))
        except ValueError:
            return False
        self.arrays[match.group("name")] = values
        return True

    def write_output(self, text: str) -> None:
        self.output.append(text)

    def write_diagnostic(self, message: str) -> None:
        self.diagnostics.append(message)
