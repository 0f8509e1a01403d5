"""Host for a standalone process whose output is eval'd by a calling shell."""

from __future__ import annotations

from typing import TextIO

from getoptx.host.base import is_identifier
from getoptx.output import single_quote


class ShellSourceHost:
    """Emit assignments as shell source on the output stream."""

    def __init__(
        self,
        out_stream: TextIO,
        err_stream: TextIO,
        positional: tuple[str, ...] = (),
    ) -> None:
        self._out = out_stream
        self._err = err_stream
        self._positional = positional

    def positional_parameters(self) -> tuple[str, ...]:
        return self._positional

    def script_name(self) -> str | None:
        return None

    def quote(self, value: str) -> str:
        return single_quote(value)

    def assign_scalar(self, name: str, value: str) -> bool:
        if not is_identifier(name):
            return False
        self.write_output(f"{name}={single_quote(value)}")
        return True

    def eval_array_assignment(self, expression: str) -> bool:
        self.write_output(expression)
        return True

    def write_output(self, text: str) -> None:
        self._out.write(f"{text}\n")
        self._out.flush()

    def write_diagnostic(self, message: str) -> None:
        self._err.write(f"{message}\n")
        self._err.flush()
