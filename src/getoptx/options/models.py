"""Typed models for option specifications."""

from __future__ import annotations

from dataclasses import dataclass

NO_ARGUMENT = "none"
REQUIRED_ARGUMENT = "required"
OPTIONAL_ARGUMENT = "optional"

ARITIES = (NO_ARGUMENT, REQUIRED_ARGUMENT, OPTIONAL_ARGUMENT)


@dataclass(slots=True)
class OptionSpecEntry:
    """Single long option and its argument arity."""

    name: str
    arity: str


@dataclass(slots=True, frozen=True)
class ShortOptionSpec:
    """Parsed getopt-style short-option spec."""

    letters: dict[str, str]
    quiet: bool = False
    require_order: bool = False

    def arity_of(self, letter: str) -> str | None:
        """Return the arity of an option letter, or None when it is not defined."""
        return self.letters.get(letter)
