"""Shell quoting for reassembled arguments."""

from __future__ import annotations


def single_quote(value: str) -> str:
    """Quote a value so a POSIX shell evaluates it back to the same string."""
    return "'" + value.replace("'", "'\\''") + "'"
