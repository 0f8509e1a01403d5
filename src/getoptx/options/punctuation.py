"""Punctuation normalization for long-option names."""

from __future__ import annotations

import string

_PUNCTUATION = frozenset(string.punctuation)


def strip_punctuation(name: str) -> str:
    """Return name with every ASCII punctuation character removed."""
    return "".join(char for char in name if char not in _PUNCTUATION)
