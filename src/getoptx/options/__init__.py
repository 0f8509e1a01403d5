"""Short- and long-option specifications."""

from .models import (
    ARITIES,
    NO_ARGUMENT,
    OPTIONAL_ARGUMENT,
    REQUIRED_ARGUMENT,
    OptionSpecEntry,
    ShortOptionSpec,
)
from .punctuation import strip_punctuation
from .short import DIGITS, parse_short_spec
from .table import LongOptionTable
from .tokenizer import tokenize_longopt_spec

__all__ = [
    "ARITIES",
    "DIGITS",
    "LongOptionTable",
    "NO_ARGUMENT",
    "OPTIONAL_ARGUMENT",
    "OptionSpecEntry",
    "REQUIRED_ARGUMENT",
    "ShortOptionSpec",
    "parse_short_spec",
    "strip_punctuation",
    "tokenize_longopt_spec",
]
