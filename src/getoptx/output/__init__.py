"""Output reassembly and quoting."""

from .builder import MISSING_ARGUMENT_MARKER, UNRECOGNIZED_OPTION_MARKER, OutputBuilder
from .quoting import single_quote

__all__ = [
    "MISSING_ARGUMENT_MARKER",
    "OutputBuilder",
    "UNRECOGNIZED_OPTION_MARKER",
    "single_quote",
]
