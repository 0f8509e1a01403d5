"""Host adapters connecting the core to a calling environment."""

from .base import Host, array_assignment, is_identifier
from .memory import InMemoryHost
from .shell import ShellSourceHost

__all__ = [
    "Host",
    "InMemoryHost",
    "ShellSourceHost",
    "array_assignment",
    "is_identifier",
]
