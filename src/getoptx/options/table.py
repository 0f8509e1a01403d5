"""Ordered long-option table built from spec strings."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from getoptx.options.models import ARITIES, OptionSpecEntry
from getoptx.options.punctuation import strip_punctuation
from getoptx.options.tokenizer import tokenize_longopt_spec


@dataclass(slots=True)
class LongOptionTable:
    """Long options in insertion order; an entry's position is its stable index."""

    _entries: list[OptionSpecEntry] = field(default_factory=list)
    _positions: dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OptionSpecEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> OptionSpecEntry:
        return self._entries[index]

    def insert(self, name: str, arity: str) -> bool:
        """Insert or update an option; return False when the name is invalid.

        A name already present keeps its index and takes the new arity.
        """
        if arity not in ARITIES:
            raise ValueError(f"Unknown option arity: {arity}")
        if not name or name.startswith("-") or name.endswith(":"):
            return False
        position = self._positions.get(name)
        if position is not None:
            self._entries[position].arity = arity
            return True
        self._positions[name] = len(self._entries)
        self._entries.append(OptionSpecEntry(name=name, arity=arity))
        return True

    def insert_from_spec(self, spec: str, normalize_punctuation: bool = False) -> int:
        """Insert every option in a spec string; return the number of rejected names.

        With normalize_punctuation, a name containing punctuation also
        registers its punctuation-free alias with the same arity. A rejected
        alias (e.g. a name made only of punctuation) is not counted.
        """
        failures = 0
        for name, arity in tokenize_longopt_spec(spec):
            if not self.insert(name, arity):
                failures += 1
                continue
            if not normalize_punctuation:
                continue
            alias = strip_punctuation(name)
            if len(alias) < len(name):
                self.insert(alias, arity)
        return failures

    def match(self, name: str) -> tuple[int | None, tuple[int, ...]]:
        """Resolve a name typed on the command line.

        Returns ``(index, candidates)``: an exact match or a unique prefix
        gives its index, otherwise index is None and candidates lists every
        entry sharing the prefix (empty when nothing matched at all).
        """
        exact = self._positions.get(name)
        if exact is not None:
            return exact, (exact,)
        candidates = tuple(
            index for index, entry in enumerate(self._entries) if entry.name.startswith(name)
        )
        if len(candidates) == 1:
            return candidates[0], candidates
        return None, candidates
