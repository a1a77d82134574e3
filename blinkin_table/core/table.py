"""The read-only lookup table between pattern labels and duty values.

ColorTable is built from the Pattern enumeration and never changes after
construction. get_table() hands out one process-wide instance; the first call
builds it under a lock, later calls only read.
"""

import threading
from collections.abc import Iterator
from dataclasses import dataclass
from types import MappingProxyType

from blinkin_table.core.patterns import Category, Pattern
from blinkin_table.core.types import NotFound


@dataclass(frozen=True)
class ColorEntry:
    """One row of the colour table."""

    name: str  # kebab-case label
    value: float  # duty value, -0.99..0.99
    pattern: Pattern


class ColorTable:
    """Constant-time name <-> value lookups over every Pattern, in vendor order."""

    def __init__(self) -> None:
        entries = tuple(ColorEntry(p.label, p.as_percentage(), p) for p in sorted(Pattern, key=lambda p: p.code))
        by_name = {e.name: e for e in entries}
        by_value = {e.value: e for e in entries}
        if len(by_name) != len(entries) or len(by_value) != len(entries):
            raise ValueError('colour table is not one-to-one')
        self._entries = entries
        self._by_name = MappingProxyType(by_name)
        self._by_value = MappingProxyType(by_value)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        try:
            self._entry(name)
        except NotFound:
            return False
        return True

    def __iter__(self) -> Iterator[str]:
        return (e.name for e in self._entries)

    def _entry(self, name: Pattern | str) -> ColorEntry:
        key = name.label if isinstance(name, Pattern) else name
        try:
            return self._by_name[key]
        except (KeyError, TypeError):
            raise NotFound(f'Unknown pattern: {name!r}') from None

    def value_of(self, name: Pattern | str) -> float:
        """Duty value for a Pattern or its exact label."""
        return self._entry(name).value

    def pattern_of(self, name: Pattern | str) -> Pattern:
        return self._entry(name).pattern

    def name_of(self, value: float) -> str:
        """Label of the pattern with exactly this duty value."""
        try:
            return self._by_value[value].name
        except (KeyError, TypeError):
            raise NotFound(f'No pattern has value {value!r}') from None

    def all_entries(self) -> tuple[ColorEntry, ...]:
        return self._entries

    def entries_in(self, category: Category) -> tuple[ColorEntry, ...]:
        return tuple(e for e in self._entries if e.pattern.category is category)


_table: ColorTable | None = None
_lock = threading.Lock()


def get_table() -> ColorTable:
    """Return the shared table, building it on first use."""
    global _table
    if _table is None:
        with _lock:
            if _table is None:
                _table = ColorTable()
    return _table
