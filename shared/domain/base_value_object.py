"""
Value object base class.
"""
from abc import ABC
from dataclasses import dataclass, fields, replace
from typing import Any, Tuple


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Immutable value compared by its dataclass fields.

    Subclasses are declared ``@dataclass(frozen=True, eq=False)`` so that
    equality and hashing stay the ones defined here.
    """

    def _values(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in fields(self) if f.compare)

    def with_changes(self, **changes) -> 'ValueObject':
        """Copy of this value with some fields replaced."""
        return replace(self, **changes)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._values())
