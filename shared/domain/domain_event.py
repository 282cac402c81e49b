"""
Domain event base class.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID, uuid4

_ENVELOPE_FIELDS = ('event_id', 'occurred_at')


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Something that happened to an aggregate, recorded until it is saved."""
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def payload(self) -> Dict[str, Any]:
        """Event specific fields, without id and timestamp."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _ENVELOPE_FIELDS
        }
