"""
Aggregate root base class.

An aggregate is mutated in place through its command methods. Each mutation
bumps the version and, unless disabled, journals a DomainEvent that the
repository drains on save.
"""

import logging
from typing import Any, TypeVar
from uuid import UUID, uuid4

from orderflow.events.base import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)


class AggregateRoot:
    """
    Consistency boundary that journals its own mutations.

    Subclasses set ``aggregate_type`` and call `_record()` after changing
    their state.

    Example:
        >>> class Basket(AggregateRoot):
        ...     aggregate_type = "Basket"
        ...
        ...     def rename(self, name: str) -> None:
        ...         self.name = name
        ...         self._record(BasketRenamed, name=name)
        >>> basket = Basket()
        >>> basket.rename("weekly")
        >>> basket.version, len(basket.uncommitted_events)
        (1, 1)
    """

    aggregate_type: str = "Unknown"

    def __init__(self, aggregate_id: UUID | None = None, *, record_events: bool = True) -> None:
        self._aggregate_id = aggregate_id or uuid4()
        self._version = 0
        self._record_events = record_events
        self._pending: list[DomainEvent] = []

    @property
    def aggregate_id(self) -> UUID:
        return self._aggregate_id

    @property
    def version(self) -> int:
        """Number of mutations applied since the aggregate was created."""
        return self._version

    @property
    def uncommitted_events(self) -> list[DomainEvent]:
        """Journaled events not yet drained by a repository (a copy)."""
        return list(self._pending)

    @property
    def has_uncommitted_events(self) -> bool:
        return bool(self._pending)

    def get_next_version(self) -> int:
        return self._version + 1

    def mark_events_as_committed(self) -> None:
        self._pending.clear()

    def clear_uncommitted_events(self) -> list[DomainEvent]:
        """Drain the journal, returning what was in it."""
        events, self._pending = self._pending, []
        return events

    def _record(self, event_type: type[TEvent], **payload: Any) -> TEvent | None:
        """
        Bump the version and journal ``event_type(**payload)``.

        Returns:
            The journaled event, or None when recording is disabled
        """
        self._version += 1
        if not self._record_events:
            return None

        event = event_type(
            aggregate_id=self._aggregate_id,
            aggregate_type=self.aggregate_type,
            aggregate_version=self._version,
            **payload,
        )
        self._pending.append(event)
        logger.debug(
            "%s %s recorded %s",
            self.aggregate_type,
            self._aggregate_id,
            event.event_type,
            extra={
                "aggregate_id": str(self._aggregate_id),
                "aggregate_type": self.aggregate_type,
                "event_type": event.event_type,
                "version": self._version,
            },
        )
        return event

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateRoot):
            return NotImplemented
        return self._aggregate_id == other._aggregate_id

    def __hash__(self) -> int:
        return hash(self._aggregate_id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._aggregate_id}, version={self._version})"


__all__ = [
    "AggregateRoot",
]
