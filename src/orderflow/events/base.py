"""
Domain events journaled by aggregates.

Events are never replayed to rebuild an order. They are an append-only
journal of what happened to it, drained by the repository on save so it can
be written to an outbox or published.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Self
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DomainEvent(BaseModel):
    """
    Immutable record of one aggregate mutation.

    ``event_type`` defaults to the class name, so subclasses only declare
    their payload fields.

    Attributes:
        event_id: Identity of this event
        event_type: Name consumers dispatch on
        occurred_at: UTC time the mutation happened
        aggregate_id: Aggregate that was mutated
        aggregate_type: Kind of aggregate, e.g. "Order"
        aggregate_version: Aggregate version reached by this mutation
        metadata: Free-form context such as a request or user id

    Example:
        >>> class OrderArchived(DomainEvent):
        ...     aggregate_type: str = "Order"
        ...     reason: str
        >>> OrderArchived(aggregate_id=order.id, reason="duplicate").event_type
        'OrderArchived'
    """

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    event_type: str = ""
    occurred_at: datetime = Field(default_factory=_utcnow)

    aggregate_id: UUID
    aggregate_type: str
    aggregate_version: int = Field(default=1, ge=1)

    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _default_event_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("event_type"):
            return {**data, "event_type": cls.__name__}
        return data

    def with_metadata(self, **kwargs: Any) -> Self:
        """Return a copy whose metadata also holds ``kwargs``."""
        return self.model_copy(update={"metadata": {**self.metadata, **kwargs}})

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation, e.g. for an outbox row."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """
        Rebuild an event from `to_dict()` output.

        Raises:
            ValidationError: If ``data`` does not fit the event's fields
        """
        return cls.model_validate(data)

    def __str__(self) -> str:
        return (
            f"{self.event_type}(event_id={self.event_id}, "
            f"aggregate_id={self.aggregate_id}, "
            f"version={self.aggregate_version})"
        )


__all__ = [
    "DomainEvent",
]
