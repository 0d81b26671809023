"""Aggregate root base class."""

from orderflow.aggregates.base import AggregateRoot

__all__ = [
    "AggregateRoot",
]
