"""Outcomes returned by the use-case handlers.

A missing product or a rejected payload is an ordinary answer, not an
error, so handlers return one of these instead of raising. Adapters map
each variant to a status code or a message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    product_id: int


@dataclass(frozen=True)
class ValidationFailed:
    """One or more fields broke a rule; keyed by wire field name."""

    errors: dict[str, list[str]] = field(default_factory=dict)

