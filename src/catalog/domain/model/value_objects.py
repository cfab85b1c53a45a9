"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Generic, TypeVar

from catalog.domain.exceptions import ValidationError

T = TypeVar("T")

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """A value that may be absent.

    Used for patch fields: ``Maybe.absent()`` means "leave unchanged",
    while ``Maybe.of(0)`` or ``Maybe.of("")`` are real values that must be
    applied. Plain ``None`` cannot tell those two cases apart.
    """

    value: T | None = None
    present: bool = False

    @staticmethod
    def of(value: T) -> Maybe[T]:
        return Maybe(value=value, present=True)

    @staticmethod
    def absent() -> Maybe[T]:
        return Maybe()

    @staticmethod
    def from_optional(value: T | None) -> Maybe[T]:
        """Treat ``None`` as absent, anything else as present."""
        return Maybe.absent() if value is None else Maybe.of(value)

    def or_else(self, default: T) -> T:
        return self.value if self.present else default  # type: ignore[return-value]


def to_price(amount: str | float | int | Decimal) -> Decimal:
    """Coerce to a Decimal rounded to whole cents."""
    try:
        return Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid price: {amount!r}") from exc
