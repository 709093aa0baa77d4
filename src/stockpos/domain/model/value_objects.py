"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from stockpos.domain.exceptions import ValidationError


def _to_decimal(value: str | float | int | Decimal, label: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {label}: {value!r}")
    return result


def whole_number(value: object, label: str, *, minimum: int = 0) -> int:
    """Coerce *value* to an int, rejecting fractions and values below *minimum*.

    Accepts ints, integral Decimals/floats and numeric strings such as
    ``"12"`` so CLI and JSON input can be passed straight through.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        amount = _to_decimal(value, label.lower())  # type: ignore[arg-type]
        if amount != amount.to_integral_value():
            raise ValidationError(f"{label} must be a whole number, got {value!r}")
        number = int(amount)

    if number < minimum:
        if minimum == 0:
            raise ValidationError(f"{label} cannot be negative")
        if minimum == 1:
            raise ValidationError(f"{label} must be positive")
        raise ValidationError(f"{label} must be at least {minimum}")
    return number


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Zero is a valid price.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Weight:
    """A non-negative weight in kilograms."""

    kilograms: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.kilograms, Decimal):
            raise ValidationError(
                f"Weight must be a Decimal, got {type(self.kilograms).__name__}"
            )
        if not self.kilograms.is_finite():
            raise ValidationError(f"Weight must be finite, got {self.kilograms}")
        if self.kilograms < Decimal("0"):
            raise ValidationError(f"Weight cannot be negative, got {self.kilograms}")

    def __add__(self, other: Weight) -> Weight:
        return Weight(self.kilograms + other.kilograms)

    def __mul__(self, factor: int) -> Weight:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Weight by int, got {type(factor).__name__}")
        return Weight(self.kilograms * factor)

    def __str__(self) -> str:
        return f"{self.kilograms:.2f} kg"

    @staticmethod
    def of(kilograms: str | float | int | Decimal) -> Weight:
        return Weight(_to_decimal(kilograms, "weight"))

    @staticmethod
    def zero() -> Weight:
        return Weight(Decimal("0"))
