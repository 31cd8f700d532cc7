"""Money value object."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from transfer_engine.domain.exceptions import CurrencyMismatchError, InvalidMoneyError
from transfer_engine.domain.value_objects.currency import Currency


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """
    Coerce a numeric value to Decimal.

    Floats go through ``str`` so that 0.1 becomes Decimal('0.1') rather than
    its binary expansion.

    Raises:
        InvalidMoneyError: If value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidMoneyError(f"not a number: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidMoneyError(f"not a number: {value!r}") from e
    if not result.is_finite():
        raise InvalidMoneyError(f"not a finite number: {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """
    Money value object with currency.

    The amount is kept exactly as given: a balance reported as 99.995 stays
    99.995 so that coverage checks see the real figure. Rounding to the
    currency's minor units (half away from zero) happens only in
    ``rounded``, ``convert`` and the display forms.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        """Validate money amount."""
        object.__setattr__(self, "amount", to_decimal(self.amount))

    def __str__(self) -> str:
        return f"{self.currency.code} {self.rounded().amount}"

    def __repr__(self) -> str:
        return f"Money(amount={self.amount}, currency={self.currency!r})"

    def rounded(self) -> "Money":
        """Return the amount rounded half away from zero to minor units."""
        return Money(
            amount=self.amount.quantize(self.currency.quantum, rounding=ROUND_HALF_UP),
            currency=self.currency,
        )

    def add(self, other: "Money") -> "Money":
        """
        Add two money amounts (must have same currency).

        Raises:
            CurrencyMismatchError: If currencies don't match
        """
        self._validate_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: "Money") -> "Money":
        """
        Subtract other money amount from this one (must have same currency).

        Raises:
            CurrencyMismatchError: If currencies don't match
        """
        self._validate_same_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def convert(self, rate: Decimal, target: Currency) -> "Money":
        """
        Convert into another currency at the given rate.

        Only the product is rounded, to the target currency's minor units.

        Args:
            rate: Units of ``target`` per unit of this currency
            target: Currency to convert into

        Returns:
            New Money instance in the target currency
        """
        return Money(amount=self.amount * to_decimal(rate), currency=target).rounded()

    def format(self) -> str:
        """Grouped display form with the currency symbol, e.g. '1,250.50 ₺'."""
        amount = self.rounded().amount
        return f"{amount:,.{self.currency.minor_units}f} {self.currency.symbol}"

    def _validate_same_currency(self, other: "Money") -> None:
        """Validate that two Money instances have the same currency."""
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)
