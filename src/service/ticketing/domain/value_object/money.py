from decimal import Decimal, InvalidOperation
from typing import Union

from src.service.ticketing.domain.ticketing_error import InvalidArgumentError


MoneyLike = Union[Decimal, int, str]


def to_money(value: MoneyLike) -> Decimal:
    """Convert to a non-negative finite Decimal. Floats are refused to avoid binary rounding."""
    if isinstance(value, (float, bool)):
        raise InvalidArgumentError(f'Price must be a decimal amount, got {value!r}')
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidArgumentError(f'Invalid price: {value!r}') from e
    if not amount.is_finite():
        raise InvalidArgumentError(f'Invalid price: {value!r}')
    if amount < 0:
        raise InvalidArgumentError(f'Price cannot be negative, got {amount}')
    return amount
