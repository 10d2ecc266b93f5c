"""
Line pricing and payment classification.

All arithmetic is done on ``Decimal``; nothing here ever touches a float
except to convert it through ``str()`` on the way in.
"""

from decimal import Decimal, InvalidOperation

from apps.common.money import ZERO, fits_money_column, parse_decimal
from apps.common.outcomes import Failure, Outcome, Success
from apps.purchases.models import PaymentStatus
from .exceptions import PurchaseValidationError

# Stored precision of PurchaseLine.weight
WEIGHT_STEP = Decimal("0.001")


class RunningTotal:
    """Accumulator for the amounts of a purchase's lines."""

    def __init__(self, start: Decimal = ZERO):
        self.value = start

    def add(self, amount: Decimal) -> Decimal:
        self.value += amount
        return self.value

    def __repr__(self):
        return f"RunningTotal({self.value})"


def price_line(quantity, rate, running_total: RunningTotal) -> Outcome:
    """
    Price one line as ``quantity * rate`` and add it to ``running_total``.

    Args:
        quantity: Weight in kg (Decimal, int or numeric string)
        rate: Unit rate from the vendor's rate card
        running_total: Accumulator shared by all lines of the purchase

    Returns:
        Success((weight, amount)) or Failure(PurchaseValidationError) when the
        quantity is missing, not a number, or not positive, or when the
        amount or new total would not fit a money column.
    """
    try:
        weight = parse_decimal(quantity)
    except ValueError as e:
        return Failure(PurchaseValidationError(f"Invalid weight: {e}"))

    if weight <= 0:
        return Failure(PurchaseValidationError("Weight must be greater than zero"))

    try:
        exact = weight == weight.quantize(WEIGHT_STEP)
    except InvalidOperation:
        exact = False
    if not exact:
        return Failure(PurchaseValidationError("Weight allows at most 3 decimal places"))

    amount = weight * parse_decimal(rate)
    if not fits_money_column(amount):
        return Failure(PurchaseValidationError("Line amount is too large"))
    if not fits_money_column(running_total.value + amount):
        return Failure(PurchaseValidationError("Purchase total is too large"))
    running_total.add(amount)
    return Success((weight, amount))


def classify_payment(paid, total) -> PaymentStatus:
    """
    Payment status as a function of amount paid and amount due.

    >>> classify_payment(Decimal('40'), Decimal('100'))
    <PaymentStatus.PARTIAL: 'partial'>
    """
    paid = parse_decimal(paid)
    total = parse_decimal(total)

    if paid >= total:
        return PaymentStatus.PAID
    if paid > 0:
        return PaymentStatus.PARTIAL
    return PaymentStatus.PENDING
