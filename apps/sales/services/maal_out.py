"""
Maal out (sales) book.

Sales and the payments received for them are recorded per firm; a firm's
outstanding balance is what it was billed minus what it has paid.
"""

import logging
from datetime import date as date_type
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F, QuerySet, Sum
from django.db.models.functions import Coalesce

from apps.common.money import ZERO, fits_money_column, parse_decimal
from apps.ledger.models import PaymentMode
from apps.sales.models import MaalOutSale, MaalOutPayment
from .exceptions import InvalidSaleError

logger = logging.getLogger(__name__)


def _amount(value, field: str, *, allow_zero: bool = False) -> Decimal:
    try:
        amount = parse_decimal(value)
    except ValueError:
        raise InvalidSaleError(f"{field} must be a number")
    if amount < 0 or (amount == 0 and not allow_zero):
        raise InvalidSaleError(
            f"{field} cannot be negative" if allow_zero else f"{field} must be greater than zero"
        )
    return amount


@transaction.atomic
def add_sale(
    *,
    company_id: UUID,
    godown_id: UUID,
    firm_name: str,
    date: date_type,
    weight,
    rate,
    bill_to: str = '',
    gst=ZERO,
    freight=ZERO,
    vehicle_no: str = '',
    payment_type: str = PaymentMode.CREDIT,
) -> MaalOutSale:
    """
    Record a sale. ``amount`` is computed as weight x rate.

    Raises:
        InvalidSaleError: If firm name is empty, weight or rate is not
            positive, or gst/freight is negative
    """
    if not firm_name or not firm_name.strip():
        raise InvalidSaleError("Firm name is required")

    weight = _amount(weight, 'Weight')
    rate = _amount(rate, 'Rate')
    gst = _amount(gst or ZERO, 'GST', allow_zero=True)
    freight = _amount(freight or ZERO, 'Freight', allow_zero=True)
    if not fits_money_column(weight * rate):
        raise InvalidSaleError("Sale amount is too large")

    sale = MaalOutSale.objects.create(
        company_id=company_id,
        godown_id=godown_id,
        firm_name=firm_name.strip(),
        bill_to=bill_to,
        date=date,
        weight=weight,
        rate=rate,
        amount=weight * rate,
        gst=gst,
        freight=freight,
        vehicle_no=vehicle_no,
        payment_type=payment_type,
    )

    logger.info("Recorded sale %s to %s: %s", sale.id, sale.firm_name, sale.amount)
    return sale


def list_sales(
    *,
    company_id: UUID,
    godown_id: UUID,
    date: Optional[date_type] = None
) -> QuerySet[MaalOutSale]:
    """Sales of a godown, newest first, for the exact ``date`` when given."""
    queryset = MaalOutSale.objects.filter(company_id=company_id, godown_id=godown_id)
    if date:
        queryset = queryset.filter(date=date)
    return queryset.order_by('-date', '-created_at')


@transaction.atomic
def add_sale_payment(
    *,
    company_id: UUID,
    godown_id: UUID,
    firm_name: str,
    amount,
    date: date_type
) -> MaalOutPayment:
    """
    Record money received from a firm.

    Raises:
        InvalidSaleError: If firm name is empty or amount is not positive
    """
    if not firm_name or not firm_name.strip():
        raise InvalidSaleError("Firm name is required")

    payment = MaalOutPayment.objects.create(
        company_id=company_id,
        godown_id=godown_id,
        firm_name=firm_name.strip(),
        amount=_amount(amount, 'Amount'),
        date=date,
    )

    logger.info("Recorded payment %s from %s: %s", payment.id, payment.firm_name, payment.amount)
    return payment


def list_sale_payments(
    *,
    company_id: UUID,
    godown_id: UUID,
    date: Optional[date_type] = None
) -> QuerySet[MaalOutPayment]:
    queryset = MaalOutPayment.objects.filter(company_id=company_id, godown_id=godown_id)
    if date:
        queryset = queryset.filter(date=date)
    return queryset.order_by('-date', '-created_at')


def firm_outstanding(*, company_id: UUID, godown_id: UUID, firm_name: str) -> dict:
    """
    Billed, received and outstanding amounts for one firm.

    Billed counts amount + gst + freight of every sale. Firm names are
    matched case-insensitively.

    Returns:
        Dictionary with firm_name, billed, received, outstanding
    """
    firm_name = firm_name.strip()

    billed = MaalOutSale.objects.filter(
        company_id=company_id,
        godown_id=godown_id,
        firm_name__iexact=firm_name,
    ).aggregate(
        total=Coalesce(Sum(F('amount') + F('gst') + F('freight')), ZERO)
    )['total']

    received = MaalOutPayment.objects.filter(
        company_id=company_id,
        godown_id=godown_id,
        firm_name__iexact=firm_name,
    ).aggregate(
        total=Coalesce(Sum('amount'), ZERO)
    )['total']

    return {
        'firm_name': firm_name,
        'billed': billed,
        'received': received,
        'outstanding': billed - received,
    }
