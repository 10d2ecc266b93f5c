"""Read projections over recorded purchases."""

from datetime import date as date_type
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db.models import (
    Count,
    DecimalField,
    OuterRef,
    Prefetch,
    QuerySet,
    Subquery,
    Sum,
    Value,
)
from django.db.models.functions import Coalesce

from apps.common.money import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS
from apps.purchases.models import (
    PurchaseChannel,
    PurchaseLine,
    PurchasePayment,
    PurchaseRecord,
)

MONEY_OUTPUT = DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)


def _scoped(channel: str, company_id: UUID, godown_id: UUID) -> QuerySet[PurchaseRecord]:
    return PurchaseRecord.objects.filter(
        channel=channel,
        company_id=company_id,
        godown_id=godown_id,
    )


def list_feriwala_purchases(
    *,
    company_id: UUID,
    godown_id: UUID,
    date: Optional[date_type] = None
) -> QuerySet[PurchaseRecord]:
    """
    Feriwala purchases on or before ``date`` (all when omitted), newest
    first, with their lines prefetched.
    """
    queryset = _scoped(PurchaseChannel.FERIWALA, company_id, godown_id)
    if date:
        queryset = queryset.filter(date__lte=date)

    return (
        queryset
        .prefetch_related(Prefetch('lines', queryset=PurchaseLine.objects.order_by('material')))
        .order_by('-date', '-created_at')
    )


def list_kabadiwala_purchases(
    *,
    company_id: UUID,
    godown_id: UUID
) -> QuerySet[PurchaseRecord]:
    """
    Kabadiwala purchases, newest first, annotated with:

    - items_count: Number of lines
    - total_weight: Sum of line weights
    - scrap_total: Sum of line amounts
    - total_paid: Sum of payments
    """
    paid_subquery = (
        PurchasePayment.objects
        .filter(purchase=OuterRef('pk'))
        .values('purchase')
        .annotate(total=Sum('amount'))
        .values('total')
    )

    return (
        _scoped(PurchaseChannel.KABADIWALA, company_id, godown_id)
        .annotate(
            items_count=Count('lines'),
            total_weight=Coalesce(
                Sum('lines__weight'),
                Value(Decimal('0')),
                output_field=DecimalField(max_digits=15, decimal_places=3)
            ),
            scrap_total=Coalesce(Sum('lines__amount'), Value(Decimal('0')), output_field=MONEY_OUTPUT),
            total_paid=Coalesce(
                Subquery(paid_subquery, output_field=MONEY_OUTPUT),
                Value(Decimal('0')),
                output_field=MONEY_OUTPUT
            ),
        )
        .order_by('-date', '-created_at')
    )


def list_kabadiwala_owner_entries(
    *,
    company_id: UUID,
    godown_id: UUID,
    date: Optional[date_type] = None
) -> QuerySet[PurchaseLine]:
    """
    Flat line-level view for the owner: one row per purchased material,
    for the exact ``date`` when given.
    """
    queryset = PurchaseLine.objects.filter(
        purchase__channel=PurchaseChannel.KABADIWALA,
        purchase__company_id=company_id,
        purchase__godown_id=godown_id,
    )
    if date:
        queryset = queryset.filter(purchase__date=date)

    return (
        queryset
        .select_related('purchase')
        .order_by('-purchase__date', '-purchase__created_at', 'material')
    )
