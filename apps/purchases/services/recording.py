"""
Purchase recording.

Writes one purchase header, its priced lines and, for kabadiwala purchases,
the payment status and the optional payment row. Runs inside a storage scope
opened by the caller; on failure the caller rolls that scope back.
"""

import dataclasses
import logging
from typing import Callable, Optional

from django.conf import settings
from django.utils import timezone

from apps.common.money import ZERO, parse_decimal
from apps.common.outcomes import Failure, Outcome, Success
from apps.ledger.models import PaymentMode
from apps.purchases.models import PaymentStatus, PurchaseChannel
from .exceptions import EmptyLineSetError, PurchaseValidationError
from .pricing import RunningTotal, classify_payment, price_line
from .rates import resolve_rate
from .types import PurchaseRequest, PurchaseState

logger = logging.getLogger(__name__)


def normalize_request(request: PurchaseRequest, *, channel: str) -> Outcome:
    """
    Validate a purchase request and fill in its defaults.

    Feriwala purchases must name a funding account. Kabadiwala purchases get
    payment amount 0, the default payment mode and today's date when omitted.
    Safe to call more than once on the same request.

    Returns:
        Success(PurchaseRequest) or Failure(PurchaseValidationError)
    """
    if not request.lines:
        return Failure(EmptyLineSetError("At least one scrap line is required"))

    if channel not in PurchaseChannel.values:
        return Failure(PurchaseValidationError(f"Unknown purchase channel {channel!r}"))

    if channel == PurchaseChannel.FERIWALA and not request.account_id:
        return Failure(PurchaseValidationError("Account ID is required"))

    payment_amount = None
    payment_mode = None

    if channel == PurchaseChannel.KABADIWALA:
        raw_amount = request.payment_amount if request.payment_amount is not None else ZERO
        try:
            payment_amount = parse_decimal(raw_amount)
        except ValueError as e:
            return Failure(PurchaseValidationError(f"Invalid payment amount: {e}"))
        if payment_amount < 0:
            return Failure(PurchaseValidationError("Payment amount cannot be negative"))

        payment_mode = request.payment_mode or settings.SCRAPYARD_DEFAULT_PAYMENT_MODE
        if payment_mode not in PaymentMode.values:
            return Failure(PurchaseValidationError(f"Unknown payment mode {payment_mode!r}"))

    return Success(dataclasses.replace(
        request,
        payment_amount=payment_amount,
        payment_mode=payment_mode,
        note=request.note or '',
        date=request.date or timezone.localdate(),
    ))


def record_purchase(
    scope,
    *,
    request: PurchaseRequest,
    vendor,
    channel: str,
    on_step: Optional[Callable[[PurchaseState], None]] = None,
) -> Outcome:
    """
    Persist a purchase header with its lines (and payment, for kabadiwala).

    The header is created with a zero total. Each line is priced from the
    vendor's rate card and saved, then the header total is overwritten with
    the sum of the line amounts. For kabadiwala purchases the payment status
    is derived from the amount paid and a payment row is written when that
    amount is positive.

    Args:
        scope: Open purchase storage scope
        request: Purchase request
        vendor: Resolved vendor
        channel: PurchaseChannel value
        on_step: Called with each PurchaseState reached

    Returns:
        Success(purchase header) or the first Failure met (validation, missing
        rate). Rows already written are left for the caller's rollback.
    """
    normalized = normalize_request(request, channel=channel)
    if normalized.failed:
        return normalized
    request = normalized.value

    def step(state):
        if on_step is not None:
            on_step(state)

    deferred = channel == PurchaseChannel.KABADIWALA

    purchase = scope.create_purchase_header(
        channel=channel,
        company_id=request.company_id,
        godown_id=request.godown_id,
        vendor=vendor,
        vendor_name=vendor.name,
        date=request.date,
        total_amount=ZERO,
        payment_status=PaymentStatus.PENDING if deferred else None,
        payment_mode=request.payment_mode,
    )

    running_total = RunningTotal()

    for line in request.lines:
        resolved = resolve_rate(
            scope,
            vendor_id=vendor.id,
            scrap_type_id=line.scrap_type_id
        )
        if resolved.failed:
            return resolved
        rate = resolved.value

        priced = price_line(line.weight, rate.rate, running_total)
        if priced.failed:
            return priced
        weight, amount = priced.value

        scope.create_purchase_line(
            purchase=purchase,
            scrap_type_id=rate.scrap_type_id,
            material=rate.material_type,
            weight=weight,
            rate=rate.rate,
            amount=amount,
        )

    step(PurchaseState.LINES_PRICED)

    scope.finalize_purchase_total(purchase, running_total.value)
    step(PurchaseState.TOTAL_FINALIZED)

    if deferred:
        paid = request.payment_amount
        status = classify_payment(paid, running_total.value)
        scope.set_payment_status(purchase, status, request.payment_mode)

        if paid > 0:
            scope.create_purchase_payment(
                purchase=purchase,
                amount=paid,
                mode=request.payment_mode,
                note=request.note,
                date=request.date,
            )
        step(PurchaseState.PAYMENT_CLASSIFIED)

    logger.debug(
        "Recorded %s purchase %s: %d lines, total %s",
        channel, purchase.id, len(request.lines), running_total.value
    )
    return Success(purchase)
