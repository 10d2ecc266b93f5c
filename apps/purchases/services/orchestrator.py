"""
Purchase transaction workflow.

A purchase is recorded as one all-or-nothing unit::

    started -> vendor_resolved -> lines_priced -> total_finalized
            -> [payment_classified] -> [ledgered] -> committed

``aborted`` can be reached from every state before ``committed``. On abort the
storage scope is rolled back explicitly, so no header, line, payment, ledger
entry or balance change survives, and the caller gets the ``Failure``.

Usage::

    outcome = add_kabadiwala_purchase(PurchaseRequest(
        company_id=company.id,
        godown_id=godown.id,
        vendor_id=vendor.id,
        lines=[LineItem(scrap_type_id=iron.id, weight='12.5')],
        payment_amount='100',
        account_id=cash_box.id,
    ))
    if outcome.ok:
        receipt = outcome.value
"""

import logging
from typing import List, Optional

from django.db import DatabaseError

from apps.common.outcomes import Failure, Outcome, Success
from apps.ledger.services.posting import post_ledger_entry
from apps.purchases.models import PurchaseChannel
from apps.purchases.storage import DjangoPurchaseStorage
from apps.vendors.services.exceptions import VendorNotFoundError
from .exceptions import StorageFailureError
from .recording import normalize_request, record_purchase
from .types import PurchaseReceipt, PurchaseRequest, PurchaseState

logger = logging.getLogger(__name__)


LEDGER_CATEGORIES = {
    PurchaseChannel.FERIWALA: 'feriwala purchase',
    PurchaseChannel.KABADIWALA: 'kabadiwala payment',
}


class PurchaseTransaction:
    """
    Runs one purchase through the workflow inside a single storage scope.

    Args:
        storage: Object whose ``atomic()`` yields a purchase storage scope
        channel: PurchaseChannel value. Feriwala purchases are paid in full
            and always ledgered; kabadiwala purchases are ledgered for the
            amount paid, when an account is given and the amount is positive.

    Attributes:
        state: Last PurchaseState reached
        history: Every PurchaseState reached, in order
    """

    def __init__(self, storage, *, channel: str = PurchaseChannel.KABADIWALA):
        self.storage = storage
        self.channel = channel
        self.state: Optional[PurchaseState] = None
        self.history: List[PurchaseState] = []

    def run(self, request: PurchaseRequest) -> Outcome:
        """Record the purchase. Returns Success(PurchaseReceipt) or Failure."""
        self.history = []
        self._advance(PurchaseState.STARTED)

        try:
            with self.storage.atomic() as scope:
                outcome = self._execute(scope, request)
                if outcome.failed:
                    scope.rollback()
        except DatabaseError:
            logger.exception(
                "Storage failure recording %s purchase for vendor %s",
                self.channel, request.vendor_id
            )
            outcome = Failure(StorageFailureError("Could not save purchase"))

        if outcome.failed:
            failed_in = self.state
            self._advance(PurchaseState.ABORTED)
            logger.warning(
                "%s purchase for vendor %s aborted after %s: %s (%s)",
                self.channel, request.vendor_id, failed_in.value,
                outcome.code, outcome.message
            )
            return outcome

        self._advance(PurchaseState.COMMITTED)
        receipt = outcome.value
        logger.info(
            "Committed %s purchase %s from %s, total %s",
            self.channel, receipt.purchase_id, receipt.vendor_name, receipt.total_amount
        )
        return outcome

    def _advance(self, state: PurchaseState) -> None:
        self.state = state
        self.history.append(state)

    def _execute(self, scope, request: PurchaseRequest) -> Outcome:
        normalized = normalize_request(request, channel=self.channel)
        if normalized.failed:
            return normalized
        request = normalized.value

        vendor = scope.get_vendor(request.vendor_id, company_id=request.company_id)
        if vendor is None:
            return Failure(VendorNotFoundError(f"Vendor {request.vendor_id} not found"))
        self._advance(PurchaseState.VENDOR_RESOLVED)

        recorded = record_purchase(
            scope,
            request=request,
            vendor=vendor,
            channel=self.channel,
            on_step=self._advance,
        )
        if recorded.failed:
            return recorded
        purchase = recorded.value

        amount = self._ledger_amount(request, purchase)
        if amount is not None:
            posted = post_ledger_entry(
                scope,
                company_id=request.company_id,
                godown_id=request.godown_id,
                account_id=request.account_id,
                amount=amount,
                category=LEDGER_CATEGORIES[self.channel],
                reference=self._ledger_reference(vendor.name),
                metadata={'purchase_id': str(purchase.id), 'channel': self.channel},
            )
            if posted.failed:
                return posted
            self._advance(PurchaseState.LEDGERED)

        return Success(PurchaseReceipt(
            purchase_id=purchase.id,
            total_amount=purchase.total_amount,
            vendor_name=vendor.name,
            payment_status=purchase.payment_status,
        ))

    def _ledger_amount(self, request: PurchaseRequest, purchase):
        """Amount to post, or None when nothing goes to the ledger."""
        if self.channel == PurchaseChannel.FERIWALA:
            return purchase.total_amount

        paid = request.payment_amount
        if paid <= 0:
            return None
        if not request.account_id:
            # Payment row exists without a ledger trail
            logger.info(
                "Kabadiwala payment of %s for purchase %s has no account; ledger skipped",
                paid, purchase.id
            )
            return None
        return paid

    def _ledger_reference(self, vendor_name: str) -> str:
        if self.channel == PurchaseChannel.FERIWALA:
            return f'Purchase from {vendor_name}'
        return f'Payment to {vendor_name}'


def add_feriwala_purchase(request: PurchaseRequest, storage=None) -> Outcome:
    """Record a feriwala purchase, paid in full from ``request.account_id``."""
    transaction = PurchaseTransaction(
        storage or DjangoPurchaseStorage(),
        channel=PurchaseChannel.FERIWALA,
    )
    return transaction.run(request)


def add_kabadiwala_purchase(request: PurchaseRequest, storage=None) -> Outcome:
    """Record a kabadiwala purchase with an optional (partial) payment."""
    transaction = PurchaseTransaction(
        storage or DjangoPurchaseStorage(),
        channel=PurchaseChannel.KABADIWALA,
    )
    return transaction.run(request)
