"""Value types passed through the purchase workflow."""

from dataclasses import dataclass, field
from datetime import date as date_type
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from uuid import UUID


class PurchaseState(str, Enum):
    STARTED = 'started'
    VENDOR_RESOLVED = 'vendor_resolved'
    LINES_PRICED = 'lines_priced'
    TOTAL_FINALIZED = 'total_finalized'
    PAYMENT_CLASSIFIED = 'payment_classified'
    LEDGERED = 'ledgered'
    COMMITTED = 'committed'
    ABORTED = 'aborted'


@dataclass(frozen=True)
class LineItem:
    scrap_type_id: UUID
    weight: object


@dataclass(frozen=True)
class PurchaseRequest:
    """
    One purchase as submitted by the godown.

    ``payment_amount``, ``payment_mode``, ``note`` and ``date`` fall back to
    0, cash, '' and today when omitted.
    """

    company_id: UUID
    godown_id: UUID
    vendor_id: UUID
    lines: List[LineItem] = field(default_factory=list)
    account_id: Optional[UUID] = None
    payment_amount: object = None
    payment_mode: Optional[str] = None
    note: str = ''
    date: Optional[date_type] = None


@dataclass(frozen=True)
class ResolvedRate:
    scrap_type_id: UUID
    rate: Decimal
    material_type: str


@dataclass(frozen=True)
class PurchaseReceipt:
    purchase_id: UUID
    total_amount: Decimal
    vendor_name: str
    payment_status: Optional[str] = None
