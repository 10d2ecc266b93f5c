"""
Purchases services - Business logic layer.

- Rate lookup and line pricing
- Payment classification
- Purchase recording and the transactional purchase workflow
- Purchase list projections
"""

from .types import (
    LineItem,
    PurchaseRequest,
    PurchaseReceipt,
    PurchaseState,
    ResolvedRate,
)

from .rates import resolve_rate

from .pricing import (
    RunningTotal,
    price_line,
    classify_payment,
)

from .recording import (
    normalize_request,
    record_purchase,
)

from .orchestrator import (
    PurchaseTransaction,
    add_feriwala_purchase,
    add_kabadiwala_purchase,
)

from .queries import (
    list_feriwala_purchases,
    list_kabadiwala_purchases,
    list_kabadiwala_owner_entries,
)

from .exceptions import (
    PurchaseServiceError,
    PurchaseValidationError,
    EmptyLineSetError,
    RateNotFoundError,
    StorageFailureError,
)

__all__ = [
    'LineItem',
    'PurchaseRequest',
    'PurchaseReceipt',
    'PurchaseState',
    'ResolvedRate',
    'resolve_rate',
    'RunningTotal',
    'price_line',
    'classify_payment',
    'normalize_request',
    'record_purchase',
    'PurchaseTransaction',
    'add_feriwala_purchase',
    'add_kabadiwala_purchase',
    'list_feriwala_purchases',
    'list_kabadiwala_purchases',
    'list_kabadiwala_owner_entries',
    'PurchaseServiceError',
    'PurchaseValidationError',
    'EmptyLineSetError',
    'RateNotFoundError',
    'StorageFailureError',
]
