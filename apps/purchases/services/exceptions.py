"""Domain exceptions for purchases app."""


class PurchaseServiceError(Exception):
    """Base exception for all purchase service errors."""
    code = 'purchase_error'


class PurchaseValidationError(PurchaseServiceError):
    """Purchase input is missing or malformed."""
    code = 'invalid_purchase'


class EmptyLineSetError(PurchaseValidationError):
    """A purchase needs at least one scrap line."""
    code = 'empty_line_set'


class RateNotFoundError(PurchaseServiceError):
    """Vendor has no rate on file for a scrap type."""
    code = 'rate_not_found'

    def __init__(self, scrap_type_id, message=None):
        self.scrap_type_id = scrap_type_id
        super().__init__(
            message or f"Vendor does not have rate for this scrap_type_id: {scrap_type_id}"
        )


class StorageFailureError(PurchaseServiceError):
    """The database rejected the purchase; nothing was kept."""
    code = 'storage_failure'
