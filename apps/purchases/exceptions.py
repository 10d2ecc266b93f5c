"""
HTTP errors for the purchase endpoints.

Service failures (``apps.purchases.services.exceptions`` and the ledger and
vendor service errors) are translated here, so the status code and message
for each failure kind are decided in one place.
"""
from rest_framework.exceptions import APIException, NotFound, ValidationError


class VendorNotFound(NotFound):
    """Vendor does not exist in the company."""
    default_detail = 'Vendor not found.'
    default_code = 'vendor_not_found'


class AccountNotFound(NotFound):
    """Funding account does not exist in the godown."""
    default_detail = 'Account not found.'
    default_code = 'account_not_found'


class RateNotFound(ValidationError):
    """Vendor has no rate for one of the scrap types."""
    default_detail = 'Vendor does not have rate for this scrap type.'
    default_code = 'rate_not_found'


class InvalidPurchase(ValidationError):
    """Purchase input rejected by the workflow."""
    default_detail = 'Invalid purchase.'
    default_code = 'invalid_purchase'


class PurchaseStorageFailed(APIException):
    """Database rejected the purchase. Details stay in the server log."""
    status_code = 500
    default_detail = 'Internal server error'
    default_code = 'storage_failure'


FAILURE_EXCEPTIONS = {
    'vendor_not_found': VendorNotFound,
    'account_not_found': AccountNotFound,
    'rate_not_found': RateNotFound,
    'invalid_purchase': InvalidPurchase,
    'empty_line_set': InvalidPurchase,
    'invalid_ledger_input': InvalidPurchase,
}


def exception_for_failure(failure) -> APIException:
    """API exception for a failed workflow outcome. Unknown codes become 500."""
    exception_class = FAILURE_EXCEPTIONS.get(failure.code)
    if exception_class is None:
        return PurchaseStorageFailed({'error': PurchaseStorageFailed.default_detail})
    if exception_class is RateNotFound:
        return RateNotFound({
            'error': failure.message,
            'scrap_type_id': str(failure.error.scrap_type_id),
        })
    return exception_class({'error': failure.message})
