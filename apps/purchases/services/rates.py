"""Rate lookup for purchase lines."""

from uuid import UUID

from apps.common.outcomes import Failure, Outcome, Success
from .exceptions import PurchaseValidationError, RateNotFoundError
from .types import ResolvedRate


def resolve_rate(scope, *, vendor_id: UUID, scrap_type_id: UUID) -> Outcome:
    """
    Look up the vendor's rate and the canonical material label for a scrap type.

    Returns:
        Success(ResolvedRate), Failure(RateNotFoundError) when the vendor has no
        rate on file for the scrap type, or Failure(PurchaseValidationError)
        when the rate on file is not positive.
    """
    vendor_rate = scope.get_vendor_rate(vendor_id, scrap_type_id)
    if vendor_rate is None:
        return Failure(RateNotFoundError(scrap_type_id))

    if vendor_rate.vendor_rate <= 0:
        return Failure(PurchaseValidationError(
            f"Rate on file for scrap_type_id {scrap_type_id} must be greater than zero"
        ))

    return Success(ResolvedRate(
        scrap_type_id=scrap_type_id,
        rate=vendor_rate.vendor_rate,
        material_type=vendor_rate.scrap_type.material_type,
    ))
