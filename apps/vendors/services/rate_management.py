"""Vendor rate management service - the rate table purchases are priced from."""

from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.common.money import parse_decimal
from apps.vendors.models import Vendor, ScrapType, VendorRate
from .exceptions import (
    VendorNotFoundError,
    ScrapTypeNotFoundError,
    InvalidRateError,
)


def get_vendor_by_id(*, vendor_id: UUID) -> Vendor:
    """
    Get a vendor by id.

    Raises:
        VendorNotFoundError: If vendor doesn't exist
    """
    try:
        return Vendor.objects.select_related('company').get(id=vendor_id)
    except Vendor.DoesNotExist:
        raise VendorNotFoundError("Vendor not found")


# VendorRate.vendor_rate is DecimalField(max_digits=12, decimal_places=2)
RATE_STEP = Decimal("0.01")
RATE_LIMIT = Decimal("1E10")


def _parse_rate(value) -> Decimal:
    try:
        rate = parse_decimal(value)
    except ValueError:
        raise InvalidRateError(f"Rate must be a number, got {value!r}")
    if rate <= 0:
        raise InvalidRateError("Rate must be greater than zero")
    if rate >= RATE_LIMIT:
        raise InvalidRateError("Rate is too large")
    if rate != rate.quantize(RATE_STEP):
        raise InvalidRateError("Rate allows at most 2 decimal places")
    return rate


@transaction.atomic
def set_vendor_rate(*, vendor_id: UUID, scrap_type_id: UUID, rate) -> tuple[VendorRate, bool]:
    """
    Create or replace the rate a vendor gets for one scrap type.

    There is at most one rate per (vendor, scrap type); setting it again
    overwrites the previous value.

    Args:
        vendor_id: Vendor the rate is agreed with
        scrap_type_id: Material the rate applies to
        rate: Money per kg (Decimal, int or numeric string)

    Returns:
        Tuple of (VendorRate, created: bool)

    Raises:
        VendorNotFoundError: If vendor doesn't exist
        ScrapTypeNotFoundError: If scrap type doesn't exist
        InvalidRateError: If rate is not a positive number with at most
            2 decimal places
    """
    rate = _parse_rate(rate)

    vendor = get_vendor_by_id(vendor_id=vendor_id)

    try:
        scrap_type = ScrapType.objects.get(id=scrap_type_id)
    except ScrapType.DoesNotExist:
        raise ScrapTypeNotFoundError("Scrap type not found")

    vendor_rate, created = VendorRate.objects.update_or_create(
        vendor=vendor,
        scrap_type=scrap_type,
        defaults={'vendor_rate': rate}
    )
    return vendor_rate, created


def get_vendor_rates(*, vendor_id: UUID) -> QuerySet[VendorRate]:
    """
    Get the full rate card of a vendor, ordered by material.

    Raises:
        VendorNotFoundError: If vendor doesn't exist
    """
    vendor = get_vendor_by_id(vendor_id=vendor_id)
    return (
        VendorRate.objects
        .filter(vendor=vendor)
        .select_related('scrap_type')
        .order_by('scrap_type__material_type')
    )
