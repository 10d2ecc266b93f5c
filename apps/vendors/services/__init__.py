"""
Vendors services - Business logic layer.

- Vendor lookup
- Vendor rate card management
"""

from .rate_management import (
    get_vendor_by_id,
    set_vendor_rate,
    get_vendor_rates,
)

from .exceptions import (
    VendorsServiceError,
    VendorNotFoundError,
    ScrapTypeNotFoundError,
    InvalidRateError,
)

__all__ = [
    'get_vendor_by_id',
    'set_vendor_rate',
    'get_vendor_rates',
    'VendorsServiceError',
    'VendorNotFoundError',
    'ScrapTypeNotFoundError',
    'InvalidRateError',
]
