"""Domain exceptions for vendors app."""


class VendorsServiceError(Exception):
    """Base exception for all vendors service errors."""
    pass


class VendorNotFoundError(VendorsServiceError):
    """Vendor does not exist."""
    code = 'vendor_not_found'


class ScrapTypeNotFoundError(VendorsServiceError):
    """Scrap type does not exist in the material catalog."""
    code = 'scrap_type_not_found'


class InvalidRateError(VendorsServiceError):
    """Rate must be a positive amount."""
    code = 'invalid_rate'
