"""Domain exceptions for sales app."""


class SalesServiceError(Exception):
    """Base exception for all sales service errors."""
    code = 'sales_error'


class InvalidSaleError(SalesServiceError):
    """Sale or payment input is invalid."""
    code = 'invalid_sale'
