"""
Sales services - Business logic layer.

- Maal out sales and received payments
- Per-firm outstanding balance
"""

from .maal_out import (
    add_sale,
    list_sales,
    add_sale_payment,
    list_sale_payments,
    firm_outstanding,
)

from .exceptions import (
    SalesServiceError,
    InvalidSaleError,
)

__all__ = [
    'add_sale',
    'list_sales',
    'add_sale_payment',
    'list_sale_payments',
    'firm_outstanding',
    'SalesServiceError',
    'InvalidSaleError',
]
