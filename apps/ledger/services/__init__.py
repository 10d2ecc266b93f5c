"""
Ledger services - Business logic layer.

- Ledger posting (entry + balance change)
- Expense day book
- Funding account queries
"""

from .posting import post_ledger_entry

from .expenses import (
    record_expense,
    list_expenses,
    expense_summary,
)

from .accounts import (
    get_account_by_id,
    list_accounts,
    get_account_transactions,
)

from .exceptions import (
    LedgerServiceError,
    LedgerValidationError,
    AccountNotFoundError,
    LedgerStorageError,
)

__all__ = [
    'post_ledger_entry',
    'record_expense',
    'list_expenses',
    'expense_summary',
    'get_account_by_id',
    'list_accounts',
    'get_account_transactions',
    'LedgerServiceError',
    'LedgerValidationError',
    'AccountNotFoundError',
    'LedgerStorageError',
]
