"""Domain exceptions for ledger app."""


class LedgerServiceError(Exception):
    """Base exception for all ledger service errors."""
    code = 'ledger_error'


class LedgerValidationError(LedgerServiceError):
    """Ledger amount or expense input is invalid."""
    code = 'invalid_ledger_input'


class AccountNotFoundError(LedgerServiceError):
    """Funding account does not exist."""
    code = 'account_not_found'


class LedgerStorageError(LedgerServiceError):
    """The database rejected the ledger write; nothing was kept."""
    code = 'storage_failure'
