"""
Ledger posting service.

Money that leaves (or enters) a funding account is recorded as one
append-only ``AccountTransaction`` and applied to ``Account.balance`` in the
same atomic scope. Neither effect ever happens without the other.
"""

import logging
from typing import Optional
from uuid import UUID

from apps.common.money import parse_decimal
from apps.common.outcomes import Failure, Outcome, Success
from apps.ledger.models import EntryType
from .exceptions import AccountNotFoundError, LedgerValidationError

logger = logging.getLogger(__name__)


def post_ledger_entry(
    scope,
    *,
    company_id: UUID,
    godown_id: UUID,
    account_id: UUID,
    amount,
    category: str,
    reference: str = '',
    entry_type: str = EntryType.DEBIT,
    metadata: Optional[dict] = None,
) -> Outcome:
    """
    Append a ledger entry and move the account balance by the same amount.

    A debit decreases the balance, a credit increases it. The account row is
    locked before the entry is written and the balance is changed with a
    single ``balance = balance +/- amount`` UPDATE.

    Args:
        scope: Open ledger storage scope (see ``apps.ledger.storage``)
        company_id: Company the entry is booked under
        godown_id: Godown the entry is booked under
        account_id: Funding account
        amount: Positive amount (Decimal or numeric string)
        category: Category tag, e.g. 'feriwala purchase'
        reference: Free-text reference, e.g. 'Purchase from Ramu'
        entry_type: 'debit' or 'credit'
        metadata: Arbitrary JSON-serialisable details

    Returns:
        Success(AccountTransaction) or Failure(LedgerValidationError |
        AccountNotFoundError)
    """
    try:
        amount = parse_decimal(amount)
    except ValueError as e:
        return Failure(LedgerValidationError(str(e)))

    if amount <= 0:
        return Failure(LedgerValidationError("Ledger amount must be greater than zero"))

    if entry_type not in EntryType.values:
        return Failure(LedgerValidationError(f"Unknown entry type {entry_type!r}"))

    account = scope.get_account(account_id, for_update=True)
    if account is None or (account.company_id, account.godown_id) != (company_id, godown_id):
        return Failure(AccountNotFoundError(f"Account {account_id} not found for this godown"))

    entry = scope.insert_ledger_entry(
        company_id=company_id,
        godown_id=godown_id,
        account_id=account_id,
        type=entry_type,
        amount=amount,
        category=category,
        reference=reference,
        metadata=metadata or {},
    )

    delta = -amount if entry_type == EntryType.DEBIT else amount
    scope.adjust_account_balance(account_id, delta)

    logger.info(
        "Posted %s %s to account %s (%s)",
        entry_type, amount, account_id, category
    )
    return Success(entry)
