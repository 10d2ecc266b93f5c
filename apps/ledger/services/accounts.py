"""Funding account queries."""

from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from apps.ledger.models import Account, AccountTransaction
from .exceptions import AccountNotFoundError


def get_account_by_id(*, account_id: UUID) -> Account:
    """
    Get account by ID.

    Raises:
        AccountNotFoundError: If account doesn't exist
    """
    try:
        return Account.objects.get(id=account_id)
    except Account.DoesNotExist:
        raise AccountNotFoundError(f"Account {account_id} not found")


def list_accounts(*, company_id: UUID, godown_id: Optional[UUID] = None) -> QuerySet[Account]:
    queryset = Account.objects.filter(company_id=company_id)
    if godown_id:
        queryset = queryset.filter(godown_id=godown_id)
    return queryset.order_by('name')


def get_account_transactions(*, account_id: UUID) -> QuerySet[AccountTransaction]:
    """Ledger entries of an account, newest first."""
    account = get_account_by_id(account_id=account_id)
    return account.transactions.order_by('-created_at')
