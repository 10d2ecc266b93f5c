"""Django storage scope for ledger writes."""

from typing import Optional
from uuid import UUID

from django.db.models import F
from django.utils import timezone

from apps.common.storage import DjangoStorage, DjangoStorageScope
from .models import Account, AccountTransaction, Expense


class DjangoLedgerScope(DjangoStorageScope):
    """Ledger operations available inside one atomic scope."""

    def get_account(self, account_id: UUID, *, for_update: bool = False) -> Optional[Account]:
        queryset = Account.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        return queryset.filter(id=account_id).first()

    def insert_ledger_entry(self, **fields) -> AccountTransaction:
        return AccountTransaction.objects.create(**fields)

    def adjust_account_balance(self, account_id: UUID, delta) -> None:
        """Apply ``delta`` in a single UPDATE so concurrent postings can't lose an update."""
        Account.objects.filter(id=account_id).update(
            balance=F('balance') + delta,
            updated_at=timezone.now(),
        )

    def create_expense(self, **fields) -> Expense:
        return Expense.objects.create(**fields)


class DjangoLedgerStorage(DjangoStorage):
    scope_class = DjangoLedgerScope
