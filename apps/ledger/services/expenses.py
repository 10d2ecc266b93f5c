"""Expense (daily data book) service."""

import logging
from datetime import date as date_type
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import DatabaseError
from django.db.models import Count, QuerySet, Sum
from django.db.models.functions import Coalesce

from apps.common.money import parse_decimal
from apps.ledger.models import Expense, PaymentMode
from apps.ledger.storage import DjangoLedgerStorage
from .exceptions import LedgerStorageError, LedgerValidationError
from .posting import post_ledger_entry

logger = logging.getLogger(__name__)


def record_expense(
    *,
    company_id: UUID,
    godown_id: UUID,
    date: date_type,
    category: str,
    amount,
    description: str = '',
    paid_to: str = '',
    payment_mode: str = PaymentMode.CASH,
    account_id: Optional[UUID] = None,
    entered_by=None,
    storage=None,
) -> Expense:
    """
    Record an expense and, when paid from an account, post it to the ledger.

    The expense row, the ledger entry and the balance change commit together.

    Args:
        company_id: Owning company
        godown_id: Godown the expense belongs to
        date: Day of the expense
        category: Expense category (e.g. 'Diesel', 'Tea')
        amount: Positive amount
        description: Free text
        paid_to: Who received the money
        payment_mode: How it was paid
        account_id: Funding account to debit (optional)
        entered_by: User recording the expense (optional)
        storage: Storage factory (defaults to the Django ledger storage)

    Returns:
        Created Expense

    Raises:
        LedgerValidationError: If amount is not positive or category is empty
        AccountNotFoundError: If account_id doesn't exist
        LedgerStorageError: If the database rejects the write
    """
    try:
        amount = parse_decimal(amount)
    except ValueError as e:
        raise LedgerValidationError(str(e))
    if amount <= 0:
        raise LedgerValidationError("Expense amount must be greater than zero")
    if not category or not category.strip():
        raise LedgerValidationError("Expense category is required")

    storage = storage or DjangoLedgerStorage()
    failure = None

    try:
        with storage.atomic() as scope:
            expense = scope.create_expense(
                company_id=company_id,
                godown_id=godown_id,
                date=date,
                category=category.strip(),
                description=description,
                paid_to=paid_to,
                payment_mode=payment_mode,
                amount=amount,
                account_id=account_id,
                entered_by=entered_by,
            )

            if account_id:
                if description:
                    reference = description
                elif paid_to:
                    reference = f'Paid to {paid_to}'
                else:
                    reference = expense.category

                outcome = post_ledger_entry(
                    scope,
                    company_id=company_id,
                    godown_id=godown_id,
                    account_id=account_id,
                    amount=amount,
                    category=f'expense: {expense.category}',
                    reference=reference[:255],
                    metadata={'expense_id': str(expense.id)},
                )
                if outcome.failed:
                    scope.rollback()
                    failure = outcome
                else:
                    expense.ledger_entry = outcome.value
                    expense.save(update_fields=['ledger_entry'])
    except DatabaseError:
        logger.exception("Expense write failed for godown %s", godown_id)
        raise LedgerStorageError("Could not record expense")

    if failure is not None:
        raise failure.error

    return expense


def list_expenses(
    *,
    company_id: UUID,
    godown_id: UUID,
    date: Optional[date_type] = None
) -> QuerySet[Expense]:
    """Expenses of a godown, newest first, optionally for a single day."""
    queryset = (
        Expense.objects
        .filter(company_id=company_id, godown_id=godown_id)
        .select_related('account', 'entered_by')
    )
    if date:
        queryset = queryset.filter(date=date)
    return queryset.order_by('-date', '-created_at')


def expense_summary(
    *,
    company_id: UUID,
    godown_id: UUID,
    start_date: date_type,
    end_date: date_type
) -> dict:
    """
    Totals for a date range (inclusive).

    Returns:
        Dictionary with:
        - total_amount: Sum of expenses
        - count: Number of expenses
        - by_category: List of {category, total_amount, count}, largest first
    """
    queryset = Expense.objects.filter(
        company_id=company_id,
        godown_id=godown_id,
        date__gte=start_date,
        date__lte=end_date,
    )

    totals = queryset.aggregate(
        total_amount=Coalesce(Sum('amount'), Decimal('0')),
        count=Count('id'),
    )

    by_category = list(
        queryset
        .values('category')
        .annotate(total_amount=Sum('amount'), count=Count('id'))
        .order_by('-total_amount', 'category')
    )

    return {
        'start_date': start_date,
        'end_date': end_date,
        'total_amount': totals['total_amount'],
        'count': totals['count'],
        'by_category': by_category,
    }
