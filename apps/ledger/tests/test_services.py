"""
Tests for ledger posting and the expense book.

Run with: pytest apps/ledger/tests/test_services.py -v
"""

import uuid
from datetime import date, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.ledger.models import Account, AccountTransaction, EntryType, Expense
from apps.ledger.services import (
    AccountNotFoundError,
    LedgerValidationError,
    expense_summary,
    get_account_transactions,
    list_accounts,
    list_expenses,
    post_ledger_entry,
    record_expense,
)
from apps.ledger.storage import DjangoLedgerStorage


@pytest.mark.django_db
class TestPostLedgerEntry:

    def _post(self, company, godown, account, amount, **kwargs):
        with DjangoLedgerStorage().atomic() as scope:
            return post_ledger_entry(
                scope,
                company_id=company.id,
                godown_id=godown.id,
                account_id=account.id,
                amount=amount,
                category='test',
                **kwargs
            )

    def test_debit_decreases_balance(self, company, godown, cash_box):
        outcome = self._post(company, godown, cash_box, Decimal('250.5'))

        assert outcome.ok
        assert outcome.value.type == EntryType.DEBIT
        cash_box.refresh_from_db()
        assert cash_box.balance == Decimal('749.5')

    def test_credit_increases_balance(self, company, godown, cash_box):
        self._post(company, godown, cash_box, '100', entry_type=EntryType.CREDIT)

        cash_box.refresh_from_db()
        assert cash_box.balance == Decimal('1100')

    def test_balance_may_go_negative(self, company, godown, cash_box):
        self._post(company, godown, cash_box, '1500')

        cash_box.refresh_from_db()
        assert cash_box.balance == Decimal('-500')

    @pytest.mark.parametrize('amount', ['0', '-10', 'abc', None])
    def test_rejects_bad_amount(self, company, godown, cash_box, amount):
        outcome = self._post(company, godown, cash_box, amount)

        assert outcome.code == 'invalid_ledger_input'
        assert AccountTransaction.objects.count() == 0

    def test_unknown_entry_type(self, company, godown, cash_box):
        outcome = self._post(company, godown, cash_box, '10', entry_type='transfer')

        assert outcome.failed

    def test_account_outside_scope(self, company, other_godown, cash_box):
        outcome = self._post(company, other_godown, cash_box, '10')

        assert outcome.code == 'account_not_found'
        cash_box.refresh_from_db()
        assert cash_box.balance == Decimal('1000')


@pytest.mark.django_db
class TestRecordExpense:

    def test_without_account(self, company, godown, manager):
        expense = record_expense(
            company_id=company.id,
            godown_id=godown.id,
            date=date.today(),
            category=' Tea ',
            amount='40',
            entered_by=manager,
        )

        assert expense.category == 'Tea'
        assert expense.ledger_entry is None
        assert AccountTransaction.objects.count() == 0

    def test_with_account_posts_debit(self, company, godown, cash_box):
        expense = record_expense(
            company_id=company.id,
            godown_id=godown.id,
            date=date.today(),
            category='Diesel',
            amount=Decimal('300'),
            paid_to='Indian Oil',
            account_id=cash_box.id,
        )

        entry = expense.ledger_entry
        assert entry.amount == Decimal('300')
        assert entry.category == 'expense: Diesel'
        assert entry.reference == 'Paid to Indian Oil'
        assert entry.metadata == {'expense_id': str(expense.id)}
        cash_box.refresh_from_db()
        assert cash_box.balance == Decimal('700')

    def test_description_is_reference(self, company, godown, cash_box):
        expense = record_expense(
            company_id=company.id,
            godown_id=godown.id,
            date=date.today(),
            category='Repairs',
            amount='75',
            description='Weighbridge calibration',
            account_id=cash_box.id,
        )

        assert expense.ledger_entry.reference == 'Weighbridge calibration'

    def test_unknown_account_keeps_nothing(self, company, godown):
        with pytest.raises(AccountNotFoundError):
            record_expense(
                company_id=company.id,
                godown_id=godown.id,
                date=date.today(),
                category='Diesel',
                amount='10',
                account_id=uuid.uuid4(),
            )

        assert Expense.objects.count() == 0

    @pytest.mark.parametrize('amount, category', [('0', 'Tea'), ('-5', 'Tea'), ('10', '   ')])
    def test_validation(self, company, godown, amount, category):
        with pytest.raises(LedgerValidationError):
            record_expense(
                company_id=company.id,
                godown_id=godown.id,
                date=date.today(),
                category=category,
                amount=amount,
            )


@pytest.mark.django_db
class TestExpenseQueries:

    @pytest.fixture
    def expenses(self, company, godown):
        today = date.today()
        for day, category, amount in [
            (today, 'Tea', '40'),
            (today, 'Diesel', '500'),
            (today - timedelta(days=1), 'Tea', '60'),
            (today - timedelta(days=10), 'Rent', '5000'),
        ]:
            record_expense(
                company_id=company.id,
                godown_id=godown.id,
                date=day,
                category=category,
                amount=amount,
            )
        return today

    def test_list_for_day(self, company, godown, expenses):
        assert list_expenses(company_id=company.id, godown_id=godown.id).count() == 4
        assert list_expenses(company_id=company.id, godown_id=godown.id, date=expenses).count() == 2

    def test_summary_groups_by_category(self, company, godown, expenses):
        summary = expense_summary(
            company_id=company.id,
            godown_id=godown.id,
            start_date=expenses - timedelta(days=1),
            end_date=expenses,
        )

        assert summary['total_amount'] == Decimal('600')
        assert summary['count'] == 3
        assert [row['category'] for row in summary['by_category']] == ['Diesel', 'Tea']
        assert summary['by_category'][1]['total_amount'] == Decimal('100')
        assert summary['by_category'][1]['count'] == 2

    def test_summary_empty_range(self, company, godown, expenses):
        summary = expense_summary(
            company_id=company.id,
            godown_id=godown.id,
            start_date=expenses + timedelta(days=1),
            end_date=expenses + timedelta(days=2),
        )

        assert summary['total_amount'] == Decimal('0')
        assert summary['count'] == 0
        assert summary['by_category'] == []


@pytest.mark.django_db
class TestAccountQueries:

    def test_list_accounts_by_godown(self, company, godown, other_godown, cash_box):
        Account.objects.create(company=company, godown=other_godown, name='Cash Box')

        assert list_accounts(company_id=company.id).count() == 2
        assert list(list_accounts(company_id=company.id, godown_id=godown.id)) == [cash_box]

    def test_transactions_newest_first(self, company, godown, cash_box):
        for amount in ('10', '20'):
            with DjangoLedgerStorage().atomic() as scope:
                post_ledger_entry(
                    scope,
                    company_id=company.id,
                    godown_id=godown.id,
                    account_id=cash_box.id,
                    amount=amount,
                    category='test',
                )
        AccountTransaction.objects.filter(amount=Decimal('10')).update(
            created_at=timezone.now() - timedelta(hours=1)
        )

        entries = get_account_transactions(account_id=cash_box.id)

        assert [entry.amount for entry in entries] == [Decimal('20'), Decimal('10')]

    def test_transactions_unknown_account(self):
        with pytest.raises(AccountNotFoundError):
            get_account_transactions(account_id=uuid.uuid4())
