"""Workflow tests for PurchaseTransaction against the in-memory storage."""

import uuid
from decimal import Decimal

import pytest

from apps.purchases.models import PaymentStatus
from apps.purchases.services import (
    LineItem,
    PurchaseRequest,
    PurchaseState,
    PurchaseTransaction,
    add_feriwala_purchase,
    add_kabadiwala_purchase,
)
from .fakes import FakePurchaseStorage


@pytest.fixture
def storage():
    return FakePurchaseStorage()


@pytest.fixture
def company_id():
    return uuid.uuid4()


@pytest.fixture
def godown_id():
    return uuid.uuid4()


@pytest.fixture
def account(storage, company_id, godown_id):
    return storage.add_account(company_id=company_id, godown_id=godown_id, balance='1000')


@pytest.fixture
def vendor(storage, company_id):
    return storage.add_vendor(company_id=company_id, name='Ramu')


@pytest.fixture
def iron(storage, vendor):
    return storage.add_rate(vendor, 'Iron', '10.00')


@pytest.fixture
def copper(storage, vendor):
    return storage.add_rate(vendor, 'Copper', '0.10')


@pytest.fixture
def make_request(company_id, godown_id, vendor):
    def _make(lines, **fields):
        return PurchaseRequest(
            company_id=company_id,
            godown_id=godown_id,
            vendor_id=vendor.id,
            lines=[LineItem(scrap_type_id=s.id, weight=w) for s, w in lines],
            **fields
        )
    return _make


def balance(storage, account):
    return storage.accounts[account.id].balance


class TestFeriwalaWorkflow:

    def test_posts_full_total_and_debits_account(self, storage, account, iron, copper, make_request):
        request = make_request([(iron, '12.5'), (copper, '3')], account_id=account.id)

        outcome = add_feriwala_purchase(request, storage=storage)

        assert outcome.ok
        receipt = outcome.value
        assert receipt.total_amount == Decimal('125.3')
        assert receipt.vendor_name == 'Ramu'
        assert receipt.payment_status is None

        assert len(storage.purchases) == 1
        assert [line.material for line in storage.lines] == ['Iron', 'Copper']
        assert storage.payments == []

        entry, = storage.ledger_entries
        assert entry.amount == Decimal('125.3')
        assert entry.type == 'debit'
        assert entry.category == 'feriwala purchase'
        assert entry.reference == 'Purchase from Ramu'
        assert entry.metadata == {'purchase_id': str(receipt.purchase_id), 'channel': 'feriwala'}
        assert balance(storage, account) == Decimal('874.7')

    def test_state_history(self, storage, account, iron, make_request):
        transaction = PurchaseTransaction(storage, channel='feriwala')

        transaction.run(make_request([(iron, '1')], account_id=account.id))

        assert transaction.history == [
            PurchaseState.STARTED,
            PurchaseState.VENDOR_RESOLVED,
            PurchaseState.LINES_PRICED,
            PurchaseState.TOTAL_FINALIZED,
            PurchaseState.LEDGERED,
            PurchaseState.COMMITTED,
        ]
        assert transaction.state == PurchaseState.COMMITTED

    def test_unknown_account_leaves_nothing(self, storage, account, iron, make_request):
        request = make_request([(iron, '1')], account_id=uuid.uuid4())

        outcome = add_feriwala_purchase(request, storage=storage)

        assert outcome.code == 'account_not_found'
        assert storage.purchases == []
        assert storage.lines == []
        assert storage.ledger_entries == []
        assert balance(storage, account) == Decimal('1000')

    def test_account_of_another_godown_is_not_found(self, storage, company_id, iron, make_request):
        elsewhere = storage.add_account(company_id=company_id, godown_id=uuid.uuid4())

        outcome = add_feriwala_purchase(
            make_request([(iron, '1')], account_id=elsewhere.id),
            storage=storage,
        )

        assert outcome.code == 'account_not_found'
        assert balance(storage, elsewhere) == Decimal('1000')


class TestKabadiwalaWorkflow:

    def test_partial_payment_with_account(self, storage, account, iron, make_request):
        request = make_request([(iron, '25')], payment_amount='100', account_id=account.id)

        outcome = add_kabadiwala_purchase(request, storage=storage)

        assert outcome.value.payment_status == PaymentStatus.PARTIAL
        purchase, = storage.purchases
        assert purchase.total_amount == Decimal('250')
        assert purchase.payment_mode == 'cash'

        payment, = storage.payments
        assert payment.amount == Decimal('100')

        entry, = storage.ledger_entries
        assert entry.amount == Decimal('100')
        assert entry.category == 'kabadiwala payment'
        assert entry.reference == 'Payment to Ramu'
        assert balance(storage, account) == Decimal('900')

    def test_unpaid_purchase_is_pending_without_ledger(self, storage, account, iron, make_request):
        transaction = PurchaseTransaction(storage, channel='kabadiwala')

        outcome = transaction.run(make_request([(iron, '25')], account_id=account.id))

        assert outcome.value.payment_status == PaymentStatus.PENDING
        assert storage.payments == []
        assert storage.ledger_entries == []
        assert PurchaseState.PAYMENT_CLASSIFIED in transaction.history
        assert PurchaseState.LEDGERED not in transaction.history

    def test_payment_without_account_skips_ledger(self, storage, account, iron, make_request):
        request = make_request([(iron, '10')], payment_amount='100', payment_mode='upi')

        outcome = add_kabadiwala_purchase(request, storage=storage)

        assert outcome.value.payment_status == PaymentStatus.PAID
        payment, = storage.payments
        assert payment.mode == 'upi'
        assert storage.ledger_entries == []
        assert balance(storage, account) == Decimal('1000')

    def test_overpayment_is_paid(self, storage, account, iron, make_request):
        request = make_request([(iron, '1')], payment_amount='50', account_id=account.id)

        outcome = add_kabadiwala_purchase(request, storage=storage)

        assert outcome.value.payment_status == PaymentStatus.PAID
        assert balance(storage, account) == Decimal('950')


class TestAbort:

    def test_missing_rate_rolls_back_earlier_lines(self, storage, account, vendor, iron, make_request):
        other_vendor = storage.add_vendor(company_id=vendor.company_id, name='Shyam')
        unpriced = storage.add_rate(other_vendor, 'Brass', '300')
        transaction = PurchaseTransaction(storage, channel='feriwala')

        outcome = transaction.run(
            make_request([(iron, '5'), (unpriced, '2')], account_id=account.id)
        )

        assert outcome.code == 'rate_not_found'
        assert outcome.error.scrap_type_id == unpriced.id
        assert storage.purchases == []
        assert storage.lines == []
        assert transaction.history == [
            PurchaseState.STARTED,
            PurchaseState.VENDOR_RESOLVED,
            PurchaseState.ABORTED,
        ]

    def test_unknown_vendor(self, storage, company_id, godown_id, account, iron):
        request = PurchaseRequest(
            company_id=company_id,
            godown_id=godown_id,
            vendor_id=uuid.uuid4(),
            lines=[LineItem(scrap_type_id=iron.id, weight='1')],
            account_id=account.id,
        )

        outcome = add_feriwala_purchase(request, storage=storage)

        assert outcome.code == 'vendor_not_found'

    def test_vendor_of_another_company(self, storage, godown_id, vendor, iron):
        request = PurchaseRequest(
            company_id=uuid.uuid4(),
            godown_id=godown_id,
            vendor_id=vendor.id,
            lines=[LineItem(scrap_type_id=iron.id, weight='1')],
        )

        outcome = add_kabadiwala_purchase(request, storage=storage)

        assert outcome.code == 'vendor_not_found'
        assert storage.purchases == []

    def test_invalid_weight_rolls_back(self, storage, account, iron, copper, make_request):
        request = make_request([(iron, '2'), (copper, '0')], payment_amount='5', account_id=account.id)

        outcome = add_kabadiwala_purchase(request, storage=storage)

        assert outcome.code == 'invalid_purchase'
        assert storage.purchases == []
        assert storage.payments == []
        assert balance(storage, account) == Decimal('1000')

    def test_total_too_large_rolls_back(self, storage, account, vendor, make_request):
        bulk = storage.add_rate(vendor, 'Brass', '9999999999.99')
        transaction = PurchaseTransaction(storage, channel='feriwala')

        outcome = transaction.run(
            make_request([(bulk, '999.999'), (bulk, '999.999')], account_id=account.id)
        )

        assert outcome.code == 'invalid_purchase'
        assert storage.purchases == []
        assert storage.lines == []
        assert balance(storage, account) == Decimal('1000')
        assert transaction.history[-1] == PurchaseState.ABORTED

    def test_empty_lines(self, storage, account, make_request):
        transaction = PurchaseTransaction(storage, channel='feriwala')

        outcome = transaction.run(make_request([], account_id=account.id))

        assert outcome.code == 'empty_line_set'
        assert transaction.history == [PurchaseState.STARTED, PurchaseState.ABORTED]

    def test_storage_error_mid_workflow(self, storage, account, iron, make_request):
        storage.fail_on = 'create_purchase_line'

        outcome = add_feriwala_purchase(make_request([(iron, '1')], account_id=account.id), storage=storage)

        assert outcome.code == 'storage_failure'
        assert storage.purchases == []

    def test_storage_error_at_commit(self, storage, account, iron, make_request):
        storage.fail_on = 'commit'
        transaction = PurchaseTransaction(storage, channel='feriwala')

        outcome = transaction.run(make_request([(iron, '1')], account_id=account.id))

        assert outcome.code == 'storage_failure'
        assert transaction.state == PurchaseState.ABORTED
        assert storage.purchases == []
        assert storage.ledger_entries == []
        assert balance(storage, account) == Decimal('1000')
        assert storage.commits == 0
