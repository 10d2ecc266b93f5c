"""In-memory purchase storage for exercising the workflow without a database."""

import copy
import uuid
from contextlib import contextmanager
from decimal import Decimal
from types import SimpleNamespace

from django.db import DatabaseError

from apps.common.storage import StorageScope


class FakeScope(StorageScope):
    """Same operations as ``DjangoPurchaseScope``, backed by the owning store's dicts."""

    def __init__(self, store):
        super().__init__()
        self.store = store

    # Ledger

    def get_account(self, account_id, *, for_update=False):
        return self.store.accounts.get(account_id)

    def insert_ledger_entry(self, **fields):
        entry = SimpleNamespace(id=uuid.uuid4(), **fields)
        self.store.ledger_entries.append(entry)
        return entry

    def adjust_account_balance(self, account_id, delta):
        self.store.accounts[account_id].balance += delta

    def create_expense(self, **fields):
        expense = SimpleNamespace(id=uuid.uuid4(), ledger_entry=None, **fields)
        self.store.expenses.append(expense)
        return expense

    # Purchases

    def get_vendor(self, vendor_id, *, company_id):
        vendor = self.store.vendors.get(vendor_id)
        if vendor is None or vendor.company_id != company_id:
            return None
        return vendor

    def get_vendor_rate(self, vendor_id, scrap_type_id):
        return self.store.rates.get((vendor_id, scrap_type_id))

    def create_purchase_header(self, **fields):
        if self.store.fail_on == 'create_purchase_header':
            raise DatabaseError("disk full")
        purchase = SimpleNamespace(id=uuid.uuid4(), **fields)
        self.store.purchases.append(purchase)
        return purchase

    def create_purchase_line(self, **fields):
        if self.store.fail_on == 'create_purchase_line':
            raise DatabaseError("disk full")
        line = SimpleNamespace(id=uuid.uuid4(), **fields)
        self.store.lines.append(line)
        return line

    def finalize_purchase_total(self, purchase, total):
        purchase.total_amount = total

    def set_payment_status(self, purchase, status, mode):
        purchase.payment_status = status
        purchase.payment_mode = mode

    def create_purchase_payment(self, **fields):
        payment = SimpleNamespace(id=uuid.uuid4(), **fields)
        self.store.payments.append(payment)
        return payment


class FakePurchaseStorage:
    """
    Dict-backed storage. ``atomic()`` snapshots every table and restores the
    snapshot when the scope is rolled back or an exception escapes it.

    Set ``fail_on`` to a scope method name to make that call raise
    ``DatabaseError``, or to ``'commit'`` to fail when the scope closes.
    """

    TABLES = ('accounts', 'vendors', 'rates', 'purchases', 'lines', 'payments', 'ledger_entries', 'expenses')

    def __init__(self):
        self.accounts = {}
        self.vendors = {}
        self.rates = {}
        self.purchases = []
        self.lines = []
        self.payments = []
        self.ledger_entries = []
        self.expenses = []
        self.fail_on = None
        self.commits = 0

    def add_account(self, *, company_id, godown_id, balance='1000', name='Cash Box'):
        account = SimpleNamespace(
            id=uuid.uuid4(),
            company_id=company_id,
            godown_id=godown_id,
            name=name,
            balance=Decimal(balance),
        )
        self.accounts[account.id] = account
        return account

    def add_vendor(self, *, company_id, name):
        vendor = SimpleNamespace(id=uuid.uuid4(), company_id=company_id, name=name)
        self.vendors[vendor.id] = vendor
        return vendor

    def add_rate(self, vendor, material_type, rate):
        scrap_type = SimpleNamespace(id=uuid.uuid4(), material_type=material_type)
        self.rates[(vendor.id, scrap_type.id)] = SimpleNamespace(
            vendor_id=vendor.id,
            scrap_type=scrap_type,
            vendor_rate=Decimal(rate),
        )
        return scrap_type

    def _snapshot(self):
        return {name: copy.deepcopy(getattr(self, name)) for name in self.TABLES}

    def _restore(self, snapshot):
        for name, value in snapshot.items():
            setattr(self, name, value)

    @contextmanager
    def atomic(self):
        snapshot = self._snapshot()
        scope = FakeScope(self)
        try:
            yield scope
        except Exception:
            self._restore(snapshot)
            raise
        if scope.rolled_back:
            self._restore(snapshot)
            return
        if self.fail_on == 'commit':
            self._restore(snapshot)
            raise DatabaseError("connection lost during commit")
        self.commits += 1
