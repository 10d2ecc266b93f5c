"""Unit tests for line pricing, rate lookup and payment classification."""

import uuid
from decimal import Decimal

import pytest

from apps.purchases.models import PaymentStatus
from apps.purchases.services import (
    PurchaseRequest,
    LineItem,
    RunningTotal,
    classify_payment,
    normalize_request,
    price_line,
    resolve_rate,
)
from apps.purchases.services.exceptions import (
    EmptyLineSetError,
    PurchaseValidationError,
    RateNotFoundError,
)
from .fakes import FakePurchaseStorage


class TestPriceLine:

    def test_amount_is_weight_times_rate(self):
        total = RunningTotal()

        outcome = price_line(Decimal('12.5'), Decimal('20.00'), total)

        assert outcome.ok
        assert outcome.value == (Decimal('12.5'), Decimal('250.000'))
        assert total.value == Decimal('250')

    def test_float_weights_sum_exactly(self):
        total = RunningTotal()

        for _ in range(3):
            price_line(0.1, Decimal('1.00'), total)

        assert total.value == Decimal('0.3')

    def test_accepts_numeric_string(self):
        outcome = price_line('2.250', '640.00', RunningTotal())

        assert outcome.value[1] == Decimal('1440')

    @pytest.mark.parametrize('weight', [Decimal('0'), Decimal('-1'), '-0.5'])
    def test_rejects_non_positive_weight(self, weight):
        total = RunningTotal()

        outcome = price_line(weight, Decimal('10'), total)

        assert outcome.failed
        assert isinstance(outcome.error, PurchaseValidationError)
        assert total.value == Decimal('0')

    @pytest.mark.parametrize('weight', [None, 'heavy', 'NaN', True])
    def test_rejects_non_numeric_weight(self, weight):
        outcome = price_line(weight, Decimal('10'), RunningTotal())

        assert outcome.failed
        assert outcome.code == 'invalid_purchase'

    def test_rejects_more_than_three_decimal_places(self):
        outcome = price_line(Decimal('1.0005'), Decimal('10'), RunningTotal())

        assert outcome.failed
        assert '3 decimal places' in outcome.message

    def test_rejects_amount_too_large_for_money_column(self):
        total = RunningTotal()

        outcome = price_line('999999999.999', '9999999999.99', total)

        assert outcome.failed
        assert outcome.code == 'invalid_purchase'
        assert total.value == Decimal('0')

    def test_rejects_line_that_overflows_running_total(self):
        total = RunningTotal(Decimal('9999999999999'))

        outcome = price_line('1', '1.00', total)

        assert outcome.failed
        assert 'total is too large' in outcome.message
        assert total.value == Decimal('9999999999999')

    def test_largest_storable_amount_is_accepted(self):
        outcome = price_line('999.999', '9999999999.99', RunningTotal())

        assert outcome.ok
        assert outcome.value[1] == Decimal('9999989999990.00001')


class TestClassifyPayment:

    @pytest.mark.parametrize('paid, total, expected', [
        ('0', '250', PaymentStatus.PENDING),
        ('100', '250', PaymentStatus.PARTIAL),
        ('250', '250', PaymentStatus.PAID),
        ('300', '250', PaymentStatus.PAID),
    ])
    def test_status(self, paid, total, expected):
        assert classify_payment(Decimal(paid), Decimal(total)) == expected


class TestResolveRate:

    def setup_method(self):
        self.storage = FakePurchaseStorage()
        self.company_id = uuid.uuid4()
        self.vendor = self.storage.add_vendor(company_id=self.company_id, name='Ramu')
        self.iron = self.storage.add_rate(self.vendor, 'Iron', '10.00')

    def test_returns_rate_and_canonical_label(self):
        with self.storage.atomic() as scope:
            outcome = resolve_rate(scope, vendor_id=self.vendor.id, scrap_type_id=self.iron.id)

        assert outcome.ok
        assert outcome.value.rate == Decimal('10.00')
        assert outcome.value.material_type == 'Iron'

    def test_missing_rate(self):
        unknown = uuid.uuid4()

        with self.storage.atomic() as scope:
            outcome = resolve_rate(scope, vendor_id=self.vendor.id, scrap_type_id=unknown)

        assert outcome.failed
        assert isinstance(outcome.error, RateNotFoundError)
        assert outcome.error.scrap_type_id == unknown
        assert str(unknown) in outcome.message

    def test_non_positive_rate_on_file(self):
        zero = self.storage.add_rate(self.vendor, 'Glass', '0')

        with self.storage.atomic() as scope:
            outcome = resolve_rate(scope, vendor_id=self.vendor.id, scrap_type_id=zero.id)

        assert outcome.code == 'invalid_purchase'


class TestNormalizeRequest:

    def _request(self, **overrides):
        fields = {
            'company_id': uuid.uuid4(),
            'godown_id': uuid.uuid4(),
            'vendor_id': uuid.uuid4(),
            'lines': [LineItem(scrap_type_id=uuid.uuid4(), weight='1')],
        }
        fields.update(overrides)
        return PurchaseRequest(**fields)

    def test_empty_lines(self):
        outcome = normalize_request(self._request(lines=[]), channel='kabadiwala')

        assert isinstance(outcome.error, EmptyLineSetError)

    def test_feriwala_requires_account(self):
        outcome = normalize_request(self._request(), channel='feriwala')

        assert outcome.failed
        assert outcome.message == 'Account ID is required'

    def test_kabadiwala_defaults(self):
        outcome = normalize_request(self._request(), channel='kabadiwala')

        request = outcome.value
        assert request.payment_amount == Decimal('0')
        assert request.payment_mode == 'cash'
        assert request.note == ''
        assert request.date is not None

    def test_feriwala_has_no_payment_fields(self):
        outcome = normalize_request(self._request(account_id=uuid.uuid4()), channel='feriwala')

        assert outcome.value.payment_amount is None
        assert outcome.value.payment_mode is None

    def test_negative_payment(self):
        outcome = normalize_request(self._request(payment_amount='-5'), channel='kabadiwala')

        assert outcome.code == 'invalid_purchase'

    def test_unknown_payment_mode(self):
        outcome = normalize_request(self._request(payment_mode='barter'), channel='kabadiwala')

        assert outcome.code == 'invalid_purchase'

    def test_unknown_channel(self):
        outcome = normalize_request(self._request(), channel='wholesale')

        assert outcome.failed

    def test_idempotent(self):
        first = normalize_request(self._request(payment_amount='40'), channel='kabadiwala').value
        second = normalize_request(first, channel='kabadiwala').value

        assert first == second
