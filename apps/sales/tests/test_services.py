from datetime import date, timedelta
from decimal import Decimal

import pytest

from apps.sales.services import (
    InvalidSaleError,
    add_sale,
    add_sale_payment,
    firm_outstanding,
    list_sale_payments,
    list_sales,
)


@pytest.mark.django_db
class TestAddSale:

    def test_amount_is_weight_times_rate(self, company, godown):
        sale = add_sale(
            company_id=company.id,
            godown_id=godown.id,
            firm_name='  Jain Metals ',
            date=date.today(),
            weight='1250.5',
            rate='32.40',
            gst='500',
            vehicle_no='MH12AB1234',
        )

        assert sale.firm_name == 'Jain Metals'
        assert sale.amount == Decimal('40516.2')
        assert sale.bill_total == Decimal('41016.2')
        assert sale.payment_type == 'credit'

    @pytest.mark.parametrize('fields', [
        {'firm_name': ''},
        {'weight': '0'},
        {'rate': '-1'},
        {'gst': '-10'},
        {'freight': 'lots'},
        {'weight': '999999999.999', 'rate': '9999999999.99'},
    ])
    def test_validation(self, company, godown, fields):
        kwargs = {
            'company_id': company.id,
            'godown_id': godown.id,
            'firm_name': 'Jain Metals',
            'date': date.today(),
            'weight': '10',
            'rate': '30',
        }
        kwargs.update(fields)

        with pytest.raises(InvalidSaleError):
            add_sale(**kwargs)


@pytest.mark.django_db
class TestSaleBook:

    @pytest.fixture
    def book(self, company, godown):
        today = date.today()
        add_sale(company_id=company.id, godown_id=godown.id, firm_name='Jain Metals',
                 date=today, weight='100', rate='30', freight='200')
        add_sale(company_id=company.id, godown_id=godown.id, firm_name='Jain Metals',
                 date=today - timedelta(days=3), weight='50', rate='30')
        add_sale(company_id=company.id, godown_id=godown.id, firm_name='Delhi Steel',
                 date=today, weight='10', rate='45')
        add_sale_payment(company_id=company.id, godown_id=godown.id, firm_name='jain metals',
                         amount='2500', date=today)
        return today

    def test_list_sales_for_day(self, company, godown, book):
        assert list_sales(company_id=company.id, godown_id=godown.id).count() == 3
        assert list_sales(company_id=company.id, godown_id=godown.id, date=book).count() == 2

    def test_list_payments(self, company, godown, book):
        payments = list_sale_payments(company_id=company.id, godown_id=godown.id, date=book)

        assert [p.amount for p in payments] == [Decimal('2500')]

    def test_outstanding_matches_firm_case_insensitively(self, company, godown, book):
        summary = firm_outstanding(company_id=company.id, godown_id=godown.id, firm_name='JAIN METALS')

        assert summary['billed'] == Decimal('4700')
        assert summary['received'] == Decimal('2500')
        assert summary['outstanding'] == Decimal('2200')

    def test_outstanding_unknown_firm(self, company, godown, book):
        summary = firm_outstanding(company_id=company.id, godown_id=godown.id, firm_name='Nobody')

        assert summary['billed'] == Decimal('0')
        assert summary['outstanding'] == Decimal('0')

    def test_payment_must_be_positive(self, company, godown):
        with pytest.raises(InvalidSaleError):
            add_sale_payment(company_id=company.id, godown_id=godown.id, firm_name='Jain Metals',
                             amount='0', date=date.today())
