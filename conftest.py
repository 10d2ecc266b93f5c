"""Fixtures shared by every app's tests: users, authenticated clients and the book scope."""

import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.companies.models import Company, Godown
from apps.ledger.models import Account
from apps.users.models import StaffRole, User
from apps.vendors.models import ScrapType, Vendor, VendorKind, VendorRate


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def company(db):
    return Company.objects.create(name='Sharma Scrap Traders')


@pytest.fixture
def godown(company):
    return Godown.objects.create(company=company, name='Main Godown')


@pytest.fixture
def other_godown(company):
    """Second godown of the same company."""
    return Godown.objects.create(company=company, name='East Godown')


@pytest.fixture
def manager(company):
    """Create and return a godown manager."""
    return User.objects.create_user(
        email='manager@example.com',
        password='TestPass123!',
        display_name='Godown Manager',
        role=StaffRole.MANAGER,
        company=company,
    )


@pytest.fixture
def manager_client(api_client, manager):
    """Return API client authenticated as the manager."""
    refresh = RefreshToken.for_user(manager)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def scope(company, godown):
    """Query/body fields scoping a request to the test godown."""
    return {'company_id': str(company.id), 'godown_id': str(godown.id)}


@pytest.fixture
def iron(db):
    return ScrapType.objects.create(material_type='Iron')


@pytest.fixture
def copper(db):
    return ScrapType.objects.create(material_type='Copper')


@pytest.fixture
def plastic(db):
    """Material no test vendor has a rate for."""
    return ScrapType.objects.create(material_type='Plastic')


@pytest.fixture
def feriwala(company, iron, copper):
    """Feriwala with rates: Iron 10.00, Copper 0.10."""
    vendor = Vendor.objects.create(company=company, name='Ramu', kind=VendorKind.FERIWALA)
    VendorRate.objects.create(vendor=vendor, scrap_type=iron, vendor_rate=Decimal('10.00'))
    VendorRate.objects.create(vendor=vendor, scrap_type=copper, vendor_rate=Decimal('0.10'))
    return vendor


@pytest.fixture
def kabadiwala(company, iron, copper):
    """Kabadiwala with rates: Iron 20.00, Copper 640.00."""
    vendor = Vendor.objects.create(company=company, name='Gupta Kabadi', kind=VendorKind.KABADIWALA)
    VendorRate.objects.create(vendor=vendor, scrap_type=iron, vendor_rate=Decimal('20.00'))
    VendorRate.objects.create(vendor=vendor, scrap_type=copper, vendor_rate=Decimal('640.00'))
    return vendor


@pytest.fixture
def cash_box(company, godown):
    """Funding account starting at 1000."""
    return Account.objects.create(
        company=company,
        godown=godown,
        name='Cash Box',
        balance=Decimal('1000'),
    )
