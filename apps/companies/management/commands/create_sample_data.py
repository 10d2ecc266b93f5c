"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 1 company with 1 godown
- 2 users (owner, manager)
- 6 scrap types
- 4 vendors (2 feriwala, 2 kabadiwala) with rate cards
- 2 funding accounts (Cash Box, Bank)
- 3 labour
- A few purchases recorded through the purchase workflow
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from apps.companies.models import Company, Godown
from apps.labour.models import Labour, Attendance
from apps.ledger.models import Account, AccountTransaction, Expense
from apps.purchases.models import PurchaseRecord
from apps.purchases.services import (
    LineItem,
    PurchaseRequest,
    add_feriwala_purchase,
    add_kabadiwala_purchase,
)
from apps.sales.models import MaalOutSale, MaalOutPayment
from apps.users.models import StaffRole, User
from apps.vendors.models import ScrapType, Vendor, VendorKind, VendorRate

COMPANY_NAME = 'Sharma Scrap Traders'


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing sample data before creating it again',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        company, godown = self.create_company()
        self.create_users(company)
        scrap_types = self.create_scrap_types()
        vendors = self.create_vendors(company, scrap_types)
        accounts = self.create_accounts(company, godown)
        self.create_labour(company, godown)
        self.create_purchases(company, godown, vendors, scrap_types, accounts)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write(f'Company: {company.id}')
        self.stdout.write(f'Godown:  {godown.id}')
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  owner@example.com / owner123 (superuser)')
        self.stdout.write('  manager@example.com / password123')

    def clear_data(self):
        """Remove the sample company and everything booked under it."""
        companies = Company.objects.filter(name=COMPANY_NAME)

        # Ledger entries protect accounts and purchases protect vendors
        AccountTransaction.objects.filter(company__in=companies).delete()
        Expense.objects.filter(company__in=companies).delete()
        PurchaseRecord.objects.filter(company__in=companies).delete()
        MaalOutSale.objects.filter(company__in=companies).delete()
        MaalOutPayment.objects.filter(company__in=companies).delete()
        Attendance.objects.filter(company__in=companies).delete()
        companies.delete()

        User.objects.filter(email__in=['owner@example.com', 'manager@example.com']).delete()

    def create_company(self):
        self.stdout.write('  Creating company and godown...')

        company, _ = Company.objects.get_or_create(name=COMPANY_NAME)
        godown, _ = Godown.objects.get_or_create(
            company=company,
            name='Main Godown',
            defaults={'address': 'Plot 12, Industrial Area'}
        )
        return company, godown

    def create_users(self, company):
        """Create test users."""
        self.stdout.write('  Creating users...')

        owner, _ = User.objects.get_or_create(
            email='owner@example.com',
            defaults={
                'display_name': 'Owner',
                'role': StaffRole.OWNER,
                'company': company,
                'is_staff': True,
                'is_superuser': True,
            }
        )
        owner.set_password('owner123')
        owner.save()

        manager, _ = User.objects.get_or_create(
            email='manager@example.com',
            defaults={
                'display_name': 'Godown Manager',
                'role': StaffRole.MANAGER,
                'company': company,
            }
        )
        manager.set_password('password123')
        manager.save()

    def create_scrap_types(self):
        self.stdout.write('  Creating scrap types...')

        materials = ['Iron', 'Copper', 'Brass', 'Aluminium', 'Plastic', 'Cardboard']
        scrap_types = {}
        for material in materials:
            scrap_type, _ = ScrapType.objects.get_or_create(material_type=material)
            scrap_types[material] = scrap_type
        return scrap_types

    def create_vendors(self, company, scrap_types):
        self.stdout.write('  Creating vendors and rate cards...')

        vendors_data = [
            ('Ramu', VendorKind.FERIWALA, {'Iron': '28.00', 'Plastic': '12.50', 'Cardboard': '8.00'}),
            ('Shyam', VendorKind.FERIWALA, {'Iron': '27.50', 'Aluminium': '115.00'}),
            ('Gupta Kabadi', VendorKind.KABADIWALA, {'Iron': '30.00', 'Copper': '640.00', 'Brass': '410.00'}),
            ('Khan Traders', VendorKind.KABADIWALA, {'Aluminium': '120.00', 'Cardboard': '9.25'}),
        ]

        vendors = {}
        for name, kind, rates in vendors_data:
            vendor, _ = Vendor.objects.get_or_create(
                company=company,
                name=name,
                defaults={'kind': kind}
            )
            for material, rate in rates.items():
                VendorRate.objects.update_or_create(
                    vendor=vendor,
                    scrap_type=scrap_types[material],
                    defaults={'vendor_rate': Decimal(rate)}
                )
            vendors[name] = vendor
        return vendors

    def create_accounts(self, company, godown):
        self.stdout.write('  Creating accounts...')

        accounts = {}
        for name in ['Cash Box', 'Bank']:
            account, _ = Account.objects.get_or_create(company=company, godown=godown, name=name)
            accounts[name] = account
        return accounts

    def create_labour(self, company, godown):
        self.stdout.write('  Creating labour...')

        for name, wage in [('Mohan', '500.00'), ('Sita', '450.00'), ('Raju', '500.00')]:
            Labour.objects.get_or_create(
                company=company,
                godown=godown,
                name=name,
                defaults={'daily_wage': Decimal(wage)}
            )

    def create_purchases(self, company, godown, vendors, scrap_types, accounts):
        """Record purchases through the same workflow the API uses."""
        self.stdout.write('  Creating purchases...')

        today = timezone.localdate()

        outcomes = [
            add_feriwala_purchase(PurchaseRequest(
                company_id=company.id,
                godown_id=godown.id,
                vendor_id=vendors['Ramu'].id,
                lines=[
                    LineItem(scrap_type_id=scrap_types['Iron'].id, weight=Decimal('42.5')),
                    LineItem(scrap_type_id=scrap_types['Plastic'].id, weight=Decimal('8')),
                ],
                account_id=accounts['Cash Box'].id,
                date=today - timedelta(days=1),
            )),
            add_kabadiwala_purchase(PurchaseRequest(
                company_id=company.id,
                godown_id=godown.id,
                vendor_id=vendors['Gupta Kabadi'].id,
                lines=[
                    LineItem(scrap_type_id=scrap_types['Iron'].id, weight=Decimal('310')),
                    LineItem(scrap_type_id=scrap_types['Copper'].id, weight=Decimal('4.25')),
                ],
                account_id=accounts['Bank'].id,
                payment_amount=Decimal('5000'),
                payment_mode='bank',
                date=today,
            )),
            add_kabadiwala_purchase(PurchaseRequest(
                company_id=company.id,
                godown_id=godown.id,
                vendor_id=vendors['Khan Traders'].id,
                lines=[LineItem(scrap_type_id=scrap_types['Cardboard'].id, weight=Decimal('120'))],
                date=today,
            )),
        ]

        for outcome in outcomes:
            if outcome.failed:
                raise CommandError(f'Sample purchase failed: {outcome.message}')
