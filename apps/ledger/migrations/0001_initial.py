# Generated manually for ledger app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


PAYMENT_MODES = [
    ('cash', 'Cash'),
    ('upi', 'UPI'),
    ('bank', 'Bank Transfer'),
    ('cheque', 'Cheque'),
    ('credit', 'Credit'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('companies', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Account',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('balance', models.DecimalField(decimal_places=5, default=Decimal('0'), max_digits=18)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='accounts', to='companies.company')),
                ('godown', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='accounts', to='companies.godown')),
            ],
            options={
                'db_table': 'accounts',
                'ordering': ['name'],
                'unique_together': {('company', 'godown', 'name')},
            },
        ),
        migrations.CreateModel(
            name='AccountTransaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('debit', 'Debit'), ('credit', 'Credit')], max_length=10)),
                ('amount', models.DecimalField(decimal_places=5, max_digits=18, validators=[MinValueValidator(Decimal('0.00001'))])),
                ('category', models.CharField(max_length=100)),
                ('reference', models.CharField(blank=True, max_length=255)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('account', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='ledger.account')),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='account_transactions', to='companies.company')),
                ('godown', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='account_transactions', to='companies.godown')),
            ],
            options={
                'db_table': 'account_transactions',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['account', 'created_at'], name='acct_txn_account_created_idx'),
                    models.Index(fields=['company', 'godown', 'created_at'], name='acct_txn_scope_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Expense',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField()),
                ('category', models.CharField(max_length=100)),
                ('description', models.TextField(blank=True)),
                ('paid_to', models.CharField(blank=True, max_length=200)),
                ('payment_mode', models.CharField(choices=PAYMENT_MODES, default='cash', max_length=20)),
                ('amount', models.DecimalField(decimal_places=5, max_digits=18, validators=[MinValueValidator(Decimal('0.00001'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('account', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='expenses', to='ledger.account')),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='expenses', to='companies.company')),
                ('entered_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='expenses_entered', to=settings.AUTH_USER_MODEL)),
                ('godown', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='expenses', to='companies.godown')),
                ('ledger_entry', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='expense', to='ledger.accounttransaction')),
            ],
            options={
                'db_table': 'expenses',
                'ordering': ['-date', '-created_at'],
                'indexes': [models.Index(fields=['company', 'godown', 'date'], name='expenses_scope_date_idx')],
            },
        ),
    ]
