# Generated manually for purchases app

import uuid
from decimal import Decimal
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
        ('vendors', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PurchaseRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('channel', models.CharField(choices=[('feriwala', 'Feriwala'), ('kabadiwala', 'Kabadiwala')], max_length=20)),
                ('vendor_name', models.CharField(max_length=200)),
                ('date', models.DateField()),
                ('total_amount', models.DecimalField(decimal_places=5, default=Decimal('0'), max_digits=18)),
                ('payment_status', models.CharField(blank=True, choices=[('pending', 'Pending'), ('partial', 'Partial'), ('paid', 'Paid')], max_length=20, null=True)),
                ('payment_mode', models.CharField(blank=True, choices=PAYMENT_MODES, max_length=20, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='purchases', to='companies.company')),
                ('godown', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='purchases', to='companies.godown')),
                ('vendor', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='purchases', to='vendors.vendor')),
            ],
            options={
                'db_table': 'purchase_records',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['company', 'godown', 'channel', 'date'], name='purchase_scope_date_idx'),
                    models.Index(fields=['vendor', 'date'], name='purchase_vendor_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PurchaseLine',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('material', models.CharField(max_length=100)),
                ('weight', models.DecimalField(decimal_places=3, max_digits=12, validators=[MinValueValidator(Decimal('0.001'))])),
                ('rate', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('amount', models.DecimalField(decimal_places=5, max_digits=18)),
                ('purchase', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lines', to='purchases.purchaserecord')),
                ('scrap_type', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='purchase_lines', to='vendors.scraptype')),
            ],
            options={
                'db_table': 'purchase_lines',
                'ordering': ['material'],
            },
        ),
        migrations.CreateModel(
            name='PurchasePayment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=5, max_digits=18, validators=[MinValueValidator(Decimal('0.00001'))])),
                ('mode', models.CharField(choices=PAYMENT_MODES, default='cash', max_length=20)),
                ('note', models.TextField(blank=True)),
                ('date', models.DateField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('purchase', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='payments', to='purchases.purchaserecord')),
            ],
            options={
                'db_table': 'purchase_payments',
                'ordering': ['-date', '-created_at'],
            },
        ),
    ]
