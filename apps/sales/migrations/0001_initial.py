# Generated manually for sales app

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
    ]

    operations = [
        migrations.CreateModel(
            name='MaalOutSale',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('firm_name', models.CharField(db_index=True, max_length=200)),
                ('bill_to', models.CharField(blank=True, max_length=200)),
                ('date', models.DateField()),
                ('weight', models.DecimalField(decimal_places=3, max_digits=12, validators=[MinValueValidator(Decimal('0.001'))])),
                ('rate', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('amount', models.DecimalField(decimal_places=5, max_digits=18)),
                ('gst', models.DecimalField(decimal_places=5, default=Decimal('0'), max_digits=18)),
                ('freight', models.DecimalField(decimal_places=5, default=Decimal('0'), max_digits=18)),
                ('vehicle_no', models.CharField(blank=True, max_length=30)),
                ('payment_type', models.CharField(choices=PAYMENT_MODES, default='credit', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sales', to='companies.company')),
                ('godown', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sales', to='companies.godown')),
            ],
            options={
                'db_table': 'maal_out',
                'ordering': ['-date', '-created_at'],
                'indexes': [models.Index(fields=['company', 'godown', 'date'], name='maal_out_scope_date_idx')],
            },
        ),
        migrations.CreateModel(
            name='MaalOutPayment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('firm_name', models.CharField(db_index=True, max_length=200)),
                ('amount', models.DecimalField(decimal_places=5, max_digits=18, validators=[MinValueValidator(Decimal('0.00001'))])),
                ('date', models.DateField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sale_payments', to='companies.company')),
                ('godown', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sale_payments', to='companies.godown')),
            ],
            options={
                'db_table': 'maal_out_payments',
                'ordering': ['-date', '-created_at'],
                'indexes': [models.Index(fields=['company', 'godown', 'date'], name='maal_out_pay_scope_date_idx')],
            },
        ),
    ]
