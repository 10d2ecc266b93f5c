# Generated manually for vendors app

import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('companies', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ScrapType',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('material_type', models.CharField(max_length=100, unique=True)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'scrap_types',
                'ordering': ['material_type'],
            },
        ),
        migrations.CreateModel(
            name='Vendor',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('phone', models.CharField(blank=True, max_length=20)),
                ('kind', models.CharField(choices=[('feriwala', 'Feriwala'), ('kabadiwala', 'Kabadiwala')], default='feriwala', max_length=20)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='vendors', to='companies.company')),
            ],
            options={
                'db_table': 'vendors',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['company', 'kind'], name='vendors_company_7f3c1e_idx')],
            },
        ),
        migrations.CreateModel(
            name='VendorRate',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('vendor_rate', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('scrap_type', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='vendor_rates', to='vendors.scraptype')),
                ('vendor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='rates', to='vendors.vendor')),
            ],
            options={
                'db_table': 'vendor_rates',
                'ordering': ['scrap_type__material_type'],
                'unique_together': {('vendor', 'scrap_type')},
            },
        ),
    ]
