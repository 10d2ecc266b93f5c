# Generated manually for labour app

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
            name='Labour',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('phone', models.CharField(blank=True, max_length=20)),
                ('daily_wage', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0'))])),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='labour', to='companies.company')),
                ('godown', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='labour', to='companies.godown')),
            ],
            options={
                'db_table': 'labour',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Attendance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField()),
                ('status', models.CharField(choices=[('Present', 'Present'), ('Absent', 'Absent')], max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attendance', to='companies.company')),
                ('godown', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attendance', to='companies.godown')),
                ('labour', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attendance', to='labour.labour')),
            ],
            options={
                'db_table': 'attendance',
                'ordering': ['-date', 'labour__name'],
                'unique_together': {('labour', 'date')},
                'indexes': [models.Index(fields=['company', 'godown', 'date'], name='attendance_scope_date_idx')],
            },
        ),
    ]
