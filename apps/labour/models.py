# ==========================================
# apps/labour/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class AttendanceStatus(models.TextChoices):
    PRESENT = 'Present', 'Present'
    ABSENT = 'Absent', 'Absent'


class Labour(models.Model):
    """Daily-wage worker at a godown."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='labour')
    godown = models.ForeignKey('companies.Godown', on_delete=models.CASCADE, related_name='labour')

    name = models.CharField(max_length=200)
    phone = models.CharField(max_length=20, blank=True)
    daily_wage = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'labour'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.daily_wage}/day)"


class Attendance(models.Model):
    """One attendance mark per worker per day."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='attendance')
    godown = models.ForeignKey('companies.Godown', on_delete=models.CASCADE, related_name='attendance')
    labour = models.ForeignKey(Labour, on_delete=models.CASCADE, related_name='attendance')

    date = models.DateField()
    status = models.CharField(max_length=10, choices=AttendanceStatus.choices)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'attendance'
        unique_together = [['labour', 'date']]
        indexes = [
            models.Index(fields=['company', 'godown', 'date'], name='attendance_scope_date_idx'),
        ]
        ordering = ['-date', 'labour__name']

    def __str__(self):
        return f"{self.labour.name} {self.date}: {self.status}"
