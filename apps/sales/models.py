# ==========================================
# apps/sales/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.common.money import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS
from apps.ledger.models import PaymentMode


class MaalOutSale(models.Model):
    """Outgoing material ("maal out") billed to a firm."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='sales')
    godown = models.ForeignKey('companies.Godown', on_delete=models.CASCADE, related_name='sales')

    firm_name = models.CharField(max_length=200, db_index=True)
    bill_to = models.CharField(max_length=200, blank=True)
    date = models.DateField()

    weight = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        validators=[MinValueValidator(Decimal('0.001'))]
    )
    rate = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    # weight x rate
    amount = models.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    gst = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        default=Decimal('0')
    )
    freight = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        default=Decimal('0')
    )

    vehicle_no = models.CharField(max_length=30, blank=True)
    payment_type = models.CharField(max_length=20, choices=PaymentMode.choices, default=PaymentMode.CREDIT)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'maal_out'
        indexes = [
            models.Index(fields=['company', 'godown', 'date'], name='maal_out_scope_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.firm_name}: {self.weight} kg @ {self.rate} ({self.date})"

    @property
    def bill_total(self):
        return self.amount + self.gst + self.freight


class MaalOutPayment(models.Model):
    """Money received from a firm against maal out bills."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='sale_payments')
    godown = models.ForeignKey('companies.Godown', on_delete=models.CASCADE, related_name='sale_payments')

    firm_name = models.CharField(max_length=200, db_index=True)
    amount = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal('0.00001'))]
    )
    date = models.DateField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'maal_out_payments'
        indexes = [
            models.Index(fields=['company', 'godown', 'date'], name='maal_out_pay_scope_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.firm_name}: {self.amount} ({self.date})"
