from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.common.money import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS
from apps.ledger.models import PaymentMode


class PurchaseChannel(models.TextChoices):
    FERIWALA = 'feriwala', 'Feriwala'
    KABADIWALA = 'kabadiwala', 'Kabadiwala'


class PaymentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PARTIAL = 'partial', 'Partial'
    PAID = 'paid', 'Paid'


class PurchaseRecord(models.Model):
    """Scrap purchase from a feriwala or kabadiwala."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    channel = models.CharField(max_length=20, choices=PurchaseChannel.choices)

    # Scope
    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='purchases')
    godown = models.ForeignKey('companies.Godown', on_delete=models.CASCADE, related_name='purchases')

    # Vendor (name snapshot kept for the books)
    vendor = models.ForeignKey(
        'vendors.Vendor',
        on_delete=models.PROTECT,
        related_name='purchases'
    )
    vendor_name = models.CharField(max_length=200)

    date = models.DateField()

    # Zero until every line is priced, then the sum of line amounts
    total_amount = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        default=Decimal('0')
    )

    # Deferred (kabadiwala) purchases only
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        null=True,
        blank=True
    )
    payment_mode = models.CharField(
        max_length=20,
        choices=PaymentMode.choices,
        null=True,
        blank=True
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'purchase_records'
        indexes = [
            models.Index(fields=['company', 'godown', 'channel', 'date'], name='purchase_scope_date_idx'),
            models.Index(fields=['vendor', 'date'], name='purchase_vendor_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.vendor_name} - {self.total_amount} ({self.date})"


class PurchaseLine(models.Model):
    """One priced material line of a purchase."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    purchase = models.ForeignKey(
        PurchaseRecord,
        on_delete=models.CASCADE,
        related_name='lines'
    )
    scrap_type = models.ForeignKey(
        'vendors.ScrapType',
        on_delete=models.PROTECT,
        related_name='purchase_lines'
    )
    material = models.CharField(max_length=100)

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
    amount = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES
    )

    class Meta:
        db_table = 'purchase_lines'
        ordering = ['material']

    def __str__(self):
        return f"{self.material}: {self.weight} x {self.rate} = {self.amount}"


class PurchasePayment(models.Model):
    """Money handed to a kabadiwala against a purchase."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    purchase = models.ForeignKey(
        PurchaseRecord,
        on_delete=models.CASCADE,
        related_name='payments'
    )
    amount = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal('0.00001'))]
    )
    mode = models.CharField(max_length=20, choices=PaymentMode.choices, default=PaymentMode.CASH)
    note = models.TextField(blank=True)
    date = models.DateField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'purchase_payments'
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.amount} ({self.mode}) for {self.purchase_id}"
