# ==========================================
# apps/vendors/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class VendorKind(models.TextChoices):
    FERIWALA = 'feriwala', 'Feriwala'
    KABADIWALA = 'kabadiwala', 'Kabadiwala'


class Vendor(models.Model):
    """Supplier of scrap material (door-to-door collector or scrap dealer)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        'companies.Company',
        on_delete=models.CASCADE,
        related_name='vendors'
    )
    name = models.CharField(max_length=200, db_index=True)
    phone = models.CharField(max_length=20, blank=True)
    kind = models.CharField(max_length=20, choices=VendorKind.choices, default=VendorKind.FERIWALA)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'vendors'
        indexes = [
            models.Index(fields=['company', 'kind'], name='vendors_company_7f3c1e_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name


class ScrapType(models.Model):
    """Material catalog entry; ``material_type`` is the canonical label."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    material_type = models.CharField(max_length=100, unique=True)
    description = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'scrap_types'
        ordering = ['material_type']

    def __str__(self):
        return self.material_type


class VendorRate(models.Model):
    """Standing rate (money per kg) a vendor is paid for one scrap type."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vendor = models.ForeignKey(Vendor, on_delete=models.CASCADE, related_name='rates')
    scrap_type = models.ForeignKey(ScrapType, on_delete=models.PROTECT, related_name='vendor_rates')
    vendor_rate = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'vendor_rates'
        unique_together = [['vendor', 'scrap_type']]
        ordering = ['scrap_type__material_type']

    def __str__(self):
        return f"{self.vendor.name} - {self.scrap_type.material_type} @ {self.vendor_rate}/kg"
