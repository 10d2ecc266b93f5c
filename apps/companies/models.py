# ==========================================
# apps/companies/models.py
# ==========================================

from django.db import models
import uuid


class Company(models.Model):
    """Trading business that owns godowns, vendors and accounts."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    gstin = models.CharField(max_length=15, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'companies'
        ordering = ['name']
        verbose_name_plural = 'companies'

    def __str__(self):
        return self.name


class Godown(models.Model):
    """Storage yard / location of a company. Every book entry is scoped to one."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(Company, on_delete=models.CASCADE, related_name='godowns')
    name = models.CharField(max_length=200)
    address = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'godowns'
        unique_together = [['company', 'name']]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.company.name})"
