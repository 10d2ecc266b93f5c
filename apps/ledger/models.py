# ==========================================
# apps/ledger/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.common.money import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS


class EntryType(models.TextChoices):
    DEBIT = 'debit', 'Debit'
    CREDIT = 'credit', 'Credit'


class PaymentMode(models.TextChoices):
    CASH = 'cash', 'Cash'
    UPI = 'upi', 'UPI'
    BANK = 'bank', 'Bank Transfer'
    CHEQUE = 'cheque', 'Cheque'
    CREDIT = 'credit', 'Credit'


class Account(models.Model):
    """Funding account (cash box, bank account) with a running balance."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='accounts')
    godown = models.ForeignKey('companies.Godown', on_delete=models.CASCADE, related_name='accounts')
    name = models.CharField(max_length=200)

    # Only ever moved together with an AccountTransaction
    balance = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        default=Decimal('0')
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'accounts'
        unique_together = [['company', 'godown', 'name']]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.balance})"


class AccountTransaction(models.Model):
    """Append-only ledger entry recording money moved through an account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='account_transactions')
    godown = models.ForeignKey('companies.Godown', on_delete=models.CASCADE, related_name='account_transactions')
    account = models.ForeignKey(Account, on_delete=models.PROTECT, related_name='transactions')

    type = models.CharField(max_length=10, choices=EntryType.choices)
    amount = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal('0.00001'))]
    )
    category = models.CharField(max_length=100)
    reference = models.CharField(max_length=255, blank=True)
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'account_transactions'
        indexes = [
            models.Index(fields=['account', 'created_at'], name='acct_txn_account_created_idx'),
            models.Index(fields=['company', 'godown', 'created_at'], name='acct_txn_scope_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.type} {self.amount} - {self.category}"

    @property
    def signed_amount(self):
        """Effect of this entry on the account balance."""
        return -self.amount if self.type == EntryType.DEBIT else self.amount


class Expense(models.Model):
    """Day-book expense (tea, diesel, wages advance...), optionally paid from an account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='expenses')
    godown = models.ForeignKey('companies.Godown', on_delete=models.CASCADE, related_name='expenses')

    date = models.DateField()
    category = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    paid_to = models.CharField(max_length=200, blank=True)
    payment_mode = models.CharField(max_length=20, choices=PaymentMode.choices, default=PaymentMode.CASH)
    amount = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal('0.00001'))]
    )

    account = models.ForeignKey(
        Account,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )
    ledger_entry = models.OneToOneField(
        AccountTransaction,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expense'
    )
    entered_by = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses_entered'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['company', 'godown', 'date'], name='expenses_scope_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.category}: {self.amount} ({self.date})"
